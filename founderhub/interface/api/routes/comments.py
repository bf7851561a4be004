"""Comment routes.

The same set of endpoints is mounted once per commentable resource:
``/posts/{id}/comments`` and ``/pitches/{id}/comments``.
"""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Header, HTTPException, status
from pydantic import BaseModel, Field

from founderhub.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentResponse,
    CreateCommentUseCase,
    DeleteCommentRequest,
    DeleteCommentResponse,
    DeleteCommentUseCase,
    GetCommentThreadRequest,
    GetCommentThreadResponse,
    GetCommentThreadUseCase,
)
from founderhub.domain.error import (
    BusinessRuleViolationError,
    NotAuthorizedError,
    NotFoundError,
    ValidationError,
)
from founderhub.domain.value import ResourceType
from founderhub.util.logging import get_logger

logger = get_logger(__name__)


class CreateCommentAPIRequest(BaseModel):
    """API request for creating a comment."""

    body: str = Field(min_length=1, max_length=10000)
    parent_id: str | None = None  # Parent comment ID for replies


def _require_user(user_id: str | None, action: str) -> str:
    """Return the acting user ID forwarded by the gateway."""
    if not user_id:
        logger.info(f"Rejected anonymous request to {action}")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=f"Authentication required to {action}",
        )
    return user_id


def build_router(prefix: str, resource_type: ResourceType) -> APIRouter:
    """Build the comment routes of one resource type.

    Args:
        prefix: URL prefix of the resource collection
        resource_type: Resource type the routes are scoped to

    Returns:
        Router with thread, create and delete endpoints
    """
    router = APIRouter(prefix=prefix, tags=["comments"], route_class=DishkaRoute)

    @router.get("/{resource_id}/comments", response_model=GetCommentThreadResponse)
    async def get_comment_thread(
        resource_id: str,
        get_comment_thread_use_case: FromDishka[GetCommentThreadUseCase],
    ) -> GetCommentThreadResponse:
        """Get the reply threads of a resource.

        Args:
            resource_id: Resource UUID
            get_comment_thread_use_case: Get comment thread use case from DI

        Returns:
            Thread roots with nested replies
        """
        try:
            request = GetCommentThreadRequest(
                resource_type=resource_type, resource_id=resource_id
            )
            return await get_comment_thread_use_case.execute(request)
        except ValueError as e:
            logfire.warn("Invalid comment thread request", error=str(e))
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=str(e),
            )

    @router.post(
        "/{resource_id}/comments",
        response_model=CreateCommentResponse,
        status_code=status.HTTP_201_CREATED,
    )
    async def create_comment(
        resource_id: str,
        request: CreateCommentAPIRequest,
        create_comment_use_case: FromDishka[CreateCommentUseCase],
        x_user_id: str | None = Header(default=None),
    ) -> CreateCommentResponse:
        """Comment on a resource or reply to a comment.

        Requires the acting user ID in the ``X-User-Id`` header.

        Args:
            resource_id: Resource UUID
            request: Comment body and optional parent ID
            create_comment_use_case: Create comment use case from DI
            x_user_id: Acting user ID

        Returns:
            Created comment and refreshed thread
        """
        user_id = _require_user(x_user_id, "comment")

        try:
            use_case_request = CreateCommentRequest(
                resource_type=resource_type,
                resource_id=resource_id,
                author_id=user_id,
                body=request.body,
                parent_id=request.parent_id,
            )
            return await create_comment_use_case.execute(use_case_request)
        except NotFoundError as e:
            logfire.warn("Comment creation failed - parent not found", error=str(e))
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail=str(e),
            )
        except (ValidationError, BusinessRuleViolationError, ValueError) as e:
            logfire.warn("Comment creation validation error", error=str(e))
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=str(e),
            )

    @router.delete(
        "/{resource_id}/comments/{comment_id}", response_model=DeleteCommentResponse
    )
    async def delete_comment(
        resource_id: str,
        comment_id: str,
        delete_comment_use_case: FromDishka[DeleteCommentUseCase],
        x_user_id: str | None = Header(default=None),
    ) -> DeleteCommentResponse:
        """Delete one's own comment.

        Replies to the deleted comment move to the top level of the thread.
        """
        user_id = _require_user(x_user_id, "delete comments")

        try:
            use_case_request = DeleteCommentRequest(
                resource_type=resource_type,
                resource_id=resource_id,
                comment_id=comment_id,
                user_id=user_id,
            )
            return await delete_comment_use_case.execute(use_case_request)
        except NotAuthorizedError as e:
            logfire.warn("Unauthorized comment delete attempt", error=str(e))
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail="Not authorized to delete this comment",
            )
        except NotFoundError as e:
            logfire.warn("Comment delete failed - comment not found", error=str(e))
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail=str(e),
            )
        except ValueError as e:
            logfire.warn("Comment delete validation error", error=str(e))
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=str(e),
            )

    return router


posts_router = build_router("/posts", ResourceType.POST)
pitches_router = build_router("/pitches", ResourceType.VIDEO_PITCH)
