"""Create comment use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from founderhub.application.usecase.base import BaseUseCase
from founderhub.application.usecase.comment.get_comment_thread import (
    GetCommentThreadResponse,
    build_thread_response,
    parse_scope,
)
from founderhub.config import ThreadSettings
from founderhub.domain.service import CommentService
from founderhub.domain.value import CommentId, ResourceType, UserId


class CreateCommentRequest(BaseModel):
    """Create comment request."""

    resource_type: ResourceType
    resource_id: str  # UUID string
    author_id: str  # Acting user ID
    body: str
    parent_id: str | None = None  # Parent comment ID for replies


class CreatedComment(BaseModel):
    """The comment that was just stored."""

    comment_id: str
    parent_id: str | None
    author_id: str
    body: str
    created_at: datetime


class CreateCommentResponse(BaseModel):
    """Create comment response.

    Carries the refreshed thread so clients don't need a second round trip.
    """

    comment: CreatedComment
    thread: GetCommentThreadResponse


class CreateCommentUseCase(BaseUseCase):
    """Use case for commenting on a post or pitch, or replying to a comment."""

    def __init__(
        self, comment_service: CommentService, thread_settings: ThreadSettings
    ) -> None:
        """Initialize create comment use case.

        Args:
            comment_service: Comment domain service
            thread_settings: Thread rendering settings
        """
        self.comment_service = comment_service
        self.thread_settings = thread_settings

    async def execute(self, request: CreateCommentRequest) -> CreateCommentResponse:
        """Execute create comment flow.

        Steps:
        1. Create comment via comment service (validates parent if replying)
        2. Re-fetch every comment of the resource
        3. Rebuild the thread from scratch

        Args:
            request: Create comment request

        Returns:
            Created comment and refreshed thread

        Raises:
            ValueError: If an ID is not a valid UUID
            ValidationError: If the body is blank
            NotFoundError: If the parent comment doesn't exist
            BusinessRuleViolationError: If the parent belongs to another resource
        """
        scope = parse_scope(request.resource_type, request.resource_id)
        parent_id = CommentId(UUID(request.parent_id)) if request.parent_id else None

        comment = await self.comment_service.create_comment(
            scope=scope,
            author_id=UserId(UUID(request.author_id)),
            body=request.body,
            parent_id=parent_id,
        )

        comments = await self.comment_service.get_comments(scope)

        return CreateCommentResponse(
            comment=CreatedComment(
                comment_id=str(comment.id),
                parent_id=str(comment.parent_id) if comment.parent_id else None,
                author_id=str(comment.author_id),
                body=comment.body,
                created_at=comment.created_at,
            ),
            thread=build_thread_response(
                scope,
                comments,
                self.thread_settings.expanded_depth,
                self.thread_settings.max_response_depth,
            ),
        )
