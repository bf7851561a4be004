"""Delete comment use case."""

from uuid import UUID

from pydantic import BaseModel

from founderhub.application.usecase.base import BaseUseCase
from founderhub.application.usecase.comment.get_comment_thread import parse_scope
from founderhub.domain.error import NotFoundError
from founderhub.domain.service import CommentService
from founderhub.domain.value import CommentId, ResourceType, UserId


class DeleteCommentRequest(BaseModel):
    """Delete comment request."""

    resource_type: ResourceType
    resource_id: str  # UUID string (for validation)
    comment_id: str  # UUID string
    user_id: str  # Acting user ID (must be author)


class DeleteCommentResponse(BaseModel):
    """Delete comment response."""

    comment_id: str
    remaining: int  # Comments left on the resource


class DeleteCommentUseCase(BaseUseCase):
    """Use case for deleting one's own comment.

    Replies are not deleted with their parent; they show up as top-level
    comments afterwards.
    """

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(self, request: DeleteCommentRequest) -> DeleteCommentResponse:
        """Execute delete comment flow.

        Raises:
            ValueError: If an ID is not a valid UUID
            NotFoundError: If the comment doesn't exist on this resource
            NotAuthorizedError: If the user is not the author
        """
        scope = parse_scope(request.resource_type, request.resource_id)
        comment_id = CommentId(UUID(request.comment_id))

        comment = await self.comment_service.get_comment_by_id(comment_id)
        if not comment or comment.scope != scope:
            raise NotFoundError("Comment", request.comment_id)

        await self.comment_service.delete_comment(
            comment_id, UserId(UUID(request.user_id))
        )

        return DeleteCommentResponse(
            comment_id=request.comment_id,
            remaining=await self.comment_service.count_comments(scope),
        )
