"""Comment domain service."""

import logfire
from datetime import datetime
from uuid import uuid4

from founderhub.domain.error import (
    BusinessRuleViolationError,
    NotAuthorizedError,
    NotFoundError,
    ValidationError,
)
from founderhub.domain.model.comment import Comment
from founderhub.domain.repository import CommentRepository, ProfileRepository
from founderhub.domain.value import CommentId, CommentScope, UserId

from .base import Service


class CommentService(Service):
    """Domain service for comment operations."""

    def __init__(
        self,
        comment_repository: CommentRepository,
        profile_repository: ProfileRepository,
    ) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
            profile_repository: Profile repository used for author display data
        """
        self.comment_repository = comment_repository
        self.profile_repository = profile_repository

    async def create_comment(
        self,
        scope: CommentScope,
        author_id: UserId,
        body: str,
        parent_id: CommentId | None = None,
    ) -> Comment:
        """Create a comment on a post or pitch, or reply to another comment.

        Args:
            scope: Post or pitch the comment belongs to
            author_id: Acting user ID
            body: Comment text (surrounding whitespace is stripped)
            parent_id: Parent comment ID for replies (None for top-level)

        Returns:
            Created comment

        Raises:
            ValidationError: If the body is blank
            NotFoundError: If the parent comment doesn't exist
            BusinessRuleViolationError: If the parent belongs to another resource
        """
        with logfire.span(
            "comment_service.create_comment",
            scope=str(scope),
            author_id=str(author_id),
            parent_id=str(parent_id) if parent_id else None,
        ):
            text = body.strip()
            if not text:
                logfire.warn("Rejected blank comment", scope=str(scope))
                raise ValidationError("Comment body must not be empty")

            if parent_id:
                parent = await self.comment_repository.find_by_id(parent_id)
                if not parent:
                    logfire.error(
                        "Parent comment not found",
                        parent_id=str(parent_id),
                        scope=str(scope),
                    )
                    raise NotFoundError("Comment", str(parent_id))
                if parent.scope != scope:
                    logfire.error(
                        "Parent comment belongs to another resource",
                        parent_id=str(parent_id),
                        parent_scope=str(parent.scope),
                        target_scope=str(scope),
                    )
                    raise BusinessRuleViolationError(
                        "Parent comment does not belong to this resource"
                    )

            now = datetime.now()
            comment = Comment(
                id=CommentId(uuid4()),
                scope=scope,
                author_id=author_id,
                body=text,
                parent_id=parent_id,
                created_at=now,
                updated_at=now,
            )

            saved = await self.comment_repository.save(comment)
            logfire.info(
                "Comment created",
                comment_id=str(saved.id),
                scope=str(scope),
                is_reply=parent_id is not None,
            )
            return saved

    async def get_comments(self, scope: CommentScope) -> list[Comment]:
        """Get all comments of a post or pitch with author display data.

        Comments are returned flat, in store order. Authors without a
        profile are left without display data.

        Args:
            scope: Post or pitch

        Returns:
            Flat list of comments
        """
        with logfire.span("comment_service.get_comments", scope=str(scope)):
            comments = await self.comment_repository.find_by_scope(scope)
            if not comments:
                logfire.info("No comments for resource", scope=str(scope))
                return []

            profiles = await self.profile_repository.find_by_user_ids(
                {comment.author_id for comment in comments}
            )
            enriched = [
                comment.model_copy(
                    update={"author": profiles[comment.author_id].to_author_display()}
                )
                if comment.author_id in profiles
                else comment
                for comment in comments
            ]

            logfire.info(
                "Comments retrieved",
                scope=str(scope),
                count=len(enriched),
                authors_without_profile=len(
                    {c.author_id for c in comments} - profiles.keys()
                ),
            )
            return enriched

    async def get_comment_by_id(self, comment_id: CommentId) -> Comment | None:
        """Get a comment by ID.

        Args:
            comment_id: Comment ID

        Returns:
            Comment if found, None otherwise
        """
        with logfire.span(
            "comment_service.get_comment_by_id", comment_id=str(comment_id)
        ):
            comment = await self.comment_repository.find_by_id(comment_id)
            if comment:
                logfire.info("Comment found", comment_id=str(comment_id))
            else:
                logfire.warn("Comment not found", comment_id=str(comment_id))
            return comment

    async def count_comments(self, scope: CommentScope) -> int:
        with logfire.span("comment_service.count_comments", scope=str(scope)):
            return await self.comment_repository.count_by_scope(scope)

    async def delete_comment(self, comment_id: CommentId, user_id: UserId) -> Comment:
        """Delete a comment written by the acting user.

        Replies stay in the store and surface as top-level comments.

        Args:
            comment_id: Comment ID
            user_id: Acting user ID

        Returns:
            The deleted comment

        Raises:
            NotFoundError: If the comment doesn't exist
            NotAuthorizedError: If the user is not the author
        """
        with logfire.span(
            "comment_service.delete_comment",
            comment_id=str(comment_id),
            user_id=str(user_id),
        ):
            comment = await self.comment_repository.find_by_id(comment_id)
            if not comment:
                logfire.warn("Comment not found for delete", comment_id=str(comment_id))
                raise NotFoundError("Comment", str(comment_id))

            if comment.author_id != user_id:
                logfire.warn(
                    "Unauthorized comment delete attempt",
                    comment_id=str(comment_id),
                    author_id=str(comment.author_id),
                    user_id=str(user_id),
                )
                raise NotAuthorizedError("comment", str(comment_id), str(user_id))

            await self.comment_repository.delete(comment_id)
            logfire.info(
                "Comment deleted", comment_id=str(comment_id), scope=str(comment.scope)
            )
            return comment
