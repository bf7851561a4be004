"""In-memory comment repository for testing."""

from typing import Optional

from founderhub.domain.model.comment import Comment
from founderhub.domain.repository.comment import CommentRepository
from founderhub.domain.value import CommentId, CommentScope


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing."""

    def __init__(self) -> None:
        self._comments: dict[CommentId, Comment] = {}

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        return self._comments.get(comment_id)

    async def find_by_scope(self, scope: CommentScope) -> list[Comment]:
        """Find all comments of a resource, oldest first."""
        comments = [c for c in self._comments.values() if c.scope == scope]
        comments.sort(key=lambda c: (c.created_at, c.id))
        return comments

    async def save(self, comment: Comment) -> Comment:
        """Save or update a comment."""
        # Display data is attached on read, never stored
        stored = comment.model_copy(update={"author": None})
        self._comments[comment.id] = stored
        return stored

    async def delete(self, comment_id: CommentId) -> None:
        """Delete a comment."""
        self._comments.pop(comment_id, None)

    async def count_by_scope(self, scope: CommentScope) -> int:
        """Count comments of a resource."""
        return sum(1 for c in self._comments.values() if c.scope == scope)
