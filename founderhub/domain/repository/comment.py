"""Comment repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from founderhub.domain.model.comment import Comment
from founderhub.domain.value import CommentId, CommentScope


class CommentRepository(ABC):
    """Repository for Comment entity.

    Defines the contract of the comment store. Rows are returned flat;
    thread structure is rebuilt by the caller.
    """

    @abstractmethod
    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID.

        Args:
            comment_id: The comment's unique identifier

        Returns:
            The comment if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_scope(self, scope: CommentScope) -> List[Comment]:
        """Find every comment of a post or pitch, at any depth.

        Comments are ordered by creation time (oldest first). No thread
        ordering is applied.

        Args:
            scope: The resource owning the thread

        Returns:
            Flat list of comments
        """
        pass

    @abstractmethod
    async def save(self, comment: Comment) -> Comment:
        """Save a comment (create or update).

        Args:
            comment: The comment to save

        Returns:
            The saved comment
        """
        pass

    @abstractmethod
    async def delete(self, comment_id: CommentId) -> None:
        """Delete a comment (hard delete).

        Replies to the deleted comment are kept; they become orphaned
        replies and are shown at the top level of the thread.

        Args:
            comment_id: The comment ID to delete
        """
        pass

    @abstractmethod
    async def count_by_scope(self, scope: CommentScope) -> int:
        """Count comments of a post or pitch.

        Args:
            scope: The resource owning the thread

        Returns:
            Number of comments
        """
        pass
