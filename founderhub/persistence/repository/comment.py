"""PostgreSQL implementation of Comment repository."""

from typing import List, Optional

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from founderhub.domain.model import Comment
from founderhub.domain.repository import CommentRepository
from founderhub.domain.value import CommentId, CommentScope
from founderhub.persistence.mappers import comment_to_dict, row_to_comment
from founderhub.persistence.tables import comments_table


class PostgresCommentRepository(CommentRepository):
    """PostgreSQL implementation of CommentRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    def _scope_clause(self, scope: CommentScope):
        return (comments_table.c.resource_type == scope.resource_type.value) & (
            comments_table.c.resource_id == scope.resource_id
        )

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        stmt = select(comments_table).where(comments_table.c.id == comment_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_comment(row._asdict()) if row else None

    async def find_by_scope(self, scope: CommentScope) -> List[Comment]:
        """Find all comments of a resource, oldest first."""
        stmt = (
            select(comments_table)
            .where(self._scope_clause(scope))
            .order_by(comments_table.c.created_at, comments_table.c.id)
        )
        result = await self.session.execute(stmt)
        return [row_to_comment(row._asdict()) for row in result.fetchall()]

    async def save(self, comment: Comment) -> Comment:
        """Save a comment (create or update)."""
        comment_dict = comment_to_dict(comment)
        existing = await self.find_by_id(comment.id)

        if existing:
            stmt = (
                comments_table.update()
                .where(comments_table.c.id == comment.id)
                .values(**comment_dict)
            )
        else:
            stmt = comments_table.insert().values(**comment_dict)

        await self.session.execute(stmt)
        await self.session.flush()

        return await self.find_by_id(comment.id) or comment

    async def delete(self, comment_id: CommentId) -> None:
        """Delete a comment (hard delete)."""
        stmt = comments_table.delete().where(comments_table.c.id == comment_id)
        await self.session.execute(stmt)
        await self.session.flush()

    async def count_by_scope(self, scope: CommentScope) -> int:
        """Count comments of a resource."""
        stmt = (
            select(func.count())
            .select_from(comments_table)
            .where(self._scope_clause(scope))
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0
