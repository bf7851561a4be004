"""PostgreSQL repository implementations."""

from .comment import PostgresCommentRepository
from .profile import PostgresProfileRepository

__all__ = [
    "PostgresCommentRepository",
    "PostgresProfileRepository",
]
