"""In-memory repository implementations for testing."""

from .comment import InMemoryCommentRepository
from .profile import InMemoryProfileRepository

__all__ = [
    "InMemoryCommentRepository",
    "InMemoryProfileRepository",
]
