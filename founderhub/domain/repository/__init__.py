"""Repository interfaces for FounderHub domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from founderhub.domain.repository.comment import CommentRepository
from founderhub.domain.repository.profile import ProfileRepository

__all__ = [
    "CommentRepository",
    "ProfileRepository",
]
