"""Domain model entities for FounderHub."""

from founderhub.domain.model.comment import Comment
from founderhub.domain.model.profile import Profile

__all__ = [
    "Comment",
    "Profile",
]
