"""Domain value objects for FounderHub."""

from founderhub.domain.value.identifiers import (
    CommentId,
    PostId,
    UserId,
    VideoPitchId,
)
from founderhub.domain.value.types import (
    ANONYMOUS_INITIAL,
    ANONYMOUS_NAME,
    AuthorDisplay,
    CommentScope,
    ResourceType,
)

__all__ = [
    # Identifiers
    "UserId",
    "CommentId",
    "PostId",
    "VideoPitchId",
    # Types
    "ANONYMOUS_INITIAL",
    "ANONYMOUS_NAME",
    "AuthorDisplay",
    "CommentScope",
    "ResourceType",
]
