"""Domain value objects for FounderHub.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and presentation fallbacks.
"""

from enum import Enum
from uuid import UUID

from founderhub.domain.value.common import ValueObject

ANONYMOUS_NAME = "Anonymous"
ANONYMOUS_INITIAL = "U"


class ResourceType(str, Enum):
    """Type of resource a comment thread is attached to."""

    POST = "post"
    VIDEO_PITCH = "video_pitch"


class CommentScope(ValueObject):
    """The resource that owns a comment thread.

    Every comment belongs to exactly one scope; replies must share the
    scope of their parent.
    """

    resource_type: ResourceType
    resource_id: UUID

    def __str__(self) -> str:
        return f"{self.resource_type.value}:{self.resource_id}"


class AuthorDisplay(ValueObject):
    """Denormalized author presentation data attached to a comment."""

    full_name: str | None = None
    avatar_url: str | None = None

    @property
    def display_name(self) -> str:
        """Name shown next to the comment, "Anonymous" when unknown."""
        if self.full_name and self.full_name.strip():
            return self.full_name.strip()
        return ANONYMOUS_NAME

    @property
    def initial(self) -> str:
        """Avatar fallback letter."""
        if self.full_name and self.full_name.strip():
            return self.full_name.strip()[0]
        return ANONYMOUS_INITIAL
