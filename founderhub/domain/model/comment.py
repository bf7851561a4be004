"""Comment entity.

Comments are threaded discussions on posts and video pitches. The store
keeps them as a flat list per resource; each row only knows its direct
parent. Nesting is reconstructed on read by the comment tree builder.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from founderhub.domain.model.common import DomainModel
from founderhub.domain.value import AuthorDisplay, CommentId, CommentScope, UserId


class Comment(DomainModel):
    """Comment entity.

    Represents a comment on a post or pitch, or a reply to another comment.

    Threading is managed through:
    - parent_id: Direct parent comment (None for top-level)
    - scope: Resource the whole thread belongs to

    ``author`` is attached by the service after the fetch and is never
    persisted.
    """

    id: CommentId
    scope: CommentScope
    author_id: UserId
    body: str = Field(min_length=1, max_length=10000)
    parent_id: Optional[CommentId] = None
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)
    author: Optional[AuthorDisplay] = None

    @property
    def author_display(self) -> AuthorDisplay:
        """Author display data, with anonymous fallbacks when absent."""
        return self.author or AuthorDisplay()
