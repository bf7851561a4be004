"""Profile entity.

Profiles hold the public presentation data of founders, investors and
mentors. Comments only reference authors by id and borrow the display
fields from here.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from founderhub.domain.model.common import DomainModel
from founderhub.domain.value import AuthorDisplay, UserId


class Profile(DomainModel):
    """Public profile of a user."""

    user_id: UserId
    full_name: Optional[str] = None
    avatar_url: Optional[str] = None
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

    def to_author_display(self) -> AuthorDisplay:
        return AuthorDisplay(full_name=self.full_name, avatar_url=self.avatar_url)
