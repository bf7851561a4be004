"""Strongly typed identifiers for FounderHub domain entities.

Using NewType for strong typing prevents mixing up different entity IDs
and makes the code more self-documenting.
"""

from typing import NewType
from uuid import UUID

UserId = NewType("UserId", UUID)
CommentId = NewType("CommentId", UUID)

# Resources that can carry comment threads
PostId = NewType("PostId", UUID)
VideoPitchId = NewType("VideoPitchId", UUID)
