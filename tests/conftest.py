"""Test configuration and fixtures."""

from dataclasses import dataclass
from datetime import datetime, timedelta
from uuid import uuid4

from founderhub.domain.model import Comment
from founderhub.domain.value import (
    CommentId,
    CommentScope,
    ResourceType,
    UserId,
)

BASE_TIME = datetime(2026, 3, 1, 12, 0, 0)


@dataclass(frozen=True)
class Record:
    """Bare threadable record for tree builder tests."""

    id: str
    parent_id: str | None = None
    body: str = ""


def make_scope(resource_type: ResourceType = ResourceType.POST) -> CommentScope:
    """Helper to create a scope for a fresh resource."""
    return CommentScope(resource_type=resource_type, resource_id=uuid4())


def make_comment(
    scope: CommentScope,
    parent_id: CommentId | None = None,
    author_id: UserId | None = None,
    body: str = "Great pitch!",
    minutes: int = 0,
) -> Comment:
    """Helper to create a comment.

    Args:
        scope: Resource the comment belongs to
        parent_id: Parent comment for replies
        author_id: Author (random if omitted)
        body: Comment text
        minutes: Offset from BASE_TIME, controls store ordering

    Returns:
        Comment domain model
    """
    created_at = BASE_TIME + timedelta(minutes=minutes)
    return Comment(
        id=CommentId(uuid4()),
        scope=scope,
        author_id=author_id or UserId(uuid4()),
        body=body,
        parent_id=parent_id,
        created_at=created_at,
        updated_at=created_at,
    )
