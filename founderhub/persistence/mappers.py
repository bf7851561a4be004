"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict
from uuid import UUID

from founderhub.domain.model import Comment, Profile
from founderhub.domain.value import (
    CommentId,
    CommentScope,
    ResourceType,
    UserId,
)


def _as_uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model.

    Args:
        row: Database row as dict

    Returns:
        Comment domain model (without author display data)
    """
    return Comment(
        id=CommentId(_as_uuid(row["id"])),
        scope=CommentScope(
            resource_type=ResourceType(row["resource_type"]),
            resource_id=_as_uuid(row["resource_id"]),
        ),
        author_id=UserId(_as_uuid(row["author_id"])),
        body=row["body"],
        parent_id=CommentId(_as_uuid(row["parent_id"])) if row["parent_id"] else None,
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def comment_to_dict(comment: Comment) -> Dict[str, Any]:
    """Convert Comment domain model to database dict.

    Args:
        comment: Comment domain model

    Returns:
        Dict suitable for database insertion/update
    """
    return {
        "id": comment.id,
        "resource_type": comment.scope.resource_type.value,
        "resource_id": comment.scope.resource_id,
        "parent_id": comment.parent_id,
        "author_id": comment.author_id,
        "body": comment.body,
        "created_at": comment.created_at,
        "updated_at": comment.updated_at,
    }


def row_to_profile(row: Dict[str, Any]) -> Profile:
    """Convert database row to Profile domain model."""
    return Profile(
        user_id=UserId(_as_uuid(row["user_id"])),
        full_name=row.get("full_name"),
        avatar_url=row.get("avatar_url"),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def profile_to_dict(profile: Profile) -> Dict[str, Any]:
    return profile.model_dump()
