"""Unit tests for CreateCommentUseCase."""

from uuid import uuid4

import pytest

from founderhub.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentUseCase,
)
from founderhub.domain.error import (
    BusinessRuleViolationError,
    NotFoundError,
    ValidationError,
)
from founderhub.domain.repository import CommentRepository
from founderhub.domain.value import ResourceType
from tests.conftest import make_comment, make_scope
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no database needed
unit_env = create_env_fixture()


class TestCreateComment:
    """Unit tests for create comment use case."""

    @pytest.mark.asyncio
    async def test_create_returns_refreshed_thread(self, unit_env):
        """New comment is returned together with the rebuilt thread."""
        # Arrange
        use_case = await unit_env.get(CreateCommentUseCase)
        scope = make_scope()
        author_id = str(uuid4())

        # Act
        response = await use_case.execute(
            CreateCommentRequest(
                resource_type=scope.resource_type,
                resource_id=str(scope.resource_id),
                author_id=author_id,
                body="Where can I try it?",
            )
        )

        # Assert
        assert response.comment.author_id == author_id
        assert response.comment.parent_id is None
        assert response.thread.total == 1
        assert response.thread.roots[0].comment_id == response.comment.comment_id

    @pytest.mark.asyncio
    async def test_reply_nests_under_parent(self, unit_env):
        # Arrange
        use_case = await unit_env.get(CreateCommentUseCase)
        comment_repo = await unit_env.get(CommentRepository)
        scope = make_scope()
        parent = await comment_repo.save(make_comment(scope))

        # Act
        response = await use_case.execute(
            CreateCommentRequest(
                resource_type=scope.resource_type,
                resource_id=str(scope.resource_id),
                author_id=str(uuid4()),
                body="Thanks!",
                parent_id=str(parent.id),
            )
        )

        # Assert
        assert response.comment.parent_id == str(parent.id)
        assert response.thread.total == 2
        assert len(response.thread.roots) == 1
        replies = response.thread.roots[0].replies
        assert [r.comment_id for r in replies] == [response.comment.comment_id]
        assert replies[0].depth == 1

    @pytest.mark.asyncio
    async def test_blank_body_raises_error(self, unit_env):
        use_case = await unit_env.get(CreateCommentUseCase)
        scope = make_scope()

        with pytest.raises(ValidationError):
            await use_case.execute(
                CreateCommentRequest(
                    resource_type=scope.resource_type,
                    resource_id=str(scope.resource_id),
                    author_id=str(uuid4()),
                    body="\n\t ",
                )
            )

    @pytest.mark.asyncio
    async def test_missing_parent_raises_error(self, unit_env):
        use_case = await unit_env.get(CreateCommentUseCase)
        scope = make_scope()

        with pytest.raises(NotFoundError):
            await use_case.execute(
                CreateCommentRequest(
                    resource_type=scope.resource_type,
                    resource_id=str(scope.resource_id),
                    author_id=str(uuid4()),
                    body="Reply",
                    parent_id=str(uuid4()),
                )
            )

    @pytest.mark.asyncio
    async def test_reply_to_comment_on_other_resource_raises_error(self, unit_env):
        """Replying across resources is rejected."""
        # Arrange
        use_case = await unit_env.get(CreateCommentUseCase)
        comment_repo = await unit_env.get(CommentRepository)
        parent = await comment_repo.save(make_comment(make_scope()))
        other_scope = make_scope(ResourceType.VIDEO_PITCH)

        # Act & Assert
        with pytest.raises(BusinessRuleViolationError):
            await use_case.execute(
                CreateCommentRequest(
                    resource_type=other_scope.resource_type,
                    resource_id=str(other_scope.resource_id),
                    author_id=str(uuid4()),
                    body="Reply",
                    parent_id=str(parent.id),
                )
            )

    @pytest.mark.asyncio
    async def test_invalid_author_id_raises_error(self, unit_env):
        use_case = await unit_env.get(CreateCommentUseCase)
        scope = make_scope()

        with pytest.raises(ValueError):
            await use_case.execute(
                CreateCommentRequest(
                    resource_type=scope.resource_type,
                    resource_id=str(scope.resource_id),
                    author_id="someone",
                    body="Hello",
                )
            )
