"""Unit tests for GetCommentThreadUseCase."""

from uuid import uuid4

import pytest

from founderhub.application.usecase.comment import (
    GetCommentThreadRequest,
    GetCommentThreadUseCase,
)
from founderhub.application.usecase.comment.get_comment_thread import (
    build_thread_response,
)
from founderhub.domain.model import Profile
from founderhub.domain.repository import CommentRepository, ProfileRepository
from founderhub.domain.value import ResourceType, UserId
from tests.conftest import make_comment, make_scope
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no database needed
unit_env = create_env_fixture()


class TestGetCommentThread:
    """Unit tests for get comment thread use case."""

    @pytest.mark.asyncio
    async def test_empty_thread(self, unit_env):
        """Resource without comments returns no roots."""
        # Arrange
        use_case = await unit_env.get(GetCommentThreadUseCase)
        scope = make_scope()

        # Act
        response = await use_case.execute(
            GetCommentThreadRequest(
                resource_type=scope.resource_type,
                resource_id=str(scope.resource_id),
            )
        )

        # Assert
        assert response.roots == []
        assert response.total == 0
        assert response.resource_id == str(scope.resource_id)

    @pytest.mark.asyncio
    async def test_nested_thread_with_expansion(self, unit_env):
        """Replies nest by parent and collapse from depth two."""
        # Arrange
        use_case = await unit_env.get(GetCommentThreadUseCase)
        comment_repo = await unit_env.get(CommentRepository)
        scope = make_scope()

        root = await comment_repo.save(make_comment(scope, body="root"))
        reply = await comment_repo.save(
            make_comment(scope, parent_id=root.id, body="reply", minutes=1)
        )
        nested = await comment_repo.save(
            make_comment(scope, parent_id=reply.id, body="nested", minutes=2)
        )

        # Act
        response = await use_case.execute(
            GetCommentThreadRequest(
                resource_type=scope.resource_type,
                resource_id=str(scope.resource_id),
            )
        )

        # Assert
        assert response.total == 3
        assert len(response.roots) == 1

        root_node = response.roots[0]
        assert root_node.comment_id == str(root.id)
        assert root_node.depth == 0
        assert root_node.expanded is True
        assert root_node.reply_count == 1

        reply_node = root_node.replies[0]
        assert reply_node.parent_id == str(root.id)
        assert reply_node.depth == 1
        assert reply_node.expanded is True

        nested_node = reply_node.replies[0]
        assert nested_node.comment_id == str(nested.id)
        assert nested_node.depth == 2
        assert nested_node.expanded is False
        assert nested_node.replies == []

    @pytest.mark.asyncio
    async def test_orphaned_reply_is_listed_at_top_level(self, unit_env):
        """A reply whose parent is gone is shown as a root."""
        # Arrange
        use_case = await unit_env.get(GetCommentThreadUseCase)
        comment_repo = await unit_env.get(CommentRepository)
        scope = make_scope()
        missing_parent = make_comment(scope)
        orphan = await comment_repo.save(
            make_comment(scope, parent_id=missing_parent.id)
        )

        # Act
        response = await use_case.execute(
            GetCommentThreadRequest(
                resource_type=scope.resource_type,
                resource_id=str(scope.resource_id),
            )
        )

        # Assert
        assert [node.comment_id for node in response.roots] == [str(orphan.id)]
        assert response.roots[0].parent_id == str(missing_parent.id)
        assert response.roots[0].depth == 0

    @pytest.mark.asyncio
    async def test_roots_are_oldest_first(self, unit_env):
        # Arrange
        use_case = await unit_env.get(GetCommentThreadUseCase)
        comment_repo = await unit_env.get(CommentRepository)
        scope = make_scope()
        newer = await comment_repo.save(make_comment(scope, minutes=5))
        older = await comment_repo.save(make_comment(scope, minutes=1))

        # Act
        response = await use_case.execute(
            GetCommentThreadRequest(
                resource_type=scope.resource_type,
                resource_id=str(scope.resource_id),
            )
        )

        # Assert
        assert [node.comment_id for node in response.roots] == [
            str(older.id),
            str(newer.id),
        ]

    @pytest.mark.asyncio
    async def test_author_display_fields(self, unit_env):
        """Nodes carry author name, avatar and initial."""
        # Arrange
        use_case = await unit_env.get(GetCommentThreadUseCase)
        comment_repo = await unit_env.get(CommentRepository)
        profile_repo = await unit_env.get(ProfileRepository)
        scope = make_scope(ResourceType.VIDEO_PITCH)
        known_author = UserId(uuid4())

        await profile_repo.save(
            Profile(user_id=known_author, full_name="Marie Curie", avatar_url="m.png")
        )
        await comment_repo.save(make_comment(scope, author_id=known_author))
        await comment_repo.save(make_comment(scope, minutes=1))

        # Act
        response = await use_case.execute(
            GetCommentThreadRequest(
                resource_type=ResourceType.VIDEO_PITCH,
                resource_id=str(scope.resource_id),
            )
        )

        # Assert
        known, anonymous = response.roots
        assert known.author_name == "Marie Curie"
        assert known.author_avatar_url == "m.png"
        assert known.author_initial == "M"
        assert anonymous.author_name == "Anonymous"
        assert anonymous.author_avatar_url is None
        assert anonymous.author_initial == "U"

    @pytest.mark.asyncio
    async def test_invalid_resource_id_raises_error(self, unit_env):
        use_case = await unit_env.get(GetCommentThreadUseCase)

        with pytest.raises(ValueError):
            await use_case.execute(
                GetCommentThreadRequest(
                    resource_type=ResourceType.POST, resource_id="not-a-uuid"
                )
            )


def _reply_chain(length: int):
    """Comments where each one replies to the previous one."""
    scope = make_scope()
    comments = [make_comment(scope)]
    for i in range(1, length):
        comments.append(make_comment(scope, parent_id=comments[-1].id, minutes=i))
    return scope, comments


class TestBuildThreadResponse:
    """Tests for build_thread_response nesting limits."""

    def test_long_reply_chain_is_serializable(self):
        """A chain far deeper than the nesting limit still renders."""
        # Arrange
        scope, comments = _reply_chain(1500)

        # Act
        response = build_thread_response(
            scope, comments, expanded_depth=2, max_response_depth=8
        )
        payload = response.model_dump_json()

        # Assert
        assert response.total == 1500
        assert len(response.roots) == 1
        assert str(comments[-1].id) in payload

        level = response.roots[0]
        for _ in range(7):
            assert len(level.replies) == 1
            level = level.replies[0]

        # Depth 8 and below are listed flat under the depth-7 node
        assert level.depth == 7
        assert [r.comment_id for r in level.replies] == [
            str(c.id) for c in comments[8:]
        ]
        assert [r.depth for r in level.replies] == list(range(8, 1500))
        assert all(r.replies == [] for r in level.replies)

    def test_flattened_replies_keep_thread_order(self):
        """Flattened replies are listed depth-first with real parents."""
        # Arrange
        scope = make_scope()
        root = make_comment(scope)
        a = make_comment(scope, parent_id=root.id, minutes=1)
        a1 = make_comment(scope, parent_id=a.id, minutes=2)
        a1x = make_comment(scope, parent_id=a1.id, minutes=3)
        a2 = make_comment(scope, parent_id=a.id, minutes=4)

        # Act
        response = build_thread_response(
            scope, [root, a, a1, a1x, a2], expanded_depth=2, max_response_depth=2
        )

        # Assert
        a_node = response.roots[0].replies[0]
        assert a_node.reply_count == 2
        assert [
            (r.comment_id, r.parent_id, r.depth) for r in a_node.replies
        ] == [
            (str(a1.id), str(a.id), 2),
            (str(a1x.id), str(a1.id), 3),
            (str(a2.id), str(a.id), 2),
        ]
        assert a_node.replies[0].reply_count == 1
        assert a_node.replies[0].replies == []

    def test_shallow_thread_is_fully_nested(self):
        scope, comments = _reply_chain(3)

        response = build_thread_response(
            scope, comments, expanded_depth=2, max_response_depth=8
        )

        assert response.roots[0].replies[0].replies[0].comment_id == str(
            comments[2].id
        )
