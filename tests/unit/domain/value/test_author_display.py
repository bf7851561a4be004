"""Unit tests for AuthorDisplay and CommentScope value objects."""

from uuid import uuid4

from founderhub.domain.value import AuthorDisplay, CommentScope, ResourceType
from tests.conftest import make_comment, make_scope


class TestAuthorDisplay:
    """Tests for author display fallbacks."""

    def test_uses_full_name(self):
        display = AuthorDisplay(full_name="Ada Lovelace", avatar_url="a.png")

        assert display.display_name == "Ada Lovelace"
        assert display.initial == "A"

    def test_missing_name_falls_back_to_anonymous(self):
        """Authors without a name render as Anonymous with initial U."""
        display = AuthorDisplay()

        assert display.display_name == "Anonymous"
        assert display.initial == "U"

    def test_blank_name_falls_back_to_anonymous(self):
        display = AuthorDisplay(full_name="   ")

        assert display.display_name == "Anonymous"
        assert display.initial == "U"

    def test_comment_without_author_uses_fallback(self):
        comment = make_comment(make_scope())

        assert comment.author is None
        assert comment.author_display.display_name == "Anonymous"


class TestCommentScope:
    """Tests for CommentScope."""

    def test_scopes_compare_by_value(self):
        resource_id = uuid4()

        assert CommentScope(
            resource_type=ResourceType.POST, resource_id=resource_id
        ) == CommentScope(resource_type=ResourceType.POST, resource_id=resource_id)

    def test_same_id_different_resource_type_differs(self):
        """A post and a pitch never share a thread."""
        resource_id = uuid4()

        assert CommentScope(
            resource_type=ResourceType.POST, resource_id=resource_id
        ) != CommentScope(
            resource_type=ResourceType.VIDEO_PITCH, resource_id=resource_id
        )

    def test_str(self):
        scope = make_scope(ResourceType.VIDEO_PITCH)

        assert str(scope) == f"video_pitch:{scope.resource_id}"
