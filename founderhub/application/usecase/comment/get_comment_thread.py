"""Get comment thread use case."""

from datetime import datetime
from uuid import UUID

import logfire
from pydantic import BaseModel

from founderhub.application.usecase.base import BaseUseCase
from founderhub.config import ThreadSettings
from founderhub.domain.model import Comment
from founderhub.domain.service import (
    CommentNode,
    CommentService,
    build_forest,
    count_nodes,
    initial_expansion,
)
from founderhub.domain.value import CommentScope, ResourceType


class CommentNodeResponse(BaseModel):
    """Comment thread node for API response.

    Recursive structure mirroring the domain CommentNode, nested down to
    the configured response depth. Replies below that level are listed
    flat, in thread order, under their ancestor at the deepest level;
    their ``depth`` and ``parent_id`` still describe the real thread.
    """

    comment_id: str
    parent_id: str | None
    author_id: str
    author_name: str
    author_avatar_url: str | None
    author_initial: str
    body: str
    created_at: datetime
    depth: int
    expanded: bool  # Whether replies start expanded
    reply_count: int  # Direct replies in the thread
    replies: list["CommentNodeResponse"]

    @classmethod
    def from_domain(
        cls, node: CommentNode[Comment], expanded_depth: int
    ) -> "CommentNodeResponse":
        """Convert a single domain CommentNode to response model.

        Args:
            node: Domain comment node
            expanded_depth: First depth whose replies start collapsed

        Returns:
            API response model with an empty replies list
        """
        comment = node.record
        author = comment.author_display
        return cls(
            comment_id=str(comment.id),
            parent_id=str(comment.parent_id) if comment.parent_id else None,
            author_id=str(comment.author_id),
            author_name=author.display_name,
            author_avatar_url=author.avatar_url,
            author_initial=author.initial,
            body=comment.body,
            created_at=comment.created_at,
            depth=node.depth,
            expanded=initial_expansion(node, expanded_depth),
            reply_count=len(node.children),
            replies=[],
        )


class GetCommentThreadRequest(BaseModel):
    """Get comment thread request."""

    resource_type: ResourceType
    resource_id: str  # UUID string


class GetCommentThreadResponse(BaseModel):
    """Get comment thread response."""

    resource_type: ResourceType
    resource_id: str
    roots: list[CommentNodeResponse]
    total: int


def parse_scope(resource_type: ResourceType, resource_id: str) -> CommentScope:
    """Build a comment scope from request values.

    Raises:
        ValueError: If resource_id is not a valid UUID
    """
    return CommentScope(resource_type=resource_type, resource_id=UUID(resource_id))


def to_response_nodes(
    forest: list[CommentNode[Comment]], expanded_depth: int, max_response_depth: int
) -> list[CommentNodeResponse]:
    """Convert a domain forest to response nodes without recursion.

    Nodes are visited in pre-order. Children of a node shallower than
    ``max_response_depth`` nest under it; children of deeper nodes are
    appended to the list the node itself went into.

    Args:
        forest: Root nodes from build_forest
        expanded_depth: First depth whose replies start collapsed
        max_response_depth: Deepest nesting level of the response

    Returns:
        Root response nodes
    """
    roots: list[CommentNodeResponse] = []
    stack = [(root, roots) for root in reversed(forest)]
    while stack:
        node, siblings = stack.pop()
        response = CommentNodeResponse.from_domain(node, expanded_depth)
        siblings.append(response)

        target = response.replies if node.depth < max_response_depth else siblings
        stack.extend((child, target) for child in reversed(node.children))

    return roots


def build_thread_response(
    scope: CommentScope,
    comments: list[Comment],
    expanded_depth: int,
    max_response_depth: int,
) -> GetCommentThreadResponse:
    """Arrange flat comments into a thread response."""
    with logfire.span("build_comment_thread", scope=str(scope), count=len(comments)):
        forest = build_forest(comments)
        total = count_nodes(forest)
        roots = to_response_nodes(forest, expanded_depth, max_response_depth)
        logfire.info(
            "Built comment thread",
            scope=str(scope),
            root_count=len(forest),
            total=total,
        )

    return GetCommentThreadResponse(
        resource_type=scope.resource_type,
        resource_id=str(scope.resource_id),
        roots=roots,
        total=total,
    )


class GetCommentThreadUseCase(BaseUseCase):
    """Use case for getting the reply threads of a post or pitch.

    Comments are fetched flat and rebuilt into a forest on every call;
    no thread structure is stored.
    """

    def __init__(
        self, comment_service: CommentService, thread_settings: ThreadSettings
    ) -> None:
        """Initialize get comment thread use case.

        Args:
            comment_service: Comment domain service
            thread_settings: Thread rendering settings
        """
        self.comment_service = comment_service
        self.thread_settings = thread_settings

    async def execute(
        self, request: GetCommentThreadRequest
    ) -> GetCommentThreadResponse:
        """Execute get comment thread flow.

        Steps:
        1. Fetch flat comments with author display data
        2. Build the reply forest
        3. Convert nodes to response models with default expansion

        Args:
            request: Resource type and ID

        Returns:
            Thread roots and the total number of comments

        Raises:
            ValueError: If the resource ID is not a valid UUID
        """
        scope = parse_scope(request.resource_type, request.resource_id)
        comments = await self.comment_service.get_comments(scope)
        return build_thread_response(
            scope,
            comments,
            self.thread_settings.expanded_depth,
            self.thread_settings.max_response_depth,
        )
