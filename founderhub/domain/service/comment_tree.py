"""Comment tree construction.

Comment stores hand back the comments of a post or pitch as a flat list in
which each row only knows its direct parent. This module rebuilds the reply
threads from that list and decides which threads start expanded.

The builder is generic: it works on any record exposing ``id`` and
``parent_id``, so post comments and pitch comments share one traversal and
carry their own extra fields (author, timestamps) through untouched.
"""

from collections.abc import Hashable, Iterable, Iterator
from dataclasses import dataclass, field
from typing import Generic, Optional, Protocol, TypeVar

# Threads are expanded down to (but excluding) this depth by default
DEFAULT_EXPANDED_DEPTH = 2


class Threadable(Protocol):
    """Minimal shape of a record that can be arranged into a thread."""

    @property
    def id(self) -> Hashable: ...

    @property
    def parent_id(self) -> Optional[Hashable]: ...


R = TypeVar("R", bound=Threadable)


@dataclass
class CommentNode(Generic[R]):
    """Node in a comment thread.

    Wraps one input record together with its direct replies and its
    distance from the root of its thread.
    """

    record: R
    depth: int = 0
    children: list["CommentNode[R]"] = field(default_factory=list)

    @property
    def id(self) -> Hashable:
        return self.record.id

    @property
    def parent_id(self) -> Optional[Hashable]:
        return self.record.parent_id


def build_forest(records: Iterable[R]) -> list[CommentNode[R]]:
    """Build the reply forest of a flat collection of comments.

    Algorithm:
    1. Indexing pass: create one node per record and map record id -> node.
       A later record with a duplicate id replaces the earlier mapping entry
       (the earlier record still gets its own node).
    2. Linking pass, in input order: append each node to the children of the
       node its ``parent_id`` resolves to. A null parent, or a parent that is
       not part of the input (an orphaned reply, e.g. the parent was
       deleted), makes the node a root.
    3. Assign depths by walking down from the roots.

    Records whose parent chain loops back on itself never reach a root in
    step 3. The first of them in input order is detached from its parent and
    promoted to a root, repeatedly, until every node is reachable.

    The input is not modified and every record appears exactly once in the
    result.

    Args:
        records: Flat comments of a single post or pitch, in any order

    Returns:
        Root nodes in input order, followed by any nodes promoted out of
        parent cycles. Children keep the relative input order of their records.
    """
    nodes = [CommentNode(record=record) for record in records]

    by_id: dict[Hashable, CommentNode[R]] = {}
    for node in nodes:
        by_id[node.id] = node

    roots: list[CommentNode[R]] = []
    parent_of: dict[int, CommentNode[R]] = {}
    for node in nodes:
        parent_id = node.parent_id
        parent = by_id.get(parent_id) if parent_id is not None else None
        if parent is None:
            roots.append(node)
        else:
            parent.children.append(node)
            parent_of[id(node)] = parent

    reached: set[int] = set()
    _assign_depths(roots, reached)

    if len(reached) < len(nodes):
        for node in nodes:
            if id(node) in reached:
                continue
            _detach(parent_of[id(node)], node)
            roots.append(node)
            _assign_depths([node], reached)

    return roots


def initial_expansion(
    node: CommentNode, expanded_depth: int = DEFAULT_EXPANDED_DEPTH
) -> bool:
    """Whether a node's replies are shown expanded by default.

    Shallow conversations stay fully visible while deeply nested threads
    start collapsed.

    Args:
        node: Node of a built forest
        expanded_depth: First depth that starts collapsed

    Returns:
        True if ``node.depth < expanded_depth``
    """
    return node.depth < expanded_depth


def walk(forest: Iterable[CommentNode[R]]) -> Iterator[CommentNode[R]]:
    """Iterate over every node of a forest, depth-first pre-order."""
    stack = list(reversed(list(forest)))
    while stack:
        node = stack.pop()
        yield node
        stack.extend(reversed(node.children))


def count_nodes(forest: Iterable[CommentNode]) -> int:
    """Total number of nodes in a forest, descendants included."""
    return sum(1 for _ in walk(forest))


def _assign_depths(roots: list[CommentNode[R]], reached: set[int]) -> None:
    stack = [(root, 0) for root in roots]
    while stack:
        node, depth = stack.pop()
        node.depth = depth
        reached.add(id(node))
        stack.extend((child, depth + 1) for child in node.children)


def _detach(parent: CommentNode[R], node: CommentNode[R]) -> None:
    # Identity, not equality: duplicate records produce equal nodes
    for index, child in enumerate(parent.children):
        if child is node:
            del parent.children[index]
            return
