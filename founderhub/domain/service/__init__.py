"""Domain services."""

from .base import Service
from .comment_service import CommentService
from .comment_tree import (
    DEFAULT_EXPANDED_DEPTH,
    CommentNode,
    build_forest,
    count_nodes,
    initial_expansion,
    walk,
)

__all__ = [
    "DEFAULT_EXPANDED_DEPTH",
    "CommentNode",
    "CommentService",
    "Service",
    "build_forest",
    "count_nodes",
    "initial_expansion",
    "walk",
]
