# src/graph/paths.py - v1
"""Root-to-node paths from span trees.

A span tree maps each node to its ordered children, as recorded by one
traversal from a source. ``bfs_span_tree`` builds one from a graph;
``span_tree_to_paths`` expands it into one path per reachable node.
"""

from __future__ import annotations

import logging
from collections import deque
from typing import Any

import networkx as nx

from graphderive.core.models import SpanTree
from graphderive.logging.context import operation

logger = logging.getLogger(__name__)


class SpanTreeError(ValueError):
    """Raised when a span tree reaches a node through more than one parent."""


@operation("bfs_span_tree")
def bfs_span_tree(graph: nx.Graph, source: Any, max_depth: int | None = None) -> SpanTree:
    """Breadth-first span tree rooted at ``source``.

    Args:
        graph: Graph to traverse.
        source: Root node.
        max_depth: Optional hop limit, inclusive.

    Returns:
        ``{node: [children]}`` for every node with at least one child.
    """
    return {
        parent: list(children)
        for parent, children in nx.bfs_successors(graph, source, depth_limit=max_depth)
    }


@operation("span_tree_to_paths")
def span_tree_to_paths(span_tree: SpanTree, source: Any) -> list[list[Any]]:
    """Expand a span tree into root-to-node paths.

    The first path is ``[source]``; every other reachable node ends exactly
    one path. Paths are produced breadth-first.

    Raises:
        SpanTreeError: If a node is reached twice (not a proper tree).
    """
    paths: list[list[Any]] = [[source]]
    reached = {source}
    to_expand: deque[list[Any]] = deque()

    def extend(path: list[Any]) -> None:
        for child in span_tree.get(path[-1], ()):
            if child in reached:
                raise SpanTreeError(f"Node {child!r} is reached by more than one path")
            reached.add(child)
            to_expand.append(path + [child])

    extend(paths[0])
    while to_expand:
        path = to_expand.popleft()
        paths.append(path)
        extend(path)

    logger.debug("Expanded span tree from %r into %d paths", source, len(paths))
    return paths
