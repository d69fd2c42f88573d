# src/graph/traversal.py - v1
"""Bounded multi-source breadth-first search with selector/result callbacks.

Each source is traversed independently (no shared visited state). A node is
visited once, at its shortest hop distance from the source. When
``selector(node, depth)`` holds, the node is recorded as
``node -> result(node, depth)``. The traversal never goes past ``max_depth``
(inclusive).
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from typing import Any, TypeVar

import networkx as nx

from graphderive.logging.context import operation

logger = logging.getLogger(__name__)

R = TypeVar("R")

Selector = Callable[[Any, int], bool]
ResultFn = Callable[[Any, int], R]


def bounded_bfs(
    graph: nx.Graph,
    source: Any,
    selector: Selector,
    result: ResultFn[R],
    max_depth: int,
) -> dict[Any, R]:
    """Single-source bounded BFS.

    Returns:
        Mapping of selected node -> result(node, depth).

    Raises:
        networkx.NetworkXError: If ``source`` is not in the graph, whatever
            the depth.
    """
    if source not in graph:
        raise nx.NetworkXError(f"The node {source} is not in the graph.")

    selected: dict[Any, R] = {}
    if max_depth < 0:
        return selected

    for depth, layer in enumerate(nx.bfs_layers(graph, source)):
        if depth > max_depth:
            break
        for node in layer:
            if selector(node, depth):
                selected[node] = result(node, depth)
    return selected


@operation("selected_path_distances")
def selected_path_distances(
    graph: nx.Graph,
    sources: Iterable[Any],
    selector: Selector,
    result: ResultFn[R],
    max_depth: int,
) -> dict[Any, dict[Any, R]]:
    """Run a bounded BFS from every source.

    Args:
        graph: Graph to traverse.
        sources: Source nodes; each must be in the graph.
        selector: ``(node, depth) -> bool``; nodes for which it is false are
            still traversed, only not recorded.
        result: ``(node, depth) -> R``, value recorded for selected nodes.
        max_depth: Maximum hop count, inclusive. Negative means nothing is
            visited and every source maps to an empty dict.

    Returns:
        ``{source: {node: result(node, depth)}}``.

    Raises:
        networkx.NetworkXError: If a source is not in the graph.
    """
    paths: dict[Any, dict[Any, R]] = {}
    for source in sources:
        paths[source] = bounded_bfs(graph, source, selector, result, max_depth)

    logger.debug(
        "Bounded BFS from %d sources (max_depth=%d): %d selected nodes",
        len(paths),
        max_depth,
        sum(len(v) for v in paths.values()),
    )
    return paths
