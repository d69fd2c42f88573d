# src/graph/community_distance.py - v1
"""Community distance graph: communities as nodes, network distance as weight.

Distances are found by injecting one meta-node per community into a copy of
the base graph, linked to each of its members, then running a bounded BFS
from every meta-node. A raw path between two meta-nodes always spends one hop
at each end on the synthetic links, so the BFS gets ``max_depth + 2`` hops of
budget and reported distances are ``depth - 2``:

    (C1) - (A) - (C2)              depth 2, distance 0 (overlap)
    (C1) - (A) - (B) - (C3)        depth 3, distance 1
    (C1) - (A) - (C2) - (B) - (C3) depth 4, never reported

The last chain is shadowed by the shorter path that skips (C2), so distances
through intermediate meta-nodes can be undercounted. This approximation is
kept as is.
"""

from __future__ import annotations

import logging
from collections.abc import Hashable, Iterable, Mapping
from typing import Any

import networkx as nx

from graphderive.config.settings import get_settings
from graphderive.graph.traversal import selected_path_distances
from graphderive.logging.context import operation

logger = logging.getLogger(__name__)

# Hops spent on the two synthetic member links at each end of a path.
META_HOPS = 2


class CommunityCollisionError(ValueError):
    """Raised when a community label is also a graph node or a community member."""


@operation("membership_graph")
def membership_graph(
    graph: nx.Graph,
    communities: Mapping[Hashable, Iterable[Any]],
    max_depth: int | None = None,
) -> nx.Graph:
    """Build the weighted community distance graph.

    Args:
        graph: Undirected base graph. Not modified.
        communities: Community label -> member nodes. Labels must not be
            nodes of ``graph`` nor members of any community.
        max_depth: Largest community distance sought, inclusive. Defaults to
            ``Settings.community_max_depth``.

    Returns:
        Weighted graph whose nodes are the community labels, with an edge
        ``weight`` equal to the adjusted distance for every pair found.
        Overlapping communities have distance 0.

    Raises:
        CommunityCollisionError: If a label is a base graph node or a member
            of any community.
    """
    if max_depth is None:
        max_depth = get_settings().community_max_depth

    members = {label: set(nodes) for label, nodes in communities.items()}
    labels = set(members)
    all_members = set().union(*members.values())
    collisions = [label for label in labels if label in graph or label in all_members]
    if collisions:
        raise CommunityCollisionError(
            "Community labels collide with graph nodes or community members: "
            f"{sorted(map(str, collisions))}"
        )

    augmented = nx.Graph(graph)
    augmented.add_weighted_edges_from(
        (label, member, 1)
        for label in labels
        for member in members[label]
    )
    # Communities without members still need a node to start from.
    augmented.add_nodes_from(labels)

    path_results = selected_path_distances(
        augmented,
        labels,
        selector=lambda node, depth: depth > 0 and node in labels,
        result=lambda node, depth: depth - META_HOPS,
        max_depth=max_depth + META_HOPS,
    )

    result = nx.Graph()
    result.add_nodes_from(labels)
    result.add_weighted_edges_from(
        (u, v, d)
        for u, reached in path_results.items()
        for v, d in reached.items()
    )

    logger.info(
        "Built community distance graph: %d communities, %d edges (max_depth=%d)",
        result.number_of_nodes(),
        result.number_of_edges(),
        max_depth,
    )
    return result
