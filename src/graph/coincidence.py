# src/graph/coincidence.py - v1
"""Set coincidence graph: nodes linked when they share a set.

Edge weight is the number of sets the two nodes have in common.
"""

from __future__ import annotations

import logging
from collections import Counter
from collections.abc import Iterable
from typing import Any

import networkx as nx

from graphderive.logging.context import operation

logger = logging.getLogger(__name__)


def _reverse_index(sets: Iterable[Iterable[Any]]) -> dict[Any, list[frozenset[Any]]]:
    """node -> every set containing it."""
    rindex: dict[Any, list[frozenset[Any]]] = {}
    for s in sets:
        members = frozenset(s)
        for node in members:
            rindex.setdefault(node, []).append(members)
    return rindex


def coincident_edges(sets: Iterable[Iterable[Any]]) -> dict[Any, dict[Any, int]]:
    """Build coincidence adjacency from a collection of sets.

    Args:
        sets: Collections of node identifiers. Duplicates inside one
            collection count once.

    Returns:
        ``{u: {v: shared_set_count}}`` for every node seen, u != v. Nodes that
        never share a set map to an empty dict. The mapping is symmetric.
    """
    edges: dict[Any, dict[Any, int]] = {}
    for u, containing in _reverse_index(sets).items():
        counts: Counter[Any] = Counter()
        for members in containing:
            counts.update(v for v in members if v != u)
        edges[u] = dict(counts)
    return edges


@operation("coincident_graph")
def coincident_graph(sets: Iterable[Iterable[Any]]) -> nx.Graph:
    """Weighted graph of set co-membership; see ``coincident_edges``."""
    adjacency = coincident_edges(sets)

    graph = nx.Graph()
    graph.add_nodes_from(adjacency)
    graph.add_weighted_edges_from(
        (u, v, w)
        for u, neighbors in adjacency.items()
        for v, w in neighbors.items()
    )

    logger.info(
        "Built coincidence graph: %d nodes, %d edges",
        graph.number_of_nodes(),
        graph.number_of_edges(),
    )
    return graph
