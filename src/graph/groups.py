# src/graph/groups.py - v1
"""Group graph: one node per set, edges weighted by shared members.

Typical use is collaboration strength, e.g. teams linked by the number of
people they share.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from typing import Any

import networkx as nx

from graphderive.core.models import GroupEdge, GroupNode
from graphderive.logging.context import operation

logger = logging.getLogger(__name__)


def group_nodes(groups: Iterable[Iterable[Any]]) -> list[GroupNode]:
    """One GroupNode per group, named after its position."""
    nodes: list[GroupNode] = []
    for idx, group in enumerate(groups):
        members = frozenset(group)
        nodes.append(GroupNode(name=str(idx), size=len(members), members=members))
    return nodes


def group_edges(nodes: Sequence[GroupNode]) -> list[GroupEdge]:
    """Edges between every ordered pair of distinct groups sharing members.

    Both orderings of a pair are returned; consumers with undirected storage
    collapse them.
    """
    edges: list[GroupEdge] = []
    for src in nodes:
        for dst in nodes:
            if src.name == dst.name:
                continue
            weight = len(src.members & dst.members)
            if weight:
                # Number of shared members
                edges.append(GroupEdge(src=src, dst=dst, weight=weight))
    return edges


@operation("group_graph")
def group_graph(groups: Iterable[Iterable[Any]]) -> nx.Graph:
    """Build the weighted group graph.

    Nodes are group names (``"0"``, ``"1"``, ...) carrying ``size`` and
    ``members`` attributes. Edge ``weight`` is the shared member count.
    """
    nodes = group_nodes(groups)

    graph = nx.Graph()
    graph.add_nodes_from(
        (node.name, {"size": node.size, "members": node.members}) for node in nodes
    )
    graph.add_weighted_edges_from(edge.as_tuple() for edge in group_edges(nodes))

    logger.info(
        "Built group graph: %d groups, %d edges",
        graph.number_of_nodes(),
        graph.number_of_edges(),
    )
    return graph
