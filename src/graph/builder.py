# src/graph/builder.py - v1
"""Weighted graph construction from an edge list."""

from __future__ import annotations

import logging
from collections.abc import Iterable

import networkx as nx

from graphderive.core.models import WeightedEdge
from graphderive.logging.context import operation

logger = logging.getLogger(__name__)


@operation("edges_to_graph")
def edges_to_graph(edges: Iterable[WeightedEdge]) -> nx.Graph:
    """Create a weighted graph from ``(u, v, weight)`` triples.

    Endpoints are added as nodes. A repeated pair keeps the last weight.
    """
    graph = nx.Graph()
    graph.add_weighted_edges_from(edges)
    logger.debug(
        "Built graph from edge list: %d nodes, %d edges",
        graph.number_of_nodes(),
        graph.number_of_edges(),
    )
    return graph
