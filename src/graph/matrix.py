# src/graph/matrix.py - v1
"""Adjacency matrix materialization backed by scipy.sparse."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

import networkx as nx
import numpy as np
import scipy.sparse as sp

from graphderive.config.settings import get_settings
from graphderive.core.models import WEIGHT_KEY
from graphderive.logging.context import operation

logger = logging.getLogger(__name__)


def node_index(graph: nx.Graph) -> dict[Any, int]:
    """Bijection node -> row/column, in node iteration order."""
    return {node: i for i, node in enumerate(graph.nodes)}


@operation("adjacency_matrix")
def adjacency_matrix(
    graph: nx.Graph,
    node_index: Mapping[Any, int],
    symmetric: bool = False,
    dtype: str | None = None,
) -> sp.csr_array:
    """Create an adjacency matrix for the graph.

    Entry ``(index[u], index[v])`` holds the edge weight, or 1 when the edge
    has none. Each edge is written once, in the direction the graph yields
    it, so an undirected graph gives a triangular matrix unless
    ``symmetric`` is set.

    Args:
        graph: Graph to materialize.
        node_index: Node -> integer position, covering every node.
        symmetric: Also write ``(index[v], index[u])``.
        dtype: Matrix dtype; defaults to ``Settings.matrix_dtype``.

    Returns:
        ``|nodes| x |nodes|`` CSR matrix.
    """
    num_nodes = graph.number_of_nodes()
    m = sp.lil_array((num_nodes, num_nodes), dtype=np.dtype(dtype or get_settings().matrix_dtype))

    for u, v, w in graph.edges(data=WEIGHT_KEY, default=1):
        i, j = node_index[u], node_index[v]
        m[i, j] = w
        if symmetric:
            m[j, i] = w

    snapshot = m.tocsr()
    logger.debug(
        "Materialized %dx%d adjacency matrix (%d non-zeros)",
        num_nodes, num_nodes, snapshot.nnz,
    )
    return snapshot
