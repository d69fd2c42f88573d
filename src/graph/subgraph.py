# src/graph/subgraph.py - v1
"""Edges internal to a node subset.

``subgraph_edges`` works on a graph and a hashable subset.
``subgraph_edges_by_id`` is the fast path for large, reused edge lists whose
nodes map to small non-negative integer ids: membership is tested against a
dense boolean bitmap instead of hashing every endpoint.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Collection, Iterable
from functools import reduce
from typing import Any

import networkx as nx
import numpy as np

from graphderive.config.settings import get_settings
from graphderive.core.models import WEIGHT_KEY, WeightedEdge
from graphderive.logging.context import operation

logger = logging.getLogger(__name__)


@operation("subgraph_edges")
def subgraph_edges(graph: nx.Graph, nodes: Collection[Any]) -> list[WeightedEdge]:
    """Weighted edges with both endpoints in ``nodes`` (weight defaults to 1)."""
    subset = nodes if isinstance(nodes, (set, frozenset)) else set(nodes)
    return [
        (u, v, w)
        for u, v, w in graph.edges(data=WEIGHT_KEY, default=1)
        if u in subset and v in subset
    ]


def _max_id(ids: Iterable[int]) -> int:
    """Associative max-reduction; 0 for no ids."""
    return reduce(max, ids, 0)


def _id_bitmap(ids: Collection[int], max_id: int) -> np.ndarray:
    bitmap = np.zeros(max_id + 1, dtype=bool)
    if ids:
        bitmap[np.fromiter(ids, dtype=np.int64, count=len(ids))] = True
    return bitmap


@operation("subgraph_edges_by_id")
def subgraph_edges_by_id(
    edges: Iterable[tuple],
    get_id: Callable[[Any], int],
    nodes: Iterable[Any],
    bitmap_max_id: int | None = None,
) -> list[tuple]:
    """Filter ``edges`` to those with both endpoints in ``nodes``.

    Args:
        edges: Edge tuples whose first two items are the endpoints. Returned
            unchanged.
        get_id: Injective ``node -> int``.
        nodes: Subset to keep.
        bitmap_max_id: Largest id served by the bitmap; defaults to
            ``Settings.bitmap_max_id``. Negative ids or a larger max id
            switch to a hashed set of ids.

    Returns:
        Edges whose two endpoint ids are in the subset. Endpoint ids outside
        the bitmap range are excluded.
    """
    if bitmap_max_id is None:
        bitmap_max_id = get_settings().bitmap_max_id

    n_ids = {get_id(n) for n in nodes}
    max_id = _max_id(n_ids)

    if max_id > bitmap_max_id or any(i < 0 for i in n_ids):
        logger.debug(
            "Node ids not compact (max_id=%d, limit=%d), using hashed id set",
            max_id, bitmap_max_id,
        )
        return [e for e in edges if get_id(e[0]) in n_ids and get_id(e[1]) in n_ids]

    bitmap = _id_bitmap(n_ids, max_id)

    def member(node: Any) -> bool:
        i = get_id(node)
        return 0 <= i <= max_id and bool(bitmap[i])

    return [e for e in edges if member(e[0]) and member(e[1])]
