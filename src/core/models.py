# src/core/models.py - v1
"""Shared value types for derived graphs: group nodes/edges and type aliases.

Graphs themselves are plain ``networkx.Graph`` instances; edge weights live
under the ``weight`` edge attribute.
"""

from __future__ import annotations

from collections.abc import Hashable
from typing import Any, Union

from pydantic import BaseModel, ConfigDict, Field

# A node identifier: any hashable value, consistent type per graph.
Node = Hashable

# (u, v, weight)
WeightedEdge = tuple[Any, Any, Union[int, float]]

# node -> ordered children, from a single traversal rooted at a source.
SpanTree = dict[Any, list[Any]]

WEIGHT_KEY = "weight"


class GroupNode(BaseModel):
    """A set of members treated as one node of the group graph."""

    model_config = ConfigDict(frozen=True)

    name: str
    size: int = Field(ge=0)
    members: frozenset[Any] = Field(default_factory=frozenset)


class GroupEdge(BaseModel):
    """Shared-member link between two groups, weighted by the number of shared members."""

    model_config = ConfigDict(frozen=True)

    src: GroupNode
    dst: GroupNode
    weight: int = Field(gt=0)

    def as_tuple(self) -> tuple[str, str, int]:
        """Edge keyed by group names, ready for ``add_weighted_edges_from``."""
        return (self.src.name, self.dst.name, self.weight)
