# tests/conftest.py - v1
"""Shared test fixtures: small base graphs, set collections, communities.

No external dependencies, no I/O.
"""

from __future__ import annotations

import networkx as nx
import pytest

from graphderive.config.settings import get_settings


@pytest.fixture(autouse=True)
def _fresh_settings():
    """Each test sees settings loaded from its own environment."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


# === FIXTURES: Graphs ===


@pytest.fixture
def path_graph() -> nx.Graph:
    """1 - 2 - 3 - 4 - 5, plus isolated node 9."""
    g = nx.path_graph([1, 2, 3, 4, 5])
    g.add_node(9)
    return g


@pytest.fixture
def two_component_graph() -> nx.Graph:
    """A size-5 path component followed by a size-3 triangle."""
    g = nx.Graph()
    g.add_edges_from([("a", "b"), ("b", "c"), ("c", "d"), ("d", "e")])
    g.add_edges_from([("x", "y"), ("y", "z"), ("z", "x")])
    return g


@pytest.fixture
def weighted_graph() -> nx.Graph:
    g = nx.Graph()
    g.add_weighted_edges_from([(0, 1, 2.0), (1, 2, 3.0), (2, 3, 1.5), (3, 0, 4.0)])
    return g


# === FIXTURES: Sets and communities ===


@pytest.fixture
def communities() -> dict[str, set[int]]:
    """C1/C2 overlap on 2; C3 sits two hops past C2; C4 is cut off."""
    return {
        "C1": {1, 2},
        "C2": {2, 3},
        "C3": {5},
        "C4": {9},
    }


@pytest.fixture
def sample_groups() -> list[set[str]]:
    return [{"a", "b"}, {"b", "c"}, {"d"}]
