# tests/unit/graph/test_unit_traversal.py - v1
"""Tests for graph/traversal.py - bounded multi-source BFS."""

from __future__ import annotations

import networkx as nx
import pytest

from graphderive.graph.traversal import bounded_bfs, selected_path_distances


def _always(node, depth):
    return True


def _depth(node, depth):
    return depth


class TestBoundedBfs:
    def test_depth_zero_selects_only_source(self, path_graph):
        result = bounded_bfs(
            path_graph, 1,
            selector=lambda n, d: d == 0,
            result=lambda n, d: (n, d),
            max_depth=0,
        )
        assert result == {1: (1, 0)}

    def test_max_depth_inclusive(self, path_graph):
        result = bounded_bfs(path_graph, 1, _always, _depth, max_depth=2)
        assert result == {1: 0, 2: 1, 3: 2}

    def test_negative_depth_empty(self, path_graph):
        assert bounded_bfs(path_graph, 1, _always, _depth, max_depth=-1) == {}

    def test_shortest_depth_in_cycle(self):
        g = nx.cycle_graph(6)
        result = bounded_bfs(g, 0, _always, _depth, max_depth=10)
        assert result[3] == 3
        assert result[5] == 1

    def test_selector_filters_but_traverses(self, path_graph):
        result = bounded_bfs(
            path_graph, 1,
            selector=lambda n, d: n == 4,
            result=_depth,
            max_depth=5,
        )
        assert result == {4: 3}

    def test_unreachable_nodes_absent(self, path_graph):
        result = bounded_bfs(path_graph, 1, _always, _depth, max_depth=100)
        assert 9 not in result


class TestSelectedPathDistances:
    def test_single_source_depth_zero(self, path_graph):
        result = selected_path_distances(
            path_graph, {3},
            selector=lambda n, d: d == 0,
            result=lambda n, d: "hit",
            max_depth=0,
        )
        assert result == {3: {3: "hit"}}

    def test_sources_are_independent(self, path_graph):
        result = selected_path_distances(path_graph, [1, 5], _always, _depth, max_depth=1)
        assert result == {1: {1: 0, 2: 1}, 5: {5: 0, 4: 1}}

    def test_negative_depth_keeps_sources(self, path_graph):
        result = selected_path_distances(path_graph, [1, 2], _always, _depth, max_depth=-3)
        assert result == {1: {}, 2: {}}

    def test_no_sources(self, path_graph):
        assert selected_path_distances(path_graph, [], _always, _depth, max_depth=3) == {}

    def test_missing_source_raises(self, path_graph):
        with pytest.raises(nx.NetworkXError):
            selected_path_distances(path_graph, ["nope"], _always, _depth, max_depth=1)

    def test_missing_source_raises_at_negative_depth(self, path_graph):
        with pytest.raises(nx.NetworkXError):
            selected_path_distances(path_graph, ["nope"], _always, _depth, max_depth=-1)

    def test_bounded_bfs_missing_source_raises(self, path_graph):
        with pytest.raises(nx.NetworkXError, match="not in the graph"):
            bounded_bfs(path_graph, "nope", _always, _depth, max_depth=0)
