# tests/unit/graph/test_unit_paths.py - v1
"""Tests for graph/paths.py - span trees and root-to-node paths."""

from __future__ import annotations

import networkx as nx
import pytest

from graphderive.graph.paths import SpanTreeError, bfs_span_tree, span_tree_to_paths


class TestSpanTreeToPaths:
    def test_small_tree(self):
        paths = span_tree_to_paths({"A": ["B", "C"], "B": ["D"]}, "A")
        assert len(paths) == 4
        assert sorted(p[-1] for p in paths) == ["A", "B", "C", "D"]
        assert ["A", "B", "D"] in paths

    def test_breadth_first_order(self):
        paths = span_tree_to_paths({"A": ["B", "C"], "B": ["D"]}, "A")
        assert paths == [["A"], ["A", "B"], ["A", "C"], ["A", "B", "D"]]

    def test_leaf_source(self):
        assert span_tree_to_paths({"A": ["B"]}, "B") == [["B"]]

    def test_unrelated_entries_ignored(self):
        paths = span_tree_to_paths({"A": ["B"], "X": ["Y"]}, "A")
        assert paths == [["A"], ["A", "B"]]

    def test_paths_are_independent_lists(self):
        paths = span_tree_to_paths({0: [1, 2]}, 0)
        paths[1].append(99)
        assert paths[2] == [0, 2]

    def test_node_with_two_parents_raises(self):
        with pytest.raises(SpanTreeError, match="more than one path"):
            span_tree_to_paths({"A": ["B", "C"], "B": ["D"], "C": ["D"]}, "A")

    def test_cycle_raises(self):
        with pytest.raises(SpanTreeError):
            span_tree_to_paths({"A": ["B"], "B": ["A"]}, "A")


class TestBfsSpanTree:
    def test_path_graph(self):
        assert bfs_span_tree(nx.path_graph(4), 0) == {0: [1], 1: [2], 2: [3]}

    def test_depth_limit(self):
        assert bfs_span_tree(nx.path_graph(4), 0, max_depth=1) == {0: [1]}

    def test_each_node_has_one_parent(self):
        tree = bfs_span_tree(nx.complete_graph(5), 0)
        children = [c for cs in tree.values() for c in cs]
        assert sorted(children) == [1, 2, 3, 4]

    def test_paths_are_shortest(self):
        g = nx.petersen_graph()
        paths = span_tree_to_paths(bfs_span_tree(g, 0), 0)
        assert len(paths) == g.number_of_nodes()
        lengths = nx.single_source_shortest_path_length(g, 0)
        for path in paths:
            assert len(path) - 1 == lengths[path[-1]]
            assert all(g.has_edge(u, v) for u, v in zip(path, path[1:]))
