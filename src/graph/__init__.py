# src/graph/__init__.py - v1
"""Graph derivation and traversal."""

from graphderive.graph.builder import edges_to_graph
from graphderive.graph.coincidence import coincident_edges, coincident_graph
from graphderive.graph.community_distance import CommunityCollisionError, membership_graph
from graphderive.graph.components import add_attr_fn_to_all, largest_connected_component
from graphderive.graph.groups import group_edges, group_graph, group_nodes
from graphderive.graph.matrix import adjacency_matrix, node_index
from graphderive.graph.paths import SpanTreeError, bfs_span_tree, span_tree_to_paths
from graphderive.graph.subgraph import subgraph_edges, subgraph_edges_by_id
from graphderive.graph.traversal import bounded_bfs, selected_path_distances

__all__ = [
    "CommunityCollisionError",
    "SpanTreeError",
    "add_attr_fn_to_all",
    "adjacency_matrix",
    "bfs_span_tree",
    "bounded_bfs",
    "coincident_edges",
    "coincident_graph",
    "edges_to_graph",
    "group_edges",
    "group_graph",
    "group_nodes",
    "largest_connected_component",
    "membership_graph",
    "node_index",
    "selected_path_distances",
    "span_tree_to_paths",
    "subgraph_edges",
    "subgraph_edges_by_id",
]
