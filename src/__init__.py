# src/__init__.py - v1
"""graphderive: derived weighted graphs, adjacency matrices, subgraphs and tree paths."""

from graphderive.version import __version__

__all__ = ["__version__"]
