"""Graph-related utilities for representing the location network.

This subpackage contains the in-memory graph store, a loader that
fills it from CSV data, and the shortest-path engine that runs on top
of it.
"""

from .dijkstra import shortest_path
from .load_graph import load_graph
from .store import GraphStore

__all__ = ["GraphStore", "load_graph", "shortest_path"]
