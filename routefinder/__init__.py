"""Top-level package for the route finder project.

Models named locations joined by directed weighted routes and computes
the lowest-total-weight path between two of them.
"""

from .domain import (
    DuplicateNameError,
    InvalidWeightError,
    Location,
    Route,
    ShortestPath,
    UnknownLocationError,
)
from .graph import GraphStore, load_graph, shortest_path

__all__ = [
    "GraphStore",
    "Location",
    "Route",
    "ShortestPath",
    "shortest_path",
    "load_graph",
    "DuplicateNameError",
    "InvalidWeightError",
    "UnknownLocationError",
]
