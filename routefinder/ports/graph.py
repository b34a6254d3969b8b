"""Graph ports - Abstractions for graph loading and routing.

These protocols define the contracts for graph operations: loading the
location network and computing shortest paths on it.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional, Protocol

if TYPE_CHECKING:
    from ..domain.models import ShortestPath
    from ..graph.store import GraphStore


class GraphRepositoryPort(Protocol):
    """Port for loading graph data.

    Implementation: adapters/graph/csv_repository.py
    """

    def load(self) -> GraphStore:
        """Load the location network.

        Returns:
            A populated GraphStore.
        """
        ...


class RouteSolverPort(Protocol):
    """Port for route computation.

    Implementation: adapters/graph/dijkstra_solver.py
    """

    def solve(
        self,
        store: GraphStore,
        origin: str,
        destination: str,
    ) -> Optional[ShortestPath]:
        """Find the shortest path between two named locations.

        Args:
            store: The location network.
            origin: Origin location name.
            destination: Destination location name.

        Returns:
            The shortest path, or None if the destination is unreachable.
        """
        ...
