"""Dijkstra Route Solver adapter.

This adapter wraps the shortest-path engine and adds logging, plus a
raising variant for callers that treat a missing path as a failure.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional

from ...domain.errors import NoRouteFoundError
from ...domain.models import ShortestPath
from ...graph.dijkstra import shortest_path
from ...graph.store import GraphStore


@dataclass
class DijkstraRouteSolver:
    """Route solver using Dijkstra's shortest path algorithm.

    Implements RouteSolverPort.
    """

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

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
            The shortest path, or None if no path exists.

        Raises:
            UnknownLocationError: If origin or destination is not in the store.
        """
        self._logger.debug(
            "Solving route",
            extra={"origin": origin, "destination": destination},
        )

        path = shortest_path(store, origin, destination)

        if path is None:
            self._logger.info(
                "No route found",
                extra={"origin": origin, "destination": destination},
            )
            return None

        self._logger.info(
            "Route found",
            extra={
                "origin": origin,
                "destination": destination,
                "stops": len(path.locations),
                "total_cost": path.total_cost,
            },
        )
        return path

    def solve_or_raise(
        self,
        store: GraphStore,
        origin: str,
        destination: str,
    ) -> ShortestPath:
        """Like solve(), but raises when no path exists.

        Raises:
            UnknownLocationError: If origin or destination is not in the store.
            NoRouteFoundError: If the destination is unreachable.
        """
        path = self.solve(store, origin, destination)
        if path is None:
            raise NoRouteFoundError(
                f"No path from {origin} to {destination}",
                origin=origin,
                destination=destination,
            )
        return path
