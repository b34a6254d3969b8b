"""Route planner service - Main orchestrator.

Loads the location network through the repository, delegates the
search to the solver and renders the outcome for presentation.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional

from ..domain.errors import GraphError, UnknownLocationError
from ..domain.models import DeliveryEstimate, FuelProfile, ShortestPath
from ..ports.graph import GraphRepositoryPort, RouteSolverPort


@dataclass
class RoutePlannerService:
    """Main service for shortest-route queries.

    Attributes:
        graph_repository: Loads the location network
        route_solver: Computes shortest paths
    """

    graph_repository: GraphRepositoryPort
    route_solver: RouteSolverPort

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def find_route(self, origin: str, destination: str) -> Optional[ShortestPath]:
        """Find the shortest route between two named locations.

        Args:
            origin: Origin location name.
            destination: Destination location name.

        Returns:
            The shortest path, or None if the destination is unreachable.

        Raises:
            GraphError: If the network cannot be loaded.
            UnknownLocationError: If a name is not in the network.
        """
        store = self.graph_repository.load()
        self._logger.debug("Graph loaded", extra={"locations": len(store)})
        return self.route_solver.solve(store, origin, destination)

    def estimate_delivery(
        self, origin: str, destination: str, profile: FuelProfile
    ) -> Optional[DeliveryEstimate]:
        """Price the shortest route with a fuel profile.

        Returns:
            The estimate, or None if the destination is unreachable.
        """
        path = self.find_route(origin, destination)
        if path is None:
            return None

        estimate = DeliveryEstimate(path=path, profile=profile)
        self._logger.info(
            "Delivery estimated",
            extra={
                "origin": origin,
                "destination": destination,
                "total_cost": path.total_cost,
                "fuel_cost": estimate.cost,
            },
        )
        return estimate

    def find_route_safe(
        self, origin: str, destination: str
    ) -> tuple[Optional[ShortestPath], Optional[str]]:
        """Find a route, returning an error message instead of raising.

        Returns:
            Tuple of (path or None, error message or None). An
            unreachable destination yields a message too.
        """
        try:
            path = self.find_route(origin, destination)
        except UnknownLocationError as e:
            return None, f"Error: {e.message}"
        except GraphError as e:
            self._logger.error("Graph unavailable", extra={"error": str(e)})
            return None, f"Error: {e}"

        if path is None:
            return None, f"No path found between {origin} and {destination}"
        return path, None

    def format_result(self, path: ShortestPath) -> str:
        """Format a path as the nodes visited and the distances travelled."""
        lines = ["Nodes:"]
        lines.extend(path.names)
        lines.append("Distances:")
        lines.extend(_format_number(weight) for weight in path.weights)
        lines.append(f"Total distance: {_format_number(path.total_cost)}")
        return "\n".join(lines)

    def format_estimate(self, estimate: DeliveryEstimate) -> str:
        return (
            f"{self.format_result(estimate.path)}\n"
            f"Route: {' '.join(estimate.path.names)}\n"
            f"Cost: {estimate.cost:.2f}"
        )


def _format_number(value: float) -> str:
    return f"{value:g}"
