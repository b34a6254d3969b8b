"""Services layer - Application orchestration.

Available services:
- RoutePlannerService: Shortest routes and delivery cost estimates
"""

from .route_planner import RoutePlannerService

__all__ = ["RoutePlannerService"]
