"""Domain layer - Core models and errors.

This module contains immutable domain models and typed errors
used throughout the application. No external dependencies.
"""

from .errors import (
    DuplicateNameError,
    GraphError,
    InvalidWeightError,
    NoRouteFoundError,
    RouteFinderError,
    UnknownLocationError,
)
from .models import DeliveryEstimate, FuelProfile, Location, Route, ShortestPath

__all__ = [
    # Models
    "Location",
    "Route",
    "ShortestPath",
    "FuelProfile",
    "DeliveryEstimate",
    # Errors
    "RouteFinderError",
    "DuplicateNameError",
    "InvalidWeightError",
    "UnknownLocationError",
    "NoRouteFoundError",
    "GraphError",
]
