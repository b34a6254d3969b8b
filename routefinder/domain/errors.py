"""Typed domain errors for the route finder.

All errors inherit from RouteFinderError and can optionally wrap a
root cause exception for debugging. None of them is fatal: each one
aborts only the operation that raised it.

A missing path is not an error. The engine reports it as ``None``;
NoRouteFoundError exists for callers that choose to treat it as one.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class RouteFinderError(Exception):
    """Base error for the route finder domain.

    Attributes:
        message: Human-readable error description
        cause: Optional underlying exception that caused this error
    """

    message: str
    cause: Optional[Exception] = field(default=None, repr=False)

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def __post_init__(self) -> None:
        super().__init__(self.message)


@dataclass
class DuplicateNameError(RouteFinderError):
    """A location with this name already exists in the store.

    Attributes:
        name: The name that was reused
    """

    name: str = ""


@dataclass
class InvalidWeightError(RouteFinderError):
    """A route was created with a negative or non-finite distance.

    Attributes:
        distance: The rejected distance
    """

    distance: float = 0.0


@dataclass
class UnknownLocationError(RouteFinderError):
    """A location name could not be resolved, or a location does not
    belong to the store it was used with.

    Attributes:
        name: The unresolved location name
    """

    name: str = ""


@dataclass
class NoRouteFoundError(RouteFinderError):
    """No directed path exists between the requested locations.

    Attributes:
        origin: Origin location name
        destination: Destination location name
    """

    origin: str = ""
    destination: str = ""


@dataclass
class GraphError(RouteFinderError):
    """Graph loading or data integrity error.

    Attributes:
        file_path: Path to the graph data file if relevant
    """

    file_path: Optional[str] = None
