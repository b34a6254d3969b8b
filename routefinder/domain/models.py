"""Immutable domain models for the route finder.

All models are frozen dataclasses with slots. Routes refer to their
endpoints by location id (the location's index in its store) rather
than by holding the Location objects.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class Location:
    """A uniquely named node in the graph.

    Attributes:
        id: Creation index inside the owning store, immutable
        name: Unique human-readable key
    """

    id: int
    name: str

    def __post_init__(self) -> None:
        """Validate the name."""
        if not isinstance(self.name, str) or not self.name:
            raise ValueError(
                f"Location name must be a non-empty string, got {self.name!r}"
            )


@dataclass(frozen=True, slots=True)
class Route:
    """A directed, non-negative-weighted edge between two locations.

    Attributes:
        source: Id of the departure location
        destination: Id of the arrival location
        distance: Weight of the edge
    """

    source: int
    destination: int
    distance: float


@dataclass(frozen=True, slots=True)
class ShortestPath:
    """Result of a shortest-path query.

    Attributes:
        locations: Ordered locations from origin to destination (inclusive)
        routes: Routes traversed, one fewer than locations
    """

    locations: tuple[Location, ...]
    routes: tuple[Route, ...] = field(default_factory=tuple)

    @property
    def weights(self) -> tuple[float, ...]:
        """Return the distance of each traversed route."""
        return tuple(route.distance for route in self.routes)

    @property
    def total_cost(self) -> float:
        """Return the sum of the traversed weights."""
        return float(sum(self.weights))

    @property
    def names(self) -> tuple[str, ...]:
        return tuple(location.name for location in self.locations)

    @property
    def origin(self) -> Location:
        return self.locations[0]

    @property
    def destination(self) -> Location:
        return self.locations[-1]

    @property
    def is_trivial(self) -> bool:
        """Check if origin and destination are the same location."""
        return len(self.locations) == 1


@dataclass(frozen=True, slots=True)
class FuelProfile:
    """Vehicle parameters used to price a delivery.

    Attributes:
        autonomy: Distance covered per unit of fuel
        fuel_price: Price of one unit of fuel
    """

    autonomy: float
    fuel_price: float

    def __post_init__(self) -> None:
        if not self.autonomy > 0:
            raise ValueError(f"Autonomy must be positive, got {self.autonomy}")
        if not self.fuel_price >= 0:
            raise ValueError(f"Fuel price must be non-negative, got {self.fuel_price}")


@dataclass(frozen=True, slots=True)
class DeliveryEstimate:
    """A shortest path priced with a fuel profile."""

    path: ShortestPath
    profile: FuelProfile

    @property
    def fuel_needed(self) -> float:
        return self.path.total_cost / self.profile.autonomy

    @property
    def cost(self) -> float:
        """Return the fuel cost of driving the path."""
        return self.fuel_needed * self.profile.fuel_price
