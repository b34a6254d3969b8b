"""In-memory store of locations and directed weighted routes.

Locations live in a growable list and their id is their index in it.
Routes refer to locations by id, and each location owns an adjacency
list of its outgoing routes kept in insertion order. A dict maps each
name to its Location.
"""

from __future__ import annotations

import math
from typing import Dict, Iterator, List, Optional, Tuple

from ..domain.errors import DuplicateNameError, InvalidWeightError, UnknownLocationError
from ..domain.models import Location, Route


class GraphStore:
    """Owning collection of locations, routes and the name index.

    The store only grows: there is no removal. A failed insertion
    leaves it unchanged.
    """

    def __init__(self) -> None:
        self._locations: List[Location] = []
        self._adjacency: List[List[Route]] = []
        self._index: Dict[str, Location] = {}
        self._route_count = 0

    def __len__(self) -> int:
        return len(self._locations)

    def __contains__(self, name: object) -> bool:
        return name in self._index

    def __iter__(self) -> Iterator[Location]:
        return iter(self._locations)

    def __repr__(self) -> str:
        return f"GraphStore(locations={len(self)}, routes={self._route_count})"

    @property
    def route_count(self) -> int:
        return self._route_count

    def add_location(self, name: str) -> Location:
        """Create and index a new location.

        Args:
            name: Unique name of the location.

        Returns:
            The created Location.

        Raises:
            DuplicateNameError: If a location already uses this name.
            ValueError: If the name is not a non-empty string.
        """
        if name in self._index:
            raise DuplicateNameError(f"Duplicate location name: {name}", name=name)

        location = Location(id=len(self._locations), name=name)
        self._locations.append(location)
        self._adjacency.append([])
        self._index[name] = location
        return location

    def add_route(self, source: Location, destination: Location, distance: float) -> Route:
        """Create a directed route from ``source`` to ``destination``.

        Args:
            source: Departure location, created by this store.
            destination: Arrival location, created by this store.
            distance: Non-negative weight of the route.

        Returns:
            The created Route.

        Raises:
            InvalidWeightError: If the distance is negative or not finite.
            UnknownLocationError: If an endpoint belongs to another store.
        """
        distance = float(distance)
        if distance < 0 or not math.isfinite(distance):
            raise InvalidWeightError(
                f"Route distance must be finite and non-negative, got {distance}",
                distance=distance,
            )
        self._check_owned(source)
        self._check_owned(destination)

        route = Route(source=source.id, destination=destination.id, distance=distance)
        self._adjacency[source.id].append(route)
        self._route_count += 1
        return route

    def find_by_name(self, name: str) -> Optional[Location]:
        """Look up a location by name, or None if absent."""
        return self._index.get(name)

    def get_location(self, name: str) -> Location:
        """Look up a location by name, raising if absent.

        Raises:
            UnknownLocationError: If no location has this name.
        """
        location = self.find_by_name(name)
        if location is None:
            raise UnknownLocationError(f"Unknown location: {name}", name=name)
        return location

    def location(self, location_id: int) -> Location:
        """Return the location with the given id."""
        return self._locations[location_id]

    def neighbors(self, location: Location) -> List[Tuple[Route, Location]]:
        """Return the outgoing routes of ``location`` with their destinations.

        Routes come back in the order they were added.
        """
        self._check_owned(location)
        return [
            (route, self._locations[route.destination])
            for route in self._adjacency[location.id]
        ]

    def routes(self) -> Iterator[Route]:
        """Iterate over every route, grouped by source in creation order."""
        for adjacency in self._adjacency:
            yield from adjacency

    def _check_owned(self, location: Location) -> None:
        owned = (
            isinstance(location, Location)
            and 0 <= location.id < len(self._locations)
            and self._locations[location.id] is location
        )
        if not owned:
            name = getattr(location, "name", str(location))
            raise UnknownLocationError(
                f"Location does not belong to this store: {name}",
                name=name,
            )
