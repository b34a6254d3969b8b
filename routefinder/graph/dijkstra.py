"""Shortest-path computation using Dijkstra's algorithm.

Weights are non-negative, so the first time a location is popped
from the heap its distance is final (the location is settled).
"""

from __future__ import annotations

import heapq
from typing import Dict, List, Optional, Set, Tuple

from ..domain.models import Location, Route, ShortestPath
from .store import GraphStore


def shortest_path(
    store: GraphStore, origin_name: str, destination_name: str
) -> Optional[ShortestPath]:
    """Compute the lowest-total-weight path between two named locations.

    Parameters
    ----------
    store:
        Graph to search. It must not be mutated during the call.
    origin_name:
        Name of the departure location.
    destination_name:
        Name of the arrival location.

    Returns
    -------
    ShortestPath or None
        The path from origin to destination (inclusive), or ``None`` if
        the destination cannot be reached. When both names resolve to
        the same location, the path holds that single location.

    Raises
    ------
    UnknownLocationError
        If either name is not in the store.
    """
    origin = store.get_location(origin_name)
    destination = store.get_location(destination_name)

    if origin is destination:
        return ShortestPath(locations=(origin,))

    previous = _search(store, origin, destination)
    if destination.id not in previous:
        return None

    routes: List[Route] = []
    current = destination.id
    while current != origin.id:
        route = previous[current]
        routes.append(route)
        current = route.source
    routes.reverse()

    locations = (origin,) + tuple(store.location(r.destination) for r in routes)
    return ShortestPath(locations=locations, routes=tuple(routes))


def _search(store: GraphStore, origin: Location, destination: Location) -> Dict[int, Route]:
    """Run Dijkstra from ``origin`` until ``destination`` is settled.

    Returns the predecessor route of every location reached.
    """
    distances: Dict[int, float] = {origin.id: 0.0}
    previous: Dict[int, Route] = {}
    settled: Set[int] = set()

    # Ties on distance go to the location created first.
    heap: List[Tuple[float, int]] = [(0.0, origin.id)]

    while heap:
        current_distance, u = heapq.heappop(heap)

        if u in settled:
            continue

        settled.add(u)

        if u == destination.id:
            break

        for route, neighbor in store.neighbors(store.location(u)):
            v = neighbor.id
            if v in settled:
                continue
            new_distance = current_distance + route.distance
            if new_distance < distances.get(v, float("inf")):
                distances[v] = new_distance
                previous[v] = route
                heapq.heappush(heap, (new_distance, v))

    return previous
