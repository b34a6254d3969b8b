"""Graph loading from CSV files.

``locations.csv`` has a ``name`` column, ``routes.csv`` has
``source``, ``destination`` and ``distance`` columns where source and
destination are location names.
"""

import csv
from pathlib import Path
from typing import Optional, Union

from .store import GraphStore

PathLike = Union[str, Path]


def load_graph(
    locations_path: PathLike,
    routes_path: PathLike,
    store: Optional[GraphStore] = None,
) -> GraphStore:
    store = store if store is not None else GraphStore()

    # 1) Locations first, in file order
    with open(locations_path, newline="", encoding="utf-8") as f:
        reader = csv.DictReader(f)
        for row in reader:
            name = (row["name"] or "").strip()
            if name:
                store.add_location(name)

    # 2) Then the directed routes between them
    with open(routes_path, newline="", encoding="utf-8") as f:
        reader = csv.DictReader(f)
        for row in reader:
            source = (row["source"] or "").strip()
            destination = (row["destination"] or "").strip()
            if not source and not destination:
                continue
            distance = (row["distance"] or "").strip()
            if not distance:
                raise ValueError(f"Route {source} -> {destination} has no distance")
            store.add_route(
                store.get_location(source),
                store.get_location(destination),
                float(distance),
            )

    return store
