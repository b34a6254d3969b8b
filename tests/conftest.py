from pathlib import Path

import pytest

from routefinder.config import reset_config
from routefinder.container import reset_container
from routefinder.graph.store import GraphStore

DATA_DIR = Path(__file__).resolve().parents[1] / "routefinder" / "data"

SAMPLE_ROUTES = [
    ("A", "B", 10),
    ("B", "D", 15),
    ("A", "C", 20),
    ("C", "D", 30),
    ("B", "E", 50),
    ("D", "E", 30),
]


def build_store(names, routes):
    store = GraphStore()
    for name in names:
        store.add_location(name)
    for source, destination, distance in routes:
        store.add_route(
            store.get_location(source), store.get_location(destination), distance
        )
    return store


@pytest.fixture
def sample_store() -> GraphStore:
    """The A..E sample network."""
    return build_store("ABCDE", SAMPLE_ROUTES)


@pytest.fixture(autouse=True)
def fresh_config():
    reset_config()
    reset_container()
    yield
    reset_config()
    reset_container()
