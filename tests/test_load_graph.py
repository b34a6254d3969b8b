import pytest

from routefinder.domain.errors import (
    DuplicateNameError,
    InvalidWeightError,
    UnknownLocationError,
)
from routefinder.graph.dijkstra import shortest_path
from routefinder.graph.load_graph import load_graph
from routefinder.graph.store import GraphStore

from .conftest import DATA_DIR


def write_csvs(tmp_path, locations, routes):
    locations_csv = tmp_path / "locations.csv"
    routes_csv = tmp_path / "routes.csv"
    locations_csv.write_text(locations, encoding="utf-8")
    routes_csv.write_text(routes, encoding="utf-8")
    return locations_csv, routes_csv


def test_load_graph_contains_all_locations():
    locations_csv = DATA_DIR / "locations.csv"
    routes_csv = DATA_DIR / "routes.csv"

    store = load_graph(locations_csv, routes_csv)

    with locations_csv.open(encoding="utf-8") as f:
        f.readline()
        names = [line.strip() for line in f if line.strip()]

    assert [loc.name for loc in store] == names
    assert store.route_count == 6


def test_shipped_sample_dataset_answers():
    store = load_graph(DATA_DIR / "locations.csv", DATA_DIR / "routes.csv")

    path = shortest_path(store, "A", "D")
    assert path.names == ("A", "B", "D")
    assert path.total_cost == 25.0


def test_load_graph_accepts_str_paths_and_skips_blank_rows(tmp_path):
    locations_csv, routes_csv = write_csvs(
        tmp_path,
        "name\nX\n \nY\n",
        "source,destination,distance\nX,Y,2.5\n,,\n",
    )

    store = load_graph(str(locations_csv), str(routes_csv))

    assert len(store) == 2
    assert shortest_path(store, "X", "Y").weights == (2.5,)


def test_load_graph_into_existing_store(tmp_path):
    locations_csv, routes_csv = write_csvs(
        tmp_path, "name\nB\n", "source,destination,distance\nA,B,1\n"
    )
    store = GraphStore()
    store.add_location("A")

    result = load_graph(locations_csv, routes_csv, store=store)

    assert result is store
    assert shortest_path(store, "A", "B").total_cost == 1.0


def test_load_graph_duplicate_location(tmp_path):
    locations_csv, routes_csv = write_csvs(
        tmp_path, "name\nA\nA\n", "source,destination,distance\n"
    )

    with pytest.raises(DuplicateNameError):
        load_graph(locations_csv, routes_csv)


def test_load_graph_unknown_endpoint(tmp_path):
    locations_csv, routes_csv = write_csvs(
        tmp_path, "name\nA\n", "source,destination,distance\nA,Z,1\n"
    )

    with pytest.raises(UnknownLocationError):
        load_graph(locations_csv, routes_csv)


def test_load_graph_negative_distance(tmp_path):
    locations_csv, routes_csv = write_csvs(
        tmp_path, "name\nA\nB\n", "source,destination,distance\nA,B,-3\n"
    )

    with pytest.raises(InvalidWeightError):
        load_graph(locations_csv, routes_csv)


def test_load_graph_missing_file(tmp_path):
    with pytest.raises(OSError):
        load_graph(tmp_path / "nope.csv", tmp_path / "nope.csv")


@pytest.mark.parametrize("routes_row", ["A,B", "A,B,", "A,B,  "])
def test_load_graph_route_without_distance(tmp_path, routes_row):
    locations_csv, routes_csv = write_csvs(
        tmp_path, "name\nA\nB\n", f"source,destination,distance\n{routes_row}\n"
    )

    with pytest.raises(ValueError):
        load_graph(locations_csv, routes_csv)
