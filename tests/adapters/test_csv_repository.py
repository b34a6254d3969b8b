"""Tests for the CSV graph repository adapter."""

import pytest

from routefinder.adapters.graph import CSVGraphRepository, DijkstraRouteSolver
from routefinder.config import GraphConfig
from routefinder.domain.errors import DuplicateNameError, GraphError
from routefinder.services import RoutePlannerService

from ..conftest import DATA_DIR


@pytest.fixture
def tmp_config(tmp_path):
    (tmp_path / "locations.csv").write_text("name\nA\nB\n", encoding="utf-8")
    (tmp_path / "routes.csv").write_text(
        "source,destination,distance\nA,B,4\n", encoding="utf-8"
    )
    return GraphConfig(data_dir=tmp_path)


class TestCSVGraphRepository:
    def test_load_default_dataset(self):
        repository = CSVGraphRepository(GraphConfig(data_dir=DATA_DIR))

        store = repository.load()

        assert len(store) == 5
        assert store.route_count == 6

    def test_load_is_cached(self, tmp_config):
        repository = CSVGraphRepository(tmp_config)

        assert repository.load() is repository.load()

    def test_clear_cache_rereads_files(self, tmp_config):
        repository = CSVGraphRepository(tmp_config)
        first = repository.load()

        (tmp_config.data_dir / "locations.csv").write_text(
            "name\nA\nB\nC\n", encoding="utf-8"
        )
        repository.clear_cache()
        second = repository.load()

        assert second is not first
        assert len(second) == 3

    def test_missing_files_raise_graph_error(self, tmp_path):
        repository = CSVGraphRepository(GraphConfig(data_dir=tmp_path / "missing"))

        with pytest.raises(GraphError) as exc_info:
            repository.load()

        assert isinstance(exc_info.value.cause, OSError)
        assert exc_info.value.file_path == str(tmp_path / "missing")

    def test_invalid_data_raises_graph_error(self, tmp_config):
        (tmp_config.data_dir / "locations.csv").write_text(
            "name\nA\nA\n", encoding="utf-8"
        )
        repository = CSVGraphRepository(tmp_config)

        with pytest.raises(GraphError) as exc_info:
            repository.load()

        assert isinstance(exc_info.value.cause, DuplicateNameError)
        assert "Duplicate location name" in str(exc_info.value)

    def test_bad_distance_raises_graph_error(self, tmp_config):
        (tmp_config.data_dir / "routes.csv").write_text(
            "source,destination,distance\nA,B,far\n", encoding="utf-8"
        )
        repository = CSVGraphRepository(tmp_config)

        with pytest.raises(GraphError) as exc_info:
            repository.load()

        assert isinstance(exc_info.value.cause, ValueError)

    def test_failed_load_is_not_cached(self, tmp_config):
        routes_csv = tmp_config.data_dir / "routes.csv"
        good = routes_csv.read_text(encoding="utf-8")
        routes_csv.write_text("source,destination,distance\nA,B,-1\n", encoding="utf-8")
        repository = CSVGraphRepository(tmp_config)

        with pytest.raises(GraphError):
            repository.load()

        routes_csv.write_text(good, encoding="utf-8")
        assert repository.load().route_count == 1

    def test_route_without_distance_raises_graph_error(self, tmp_config):
        (tmp_config.data_dir / "routes.csv").write_text(
            "source,destination,distance\nA,B\n", encoding="utf-8"
        )
        repository = CSVGraphRepository(tmp_config)

        with pytest.raises(GraphError) as exc_info:
            repository.load()

        assert isinstance(exc_info.value.cause, ValueError)
        assert "A -> B has no distance" in str(exc_info.value)

    def test_route_without_distance_reported_by_planner(self, tmp_config):
        (tmp_config.data_dir / "routes.csv").write_text(
            "source,destination,distance\nA,B\n", encoding="utf-8"
        )
        planner = RoutePlannerService(
            graph_repository=CSVGraphRepository(tmp_config),
            route_solver=DijkstraRouteSolver(),
        )

        path, error = planner.find_route_safe("A", "B")

        assert path is None
        assert error.startswith("Error: Failed to load graph")
