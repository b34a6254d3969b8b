"""CSV Graph Repository adapter.

This adapter wraps the plain CSV loader and adds:
- Configuration injection (paths from config)
- Caching of the loaded store
- Typed error reporting
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional

from ...config import GraphConfig, get_config
from ...domain.errors import GraphError, RouteFinderError
from ...graph.load_graph import load_graph
from ...graph.store import GraphStore


@dataclass
class CSVGraphRepository:
    """Graph repository that loads from CSV files.

    Implements GraphRepositoryPort. The store is loaded on first use
    and reused until clear_cache() is called.

    Attributes:
        config: Graph configuration (paths, file names)
    """

    config: GraphConfig = field(default_factory=lambda: get_config().graph)
    _logger: logging.Logger = field(init=False, repr=False)

    _store: Optional[GraphStore] = field(default=None, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def load(self) -> GraphStore:
        """Load the location network from CSV files.

        Returns:
            The populated GraphStore.

        Raises:
            GraphError: If the files cannot be read or hold invalid data.
        """
        if self._store is not None:
            return self._store

        self._logger.debug(
            "Loading graph",
            extra={
                "locations_path": str(self.config.locations_path),
                "routes_path": str(self.config.routes_path),
            },
        )

        try:
            store = load_graph(self.config.locations_path, self.config.routes_path)
        except (OSError, KeyError, ValueError, RouteFinderError) as e:
            raise GraphError(
                "Failed to load graph",
                file_path=str(self.config.data_dir),
                cause=e,
            ) from e

        self._store = store
        self._logger.info(
            "Graph loaded",
            extra={"locations": len(store), "routes": store.route_count},
        )
        return store

    def clear_cache(self) -> None:
        """Forget the loaded store so the next load() rereads the files."""
        self._store = None
        self._logger.debug("Graph cache cleared")
