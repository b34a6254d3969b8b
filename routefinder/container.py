"""Dependency injection container.

Binds each port to a factory. Instances are built on first resolve and
shared afterwards, so the planner, repository and solver resolved from
one container all see the same loaded graph.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Optional

from .config import AppConfig, get_config


@dataclass
class Container:
    """Port-to-adapter bindings for one application instance.

    Usage:
        planner = Container.create_default().resolve(RoutePlannerService)

        # Tests swap a binding before resolving
        container = Container.create_default()
        container.register(GraphRepositoryPort, lambda: StaticRepository(store))

    Attributes:
        config: Application configuration
    """

    config: AppConfig = field(default_factory=get_config)

    _factories: Dict[type[Any], Callable[[], Any]] = field(
        default_factory=dict, repr=False
    )
    _instances: Dict[type[Any], Any] = field(default_factory=dict, repr=False)
    _lock: threading.RLock = field(default_factory=threading.RLock, repr=False)

    def register(self, port_type: type[Any], factory: Callable[[], Any]) -> None:
        """Bind ``port_type`` to ``factory``, dropping any instance built
        from a previous binding."""
        with self._lock:
            self._factories[port_type] = factory
            self._instances.pop(port_type, None)

    def resolve(self, port_type: type[Any]) -> Any:
        """Return the shared instance bound to ``port_type``.

        Raises:
            KeyError: If nothing is bound to the type.
        """
        with self._lock:
            if port_type not in self._instances:
                if port_type not in self._factories:
                    raise KeyError(f"No binding for {port_type.__name__}")
                self._instances[port_type] = self._factories[port_type]()
            return self._instances[port_type]

    @classmethod
    def create_default(cls, config: Optional[AppConfig] = None) -> Container:
        """Bind the CSV repository, the Dijkstra solver and the planner."""
        from .adapters.graph import CSVGraphRepository, DijkstraRouteSolver
        from .ports.graph import GraphRepositoryPort, RouteSolverPort
        from .services import RoutePlannerService

        container = cls(config=config or get_config())

        container.register(
            GraphRepositoryPort, lambda: CSVGraphRepository(container.config.graph)
        )
        container.register(RouteSolverPort, DijkstraRouteSolver)
        container.register(
            RoutePlannerService,
            lambda: RoutePlannerService(
                graph_repository=container.resolve(GraphRepositoryPort),
                route_solver=container.resolve(RouteSolverPort),
            ),
        )
        return container


_default_container: Optional[Container] = None
_container_lock = threading.Lock()


def get_container() -> Container:
    """Get the default application container, creating it if needed."""
    global _default_container
    with _container_lock:
        if _default_container is None:
            _default_container = Container.create_default()
        return _default_container


def reset_container() -> None:
    """Drop the default container so the next call builds a fresh one."""
    global _default_container
    with _container_lock:
        _default_container = None
