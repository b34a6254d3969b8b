"""Ports layer - Protocols implemented by the adapters."""

from .graph import GraphRepositoryPort, RouteSolverPort

__all__ = ["GraphRepositoryPort", "RouteSolverPort"]
