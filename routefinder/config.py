"""Centralized configuration using Pydantic Settings.

Configuration can be overridden via environment variables:
- RF_GRAPH_DATA_DIR=/path/to/data
- RF_COST_AUTONOMY=12.5
- RF_LOG_LEVEL=DEBUG
- etc.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class GraphConfig(BaseSettings):
    """Graph data configuration.

    Environment variables prefixed with RF_GRAPH_.
    """

    model_config = SettingsConfigDict(env_prefix="RF_GRAPH_")

    data_dir: Path = Field(
        default_factory=lambda: Path(__file__).resolve().parent / "data"
    )
    locations_file: str = "locations.csv"
    routes_file: str = "routes.csv"

    @property
    def locations_path(self) -> Path:
        """Full path to locations CSV file."""
        return self.data_dir / self.locations_file

    @property
    def routes_path(self) -> Path:
        """Full path to routes CSV file."""
        return self.data_dir / self.routes_file


class CostConfig(BaseSettings):
    """Default fuel profile for delivery estimates.

    Environment variables prefixed with RF_COST_.
    """

    model_config = SettingsConfigDict(env_prefix="RF_COST_")

    autonomy: float = Field(default=10.0, gt=0)
    fuel_price: float = Field(default=2.50, ge=0)


class ObservabilityConfig(BaseSettings):
    """Logging configuration.

    Environment variables prefixed with RF_LOG_.
    """

    model_config = SettingsConfigDict(env_prefix="RF_LOG_")

    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class AppConfig(BaseSettings):
    """Main application configuration aggregating all sub-configs.

        config = get_config()
        print(config.graph.routes_path)

    Environment variables prefixed with RF_.
    """

    model_config = SettingsConfigDict(env_prefix="RF_")

    graph: GraphConfig = Field(default_factory=GraphConfig)
    cost: CostConfig = Field(default_factory=CostConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)


@lru_cache(maxsize=1)
def get_config() -> AppConfig:
    """Get the singleton application configuration.

    Configuration is loaded once and cached. To reload configuration
    (e.g., in tests), use reset_config() first.
    """
    return AppConfig()


def reset_config() -> None:
    """Reset the configuration cache."""
    get_config.cache_clear()
