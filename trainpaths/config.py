"""Centralized configuration using Pydantic Settings.

This module provides a single source of truth for all configuration:
data file locations, the renovation cost table, the algorithms used by
the planner and the logging setup.

Configuration can be overridden via environment variables:
- TRAINPATHS_NETWORK_DATA_DIR=/path/to/data
- TRAINPATHS_ROUTING_ALGORITHM=bellman_ford
- TRAINPATHS_RENOVATION_COST_PER_KM_BY_TRACKS='[0, 3, 6, 10, 15]'
- TRAINPATHS_LOG_LEVEL=DEBUG
- etc.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import List, Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class NetworkConfig(BaseSettings):
    """Train network data configuration.

    Environment variables prefixed with TRAINPATHS_NETWORK_.
    """

    model_config = SettingsConfigDict(env_prefix="TRAINPATHS_NETWORK_")

    data_dir: Path = Field(
        default_factory=lambda: Path(__file__).resolve().parent.parent / "data"
    )
    cities_file: str = "cities.csv"
    lines_file: str = "lines.csv"
    edge_list_file: str = "tinyEWD.txt"

    @property
    def cities_path(self) -> Path:
        """Full path to cities CSV file."""
        return self.data_dir / self.cities_file

    @property
    def lines_path(self) -> Path:
        """Full path to lines CSV file."""
        return self.data_dir / self.lines_file

    @property
    def edge_list_path(self) -> Path:
        """Full path to the sample edge-weighted digraph."""
        return self.data_dir / self.edge_list_file


class RenovationConfig(BaseSettings):
    """Renovation cost configuration.

    Environment variables prefixed with TRAINPATHS_RENOVATION_.
    """

    model_config = SettingsConfigDict(env_prefix="TRAINPATHS_RENOVATION_")

    # Cost of renovating one km of line, indexed by its number of tracks
    cost_per_km_by_tracks: List[int] = Field(default_factory=lambda: [0, 3, 6, 10, 15])
    algorithm: Literal["kruskal", "eager_prim"] = "kruskal"

    @field_validator("cost_per_km_by_tracks")
    @classmethod
    def _non_negative_costs(cls, value: List[int]) -> List[int]:
        if not value:
            raise ValueError("cost table must not be empty")
        if any(cost < 0 for cost in value):
            raise ValueError("costs must be non-negative")
        return value


class RoutingConfig(BaseSettings):
    """Shortest-path configuration.

    Environment variables prefixed with TRAINPATHS_ROUTING_.
    """

    model_config = SettingsConfigDict(env_prefix="TRAINPATHS_ROUTING_")

    algorithm: Literal["dijkstra", "bellman_ford"] = "dijkstra"


class ObservabilityConfig(BaseSettings):
    """Logging configuration.

    Environment variables prefixed with TRAINPATHS_LOG_.
    """

    model_config = SettingsConfigDict(env_prefix="TRAINPATHS_LOG_")

    level: str = "WARNING"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class AppConfig(BaseSettings):
    """Main application configuration aggregating all sub-configs.

    Sub-configurations can be accessed via attributes:

        config = get_config()
        print(config.routing.algorithm)
        print(config.network.lines_path)

    Environment variables prefixed with TRAINPATHS_.
    """

    model_config = SettingsConfigDict(env_prefix="TRAINPATHS_")

    network: NetworkConfig = Field(default_factory=NetworkConfig)
    renovation: RenovationConfig = Field(default_factory=RenovationConfig)
    routing: RoutingConfig = Field(default_factory=RoutingConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)

    @property
    def project_root(self) -> Path:
        """Return the project root directory."""
        return Path(__file__).resolve().parent.parent


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
