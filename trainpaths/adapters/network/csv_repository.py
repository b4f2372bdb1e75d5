"""CSV Network Repository adapter.

Loads the train network from two CSV files:

- cities.csv: ``name`` (row order gives the vertex index)
- lines.csv: ``from_city,to_city,tracks,length_km,duration_min``

The loaded network is cached until clear_cache() is called.
"""

from __future__ import annotations

import csv
import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence

from ...config import NetworkConfig, get_config
from ...domain.errors import CityNotFoundError, NetworkLoadError
from ...domain.models import City, Line, TrainNetwork


@dataclass
class CSVNetworkRepository:
    """Network repository that loads from CSV files.

    This adapter implements NetworkRepositoryPort.

    Attributes:
        config: Network configuration (paths, file names)
    """

    config: NetworkConfig = field(default_factory=lambda: get_config().network)
    _logger: logging.Logger = field(init=False, repr=False)

    # Cached data
    _network: Optional[TrainNetwork] = field(default=None, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def load(self) -> TrainNetwork:
        """Load the train network from CSV files.

        Returns:
            The network with its cities and lines.

        Raises:
            NetworkLoadError: If the network cannot be loaded.
        """
        if self._network is not None:
            return self._network

        self._logger.debug(
            "Loading network",
            extra={
                "cities_path": str(self.config.cities_path),
                "lines_path": str(self.config.lines_path),
            },
        )

        cities = self._load_cities()
        lines = self._load_lines({city.name: city.index for city in cities})
        network = TrainNetwork(cities=tuple(cities), lines=tuple(lines))
        self._network = network
        self._logger.info(
            "Network loaded",
            extra={"cities": network.city_count, "lines": len(network.lines)},
        )
        return network

    def _load_cities(self) -> List[City]:
        """Read cities in file order; blank names are skipped."""
        cities: List[City] = []
        seen: Dict[str, int] = {}

        try:
            with self.config.cities_path.open(newline="", encoding="utf-8") as f:
                reader = csv.DictReader(f)
                for row in reader:
                    name = (row.get("name") or "").strip()
                    if not name:
                        continue
                    if name in seen:
                        raise ValueError(f"duplicate city {name!r}")
                    seen[name] = len(cities)
                    cities.append(City(index=len(cities), name=name))
        except (OSError, ValueError) as e:
            raise NetworkLoadError(
                f"Failed to load cities: {self.config.cities_path.name}",
                file_path=str(self.config.cities_path),
                cause=e,
            )

        return cities

    def _load_lines(self, index_by_name: Dict[str, int]) -> List[Line]:
        """Read lines; rows with a missing field are skipped."""
        lines: List[Line] = []

        try:
            with self.config.lines_path.open(newline="", encoding="utf-8") as f:
                reader = csv.DictReader(f)
                for row in reader:
                    values = [
                        (row.get(column) or "").strip()
                        for column in (
                            "from_city",
                            "to_city",
                            "tracks",
                            "length_km",
                            "duration_min",
                        )
                    ]
                    if not all(values):
                        continue

                    from_name, to_name, tracks, length, duration = values
                    line = Line(
                        first=index_by_name[from_name],
                        second=index_by_name[to_name],
                        tracks=int(tracks),
                        length_km=float(length),
                        duration_min=float(duration),
                    )
                    if line.tracks < 0 or line.length_km < 0 or line.duration_min < 0:
                        raise ValueError(f"negative value in line {values}")
                    lines.append(line)
        except KeyError as e:
            raise NetworkLoadError(
                f"Line refers to an unknown city: {e.args[0]}",
                file_path=str(self.config.lines_path),
                cause=e,
            )
        except (OSError, ValueError) as e:
            raise NetworkLoadError(
                f"Failed to load lines: {self.config.lines_path.name}",
                file_path=str(self.config.lines_path),
                cause=e,
            )

        return lines

    def get_city(self, name: str) -> Optional[City]:
        """Get a city by name.

        Args:
            name: The city name to look up.

        Returns:
            The city, or None if not found.
        """
        network = self.load()
        try:
            return network.city(network.index_of(name))
        except CityNotFoundError:
            return None

    def get_city_or_raise(self, name: str) -> City:
        """Get a city by name, raising if not found.

        Raises:
            CityNotFoundError: If the city is not found.
        """
        network = self.load()
        return network.city(network.index_of(name))

    def list_cities(self) -> Sequence[City]:
        """List all cities in vertex order."""
        return list(self.load().cities)

    def clear_cache(self) -> None:
        """Clear the cached network."""
        self._network = None
        self._logger.debug("Network cache cleared")
