"""Shared fixtures: a four-city ring network and its CSV files."""

from dataclasses import dataclass
from pathlib import Path

import pytest

from trainpaths.config import NetworkConfig
from trainpaths.domain.models import City, Line, TrainNetwork


# A-B-C-D-A ring; lengths AB:1 BC:2 CD:1 DA:4
RING_CITIES = "name\nA\nB\nC\nD\n"
RING_LINES = "\n".join(
    [
        "from_city,to_city,tracks,length_km,duration_min",
        "A,B,1,1,10",
        "B,C,1,2,5",
        "C,D,1,1,10",
        "D,A,1,4,1",
    ]
)


@dataclass
class StaticRepository:
    """In-memory NetworkRepositoryPort for service tests."""

    network: TrainNetwork

    def load(self) -> TrainNetwork:
        return self.network

    def get_city(self, name):
        return next((c for c in self.network.cities if c.name == name), None)

    def list_cities(self):
        return list(self.network.cities)


@pytest.fixture
def ring_network() -> TrainNetwork:
    cities = tuple(City(index=i, name=name) for i, name in enumerate("ABCD"))
    lines = (
        Line(first=0, second=1, tracks=1, length_km=1, duration_min=10),
        Line(first=1, second=2, tracks=1, length_km=2, duration_min=5),
        Line(first=2, second=3, tracks=1, length_km=1, duration_min=10),
        Line(first=3, second=0, tracks=1, length_km=4, duration_min=1),
    )
    return TrainNetwork(cities=cities, lines=lines)


@pytest.fixture
def ring_repository(ring_network) -> StaticRepository:
    return StaticRepository(ring_network)


@pytest.fixture
def ring_data_dir(tmp_path) -> Path:
    (tmp_path / "cities.csv").write_text(RING_CITIES, encoding="utf-8")
    (tmp_path / "lines.csv").write_text(RING_LINES, encoding="utf-8")
    return tmp_path


@pytest.fixture
def ring_config(ring_data_dir) -> NetworkConfig:
    return NetworkConfig(data_dir=ring_data_dir)
