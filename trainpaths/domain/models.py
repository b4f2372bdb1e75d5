"""Immutable domain models for trainpaths.

All models are frozen dataclasses with slots. They cover the train
network dataset (cities and lines), the weighted edge handled by the
graph engines, and the answers produced by the planner service.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Tuple, Union

from .errors import CityNotFoundError, InvalidVertexError

Weight = Union[int, float]


@dataclass(frozen=True, slots=True)
class WeightedEdge:
    """Directed edge ``from_vertex -> to_vertex`` carrying a weight.

    An undirected relationship is modelled as two edges, one per
    direction.
    """

    from_vertex: int
    to_vertex: int
    weight: Weight

    def either(self) -> int:
        """Return one endpoint of the edge (its origin)."""
        return self.from_vertex

    def other(self, vertex: int) -> int:
        """Return the endpoint opposite to ``vertex``.

        Raises:
            InvalidVertexError: If ``vertex`` is not an endpoint.
        """
        if vertex == self.from_vertex:
            return self.to_vertex
        if vertex == self.to_vertex:
            return self.from_vertex
        raise InvalidVertexError(
            f"Vertex {vertex} is not an endpoint of {self}",
            vertex=vertex,
        )

    def reversed(self) -> WeightedEdge:
        """Return the same edge pointing the other way."""
        return WeightedEdge(self.to_vertex, self.from_vertex, self.weight)

    def __str__(self) -> str:
        return f"{self.from_vertex}->{self.to_vertex} ({self.weight})"


@dataclass(frozen=True, slots=True)
class City:
    """A city of the train network.

    Attributes:
        index: Dense vertex index of the city
        name: City name as written in the dataset
    """

    index: int
    name: str


@dataclass(frozen=True, slots=True)
class Line:
    """A bidirectional railway line between two cities.

    Attributes:
        first: Vertex index of the first city
        second: Vertex index of the second city
        tracks: Number of parallel tracks
        length_km: Physical length in kilometres
        duration_min: Travel duration in minutes
    """

    first: int
    second: int
    tracks: int
    length_km: float
    duration_min: float

    @property
    def cities(self) -> Tuple[int, int]:
        """Return both endpoints, first city first."""
        return self.first, self.second

    def touches(self, city_index: int) -> bool:
        """Check if the line starts or ends at ``city_index``."""
        return city_index in (self.first, self.second)


@dataclass(frozen=True, slots=True)
class TrainNetwork:
    """Read-only train network: cities indexed densely plus their lines."""

    cities: Tuple[City, ...]
    lines: Tuple[Line, ...]
    _index_by_name: Dict[str, int] = field(
        init=False, repr=False, compare=False, hash=False
    )

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "_index_by_name", {city.name: city.index for city in self.cities}
        )

    @property
    def city_count(self) -> int:
        """Return the number of cities (graph vertices)."""
        return len(self.cities)

    def index_of(self, name: str) -> int:
        """Return the vertex index of a city.

        Raises:
            CityNotFoundError: If no city has this name.
        """
        try:
            return self._index_by_name[name]
        except KeyError:
            raise CityNotFoundError(
                f"City not found: {name}",
                city_name=name,
            ) from None

    def city(self, index: int) -> City:
        """Return the city at ``index``.

        Raises:
            InvalidVertexError: If the index is out of range.
        """
        if not 0 <= index < len(self.cities):
            raise InvalidVertexError(
                f"City index out of range: {index}",
                vertex=index,
                vertex_count=len(self.cities),
            )
        return self.cities[index]

    def name_of(self, index: int) -> str:
        """Return the name of the city at ``index``."""
        return self.city(index).name


@dataclass(frozen=True, slots=True)
class Itinerary:
    """Answer to a route query over the train network.

    Attributes:
        cities: City names from departure to arrival (inclusive)
        edges: Edges followed, in travel order
        total: Cumulative weight of the route
        unit: Unit of ``total`` (e.g. 'km', 'min')
    """

    cities: Tuple[str, ...]
    edges: Tuple[WeightedEdge, ...]
    total: Weight
    unit: str = ""

    @property
    def is_empty(self) -> bool:
        """Check if the itinerary has no leg (departure == arrival)."""
        return len(self.edges) == 0

    @property
    def num_stops(self) -> int:
        """Return the number of cities on the route."""
        return len(self.cities)


@dataclass(frozen=True, slots=True)
class RenovationItem:
    """One line selected for renovation with its cost."""

    first: str
    second: str
    cost: Weight


@dataclass(frozen=True, slots=True)
class RenovationPlan:
    """Cheapest set of lines keeping every city connected.

    Attributes:
        items: Selected lines with their renovation cost
        city_count: Number of cities in the network
    """

    items: Tuple[RenovationItem, ...] = field(default_factory=tuple)
    city_count: int = 0

    @property
    def total_cost(self) -> Weight:
        """Return the summed cost of every selected line."""
        return sum(item.cost for item in self.items)

    @property
    def connects_all_cities(self) -> bool:
        """Check if the plan spans the whole network."""
        return len(self.items) == max(self.city_count - 1, 0)
