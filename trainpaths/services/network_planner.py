"""Network planner service - Answers questions about the train network.

Each query builds a view over the loaded network with the weight it
needs (length, duration or renovation cost), runs one engine on it and
turns the result into a domain answer.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Sequence

from ..domain.errors import UnreachableVertexError
from ..domain.models import (
    Itinerary,
    RenovationItem,
    RenovationPlan,
    TrainNetwork,
    Weight,
    WeightedEdge,
)
from ..graph import MST_ALGORITHMS, SHORTEST_PATH_ALGORITHMS
from ..graph.paths import ShortestPathResult
from ..graph.views import (
    LineWeight,
    TrainNetworkView,
    by_duration,
    by_length,
    closing_city,
    renovation_cost,
)
from ..ports.graph import NetworkRepositoryPort


@dataclass
class NetworkPlannerService:
    """Service answering route and renovation queries.

    Attributes:
        repository: Loads the train network
        routing_algorithm: Key of SHORTEST_PATH_ALGORITHMS
        mst_algorithm: Key of MST_ALGORITHMS
        cost_per_km_by_tracks: Renovation cost per km, by track count
    """

    repository: NetworkRepositoryPort
    routing_algorithm: str = "dijkstra"
    mst_algorithm: str = "kruskal"
    cost_per_km_by_tracks: Sequence[Weight] = (0, 3, 6, 10, 15)

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)
        if self.routing_algorithm not in SHORTEST_PATH_ALGORITHMS:
            raise ValueError(f"Unknown routing algorithm: {self.routing_algorithm!r}")
        if self.mst_algorithm not in MST_ALGORITHMS:
            raise ValueError(f"Unknown MST algorithm: {self.mst_algorithm!r}")

    @property
    def network(self) -> TrainNetwork:
        return self.repository.load()

    def cheapest_renovation(self) -> RenovationPlan:
        """Select the cheapest set of lines keeping all cities connected.

        Returns:
            The plan with one item per line to renovate. When the network
            is disconnected the plan covers a spanning forest, see
            RenovationPlan.connects_all_cities.
        """
        network = self.network
        view = TrainNetworkView(
            network, renovation_cost(self.cost_per_km_by_tracks), directed=False
        )
        tree = MST_ALGORITHMS[self.mst_algorithm](view)
        items = tuple(
            RenovationItem(
                first=network.name_of(edge.from_vertex),
                second=network.name_of(edge.to_vertex),
                cost=edge.weight,
            )
            for edge in tree.edges
        )
        plan = RenovationPlan(items=items, city_count=network.city_count)

        self._logger.info(
            "Renovation planned",
            extra={"lines": len(items), "total_cost": plan.total_cost},
        )
        if not plan.connects_all_cities:
            self._logger.warning(
                "Network is disconnected, renovation plan is a forest",
                extra={"lines": len(items), "cities": network.city_count},
            )
        return plan

    def shortest_route(self, departure: str, arrival: str) -> Itinerary:
        """Find the shortest route by length.

        Raises:
            CityNotFoundError: If a city name is unknown.
            UnreachableVertexError: If no route exists.
        """
        return self._route(departure, arrival, by_length, "km")

    def shortest_route_avoiding(
        self, departure: str, arrival: str, closed_city: str
    ) -> Itinerary:
        """Find the shortest route by length that does not stop at ``closed_city``.

        Lines touching the closed city get an infinite weight, so any
        route through it is unreachable.

        Raises:
            CityNotFoundError: If a city name is unknown.
            UnreachableVertexError: If every route goes through the closed city.
        """
        closed = self.network.index_of(closed_city)
        return self._route(departure, arrival, closing_city(closed, by_length), "km")

    def fastest_route_via(self, departure: str, arrival: str, via: str) -> Itinerary:
        """Find the fastest route from ``departure`` to ``arrival`` through ``via``.

        Raises:
            CityNotFoundError: If a city name is unknown.
            UnreachableVertexError: If one of the two legs does not exist.
        """
        first_leg = self._route(departure, via, by_duration, "min")
        second_leg = self._route(via, arrival, by_duration, "min")
        return Itinerary(
            cities=first_leg.cities + second_leg.cities[1:],
            edges=first_leg.edges + second_leg.edges,
            total=first_leg.total + second_leg.total,
            unit="min",
        )

    def _route(
        self, departure: str, arrival: str, weight: LineWeight, unit: str
    ) -> Itinerary:
        network = self.network
        source = network.index_of(departure)
        target = network.index_of(arrival)

        view = TrainNetworkView(network, weight)
        result = SHORTEST_PATH_ALGORITHMS[self.routing_algorithm](view, source)

        try:
            itinerary = to_itinerary(network, result, target, unit)
        except UnreachableVertexError:
            self._logger.warning(
                "No route found",
                extra={"departure": departure, "arrival": arrival},
            )
            raise

        self._logger.info(
            "Route found",
            extra={
                "departure": departure,
                "arrival": arrival,
                "stops": itinerary.num_stops,
                "total": itinerary.total,
            },
        )
        return itinerary


def to_itinerary(
    network: TrainNetwork, result: ShortestPathResult, target: int, unit: str = ""
) -> Itinerary:
    """Convert the path to ``target`` into an itinerary with city names."""
    edges: List[WeightedEdge] = result.path_to(target)
    return Itinerary(
        cities=tuple(network.name_of(v) for v in result.vertices_to(target)),
        edges=tuple(edges),
        total=result.distance_to(target),
        unit=unit,
    )


def _format_number(value: Weight) -> str:
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def format_itinerary(itinerary: Itinerary, label: str = "length") -> str:
    """Format an itinerary as console text.

    Example::

        length = 395 km
          via Geneve -> Lausanne -> Neuchatel -> ... -> Coire
    """
    return (
        f"  {label} = {_format_number(itinerary.total)} {itinerary.unit}\n"
        f"  via {' -> '.join(itinerary.cities)}"
    )


def format_renovation(plan: RenovationPlan, unit: str = "MCHF") -> str:
    """Format a renovation plan as one line per renovated line plus the total."""
    rows = [
        f"{item.first} - {item.second} : {_format_number(item.cost)} {unit}"
        for item in plan.items
    ]
    rows.append("")
    rows.append(f"Total cost : {_format_number(plan.total_cost)} {unit}")
    return "\n".join(rows)
