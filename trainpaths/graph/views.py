"""Graph views over the train network.

A TrainNetworkView exposes a TrainNetwork through the WeightedGraph
contract. The view is parameterized by a weight function, so the same
network can be walked by length, by duration or by renovation cost
without one wrapper class per criterion.
"""

from __future__ import annotations

from typing import Callable, Sequence

from ..domain.errors import ConfigurationError
from ..domain.models import Line, TrainNetwork, Weight, WeightedEdge
from ..ports.graph import EdgeVisitor, VertexVisitor
from .paths import INFINITY, check_vertex

LineWeight = Callable[[Line], Weight]


def by_length(line: Line) -> Weight:
    return line.length_km


def by_duration(line: Line) -> Weight:
    return line.duration_min


def renovation_cost(cost_per_km_by_tracks: Sequence[Weight]) -> LineWeight:
    """Weight a line by its renovation cost: ``cost[tracks] * length``.

    Args:
        cost_per_km_by_tracks: Cost of one kilometre, indexed by the
            number of tracks of the line.

    Raises:
        ConfigurationError: When applied to a line whose track count has
            no entry in the table.
    """
    costs = tuple(cost_per_km_by_tracks)

    def weight(line: Line) -> Weight:
        if not 0 <= line.tracks < len(costs):
            raise ConfigurationError(
                f"No renovation cost for {line.tracks} tracks",
                setting_name="cost_per_km_by_tracks",
            )
        return costs[line.tracks] * line.length_km

    return weight


def closing_city(city_index: int, weight: LineWeight) -> LineWeight:
    """Wrap ``weight`` so every line touching ``city_index`` costs INFINITY.

    The city stays in the graph; no finite path can go through it.
    """

    def closed_weight(line: Line) -> Weight:
        if line.touches(city_index):
            return INFINITY
        return weight(line)

    return closed_weight


class TrainNetworkView:
    """WeightedGraph over a TrainNetwork.

    Cities are the vertices. Each line yields one edge per direction
    in ``for_each_adjacent_edge``. ``for_each_edge`` yields both
    directions for a directed view, and the canonical direction
    (first city -> second city) only for an undirected one.
    """

    def __init__(
        self,
        network: TrainNetwork,
        weight: LineWeight = by_length,
        directed: bool = True,
    ) -> None:
        self.network = network
        self.weight = weight
        self.directed = directed

    def vertex_count(self) -> int:
        return self.network.city_count

    def for_each_vertex(self, visit: VertexVisitor) -> None:
        for v in range(self.vertex_count()):
            visit(v)

    def for_each_adjacent_edge(self, vertex: int, visit: EdgeVisitor) -> None:
        check_vertex(vertex, self.vertex_count())
        for line in self.network.lines:
            if line.first == vertex:
                visit(WeightedEdge(line.first, line.second, self.weight(line)))
            elif line.second == vertex:
                visit(WeightedEdge(line.second, line.first, self.weight(line)))

    def for_each_edge(self, visit: EdgeVisitor) -> None:
        for line in self.network.lines:
            edge = WeightedEdge(line.first, line.second, self.weight(line))
            visit(edge)
            if self.directed:
                visit(edge.reversed())
