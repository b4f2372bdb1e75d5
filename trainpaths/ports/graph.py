"""Graph ports - Abstractions for graph traversal and network loading.

These protocols define the contracts the shortest-path and spanning
tree engines depend on. The engines never read dataset fields directly:
they only walk a WeightedGraph, whatever backs it.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Optional, Protocol, Sequence

if TYPE_CHECKING:
    from ..domain.models import City, TrainNetwork, WeightedEdge
    from ..graph.paths import ShortestPathResult

VertexVisitor = Callable[[int], None]
EdgeVisitor = Callable[["WeightedEdge"], None]


class WeightedGraph(Protocol):
    """Read-only view over a weighted graph.

    Implementations:
    - graph/views.py (TrainNetworkView) - train network projections
    - graph/edge_list.py (EdgeListGraph) - plain edge lists

    Vertices are the dense indices ``0 .. vertex_count() - 1``. A view
    owns its weight policy: two views over the same data may expose
    different weights for the same line.
    """

    def vertex_count(self) -> int:
        """Return the number of vertices."""
        ...

    def for_each_vertex(self, visit: VertexVisitor) -> None:
        """Call ``visit(v)`` once per vertex, in ascending order."""
        ...

    def for_each_adjacent_edge(self, vertex: int, visit: EdgeVisitor) -> None:
        """Call ``visit(edge)`` for every edge leaving ``vertex``.

        Order follows the backing data, so it is stable for a given
        dataset.

        Raises:
            InvalidVertexError: If ``vertex`` is out of range.
        """
        ...

    def for_each_edge(self, visit: EdgeVisitor) -> None:
        """Call ``visit(edge)`` for every edge of the graph.

        Undirected views yield each edge once, in canonical direction;
        directed views yield one edge per direction.
        """
        ...


# Signature shared by dijkstra() and bellman_ford()
ShortestPathAlgorithm = Callable[["WeightedGraph", int], "ShortestPathResult"]


class NetworkRepositoryPort(Protocol):
    """Port for loading the train network.

    Implementation: adapters/network/csv_repository.py

    The repository is responsible for loading and caching the
    network from persistent storage.
    """

    def load(self) -> TrainNetwork:
        """Load the train network.

        Returns:
            The network with its cities and lines.
        """
        ...

    def get_city(self, name: str) -> Optional[City]:
        """Get a city by name.

        Args:
            name: The city name (e.g., 'Geneve').

        Returns:
            The city, or None if not found.
        """
        ...

    def list_cities(self) -> Sequence[City]:
        """List all cities in vertex order."""
        ...
