"""Shortest-path result shared by the Dijkstra and Bellman-Ford engines.

An engine fills two per-vertex arrays during its run (best known
distance, last edge used) and freezes them into a ShortestPathResult.
Callers then query distances and rebuild paths from it.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from ..domain.errors import (
    InvalidVertexError,
    NegativeCycleError,
    UnreachableVertexError,
)
from ..domain.models import Weight, WeightedEdge

# Distance of a vertex not reached (yet) from the source.
INFINITY: float = math.inf


def check_vertex(vertex: int, vertex_count: int) -> None:
    """Raise InvalidVertexError unless ``0 <= vertex < vertex_count``."""
    if isinstance(vertex, bool) or not isinstance(vertex, int):
        raise InvalidVertexError(
            f"Vertex index must be an integer, got {vertex!r}",
            vertex=vertex,
            vertex_count=vertex_count,
        )
    if not 0 <= vertex < vertex_count:
        raise InvalidVertexError(
            f"Vertex {vertex} outside [0, {vertex_count})",
            vertex=vertex,
            vertex_count=vertex_count,
        )


@dataclass(frozen=True)
class ShortestPathResult:
    """Single-source shortest paths computed on a graph.

    Attributes:
        source: The vertex the paths start from
        distances: Best known distance per vertex (INFINITY if unreached)
        edges: Last edge on the best known path per vertex (None if unset)
    """

    source: int
    distances: Tuple[Weight, ...]
    edges: Tuple[Optional[WeightedEdge], ...]

    @classmethod
    def freeze(
        cls,
        source: int,
        distances: Sequence[Weight],
        edges: Sequence[Optional[WeightedEdge]],
    ) -> ShortestPathResult:
        """Build a result from the mutable arrays of an engine run."""
        return cls(source=source, distances=tuple(distances), edges=tuple(edges))

    @property
    def vertex_count(self) -> int:
        return len(self.distances)

    def has_path_to(self, vertex: int) -> bool:
        """Check if ``vertex`` was reached from the source.

        Raises:
            InvalidVertexError: If ``vertex`` is out of range.
        """
        check_vertex(vertex, self.vertex_count)
        return self.distances[vertex] != INFINITY

    def distance_to(self, vertex: int) -> Weight:
        """Return the length of the shortest path from the source.

        Raises:
            InvalidVertexError: If ``vertex`` is out of range.
            UnreachableVertexError: If ``vertex`` was never reached.
        """
        if not self.has_path_to(vertex):
            raise self._unreachable(vertex)
        return self.distances[vertex]

    def edge_to(self, vertex: int) -> WeightedEdge:
        """Return the last edge of the shortest path to ``vertex``.

        Raises:
            InvalidVertexError: If ``vertex`` is out of range.
            UnreachableVertexError: If no edge was recorded for ``vertex``.
        """
        check_vertex(vertex, self.vertex_count)
        edge = self.edges[vertex]
        if edge is None and vertex == self.source:
            raise UnreachableVertexError(
                f"No edge recorded for source vertex {vertex}",
                vertex=vertex,
                source=self.source,
            )
        if edge is None:
            raise self._unreachable(vertex)
        return edge

    def path_to(self, vertex: int) -> List[WeightedEdge]:
        """Return the edges of the shortest path from the source to ``vertex``.

        The list is empty when ``vertex`` is the source.

        Raises:
            InvalidVertexError: If ``vertex`` is out of range.
            UnreachableVertexError: If ``vertex`` was never reached.
            NegativeCycleError: If following the recorded edges never
                leads back to the source.
        """
        if not self.has_path_to(vertex):
            raise self._unreachable(vertex)

        path: List[WeightedEdge] = []
        current = vertex
        while current != self.source:
            if len(path) >= self.vertex_count:
                raise NegativeCycleError(
                    f"Path to {vertex} loops without reaching source {self.source}",
                    source=self.source,
                )
            edge = self.edge_to(current)
            path.append(edge)
            current = edge.from_vertex

        path.reverse()
        return path

    def vertices_to(self, vertex: int) -> List[int]:
        """Return the vertices of the shortest path, source and ``vertex`` included."""
        path = self.path_to(vertex)
        if not path:
            return [self.source]
        return [path[0].from_vertex] + [edge.to_vertex for edge in path]

    def _unreachable(self, vertex: int) -> UnreachableVertexError:
        return UnreachableVertexError(
            f"Vertex {vertex} is not reachable from {self.source}",
            vertex=vertex,
            source=self.source,
        )
