"""Edge-list graphs and their text file loader.

The loader reads the classic edge-weighted digraph format::

    8
    15
    4 5 0.35
    5 4 0.35
    ...

i.e. the vertex count, the edge count, then one ``from to weight``
line per edge.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, List, Union

from ..domain.errors import InvalidVertexError, NetworkLoadError
from ..domain.models import WeightedEdge
from ..ports.graph import EdgeVisitor, VertexVisitor
from .paths import check_vertex

logger = logging.getLogger(__name__)


class EdgeListGraph:
    """Weighted graph stored as adjacency lists of WeightedEdge.

    Directed graphs list each edge under its origin only. Undirected
    graphs also list the reversed edge under the target, while
    ``for_each_edge`` still yields each input edge once.
    """

    def __init__(
        self,
        vertex_count: int,
        edges: Iterable[WeightedEdge] = (),
        directed: bool = True,
    ) -> None:
        if vertex_count < 0:
            raise ValueError(f"vertex_count must be >= 0, got {vertex_count}")
        self.directed = directed
        self._vertex_count = vertex_count
        self._edges: List[WeightedEdge] = []
        self._adjacency: List[List[WeightedEdge]] = [[] for _ in range(vertex_count)]
        for edge in edges:
            self.add_edge(edge)

    def add_edge(self, edge: WeightedEdge) -> None:
        check_vertex(edge.from_vertex, self._vertex_count)
        check_vertex(edge.to_vertex, self._vertex_count)
        self._edges.append(edge)
        self._adjacency[edge.from_vertex].append(edge)
        if not self.directed and edge.from_vertex != edge.to_vertex:
            self._adjacency[edge.to_vertex].append(edge.reversed())

    def vertex_count(self) -> int:
        return self._vertex_count

    def edge_count(self) -> int:
        return len(self._edges)

    def for_each_vertex(self, visit: VertexVisitor) -> None:
        for v in range(self._vertex_count):
            visit(v)

    def for_each_adjacent_edge(self, vertex: int, visit: EdgeVisitor) -> None:
        check_vertex(vertex, self._vertex_count)
        for edge in self._adjacency[vertex]:
            visit(edge)

    def for_each_edge(self, visit: EdgeVisitor) -> None:
        for edge in self._edges:
            visit(edge)


def load_edge_list(path: Union[str, Path], directed: bool = True) -> EdgeListGraph:
    """Load an edge-weighted graph from a text file.

    Args:
        path: File in the ``V / E / from to weight`` format.
        directed: Build a directed graph (default) or an undirected one.

    Returns:
        The loaded graph.

    Raises:
        NetworkLoadError: If the file is missing or malformed.
    """
    file_path = Path(path)
    logger.debug("Loading edge list", extra={"path": str(file_path)})

    try:
        with file_path.open(encoding="utf-8") as f:
            tokens = f.read().split()

        vertex_count = int(tokens[0])
        edge_count = int(tokens[1])
        body = tokens[2:]
        if len(body) < 3 * edge_count:
            raise ValueError(
                f"expected {edge_count} edges, found {len(body) // 3}"
            )

        graph = EdgeListGraph(vertex_count, directed=directed)
        for i in range(edge_count):
            u, v, w = body[3 * i : 3 * i + 3]
            graph.add_edge(WeightedEdge(int(u), int(v), float(w)))
    except (OSError, IndexError, ValueError, InvalidVertexError) as e:
        raise NetworkLoadError(
            f"Failed to load edge list {file_path.name}",
            file_path=str(file_path),
            cause=e,
        )

    logger.info(
        "Edge list loaded",
        extra={"vertices": vertex_count, "edges": edge_count},
    )
    return graph
