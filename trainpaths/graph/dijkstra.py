"""Single-source shortest paths using Dijkstra's algorithm.

Requires non-negative edge weights. The frontier is a binary heap of
``(distance, vertex)`` pairs, so among vertices at equal distance the
lowest index is finalized first. Ties are therefore deterministic for
a given graph, without being part of the contract.
"""

import heapq
import logging
from typing import List, Optional, Set, Tuple

from ..domain.errors import NegativeWeightError
from ..domain.models import Weight, WeightedEdge
from ..ports.graph import WeightedGraph
from .paths import INFINITY, ShortestPathResult, check_vertex

logger = logging.getLogger(__name__)


def dijkstra(graph: WeightedGraph, source: int) -> ShortestPathResult:
    """Compute shortest paths from ``source`` to every vertex of ``graph``.

    Parameters
    ----------
    graph:
        Any WeightedGraph view; all weights must be >= 0.
    source:
        Index of the departure vertex.

    Returns
    -------
    ShortestPathResult
        Distances and last edges for every vertex. Vertices not
        reachable from ``source`` keep an INFINITY distance.

    Raises
    ------
    InvalidVertexError
        If ``source`` is not a vertex of ``graph``.
    NegativeWeightError
        If an edge with a negative weight is met.
    """
    vertex_count = graph.vertex_count()
    check_vertex(source, vertex_count)

    distances: List[Weight] = [INFINITY] * vertex_count
    edges: List[Optional[WeightedEdge]] = [None] * vertex_count
    distances[source] = 0

    heap: List[Tuple[Weight, int]] = [(0, source)]
    finalized: Set[int] = set()
    relaxations = 0

    def relax(edge: WeightedEdge) -> None:
        nonlocal relaxations
        if edge.weight < 0:
            raise NegativeWeightError(
                f"Dijkstra requires non-negative weights, got {edge}",
                algorithm="dijkstra",
                edge=edge,
            )
        w = edge.to_vertex
        if w in finalized:
            return
        distance_through_edge = distances[edge.from_vertex] + edge.weight
        if distance_through_edge < distances[w]:
            distances[w] = distance_through_edge
            edges[w] = edge
            relaxations += 1
            heapq.heappush(heap, (distance_through_edge, w))

    while heap:
        current_distance, u = heapq.heappop(heap)

        # Stale entry: u was already finalized with a smaller distance
        if u in finalized or current_distance > distances[u]:
            continue

        finalized.add(u)
        graph.for_each_adjacent_edge(u, relax)

    logger.debug(
        "Dijkstra finished",
        extra={
            "source": source,
            "vertices": vertex_count,
            "reached": len(finalized),
            "relaxations": relaxations,
        },
    )
    return ShortestPathResult.freeze(source, distances, edges)
