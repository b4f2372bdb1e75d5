"""Single-source shortest paths using the Bellman-Ford algorithm.

Negative edge weights are allowed. After ``k`` passes over every edge,
the distance of each vertex is exact for all paths of at most ``k``
edges, so ``V`` passes cover every simple path. A pass that changes
nothing ends the run early; a ``V``-th pass that still changes
something means a negative cycle is reachable from the source.
"""

import logging
from typing import List, Optional

from ..domain.errors import NegativeCycleError
from ..domain.models import Weight, WeightedEdge
from ..ports.graph import WeightedGraph
from .paths import INFINITY, ShortestPathResult, check_vertex

logger = logging.getLogger(__name__)


def bellman_ford(graph: WeightedGraph, source: int) -> ShortestPathResult:
    """Compute shortest paths from ``source`` on a graph with any weights.

    The source's last edge is the self-edge ``source -> source`` of
    weight 0.

    Raises:
        InvalidVertexError: If ``source`` is not a vertex of ``graph``.
        NegativeCycleError: If a negative cycle is reachable from ``source``.
    """
    vertex_count = graph.vertex_count()
    check_vertex(source, vertex_count)

    distances: List[Weight] = [INFINITY] * vertex_count
    edges: List[Optional[WeightedEdge]] = [None] * vertex_count
    distances[source] = 0
    edges[source] = WeightedEdge(source, source, 0)

    changed = False

    def relax(edge: WeightedEdge) -> None:
        nonlocal changed
        v, w = edge.from_vertex, edge.to_vertex
        if distances[v] == INFINITY:
            return
        distance_through_edge = distances[v] + edge.weight
        if distance_through_edge < distances[w]:
            distances[w] = distance_through_edge
            edges[w] = edge
            changed = True

    passes = 0
    for passes in range(1, vertex_count + 1):
        changed = False
        graph.for_each_edge(relax)
        if not changed:
            break
    else:
        if changed:
            raise NegativeCycleError(
                f"Negative cycle reachable from vertex {source}",
                algorithm="bellman_ford",
                source=source,
            )

    logger.debug(
        "Bellman-Ford finished",
        extra={"source": source, "vertices": vertex_count, "passes": passes},
    )
    return ShortestPathResult.freeze(source, distances, edges)
