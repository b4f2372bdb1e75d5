"""Minimum spanning trees: Kruskal and eager Prim.

Both algorithms expect an undirected view, i.e. one whose
``for_each_edge`` yields every edge once and whose
``for_each_adjacent_edge`` exposes it from both endpoints. On a
disconnected graph they return a spanning forest, so callers compare
the edge count with ``V - 1`` to tell the two apart.
"""

from __future__ import annotations

import heapq
import logging
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional, Tuple

from ..domain.models import Weight, WeightedEdge
from ..ports.graph import WeightedGraph
from .paths import INFINITY, check_vertex

logger = logging.getLogger(__name__)


class UnionFind:
    """Disjoint sets over ``0 .. size - 1``.

    Path compression plus union by rank make both operations nearly
    O(1) amortized.
    """

    def __init__(self, size: int) -> None:
        self.parent: List[int] = list(range(size))
        self.rank: List[int] = [0] * size
        self.count = size

    def find(self, x: int) -> int:
        root = x
        while self.parent[root] != root:
            root = self.parent[root]
        # compress
        while self.parent[x] != root:
            self.parent[x], x = root, self.parent[x]
        return root

    def connected(self, a: int, b: int) -> bool:
        return self.find(a) == self.find(b)

    def union(self, a: int, b: int) -> bool:
        """Merge the sets of ``a`` and ``b``; False if already merged."""
        ra, rb = self.find(a), self.find(b)
        if ra == rb:
            return False
        if self.rank[ra] < self.rank[rb]:
            ra, rb = rb, ra
        self.parent[rb] = ra
        if self.rank[ra] == self.rank[rb]:
            self.rank[ra] += 1
        self.count -= 1
        return True


@dataclass(frozen=True)
class MinimumSpanningTree:
    """Edges of a minimum spanning tree (or forest), in selection order."""

    edges: Tuple[WeightedEdge, ...] = field(default_factory=tuple)

    @property
    def total_weight(self) -> Weight:
        return sum(edge.weight for edge in self.edges)

    @property
    def edge_count(self) -> int:
        return len(self.edges)

    def is_spanning(self, vertex_count: int) -> bool:
        """Check if the edges connect all ``vertex_count`` vertices."""
        return self.edge_count == max(vertex_count - 1, 0)


def kruskal(graph: WeightedGraph) -> MinimumSpanningTree:
    """Compute a minimum spanning tree with Kruskal's algorithm.

    Edges are taken by increasing ``(weight, from_vertex, to_vertex)``;
    an edge is kept unless its endpoints are already connected.
    """
    vertex_count = graph.vertex_count()
    candidates: List[WeightedEdge] = []
    graph.for_each_edge(candidates.append)
    candidates.sort(key=lambda e: (e.weight, e.from_vertex, e.to_vertex))

    components = UnionFind(vertex_count)
    selected: List[WeightedEdge] = []
    for edge in candidates:
        if len(selected) >= vertex_count - 1:
            break
        if components.union(edge.from_vertex, edge.to_vertex):
            selected.append(edge)

    logger.debug(
        "Kruskal finished",
        extra={"vertices": vertex_count, "tree_edges": len(selected)},
    )
    return MinimumSpanningTree(tuple(selected))


def eager_prim(graph: WeightedGraph, start: int = 0) -> MinimumSpanningTree:
    """Compute a minimum spanning tree with the eager version of Prim.

    For every vertex outside the tree, the cheapest edge linking it to
    the tree is kept up to date as vertices join; the closest vertex is
    added next. Once a tree can no longer grow, a new one is started
    from the lowest unvisited vertex.

    Raises:
        InvalidVertexError: If ``start`` is not a vertex (non-empty graph).
    """
    vertex_count = graph.vertex_count()
    if vertex_count == 0:
        return MinimumSpanningTree()
    check_vertex(start, vertex_count)

    edge_to: List[Optional[WeightedEdge]] = [None] * vertex_count
    dist_to: List[Weight] = [INFINITY] * vertex_count
    in_tree = [False] * vertex_count
    selected: List[WeightedEdge] = []
    heap: List[Tuple[Weight, int]] = []

    def scan(edge: WeightedEdge) -> None:
        w = edge.to_vertex
        if in_tree[w]:
            return
        if edge_to[w] is None or edge.weight < dist_to[w]:
            edge_to[w] = edge
            dist_to[w] = edge.weight
            heapq.heappush(heap, (edge.weight, w))

    roots = [start] + [v for v in range(vertex_count) if v != start]
    for root in roots:
        if in_tree[root]:
            continue
        dist_to[root] = 0
        heapq.heappush(heap, (0, root))
        while heap:
            weight, v = heapq.heappop(heap)
            if in_tree[v] or weight > dist_to[v]:
                continue
            in_tree[v] = True
            edge = edge_to[v]
            if edge is not None:
                selected.append(edge)
            graph.for_each_adjacent_edge(v, scan)

    logger.debug(
        "Eager Prim finished",
        extra={"vertices": vertex_count, "tree_edges": len(selected)},
    )
    return MinimumSpanningTree(tuple(selected))


MST_ALGORITHMS: Dict[str, Callable[[WeightedGraph], MinimumSpanningTree]] = {
    "kruskal": kruskal,
    "eager_prim": eager_prim,
}
