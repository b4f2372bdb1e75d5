"""Graph algorithms over WeightedGraph views.

This subpackage holds the views that expose the train network (or a
plain edge list) as a weighted graph, and the engines that run on any
such view: Dijkstra and Bellman-Ford for shortest paths, Kruskal and
eager Prim for minimum spanning trees.
"""

from typing import Dict

from ..ports.graph import ShortestPathAlgorithm
from .bellman_ford import bellman_ford
from .dijkstra import dijkstra
from .edge_list import EdgeListGraph, load_edge_list
from .mst import MST_ALGORITHMS, MinimumSpanningTree, UnionFind, eager_prim, kruskal
from .paths import INFINITY, ShortestPathResult
from .views import (
    TrainNetworkView,
    by_duration,
    by_length,
    closing_city,
    renovation_cost,
)

SHORTEST_PATH_ALGORITHMS: Dict[str, ShortestPathAlgorithm] = {
    "dijkstra": dijkstra,
    "bellman_ford": bellman_ford,
}

__all__ = [
    "INFINITY",
    "ShortestPathResult",
    "dijkstra",
    "bellman_ford",
    "SHORTEST_PATH_ALGORITHMS",
    "MinimumSpanningTree",
    "UnionFind",
    "kruskal",
    "eager_prim",
    "MST_ALGORITHMS",
    "EdgeListGraph",
    "load_edge_list",
    "TrainNetworkView",
    "by_length",
    "by_duration",
    "renovation_cost",
    "closing_city",
]
