"""Services layer - Application orchestration.

Available services:
- NetworkPlannerService: Route and renovation queries on the train network
- compare_shortest_paths: Cross-check of Dijkstra against Bellman-Ford
"""

from .comparison import AlgorithmComparison, compare_shortest_paths
from .network_planner import (
    NetworkPlannerService,
    format_itinerary,
    format_renovation,
    to_itinerary,
)

__all__ = [
    "NetworkPlannerService",
    "to_itinerary",
    "format_itinerary",
    "format_renovation",
    "AlgorithmComparison",
    "compare_shortest_paths",
]
