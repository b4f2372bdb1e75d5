"""Cross-check of the two shortest-path engines on one graph.

Bellman-Ford serves as the reference: on a graph without negative
weights Dijkstra must find the same distance for every vertex.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from typing import List, Tuple

from ..domain.models import Weight
from ..graph.bellman_ford import bellman_ford
from ..graph.dijkstra import dijkstra
from ..ports.graph import WeightedGraph

logger = logging.getLogger(__name__)

Mismatch = Tuple[int, Weight, Weight]


@dataclass(frozen=True)
class AlgorithmComparison:
    """Outcome of running both engines from the same source.

    Attributes:
        source: Source vertex of both runs
        bellman_ford_seconds: Wall time of the Bellman-Ford run
        dijkstra_seconds: Wall time of the Dijkstra run
        mismatches: (vertex, bellman_ford_distance, dijkstra_distance)
    """

    source: int
    bellman_ford_seconds: float
    dijkstra_seconds: float
    mismatches: Tuple[Mismatch, ...] = field(default_factory=tuple)

    @property
    def agree(self) -> bool:
        return not self.mismatches


def compare_shortest_paths(graph: WeightedGraph, source: int = 0) -> AlgorithmComparison:
    """Run Bellman-Ford then Dijkstra from ``source`` and compare distances.

    Unreached vertices compare equal when both engines leave them at
    INFINITY.
    """
    start = time.perf_counter()
    reference = bellman_ford(graph, source)
    bellman_ford_seconds = time.perf_counter() - start

    start = time.perf_counter()
    candidate = dijkstra(graph, source)
    dijkstra_seconds = time.perf_counter() - start

    mismatches: List[Mismatch] = [
        (v, expected, actual)
        for v, (expected, actual) in enumerate(
            zip(reference.distances, candidate.distances)
        )
        if expected != actual
    ]

    if mismatches:
        logger.warning(
            "Shortest-path engines disagree",
            extra={"source": source, "mismatches": len(mismatches)},
        )
    logger.info(
        "Shortest-path engines compared",
        extra={
            "bellman_ford_seconds": bellman_ford_seconds,
            "dijkstra_seconds": dijkstra_seconds,
        },
    )
    return AlgorithmComparison(
        source=source,
        bellman_ford_seconds=bellman_ford_seconds,
        dijkstra_seconds=dijkstra_seconds,
        mismatches=tuple(mismatches),
    )
