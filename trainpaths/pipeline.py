"""Console report over the bundled train network.

The report is organized in several stages:

1. Cross-check of Dijkstra against Bellman-Ford on a sample digraph.
2. Cheapest renovation keeping every city connected (spanning tree).
3. Shortest route by length, then the same with a station closed.
4. Fastest routes through an intermediate city.

Each stage delegates to NetworkPlannerService or compare_shortest_paths;
this module only wires and prints.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, List, Optional, Union

from .config import AppConfig, ObservabilityConfig, get_config
from .container import Container
from .domain.errors import TrainPathsError
from .graph.edge_list import load_edge_list
from .services import (
    NetworkPlannerService,
    compare_shortest_paths,
    format_itinerary,
    format_renovation,
)

logger = logging.getLogger(__name__)


def configure_logging(config: Optional[ObservabilityConfig] = None) -> None:
    """Apply the logging level and format from configuration."""
    config = config or get_config().observability
    logging.basicConfig(level=config.level.upper(), format=config.format)


def report_comparison(edge_list_path: Union[str, Path]) -> str:
    """Compare both shortest-path engines from vertex 0 of an edge-list file."""
    path = Path(edge_list_path)
    graph = load_edge_list(path)
    comparison = compare_shortest_paths(graph, 0)

    lines = [
        f"Testing {path.name}",
        f"Bellman-Ford: {comparison.bellman_ford_seconds:.6f} seconds.",
        f"Dijkstra:     {comparison.dijkstra_seconds:.6f} seconds.",
    ]
    if comparison.agree:
        lines.append(" ... test succeeded")
    else:
        vertex, expected, actual = comparison.mismatches[0]
        lines.append(f"Oops: vertex {vertex} has {expected} != {actual}")
    return "\n".join(lines)


def build_report(planner: NetworkPlannerService, config: AppConfig) -> List[str]:
    """Answer every question of the report, one text block per question."""
    sections: List[str] = []

    def section(title: str, answer: Callable[[], str]) -> None:
        try:
            body = answer()
        except TrainPathsError as e:
            logger.warning("Report question failed", extra={"title": title})
            body = f"  Error: {e}"
        sections.append(f"{title}\n{body}\n")

    if config.network.edge_list_path.exists():
        section(
            "0. Dijkstra against Bellman-Ford",
            lambda: report_comparison(config.network.edge_list_path),
        )

    section(
        "1. Which lines should be renovated, and at what cost?",
        lambda: format_renovation(planner.cheapest_renovation()),
    )
    section(
        "2. Shortest route between Geneve and Coire",
        lambda: format_itinerary(planner.shortest_route("Geneve", "Coire")),
    )
    section(
        "3. Shortest route between Geneve and Coire, Sion station closed",
        lambda: format_itinerary(
            planner.shortest_route_avoiding("Geneve", "Coire", "Sion")
        ),
    )
    section(
        "4. Fastest route between Geneve and Coire through Brigue",
        lambda: format_itinerary(
            planner.fastest_route_via("Geneve", "Coire", "Brigue"), label="time"
        ),
    )
    section(
        "5. Fastest route between Lausanne and Zurich through Bale",
        lambda: format_itinerary(
            planner.fastest_route_via("Lausanne", "Zurich", "Bale"), label="time"
        ),
    )
    return sections


def run_pipeline(container: Optional[Container] = None) -> None:
    """Print the full report for the configured network."""
    container = container or Container.create_default()
    configure_logging(container.config.observability)

    planner = container.resolve(NetworkPlannerService)
    for block in build_report(planner, container.config):
        print(block)


if __name__ == "__main__":
    run_pipeline()
