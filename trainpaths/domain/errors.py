"""Typed domain errors for trainpaths.

Every error raised by the graph engines, the loaders and the planner
service inherits from TrainPathsError and can optionally wrap a root
cause exception for debugging.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Optional

if TYPE_CHECKING:
    from .models import WeightedEdge


@dataclass
class TrainPathsError(Exception):
    """Base error for the trainpaths domain.

    Attributes:
        message: Human-readable error description
        cause: Optional underlying exception that caused this error
    """

    message: str
    cause: Optional[Exception] = field(default=None, repr=False)

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def __post_init__(self) -> None:
        super().__init__(self.message)


@dataclass
class InvalidVertexError(TrainPathsError):
    """Vertex index outside ``[0, vertex_count)``.

    Attributes:
        vertex: The offending index
        vertex_count: Number of vertices of the queried graph
    """

    vertex: Any = None
    vertex_count: int = 0


@dataclass
class UnreachableVertexError(TrainPathsError):
    """Distance, edge or path requested for a vertex never reached.

    Attributes:
        vertex: The unreached vertex
        source: Source vertex of the shortest-path run
    """

    vertex: int = -1
    source: int = -1


@dataclass
class MalformedGraphError(TrainPathsError):
    """The graph violates a precondition of the algorithm run on it.

    Attributes:
        algorithm: Name of the algorithm that rejected the graph
    """

    algorithm: str = ""


@dataclass
class NegativeWeightError(MalformedGraphError):
    """Dijkstra met an edge with a negative weight.

    Attributes:
        edge: The negative edge
    """

    edge: Optional[WeightedEdge] = None


@dataclass
class NegativeCycleError(MalformedGraphError):
    """A negative cycle is reachable from the source.

    Attributes:
        source: Source vertex of the run
    """

    source: int = -1


@dataclass
class NetworkLoadError(TrainPathsError):
    """Network or graph file could not be loaded.

    Attributes:
        file_path: Path to the data file if relevant
    """

    file_path: Optional[str] = None


@dataclass
class CityNotFoundError(TrainPathsError):
    """City name not present in the train network.

    Attributes:
        city_name: The name that was looked up
    """

    city_name: str = ""


@dataclass
class ConfigurationError(TrainPathsError):
    """Invalid or missing configuration.

    Attributes:
        setting_name: Name of the problematic setting
        expected_type: Expected type or format
    """

    setting_name: str = ""
    expected_type: Optional[str] = None
