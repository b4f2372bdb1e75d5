"""Ports layer - Abstract interfaces (Protocols) for the application.

Ports define the contracts between the algorithm core and the data it
runs on, so engines, loaders and services can be swapped and tested in
isolation.
"""

from .graph import (
    EdgeVisitor,
    NetworkRepositoryPort,
    ShortestPathAlgorithm,
    VertexVisitor,
    WeightedGraph,
)

__all__ = [
    "WeightedGraph",
    "VertexVisitor",
    "EdgeVisitor",
    "ShortestPathAlgorithm",
    "NetworkRepositoryPort",
]
