"""Domain layer - Core models and errors.

This module contains immutable domain models and typed errors
used throughout the application. No external dependencies.
"""

from .errors import (
    CityNotFoundError,
    ConfigurationError,
    InvalidVertexError,
    MalformedGraphError,
    NegativeCycleError,
    NegativeWeightError,
    NetworkLoadError,
    TrainPathsError,
    UnreachableVertexError,
)
from .models import (
    City,
    Itinerary,
    Line,
    RenovationItem,
    RenovationPlan,
    TrainNetwork,
    Weight,
    WeightedEdge,
)

__all__ = [
    # Models
    "WeightedEdge",
    "Weight",
    "City",
    "Line",
    "TrainNetwork",
    "Itinerary",
    "RenovationItem",
    "RenovationPlan",
    # Errors
    "TrainPathsError",
    "InvalidVertexError",
    "UnreachableVertexError",
    "MalformedGraphError",
    "NegativeWeightError",
    "NegativeCycleError",
    "NetworkLoadError",
    "CityNotFoundError",
    "ConfigurationError",
]
