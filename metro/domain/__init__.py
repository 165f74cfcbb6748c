"""Domain layer - Core models and errors.

This module contains immutable domain models and typed errors
used throughout the application. No external dependencies.
"""

from .errors import (
    ConfigurationError,
    DuplicateStationError,
    InvalidWeightError,
    MetroNetworkError,
    NoRouteFoundError,
    NoSuchConnectionError,
    UnknownStationError,
)
from .models import (
    UNREACHABLE,
    Connection,
    Distance,
    NetworkEntry,
    RouteResult,
    Station,
    StationId,
    is_reachable,
)

__all__ = [
    # Models
    "Station",
    "StationId",
    "Connection",
    "NetworkEntry",
    "RouteResult",
    "Distance",
    "UNREACHABLE",
    "is_reachable",
    # Errors
    "MetroNetworkError",
    "DuplicateStationError",
    "UnknownStationError",
    "NoSuchConnectionError",
    "NoRouteFoundError",
    "InvalidWeightError",
    "ConfigurationError",
]
