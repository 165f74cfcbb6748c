"""Metro network: stations, connections, shortest paths and fares.

The package models a transit network as a weighted undirected graph.
``MetroNetworkService`` is the entry point; ``metro.shell`` wraps it in
an interactive menu.
"""

from .domain import (
    UNREACHABLE,
    DuplicateStationError,
    MetroNetworkError,
    NoRouteFoundError,
    NoSuchConnectionError,
    UnknownStationError,
)
from .services import MetroNetworkService

__version__ = "0.1.0"

__all__ = [
    "MetroNetworkService",
    "MetroNetworkError",
    "DuplicateStationError",
    "UnknownStationError",
    "NoSuchConnectionError",
    "NoRouteFoundError",
    "UNREACHABLE",
]
