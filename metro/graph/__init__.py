"""Graph state for the metro network.

This subpackage holds the mutable stores the network facade composes:
the station registry and the undirected adjacency store.
"""

from .adjacency import AdjacencyStore
from .registry import StationRegistry

__all__ = ["AdjacencyStore", "StationRegistry"]
