"""Ports layer - Abstract interfaces (Protocols) for the application.

Ports define the contracts between the network facade and the
adapters that implement routing and ordered listing, so either side
can be swapped through the container.
"""

from .graph import ShortestPathPort
from .index import OrderedIndexPort

__all__ = [
    "ShortestPathPort",
    "OrderedIndexPort",
]
