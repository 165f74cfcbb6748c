"""Graph ports - Abstractions for shortest-path computation.

These protocols define the contract between the network facade and
the routing engine. The engine reads the adjacency store and never
mutates it.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Dict, List, Protocol, Tuple

if TYPE_CHECKING:
    from ..domain.models import Distance, StationId
    from ..graph.adjacency import AdjacencyStore


class ShortestPathPort(Protocol):
    """Port for single-source shortest-path computation.

    Implementation: adapters/graph/dijkstra_solver.py
    """

    def distances_from(
        self,
        adjacency: AdjacencyStore,
        source: StationId,
    ) -> Dict[StationId, Distance]:
        """Compute the minimal distance from ``source`` to every station.

        Args:
            adjacency: The network's adjacency store (read only).
            source: Identity of the departure station.

        Returns:
            Mapping of every known station to its minimal distance, or
            UNREACHABLE if no path exists.
        """
        ...

    def shortest_route(
        self,
        adjacency: AdjacencyStore,
        source: StationId,
        destination: StationId,
    ) -> Tuple[List[StationId], Distance]:
        """Find the shortest path between two stations.

        Args:
            adjacency: The network's adjacency store (read only).
            source: Identity of the departure station.
            destination: Identity of the arrival station.

        Returns:
            The stations along the path (inclusive) and its length, or
            ``([], UNREACHABLE)`` if no path exists.
        """
        ...
