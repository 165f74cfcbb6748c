"""Dijkstra shortest-path adapter.

Single-source shortest paths over the non-negatively weighted,
undirected metro network. The frontier is a ``heapq`` of
(distance, station) pairs; a station may be pushed several times and
stale entries are skipped when popped, instead of doing decrease-key.
"""

from __future__ import annotations

import heapq
import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from ...domain.errors import UnknownStationError
from ...domain.models import UNREACHABLE, Distance, StationId, is_reachable
from ...graph.adjacency import AdjacencyStore


@dataclass
class DijkstraShortestPathSolver:
    """Route solver using Dijkstra's shortest path algorithm.

    This adapter implements ShortestPathPort. It only reads the
    adjacency store.
    """

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def distances_from(
        self,
        adjacency: AdjacencyStore,
        source: StationId,
    ) -> Dict[StationId, Distance]:
        """Compute the minimal distance from source to every station.

        Args:
            adjacency: The network's adjacency store.
            source: Identity of the departure station.

        Returns:
            Every known station mapped to its distance, UNREACHABLE for
            stations with no path from source.

        Raises:
            UnknownStationError: If source is not in the store.
        """
        distances, _ = self._dijkstra(adjacency, source)
        self._logger.debug(
            "Distances computed",
            extra={
                "source": source,
                "reachable": sum(1 for d in distances.values() if is_reachable(d)),
            },
        )
        return distances

    def shortest_route(
        self,
        adjacency: AdjacencyStore,
        source: StationId,
        destination: StationId,
    ) -> Tuple[List[StationId], Distance]:
        """Find the shortest path between two stations.

        Args:
            adjacency: The network's adjacency store.
            source: Identity of the departure station.
            destination: Identity of the arrival station.

        Returns:
            The stations along the path (inclusive) and its length, or
            ``([], UNREACHABLE)`` if no path exists.

        Raises:
            UnknownStationError: If either station is not in the store.
        """
        if destination not in adjacency:
            raise UnknownStationError(
                f"No live station with id {destination}",
                station_name=str(destination),
            )

        distances, previous = self._dijkstra(adjacency, source, stop_at=destination)

        if not is_reachable(distances[destination]):
            return [], UNREACHABLE

        path: List[StationId] = [destination]
        while path[-1] != source:
            path.append(previous[path[-1]])
        path.reverse()

        self._logger.debug(
            "Route found",
            extra={
                "source": source,
                "destination": destination,
                "stops": len(path),
                "distance": distances[destination],
            },
        )
        return path, distances[destination]

    def _dijkstra(
        self,
        adjacency: AdjacencyStore,
        source: StationId,
        stop_at: Optional[StationId] = None,
    ) -> Tuple[Dict[StationId, Distance], Dict[StationId, StationId]]:
        """Core Dijkstra relaxation loop.

        When ``stop_at`` is given the loop ends as soon as that station
        is settled; distances of stations not yet settled are then
        upper bounds only.
        """
        if source not in adjacency:
            raise UnknownStationError(
                f"No live station with id {source}",
                station_name=str(source),
            )

        distances: Dict[StationId, Distance] = {
            station: UNREACHABLE for station in adjacency.stations()
        }
        previous: Dict[StationId, StationId] = {}
        distances[source] = 0

        heap: List[Tuple[Distance, StationId]] = [(0, source)]

        while heap:
            current_distance, u = heapq.heappop(heap)

            if current_distance > distances[u]:
                # Stale entry, u was already settled with a shorter distance
                continue

            if u == stop_at:
                break

            for v, weight in adjacency.neighbors_of(u):
                new_distance = current_distance + weight
                if new_distance < distances[v]:
                    distances[v] = new_distance
                    previous[v] = u
                    heapq.heappush(heap, (new_distance, v))

        return distances, previous
