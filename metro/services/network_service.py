"""Metro network service - the public facade over the graph engine.

Each public method is one user-facing action. Mutations coordinate the
registry, the adjacency store and the ordered index so that callers
never observe a state where they disagree; every precondition is
checked before the first store is touched.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, List

from ..domain.errors import (
    NoRouteFoundError,
    NoSuchConnectionError,
)
from ..domain.models import (
    Connection,
    Distance,
    NetworkEntry,
    RouteResult,
    StationId,
    is_reachable,
)
from ..graph.adjacency import AdjacencyStore
from ..graph.registry import StationRegistry
from ..ports.graph import ShortestPathPort
from ..ports.index import OrderedIndexPort

DEFAULT_FARE_MULTIPLIER = 2


@dataclass
class MetroNetworkService:
    """Facade over the station registry, adjacency store and index.

    Attributes:
        index: Name-ordered station index used for listing
        route_solver: Shortest-path engine
        fare_multiplier: Fare charged per unit of shortest distance
        registry: Station registry (owns station identities)
        adjacency: Undirected adjacency store
    """

    index: OrderedIndexPort
    route_solver: ShortestPathPort
    fare_multiplier: int = DEFAULT_FARE_MULTIPLIER
    registry: StationRegistry = field(default_factory=StationRegistry)
    adjacency: AdjacencyStore = field(default_factory=AdjacencyStore)

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def add_station(self, name: str) -> None:
        """Add a station with no connections.

        Raises:
            DuplicateStationError: If the name is already taken.
        """
        station_id = self.registry.add(name)
        self.adjacency.add_station(station_id)
        self.index.insert(name)
        self._logger.info("Station added", extra={"station": name})

    def remove_station(self, name: str) -> None:
        """Remove a station and every connection touching it.

        Raises:
            UnknownStationError: If no station has this name.
        """
        station_id = self.registry.require(name)
        self.adjacency.discard_station(station_id)
        self.index.remove(name)
        self.registry.remove(name)
        self._logger.info("Station removed", extra={"station": name})

    def add_connection(self, station_a: str, station_b: str, weight: int) -> None:
        """Connect two stations, overwriting any existing distance.

        Raises:
            UnknownStationError: If either station does not exist.
            InvalidWeightError: If weight is not a non-negative integer.
        """
        a = self.registry.require(station_a)
        b = self.registry.require(station_b)
        self.adjacency.connect(a, b, weight)
        self._logger.info(
            "Connection added",
            extra={"station_a": station_a, "station_b": station_b, "weight": weight},
        )

    def remove_connection(self, station_a: str, station_b: str) -> None:
        """Remove the connection between two stations.

        Raises:
            UnknownStationError: If either station does not exist.
            NoSuchConnectionError: If the stations are not connected.
        """
        a = self.registry.require(station_a)
        b = self.registry.require(station_b)
        try:
            self.adjacency.disconnect(a, b)
        except NoSuchConnectionError as e:
            raise NoSuchConnectionError(
                f"No connection found between {station_a} and {station_b}",
                station_a=station_a,
                station_b=station_b,
                cause=e,
            )
        self._logger.info(
            "Connection removed",
            extra={"station_a": station_a, "station_b": station_b},
        )

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def fare_between(self, source: str, destination: str) -> int:
        """Return the fare for the cheapest trip between two stations.

        The fare is the shortest distance times ``fare_multiplier``.

        Raises:
            UnknownStationError: If either station does not exist.
            NoRouteFoundError: If the stations are not connected at all.
        """
        distance = self.distance_between(source, destination)
        fare = distance * self.fare_multiplier
        self._logger.info(
            "Fare computed",
            extra={"source": source, "destination": destination, "fare": fare},
        )
        return fare

    def distance_between(self, source: str, destination: str) -> int:
        """Return the shortest distance between two stations.

        Raises:
            UnknownStationError: If either station does not exist.
            NoRouteFoundError: If no path exists.
        """
        source_id = self.registry.require(source)
        destination_id = self.registry.require(destination)

        distances = self.route_solver.distances_from(self.adjacency, source_id)
        distance = distances[destination_id]
        if not is_reachable(distance):
            raise NoRouteFoundError(
                f"No valid route between {source} and {destination}",
                departure=source,
                arrival=destination,
            )
        return int(distance)

    def distances_from(self, source: str) -> Dict[str, Distance]:
        """Return the shortest distance from ``source`` to every station.

        Unreachable stations map to UNREACHABLE.

        Raises:
            UnknownStationError: If the station does not exist.
        """
        source_id = self.registry.require(source)
        distances = self.route_solver.distances_from(self.adjacency, source_id)
        return {
            self.registry.name_of(station_id): distance
            for station_id, distance in distances.items()
        }

    def route_between(self, source: str, destination: str) -> RouteResult:
        """Return the stations along the shortest path between two stations.

        Raises:
            UnknownStationError: If either station does not exist.
            NoRouteFoundError: If no path exists.
        """
        source_id = self.registry.require(source)
        destination_id = self.registry.require(destination)

        path, distance = self.route_solver.shortest_route(
            self.adjacency, source_id, destination_id
        )
        route = RouteResult(
            path=tuple(self.registry.name_of(station_id) for station_id in path),
            total_distance=distance,
        )
        if route.is_empty:
            raise NoRouteFoundError(
                f"No valid route between {source} and {destination}",
                departure=source,
                arrival=destination,
            )
        return route

    def list_stations(self) -> List[str]:
        """Return station names in ascending lexicographic order."""
        return self.index.in_order()

    def dump_network(self) -> List[NetworkEntry]:
        """Return every station with its connections.

        Stations appear in the order they were added; each station's
        connections appear in the order they were first made.
        """
        return [
            NetworkEntry(
                station=station.name,
                connections=self._connections_of(station.id),
            )
            for station in self.registry
        ]

    def has_station(self, name: str) -> bool:
        return name in self.registry

    @property
    def station_count(self) -> int:
        return len(self.registry)

    def _connections_of(self, station_id: StationId) -> tuple[Connection, ...]:
        return tuple(
            Connection(neighbor=self.registry.name_of(neighbor), weight=weight)
            for neighbor, weight in self.adjacency.neighbors_of(station_id)
        )
