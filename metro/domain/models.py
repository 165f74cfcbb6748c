"""Immutable domain models for the metro network.

Stations are referred to by a registry-issued integer identity rather
than by holding references to each other. The models below are the
values handed back to callers; the mutable state lives in the
registry and the adjacency store.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import NewType, Union

StationId = NewType("StationId", int)

# Distance of a station that cannot be reached from the source.
UNREACHABLE: float = float("inf")

Distance = Union[int, float]


def is_reachable(distance: Distance) -> bool:
    """Return True unless ``distance`` is the unreachable sentinel."""
    return distance != UNREACHABLE


@dataclass(frozen=True, slots=True)
class Station:
    """A station of the network.

    Attributes:
        id: Identity issued by the station registry
        name: Unique, immutable station name
    """

    id: StationId
    name: str


@dataclass(frozen=True, slots=True)
class Connection:
    """One side of an undirected connection, as seen from a station.

    Attributes:
        neighbor: Name of the station at the other end
        weight: Distance in network units
    """

    neighbor: str
    weight: int


@dataclass(frozen=True, slots=True)
class NetworkEntry:
    """A station and its connections, used to display the network."""

    station: str
    connections: tuple[Connection, ...] = field(default_factory=tuple)

    @property
    def degree(self) -> int:
        """Return the number of connections of this station."""
        return len(self.connections)


@dataclass(frozen=True, slots=True)
class RouteResult:
    """Result of route computation between stations.

    Attributes:
        path: Ordered tuple of station names forming the route
        total_distance: Total distance of the route
    """

    path: tuple[str, ...]
    total_distance: Distance

    @property
    def is_empty(self) -> bool:
        """Check if no route was found."""
        return len(self.path) == 0

    @property
    def num_stops(self) -> int:
        """Return the number of stops in the route."""
        return len(self.path)
