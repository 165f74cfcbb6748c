"""Adjacency store for the undirected weighted network.

Each live station has a mapping neighbor -> weight. An undirected edge
is stored as two directed entries that are always written and removed
together, so ``weight(a, b) == weight(b, a)`` holds after every call.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional, Tuple

from ..domain.errors import (
    InvalidWeightError,
    NoSuchConnectionError,
    UnknownStationError,
)
from ..domain.models import StationId


@dataclass
class AdjacencyStore:
    """Per-station neighbor -> weight mappings keyed by StationId."""

    _neighbors: Dict[StationId, Dict[StationId, int]] = field(
        default_factory=dict, repr=False
    )
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def add_station(self, station_id: StationId) -> None:
        self._neighbors.setdefault(station_id, {})

    def connect(self, a: StationId, b: StationId, weight: int) -> None:
        """Create or overwrite the undirected edge a <-> b.

        Args:
            a: First endpoint.
            b: Second endpoint.
            weight: Non-negative integer distance.

        Raises:
            UnknownStationError: If either endpoint is not live.
            InvalidWeightError: If weight is not a non-negative integer.
        """
        self._require(a)
        self._require(b)
        # bool is an int subclass but never a distance
        if isinstance(weight, bool) or not isinstance(weight, int) or weight < 0:
            raise InvalidWeightError(
                f"Distance must be a non-negative integer, got {weight!r}",
                weight=weight,
            )

        self._neighbors[a][b] = weight
        self._neighbors[b][a] = weight
        self._logger.debug(
            "Edge set",
            extra={"station_a": a, "station_b": b, "weight": weight},
        )

    def disconnect(self, a: StationId, b: StationId) -> None:
        """Remove the undirected edge a <-> b.

        Both directed entries must exist; otherwise nothing is touched.

        Raises:
            UnknownStationError: If either endpoint is not live.
            NoSuchConnectionError: If the edge is missing on either side.
        """
        self._require(a)
        self._require(b)
        if b not in self._neighbors[a] or a not in self._neighbors[b]:
            raise NoSuchConnectionError(
                f"No connection found between {a} and {b}",
                station_a=str(a),
                station_b=str(b),
            )

        del self._neighbors[a][b]
        if a != b:
            del self._neighbors[b][a]
        self._logger.debug("Edge removed", extra={"station_a": a, "station_b": b})

    def neighbors_of(self, station_id: StationId) -> List[Tuple[StationId, int]]:
        """Return (neighbor, weight) pairs in first-connection order."""
        return list(self._require(station_id).items())

    def weight(self, a: StationId, b: StationId) -> Optional[int]:
        return self._neighbors.get(a, {}).get(b)

    def has_edge(self, a: StationId, b: StationId) -> bool:
        return self.weight(a, b) is not None

    def remove_all_edges_touching(self, station_id: StationId) -> int:
        """Drop every edge incident to ``station_id``.

        Every other station's mapping is scanned, not just the recorded
        neighbors, so no reference survives even if symmetry was broken.

        Returns:
            Number of directed entries removed from other stations.
        """
        removed = 0
        for other, neighbors in self._neighbors.items():
            if other != station_id and neighbors.pop(station_id, None) is not None:
                removed += 1
        if station_id in self._neighbors:
            self._neighbors[station_id].clear()
        return removed

    def discard_station(self, station_id: StationId) -> None:
        """Forget a station together with all edges touching it."""
        self.remove_all_edges_touching(station_id)
        self._neighbors.pop(station_id, None)

    def stations(self) -> List[StationId]:
        return list(self._neighbors)

    def edge_count(self) -> int:
        """Number of undirected edges (self-loops count once)."""
        directed = 0
        loops = 0
        for station_id, neighbors in self._neighbors.items():
            directed += len(neighbors)
            if station_id in neighbors:
                loops += 1
        return (directed - loops) // 2 + loops

    def __contains__(self, station_id: object) -> bool:
        return station_id in self._neighbors

    def __iter__(self) -> Iterator[StationId]:
        return iter(self.stations())

    def _require(self, station_id: StationId) -> Dict[StationId, int]:
        try:
            return self._neighbors[station_id]
        except KeyError as e:
            raise UnknownStationError(
                f"No live station with id {station_id}",
                station_name=str(station_id),
                cause=e,
            )
