"""Station registry.

The registry owns the set of live stations and issues their
identities. Other components only ever hold a StationId; a station is
resolved back to its name through the registry.
"""

from __future__ import annotations

import itertools
import logging
from dataclasses import dataclass, field
from typing import Dict, Iterator, Optional

from ..domain.errors import DuplicateStationError, UnknownStationError
from ..domain.models import Station, StationId


@dataclass
class StationRegistry:
    """Name -> identity lookup over the live stations.

    Identities come from a monotonic counter and are never reused, so a
    stale StationId can never silently resolve to a newer station.
    """

    _stations: Dict[StationId, Station] = field(default_factory=dict, repr=False)
    _by_name: Dict[str, StationId] = field(default_factory=dict, repr=False)
    _ids: Iterator[int] = field(default_factory=itertools.count, repr=False)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def add(self, name: str) -> StationId:
        """Register a new station.

        Args:
            name: The station name.

        Returns:
            The identity of the new station.

        Raises:
            DuplicateStationError: If a station with this name exists.
        """
        if name in self._by_name:
            raise DuplicateStationError(
                f"Station {name} already exists in the metro network",
                station_name=name,
            )

        station_id = StationId(next(self._ids))
        self._stations[station_id] = Station(id=station_id, name=name)
        self._by_name[name] = station_id
        self._logger.debug(
            "Station registered",
            extra={"station": name, "station_id": station_id},
        )
        return station_id

    def find(self, name: str) -> Optional[StationId]:
        """Look up a station identity by name, or None."""
        return self._by_name.get(name)

    def require(self, name: str) -> StationId:
        """Look up a station identity by name.

        Raises:
            UnknownStationError: If no station has this name.
        """
        station_id = self._by_name.get(name)
        if station_id is None:
            raise UnknownStationError(
                f"Station {name} not found in the metro network",
                station_name=name,
            )
        return station_id

    def remove(self, name: str) -> StationId:
        """Delete a station entry.

        The returned identity is no longer valid; the caller is
        responsible for purging it from every other component first.

        Raises:
            UnknownStationError: If no station has this name.
        """
        station_id = self.require(name)
        del self._by_name[name]
        del self._stations[station_id]
        self._logger.debug(
            "Station unregistered",
            extra={"station": name, "station_id": station_id},
        )
        return station_id

    def get(self, station_id: StationId) -> Station:
        """Resolve an identity to its station.

        Raises:
            UnknownStationError: If the identity is not live.
        """
        try:
            return self._stations[station_id]
        except KeyError as e:
            raise UnknownStationError(
                f"No live station with id {station_id}",
                station_name=str(station_id),
                cause=e,
            )

    def name_of(self, station_id: StationId) -> str:
        return self.get(station_id).name

    def __contains__(self, name: object) -> bool:
        return name in self._by_name

    def __iter__(self) -> Iterator[Station]:
        # Insertion order
        return iter(list(self._stations.values()))

    def __len__(self) -> int:
        return len(self._stations)
