"""Typed domain errors for the metro network.

Every facade operation reports failure by raising one of these errors.
They are all recoverable: the interactive shell turns them into a
message and re-prompts.

All errors inherit from MetroNetworkError and can optionally
wrap a root cause exception for debugging.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class MetroNetworkError(Exception):
    """Base error for the metro network domain.

    Attributes:
        message: Human-readable error description
        cause: Optional underlying exception that caused this error
    """

    message: str
    cause: Optional[Exception] = field(default=None, repr=False)

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def __post_init__(self) -> None:
        super().__init__(self.message)


@dataclass
class DuplicateStationError(MetroNetworkError):
    """A station with this name already exists.

    Attributes:
        station_name: The name that was already taken
    """

    station_name: str = ""


@dataclass
class UnknownStationError(MetroNetworkError):
    """Station name (or identity) not found in the network.

    Attributes:
        station_name: The name that could not be resolved
    """

    station_name: str = ""


@dataclass
class NoSuchConnectionError(MetroNetworkError):
    """No connection exists between the two stations.

    Attributes:
        station_a: First endpoint
        station_b: Second endpoint
    """

    station_a: str = ""
    station_b: str = ""


@dataclass
class NoRouteFoundError(MetroNetworkError):
    """No path exists between the requested stations.

    Attributes:
        departure: Departure station name
        arrival: Arrival station name
    """

    departure: str = ""
    arrival: str = ""


@dataclass
class InvalidWeightError(MetroNetworkError):
    """Connection distance is not a non-negative integer.

    Attributes:
        weight: The rejected value
    """

    weight: object = None


@dataclass
class ConfigurationError(MetroNetworkError):
    """Invalid or missing configuration.

    Attributes:
        setting_name: Name of the problematic setting
        expected_type: Expected type or format
    """

    setting_name: str = ""
    expected_type: Optional[str] = None
