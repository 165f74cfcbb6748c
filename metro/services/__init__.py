"""Services layer - Application orchestration.

Available services:
- MetroNetworkService: Facade over stations, connections, fares and listing
"""

from .network_service import DEFAULT_FARE_MULTIPLIER, MetroNetworkService

__all__ = ["MetroNetworkService", "DEFAULT_FARE_MULTIPLIER"]
