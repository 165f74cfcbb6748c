"""Centralized configuration using Pydantic Settings.

Configuration can be overridden via environment variables:
- METRO_NETWORK_FARE_MULTIPLIER=3
- METRO_NETWORK_INDEX_BACKEND=sorted_list
- METRO_SHELL_SEED_DEMO=false
- METRO_LOG_LEVEL=DEBUG
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class NetworkConfig(BaseSettings):
    """Network and fare policy configuration.

    Environment variables prefixed with METRO_NETWORK_.
    """

    model_config = SettingsConfigDict(env_prefix="METRO_NETWORK_")

    fare_multiplier: int = Field(default=2, ge=0)
    index_backend: Literal["bst", "sorted_list"] = "bst"


class ShellConfig(BaseSettings):
    """Interactive shell configuration.

    Environment variables prefixed with METRO_SHELL_.
    """

    model_config = SettingsConfigDict(env_prefix="METRO_SHELL_")

    seed_demo: bool = True


class ObservabilityConfig(BaseSettings):
    """Logging configuration.

    Environment variables prefixed with METRO_LOG_.
    """

    model_config = SettingsConfigDict(env_prefix="METRO_LOG_")

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class AppConfig(BaseSettings):
    """Main application configuration aggregating all sub-configs.

        config = get_config()
        print(config.network.fare_multiplier)

    Environment variables prefixed with METRO_.
    """

    model_config = SettingsConfigDict(env_prefix="METRO_")

    network: NetworkConfig = Field(default_factory=NetworkConfig)
    shell: ShellConfig = Field(default_factory=ShellConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)


@lru_cache(maxsize=1)
def get_config() -> AppConfig:
    """Get the singleton application configuration.

    Configuration is loaded once and cached. To reload configuration
    (e.g., in tests), use reset_config() first.
    """
    return AppConfig()


def reset_config() -> None:
    """Reset the configuration cache."""
    get_config.cache_clear()
