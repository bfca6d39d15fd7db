"""Configuration management for the UniFi Network client."""

from unifi_network.config.loader import ConfigurationError, load_config
from unifi_network.config.settings import (
    DEFAULT_PAGE_SIZE,
    MAX_PAGE_SIZE,
    ClientConfig,
    UnifiSettings,
)

__all__ = [
    "DEFAULT_PAGE_SIZE",
    "MAX_PAGE_SIZE",
    "ClientConfig",
    "ConfigurationError",
    "UnifiSettings",
    "load_config",
]
