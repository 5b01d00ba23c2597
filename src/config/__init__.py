"""Configuration module for the Blizzard API client."""

from config.loader import (
    ClientConfig,
    Config,
    configuration_error,
    load_config,
)

__all__ = [
    "ClientConfig",
    "Config",
    "configuration_error",
    "load_config",
]
