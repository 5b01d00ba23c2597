"""Ports (interfaces) for the hexagonal architecture."""

from ports.blizzard_api import BlizzardAPIPort

__all__ = [
    "BlizzardAPIPort",
]
