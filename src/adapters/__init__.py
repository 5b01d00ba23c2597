"""Adapters (implementations) for the hexagonal architecture."""

from adapters.blizzard_api.client import BlizzardClient

__all__ = [
    "BlizzardClient",
]
