"""Blizzard API adapters for the Battle.net REST and OAuth endpoints."""

from adapters.blizzard_api.base import BlizzardAPIClient
from adapters.blizzard_api.client import BlizzardClient

__all__ = [
    # Base client
    "BlizzardAPIClient",
    # REST and OAuth client
    "BlizzardClient",
]
