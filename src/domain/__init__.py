"""Domain models for the Blizzard API client."""

from domain.errors import ApiError, BlizzardClientError, ConfigurationError
from domain.models import (
    HOSTS,
    LOCALES,
    ApiRequestData,
    Locale,
    OAuthEndpoint,
    Region,
    RegionHosts,
    RequestSpec,
)

__all__ = [
    "HOSTS",
    "LOCALES",
    "ApiRequestData",
    "Locale",
    "OAuthEndpoint",
    "Region",
    "RegionHosts",
    "RequestSpec",
    "ApiError",
    "BlizzardClientError",
    "ConfigurationError",
]
