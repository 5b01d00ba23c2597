"""
Blizzard API Port - Interface for calling the Battle.net REST and OAuth endpoints.

This port defines the contract for accessing Blizzard's Battle.net API.
The adapter implementation handles request construction, OAuth2 flows and
transport errors; response bodies are returned as raw text and decoding is
left to the caller.
"""

from abc import ABC, abstractmethod
from typing import Any, Mapping, Optional

from domain.models import ApiRequestData


class BlizzardAPIPort(ABC):
    """
    Abstract interface for Blizzard API access.

    All methods are synchronous and perform at most the network calls they
    document. The adapter is responsible for:
    - OAuth2 client-credentials and authorization-code flows
    - Resolving endpoint templates against the configured region
    - Raising ConfigurationError / ApiError on invalid input or failed calls
    """

    # =========================================================================
    # Context Manager
    # =========================================================================

    @abstractmethod
    def __enter__(self) -> "BlizzardAPIPort":
        """Enter context - return the ready client."""
        pass

    @abstractmethod
    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        """Exit context - release the HTTP connection pool."""
        pass

    # =========================================================================
    # REST
    # =========================================================================

    @abstractmethod
    def api(self, endpoint: str, data: Optional[ApiRequestData] = None) -> str:
        """
        Call a REST endpoint of the configured region.

        Args:
            endpoint: Path template, placeholders written as ``:name``
                (e.g. "/data/wow/item/:id").
            data: Optional ``replacement``, ``namespace`` and ``search`` entries.

        Returns:
            Raw response body.
        """
        pass

    # =========================================================================
    # OAuth
    # =========================================================================

    @abstractmethod
    def oauth(self, endpoint: str, data: Optional[Mapping[str, Any]] = None) -> str:
        """
        Call one of the OAuth endpoints.

        Args:
            endpoint: One of "/oauth/authorize", "/oauth/token",
                "/oauth/userinfo" or "/oauth/check_token".
            data: Endpoint-specific fields.

        Returns:
            The authorization URL for "/oauth/authorize", otherwise the raw response body.
        """
        pass
