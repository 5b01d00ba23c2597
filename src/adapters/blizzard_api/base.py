"""Base Blizzard API client with configuration, request dispatch and client-credentials authentication."""

import json
import logging
import ssl
from typing import Optional, Self

import certifi
import httpx
from authlib.oauth2.rfc6749 import OAuth2Token
from pydantic import ValidationError

from config.loader import ClientConfig, configuration_error
from domain.errors import ApiError
from domain.models import HOSTS, RegionHosts, RequestSpec

logger = logging.getLogger(__name__)

REQUEST_TIMEOUT = 5.0
TOKEN_PATH = "/oauth/token"


class BlizzardAPIClient:
    """Base client for Blizzard Battle.net API.

    This class provides the common functionality needed by the API client:
    - Validated configuration (credentials, region, locale, redirect URI)
    - Region host lookup
    - A single request dispatch point with a fixed timeout and trust anchor
    - OAuth2 client credentials token fetching

    The trust anchor is certifi's CA bundle, not a certificate pinned to the
    Blizzard hosts, so TLS verification follows the public CA chain.

    No token is cached: every call to ``_client_access_token`` performs a
    fresh token request.

    Usage:
        class MyClient(BlizzardAPIClient):
            def get_something(self) -> str:
                token = self._client_access_token()
                return self._send(RequestSpec(method="GET", url=..., headers=...))
    """

    def __init__(
        self,
        client_id: str,
        client_secret: str,
        region: str,
        locale: str = "",
        redirect_uri: str = "",
    ):
        """Initialize the client with OAuth credentials.

        Args:
            client_id: Your Battle.net API client ID.
            client_secret: Your Battle.net API client secret.
            region: API region ('us', 'eu', 'kr', 'tw', 'cn').
            locale: Locale for localized strings. Left unset when empty.
            redirect_uri: Redirect URI registered for the authorization code flow. Left unset when empty.

        Raises:
            ConfigurationError: If a supplied value is not valid.
        """
        try:
            self._config = ClientConfig(client_id=client_id, client_secret=client_secret, region=region)
        except ValidationError as exc:
            raise configuration_error(exc) from exc

        if locale:
            self.set_locale(locale)
        if redirect_uri:
            self.set_redirect_uri(redirect_uri)

        self._http = httpx.Client(
            timeout=REQUEST_TIMEOUT,
            verify=ssl.create_default_context(cafile=certifi.where()),
        )

    @classmethod
    def from_config(cls, config: ClientConfig) -> Self:
        """Build a client from an already validated configuration."""
        return cls(
            client_id=config.client_id,
            client_secret=config.client_secret.get_secret_value(),
            region=config.region,
            locale=config.locale or "",
            redirect_uri=config.redirect_uri or "",
        )

    def __enter__(self) -> Self:
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit."""
        self.close()

    def close(self) -> None:
        """Release the underlying HTTP connection pool."""
        self._http.close()

    # =========================================================================
    # Configuration
    # =========================================================================

    @property
    def client_id(self) -> str:
        return self._config.client_id

    @property
    def region(self) -> str:
        return self._config.region

    @property
    def locale(self) -> Optional[str]:
        return self._config.locale

    @property
    def redirect_uri(self) -> Optional[str]:
        return self._config.redirect_uri

    @property
    def hosts(self) -> RegionHosts:
        """REST and OAuth hosts of the configured region."""
        return HOSTS[self._config.region]

    def set_client_id(self, client_id: str) -> None:
        self._assign("client_id", client_id)

    def set_client_secret(self, client_secret: str) -> None:
        self._assign("client_secret", client_secret)

    def set_region(self, region: str) -> None:
        self._assign("region", region)

    def set_locale(self, locale: str) -> None:
        self._assign("locale", locale)

    def set_redirect_uri(self, redirect_uri: str) -> None:
        self._assign("redirect_uri", redirect_uri)

    def _assign(self, field: str, value: str) -> None:
        """Validate and store one configuration field.

        Raises:
            ConfigurationError: If the value does not match the field's format.
        """
        try:
            setattr(self._config, field, value)
        except ValidationError as exc:
            raise configuration_error(exc) from exc

    # =========================================================================
    # Transport
    # =========================================================================

    def _send(self, request: RequestSpec) -> str:
        """Send a request and return its body as text.

        Args:
            request: The request to send.

        Returns:
            Raw response body.

        Raises:
            ApiError: If the transport fails or the status is not 200.
        """
        logger.debug("%s %s", request.method, request.url)
        try:
            response = self._http.request(
                request.method,
                request.url,
                headers=request.headers,
                data=request.data,
                auth=request.auth,
            )
        except httpx.HTTPError as exc:
            logger.warning("Request to %s failed: %s", request.url, exc)
            raise ApiError(f"Blizzard API Error: {exc}", url=request.url) from exc

        if response.status_code != 200:
            logger.warning("Request to %s returned HTTP %s", request.url, response.status_code)
            raise ApiError(
                f"Blizzard API Error: {response.text}",
                status_code=response.status_code,
                body=response.text,
                url=request.url,
            )

        return response.text

    def _client_access_token(self) -> str:
        """Fetch an access token using the client credentials flow.

        Returns:
            The access token.

        Raises:
            ApiError: If the token request fails or its response carries no access token.
        """
        body = self._send(
            RequestSpec(
                method="POST",
                url=self.hosts.oauth + TOKEN_PATH,
                data={"grant_type": "client_credentials"},
                auth=(self._config.client_id, self._config.client_secret.get_secret_value()),
            )
        )

        try:
            token = OAuth2Token.from_dict(json.loads(body))
            access_token = token["access_token"]
        except (ValueError, TypeError, KeyError) as exc:
            raise ApiError("Blizzard API Error: token response has no access_token", status_code=200, body=body) from exc

        if not isinstance(access_token, str) or not access_token:
            raise ApiError("Blizzard API Error: token response has no access_token", status_code=200, body=body)

        logger.debug("Fetched client token, expires in %s seconds", token.get("expires_in"))
        return access_token
