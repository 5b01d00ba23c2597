"""Blizzard API client adapter for the Battle.net REST and OAuth endpoints."""

import logging
from typing import Any, Callable, Mapping, Optional

from authlib.common.urls import add_params_to_uri
from authlib.oauth2.rfc6749.util import list_to_scope

from adapters.blizzard_api.base import BlizzardAPIClient
from adapters.blizzard_api.endpoints import build_query, resolve_path
from domain.errors import ConfigurationError
from domain.models import ApiRequestData, OAuthEndpoint, RequestSpec
from ports.blizzard_api import BlizzardAPIPort

logger = logging.getLogger(__name__)

# Query fields of the authorization URL that callers cannot override.
AUTHORIZE_FIXED_FIELDS = ("client_id", "response_type", "redirect_uri")


def _query_value(key: str, value: Any) -> Any:
    """Return ``value`` if it can be sent as a single query value."""
    if not isinstance(value, (str, bytes, int, float)):
        raise ConfigurationError(key, "expected a string, a number or a list of those")
    return value


class BlizzardClient(BlizzardAPIClient, BlizzardAPIPort):
    """Client for the Battle.net REST API and its OAuth2 endpoints.

    This adapter implements the BlizzardAPIPort interface. REST calls are
    authenticated with a client credentials token fetched for each call;
    the OAuth endpoints cover the authorization code flow.

    Usage:
        with BlizzardClient(client_id, client_secret, "eu", locale="en_GB") as client:
            body = client.api(
                "/data/wow/item/:id",
                {"replacement": {"id": 19019}, "namespace": "static"},
            )
            login_url = client.oauth("/oauth/authorize", {"scope": "openid"})
    """

    def api(self, endpoint: str, data: Optional[ApiRequestData] = None) -> str:
        """Call a REST endpoint.

        Args:
            endpoint: Path template with ``:name`` placeholders.
            data: Optional ``replacement``, ``namespace`` and ``search`` entries.

        Returns:
            Raw response body.

        Raises:
            ApiError: If the token fetch or the call itself fails.
        """
        data = data or {}
        path = resolve_path(endpoint, data.get("replacement"))
        query = build_query(
            self.region,
            self.locale,
            namespace=data.get("namespace"),
            search=data.get("search"),
        )

        return self._send(
            RequestSpec(
                method="GET",
                url=f"{self.hosts.api}{path}?{query}",
                headers={"Authorization": f"Bearer {self._client_access_token()}"},
            )
        )

    def oauth(self, endpoint: str, data: Optional[Mapping[str, Any]] = None) -> str:
        """Call an OAuth endpoint.

        Args:
            endpoint: One of the OAuthEndpoint paths.
            data: Endpoint-specific fields:
                - "/oauth/authorize": extra query fields such as ``scope`` or ``state``.
                - "/oauth/token": ``code`` (required) and extra form fields.
                - "/oauth/userinfo", "/oauth/check_token": ``accessToken`` (required).

        Returns:
            The authorization URL for "/oauth/authorize", otherwise the raw response body.

        Raises:
            ConfigurationError: If the endpoint is unknown or a required key is missing.
            ApiError: If the call fails.
        """
        oauth_endpoint = OAuthEndpoint.from_path(endpoint)
        data = dict(data or {})
        value = oauth_endpoint.require(data)

        handlers: dict[OAuthEndpoint, Callable[[dict[str, Any], Any], str]] = {
            OAuthEndpoint.AUTHORIZE: self._authorize_url,
            OAuthEndpoint.TOKEN: self._exchange_code,
            OAuthEndpoint.USERINFO: self._userinfo,
            OAuthEndpoint.CHECK_TOKEN: self._check_token,
        }
        return handlers[oauth_endpoint](data, value)

    def _oauth_url(self, endpoint: OAuthEndpoint) -> str:
        return self.hosts.oauth + endpoint.value

    def _authorize_url(self, data: dict[str, Any], _: Any) -> str:
        """Build the URL the user is sent to; no request is made."""
        params = [
            ("response_type", "code"),
            ("client_id", self.client_id),
            ("redirect_uri", self.redirect_uri or ""),
        ]
        for key, value in data.items():
            if key in AUTHORIZE_FIXED_FIELDS or value is None:
                continue
            if key == "scope":
                params.append((key, list_to_scope(value)))
            elif isinstance(value, (list, tuple)):
                params.extend((key, _query_value(key, item)) for item in value)
            else:
                params.append((key, _query_value(key, value)))

        url = add_params_to_uri(self._oauth_url(OAuthEndpoint.AUTHORIZE), params)
        logger.debug("Built authorization URL for client %s", self.client_id)
        return url

    def _exchange_code(self, data: dict[str, Any], code: Any) -> str:
        """Exchange an authorization code for a user token."""
        form = {
            **data,
            "code": code,
            "redirect_uri": self.redirect_uri or "",
            "grant_type": "authorization_code",
        }
        return self._send(
            RequestSpec(
                method="POST",
                url=self._oauth_url(OAuthEndpoint.TOKEN),
                data=form,
                auth=(self.client_id, self._config.client_secret.get_secret_value()),
            )
        )

    def _userinfo(self, data: dict[str, Any], access_token: Any) -> str:
        return self._send(
            RequestSpec(
                method="GET",
                url=self._oauth_url(OAuthEndpoint.USERINFO),
                headers={"Authorization": f"Bearer {access_token}"},
            )
        )

    def _check_token(self, data: dict[str, Any], access_token: Any) -> str:
        return self._send(
            RequestSpec(
                method="POST",
                url=self._oauth_url(OAuthEndpoint.CHECK_TOKEN),
                data={"token": access_token},
            )
        )
