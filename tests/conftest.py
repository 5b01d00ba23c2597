"""Shared pytest fixtures for the Blizzard API client tests.

Fixture summary
---------------
client          — BlizzardClient for region "us" with locale and redirect URI set.
token_route     — respx route answering the client-credentials token request.

No test performs real network I/O: every HTTP call goes through respx.
"""

from __future__ import annotations

from collections.abc import Iterator

import httpx
import pytest
import respx

from adapters.blizzard_api.client import BlizzardClient

CLIENT_ID = "0123456789abcdef0123456789abcdef"
CLIENT_SECRET = "AbCdEfGhIjKlMnOpQrStUvWxYz012345"
REDIRECT_URI = "https://example.com/callback"
ACCESS_TOKEN = "US-client-token"

US_API = "https://us.api.blizzard.com"
US_OAUTH = "https://us.battle.net"


@pytest.fixture
def client() -> Iterator[BlizzardClient]:
    """Client configured for the US region."""
    with BlizzardClient(CLIENT_ID, CLIENT_SECRET, "us", locale="en_US", redirect_uri=REDIRECT_URI) as c:
        yield c


@pytest.fixture
def mocked_api() -> Iterator[respx.MockRouter]:
    """Active respx router; any unmatched request fails the test."""
    with respx.mock(assert_all_called=False) as router:
        yield router


@pytest.fixture
def token_route(mocked_api: respx.MockRouter) -> respx.Route:
    """Client-credentials token endpoint of the US region."""
    return mocked_api.post(f"{US_OAUTH}/oauth/token").mock(
        return_value=httpx.Response(
            200,
            json={"access_token": ACCESS_TOKEN, "token_type": "bearer", "expires_in": 86399},
        )
    )
