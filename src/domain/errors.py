"""Errors raised by the Blizzard API client."""

from typing import Optional


class BlizzardClientError(Exception):
    """Base class for every error raised by the client."""


class ConfigurationError(BlizzardClientError, ValueError):
    """A caller-supplied field is invalid or missing.

    Always raised before any network call is made.

    Attributes:
        field: Name of the offending field or data key.
        expected: Human-readable description of what was expected.
    """

    def __init__(self, field: str, expected: str):
        self.field = field
        self.expected = expected
        super().__init__(f"'{field}' is not valid: {expected}")


class ApiError(BlizzardClientError):
    """The remote service could not be reached or answered with a non-200 status.

    Attributes:
        status_code: HTTP status, or None when the transport failed.
        body: Raw response body, if one was received.
        url: URL of the failed request.
    """

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        body: Optional[str] = None,
        url: Optional[str] = None,
    ):
        self.status_code = status_code
        self.body = body
        self.url = url
        super().__init__(message)
