"""Exceptions raised by the Monzo client."""

from __future__ import annotations


class MonzoError(Exception):
    """Base error for Monzo client failures."""


class MonzoConfigError(MonzoError):
    """Missing or invalid Monzo configuration."""


class DecodingError(MonzoError):
    """A response payload is missing a required field or is malformed."""


class ProviderError(MonzoError):
    """Transport, authentication, or API failure talking to Monzo.

    ``status_code`` is the HTTP status when the API answered, and ``code`` is
    the API's machine-readable error code (e.g. ``unauthorized.bad_access_token``)
    when the error body carried one.
    """

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        code: str | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.code = code
