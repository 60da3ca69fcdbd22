"""Request transport for the Monzo API.

Entities talk to a :class:`Provider`. :class:`MonzoProvider` is the HTTP
implementation; tests substitute their own.
"""

from __future__ import annotations

import http.client
import json
from typing import Any, Protocol, cast, runtime_checkable
import urllib.error
import urllib.parse
import urllib.request

from monzokit.config import (
    DEFAULT_BASE_URL,
    DEFAULT_TIMEOUT_SECONDS,
    MonzoConfig,
    load_monzo_config_from_env,
)
from monzokit.errors import ProviderError
from monzokit.logger import ProviderLogger
from monzokit.mapping import JSONObject
from monzokit.routing import HttpRequest, Operation, route


@runtime_checkable
class Provider(Protocol):
    """Executes operation descriptors and returns raw JSON.

    Every failure (network, auth, HTTP status, malformed response) surfaces
    as :class:`ProviderError`.
    """

    def request(self, operation: Operation) -> JSONObject:
        """Execute an operation whose response is a single JSON object."""
        ...

    def request_array(self, operation: Operation) -> list[JSONObject]:
        """Execute an operation whose response is a list of JSON objects."""
        ...

    def deliver(self, operation: Operation) -> None:
        """Execute an operation whose response carries no payload."""
        ...


class MonzoProvider:
    """HTTP provider for the Monzo API, authenticated with a bearer token."""

    def __init__(
        self,
        *,
        access_token: str,
        base_url: str = DEFAULT_BASE_URL,
        timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
        logger: ProviderLogger | None = None,
    ) -> None:
        self._access_token = access_token
        self._base_url = base_url.rstrip("/")
        self._timeout_seconds = timeout_seconds
        self._logger = logger or ProviderLogger()

    @property
    def base_url(self) -> str:
        return self._base_url

    @classmethod
    def from_config(cls, config: MonzoConfig) -> MonzoProvider:
        return cls(
            access_token=config.access_token,
            base_url=config.base_url,
            timeout_seconds=config.timeout_seconds,
        )

    @classmethod
    def from_env(cls) -> MonzoProvider:
        """Construct a MonzoProvider from MONZO_* environment variables."""
        return cls.from_config(load_monzo_config_from_env())

    # High-level APIs -----------------------------------------------------

    def request(self, operation: Operation) -> JSONObject:
        http_request = route(operation)
        payload = self._unwrap(http_request, self._send(http_request))
        if not isinstance(payload, dict):
            raise ProviderError(
                f"Expected JSON object from {http_request.path}, "
                f"got {type(payload).__name__}"
            )
        return cast(JSONObject, payload)

    def request_array(self, operation: Operation) -> list[JSONObject]:
        http_request = route(operation)
        payload = self._unwrap(http_request, self._send(http_request))
        if not isinstance(payload, list):
            raise ProviderError(
                f"Expected JSON array from {http_request.path}, "
                f"got {type(payload).__name__}"
            )
        return cast(list[JSONObject], payload)

    def deliver(self, operation: Operation) -> None:
        self._send(route(operation))

    # Transport -----------------------------------------------------------

    def _url(self, http_request: HttpRequest) -> str:
        url = self._base_url + http_request.path
        if http_request.query:
            url += "?" + urllib.parse.urlencode(http_request.query)
        return url

    def _parse_json_response(self, body: str) -> Any:
        """Parse a Monzo response body; an empty body parses as ``{}``.

        Raises:
            ProviderError: If the body is not valid JSON.
        """
        if not body.strip():
            return {}
        try:
            return json.loads(body)
        except json.JSONDecodeError as e:
            raise ProviderError(
                f"Failed to parse Monzo response as JSON: {e}: {body}"
            ) from e

    @staticmethod
    def _error_code(body: str) -> str | None:
        try:
            parsed = json.loads(body)
        except json.JSONDecodeError:
            return None
        if isinstance(parsed, dict):
            code = parsed.get("code")
            if isinstance(code, str):
                return code
        return None

    def _unwrap(self, http_request: HttpRequest, payload: Any) -> Any:
        if http_request.envelope is None:
            return payload
        if not isinstance(payload, dict) or http_request.envelope not in payload:
            raise ProviderError(
                f"Monzo response from {http_request.path} is missing "
                f"{http_request.envelope!r}"
            )
        return payload[http_request.envelope]

    def _send(self, http_request: HttpRequest) -> Any:
        method = http_request.method
        path = http_request.path
        headers = {
            "Authorization": f"Bearer {self._access_token}",
            "Accept": "application/json",
        }
        data: bytes | None = None
        if http_request.form:
            data = urllib.parse.urlencode(http_request.form).encode("utf-8")
            headers["Content-Type"] = "application/x-www-form-urlencoded"

        req = urllib.request.Request(  # noqa: S310
            self._url(http_request),
            data=data,
            headers=headers,
            method=method,
        )

        self._logger.request_sent(method, path)
        try:
            with urllib.request.urlopen(  # noqa: S310 - external HTTPS
                req, timeout=self._timeout_seconds
            ) as resp:
                status = resp.status
                body = resp.read().decode("utf-8")
        except urllib.error.HTTPError as e:
            err_body = e.read().decode("utf-8", "ignore")
            code = self._error_code(err_body)
            self._logger.http_error(method, path, e.code, code)
            raise ProviderError(
                f"Monzo API error ({e.code}): {err_body}",
                status_code=e.code,
                code=code,
            ) from e
        except (http.client.HTTPException, OSError) as e:
            # URLError, timeouts and failures while reading the body
            self._logger.network_error(method, path, e)
            raise ProviderError(f"Network error calling Monzo API: {e}") from e
        except UnicodeDecodeError as e:
            raise ProviderError(
                f"Monzo response from {path} is not UTF-8: {e}"
            ) from e

        self._logger.response_received(method, path, status)
        return self._parse_json_response(body)
