"""Operation descriptors and their translation into Monzo HTTP requests.

Entities describe *what* they need with one of the descriptors below;
:func:`route` is the only place that knows which endpoint serves it.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal
import urllib.parse

HttpMethod = Literal["GET", "POST", "DELETE"]


@dataclass(frozen=True, slots=True)
class ListAccounts:
    """List the authenticated user's accounts."""


@dataclass(frozen=True, slots=True)
class Balance:
    """Fetch balance and spend-today for an account."""

    account_id: str


@dataclass(frozen=True, slots=True)
class ListWebhooks:
    """List the webhooks registered on an account."""

    account_id: str


@dataclass(frozen=True, slots=True)
class RegisterWebhook:
    """Register a webhook URL on an account."""

    account_id: str
    url: str


@dataclass(frozen=True, slots=True)
class DeleteWebhook:
    """Delete a webhook by id."""

    webhook_id: str


Operation = ListAccounts | Balance | ListWebhooks | RegisterWebhook | DeleteWebhook


@dataclass(frozen=True, slots=True)
class HttpRequest:
    """Transport-level shape of a single operation.

    ``envelope`` names the top-level key the payload is wrapped in, or is
    ``None`` when the response body is the payload itself.
    """

    method: HttpMethod
    path: str
    query: dict[str, str] = field(default_factory=dict)
    form: dict[str, str] = field(default_factory=dict)
    envelope: str | None = None


def route(operation: Operation) -> HttpRequest:
    """Translate an operation descriptor into an :class:`HttpRequest`.

    Raises:
        TypeError: If ``operation`` is not a known descriptor.
    """
    if isinstance(operation, ListAccounts):
        return HttpRequest(method="GET", path="/accounts", envelope="accounts")
    if isinstance(operation, Balance):
        return HttpRequest(
            method="GET",
            path="/balance",
            query={"account_id": operation.account_id},
        )
    if isinstance(operation, ListWebhooks):
        return HttpRequest(
            method="GET",
            path="/webhooks",
            query={"account_id": operation.account_id},
            envelope="webhooks",
        )
    if isinstance(operation, RegisterWebhook):
        return HttpRequest(
            method="POST",
            path="/webhooks",
            form={"account_id": operation.account_id, "url": operation.url},
            envelope="webhook",
        )
    if isinstance(operation, DeleteWebhook):
        webhook_id = urllib.parse.quote(operation.webhook_id, safe="")
        return HttpRequest(method="DELETE", path=f"/webhooks/{webhook_id}")
    raise TypeError(f"Unsupported operation: {type(operation).__name__}")
