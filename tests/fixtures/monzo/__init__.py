"""In-memory Monzo provider used as a test double."""

from __future__ import annotations

from typing import Any

from monzokit.errors import ProviderError
from monzokit.routing import (
    Balance,
    DeleteWebhook,
    ListAccounts,
    ListWebhooks,
    Operation,
    RegisterWebhook,
)


class FakeProvider:
    """In-memory provider that records operations and can be told to fail."""

    def __init__(self) -> None:
        self.accounts: list[dict[str, Any]] = []
        self.balances: dict[str, dict[str, Any]] = {}
        self.webhooks: dict[str, list[dict[str, Any]]] = {}
        self.operations: list[Operation] = []
        self.failures: dict[type, Exception] = {}
        self._next_webhook = 1

    def fail(self, operation_type: type, error: Exception | None = None) -> None:
        self.failures[operation_type] = error or ProviderError("boom", status_code=500)

    def recover(self, operation_type: type) -> None:
        self.failures.pop(operation_type, None)

    def count(self, operation_type: type) -> int:
        return sum(1 for op in self.operations if isinstance(op, operation_type))

    def _record(self, operation: Operation) -> None:
        self.operations.append(operation)
        error = self.failures.get(type(operation))
        if error is not None:
            raise error

    def request(self, operation: Operation) -> dict[str, Any]:
        self._record(operation)
        if isinstance(operation, Balance):
            return self.balances[operation.account_id]
        if isinstance(operation, RegisterWebhook):
            webhook = {
                "account_id": operation.account_id,
                "id": f"webhook_{self._next_webhook}",
                "url": operation.url,
            }
            self._next_webhook += 1
            self.webhooks.setdefault(operation.account_id, []).append(webhook)
            return webhook
        raise AssertionError(f"unexpected request: {operation!r}")

    def request_array(self, operation: Operation) -> list[dict[str, Any]]:
        self._record(operation)
        if isinstance(operation, ListAccounts):
            return list(self.accounts)
        if isinstance(operation, ListWebhooks):
            return list(self.webhooks.get(operation.account_id, []))
        raise AssertionError(f"unexpected request_array: {operation!r}")

    def deliver(self, operation: Operation) -> None:
        self._record(operation)
        if isinstance(operation, DeleteWebhook):
            for hooks in self.webhooks.values():
                hooks[:] = [h for h in hooks if h["id"] != operation.webhook_id]
            return
        raise AssertionError(f"unexpected deliver: {operation!r}")
