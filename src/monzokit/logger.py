"""Logging for Monzo client components.

Keeps log statements out of the transport and entity code.
"""

from __future__ import annotations

import loguru
from loguru import logger


class ProviderLogger:
    """Handles all logging for MonzoProvider."""

    def __init__(self, logger_instance: loguru.Logger = logger) -> None:
        self._logger = logger_instance

    def request_sent(self, method: str, path: str) -> None:
        """Log an outgoing request at debug level."""
        self._logger.bind(method=method, path=path).debug(
            "Monzo request: {} {}", method, path
        )

    def response_received(self, method: str, path: str, status: int) -> None:
        """Log a response status at debug level."""
        self._logger.bind(method=method, path=path, status=status).debug(
            "Monzo response: {} {} -> {}", method, path, status
        )

    def http_error(
        self, method: str, path: str, status: int, code: str | None
    ) -> None:
        """Log an HTTP error response."""
        self._logger.bind(method=method, path=path, status=status, code=code).warning(
            "Monzo API error for {} {}: {} ({})", method, path, status, code
        )

    def network_error(self, method: str, path: str, error: Exception) -> None:
        """Log a network failure."""
        self._logger.bind(method=method, path=path).error(
            "Network error calling Monzo {} {}: {}", method, path, error
        )


class AccountLogger:
    """Handles all logging for Account webhook caching."""

    def __init__(self, logger_instance: loguru.Logger = logger) -> None:
        self._logger = logger_instance

    def webhooks_loaded(self, account_id: str, count: int) -> None:
        """Log a successful webhook load."""
        self._logger.bind(account_id=account_id, count=count).info(
            "Loaded {} webhook(s) for account {}", count, account_id
        )

    def webhooks_load_failed(self, account_id: str, error: Exception) -> None:
        """Log a swallowed webhook load failure; the next access retries."""
        self._logger.bind(account_id=account_id).warning(
            "Failed to load webhooks for account {}, will retry on next access: {}",
            account_id,
            error,
        )

    def webhook_added(self, account_id: str, webhook_id: str, pending: bool) -> None:
        """Log a registered webhook; pending ones merge into the next load."""
        self._logger.bind(
            account_id=account_id, webhook_id=webhook_id, pending=pending
        ).info("Registered webhook {} on account {}", webhook_id, account_id)

    def webhook_removed(self, account_id: str, webhook_id: str, cached: bool) -> None:
        """Log a deleted webhook."""
        self._logger.bind(
            account_id=account_id, webhook_id=webhook_id, cached=cached
        ).info("Deleted webhook {} from account {}", webhook_id, account_id)
