"""Monzo account entity with lazily cached webhooks."""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import TYPE_CHECKING, Any

from monzokit.errors import DecodingError, ProviderError
from monzokit.logger import AccountLogger
from monzokit.mapping import AccountPayload, BalancePayload
from monzokit.models.amount import Amount
from monzokit.models.transaction import Transaction
from monzokit.models.webhook import Webhook
from monzokit.routing import Balance, DeleteWebhook, ListWebhooks, RegisterWebhook

if TYPE_CHECKING:
    from monzokit.models.user import User
    from monzokit.provider import Provider


class AccountType(Enum):
    """Kind of Monzo account."""

    PREPAID = "uk_prepaid"
    CURRENT = "uk_retail"
    UNKNOWN = "unknown"

    @classmethod
    def from_raw(cls, raw: str) -> AccountType:
        """Map an API type code to an AccountType; unrecognised codes are UNKNOWN."""
        if raw == cls.PREPAID.value:
            return cls.PREPAID
        if raw == cls.CURRENT.value:
            return cls.CURRENT
        return cls.UNKNOWN


class WebhookCacheState(Enum):
    """Load state of an account's webhook cache."""

    NOT_LOADED = "not_loaded"
    LOADED = "loaded"
    FAILED = "failed"


class Account:
    """A bank account belonging to a :class:`User`.

    Not safe for concurrent use: the webhook cache is mutated without locking,
    so share an instance across threads only with external synchronisation.
    """

    def __init__(
        self,
        user: User,
        type: AccountType,
        id: str,
        description: str,
        created: datetime,
        *,
        logger: AccountLogger | None = None,
    ) -> None:
        self.user = user
        self.type = type
        self.id = id
        self.description = description
        self.created = created
        self._webhooks: list[Webhook] = []
        # registered through this instance before the cache was loaded
        self._pending_webhooks: list[Webhook] = []
        self._webhook_state = WebhookCacheState.NOT_LOADED
        self._logger = logger or AccountLogger()

    @classmethod
    def from_json(cls, user: User, data: Any) -> Account:
        """Decode an account object returned by the API.

        Raises:
            DecodingError: If ``created`` is missing or not ISO-8601.
        """
        payload = AccountPayload.parse(data)
        return cls(
            user=user,
            type=AccountType.from_raw(payload.type),
            id=payload.id,
            description=payload.description,
            created=payload.created,
        )

    def __repr__(self) -> str:
        return (
            f"Account(type={self.type.name}, id={self.id!r}, "
            f"description={self.description!r}, created={self.created.isoformat()})"
        )

    @property
    def _provider(self) -> Provider:
        return self.user.client.provider

    # Transactions --------------------------------------------------------

    def transactions(self, limit: int = 10) -> list[Transaction]:
        """Return recent transactions.

        Stub: transaction listing is not implemented and this always returns
        an empty list, whatever ``limit`` is.
        """
        return []

    # Balance -------------------------------------------------------------

    def _fetch_balance(self) -> BalancePayload:
        return BalancePayload.parse(self._provider.request(Balance(self.id)))

    def balance(self) -> Amount:
        """The current available balance of the account."""
        payload = self._fetch_balance()
        return Amount(payload.balance, currency=payload.currency)

    def spent_today(self) -> Amount:
        """The amount spent today, counted from roughly 4am local time."""
        payload = self._fetch_balance()
        return Amount(payload.spend_today, currency=payload.currency)

    # Webhooks ------------------------------------------------------------

    @property
    def webhook_cache_state(self) -> WebhookCacheState:
        return self._webhook_state

    @property
    def webhooks(self) -> list[Webhook]:
        """Webhooks registered on the account, loaded on first access.

        A failed load is logged and swallowed: the cached list (possibly
        empty) is returned and the next access tries again.
        """
        if self._webhook_state is not WebhookCacheState.LOADED:
            try:
                self.reload_webhooks()
            except (ProviderError, DecodingError) as e:
                self._webhook_state = WebhookCacheState.FAILED
                self._logger.webhooks_load_failed(self.id, e)
        return list(self._webhooks)

    def reload_webhooks(self) -> list[Webhook]:
        """Replace the cache with the server's current webhook list.

        Webhooks registered through this account while the cache was not loaded
        are kept if the server list does not include them yet.

        Raises:
            ProviderError: If the request fails.
            DecodingError: If a webhook in the response is not a JSON object.
        """
        raw_webhooks = self._provider.request_array(ListWebhooks(self.id))
        loaded = [Webhook.from_json(self, raw) for raw in raw_webhooks]
        loaded_ids = {webhook.id for webhook in loaded}
        loaded.extend(
            webhook
            for webhook in self._pending_webhooks
            if webhook.id not in loaded_ids
        )
        self._webhooks = loaded
        self._pending_webhooks = []
        self._webhook_state = WebhookCacheState.LOADED
        self._logger.webhooks_loaded(self.id, len(self._webhooks))
        return list(self._webhooks)

    def add_webhook(self, url: str) -> Webhook:
        """Register ``url`` as a webhook on the account.

        The new webhook is cached immediately. If the cache has not been
        loaded yet it is also held as pending, so the next successful load
        merges it by id instead of duplicating or dropping it.
        """
        raw_webhook = self._provider.request(RegisterWebhook(self.id, url))
        webhook = Webhook.from_json(self, raw_webhook)
        pending = self._webhook_state is not WebhookCacheState.LOADED
        self._webhooks.append(webhook)
        if pending:
            self._pending_webhooks.append(webhook)
        self._logger.webhook_added(self.id, webhook.id, pending)
        return webhook

    def remove_webhook(self, webhook: Webhook) -> None:
        """Delete ``webhook`` on the server, then drop it from the cache."""
        self._provider.deliver(DeleteWebhook(webhook.id))
        index = next(
            (i for i, cached in enumerate(self._webhooks) if cached.id == webhook.id),
            None,
        )
        if index is not None:
            del self._webhooks[index]
        self._pending_webhooks = [
            pending for pending in self._pending_webhooks if pending.id != webhook.id
        ]
        self._logger.webhook_removed(self.id, webhook.id, index is not None)
