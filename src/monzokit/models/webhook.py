from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from monzokit.mapping import WebhookPayload

if TYPE_CHECKING:
    from monzokit.models.account import Account


@dataclass(frozen=True, slots=True)
class Webhook:
    """A server-side subscription that posts account events to ``url``."""

    account_id: str
    id: str
    url: str

    @classmethod
    def from_json(cls, account: Account, data: Any) -> Webhook:
        """Decode a webhook object returned for ``account``.

        Raises:
            DecodingError: If ``data`` is not a JSON object.
        """
        payload = WebhookPayload.parse(data)
        return cls(account_id=account.id, id=payload.id, url=payload.url)
