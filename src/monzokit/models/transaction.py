from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import TYPE_CHECKING, Any

from monzokit.mapping import TransactionPayload
from monzokit.models.amount import Amount

if TYPE_CHECKING:
    from monzokit.models.account import Account


@dataclass(frozen=True, slots=True)
class Transaction:
    """
    A single account transaction.

    Note: transaction listing is not wired to the API yet, so
    ``Account.transactions()`` never produces these. The decoder exists so the
    shape is fixed once the endpoint is.
    """

    account_id: str
    id: str
    amount: Amount
    created: datetime

    @classmethod
    def from_json(cls, account: Account, data: Any) -> Transaction:
        """Decode a transaction object returned for ``account``.

        Raises:
            DecodingError: If ``created`` is missing or not ISO-8601.
        """
        payload = TransactionPayload.parse(data)
        return cls(
            account_id=account.id,
            id=payload.id,
            amount=Amount(payload.amount, currency=payload.currency),
            created=payload.created,
        )
