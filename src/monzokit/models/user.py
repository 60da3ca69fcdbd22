from __future__ import annotations

from typing import TYPE_CHECKING

from monzokit.models.account import Account
from monzokit.routing import ListAccounts

if TYPE_CHECKING:
    from monzokit.client import Client


class User:
    """The authenticated Monzo user; the entry point to their accounts."""

    def __init__(self, client: Client) -> None:
        self.client = client

    def accounts(self) -> list[Account]:
        """List the user's accounts.

        Raises:
            ProviderError: If the request fails.
            DecodingError: If an account in the response cannot be decoded.
        """
        raw_accounts = self.client.provider.request_array(ListAccounts())
        return [Account.from_json(self, raw) for raw in raw_accounts]
