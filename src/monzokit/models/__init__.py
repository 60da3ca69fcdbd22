"""Monzo domain entities."""

from __future__ import annotations

from monzokit.models.account import Account, AccountType, WebhookCacheState
from monzokit.models.amount import Amount
from monzokit.models.transaction import Transaction
from monzokit.models.user import User
from monzokit.models.webhook import Webhook

__all__ = [
    "Account",
    "AccountType",
    "Amount",
    "Transaction",
    "User",
    "Webhook",
    "WebhookCacheState",
]
