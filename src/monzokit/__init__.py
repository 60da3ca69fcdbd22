"""Client library for the Monzo banking API."""

from __future__ import annotations

from monzokit.client import Client
from monzokit.config import MonzoConfig, load_monzo_config_from_env
from monzokit.errors import DecodingError, MonzoConfigError, MonzoError, ProviderError
from monzokit.models import (
    Account,
    AccountType,
    Amount,
    Transaction,
    User,
    Webhook,
    WebhookCacheState,
)
from monzokit.provider import MonzoProvider, Provider

__version__ = "0.1.0"

__all__ = [
    "Account",
    "AccountType",
    "Amount",
    "Client",
    "DecodingError",
    "MonzoConfig",
    "MonzoConfigError",
    "MonzoError",
    "MonzoProvider",
    "Provider",
    "ProviderError",
    "Transaction",
    "User",
    "Webhook",
    "WebhookCacheState",
    "load_monzo_config_from_env",
]
