"""Shared test fixtures."""

from __future__ import annotations

from collections.abc import Callable
from datetime import UTC, datetime

import pytest

from monzokit.client import Client
from monzokit.models.account import Account, AccountType
from monzokit.models.user import User
from tests.fixtures.monzo import FakeProvider


@pytest.fixture
def provider() -> FakeProvider:
    return FakeProvider()


@pytest.fixture
def user(provider: FakeProvider) -> User:
    return Client(provider).user()


@pytest.fixture
def make_account(user: User) -> Callable[..., Account]:
    def _make(account_id: str = "acc_1") -> Account:
        return Account(
            user=user,
            type=AccountType.CURRENT,
            id=account_id,
            description="Personal",
            created=datetime(2020, 1, 1, tzinfo=UTC),
        )

    return _make
