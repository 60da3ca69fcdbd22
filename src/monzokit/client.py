from __future__ import annotations

from monzokit.models.user import User
from monzokit.provider import MonzoProvider, Provider


class Client:
    """Holds the request provider shared by a user and their accounts."""

    def __init__(self, provider: Provider) -> None:
        self.provider = provider

    @classmethod
    def from_env(cls) -> Client:
        """Construct a Client backed by MonzoProvider.from_env()."""
        return cls(MonzoProvider.from_env())

    def user(self) -> User:
        return User(self)
