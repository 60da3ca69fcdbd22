"""Monzo client configuration loaded from the environment."""

from __future__ import annotations

from dataclasses import dataclass
import os

from dotenv import load_dotenv

from monzokit.errors import MonzoConfigError

DEFAULT_BASE_URL = "https://api.monzo.com"
DEFAULT_TIMEOUT_SECONDS = 30.0


@dataclass(frozen=True, slots=True)
class MonzoConfig:
    """Access token and endpoint settings for the Monzo API."""

    access_token: str
    base_url: str = DEFAULT_BASE_URL
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS

    def __repr__(self) -> str:
        return (
            f"MonzoConfig(access_token='***', base_url={self.base_url!r}, "
            f"timeout_seconds={self.timeout_seconds!r})"
        )


def load_monzo_config_from_env() -> MonzoConfig:
    """Load Monzo configuration from environment variables (and ``.env``).

    Required: MONZO_ACCESS_TOKEN.
    Optional: MONZO_API_BASE_URL, MONZO_TIMEOUT_SECONDS.

    Raises:
        MonzoConfigError: If the token is missing or the timeout is invalid.
    """
    load_dotenv(override=False)

    access_token = os.environ.get("MONZO_ACCESS_TOKEN", "").strip()
    if not access_token:
        raise MonzoConfigError(
            "Missing required environment variable: MONZO_ACCESS_TOKEN"
        )

    base_url = os.environ.get("MONZO_API_BASE_URL", "").strip() or DEFAULT_BASE_URL

    timeout_raw = os.environ.get("MONZO_TIMEOUT_SECONDS", "").strip()
    timeout_seconds = DEFAULT_TIMEOUT_SECONDS
    if timeout_raw:
        try:
            timeout_seconds = float(timeout_raw)
        except ValueError as e:
            raise MonzoConfigError(
                f"MONZO_TIMEOUT_SECONDS must be a number, got {timeout_raw!r}"
            ) from e
        if timeout_seconds <= 0:
            raise MonzoConfigError("MONZO_TIMEOUT_SECONDS must be positive")

    return MonzoConfig(
        access_token=access_token,
        base_url=base_url,
        timeout_seconds=timeout_seconds,
    )
