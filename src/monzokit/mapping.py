"""Conversion of raw Monzo JSON into typed values.

Cosmetic fields are lenient: a missing or wrongly typed string becomes ``""``
and a missing or wrongly typed integer becomes ``0``. Timestamps are strict:
an absent or unparseable ISO-8601 value means the API response is not one we
understand, so decoding fails with :class:`DecodingError`.
"""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Annotated, Any, Self

from pydantic import BaseModel, BeforeValidator, ValidationError

from monzokit.errors import DecodingError

JSONObject = dict[str, Any]

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


def string_or_empty(value: Any) -> str:
    return value if isinstance(value, str) else ""


def int64_or_zero(value: Any) -> int:
    # bool is an int subclass but never a JSON number
    if isinstance(value, bool) or not isinstance(value, int):
        return 0
    if not INT64_MIN <= value <= INT64_MAX:
        return 0
    return value


def parse_iso8601(value: Any) -> datetime:
    """Parse an ISO-8601 timestamp, treating naive values as UTC.

    Raises:
        ValueError: If the value is not a string or cannot be parsed.
    """
    if not isinstance(value, str):
        raise ValueError(f"expected ISO-8601 string, got {type(value).__name__}")
    try:
        parsed = datetime.fromisoformat(value)
    except ValueError as e:
        raise ValueError(f"invalid ISO-8601 timestamp: {value!r}") from e
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=UTC)
    return parsed


LenientStr = Annotated[str, BeforeValidator(string_or_empty)]
LenientInt = Annotated[int, BeforeValidator(int64_or_zero)]
ISO8601Datetime = Annotated[datetime, BeforeValidator(parse_iso8601)]


class MonzoBaseModel(BaseModel):
    """Shared base for Monzo payload models with a short parse alias."""

    @classmethod
    def parse(cls, data: Any) -> Self:
        if not isinstance(data, dict):
            raise DecodingError(
                f"Expected JSON object for {cls.__name__}, got {type(data).__name__}"
            )
        try:
            return cls.model_validate(data)
        except ValidationError as e:
            raise DecodingError(f"Invalid {cls.__name__} payload: {e}") from e


class AccountPayload(MonzoBaseModel):
    type: LenientStr = ""
    id: LenientStr = ""
    description: LenientStr = ""
    created: ISO8601Datetime


class BalancePayload(MonzoBaseModel):
    balance: LenientInt = 0
    currency: LenientStr = ""
    spend_today: LenientInt = 0


class WebhookPayload(MonzoBaseModel):
    id: LenientStr = ""
    url: LenientStr = ""


class TransactionPayload(MonzoBaseModel):
    id: LenientStr = ""
    amount: LenientInt = 0
    currency: LenientStr = ""
    created: ISO8601Datetime
