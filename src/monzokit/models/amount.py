from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Amount:
    """A monetary value in minor units (e.g. pence) with its ISO 4217 currency."""

    value: int
    currency: str
