"""Helpers for building JSON request bodies."""

from __future__ import annotations

from collections.abc import Mapping
from decimal import Decimal

Amount = str | int | float | Decimal


def drop_none(values: Mapping[str, object]) -> dict[str, object]:
    return {key: value for key, value in values.items() if value is not None}


def format_amount(amount: Amount) -> str:
    """Amounts are sent as strings, the form the remote accepts on every endpoint."""
    if isinstance(amount, str):
        return amount.strip()
    return str(amount)


__all__ = [
    "Amount",
    "drop_none",
    "format_amount",
]
