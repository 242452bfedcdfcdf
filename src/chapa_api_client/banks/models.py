"""Bank, balance and swap response models."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from ..core.models import ChapaResponse


@dataclass(slots=True, frozen=True)
class Bank:
    id: int | None
    slug: str | None
    swift: str | None
    name: str | None
    acct_length: int | None
    country_id: int | None
    is_mobilemoney: int | None
    is_rtgs: int | None
    is_active: int | None
    currency: str | None
    created_at: datetime | None
    updated_at: datetime | None


@dataclass(slots=True, frozen=True)
class Balance:
    currency: str | None
    available_balance: float | None
    ledger_balance: float | None


@dataclass(slots=True, frozen=True)
class SwapResult:
    status: str | None
    ref_id: str | None
    from_currency: str | None
    to_currency: str | None
    amount: float | None
    exchanged_amount: float | None
    charge: float | None
    rate: float | None
    created_at: datetime | None
    updated_at: datetime | None


BanksResponse = ChapaResponse[tuple[Bank, ...]]
BalancesResponse = ChapaResponse[tuple[Balance, ...]]
SwapResponse = ChapaResponse[SwapResult]


__all__ = [
    "Bank",
    "Balance",
    "SwapResult",
    "BanksResponse",
    "BalancesResponse",
    "SwapResponse",
]
