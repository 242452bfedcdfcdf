"""Transaction response models."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from ..core.models import ChapaResponse, JsonValue
from .options import Customization


@dataclass(slots=True, frozen=True)
class CheckoutUrl:
    checkout_url: str | None


@dataclass(slots=True, frozen=True)
class TransactionDetail:
    first_name: str | None
    last_name: str | None
    email: str | None
    currency: str | None
    amount: float | None
    charge: float | None
    mode: str | None
    method: str | None
    transaction_type: str | None
    status: str | None
    reference: str | None
    tx_ref: str | None
    customization: Customization | None
    meta: JsonValue
    created_at: datetime | None
    updated_at: datetime | None


@dataclass(slots=True, frozen=True)
class TransactionLog:
    item: int | None
    message: str | None
    event_type: str | None
    created_at: datetime | None
    updated_at: datetime | None


@dataclass(slots=True, frozen=True)
class Customer:
    id: int | None
    email: str | None
    first_name: str | None
    last_name: str | None
    mobile: str | None


@dataclass(slots=True, frozen=True)
class TransactionSummary:
    status: str | None
    ref_id: str | None
    transaction_type: str | None
    created_at: datetime | None
    currency: str | None
    amount: float | None
    charge: float | None
    trans_id: str | None
    payment_method: str | None
    customer: Customer | None


@dataclass(slots=True, frozen=True)
class Pagination:
    per_page: int | None
    current_page: int | None
    first_page_url: str | None
    next_page_url: str | None
    prev_page_url: str | None


@dataclass(slots=True, frozen=True)
class TransactionList:
    transactions: tuple[TransactionSummary, ...] | list[TransactionSummary]
    pagination: Pagination | None

    def __post_init__(self) -> None:
        if isinstance(self.transactions, tuple):
            return
        object.__setattr__(self, "transactions", tuple(self.transactions))


InitializeResponse = ChapaResponse[CheckoutUrl]
VerifyTransactionResponse = ChapaResponse[TransactionDetail]
TransactionsResponse = ChapaResponse[TransactionList]
TransactionLogsResponse = ChapaResponse[tuple[TransactionLog, ...]]


__all__ = [
    "CheckoutUrl",
    "TransactionDetail",
    "TransactionLog",
    "Customer",
    "TransactionSummary",
    "Pagination",
    "TransactionList",
    "InitializeResponse",
    "VerifyTransactionResponse",
    "TransactionsResponse",
    "TransactionLogsResponse",
]
