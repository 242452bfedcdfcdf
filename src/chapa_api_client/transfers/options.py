"""Request options for transfers."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from ..core.payload import Amount, drop_none, format_amount


@dataclass(slots=True, frozen=True)
class TransferOptions:
    account_number: str
    amount: Amount
    bank_code: int
    account_name: str | None = None
    currency: str | None = None
    reference: str | None = None

    def to_payload(self) -> dict[str, object]:
        return drop_none(
            {
                "account_name": self.account_name,
                "account_number": self.account_number,
                "amount": format_amount(self.amount),
                "currency": self.currency,
                "reference": self.reference,
                "bank_code": self.bank_code,
            }
        )


@dataclass(slots=True, frozen=True)
class BulkTransferEntry:
    account_number: str
    amount: Amount
    bank_code: int
    account_name: str | None = None
    reference: str | None = None

    def to_payload(self) -> dict[str, object]:
        return drop_none(
            {
                "account_name": self.account_name,
                "account_number": self.account_number,
                "amount": format_amount(self.amount),
                "reference": self.reference,
                "bank_code": self.bank_code,
            }
        )


@dataclass(slots=True, frozen=True)
class BulkTransferOptions:
    """One batch of payouts sent in a single request."""

    title: str
    currency: str
    bulk_data: Sequence[BulkTransferEntry]

    def __post_init__(self) -> None:
        if isinstance(self.bulk_data, tuple):
            return
        object.__setattr__(self, "bulk_data", tuple(self.bulk_data))

    def to_payload(self) -> dict[str, object]:
        return {
            "title": self.title,
            "currency": self.currency,
            "bulk_data": [entry.to_payload() for entry in self.bulk_data],
        }


__all__ = [
    "TransferOptions",
    "BulkTransferEntry",
    "BulkTransferOptions",
]
