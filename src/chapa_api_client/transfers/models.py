"""Transfer response models."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from ..core.models import ChapaResponse, ChapaResponseWithMeta, JsonValue


@dataclass(slots=True, frozen=True)
class TransferDetail:
    account_name: str | None
    account_number: str | None
    mobile: str | None
    currency: str | None
    amount: float | None
    charge: float | None
    mode: str | None
    transfer_method: str | None
    narration: str | None
    chapa_transfer_id: str | None
    bank_code: int | None
    bank_name: str | None
    cross_party_reference: str | None
    ip_address: str | None
    status: str | None
    tx_ref: str | None
    created_at: datetime | None
    updated_at: datetime | None


@dataclass(slots=True, frozen=True)
class TransferEntry:
    account_name: str | None
    account_number: str | None
    currency: str | None
    amount: float | None
    charge: float | None
    transfer_type: str | None
    chapa_reference: str | None
    bank_code: int | None
    bank_name: str | None
    bank_reference: str | None
    status: str | None
    reference: str | None
    created_at: datetime | None
    updated_at: datetime | None


@dataclass(slots=True, frozen=True)
class TransferMeta:
    current_page: int | None
    first_page_url: str | None
    last_page: int | None
    last_page_url: str | None
    next_page_url: str | None
    path: str | None
    per_page: int | None
    prev_page_url: str | None
    to: int | None
    total: int | None
    error: JsonValue


@dataclass(slots=True, frozen=True)
class BulkTransferResult:
    id: int | None
    created_at: datetime | None


# ``data`` of a queued single transfer is the transfer reference string.
TransferResponse = ChapaResponse[str]
VerifyTransferResponse = ChapaResponse[TransferDetail]
BulkTransferResponse = ChapaResponse[BulkTransferResult]
TransfersResponse = ChapaResponseWithMeta[tuple[TransferEntry, ...], TransferMeta]


__all__ = [
    "TransferDetail",
    "TransferEntry",
    "TransferMeta",
    "BulkTransferResult",
    "TransferResponse",
    "VerifyTransferResponse",
    "BulkTransferResponse",
    "TransfersResponse",
]
