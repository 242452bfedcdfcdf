"""Request builders for transfer endpoints."""

from __future__ import annotations

from ..core.errors import ChapaValidationError
from ..core.operations import PreparedCall, page_params, path_segment
from .models import BulkTransferResponse, TransferResponse, TransfersResponse, VerifyTransferResponse
from .options import BulkTransferOptions, TransferOptions
from .parser import (
    parse_bulk_transfer_response,
    parse_transfer_response,
    parse_transfers_response,
    parse_verify_transfer_response,
)


def transfer_call(options: TransferOptions) -> PreparedCall[TransferResponse]:
    return PreparedCall(
        "POST",
        "transfers",
        decode=parse_transfer_response,
        body=options.to_payload(),
    )


def verify_transfer_call(reference: str) -> PreparedCall[VerifyTransferResponse]:
    return PreparedCall(
        "GET",
        f"transfers/verify/{path_segment(reference, name='reference')}",
        decode=parse_verify_transfer_response,
    )


def bulk_transfer_call(options: BulkTransferOptions) -> PreparedCall[BulkTransferResponse]:
    return PreparedCall(
        "POST",
        "bulk-transfers",
        decode=parse_bulk_transfer_response,
        body=options.to_payload(),
    )


def verify_bulk_transfer_call(batch_id: int | str) -> PreparedCall[TransfersResponse]:
    if isinstance(batch_id, bool) or not isinstance(batch_id, (int, str)):
        raise ChapaValidationError("batch_id must be an int or str")
    text = str(batch_id).strip()
    if not text:
        raise ChapaValidationError("batch_id must not be empty")
    return PreparedCall(
        "GET",
        "transfers",
        decode=parse_transfers_response,
        params={"batch_id": text},
    )


def list_transfers_call(page: int | None = None) -> PreparedCall[TransfersResponse]:
    return PreparedCall(
        "GET",
        "transfers",
        decode=parse_transfers_response,
        params=page_params(page),
    )


__all__ = [
    "transfer_call",
    "verify_transfer_call",
    "bulk_transfer_call",
    "verify_bulk_transfer_call",
    "list_transfers_call",
]
