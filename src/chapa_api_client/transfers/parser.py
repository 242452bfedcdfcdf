"""Parsers from transfer payloads into typed response objects."""

from __future__ import annotations

from ..core.errors import ChapaDecodeError
from ..core.fields import JsonObject, as_list, as_object, read_datetime, read_float, read_int, read_str
from ..core.models import decode_envelope, decode_envelope_with_meta
from ..core.pagination import parse_page_number
from .models import (
    BulkTransferResponse,
    BulkTransferResult,
    TransferDetail,
    TransferEntry,
    TransferMeta,
    TransferResponse,
    TransfersResponse,
    VerifyTransferResponse,
)


def parse_transfer_reference(raw: object) -> str:
    if isinstance(raw, str):
        return raw
    if isinstance(raw, (int, float)) and not isinstance(raw, bool):
        return str(raw)
    raise ChapaDecodeError("data must be a transfer reference string", field="data")


def parse_transfer_detail(raw: object) -> TransferDetail:
    item = as_object(raw, path="data")
    return TransferDetail(
        account_name=read_str(item, "account_name", path="data"),
        account_number=read_str(item, "account_number", path="data"),
        mobile=read_str(item, "mobile", path="data"),
        currency=read_str(item, "currency", path="data"),
        amount=read_float(item, "amount", path="data"),
        charge=read_float(item, "charge", path="data"),
        mode=read_str(item, "mode", path="data"),
        transfer_method=read_str(item, "transfer_method", path="data"),
        narration=read_str(item, "narration", path="data"),
        chapa_transfer_id=read_str(item, "chapa_transfer_id", path="data"),
        bank_code=read_int(item, "bank_code", path="data"),
        bank_name=read_str(item, "bank_name", path="data"),
        cross_party_reference=read_str(item, "cross_party_reference", path="data"),
        ip_address=read_str(item, "ip_address", path="data"),
        status=read_str(item, "status", path="data"),
        tx_ref=read_str(item, "tx_ref", path="data"),
        created_at=read_datetime(item, "created_at", path="data"),
        updated_at=read_datetime(item, "updated_at", path="data"),
    )


def _transfer_entry(raw: object, *, path: str) -> TransferEntry:
    item = as_object(raw, path=path)
    return TransferEntry(
        account_name=read_str(item, "account_name", path=path),
        account_number=read_str(item, "account_number", path=path),
        currency=read_str(item, "currency", path=path),
        amount=read_float(item, "amount", path=path),
        charge=read_float(item, "charge", path=path),
        transfer_type=read_str(item, "transfer_type", path=path),
        chapa_reference=read_str(item, "chapa_reference", path=path),
        bank_code=read_int(item, "bank_code", path=path),
        bank_name=read_str(item, "bank_name", path=path),
        bank_reference=read_str(item, "bank_reference", path=path),
        status=read_str(item, "status", path=path),
        reference=read_str(item, "reference", path=path),
        created_at=read_datetime(item, "created_at", path=path),
        updated_at=read_datetime(item, "updated_at", path=path),
    )


def parse_transfer_entries(raw: object) -> tuple[TransferEntry, ...]:
    items = as_list(raw, path="data")
    return tuple(_transfer_entry(item, path=f"data[{index}]") for index, item in enumerate(items))


def parse_transfer_meta(raw: object) -> TransferMeta:
    item = as_object(raw, path="meta")
    return TransferMeta(
        current_page=read_int(item, "current_page", path="meta"),
        first_page_url=read_str(item, "first_page_url", path="meta"),
        last_page=read_int(item, "last_page", path="meta"),
        last_page_url=read_str(item, "last_page_url", path="meta"),
        next_page_url=read_str(item, "next_page_url", path="meta"),
        path=read_str(item, "path", path="meta"),
        per_page=read_int(item, "per_page", path="meta"),
        prev_page_url=read_str(item, "prev_page_url", path="meta"),
        to=read_int(item, "to", path="meta"),
        total=read_int(item, "total", path="meta"),
        error=item.get("error"),
    )


def parse_bulk_transfer_result(raw: object) -> BulkTransferResult:
    item = as_object(raw, path="data")
    return BulkTransferResult(
        id=read_int(item, "id", path="data"),
        created_at=read_datetime(item, "created_at", path="data"),
    )


def parse_transfer_response(payload: JsonObject, http_status: int | None = None) -> TransferResponse:
    return decode_envelope(payload, parse_transfer_reference, http_status=http_status)


def parse_verify_transfer_response(
    payload: JsonObject,
    http_status: int | None = None,
) -> VerifyTransferResponse:
    return decode_envelope(payload, parse_transfer_detail, http_status=http_status)


def parse_bulk_transfer_response(
    payload: JsonObject,
    http_status: int | None = None,
) -> BulkTransferResponse:
    return decode_envelope(payload, parse_bulk_transfer_result, http_status=http_status)


def parse_transfers_response(
    payload: JsonObject,
    http_status: int | None = None,
) -> TransfersResponse:
    return decode_envelope_with_meta(
        payload,
        parse_transfer_entries,
        parse_transfer_meta,
        http_status=http_status,
    )


def next_transfers_page(response: TransfersResponse) -> int | None:
    if response.meta is None:
        return None
    return parse_page_number(response.meta.next_page_url)


__all__ = [
    "parse_transfer_reference",
    "parse_transfer_detail",
    "parse_transfer_entries",
    "parse_transfer_meta",
    "parse_bulk_transfer_result",
    "parse_transfer_response",
    "parse_verify_transfer_response",
    "parse_bulk_transfer_response",
    "parse_transfers_response",
    "next_transfers_page",
]
