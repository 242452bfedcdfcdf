"""Parsers from transaction payloads into typed response objects."""

from __future__ import annotations

from ..core.fields import (
    JsonObject,
    as_list,
    as_object,
    read_datetime,
    read_float,
    read_int,
    read_list,
    read_object,
    read_str,
)
from ..core.models import decode_envelope
from ..core.pagination import parse_page_number
from .models import (
    CheckoutUrl,
    Customer,
    InitializeResponse,
    Pagination,
    TransactionDetail,
    TransactionList,
    TransactionLog,
    TransactionLogsResponse,
    TransactionsResponse,
    TransactionSummary,
    VerifyTransactionResponse,
)
from .options import Customization


def _customization(item: JsonObject, *, path: str) -> Customization | None:
    raw = read_object(item, "customization", path=path)
    if raw is None:
        return None
    nested = f"{path}.customization"
    return Customization(
        title=read_str(raw, "title", path=nested),
        description=read_str(raw, "description", path=nested),
        logo=read_str(raw, "logo", path=nested),
    )


def parse_checkout_url(raw: object) -> CheckoutUrl:
    item = as_object(raw, path="data")
    return CheckoutUrl(checkout_url=read_str(item, "checkout_url", path="data"))


def parse_transaction_detail(raw: object) -> TransactionDetail:
    item = as_object(raw, path="data")
    return TransactionDetail(
        first_name=read_str(item, "first_name", path="data"),
        last_name=read_str(item, "last_name", path="data"),
        email=read_str(item, "email", path="data"),
        currency=read_str(item, "currency", path="data"),
        amount=read_float(item, "amount", path="data"),
        charge=read_float(item, "charge", path="data"),
        mode=read_str(item, "mode", path="data"),
        method=read_str(item, "method", path="data"),
        transaction_type=read_str(item, "type", path="data"),
        status=read_str(item, "status", path="data"),
        reference=read_str(item, "reference", path="data"),
        tx_ref=read_str(item, "tx_ref", path="data"),
        customization=_customization(item, path="data"),
        meta=item.get("meta"),
        created_at=read_datetime(item, "created_at", path="data"),
        updated_at=read_datetime(item, "updated_at", path="data"),
    )


def _transaction_log(raw: object, *, path: str) -> TransactionLog:
    item = as_object(raw, path=path)
    return TransactionLog(
        item=read_int(item, "item", path=path),
        message=read_str(item, "message", path=path),
        event_type=read_str(item, "type", path=path),
        created_at=read_datetime(item, "created_at", path=path),
        updated_at=read_datetime(item, "updated_at", path=path),
    )


def parse_transaction_logs(raw: object) -> tuple[TransactionLog, ...]:
    items = as_list(raw, path="data")
    return tuple(_transaction_log(item, path=f"data[{index}]") for index, item in enumerate(items))


def _customer(item: JsonObject, *, path: str) -> Customer | None:
    raw = read_object(item, "customer", path=path)
    if raw is None:
        return None
    nested = f"{path}.customer"
    return Customer(
        id=read_int(raw, "id", path=nested),
        email=read_str(raw, "email", path=nested),
        first_name=read_str(raw, "first_name", path=nested),
        last_name=read_str(raw, "last_name", path=nested),
        mobile=read_str(raw, "mobile", path=nested),
    )


def _transaction_summary(raw: object, *, path: str) -> TransactionSummary:
    item = as_object(raw, path=path)
    return TransactionSummary(
        status=read_str(item, "status", path=path),
        ref_id=read_str(item, "ref_id", path=path),
        transaction_type=read_str(item, "type", path=path),
        created_at=read_datetime(item, "created_at", path=path),
        currency=read_str(item, "currency", path=path),
        amount=read_float(item, "amount", path=path),
        charge=read_float(item, "charge", path=path),
        trans_id=read_str(item, "trans_id", path=path),
        payment_method=read_str(item, "payment_method", path=path),
        customer=_customer(item, path=path),
    )


def _pagination(item: JsonObject) -> Pagination | None:
    raw = read_object(item, "pagination", path="data")
    if raw is None:
        return None
    path = "data.pagination"
    return Pagination(
        per_page=read_int(raw, "per_page", path=path),
        current_page=read_int(raw, "current_page", path=path),
        first_page_url=read_str(raw, "first_page_url", path=path),
        next_page_url=read_str(raw, "next_page_url", path=path),
        prev_page_url=read_str(raw, "prev_page_url", path=path),
    )


def parse_transaction_list(raw: object) -> TransactionList:
    item = as_object(raw, path="data")
    transactions = tuple(
        _transaction_summary(entry, path=f"data.transactions[{index}]")
        for index, entry in enumerate(read_list(item, "transactions", path="data"))
    )
    return TransactionList(transactions=transactions, pagination=_pagination(item))


def parse_initialize_response(
    payload: JsonObject,
    http_status: int | None = None,
) -> InitializeResponse:
    return decode_envelope(payload, parse_checkout_url, http_status=http_status)


def parse_verify_response(
    payload: JsonObject,
    http_status: int | None = None,
) -> VerifyTransactionResponse:
    return decode_envelope(payload, parse_transaction_detail, http_status=http_status)


def parse_transactions_response(
    payload: JsonObject,
    http_status: int | None = None,
) -> TransactionsResponse:
    return decode_envelope(payload, parse_transaction_list, http_status=http_status)


def parse_transaction_logs_response(
    payload: JsonObject,
    http_status: int | None = None,
) -> TransactionLogsResponse:
    return decode_envelope(payload, parse_transaction_logs, http_status=http_status)


def next_transactions_page(response: TransactionsResponse) -> int | None:
    if response.data is None or response.data.pagination is None:
        return None
    return parse_page_number(response.data.pagination.next_page_url)


__all__ = [
    "parse_checkout_url",
    "parse_transaction_detail",
    "parse_transaction_logs",
    "parse_transaction_list",
    "parse_initialize_response",
    "parse_verify_response",
    "parse_transactions_response",
    "parse_transaction_logs_response",
    "next_transactions_page",
]
