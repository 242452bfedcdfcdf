"""Request builders for transaction endpoints."""

from __future__ import annotations

from ..core.operations import PreparedCall, page_params, path_segment
from .models import (
    InitializeResponse,
    TransactionLogsResponse,
    TransactionsResponse,
    VerifyTransactionResponse,
)
from .options import InitializeOptions
from .parser import (
    parse_initialize_response,
    parse_transaction_logs_response,
    parse_transactions_response,
    parse_verify_response,
)


def initialize_call(options: InitializeOptions) -> PreparedCall[InitializeResponse]:
    return PreparedCall(
        "POST",
        "transaction/initialize",
        decode=parse_initialize_response,
        body=options.to_payload(),
    )


def verify_call(tx_ref: str) -> PreparedCall[VerifyTransactionResponse]:
    return PreparedCall(
        "GET",
        f"transaction/verify/{path_segment(tx_ref, name='tx_ref')}",
        decode=parse_verify_response,
    )


def list_transactions_call(page: int | None = None) -> PreparedCall[TransactionsResponse]:
    return PreparedCall(
        "GET",
        "transactions",
        decode=parse_transactions_response,
        params=page_params(page),
    )


def transaction_events_call(tx_ref: str) -> PreparedCall[TransactionLogsResponse]:
    return PreparedCall(
        "GET",
        f"transaction/events/{path_segment(tx_ref, name='tx_ref')}",
        decode=parse_transaction_logs_response,
    )


__all__ = [
    "initialize_call",
    "verify_call",
    "list_transactions_call",
    "transaction_events_call",
]
