"""Sync transaction operations."""

from __future__ import annotations

from collections.abc import Iterator

from ..core.pagination import iterate_pages
from ..core.transport import SyncTransport
from .models import (
    InitializeResponse,
    TransactionLogsResponse,
    TransactionsResponse,
    VerifyTransactionResponse,
)
from .operations import initialize_call, list_transactions_call, transaction_events_call, verify_call
from .options import InitializeOptions
from .parser import next_transactions_page


class TransactionsService:
    def __init__(self, transport: SyncTransport) -> None:
        self._transport = transport

    def initialize(self, options: InitializeOptions) -> InitializeResponse:
        return self._transport.execute(initialize_call(options))

    def verify(self, tx_ref: str) -> VerifyTransactionResponse:
        return self._transport.execute(verify_call(tx_ref))

    def list_all(self, *, page: int | None = None) -> TransactionsResponse:
        return self._transport.execute(list_transactions_call(page))

    def iter_pages(self, *, start_page: int = 1) -> Iterator[TransactionsResponse]:
        """Yield one envelope per page until ``next_page_url`` is exhausted."""
        return iterate_pages(
            lambda page: self.list_all(page=page),
            next_transactions_page,
            start_page=start_page,
        )

    def events(self, tx_ref: str) -> TransactionLogsResponse:
        return self._transport.execute(transaction_events_call(tx_ref))


__all__ = [
    "TransactionsService",
]
