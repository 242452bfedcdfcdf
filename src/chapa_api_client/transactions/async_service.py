"""Async transaction operations."""

from __future__ import annotations

from collections.abc import AsyncIterator

from ..core.async_pagination import aiterate_pages
from ..core.async_transport import AsyncTransport
from .models import (
    InitializeResponse,
    TransactionLogsResponse,
    TransactionsResponse,
    VerifyTransactionResponse,
)
from .operations import initialize_call, list_transactions_call, transaction_events_call, verify_call
from .options import InitializeOptions
from .parser import next_transactions_page


class AsyncTransactionsService:
    def __init__(self, transport: AsyncTransport) -> None:
        self._transport = transport

    async def initialize(self, options: InitializeOptions) -> InitializeResponse:
        return await self._transport.execute(initialize_call(options))

    async def verify(self, tx_ref: str) -> VerifyTransactionResponse:
        return await self._transport.execute(verify_call(tx_ref))

    async def list_all(self, *, page: int | None = None) -> TransactionsResponse:
        return await self._transport.execute(list_transactions_call(page))

    def iter_pages(self, *, start_page: int = 1) -> AsyncIterator[TransactionsResponse]:
        return aiterate_pages(
            lambda page: self.list_all(page=page),
            next_transactions_page,
            start_page=start_page,
        )

    async def events(self, tx_ref: str) -> TransactionLogsResponse:
        return await self._transport.execute(transaction_events_call(tx_ref))


__all__ = [
    "AsyncTransactionsService",
]
