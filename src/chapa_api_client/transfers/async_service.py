"""Async transfer operations."""

from __future__ import annotations

from collections.abc import AsyncIterator

from ..core.async_pagination import aiterate_pages
from ..core.async_transport import AsyncTransport
from .models import BulkTransferResponse, TransferResponse, TransfersResponse, VerifyTransferResponse
from .operations import (
    bulk_transfer_call,
    list_transfers_call,
    transfer_call,
    verify_bulk_transfer_call,
    verify_transfer_call,
)
from .options import BulkTransferOptions, TransferOptions
from .parser import next_transfers_page


class AsyncTransfersService:
    def __init__(self, transport: AsyncTransport) -> None:
        self._transport = transport

    async def transfer(self, options: TransferOptions) -> TransferResponse:
        return await self._transport.execute(transfer_call(options))

    async def verify(self, reference: str) -> VerifyTransferResponse:
        return await self._transport.execute(verify_transfer_call(reference))

    async def bulk_transfer(self, options: BulkTransferOptions) -> BulkTransferResponse:
        return await self._transport.execute(bulk_transfer_call(options))

    async def verify_bulk(self, batch_id: int | str) -> TransfersResponse:
        return await self._transport.execute(verify_bulk_transfer_call(batch_id))

    async def list_all(self, *, page: int | None = None) -> TransfersResponse:
        return await self._transport.execute(list_transfers_call(page))

    def iter_pages(self, *, start_page: int = 1) -> AsyncIterator[TransfersResponse]:
        return aiterate_pages(
            lambda page: self.list_all(page=page),
            next_transfers_page,
            start_page=start_page,
        )


__all__ = [
    "AsyncTransfersService",
]
