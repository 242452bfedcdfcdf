"""Sync transfer operations."""

from __future__ import annotations

from collections.abc import Iterator

from ..core.pagination import iterate_pages
from ..core.transport import SyncTransport
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


class TransfersService:
    def __init__(self, transport: SyncTransport) -> None:
        self._transport = transport

    def transfer(self, options: TransferOptions) -> TransferResponse:
        return self._transport.execute(transfer_call(options))

    def verify(self, reference: str) -> VerifyTransferResponse:
        return self._transport.execute(verify_transfer_call(reference))

    def bulk_transfer(self, options: BulkTransferOptions) -> BulkTransferResponse:
        return self._transport.execute(bulk_transfer_call(options))

    def verify_bulk(self, batch_id: int | str) -> TransfersResponse:
        """Fetch the transfers queued under one bulk batch."""
        return self._transport.execute(verify_bulk_transfer_call(batch_id))

    def list_all(self, *, page: int | None = None) -> TransfersResponse:
        return self._transport.execute(list_transfers_call(page))

    def iter_pages(self, *, start_page: int = 1) -> Iterator[TransfersResponse]:
        return iterate_pages(
            lambda page: self.list_all(page=page),
            next_transfers_page,
            start_page=start_page,
        )


__all__ = [
    "TransfersService",
]
