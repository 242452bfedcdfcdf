"""Public async client entrypoint."""

from __future__ import annotations

from types import TracebackType

from .banks.async_service import AsyncBanksService
from .charges.async_service import AsyncChargesService
from .client_shared import resolve_config, validate_client_config
from .config import ChapaConfig
from .core.async_transport import AsyncTransport
from .core.errors import ChapaClientClosedError
from .transactions.async_service import AsyncTransactionsService
from .transfers.async_service import AsyncTransfersService


class AsyncChapaClient:
    """Public async Chapa API client.

    One :class:`httpx.AsyncClient` is shared by every call, so many calls can
    be awaited concurrently. No concurrency limit is applied here.
    """

    def __init__(
        self,
        *,
        config: ChapaConfig | None = None,
        api_key: str | None = None,
        transport: AsyncTransport | None = None,
    ) -> None:
        self._config = resolve_config(config=config, api_key=api_key)
        validate_client_config(self._config)

        self._transport = transport or AsyncTransport(self._config)
        self._closed = False
        self.banks = AsyncBanksService(self._transport)
        self.transactions = AsyncTransactionsService(self._transport)
        self.transfers = AsyncTransfersService(self._transport)
        self.charges = AsyncChargesService(self._transport)

    @property
    def config(self) -> ChapaConfig:
        return self._config

    @property
    def closed(self) -> bool:
        return self._closed

    def _ensure_open(self) -> None:
        if self._closed:
            raise ChapaClientClosedError("AsyncChapaClient is already closed")

    async def close(self) -> None:
        if self._closed:
            return
        await self._transport.close()
        self._closed = True

    async def __aenter__(self) -> "AsyncChapaClient":
        self._ensure_open()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> bool:
        await self.close()
        return False


__all__ = [
    "AsyncChapaClient",
]
