"""Public client entrypoint."""

from __future__ import annotations

from types import TracebackType

from .banks.service import BanksService
from .charges.service import ChargesService
from .client_shared import resolve_config, validate_client_config
from .config import ChapaConfig
from .core.errors import ChapaClientClosedError
from .core.transport import SyncTransport
from .transactions.service import TransactionsService
from .transfers.service import TransfersService


class ChapaClient:
    """Public Chapa API client.

    Operations are grouped by resource family::

        with ChapaClient(api_key="CHASECK_TEST-...") as client:
            banks = client.banks.list_banks()
            checkout = client.transactions.initialize(options)

    Every call returns the decoded envelope, including failure envelopes;
    only request-level problems raise :class:`ChapaError` subclasses.
    """

    def __init__(
        self,
        *,
        config: ChapaConfig | None = None,
        api_key: str | None = None,
        transport: SyncTransport | None = None,
    ) -> None:
        self._config = resolve_config(config=config, api_key=api_key)
        validate_client_config(self._config)

        self._transport = transport or SyncTransport(self._config)
        self._closed = False
        self.banks = BanksService(self._transport)
        self.transactions = TransactionsService(self._transport)
        self.transfers = TransfersService(self._transport)
        self.charges = ChargesService(self._transport)

    @property
    def config(self) -> ChapaConfig:
        return self._config

    @property
    def closed(self) -> bool:
        return self._closed

    def _ensure_open(self) -> None:
        if self._closed:
            raise ChapaClientClosedError("ChapaClient is already closed")

    def close(self) -> None:
        if self._closed:
            return
        self._transport.close()
        self._closed = True

    def __enter__(self) -> "ChapaClient":
        self._ensure_open()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> bool:
        self.close()
        return False


__all__ = [
    "ChapaClient",
]
