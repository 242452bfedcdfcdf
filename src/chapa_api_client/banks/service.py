"""Sync bank, balance and swap operations."""

from __future__ import annotations

from ..core.transport import SyncTransport
from .models import BalancesResponse, BanksResponse, SwapResponse
from .operations import balances_by_currency_call, list_balances_call, list_banks_call, swap_call
from .options import SwapOptions


class BanksService:
    def __init__(self, transport: SyncTransport) -> None:
        self._transport = transport

    def list_banks(self) -> BanksResponse:
        return self._transport.execute(list_banks_call())

    def list_balances(self) -> BalancesResponse:
        return self._transport.execute(list_balances_call())

    def get_balances(self, currency: str) -> BalancesResponse:
        return self._transport.execute(balances_by_currency_call(currency))

    def swap(self, options: SwapOptions) -> SwapResponse:
        return self._transport.execute(swap_call(options))


__all__ = [
    "BanksService",
]
