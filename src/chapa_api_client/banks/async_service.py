"""Async bank, balance and swap operations."""

from __future__ import annotations

from ..core.async_transport import AsyncTransport
from .models import BalancesResponse, BanksResponse, SwapResponse
from .operations import balances_by_currency_call, list_balances_call, list_banks_call, swap_call
from .options import SwapOptions


class AsyncBanksService:
    def __init__(self, transport: AsyncTransport) -> None:
        self._transport = transport

    async def list_banks(self) -> BanksResponse:
        return await self._transport.execute(list_banks_call())

    async def list_balances(self) -> BalancesResponse:
        return await self._transport.execute(list_balances_call())

    async def get_balances(self, currency: str) -> BalancesResponse:
        return await self._transport.execute(balances_by_currency_call(currency))

    async def swap(self, options: SwapOptions) -> SwapResponse:
        return await self._transport.execute(swap_call(options))


__all__ = [
    "AsyncBanksService",
]
