"""Request builders for bank, balance and swap endpoints."""

from __future__ import annotations

from ..core.operations import PreparedCall, path_segment
from .models import BalancesResponse, BanksResponse, SwapResponse
from .options import SwapOptions
from .parser import parse_balances_response, parse_banks_response, parse_swap_response


def list_banks_call() -> PreparedCall[BanksResponse]:
    return PreparedCall("GET", "banks", decode=parse_banks_response)


def list_balances_call() -> PreparedCall[BalancesResponse]:
    return PreparedCall("GET", "balances", decode=parse_balances_response)


def balances_by_currency_call(currency: str) -> PreparedCall[BalancesResponse]:
    return PreparedCall(
        "GET",
        f"balances/{path_segment(currency, name='currency')}",
        decode=parse_balances_response,
    )


def swap_call(options: SwapOptions) -> PreparedCall[SwapResponse]:
    return PreparedCall("POST", "swap", decode=parse_swap_response, body=options.to_payload())


__all__ = [
    "list_banks_call",
    "list_balances_call",
    "balances_by_currency_call",
    "swap_call",
]
