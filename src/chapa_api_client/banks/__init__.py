"""Banks, balances and currency swaps."""

from .models import Balance, BalancesResponse, Bank, BanksResponse, SwapResponse, SwapResult
from .options import SwapOptions

__all__ = [
    "Bank",
    "Balance",
    "SwapResult",
    "SwapOptions",
    "BanksResponse",
    "BalancesResponse",
    "SwapResponse",
]
