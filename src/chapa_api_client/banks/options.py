"""Request options for balance operations."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True, frozen=True)
class SwapOptions:
    """Currency swap request.

    The remote service enforces a minimum and maximum amount and swaps are
    irreversible; neither rule is checked locally.
    """

    amount: float
    from_currency: str
    to_currency: str

    def to_payload(self) -> dict[str, object]:
        return {
            "amount": self.amount,
            "from": self.from_currency,
            "to": self.to_currency,
        }


__all__ = [
    "SwapOptions",
]
