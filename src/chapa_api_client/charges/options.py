"""Direct charge channels and request options."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from ..core.errors import ChapaValidationError
from ..core.payload import Amount, drop_none, format_amount


@dataclass(slots=True, frozen=True)
class DirectChargeType:
    """Payment channel tag sent as the ``type`` query parameter.

    The known channels are exposed as class attributes. Channels added by the
    remote service later can be addressed with :meth:`other`.
    """

    value: str

    TELEBIRR: ClassVar["DirectChargeType"]
    MPESA: ClassVar["DirectChargeType"]
    AMOLE: ClassVar["DirectChargeType"]
    CBEBIRR: ClassVar["DirectChargeType"]
    EBIRR: ClassVar["DirectChargeType"]
    AWASHBIRR: ClassVar["DirectChargeType"]

    def __post_init__(self) -> None:
        if not isinstance(self.value, str) or self.value.strip() == "":
            raise ChapaValidationError("charge type must be a non-empty string")
        object.__setattr__(self, "value", self.value.strip())

    @classmethod
    def other(cls, name: str) -> "DirectChargeType":
        return cls(name)

    @property
    def is_known(self) -> bool:
        return self.value in _KNOWN_TAGS

    def __str__(self) -> str:
        return self.value


DirectChargeType.TELEBIRR = DirectChargeType("telebirr")
DirectChargeType.MPESA = DirectChargeType("mpesa")
DirectChargeType.AMOLE = DirectChargeType("amole")
DirectChargeType.CBEBIRR = DirectChargeType("cbebirr")
DirectChargeType.EBIRR = DirectChargeType("ebirr")
DirectChargeType.AWASHBIRR = DirectChargeType("awashbirr")

_KNOWN_TAGS = frozenset({"telebirr", "mpesa", "amole", "cbebirr", "ebirr", "awashbirr"})


@dataclass(slots=True, frozen=True)
class DirectChargeOptions:
    mobile: str
    currency: str
    amount: Amount
    tx_ref: str
    first_name: str | None = None
    last_name: str | None = None
    email: str | None = None

    def to_payload(self) -> dict[str, object]:
        return drop_none(
            {
                "first_name": self.first_name,
                "last_name": self.last_name,
                "email": self.email,
                "mobile": self.mobile,
                "currency": self.currency,
                "amount": format_amount(self.amount),
                "tx_ref": self.tx_ref,
            }
        )


@dataclass(slots=True, frozen=True)
class VerifyDirectChargeOptions:
    """Authorization step for a pending direct charge."""

    reference: str
    client: str

    def to_payload(self) -> dict[str, object]:
        return {"reference": self.reference, "client": self.client}


__all__ = [
    "DirectChargeType",
    "DirectChargeOptions",
    "VerifyDirectChargeOptions",
]
