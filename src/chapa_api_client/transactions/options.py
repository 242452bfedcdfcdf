"""Request options for checkout transactions."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field, replace
from enum import Enum

from ..core.payload import Amount, drop_none, format_amount


class SplitType(str, Enum):
    PERCENTAGE = "percentage"
    FLAT = "flat"


@dataclass(slots=True, frozen=True)
class Customization:
    title: str | None = None
    description: str | None = None
    logo: str | None = None

    def to_payload(self) -> dict[str, object]:
        return drop_none(
            {"title": self.title, "description": self.description, "logo": self.logo}
        )


@dataclass(slots=True, frozen=True)
class Subaccount:
    id: str
    split_type: SplitType | None = None
    split_value: float | None = None

    def to_payload(self) -> dict[str, object]:
        return drop_none(
            {
                "id": self.id,
                "split_type": self.split_type.value if self.split_type is not None else None,
                "split_value": self.split_value,
            }
        )


@dataclass(slots=True, frozen=True)
class InitializeOptions:
    """Hosted checkout initialization request.

    Required fields are checked by the remote service, not locally: an empty
    request comes back as a failure envelope.
    """

    amount: Amount
    currency: str
    tx_ref: str
    email: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    phone_number: str | None = None
    callback_url: str | None = None
    return_url: str | None = None
    customization: Customization | None = None
    meta: Mapping[str, object] | None = None
    subaccounts: Sequence[Subaccount] = field(default=())

    def __post_init__(self) -> None:
        if isinstance(self.subaccounts, tuple):
            return
        object.__setattr__(self, "subaccounts", tuple(self.subaccounts))

    def with_customer(
        self,
        *,
        email: str | None = None,
        first_name: str | None = None,
        last_name: str | None = None,
        phone_number: str | None = None,
    ) -> "InitializeOptions":
        """Arguments left as ``None`` keep their current value."""
        return replace(
            self,
            **drop_none(
                {
                    "email": email,
                    "first_name": first_name,
                    "last_name": last_name,
                    "phone_number": phone_number,
                }
            ),
        )

    def with_urls(
        self,
        *,
        callback_url: str | None = None,
        return_url: str | None = None,
    ) -> "InitializeOptions":
        return replace(self, **drop_none({"callback_url": callback_url, "return_url": return_url}))

    def with_customization(
        self,
        *,
        title: str | None = None,
        description: str | None = None,
        logo: str | None = None,
    ) -> "InitializeOptions":
        current = self.customization or Customization()
        return replace(
            self,
            customization=replace(
                current,
                **drop_none({"title": title, "description": description, "logo": logo}),
            ),
        )

    def with_subaccount(self, subaccount: Subaccount) -> "InitializeOptions":
        return replace(self, subaccounts=(*self.subaccounts, subaccount))

    def to_payload(self) -> dict[str, object]:
        payload = drop_none(
            {
                "amount": format_amount(self.amount),
                "currency": self.currency,
                "tx_ref": self.tx_ref,
                "email": self.email,
                "first_name": self.first_name,
                "last_name": self.last_name,
                "phone_number": self.phone_number,
                "callback_url": self.callback_url,
                "return_url": self.return_url,
            }
        )
        if self.customization is not None:
            payload["customization"] = self.customization.to_payload()
        if self.meta is not None:
            payload["meta"] = dict(self.meta)
        if self.subaccounts:
            payload["subaccounts"] = [subaccount.to_payload() for subaccount in self.subaccounts]
        return payload


__all__ = [
    "SplitType",
    "Customization",
    "Subaccount",
    "InitializeOptions",
]
