"""Description of a single remote operation."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import Generic, TypeVar
from urllib.parse import quote

from .errors import ChapaValidationError

ResultT = TypeVar("ResultT")

JsonObject = dict[str, object]


@dataclass(slots=True, frozen=True)
class PreparedCall(Generic[ResultT]):
    """Method, endpoint, optional body/query and the decoder for its response."""

    method: str
    endpoint: str
    decode: Callable[[JsonObject, int | None], ResultT] = field(repr=False)
    params: Mapping[str, str] | None = None
    body: Mapping[str, object] | None = None


def path_segment(value: str, *, name: str) -> str:
    if not isinstance(value, str):
        raise ChapaValidationError(f"{name} must be str")
    text = value.strip()
    if text == "":
        raise ChapaValidationError(f"{name} is required")
    return quote(text, safe="")


def page_params(page: int | None) -> dict[str, str] | None:
    if page is None:
        return None
    if isinstance(page, bool) or not isinstance(page, int) or page < 1:
        raise ChapaValidationError("page must be an int >= 1")
    return {"page": str(page)}


__all__ = [
    "PreparedCall",
    "path_segment",
    "page_params",
]
