"""Pagination helpers based on ``next_page_url``."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import TypeVar

import httpx

from .errors import ChapaDecodeError

PageT = TypeVar("PageT")


def parse_page_number(url: str | None) -> int | None:
    if url is None or url.strip() == "":
        return None
    try:
        raw = httpx.URL(url).params.get("page")
    except httpx.InvalidURL:
        raise ChapaDecodeError("next_page_url is not a valid URL", field="next_page_url") from None
    if raw is None or not raw.strip().isdigit():
        raise ChapaDecodeError("next_page_url has no valid page parameter", field="next_page_url")
    return int(raw)


def iterate_pages(
    fetch_page: Callable[[int], PageT],
    next_page: Callable[[PageT], int | None],
    *,
    start_page: int = 1,
    max_pages: int = 10_000,
) -> Iterator[PageT]:
    current = start_page
    seen_pages: set[int] = {start_page}

    for _ in range(max_pages):
        page = fetch_page(current)
        yield page

        following = next_page(page)
        if following is None:
            return
        if following in seen_pages:
            raise ChapaDecodeError("pagination loop detected")
        seen_pages.add(following)
        current = following

    raise ChapaDecodeError("Exceeded pagination guardrail (max_pages)")


__all__ = [
    "parse_page_number",
    "iterate_pages",
]
