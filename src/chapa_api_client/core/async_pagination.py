"""Async pagination helpers based on ``next_page_url``."""

from __future__ import annotations

from collections.abc import AsyncIterator, Awaitable, Callable
from typing import TypeVar

from .errors import ChapaDecodeError

PageT = TypeVar("PageT")


async def aiterate_pages(
    fetch_page: Callable[[int], Awaitable[PageT]],
    next_page: Callable[[PageT], int | None],
    *,
    start_page: int = 1,
    max_pages: int = 10_000,
) -> AsyncIterator[PageT]:
    current = start_page
    seen_pages: set[int] = {start_page}

    for _ in range(max_pages):
        page = await fetch_page(current)
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
    "aiterate_pages",
]
