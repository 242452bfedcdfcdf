from __future__ import annotations

import pytest

from chapa_api_client.core.errors import ChapaDecodeError
from chapa_api_client.core.pagination import iterate_pages, parse_page_number


@pytest.mark.parametrize(
    ("url", "expected"),
    [
        ("https://api.chapa.co/v1/transactions?page=2", 2),
        ("https://api.chapa.co/v1/transfers?per_page=10&page=12", 12),
        (None, None),
        ("", None),
        ("   ", None),
    ],
)
def test_parse_page_number(url, expected):
    assert parse_page_number(url) == expected


@pytest.mark.parametrize(
    "url",
    ["https://api.chapa.co/v1/transactions?page=abc", "https://api.chapa.co/v1/transactions"],
)
def test_parse_page_number_rejects_missing_or_invalid_page(url):
    with pytest.raises(ChapaDecodeError):
        parse_page_number(url)


def test_iterate_pages_until_no_next_page():
    pages = {1: {"next": 3, "x": 1}, 3: {"next": None, "x": 2}}
    visited = [p["x"] for p in iterate_pages(lambda n: pages[n], lambda p: p["next"])]
    assert visited == [1, 2]


def test_iterate_pages_honours_start_page():
    pages = {2: {"next": None, "x": "b"}}
    visited = [p["x"] for p in iterate_pages(lambda n: pages[n], lambda p: p["next"], start_page=2)]
    assert visited == ["b"]


def test_iterate_pages_detects_loop():
    pages = {1: {"next": 2}, 2: {"next": 1}}
    iterator = iterate_pages(lambda n: pages[n], lambda p: p["next"])
    next(iterator)
    next(iterator)
    with pytest.raises(ChapaDecodeError, match="loop"):
        next(iterator)


def test_iterate_pages_guardrail():
    iterator = iterate_pages(lambda n: n, lambda n: n + 1, max_pages=3)
    assert [next(iterator) for _ in range(3)] == [1, 2, 3]
    with pytest.raises(ChapaDecodeError, match="guardrail"):
        next(iterator)
