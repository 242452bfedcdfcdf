from __future__ import annotations

import pytest

from chapa_api_client.core.errors import ChapaValidationError
from chapa_api_client.core.operations import page_params, path_segment
from chapa_api_client.core.payload import drop_none, format_amount


def test_path_segment_quotes_reserved_characters():
    assert path_segment("chewatatest-6669", name="tx_ref") == "chewatatest-6669"
    assert path_segment("a/b c", name="tx_ref") == "a%2Fb%20c"
    assert path_segment("  ETB ", name="currency") == "ETB"


@pytest.mark.parametrize("value", ["", "   ", None, 12])
def test_path_segment_rejects_empty_or_non_string(value):
    with pytest.raises(ChapaValidationError):
        path_segment(value, name="tx_ref")  # type: ignore[arg-type]


def test_page_params():
    assert page_params(None) is None
    assert page_params(3) == {"page": "3"}


@pytest.mark.parametrize("page", [0, -1, True, "2"])
def test_page_params_rejects_invalid_pages(page):
    with pytest.raises(ChapaValidationError):
        page_params(page)  # type: ignore[arg-type]


def test_drop_none_keeps_falsy_values():
    assert drop_none({"a": None, "b": 0, "c": "", "d": False}) == {"b": 0, "c": "", "d": False}


def test_format_amount():
    assert format_amount(" 100 ") == "100"
    assert format_amount(100) == "100"
    assert format_amount(10.5) == "10.5"
