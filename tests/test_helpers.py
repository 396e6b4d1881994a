from __future__ import annotations

import math

import pytest

from chat_relay.utils.helpers import optional_text, to_finite_number, to_text


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (0, 0.0),
        (0.25, 0.25),
        ("0.9", 0.9),
        (" 512 ", 512.0),
        (None, None),
        (True, None),
        ("", None),
        ("abc", None),
        (math.nan, None),
        (math.inf, None),
        (10**400, None),
        (-(10**400), None),
        ("9" * 400, None),
        ("-Infinity", None),
        ([1], None),
    ],
)
def test_to_finite_number(value: object, expected: float | None) -> None:
    assert to_finite_number(value) == expected


def test_text_helpers() -> None:
    assert to_text(None) == ""
    assert to_text(3) == "3"
    assert optional_text("") is None
    assert optional_text("enabled") == "enabled"
