from __future__ import annotations

import pytest

from chat_relay.models.enums import MessageRole
from chat_relay.services.message_normalizer import normalize_messages


@pytest.mark.parametrize("raw", [None, "hello", 42, {"role": "user", "content": "hi"}, 3.5])
def test_non_sequence_input_yields_no_messages(raw: object) -> None:
    assert normalize_messages(raw) == []


def test_blank_and_missing_content_is_dropped_and_order_kept() -> None:
    messages = normalize_messages(
        [
            {"role": "user", "content": "first"},
            {"role": "assistant", "content": "   "},
            {"role": "user"},
            {"role": "assistant", "content": None},
            "not an object",
            None,
            {"role": "assistant", "content": "second"},
            {"role": "user", "content": "\n\tthird "},
        ]
    )

    assert [m.content for m in messages] == ["first", "second", "\n\tthird "]
    assert [m.role for m in messages] == [
        MessageRole.USER,
        MessageRole.ASSISTANT,
        MessageRole.USER,
    ]


def test_role_is_assistant_only_on_exact_match() -> None:
    messages = normalize_messages(
        [
            {"role": "Assistant", "content": "a"},
            {"role": "system", "content": "b"},
            {"content": "c"},
            {"role": "assistant", "content": "d"},
        ]
    )

    assert [m.role for m in messages] == [
        MessageRole.USER,
        MessageRole.USER,
        MessageRole.USER,
        MessageRole.ASSISTANT,
    ]


def test_non_string_content_is_stringified() -> None:
    messages = normalize_messages([{"role": "user", "content": 12}, {"content": False}])

    assert [m.content for m in messages] == ["12", "False"]
