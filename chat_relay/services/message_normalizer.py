"""Coerce untrusted message lists into validated chat messages."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from loguru import logger

from ..models.chat_message import ChatMessage
from ..models.enums import MessageRole
from ..utils.helpers import to_text


def normalize_messages(raw: Any) -> list[ChatMessage]:
    """Return the well-formed messages contained in ``raw``.

    Never raises.  Anything that is not a list yields an empty list;
    entries that are not objects, or whose content is blank, are
    dropped.  A role of exactly ``"assistant"`` is kept, every other
    value becomes ``"user"``.  Surviving messages keep their order.
    """
    if not isinstance(raw, (list, tuple)):
        return []

    messages: list[ChatMessage] = []
    for entry in raw:
        if not isinstance(entry, Mapping):
            continue
        role = MessageRole.ASSISTANT if entry.get("role") == "assistant" else MessageRole.USER
        content = to_text(entry.get("content"))
        if not content.strip():
            continue
        messages.append(ChatMessage(role=role, content=content))

    dropped = len(raw) - len(messages)
    if dropped:
        logger.debug("Dropped {} malformed or empty message(s)", dropped)
    return messages
