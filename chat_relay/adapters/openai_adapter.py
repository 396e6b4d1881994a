from __future__ import annotations

from typing import Any, Dict

from ..models.chat_request import UniformChatRequest
from ..utils.error_handler import MissingCredentialError
from .base_adapter import ProviderAdapter, dig, text_or_empty


def build_chat_messages(request: UniformChatRequest) -> list[dict[str, str]]:
    """Prepend the system instruction, when present, as a system-role message."""
    messages = [{"role": "system", "content": request.system}] if request.system else []
    messages.extend(msg.as_openai() for msg in request.messages)
    return messages


def build_chat_body(request: UniformChatRequest) -> Dict[str, Any]:
    """Chat Completions body shared by OpenAI and Azure OpenAI.

    ``top_p`` and ``max_tokens`` are left out entirely when unset so the
    provider's defaults apply.
    """
    params = request.params
    body: Dict[str, Any] = {
        "messages": build_chat_messages(request),
        "temperature": params.temperature,
    }
    if params.top_p is not None:
        body["top_p"] = params.top_p
    if params.max_tokens is not None:
        body["max_tokens"] = int(params.max_tokens)
    return body


def extract_choice_text(data: Any) -> str:
    # OpenAI-compatible schema: choices[0].message.content
    return text_or_empty(dig(data, "choices", 0, "message", "content"))


class OpenAIAdapter(ProviderAdapter):
    """
    Adapter for OpenAI-style chat completion APIs.

    Uses ``OPENAI_BASE_URL`` (default https://api.openai.com/v1) so any
    compatible endpoint can stand in for OpenAI itself.
    """

    display_name = "OpenAI"

    def build_url(self) -> str:
        return f"{self.config.openai_base_url.rstrip('/')}/chat/completions"

    def build_payload(self, request: UniformChatRequest) -> Dict[str, Any]:
        return {"model": request.model.id, **build_chat_body(request)}

    async def complete(self, request: UniformChatRequest) -> str:
        api_key = self.config.openai_api_key
        if not api_key:
            raise MissingCredentialError("OpenAI", ["OPENAI_API_KEY"])

        data = await self._post_json(
            self.build_url(),
            self.build_payload(request),
            headers={"Authorization": f"Bearer {api_key}"},
        )
        return extract_choice_text(data)
