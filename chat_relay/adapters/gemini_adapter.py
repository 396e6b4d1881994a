from __future__ import annotations

from typing import Any, Dict
from urllib.parse import quote

from ..models.chat_request import UniformChatRequest
from ..models.enums import MessageRole
from ..utils.error_handler import MissingCredentialError
from .base_adapter import ProviderAdapter, dig, text_or_empty


def flatten_transcript(request: UniformChatRequest) -> str:
    """Render the history as "User: ..." / "Assistant: ..." paragraphs."""
    return "\n\n".join(
        f"{'Assistant' if msg.role == MessageRole.ASSISTANT else 'User'}: {msg.content}"
        for msg in request.messages
    )


class GeminiAdapter(ProviderAdapter):
    """
    Adapter for the Gemini ``generateContent`` endpoint.

    The whole conversation is sent as a single user turn containing a
    flattened transcript.  The API key travels as the ``key`` query
    parameter rather than a header.
    """

    display_name = "Gemini"

    def build_url(self, request: UniformChatRequest) -> str:
        base_url = self.config.gemini_base_url.rstrip("/")
        return f"{base_url}/models/{quote(request.model.id, safe='')}:generateContent"

    def build_payload(self, request: UniformChatRequest) -> Dict[str, Any]:
        params = request.params
        generation_config: Dict[str, Any] = {"temperature": params.temperature}
        if params.top_p is not None:
            generation_config["topP"] = params.top_p
        if params.top_k is not None:
            generation_config["topK"] = int(params.top_k)
        if params.max_tokens is not None:
            generation_config["maxOutputTokens"] = int(params.max_tokens)

        payload: Dict[str, Any] = {
            "contents": [
                {"role": "user", "parts": [{"text": flatten_transcript(request)}]},
            ],
            "generationConfig": generation_config,
        }
        if request.system:
            payload["systemInstruction"] = {"parts": [{"text": request.system}]}
        return payload

    async def complete(self, request: UniformChatRequest) -> str:
        api_key = self.config.gemini_api_key
        if not api_key:
            raise MissingCredentialError("Gemini", ["GEMINI_API_KEY"])

        data = await self._post_json(
            self.build_url(request),
            self.build_payload(request),
            headers={},
            params={"key": api_key},
        )
        return text_or_empty(dig(data, "candidates", 0, "content", "parts", 0, "text"))
