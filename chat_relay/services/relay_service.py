"""Orchestration service turning raw request bodies into provider calls.

The RelayService parses the JSON bodies accepted by the HTTP API into a
:class:`UniformChatRequest`, hands it to the adapter registry and wraps
the assistant text in a response model.  All failures surface as
:class:`RelayError` subclasses so controllers can remain thin.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from fastapi import Depends
from loguru import logger
from pydantic import ValidationError

from ..adapters.registry import AdapterRegistry
from ..config.provider_config import ProviderConfig, get_provider_config
from ..models.chat_message import ChatMessage
from ..models.chat_request import UniformChatRequest
from ..models.chat_response import ChatResponse, ProbeResponse
from ..models.enums import MessageRole, Provider
from ..models.generation import DEFAULT_TEMPERATURE, GenerationParameters
from ..models.model_config import ModelConfig
from ..utils.error_handler import InvalidRequestError
from ..utils.helpers import optional_text, to_finite_number, to_text
from .message_normalizer import normalize_messages

# Model used when a client sends the pre-``selectedModel`` request shape
LEGACY_MODEL_ID = "amazon.nova-micro-v1:0"
LEGACY_PROVIDER = Provider.BEDROCK

PROBE_SYSTEM_PROMPT = "Return only OK"
PROBE_USER_MESSAGE = "Health check. Reply OK."
PROBE_PREVIEW_LENGTH = 120


def _require_object(body: Any) -> Mapping[str, Any]:
    if not isinstance(body, Mapping):
        raise InvalidRequestError("Request body must be a JSON object.")
    return body


def _parse_model(data: Mapping[str, Any]) -> ModelConfig:
    try:
        return ModelConfig.model_validate(dict(data))
    except ValidationError as exc:
        raise InvalidRequestError(f"Invalid selectedModel: {exc.errors()[0]['msg']}") from exc


def resolve_generation_parameters(body: Mapping[str, Any]) -> GenerationParameters:
    """Read sampling knobs from ``body``, dropping anything non-finite."""
    temperature = to_finite_number(body.get("temperature"))
    return GenerationParameters(
        temperature=DEFAULT_TEMPERATURE if temperature is None else temperature,
        top_p=to_finite_number(body.get("top_p")),
        top_k=to_finite_number(body.get("top_k")),
        max_tokens=to_finite_number(body.get("max_tokens")),
        thinking_type=optional_text(body.get("thinking_type")),
        output_effort=optional_text(body.get("output_effort")),
    )


def resolve_model(body: Mapping[str, Any]) -> ModelConfig:
    """Return the requested model, falling back to the legacy request shape.

    ``selectedModel`` is used when it carries both an id and a provider.
    Otherwise the request is treated as coming from an older client that
    only sent a bare ``model`` string, which always meant Bedrock.
    """
    selected = body.get("selectedModel")
    if isinstance(selected, Mapping) and selected.get("id") and selected.get("provider"):
        return _parse_model(selected)

    model_id = to_text(body.get("model") or LEGACY_MODEL_ID)
    logger.warning("No usable selectedModel; using legacy Bedrock model {}", model_id)
    return ModelConfig(id=model_id, provider=LEGACY_PROVIDER.value)


class RelayService:
    """Builds uniform requests and dispatches them to provider adapters."""

    def __init__(self, registry: AdapterRegistry) -> None:
        self.registry = registry

    def build_chat_request(self, body: Any) -> UniformChatRequest:
        """Parse a ``POST /api/chat`` body.

        Raises
        ------
        InvalidRequestError
            If the body is not an object or contains no usable message.
        """
        body = _require_object(body)
        messages = normalize_messages(body.get("messages"))
        params = resolve_generation_parameters(body)
        model = resolve_model(body)

        if not messages:
            raise InvalidRequestError("messages must contain at least one user/assistant message.")

        return UniformChatRequest(
            provider=model.provider,
            messages=messages,
            system=to_text(body.get("system")),
            model=model,
            params=params,
        )

    def build_probe_request(self, body: Any) -> UniformChatRequest:
        """Parse a ``POST /api/test-provider`` body into a fixed health-check prompt."""
        body = _require_object(body)
        provider = to_text(body.get("provider"))
        if provider not in {p.value for p in Provider}:
            raise InvalidRequestError("Invalid provider for connection test.")

        selected = body.get("selectedModel")
        if not isinstance(selected, Mapping) or not selected.get("id"):
            raise InvalidRequestError("A model is required to test provider connection.")

        # The probe targets the provider being tested, whatever the model says
        model = _parse_model({**selected, "provider": provider})
        return UniformChatRequest(
            provider=provider,
            messages=[ChatMessage(role=MessageRole.USER, content=PROBE_USER_MESSAGE)],
            system=PROBE_SYSTEM_PROMPT,
            model=model,
            params=GenerationParameters(temperature=0),
        )

    async def chat(self, body: Any) -> ChatResponse:
        request = self.build_chat_request(body)
        content = await self.registry.dispatch(request)
        logger.info("Chat completed via {} ({} characters)", request.provider, len(content))
        return ChatResponse(content=content)

    async def probe(self, body: Any) -> ProbeResponse:
        request = self.build_probe_request(body)
        text = await self.registry.dispatch(request)
        logger.info("Provider probe succeeded for {} ({})", request.provider, request.model.id)
        return ProbeResponse(
            provider=request.provider,
            model=request.model.id,
            response_preview=to_text(text)[:PROBE_PREVIEW_LENGTH],
        )


def get_relay_service(
    config: ProviderConfig = Depends(get_provider_config),
) -> RelayService:
    """Dependency injector for RelayService instances.

    FastAPI calls this per request.  Tests override either this function
    or :func:`get_provider_config` through ``app.dependency_overrides``.
    """
    return RelayService(AdapterRegistry(config))
