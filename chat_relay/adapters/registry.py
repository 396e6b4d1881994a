from __future__ import annotations

from typing import Dict, Optional, Type

import httpx
from loguru import logger

from ..config.provider_config import ProviderConfig
from ..models.chat_request import UniformChatRequest
from ..models.enums import Provider
from ..utils.error_handler import UnsupportedProviderError
from .azure_adapter import AzureOpenAIAdapter
from .base_adapter import ProviderAdapter
from .bedrock_adapter import BedrockAdapter
from .gemini_adapter import GeminiAdapter
from .openai_adapter import OpenAIAdapter


ADAPTERS: Dict[Provider, Type[ProviderAdapter]] = {
    Provider.BEDROCK: BedrockAdapter,
    Provider.OPENAI: OpenAIAdapter,
    Provider.AZURE_OPENAI: AzureOpenAIAdapter,
    Provider.GEMINI: GeminiAdapter,
}

_unmapped = set(Provider) - set(ADAPTERS)
if _unmapped:
    raise RuntimeError(f"No adapter registered for: {sorted(p.value for p in _unmapped)}")


def parse_provider(tag: object) -> Provider:
    """Return the Provider for an exact tag match or raise UnsupportedProviderError."""
    if isinstance(tag, Provider):
        return tag
    try:
        return Provider(tag)
    except ValueError as exc:
        raise UnsupportedProviderError(tag) from exc


class AdapterRegistry:
    """
    Holds one adapter per provider and routes requests to them.

    All adapters share the same immutable ProviderConfig and, in tests, the
    same mock transport.
    """

    def __init__(
        self,
        config: ProviderConfig,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.config = config
        self._adapters: Dict[Provider, ProviderAdapter] = {
            provider: adapter_cls(config, transport=transport)
            for provider, adapter_cls in ADAPTERS.items()
        }

    def get_adapter(self, provider: object) -> ProviderAdapter:
        return self._adapters[parse_provider(provider)]

    async def dispatch(self, request: UniformChatRequest) -> str:
        """
        Send ``request`` to the adapter named by its provider tag.

        There is no retry and no fallback to another provider; whatever the
        adapter raises propagates to the caller.
        """
        adapter = self.get_adapter(request.provider)
        logger.info(
            "Dispatching to {} (model={}, messages={})",
            adapter.display_name,
            request.model.id,
            len(request.messages),
        )
        return await adapter.complete(request)
