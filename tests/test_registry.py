from __future__ import annotations

import asyncio

import pytest

from chat_relay.adapters.azure_adapter import AzureOpenAIAdapter
from chat_relay.adapters.bedrock_adapter import BedrockAdapter
from chat_relay.adapters.gemini_adapter import GeminiAdapter
from chat_relay.adapters.openai_adapter import OpenAIAdapter
from chat_relay.adapters.registry import ADAPTERS, AdapterRegistry, parse_provider
from chat_relay.models import ChatMessage, ModelConfig, Provider, UniformChatRequest
from chat_relay.utils.error_handler import ErrorKind, UnsupportedProviderError


def test_every_provider_has_an_adapter() -> None:
    assert set(ADAPTERS) == set(Provider)


@pytest.mark.parametrize(
    ("tag", "adapter_cls"),
    [
        ("bedrock", BedrockAdapter),
        ("openai", OpenAIAdapter),
        ("azure-openai", AzureOpenAIAdapter),
        ("gemini", GeminiAdapter),
    ],
)
def test_adapter_selected_by_exact_tag(provider_config, tag, adapter_cls) -> None:
    registry = AdapterRegistry(provider_config)

    assert isinstance(registry.get_adapter(tag), adapter_cls)
    assert isinstance(registry.get_adapter(Provider(tag)), adapter_cls)


@pytest.mark.parametrize("tag", ["OpenAI", "azure", "gemini ", "", "anthropic"])
def test_unknown_tag_is_rejected(tag) -> None:
    with pytest.raises(UnsupportedProviderError) as exc_info:
        parse_provider(tag)

    assert str(exc_info.value) == f"Unsupported provider: {tag}"
    assert exc_info.value.kind is ErrorKind.VALIDATION


def test_dispatch_routes_to_selected_adapter(provider_config, upstream_factory) -> None:
    upstream = upstream_factory(body={"choices": [{"message": {"content": "routed"}}]})
    registry = AdapterRegistry(provider_config, transport=upstream.transport)
    request = UniformChatRequest(
        provider="openai",
        messages=[ChatMessage(role="user", content="ping")],
        model=ModelConfig(id="gpt-4o-mini", provider="openai"),
    )

    assert asyncio.run(registry.dispatch(request)) == "routed"
    assert upstream.last_request.url.host == "api.openai.com"


def test_dispatch_unknown_provider_makes_no_call(provider_config, upstream_factory) -> None:
    upstream = upstream_factory(body={})
    registry = AdapterRegistry(provider_config, transport=upstream.transport)
    request = UniformChatRequest(
        provider="mistral",
        messages=[ChatMessage(role="user", content="ping")],
        model=ModelConfig(id="mistral-large", provider="mistral"),
    )

    with pytest.raises(UnsupportedProviderError, match="Unsupported provider: mistral"):
        asyncio.run(registry.dispatch(request))

    assert upstream.requests == []
