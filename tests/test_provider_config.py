from __future__ import annotations

import pytest
from pydantic import ValidationError

from chat_relay.config.provider_config import (
    DEFAULT_AZURE_API_VERSION,
    DEFAULT_BEDROCK_REGION,
    DEFAULT_GEMINI_BASE_URL,
    DEFAULT_OPENAI_BASE_URL,
    ProviderConfig,
)


def test_defaults_apply_without_environment(make_config) -> None:
    config = make_config()

    assert config.bedrock_bearer_token is None
    assert config.openai_api_key is None
    assert config.bedrock_region == DEFAULT_BEDROCK_REGION
    assert config.openai_base_url == DEFAULT_OPENAI_BASE_URL
    assert config.azure_api_version == DEFAULT_AZURE_API_VERSION
    assert config.gemini_base_url == DEFAULT_GEMINI_BASE_URL
    assert config.upstream_timeout is None


def test_values_are_read_from_environment(clean_env, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("OPENAI_API_KEY", "sk-test")
    monkeypatch.setenv("AWS_DEFAULT_REGION", "eu-west-1")
    monkeypatch.setenv("AZURE_OPENAI_API_VERSION", "2025-01-01-preview")
    monkeypatch.setenv("RELAY_UPSTREAM_TIMEOUT", "45")

    config = ProviderConfig(_env_file=None)

    assert config.openai_api_key == "sk-test"
    assert config.bedrock_region == "eu-west-1"
    assert config.azure_api_version == "2025-01-01-preview"
    assert config.upstream_timeout == 45.0


def test_blank_values_count_as_missing(clean_env, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("GEMINI_API_KEY", "  ")
    monkeypatch.setenv("OPENAI_BASE_URL", "")

    config = ProviderConfig(_env_file=None)

    assert config.gemini_api_key is None
    assert config.openai_base_url == DEFAULT_OPENAI_BASE_URL


def test_config_is_immutable(make_config) -> None:
    config = make_config(OPENAI_API_KEY="sk-test")

    with pytest.raises(ValidationError):
        config.openai_api_key = "other"


def test_timeout_must_be_positive(make_config) -> None:
    with pytest.raises(ValidationError):
        make_config(RELAY_UPSTREAM_TIMEOUT=0)
