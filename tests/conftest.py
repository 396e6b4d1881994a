from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Any, Callable

import httpx
import pytest

repo_root = Path(__file__).resolve().parents[1]
if str(repo_root) not in sys.path:
    sys.path.insert(0, str(repo_root))

from chat_relay.config.provider_config import ProviderConfig

PROVIDER_ENV_VARS = [
    "AWS_BEARER_TOKEN_BEDROCK",
    "AWS_DEFAULT_REGION",
    "OPENAI_API_KEY",
    "OPENAI_BASE_URL",
    "AZURE_OPENAI_API_KEY",
    "AZURE_OPENAI_ENDPOINT",
    "AZURE_OPENAI_API_VERSION",
    "GEMINI_API_KEY",
    "GEMINI_BASE_URL",
    "RELAY_UPSTREAM_TIMEOUT",
]

FULL_CREDENTIALS = {
    "AWS_BEARER_TOKEN_BEDROCK": "bedrock-token",
    "OPENAI_API_KEY": "openai-key",
    "AZURE_OPENAI_API_KEY": "azure-key",
    "AZURE_OPENAI_ENDPOINT": "https://example.openai.azure.com/",
    "GEMINI_API_KEY": "gemini-key",
}


class RecordingUpstream:
    """Stands in for a provider: records requests and returns a canned reply."""

    def __init__(self, status_code: int = 200, body: Any = None, text: str | None = None) -> None:
        self.status_code = status_code
        self.body = body if body is not None else {}
        self.text = text
        self.requests: list[httpx.Request] = []
        self.transport = httpx.MockTransport(self._handle)

    def _handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.text is not None:
            return httpx.Response(self.status_code, text=self.text)
        return httpx.Response(self.status_code, json=self.body)

    @property
    def last_request(self) -> httpx.Request:
        assert self.requests, "no request reached the upstream"
        return self.requests[-1]

    @property
    def last_payload(self) -> dict[str, Any]:
        return json.loads(self.last_request.content)


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in PROVIDER_ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def make_config(clean_env: None) -> Callable[..., ProviderConfig]:
    """Build a ProviderConfig isolated from the host environment and .env files."""

    def factory(**values: Any) -> ProviderConfig:
        return ProviderConfig(_env_file=None, **values)

    return factory


@pytest.fixture
def provider_config(make_config: Callable[..., ProviderConfig]) -> ProviderConfig:
    return make_config(**FULL_CREDENTIALS)


@pytest.fixture
def upstream_factory() -> Callable[..., RecordingUpstream]:
    return RecordingUpstream
