from __future__ import annotations

import json
from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

import httpx
from loguru import logger

from ..config.provider_config import ProviderConfig
from ..models.chat_request import UniformChatRequest
from ..utils import api_client
from ..utils.error_handler import ResponseParseError, TransportError, UpstreamError


class ProviderAdapter(ABC):
    """
    Abstract base class for provider adapters.

    Each provider-specific adapter builds its native request from a
    :class:`UniformChatRequest`, sends it with :meth:`_post_json` and pulls
    the assistant text out of the decoded response.  Credentials come from
    the injected :class:`ProviderConfig`; ``transport`` lets tests replace
    the network with an ``httpx.MockTransport``.
    """

    #: Human readable provider name used in error messages.
    display_name: str = "Provider"

    def __init__(
        self,
        config: ProviderConfig,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.config = config
        self.transport = transport

    @abstractmethod
    async def complete(self, request: UniformChatRequest) -> str:
        """
        Send ``request`` to the provider and return the assistant's text.

        Returns an empty string when the provider answered successfully but
        the expected text field is missing.
        """
        raise NotImplementedError

    async def _post_json(
        self,
        url: str,
        payload: Dict[str, Any],
        headers: Dict[str, str],
        params: Optional[Dict[str, str]] = None,
    ) -> Any:
        """
        POST ``payload`` and return the decoded JSON body.

        The body is always read as text first so that a failing status can
        be reported with the provider's raw response.  Query ``params`` are
        not logged because they may carry an API key.
        """
        logger.debug("[{}] POST {}", self.display_name, url)
        try:
            response = await api_client.post(
                url,
                json=payload,
                headers={"Content-Type": "application/json", **headers},
                params=params,
                timeout=self.config.upstream_timeout,
                transport=self.transport,
            )
        except httpx.HTTPError as exc:
            logger.error("[{}] request failed: {}", self.display_name, exc)
            raise TransportError(str(exc) or exc.__class__.__name__) from exc

        response_text = response.text
        logger.debug("[{}] status_code: {}", self.display_name, response.status_code)
        if not response.is_success:
            raise UpstreamError(self.display_name, response.status_code, response_text)

        try:
            return json.loads(response_text)
        except json.JSONDecodeError as exc:
            raise ResponseParseError(
                f"{self.display_name} returned invalid JSON: {exc}"
            ) from exc


def dig(data: Any, *path: Any) -> Any:
    """Follow ``path`` through nested dicts and lists, returning None on any miss."""
    current = data
    for key in path:
        if isinstance(key, int):
            if not isinstance(current, list) or not -len(current) <= key < len(current):
                return None
        elif not isinstance(current, dict):
            return None
        current = current[key] if isinstance(key, int) else current.get(key)
        if current is None:
            return None
    return current


def text_or_empty(value: Any) -> str:
    """Mirror a provider's text field, falling back to an empty string."""
    if not value:
        return ""
    return value if isinstance(value, str) else str(value)
