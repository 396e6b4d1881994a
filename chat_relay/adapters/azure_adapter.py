from __future__ import annotations

from typing import Any, Dict
from urllib.parse import quote

from ..models.chat_request import UniformChatRequest
from ..utils.error_handler import MissingCredentialError
from .base_adapter import ProviderAdapter
from .openai_adapter import build_chat_body, extract_choice_text


class AzureOpenAIAdapter(ProviderAdapter):
    """
    Adapter for Azure OpenAI chat completions.

    Requires ``AZURE_OPENAI_API_KEY`` and ``AZURE_OPENAI_ENDPOINT``; the
    API version defaults to 2024-10-21.  The deployment is the model's
    ``azureDeployment`` when set, otherwise its id.

    Azure OpenAI path format:
        POST {endpoint}/openai/deployments/{deployment}/chat/completions?api-version=xxx
    """

    display_name = "Azure OpenAI"

    def build_url(self, request: UniformChatRequest) -> str:
        endpoint = (self.config.azure_endpoint or "").rstrip("/")
        deployment = request.model.azure_deployment or request.model.id
        return f"{endpoint}/openai/deployments/{quote(deployment, safe='')}/chat/completions"

    def build_payload(self, request: UniformChatRequest) -> Dict[str, Any]:
        # The deployment in the URL selects the model, so no "model" key
        return build_chat_body(request)

    async def complete(self, request: UniformChatRequest) -> str:
        missing = [
            name
            for name, value in (
                ("AZURE_OPENAI_API_KEY", self.config.azure_api_key),
                ("AZURE_OPENAI_ENDPOINT", self.config.azure_endpoint),
            )
            if not value
        ]
        if missing:
            raise MissingCredentialError("Azure OpenAI", missing)

        data = await self._post_json(
            self.build_url(request),
            self.build_payload(request),
            headers={"api-key": self.config.azure_api_key or ""},
            params={"api-version": self.config.azure_api_version},
        )
        return extract_choice_text(data)
