from __future__ import annotations

from typing import Any, Dict, Optional
from urllib.parse import quote

from ..models.chat_request import UniformChatRequest
from ..utils.error_handler import MissingCredentialError
from .base_adapter import ProviderAdapter, dig, text_or_empty

DEFAULT_MAX_TOKENS = 4096
MIN_MAX_TOKENS = 1
MAX_MAX_TOKENS = 64000


def clamp_max_tokens(value: float) -> int:
    return int(min(MAX_MAX_TOKENS, max(MIN_MAX_TOKENS, value)))


def resolve_max_tokens(requested: Optional[float], model_default: Optional[float]) -> int:
    """Pick the request value, then the model default, then 4096; always clamped."""
    if requested is not None:
        return clamp_max_tokens(requested)
    if model_default is not None:
        return clamp_max_tokens(model_default)
    return DEFAULT_MAX_TOKENS


class BedrockAdapter(ProviderAdapter):
    """
    Adapter for the AWS Bedrock Runtime Converse API.

    Authenticates with a Bedrock API key sent as a bearer token
    (``AWS_BEARER_TOKEN_BEDROCK``).  The model segment of the URL is the
    inference profile ARN when the model has one, else the model id.
    """

    display_name = "Bedrock"

    def build_url(self, request: UniformChatRequest) -> str:
        model_id = request.model.inference_profile_arn or request.model.id
        return (
            f"https://bedrock-runtime.{self.config.bedrock_region}.amazonaws.com"
            f"/model/{quote(model_id, safe='')}/converse"
        )

    def build_payload(self, request: UniformChatRequest) -> Dict[str, Any]:
        model = request.model
        params = request.params

        payload: Dict[str, Any] = {
            "messages": [
                {"role": msg.role.value, "content": [{"text": msg.content}]}
                for msg in request.messages
            ],
            "inferenceConfig": {
                "temperature": params.temperature,
                "maxTokens": resolve_max_tokens(params.max_tokens, model.bedrock_max_tokens),
                "stopSequences": [
                    stop.strip() for stop in model.bedrock_stop_sequences if stop.strip()
                ],
            },
        }

        if request.system:
            payload["system"] = [{"text": request.system}]

        additional: Dict[str, Any] = {}
        thinking_type = params.thinking_type or model.bedrock_thinking_type
        if thinking_type:
            additional["thinking"] = {"type": thinking_type}
        output_effort = params.output_effort or model.bedrock_output_effort
        if output_effort:
            additional["output_config"] = {"effort": output_effort}
        if additional:
            payload["additionalModelRequestFields"] = additional

        if model.bedrock_latency:
            payload["performanceConfig"] = {"latency": model.bedrock_latency}

        return payload

    async def complete(self, request: UniformChatRequest) -> str:
        bearer_token = self.config.bedrock_bearer_token
        if not bearer_token:
            raise MissingCredentialError("Bedrock", ["AWS_BEARER_TOKEN_BEDROCK"])

        data = await self._post_json(
            self.build_url(request),
            self.build_payload(request),
            headers={"Authorization": f"Bearer {bearer_token}"},
        )

        # Reasoning models put a reasoningContent block ahead of the text block
        for block in dig(data, "output", "message", "content") or []:
            if isinstance(block, dict) and "text" in block:
                return text_or_empty(block["text"])
        return ""
