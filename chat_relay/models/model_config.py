"""Per-request model selection sent by the client."""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..utils.helpers import optional_text, to_finite_number, to_text


class ModelConfig(BaseModel):
    """Describes which provider model to call and how.

    The browser UI stores these records and sends one with each request
    as ``selectedModel``.  Field names follow the UI's camelCase wire
    format; the Python names are accepted as well.  Nothing here is
    persisted by the relay.
    """

    id: str
    name: Optional[str] = None
    provider: str = ""
    inference_profile_arn: Optional[str] = Field(default=None, alias="inferenceProfileArn")
    azure_deployment: Optional[str] = Field(default=None, alias="azureDeployment")
    bedrock_max_tokens: Optional[float] = Field(default=None, alias="bedrockMaxTokens")
    bedrock_stop_sequences: list[str] = Field(default_factory=list, alias="bedrockStopSequences")
    bedrock_thinking_type: Optional[str] = Field(default=None, alias="bedrockThinkingType")
    bedrock_output_effort: Optional[str] = Field(default=None, alias="bedrockOutputEffort")
    bedrock_latency: Optional[str] = Field(default=None, alias="bedrockLatency")

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    @field_validator("id", "provider", mode="before")
    @classmethod
    def coerce_text(cls, value: Any) -> str:
        return to_text(value)

    @field_validator(
        "name",
        "inference_profile_arn",
        "azure_deployment",
        "bedrock_thinking_type",
        "bedrock_output_effort",
        "bedrock_latency",
        mode="before",
    )
    @classmethod
    def coerce_optional_text(cls, value: Any) -> Optional[str]:
        # Empty strings from the UI form mean "not set"
        return optional_text(value)

    @field_validator("bedrock_max_tokens", mode="before")
    @classmethod
    def coerce_max_tokens(cls, value: Any) -> Optional[float]:
        return to_finite_number(value)

    @field_validator("bedrock_stop_sequences", mode="before")
    @classmethod
    def coerce_stop_sequences(cls, value: Any) -> list[str]:
        if not isinstance(value, (list, tuple)):
            return []
        return [to_text(item) for item in value]
