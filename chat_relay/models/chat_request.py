"""Uniform request record consumed by every provider adapter."""

from pydantic import BaseModel, Field

from .chat_message import ChatMessage
from .generation import GenerationParameters
from .model_config import ModelConfig


class UniformChatRequest(BaseModel):
    """A provider-agnostic chat request.

    Request handlers build one of these from the raw HTTP body; adapters
    never see the body itself.  ``provider`` is kept as the raw tag so
    that the dispatcher can reject unknown tags with a precise message.
    """

    provider: str
    messages: list[ChatMessage] = Field(default_factory=list)
    system: str = ""
    model: ModelConfig
    params: GenerationParameters = Field(default_factory=GenerationParameters)
