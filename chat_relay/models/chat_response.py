"""Response models for the relay API."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from .enums import MessageRole


class ChatResponse(BaseModel):
    """The assistant's reply to a chat turn."""

    role: MessageRole = MessageRole.ASSISTANT
    content: str


class ProbeResponse(BaseModel):
    """Result of a successful provider connectivity probe."""

    ok: Literal[True] = True
    provider: str
    model: str
    response_preview: str = Field(..., alias="responsePreview")

    model_config = ConfigDict(populate_by_name=True)


class ErrorResponse(BaseModel):
    """Error body returned by the chat endpoint."""

    error: str


class ProbeErrorResponse(BaseModel):
    """Error body returned by the probe endpoint."""

    ok: Literal[False] = False
    error: str
