"""Enumerations used across models."""

from enum import Enum


class MessageRole(str, Enum):
    """Enum for message roles in a conversation.

    ``USER`` denotes a human message and ``ASSISTANT`` a reply from the
    model.  System instructions travel separately from the message list,
    so there is no system role here.
    """

    USER = "user"
    ASSISTANT = "assistant"


class Provider(str, Enum):
    """Provider tags understood by the relay."""

    BEDROCK = "bedrock"
    OPENAI = "openai"
    AZURE_OPENAI = "azure-openai"
    GEMINI = "gemini"
