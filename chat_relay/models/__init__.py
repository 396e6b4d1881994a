"""Expose commonly used model classes at the package level.

Importing these classes here allows consumers to write concise imports like::

    from chat_relay.models import ChatMessage, ModelConfig, UniformChatRequest

These names refer to the underlying Pydantic models defined in their
respective modules.
"""

from .chat_message import ChatMessage  # noqa: F401
from .chat_request import UniformChatRequest  # noqa: F401
from .chat_response import ChatResponse, ErrorResponse, ProbeErrorResponse, ProbeResponse  # noqa: F401
from .enums import MessageRole, Provider  # noqa: F401
from .generation import GenerationParameters  # noqa: F401
from .model_config import ModelConfig  # noqa: F401
