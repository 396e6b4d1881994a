"""Sampling and provider-specific generation knobs."""

from typing import Optional

from pydantic import BaseModel, Field

DEFAULT_TEMPERATURE = 0.7


class GenerationParameters(BaseModel):
    """Generation settings for a single request.

    Optional numeric knobs are ``None`` when the client did not send a
    finite number, in which case the provider's own default applies.
    ``thinking_type`` and ``output_effort`` are only honoured by the
    Bedrock adapter.
    """

    temperature: float = Field(default=DEFAULT_TEMPERATURE)
    top_p: Optional[float] = None
    top_k: Optional[float] = None
    max_tokens: Optional[float] = None
    thinking_type: Optional[str] = None
    output_effort: Optional[str] = None
