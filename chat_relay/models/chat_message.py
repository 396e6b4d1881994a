"""Models representing chat messages."""

from pydantic import BaseModel, field_validator

from .enums import MessageRole


class ChatMessage(BaseModel):
    """Represents a single message in a conversation.

    The content is always non-empty once surrounding whitespace is
    removed; callers building messages from untrusted input should go
    through :func:`chat_relay.services.message_normalizer.normalize_messages`,
    which drops anything that would violate this.
    """

    role: MessageRole
    content: str

    @field_validator("content")
    @classmethod
    def validate_content(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("content must not be blank")
        return value

    def as_openai(self) -> dict[str, str]:
        return {"role": self.role.value, "content": self.content}
