"""Error handling utilities and custom exceptions.

Every failure that can cross the adapter -> handler boundary is a
:class:`RelayError`.  It carries a machine-readable ``kind`` next to the
human-readable message so callers can branch on the category instead of
inspecting the text.  Upstream failures additionally keep the provider's
HTTP status and raw response body.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional


class ErrorKind(str, Enum):
    """Categories of relay failures."""

    VALIDATION = "validation"
    CREDENTIAL = "credential"
    UPSTREAM = "upstream"
    TRANSPORT = "transport"
    PARSE = "parse"


class RelayError(Exception):
    """Base class for failures raised while relaying a chat request."""

    kind: ErrorKind = ErrorKind.VALIDATION

    def __init__(
        self,
        message: str,
        *,
        status: Optional[int] = None,
        body: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status = status
        self.body = body


class InvalidRequestError(RelayError):
    """The incoming request body cannot be turned into a chat request."""

    kind = ErrorKind.VALIDATION


class UnsupportedProviderError(RelayError):
    """The provider tag does not name a known adapter."""

    kind = ErrorKind.VALIDATION

    def __init__(self, provider: object) -> None:
        super().__init__(f"Unsupported provider: {provider}")
        self.provider = provider


class MissingCredentialError(RelayError):
    """A required provider setting is absent from the environment."""

    kind = ErrorKind.CREDENTIAL

    def __init__(self, provider: str, variables: list[str]) -> None:
        names = " and ".join(variables)
        super().__init__(f"Missing {provider} configuration. Set {names} in .env.")
        self.provider = provider
        self.variables = variables


class UpstreamError(RelayError):
    """The provider answered with a non-2xx status."""

    kind = ErrorKind.UPSTREAM

    def __init__(self, provider: str, status: int, body: str) -> None:
        super().__init__(f"{provider} API error {status}: {body}", status=status, body=body)
        self.provider = provider


class TransportError(RelayError):
    """The request never produced an HTTP response."""

    kind = ErrorKind.TRANSPORT


class ResponseParseError(RelayError):
    """A successful response body could not be decoded."""

    kind = ErrorKind.PARSE


def error_message(exc: Exception) -> str:
    """Return the message exposed to clients for ``exc``."""
    if isinstance(exc, RelayError):
        return exc.message
    return str(exc) or "Unknown error occurred"

