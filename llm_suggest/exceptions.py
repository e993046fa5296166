"""Package-specific exception types."""

from __future__ import annotations


class LlmError(Exception):
    """Base class for errors raised while obtaining a completion."""


class MissingCredentialsError(LlmError):
    """Raised when no API key, `pass` entry, or Ollama model is available."""

    def __init__(self, message: str = "no API key or Ollama model found"):
        super().__init__(message)


class ProviderRequestError(LlmError):
    """Raised when a provider request fails or returns an unusable payload.

    Args:
        message: Human-readable description of the failure.
        status_code: HTTP status of the response, when one was received.
    """

    def __init__(self, message: str, status_code: int | None = None):
        self.status_code = status_code
        super().__init__(message)


class EmptyCompletionError(LlmError):
    """Raised when a provider answers with blank text."""

    def __init__(self, message: str = "empty response from API"):
        super().__init__(message)
