"""Exception hierarchy for geminiclient."""

from __future__ import annotations


class GeminiClientError(Exception):
    """Base exception for all geminiclient errors."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint = hint


class ConfigurationError(GeminiClientError):
    """Configuration validation or resolution failed."""


class ValidationError(GeminiClientError):
    """A request failed a pre-dispatch rule.

    Always raised to the caller before anything is sent.
    """

    def __init__(self, reason: str, *, hint: str | None = None) -> None:
        super().__init__(reason, hint=hint)
        self.reason = reason


class TransportError(GeminiClientError):
    """Network-level failure while dispatching a request.

    HTTP error statuses are not transport errors; they come back as results.
    """

    def __init__(
        self,
        message: str,
        *,
        hint: str | None = None,
        method: str | None = None,
    ) -> None:
        super().__init__(message, hint=hint)
        self.method = method


class ResponseParseError(GeminiClientError):
    """A response body did not have the expected shape."""
