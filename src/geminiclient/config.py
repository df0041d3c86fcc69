"""Configuration: frozen Config with API key resolution."""

from __future__ import annotations

from dataclasses import dataclass
import os

from dotenv import load_dotenv

from geminiclient.errors import ConfigurationError

load_dotenv()

API_KEY_ENV_VAR = "GEMINI_API_KEY"
DEFAULT_BASE_URL = "https://generativelanguage.googleapis.com/v1beta"
DEFAULT_MODEL = "gemini-1.5-flash"


@dataclass(frozen=True)
class Config:
    """Immutable configuration for a chat client.

    The API key is auto-resolved from ``GEMINI_API_KEY`` (a ``.env`` file is
    loaded on import) and sent as the ``key`` query value, never as a header.

    Example:
        config = Config(model="gemini-1.5-flash")
        # API key is automatically resolved from GEMINI_API_KEY
    """

    model: str = DEFAULT_MODEL
    #: Auto-resolved from ``GEMINI_API_KEY`` when *None*.
    api_key: str | None = None
    base_url: str = DEFAULT_BASE_URL
    timeout_s: float = 60.0
    use_mock: bool = False

    def __post_init__(self) -> None:
        """Auto-resolve API key and validate configuration."""
        if not self.model or not self.model.strip():
            raise ConfigurationError(
                "model must be a non-empty string",
                hint=f"Pass model={DEFAULT_MODEL!r} or another Gemini model name.",
            )
        if not self.base_url:
            raise ConfigurationError(
                "base_url must be a non-empty string",
                hint=f"The public endpoint is {DEFAULT_BASE_URL}.",
            )
        if self.timeout_s <= 0:
            raise ConfigurationError(
                f"timeout_s must be > 0, got {self.timeout_s}",
                hint="This bounds a single HTTP round trip, in seconds.",
            )

        if self.api_key is None and not self.use_mock:
            object.__setattr__(self, "api_key", os.environ.get(API_KEY_ENV_VAR))

        if not self.use_mock and not self.api_key:
            raise ConfigurationError(
                "API key required for Gemini",
                hint=f"Set {API_KEY_ENV_VAR} environment variable or pass api_key=...",
            )

    @property
    def generate_content_uri(self) -> str:
        """Request URI up to and including ``?key=``; the key is appended."""
        return f"{self.base_url.rstrip('/')}/models/{self.model}:generateContent?key="

    def __str__(self) -> str:
        """Return a redacted, developer-friendly representation."""
        return (
            f"Config(model={self.model!r}, base_url={self.base_url!r}, "
            f"api_key={'[REDACTED]' if self.api_key else None}, "
            f"timeout_s={self.timeout_s}, use_mock={self.use_mock})"
        )

    __repr__ = __str__
