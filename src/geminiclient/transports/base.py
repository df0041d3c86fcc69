"""Transport protocol: the one capability the chat model needs from HTTP."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Protocol, runtime_checkable


@dataclass(frozen=True)
class TransportResult:
    """Raw outcome of one HTTP exchange.

    Any status code is a result, including 4xx/5xx. Header names may repeat,
    so each maps to every value received, in order.
    """

    status_code: int
    headers: Mapping[str, list[str]] = field(default_factory=dict)
    raw_body: str = ""


@runtime_checkable
class Transport(Protocol):
    """Minimal transport protocol: execute a single request."""

    def execute(
        self,
        method: str,
        url: str,
        headers: Mapping[str, str],
        body: str | bytes | None,
    ) -> TransportResult:
        """Send one request and return the raw result.

        Raises:
            TransportError: On network or connection failure.
        """
        ...
