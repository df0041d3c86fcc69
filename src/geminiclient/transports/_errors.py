"""Transport-side error helpers.

Transports map their library's exceptions into ``TransportError`` so the
chat model only has one failure type to absorb.
"""

from __future__ import annotations

import httpx

from geminiclient.errors import TransportError


def _transport_hint(exc: BaseException) -> str | None:
    if isinstance(exc, httpx.TimeoutException):
        return "The request timed out; raise Config.timeout_s for slow models."
    if isinstance(exc, httpx.ConnectError):
        return "Check network connectivity and Config.base_url."
    return None


def wrap_transport_error(
    exc: BaseException,
    *,
    method: str,
    hint: str | None = None,
) -> TransportError:
    """Map an HTTP library exception into TransportError."""
    # Already wrapped: fill in missing context only.
    if isinstance(exc, TransportError):
        if exc.method is None:
            exc.method = method
        if hint is not None and exc.hint is None:
            exc.hint = hint
        return exc

    # Some httpx errors stringify to "", keep the message useful.
    message = str(exc) or type(exc).__name__
    return TransportError(
        message,
        hint=hint if hint is not None else _transport_hint(exc),
        method=method,
    )
