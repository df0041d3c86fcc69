"""Transport implementations."""

from .base import Transport, TransportResult
from .http import HttpxTransport
from .mock import MockTransport

__all__ = [
    "HttpxTransport",
    "MockTransport",
    "Transport",
    "TransportResult",
]
