"""Small HTTP-related constants shared across geminiclient.

This module is intentionally tiny to avoid circular imports and drift.
"""

from __future__ import annotations

CONTENT_TYPE_HEADER = "Content-Type"
AUTHORIZATION_HEADER = "Authorization"
JSON_MEDIA_TYPE = "application/json"

# Methods whose requests must carry a body.
BODY_METHODS: frozenset[str] = frozenset({"POST", "PUT", "PATCH"})
BODYLESS_METHODS: frozenset[str] = frozenset({"GET", "DELETE"})


def is_success_status(status_code: int) -> bool:
    """Return True for 2xx status codes."""
    return 200 <= status_code < 300
