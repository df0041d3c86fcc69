"""Pre-dispatch request rules."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Protocol, runtime_checkable

import httpx

from geminiclient._http import CONTENT_TYPE_HEADER, JSON_MEDIA_TYPE
from geminiclient.errors import ValidationError
from geminiclient.request import Request


@runtime_checkable
class RequestRule(Protocol):
    """A check applied by the model before a request is dispatched."""

    def validate(self, request: Request) -> None:
        """Raise ``ValidationError`` when *request* breaks the rule."""
        ...


class BasicRequestValidator:
    """URI, Content-Type and method checks.

    Stateless; one instance can be shared by every model.
    """

    def validate(self, request: Request) -> None:
        self._validate_uri(request.uri)
        self._validate_headers(request.headers)
        self._validate_method(request.method)

    @staticmethod
    def _validate_uri(uri: str | None) -> None:
        if not uri:
            raise ValidationError("URI is null or empty")
        try:
            host = httpx.URL(uri).host
        except (httpx.InvalidURL, ValueError) as e:
            raise ValidationError(f"Invalid URI format: {uri}") from e
        if not host:
            raise ValidationError(
                "Unauthorized domain: URI has no host",
                hint="Use an absolute URI such as https://generativelanguage.googleapis.com/...",
            )

    @staticmethod
    def _validate_headers(headers: Mapping[str, str] | None) -> None:
        content_type = (headers or {}).get(CONTENT_TYPE_HEADER)
        if content_type is None or not content_type.startswith(JSON_MEDIA_TYPE):
            raise ValidationError(
                "Invalid or missing Content-Type header",
                hint=f"Add .with_header('{CONTENT_TYPE_HEADER}', '{JSON_MEDIA_TYPE}').",
            )

    @staticmethod
    def _validate_method(method: str | None) -> None:
        if not method:
            raise ValidationError("Method is null or empty")
