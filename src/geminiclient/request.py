"""Immutable HTTP request value for the chat API."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Protocol, runtime_checkable
from urllib.parse import urlencode

from geminiclient._http import BODY_METHODS, BODYLESS_METHODS
from geminiclient.models import RequestBody


@runtime_checkable
class Validatable(Protocol):
    """Caller-facing structural check."""

    def validate(self) -> bool:
        """Return True when the value is structurally usable."""
        ...


@runtime_checkable
class Request(Validatable, Protocol):
    """Capability set every request variant exposes."""

    @property
    def uri(self) -> str: ...

    @property
    def method(self) -> str: ...

    @property
    def headers(self) -> Mapping[str, str]: ...

    @property
    def body(self) -> RequestBody | None: ...

    @property
    def endpoint(self) -> str:
        """Fully resolved URI including encoded query parameters."""
        ...


@dataclass(frozen=True)
class ChatRequest:
    """A single chat API request.

    Instances never change after construction; ``with_header``,
    ``with_parameter`` and ``with_body`` return modified copies. ``headers``
    and ``parameters`` are read-only views in insertion order.

    Example:
        request = ChatRequest.post(uri, api_key, body).with_header(
            "Content-Type", "application/json"
        )
    """

    uri: str
    method: str
    headers: Mapping[str, str] = field(default_factory=dict)
    parameters: Mapping[str, str] = field(default_factory=dict)
    body: RequestBody | None = None

    def __post_init__(self) -> None:
        if self.uri is None:
            raise ValueError("URI cannot be None")
        if self.method is None:
            raise ValueError("HTTP method cannot be None")
        object.__setattr__(self, "method", self.method.upper())
        object.__setattr__(
            self, "headers", MappingProxyType(dict(self.headers or {}))
        )
        object.__setattr__(
            self, "parameters", MappingProxyType(dict(self.parameters or {}))
        )

    @classmethod
    def get(cls, uri: str, key: str) -> ChatRequest:
        """GET request for ``uri + key`` with no body."""
        return cls(uri + key, "GET")

    @classmethod
    def post(cls, uri: str, key: str, body: RequestBody | None) -> ChatRequest:
        """POST request for ``uri + key`` carrying *body*."""
        return cls(uri + key, "POST", body=body)

    @property
    def endpoint(self) -> str:
        if not self.parameters:
            return self.uri
        return f"{self.uri}?{urlencode(dict(self.parameters), encoding='utf-8')}"

    def validate(self) -> bool:
        """Method-aware structural check; headers are not inspected."""
        if self.method in BODYLESS_METHODS:
            return bool(self.uri)
        if self.method in BODY_METHODS:
            return bool(self.uri) and self.body is not None
        return False

    def with_header(self, key: str, value: str) -> ChatRequest:
        headers = dict(self.headers)
        headers[key] = value
        return ChatRequest(self.uri, self.method, headers, self.parameters, self.body)

    def with_parameter(self, key: str, value: str) -> ChatRequest:
        parameters = dict(self.parameters)
        parameters[key] = value
        return ChatRequest(self.uri, self.method, self.headers, parameters, self.body)

    def with_body(self, body: RequestBody | None) -> ChatRequest:
        return ChatRequest(self.uri, self.method, self.headers, self.parameters, body)

    def __hash__(self) -> int:
        return hash(
            (
                self.uri,
                self.method,
                frozenset(self.headers.items()),
                frozenset(self.parameters.items()),
                self.body,
            )
        )

    def __repr__(self) -> str:
        # The body may hold user content; keep it out of logs.
        return (
            f"ChatRequest(uri={self.uri!r}, method={self.method!r}, "
            f"headers={dict(self.headers)!r}, parameters={dict(self.parameters)!r}, "
            f"body={'***' if self.body is not None else None})"
        )
