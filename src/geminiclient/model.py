"""Chat invocation: validate, dispatch, and map the raw result.

``ChatModel.call`` is the only place a transport failure becomes an ordinary
return value. Validation errors still propagate; parse errors and transport
errors come back as a ``ChatResponse`` carrying failure indicators.
"""

from __future__ import annotations

from collections.abc import Mapping
import logging
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

from geminiclient._http import (
    AUTHORIZATION_HEADER,
    CONTENT_TYPE_HEADER,
    JSON_MEDIA_TYPE,
    is_success_status,
)
from geminiclient.codec import JsonCodec, get_array, get_object, get_text, is_int
from geminiclient.errors import ResponseParseError, TransportError
from geminiclient.models import Candidate, Content, Part, ResponseBody, UsageMetadata
from geminiclient.response import ChatResponse
from geminiclient.validation import BasicRequestValidator

if TYPE_CHECKING:
    from geminiclient.request import Request
    from geminiclient.transports.base import Transport, TransportResult
    from geminiclient.validation import RequestRule

log = logging.getLogger(__name__)

#: Model version reported on synthetic error responses.
ERROR_MODEL_VERSION = "gemini-flash-1.5"
ERROR_FINISH_REASON = "ERROR"
UNKNOWN_MODEL_VERSION = "unknown"


@runtime_checkable
class Model(Protocol):
    """Anything that turns a request into a response."""

    def call(self, request: Request) -> ChatResponse: ...


def build_headers(request_headers: Mapping[str, str] | None) -> dict[str, str]:
    """Outgoing headers for a request.

    Content-Type defaults to JSON when the request sets none. Authorization
    is always dropped: credentials travel in the URL (``?key=``), never as a
    header handed to the transport.
    """
    headers: dict[str, str] = {}
    if request_headers is None or CONTENT_TYPE_HEADER not in request_headers:
        headers[CONTENT_TYPE_HEADER] = JSON_MEDIA_TYPE
    for key, value in (request_headers or {}).items():
        headers[key] = value
    return {
        k: v for k, v in headers.items() if k.lower() != AUTHORIZATION_HEADER.lower()
    }


def first_header_values(headers: Mapping[str, list[str]]) -> dict[str, str]:
    """Collapse multi-valued headers to their first value ("" when empty)."""
    return {key: values[0] if values else "" for key, values in headers.items()}


class ChatModel:
    """Synchronous chat invocation over a transport.

    The transport, validator and codec are held for the model's lifetime and
    are shared by every call; none of them keep per-call state.
    """

    def __init__(
        self,
        transport: Transport,
        validator: RequestRule | None = None,
        *,
        codec: JsonCodec | None = None,
    ) -> None:
        self.transport = transport
        self.validator: RequestRule = validator or BasicRequestValidator()
        self.codec = codec or JsonCodec()

    def call(self, request: Request) -> ChatResponse:
        """Send *request* once and return the mapped response.

        Raises:
            ValidationError: If the request fails the validator. Nothing is
                sent in that case.
        """
        self.validator.validate(request)

        headers = build_headers(request.headers)
        body = self.codec.dumps(request.body) if request.body is not None else None
        log.debug("Dispatching %s request", request.method)
        try:
            result = self.transport.execute(
                request.method, request.endpoint, headers, body
            )
        except TransportError as e:
            log.debug("Transport failed for %s request: %s", request.method, e)
            return self.error_response(e)
        return self.map_response(result)

    def map_response(self, result: TransportResult) -> ChatResponse:
        response = ChatResponse()
        response.status_code = result.status_code
        response.headers = first_header_values(result.headers)
        response.body = self.parse_body(result.raw_body)
        response.successful = is_success_status(result.status_code)
        return response

    def parse_body(self, raw_body: str | None) -> ResponseBody:
        """Parse the provider envelope; never raises."""
        try:
            return self._parse_body(raw_body)
        except ResponseParseError as e:
            log.warning("Error parsing response body: %s", e)
            return ResponseBody((), None, UNKNOWN_MODEL_VERSION)

    def _parse_body(self, raw_body: str | None) -> ResponseBody:
        root = self.codec.loads(raw_body)
        if not isinstance(root, dict):
            raise ResponseParseError(
                f"Expected a JSON object, got {type(root).__name__}"
            )

        candidates: list[Candidate] = []
        for node in get_array(root, "candidates") or []:
            contents = _parse_contents(get_object(node, "content"))
            candidates.append(Candidate.from_contents(contents))

        return ResponseBody(
            candidates=tuple(candidates),
            usage_metadata=_parse_usage_metadata(root.get("usageMetadata")),
            model_version=get_text(root, "model", UNKNOWN_MODEL_VERSION),
        )

    def error_response(self, exc: TransportError) -> ChatResponse:
        """Synthetic failed response standing in for a transport error."""
        message = str(exc)
        candidate = Candidate(
            content=Content(parts=(Part(message),)),
            finish_reason=ERROR_FINISH_REASON,
            avg_logprobs=0.0,
        )
        return (
            ChatResponse.builder()
            .status_code(500)
            .successful(False)
            .error_message(message)
            .body(ResponseBody((candidate,), None, ERROR_MODEL_VERSION))
            .build()
        )


def _parse_contents(content_node: dict[str, Any] | None) -> list[Content]:
    # One Content per non-empty text part.
    contents: list[Content] = []
    for part_node in get_array(content_node, "parts") or []:
        text = get_text(part_node, "text")
        if text:
            contents.append(Content(parts=(Part(text),)))
    return contents


def _parse_usage_metadata(node: Any) -> UsageMetadata:
    usage = UsageMetadata()
    if not isinstance(node, dict):
        return usage
    for key, value in node.items():
        if is_int(value):
            usage.put(key, value)
    return usage
