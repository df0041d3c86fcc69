"""geminiclient: typed request/response client for the Gemini chat API.

Public API:
    - ChatClient: Config-driven facade (build_request / generate)
    - ChatModel: validate, dispatch and map a single request
    - ChatRequest / ChatResponse: immutable request, mapped response
    - Part / Content / RequestBody / ResponseBody: the content tree
"""

from __future__ import annotations

import logging

from geminiclient.client import ChatClient
from geminiclient.codec import JsonCodec
from geminiclient.config import Config
from geminiclient.errors import (
    ConfigurationError,
    GeminiClientError,
    ResponseParseError,
    TransportError,
    ValidationError,
)
from geminiclient.model import ChatModel, Model
from geminiclient.models import (
    Candidate,
    Content,
    Part,
    Prompt,
    RequestBody,
    ResponseBody,
    UsageMetadata,
)
from geminiclient.request import ChatRequest, Request, Validatable
from geminiclient.response import ChatResponse, ChatResponseBuilder, Response
from geminiclient.transports import (
    HttpxTransport,
    MockTransport,
    Transport,
    TransportResult,
)
from geminiclient.validation import BasicRequestValidator, RequestRule

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("geminiclient")
except PackageNotFoundError:
    __version__ = "0.0.0+unknown"

# Library-level NullHandler: stay silent unless the consumer configures logging.
logging.getLogger("geminiclient").addHandler(logging.NullHandler())

__all__ = [
    "BasicRequestValidator",
    "Candidate",
    "ChatClient",
    "ChatModel",
    "ChatRequest",
    "ChatResponse",
    "ChatResponseBuilder",
    "Config",
    "ConfigurationError",
    "Content",
    "GeminiClientError",
    "HttpxTransport",
    "JsonCodec",
    "MockTransport",
    "Model",
    "Part",
    "Prompt",
    "Request",
    "RequestBody",
    "RequestRule",
    "Response",
    "ResponseBody",
    "ResponseParseError",
    "Transport",
    "TransportError",
    "TransportResult",
    "UsageMetadata",
    "Validatable",
    "ValidationError",
]
