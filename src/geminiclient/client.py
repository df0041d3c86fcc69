"""Client facade wiring a Config into a ready-to-use ChatModel."""

from __future__ import annotations

import logging
from types import TracebackType
from typing import TYPE_CHECKING, Any, Self

from geminiclient._http import CONTENT_TYPE_HEADER, JSON_MEDIA_TYPE
from geminiclient.model import ChatModel, Model
from geminiclient.models import Content, Prompt, RequestBody
from geminiclient.request import ChatRequest
from geminiclient.transports import HttpxTransport, MockTransport

if TYPE_CHECKING:
    from geminiclient.config import Config
    from geminiclient.response import ChatResponse
    from geminiclient.transports.base import Transport
    from geminiclient.validation import RequestRule

log = logging.getLogger(__name__)

PromptInput = str | Prompt[Any] | Content | RequestBody


class ChatClient:
    """Build and send generateContent requests for one Config.

    ``model`` is a plain attribute and can be replaced, e.g. with a test
    double. A transport passed in is left open by ``close()``.

    Example:
        with ChatClient(Config()) as client:
            response = client.generate("Hello, can you assist me?")
            if response.is_successful():
                print(response.text)
    """

    def __init__(
        self,
        config: Config,
        *,
        transport: Transport | None = None,
        validator: RequestRule | None = None,
    ) -> None:
        self.config = config
        self._owns_transport = transport is None
        if transport is None:
            transport = (
                MockTransport()
                if config.use_mock
                else HttpxTransport(timeout_s=config.timeout_s)
            )
        self.transport = transport
        self.model: Model = ChatModel(transport, validator)

    def build_request(self, prompt: PromptInput) -> ChatRequest:
        """POST request for *prompt* against the configured model."""
        if isinstance(prompt, RequestBody):
            body = prompt
        elif isinstance(prompt, Content):
            body = RequestBody(contents=(prompt,))
        else:
            body = RequestBody.from_prompt(prompt)
        return ChatRequest.post(
            self.config.generate_content_uri, self.config.api_key or "", body
        ).with_header(CONTENT_TYPE_HEADER, JSON_MEDIA_TYPE)

    def generate(self, prompt: PromptInput) -> ChatResponse:
        """Send one prompt and return the mapped response.

        Raises:
            ValidationError: If the built request fails pre-dispatch checks.
        """
        response = self.model.call(self.build_request(prompt))
        if not response.is_successful():
            log.debug(
                "Generate for %s returned status %d", self.config.model, response.status_code
            )
        return response

    def close(self) -> None:
        close = getattr(self.transport, "close", None)
        if self._owns_transport and callable(close):
            close()

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()
