"""Response value returned by the chat model."""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any, Protocol, TypeVar, runtime_checkable

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from geminiclient._http import is_success_status
from geminiclient.errors import ResponseParseError
from geminiclient.models import ResponseBody

M = TypeVar("M", bound=BaseModel)


@runtime_checkable
class Response(Protocol):
    """Capability set every response variant exposes."""

    @property
    def status_code(self) -> int: ...

    @property
    def headers(self) -> Mapping[str, str]: ...

    @property
    def body(self) -> ResponseBody | None: ...

    @property
    def error_message(self) -> str | None: ...

    def is_successful(self) -> bool: ...


class ChatResponse:
    """Status, headers and parsed body of one chat call.

    Assigning ``status_code`` recomputes ``successful`` (2xx). Passing
    ``successful`` to the constructor, or assigning it afterwards, sets it
    without cross-checking the status.
    """

    def __init__(
        self,
        status_code: int = 0,
        headers: Mapping[str, str] | None = None,
        body: ResponseBody | None = None,
        successful: bool | None = None,
        error_message: str | None = None,
    ) -> None:
        self.status_code = status_code
        self.headers = headers  # type: ignore[assignment]
        self.body = body
        if successful is not None:
            self.successful = successful
        self.error_message = error_message

    @property
    def status_code(self) -> int:
        return self._status_code

    @status_code.setter
    def status_code(self, value: int) -> None:
        self._status_code = value
        self.successful = is_success_status(value)

    @property
    def headers(self) -> Mapping[str, str]:
        return MappingProxyType(self._headers)

    @headers.setter
    def headers(self, value: Mapping[str, str] | None) -> None:
        self._headers = dict(value or {})

    def is_successful(self) -> bool:
        return self.successful

    @classmethod
    def builder(cls) -> ChatResponseBuilder:
        return ChatResponseBuilder()

    @classmethod
    def from_exception(cls, exc: BaseException) -> ChatResponse:
        """Unsuccessful 500 response carrying the exception message."""
        return (
            ChatResponseBuilder()
            .status_code(500)
            .successful(False)
            .error_message(str(exc))
            .build()
        )

    @property
    def text(self) -> str:
        return self.body.text if self.body is not None else ""

    def structured(self, schema: type[M]) -> M:
        """Validate the response text as JSON against a pydantic model.

        Raises:
            ResponseParseError: If the text is not valid JSON for *schema*.
        """
        try:
            return schema.model_validate_json(self.text)
        except PydanticValidationError as e:
            raise ResponseParseError(
                f"Failed to parse response body as {schema.__name__}",
                hint="Ask the model for JSON output matching the schema.",
            ) from e

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ChatResponse):
            return NotImplemented
        return (
            self.status_code == other.status_code
            and self.successful == other.successful
            and self._headers == other._headers
            and self.body == other.body
            and self.error_message == other.error_message
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return (
            f"ChatResponse(status_code={self.status_code}, headers={self._headers!r}, "
            f"body={'***' if self.body is not None else None}, "
            f"successful={self.successful}, error_message={self.error_message!r})"
        )


class ChatResponseBuilder:
    """Fluent builder for ``ChatResponse``.

    ``successful`` follows the status code unless it was set explicitly; an
    explicit value wins regardless of call order.
    """

    def __init__(self) -> None:
        self._fields: dict[str, Any] = {}

    def status_code(self, status_code: int) -> ChatResponseBuilder:
        self._fields["status_code"] = status_code
        return self

    def headers(self, headers: Mapping[str, str] | None) -> ChatResponseBuilder:
        self._fields["headers"] = headers
        return self

    def body(self, body: ResponseBody | None) -> ChatResponseBuilder:
        self._fields["body"] = body
        return self

    def successful(self, successful: bool) -> ChatResponseBuilder:
        self._fields["successful"] = successful
        return self

    def error_message(self, error_message: str | None) -> ChatResponseBuilder:
        self._fields["error_message"] = error_message
        return self

    def build(self) -> ChatResponse:
        return ChatResponse(**self._fields)
