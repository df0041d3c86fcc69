"""JSON codec shared by the request and response paths.

Serialization goes through cached pydantic ``TypeAdapter`` instances so the
content dataclasses dump to their wire shape without hand-written encoders.
Parsing returns the plain ``json`` tree; the ``get_*`` helpers give optional,
type-checked access into it.
"""

from __future__ import annotations

from functools import lru_cache
import json
from typing import Any

from pydantic import TypeAdapter

from geminiclient.errors import ResponseParseError


@lru_cache(maxsize=32)
def _adapter_for(tp: type[Any]) -> TypeAdapter[Any]:
    return TypeAdapter(tp)


class JsonCodec:
    """Stateless JSON codec; one instance is safe to share across threads."""

    def dumps(self, value: Any) -> str:
        """Serialize a dataclass (or plain JSON value) to compact JSON text."""
        return _adapter_for(type(value)).dump_json(value).decode("utf-8")

    def loads(self, text: str | bytes | None) -> Any:
        """Parse JSON text into a tree of dicts, lists and scalars."""
        if text is None:
            raise ResponseParseError("Response body is empty")
        try:
            return json.loads(text)
        except RecursionError as e:
            raise ResponseParseError("Malformed JSON: nesting too deep") from e
        except (TypeError, ValueError) as e:
            raise ResponseParseError(f"Malformed JSON: {e}") from e


def get_object(node: Any, key: str) -> dict[str, Any] | None:
    """Return ``node[key]`` when it is a JSON object, else None."""
    value = node.get(key) if isinstance(node, dict) else None
    return value if isinstance(value, dict) else None


def get_array(node: Any, key: str) -> list[Any] | None:
    """Return ``node[key]`` when it is a JSON array, else None.

    Raises:
        ResponseParseError: If the field is present but not an array.
    """
    if not isinstance(node, dict) or node.get(key) is None:
        return None
    value = node[key]
    if not isinstance(value, list):
        raise ResponseParseError(
            f"Expected '{key}' to be an array, got {type(value).__name__}"
        )
    return value


def get_text(node: Any, key: str, default: str = "") -> str:
    """Return the textual form of a field.

    Missing and null fields give *default*; objects and arrays have no text
    form and give an empty string.
    """
    value = node.get(key) if isinstance(node, dict) else None
    if value is None:
        return default
    if isinstance(value, (dict, list)):
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


_INT32_MIN = -(2**31)
_INT32_MAX = 2**31 - 1


def is_int(value: Any) -> bool:
    """True for JSON integers that fit in 32 bits.

    Booleans are not integers here; wider values are treated as non-integer.
    """
    return (
        isinstance(value, int)
        and not isinstance(value, bool)
        and _INT32_MIN <= value <= _INT32_MAX
    )
