"""Content model: the provider's content tree for requests and responses.

A request or response is a list of ``Content`` blocks, each an ordered list of
``Part`` objects holding text. Field names on ``RequestBody`` and below match
the wire format, so these dataclasses serialize as-is.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

from geminiclient.errors import ResponseParseError

T = TypeVar("T")


@dataclass(frozen=True)
class Prompt(Generic[T]):
    """A typed prompt value; its text form is ``str(text)``."""

    text: T


@dataclass(frozen=True)
class Part:
    """Smallest unit of textual content."""

    text: str

    @classmethod
    def from_prompt(cls, prompt: Prompt[Any]) -> Part:
        """Build a part from a typed prompt using its string conversion."""
        return cls(text=str(prompt.text))


@dataclass(frozen=True)
class Content:
    """One turn or content block. Part order is rendering order."""

    parts: tuple[Part, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "parts", tuple(self.parts))

    @classmethod
    def from_text(cls, *texts: str) -> Content:
        return cls(parts=tuple(Part(text) for text in texts))

    @property
    def text(self) -> str:
        """Concatenated text of all parts, in order."""
        return "".join(part.text for part in self.parts)


@dataclass(frozen=True)
class RequestBody:
    """Exact wire shape sent to the provider: ``{"contents": [...]}``."""

    contents: tuple[Content, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "contents", tuple(self.contents))

    @classmethod
    def from_prompt(cls, prompt: str | Prompt[Any]) -> RequestBody:
        """Single-turn body holding one part."""
        part = Part.from_prompt(prompt) if isinstance(prompt, Prompt) else Part(prompt)
        return cls(contents=(Content(parts=(part,)),))


@dataclass(frozen=True)
class Candidate:
    """One generated alternative returned by the provider."""

    content: Content
    finish_reason: str | None = None
    avg_logprobs: float | None = None

    @classmethod
    def from_contents(cls, contents: Iterable[Content]) -> Candidate:
        """Build a candidate from parsed contents, keeping only the first.

        Generation metadata is left unset. An empty list has no content to
        keep and is treated as an unexpected response shape.
        """
        contents = list(contents)
        if not contents:
            raise ResponseParseError("Candidate has no text content")
        return cls(content=contents[0])


@dataclass
class UsageMetadata:
    """Integer token counts keyed by the provider's field names."""

    token_counts: dict[str, int] = field(default_factory=dict)

    def put(self, key: str, value: int) -> None:
        self.token_counts[key] = value

    def get(self, key: str) -> int:
        """Return the count for *key*, or 0 when the provider did not send it."""
        return self.token_counts.get(key, 0)


@dataclass(frozen=True)
class ResponseBody:
    """Parsed provider envelope."""

    candidates: tuple[Candidate, ...] = ()
    usage_metadata: UsageMetadata | None = None
    model_version: str = "unknown"

    def __post_init__(self) -> None:
        object.__setattr__(self, "candidates", tuple(self.candidates))

    @property
    def text(self) -> str:
        """Text of the first candidate, or an empty string."""
        if not self.candidates:
            return ""
        return self.candidates[0].content.text

    @property
    def usage(self) -> Mapping[str, int]:
        if self.usage_metadata is None:
            return {}
        return dict(self.usage_metadata.token_counts)
