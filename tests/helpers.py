"""Test helpers (small, reusable doubles).

Keep this file tiny and purpose-built: it exists so suites do not grow lots
of one-off transport classes.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from geminiclient.transports.base import TransportResult


@dataclass
class RecordingTransport:
    """Transport double that records calls and replays a scripted outcome.

    ``script`` items are returned in order; exceptions are raised. When the
    script runs out, a bare 200 with an empty object body is returned.
    """

    script: list[TransportResult | BaseException] = field(default_factory=list)
    calls: list[dict[str, Any]] = field(default_factory=list)

    def execute(
        self,
        method: str,
        url: str,
        headers: Mapping[str, str],
        body: str | bytes | None,
    ) -> TransportResult:
        self.calls.append(
            {"method": method, "url": url, "headers": dict(headers), "body": body}
        )
        if not self.script:
            return TransportResult(status_code=200, raw_body="{}")
        item = self.script.pop(0)
        if isinstance(item, BaseException):
            raise item
        return item


class AllowAll:
    """Rule that accepts every request."""

    def validate(self, request: Any) -> None:
        del request


def ok(raw_body: str, *, status_code: int = 200, **headers: list[str]) -> TransportResult:
    return TransportResult(status_code=status_code, headers=headers, raw_body=raw_body)
