"""Mock transport for running without network access."""

from __future__ import annotations

from collections.abc import Mapping
import json
from typing import Any

from geminiclient.transports.base import TransportResult


def _request_texts(body: str | bytes | None) -> list[str]:
    if not body:
        return []
    try:
        payload: Any = json.loads(body)
    except (RecursionError, ValueError):
        return []
    texts: list[str] = []
    contents = payload.get("contents") if isinstance(payload, dict) else None
    for content in contents if isinstance(contents, list) else []:
        parts = content.get("parts") if isinstance(content, dict) else None
        for part in parts if isinstance(parts, list) else []:
            text = part.get("text") if isinstance(part, dict) else None
            if isinstance(text, str):
                texts.append(text)
    return texts


class MockTransport:
    """Return a deterministic Gemini-shaped response without calling out.

    Echo the first non-empty text part so offline runs stay informative.
    """

    model_version = "mock-model"

    def execute(
        self,
        method: str,  # noqa: ARG002
        url: str,  # noqa: ARG002
        headers: Mapping[str, str],  # noqa: ARG002
        body: str | bytes | None,
    ) -> TransportResult:
        texts = [t for t in _request_texts(body) if t.strip()]
        text = texts[0] if texts else ""
        payload = {
            "candidates": [
                {
                    "content": {"role": "model", "parts": [{"text": f"echo: {text[:100]}"}]},
                    "finishReason": "STOP",
                }
            ],
            "usageMetadata": {
                "promptTokenCount": 10,
                "candidatesTokenCount": 10,
                "totalTokenCount": 20,
            },
            "model": self.model_version,
        }
        return TransportResult(
            status_code=200,
            headers={"content-type": ["application/json; charset=UTF-8"]},
            raw_body=json.dumps(payload),
        )
