"""Blocking HTTP transport on httpx."""

from __future__ import annotations

from collections.abc import Mapping
import logging
import threading
from types import TracebackType
from typing import Self

import httpx

from geminiclient.transports._errors import wrap_transport_error
from geminiclient.transports.base import TransportResult

log = logging.getLogger(__name__)


def _group_headers(headers: httpx.Headers) -> dict[str, list[str]]:
    grouped: dict[str, list[str]] = {}
    for key, value in headers.multi_items():
        grouped.setdefault(key, []).append(value)
    return grouped


class HttpxTransport:
    """Send requests with a (lazily created) ``httpx.Client``.

    Pass ``client`` to reuse a configured client; it is then left open on
    ``close()``. Timeouts are this transport's concern, not the model's.
    """

    def __init__(
        self,
        *,
        timeout_s: float = 60.0,
        client: httpx.Client | None = None,
    ) -> None:
        self.timeout_s = timeout_s
        self._client = client
        self._owns_client = client is None
        self._lock = threading.Lock()

    def _get_client(self) -> httpx.Client:
        with self._lock:
            if self._client is None:
                self._client = httpx.Client(timeout=self.timeout_s)
            return self._client

    def execute(
        self,
        method: str,
        url: str,
        headers: Mapping[str, str],
        body: str | bytes | None,
    ) -> TransportResult:
        client = self._get_client()
        try:
            response = client.request(method, url, headers=dict(headers), content=body)
        except httpx.RequestError as e:
            raise wrap_transport_error(e, method=method) from e

        log.debug("HTTP %s -> %d", method, response.status_code)
        return TransportResult(
            status_code=response.status_code,
            headers=_group_headers(response.headers),
            raw_body=response.text,
        )

    def close(self) -> None:
        with self._lock:
            if self._client is not None and self._owns_client:
                self._client.close()
                self._client = None

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()
