"""httpx-backed transports for the Contabo client."""

from __future__ import annotations

import httpx

from .config import DEFAULT_TIMEOUT_SECONDS


class HttpxTransport:
    """Send prepared requests through an ``httpx.Client``.

    Responses come back unread; whoever receives them reads and closes them.
    A client passed in by the caller is left open on :meth:`close`.
    """

    def __init__(self, client: httpx.Client | None = None, *, timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS) -> None:
        self._owns_client = client is None
        self._client = client or httpx.Client(timeout=timeout_seconds)

    @property
    def timeout(self) -> httpx.Timeout:
        return self._client.timeout

    def send(self, request: httpx.Request) -> httpx.Response:
        return self._client.send(request, stream=True)

    def close(self) -> None:
        if self._owns_client:
            self._client.close()


class AsyncHttpxTransport:
    """Send prepared requests through an ``httpx.AsyncClient``."""

    def __init__(
        self, client: httpx.AsyncClient | None = None, *, timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS
    ) -> None:
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(timeout=timeout_seconds)

    @property
    def timeout(self) -> httpx.Timeout:
        return self._client.timeout

    async def send(self, request: httpx.Request) -> httpx.Response:
        return await self._client.send(request, stream=True)

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()
