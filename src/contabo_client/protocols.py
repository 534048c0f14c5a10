"""Protocol contracts for Contabo client extension points."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

import httpx


@runtime_checkable
class SyncTransport(Protocol):
    """Sends a prepared request and returns the response unread."""

    def send(self, request: httpx.Request) -> httpx.Response: ...

    def close(self) -> None: ...


@runtime_checkable
class AsyncTransport(Protocol):
    async def send(self, request: httpx.Request) -> httpx.Response: ...

    async def aclose(self) -> None: ...
