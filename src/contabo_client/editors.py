"""Request editor chain and built-in editors."""

from __future__ import annotations

import inspect
from collections.abc import Awaitable, Callable, Iterable, Mapping

import httpx

RequestEditor = Callable[[httpx.Request], None | Awaitable[None]]
TokenSource = Callable[[], str]


class EditorChain:
    """An immutable, ordered sequence of request editors."""

    __slots__ = ("_editors",)

    def __init__(self, editors: Iterable[RequestEditor] = ()) -> None:
        editors = tuple(editors)
        for editor in editors:
            if not callable(editor):
                raise TypeError(f"request editor must be callable, got {type(editor).__name__}")
        self._editors: tuple[RequestEditor, ...] = editors

    @property
    def editors(self) -> tuple[RequestEditor, ...]:
        return self._editors

    def __len__(self) -> int:
        return len(self._editors)

    def extend(self, editors: Iterable[RequestEditor]) -> "EditorChain":
        extra = tuple(editors)
        if not extra:
            return self
        return EditorChain((*self._editors, *extra))

    def run(self, request: httpx.Request) -> None:
        for editor in self._editors:
            result = editor(request)
            if inspect.isawaitable(result):
                # Close coroutine objects before rejecting them so sync flows
                # do not leak "coroutine was never awaited" warnings.
                close = getattr(result, "close", None)
                if callable(close):
                    close()
                raise TypeError("sync clients cannot execute async request editors")

    async def run_async(self, request: httpx.Request) -> None:
        for editor in self._editors:
            result = editor(request)
            if inspect.isawaitable(result):
                await result


def static_headers_editor(headers: Mapping[str, str]) -> Callable[[httpx.Request], None]:
    """Set fixed headers on every request, replacing any existing value."""
    fixed = dict(headers)

    def edit(request: httpx.Request) -> None:
        for name, value in fixed.items():
            request.headers[name] = value

    return edit


def bearer_token_editor(token_source: TokenSource) -> Callable[[httpx.Request], None]:
    """Ask ``token_source`` for a token per request and send it as a bearer credential."""

    def edit(request: httpx.Request) -> None:
        token = token_source()
        if not token:
            raise ValueError("token source returned an empty access token")
        request.headers["Authorization"] = f"Bearer {token}"

    return edit
