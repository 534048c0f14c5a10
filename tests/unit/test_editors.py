from __future__ import annotations

import asyncio

import httpx
import pytest

from contabo_client.editors import EditorChain, bearer_token_editor, static_headers_editor


def _request() -> httpx.Request:
    return httpx.Request("GET", "https://api.contabo.com/v1/secrets")


def test_chain_runs_editors_in_order() -> None:
    events: list[str] = []
    chain = EditorChain([lambda _request: events.append("first"), lambda _request: events.append("second")])

    chain.extend([lambda _request: events.append("call-site")]).run(_request())

    assert events == ["first", "second", "call-site"]
    assert len(chain) == 2


def test_chain_stops_at_first_failure() -> None:
    events: list[str] = []

    def failing(_request: httpx.Request) -> None:
        raise PermissionError("denied")

    chain = EditorChain([failing, lambda _request: events.append("never")])

    with pytest.raises(PermissionError, match="denied"):
        chain.run(_request())
    assert events == []


def test_chain_rejects_non_callables() -> None:
    with pytest.raises(TypeError):
        EditorChain(["not-an-editor"])  # type: ignore[list-item]


def test_sync_chain_rejects_async_editors() -> None:
    async def editor(_request: httpx.Request) -> None:
        return None

    with pytest.raises(TypeError):
        EditorChain([editor]).run(_request())


@pytest.mark.asyncio
async def test_async_chain_awaits_async_editors() -> None:
    events: list[str] = []

    async def editor(request: httpx.Request) -> None:
        await asyncio.sleep(0)
        request.headers["x-async"] = "yes"
        events.append("async")

    request = _request()
    await EditorChain([editor, lambda _request: events.append("sync")]).run_async(request)

    assert events == ["async", "sync"]
    assert request.headers["x-async"] == "yes"


def test_static_headers_editor_sets_headers() -> None:
    request = _request()

    static_headers_editor({"User-Agent": "cluster-api-provider-contabo", "x-extra": "1"})(request)

    assert request.headers["user-agent"] == "cluster-api-provider-contabo"
    assert request.headers["x-extra"] == "1"


def test_bearer_token_editor_asks_source_per_request() -> None:
    tokens = iter(["first-token", "second-token"])
    editor = bearer_token_editor(lambda: next(tokens))

    first, second = _request(), _request()
    editor(first)
    editor(second)

    assert first.headers["authorization"] == "Bearer first-token"
    assert second.headers["authorization"] == "Bearer second-token"


def test_bearer_token_editor_rejects_empty_tokens() -> None:
    with pytest.raises(ValueError):
        bearer_token_editor(lambda: "")(_request())
