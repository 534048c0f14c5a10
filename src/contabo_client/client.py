"""Top-level Contabo clients (sync + async, raw + typed)."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from typing import Any, TypeAlias

import httpx

from .api import OperationGroups
from .config import DEFAULT_SERVER, DEFAULT_TIMEOUT_SECONDS, DEFAULT_USER_AGENT, ClientConfig, normalize_server
from .decoder import ResponseEnvelope, decode_response, decode_response_async
from .descriptors import OperationDescriptor
from .editors import EditorChain, RequestEditor, static_headers_editor
from .operations import get_operation
from .protocols import AsyncTransport, SyncTransport
from .request import RequestContent, bind_params, build_json_request, build_request
from .transport import AsyncHttpxTransport, HttpxTransport

logger = logging.getLogger(__name__)

Operation: TypeAlias = str | OperationDescriptor
Timeout: TypeAlias = float | httpx.Timeout | None

_UNSET: Any = object()


@dataclass(slots=True)
class ClientSettings:
    """Mutable construction state handed to each :data:`ClientOption` in order."""

    server: str
    timeout_seconds: float
    headers: dict[str, str]
    http_client: Any | None = None
    transport: Any | None = None
    editors: list[RequestEditor] = field(default_factory=list)


ClientOption = Callable[[ClientSettings], None]


def with_server(server: str) -> ClientOption:
    def apply(settings: ClientSettings) -> None:
        settings.server = server

    return apply


def with_transport(transport: SyncTransport | AsyncTransport) -> ClientOption:
    def apply(settings: ClientSettings) -> None:
        settings.transport = transport

    return apply


def with_http_client(http_client: httpx.Client | httpx.AsyncClient) -> ClientOption:
    def apply(settings: ClientSettings) -> None:
        settings.http_client = http_client

    return apply


def with_request_editor(editor: RequestEditor) -> ClientOption:
    def apply(settings: ClientSettings) -> None:
        settings.editors.append(editor)

    return apply


def _resolve_settings(
    options: Iterable[ClientOption],
    *,
    server: str,
    timeout_seconds: float,
    headers: dict[str, str] | None,
    http_client: Any | None,
    transport: Any | None,
    editors: Iterable[RequestEditor],
) -> ClientSettings:
    settings = ClientSettings(
        server=server,
        timeout_seconds=timeout_seconds,
        headers=dict(headers or {}),
        http_client=http_client,
        transport=transport,
        editors=list(editors),
    )
    for option in options:
        option(settings)

    if settings.transport is not None and settings.http_client is not None:
        raise TypeError("pass either a transport or an http_client, not both")
    settings.server = normalize_server(settings.server)
    return settings


def _editor_chain(settings: ClientSettings) -> EditorChain:
    default_headers = {"User-Agent": DEFAULT_USER_AGENT, **settings.headers}
    return EditorChain((static_headers_editor(default_headers), *settings.editors))


def _resolve_descriptor(operation: Operation) -> OperationDescriptor:
    if isinstance(operation, OperationDescriptor):
        return operation
    return get_operation(operation)


def _prepare_request(
    server: str,
    operation: Operation,
    args: tuple[Any, ...],
    params: dict[str, Any],
    *,
    json_body: Any,
    content: RequestContent | None,
    content_type: str | None,
    timeout: httpx.Timeout,
) -> tuple[OperationDescriptor, httpx.Request]:
    descriptor = _resolve_descriptor(operation)
    path_params, query_params, header_params = bind_params(descriptor, args, params)

    if json_body is not _UNSET:
        if content is not None:
            raise TypeError(f"{descriptor.key}() takes either json_body or content, not both")
        request = build_json_request(
            server,
            descriptor,
            json_body=json_body,
            path_params=path_params,
            query_params=query_params,
            header_params=header_params,
        )
    else:
        if content is None and descriptor.body != "none":
            raise TypeError(f"{descriptor.key}() missing request body: pass json_body= or content=")
        request = build_request(
            server,
            descriptor,
            path_params=path_params,
            query_params=query_params,
            header_params=header_params,
            content=content,
            content_type=content_type,
        )

    request.extensions["timeout"] = timeout.as_dict()
    return descriptor, request


def _call_timeout(timeout: Timeout, default: httpx.Timeout) -> httpx.Timeout:
    return default if timeout is None else httpx.Timeout(timeout)


class ContaboClient(OperationGroups):
    """Synchronous Contabo API client returning unread ``httpx.Response`` objects.

    Responses are opened in streaming mode and the caller owns them::

        response = client.instances.get(1, x_request_id=...)
        try:
            body = response.read()
        finally:
            response.close()
    """

    def __init__(
        self,
        *options: ClientOption,
        server: str = DEFAULT_SERVER,
        timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
        headers: dict[str, str] | None = None,
        http_client: httpx.Client | None = None,
        transport: SyncTransport | None = None,
        editors: Iterable[RequestEditor] = (),
    ) -> None:
        settings = _resolve_settings(
            options,
            server=server,
            timeout_seconds=timeout_seconds,
            headers=headers,
            http_client=http_client,
            transport=transport,
            editors=editors,
        )
        self.client_config = ClientConfig(
            server=settings.server,
            timeout_seconds=settings.timeout_seconds,
            headers=settings.headers,
        )
        self._editors = _editor_chain(settings)

        self._owns_transport = settings.transport is None
        if settings.transport is None:
            http_transport = HttpxTransport(settings.http_client, timeout_seconds=settings.timeout_seconds)
            self._transport: SyncTransport = http_transport
            self._timeout = http_transport.timeout
        else:
            self._transport = settings.transport
            self._timeout = httpx.Timeout(settings.timeout_seconds)

        self._bind_groups(self.request)

    @classmethod
    def from_env(cls, *options: ClientOption) -> "ContaboClient":
        return cls.from_config(ClientConfig.from_env(), *options)

    @classmethod
    def from_config(cls, cfg: ClientConfig, *options: ClientOption) -> "ContaboClient":
        return cls(*options, server=cfg.server, timeout_seconds=cfg.timeout_seconds, headers=cfg.headers)

    @property
    def server(self) -> str:
        return self.client_config.server

    @property
    def editors(self) -> tuple[RequestEditor, ...]:
        return self._editors.editors

    def request(
        self,
        operation: Operation,
        /,
        *args: Any,
        json_body: Any = _UNSET,
        content: RequestContent | None = None,
        content_type: str | None = None,
        editors: Iterable[RequestEditor] = (),
        timeout: Timeout = None,
        **params: Any,
    ) -> httpx.Response:
        descriptor, request = _prepare_request(
            self.server,
            operation,
            args,
            params,
            json_body=json_body,
            content=content,
            content_type=content_type,
            timeout=_call_timeout(timeout, self._timeout),
        )
        self._editors.extend(editors).run(request)
        logger.debug("sending %s %s %s", descriptor.operation_id, request.method, request.url)
        return self._transport.send(request)

    def close(self) -> None:
        if self._owns_transport:
            self._transport.close()

    def __enter__(self) -> "ContaboClient":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


class AsyncContaboClient(OperationGroups):
    """Asynchronous Contabo API client returning unread ``httpx.Response`` objects."""

    def __init__(
        self,
        *options: ClientOption,
        server: str = DEFAULT_SERVER,
        timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
        headers: dict[str, str] | None = None,
        http_client: httpx.AsyncClient | None = None,
        transport: AsyncTransport | None = None,
        editors: Iterable[RequestEditor] = (),
    ) -> None:
        settings = _resolve_settings(
            options,
            server=server,
            timeout_seconds=timeout_seconds,
            headers=headers,
            http_client=http_client,
            transport=transport,
            editors=editors,
        )
        self.client_config = ClientConfig(
            server=settings.server,
            timeout_seconds=settings.timeout_seconds,
            headers=settings.headers,
        )
        self._editors = _editor_chain(settings)

        self._owns_transport = settings.transport is None
        if settings.transport is None:
            http_transport = AsyncHttpxTransport(settings.http_client, timeout_seconds=settings.timeout_seconds)
            self._transport: AsyncTransport = http_transport
            self._timeout = http_transport.timeout
        else:
            self._transport = settings.transport
            self._timeout = httpx.Timeout(settings.timeout_seconds)

        self._bind_groups(self.request)

    @classmethod
    def from_env(cls, *options: ClientOption) -> "AsyncContaboClient":
        return cls.from_config(ClientConfig.from_env(), *options)

    @classmethod
    def from_config(cls, cfg: ClientConfig, *options: ClientOption) -> "AsyncContaboClient":
        return cls(*options, server=cfg.server, timeout_seconds=cfg.timeout_seconds, headers=cfg.headers)

    @property
    def server(self) -> str:
        return self.client_config.server

    @property
    def editors(self) -> tuple[RequestEditor, ...]:
        return self._editors.editors

    async def request(
        self,
        operation: Operation,
        /,
        *args: Any,
        json_body: Any = _UNSET,
        content: RequestContent | None = None,
        content_type: str | None = None,
        editors: Iterable[RequestEditor] = (),
        timeout: Timeout = None,
        **params: Any,
    ) -> httpx.Response:
        descriptor, request = _prepare_request(
            self.server,
            operation,
            args,
            params,
            json_body=json_body,
            content=content,
            content_type=content_type,
            timeout=_call_timeout(timeout, self._timeout),
        )
        await self._editors.extend(editors).run_async(request)
        logger.debug("sending %s %s %s", descriptor.operation_id, request.method, request.url)
        return await self._transport.send(request)

    async def close(self) -> None:
        if self._owns_transport:
            await self._transport.aclose()

    async def __aenter__(self) -> "AsyncContaboClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()


class ContaboResponsesClient(OperationGroups):
    """Synchronous client returning decoded :class:`ResponseEnvelope` objects."""

    def __init__(self, *options: ClientOption, client: ContaboClient | None = None, **client_kwargs: Any) -> None:
        if client is not None and (options or client_kwargs):
            raise TypeError("pass either an existing client or client options, not both")
        self._owns_client = client is None
        self._client = client or ContaboClient(*options, **client_kwargs)
        self._bind_groups(self.request)

    @classmethod
    def from_env(cls, *options: ClientOption) -> "ContaboResponsesClient":
        return cls.from_config(ClientConfig.from_env(), *options)

    @classmethod
    def from_config(cls, cfg: ClientConfig, *options: ClientOption) -> "ContaboResponsesClient":
        return cls(*options, server=cfg.server, timeout_seconds=cfg.timeout_seconds, headers=cfg.headers)

    @property
    def raw(self) -> ContaboClient:
        return self._client

    def request(self, operation: Operation, /, *args: Any, **kwargs: Any) -> ResponseEnvelope:
        descriptor = _resolve_descriptor(operation)
        response = self._client.request(descriptor, *args, **kwargs)
        return decode_response(descriptor, response)

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> "ContaboResponsesClient":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


class AsyncContaboResponsesClient(OperationGroups):
    """Asynchronous client returning decoded :class:`ResponseEnvelope` objects."""

    def __init__(
        self, *options: ClientOption, client: AsyncContaboClient | None = None, **client_kwargs: Any
    ) -> None:
        if client is not None and (options or client_kwargs):
            raise TypeError("pass either an existing client or client options, not both")
        self._owns_client = client is None
        self._client = client or AsyncContaboClient(*options, **client_kwargs)
        self._bind_groups(self.request)

    @classmethod
    def from_env(cls, *options: ClientOption) -> "AsyncContaboResponsesClient":
        return cls.from_config(ClientConfig.from_env(), *options)

    @classmethod
    def from_config(cls, cfg: ClientConfig, *options: ClientOption) -> "AsyncContaboResponsesClient":
        return cls(*options, server=cfg.server, timeout_seconds=cfg.timeout_seconds, headers=cfg.headers)

    @property
    def raw(self) -> AsyncContaboClient:
        return self._client

    async def request(self, operation: Operation, /, *args: Any, **kwargs: Any) -> ResponseEnvelope:
        descriptor = _resolve_descriptor(operation)
        response = await self._client.request(descriptor, *args, **kwargs)
        return await decode_response_async(descriptor, response)

    async def close(self) -> None:
        if self._owns_client:
            await self._client.close()

    async def __aenter__(self) -> "AsyncContaboResponsesClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()
