"""Contabo API Python client.

This module uses lazy exports so lightweight utilities (for example config parsing)
can be imported without immediately importing transport dependencies.
"""

from __future__ import annotations

from importlib import import_module
from typing import TYPE_CHECKING, Any

__all__ = [
    "AsyncContaboClient",
    "AsyncContaboResponsesClient",
    "AsyncHttpxTransport",
    "AsyncTransport",
    "ClientConfig",
    "ClientOption",
    "ContaboClient",
    "ContaboClientError",
    "ContaboResponsesClient",
    "EditorChain",
    "HttpxTransport",
    "OPERATIONS",
    "OperationDescriptor",
    "ParamSpec",
    "ParameterStyleError",
    "RequestBuildError",
    "RequestEditor",
    "ResponseDecodeError",
    "ResponseEnvelope",
    "ResponseVariant",
    "SyncTransport",
    "TypedModelValidationError",
    "bearer_token_editor",
    "get_operation",
    "normalize_server",
    "static_headers_editor",
    "style_param",
    "with_http_client",
    "with_request_editor",
    "with_server",
    "with_transport",
]

_EXPORTS: dict[str, tuple[str, str]] = {
    "AsyncContaboClient": (".client", "AsyncContaboClient"),
    "AsyncContaboResponsesClient": (".client", "AsyncContaboResponsesClient"),
    "ClientOption": (".client", "ClientOption"),
    "ContaboClient": (".client", "ContaboClient"),
    "ContaboResponsesClient": (".client", "ContaboResponsesClient"),
    "with_http_client": (".client", "with_http_client"),
    "with_request_editor": (".client", "with_request_editor"),
    "with_server": (".client", "with_server"),
    "with_transport": (".client", "with_transport"),
    "ClientConfig": (".config", "ClientConfig"),
    "normalize_server": (".config", "normalize_server"),
    "ResponseEnvelope": (".decoder", "ResponseEnvelope"),
    "OperationDescriptor": (".descriptors", "OperationDescriptor"),
    "ParamSpec": (".descriptors", "ParamSpec"),
    "ResponseVariant": (".descriptors", "ResponseVariant"),
    "EditorChain": (".editors", "EditorChain"),
    "RequestEditor": (".editors", "RequestEditor"),
    "bearer_token_editor": (".editors", "bearer_token_editor"),
    "static_headers_editor": (".editors", "static_headers_editor"),
    "ContaboClientError": (".errors", "ContaboClientError"),
    "ParameterStyleError": (".errors", "ParameterStyleError"),
    "RequestBuildError": (".errors", "RequestBuildError"),
    "ResponseDecodeError": (".errors", "ResponseDecodeError"),
    "TypedModelValidationError": (".errors", "TypedModelValidationError"),
    "OPERATIONS": (".operations", "OPERATIONS"),
    "get_operation": (".operations", "get_operation"),
    "AsyncTransport": (".protocols", "AsyncTransport"),
    "SyncTransport": (".protocols", "SyncTransport"),
    "style_param": (".styling", "style_param"),
    "AsyncHttpxTransport": (".transport", "AsyncHttpxTransport"),
    "HttpxTransport": (".transport", "HttpxTransport"),
}

if TYPE_CHECKING:
    from .client import (
        AsyncContaboClient,
        AsyncContaboResponsesClient,
        ClientOption,
        ContaboClient,
        ContaboResponsesClient,
        with_http_client,
        with_request_editor,
        with_server,
        with_transport,
    )
    from .config import ClientConfig, normalize_server
    from .decoder import ResponseEnvelope
    from .descriptors import OperationDescriptor, ParamSpec, ResponseVariant
    from .editors import EditorChain, RequestEditor, bearer_token_editor, static_headers_editor
    from .errors import (
        ContaboClientError,
        ParameterStyleError,
        RequestBuildError,
        ResponseDecodeError,
        TypedModelValidationError,
    )
    from .operations import OPERATIONS, get_operation
    from .protocols import AsyncTransport, SyncTransport
    from .styling import style_param
    from .transport import AsyncHttpxTransport, HttpxTransport


def __getattr__(name: str) -> Any:
    module_info = _EXPORTS.get(name)
    if module_info is None:
        raise AttributeError(f"module {__name__!r} has no attribute {name!r}")

    module_name, attribute = module_info
    module = import_module(module_name, __name__)
    value = getattr(module, attribute)
    globals()[name] = value
    return value
