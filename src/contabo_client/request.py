"""Request construction from operation descriptors."""

from __future__ import annotations

import json
from collections.abc import Iterable, Mapping
from typing import Any, TypeAlias
from urllib.parse import parse_qsl, urlencode, urljoin

import httpx
from pydantic import BaseModel, ValidationError
from pydantic_core import PydanticSerializationError

from .descriptors import OperationDescriptor, ParamSpec
from .errors import ParameterStyleError, RequestBuildError
from .styling import style_param

JSON_CONTENT_TYPE = "application/json"

RequestContent: TypeAlias = bytes | str | Iterable[bytes]


ParamValues: TypeAlias = dict[str, Any]


def bind_params(
    descriptor: OperationDescriptor,
    args: tuple[Any, ...],
    kwargs: Mapping[str, Any],
) -> tuple[ParamValues, ParamValues, ParamValues]:
    """Split call arguments into path, query and header values keyed by attribute name.

    Positional arguments fill path parameters in declaration order; keyword
    arguments may name any parameter of the operation.
    """
    if len(args) > len(descriptor.path_params):
        raise TypeError(
            f"{descriptor.key}() takes {len(descriptor.path_params)} positional argument(s) "
            f"but {len(args)} were given"
        )

    bound: dict[str, ParamValues] = {"path": {}, "query": {}, "header": {}}
    for spec, value in zip(descriptor.path_params, args):
        bound["path"][spec.attr] = value

    by_attr = {spec.attr: spec for spec in descriptor.params}
    for name, value in kwargs.items():
        spec = by_attr.get(name)
        if spec is None:
            raise TypeError(f"{descriptor.key}() got an unexpected keyword argument {name!r}")
        target = bound[spec.location]
        if name in target:
            raise TypeError(f"{descriptor.key}() got multiple values for argument {name!r}")
        target[name] = value
    return bound["path"], bound["query"], bound["header"]


def build_json_request(
    server: str,
    descriptor: OperationDescriptor,
    *,
    json_body: Any,
    path_params: Mapping[str, Any] | None = None,
    query_params: Mapping[str, Any] | None = None,
    header_params: Mapping[str, Any] | None = None,
) -> httpx.Request:
    """Marshal ``json_body`` to JSON and build the request through the generic body path."""
    content = marshal_json(descriptor, json_body)
    return build_request(
        server,
        descriptor,
        path_params=path_params,
        query_params=query_params,
        header_params=header_params,
        content=content,
        content_type=JSON_CONTENT_TYPE,
    )


def build_request(
    server: str,
    descriptor: OperationDescriptor,
    *,
    path_params: Mapping[str, Any] | None = None,
    query_params: Mapping[str, Any] | None = None,
    header_params: Mapping[str, Any] | None = None,
    content: RequestContent | None = None,
    content_type: str | None = None,
) -> httpx.Request:
    """Build a ready-to-send request for ``descriptor``.

    ``content`` is sent as-is with the caller-declared ``content_type``; the
    content type is never sniffed. Nothing is partially built: any failure
    raises before a request object exists.
    """
    url = resolve_url(server, descriptor, path_params or {})
    query = encode_query(descriptor, query_params or {})
    if query:
        url = f"{url}?{query}"

    headers = encode_headers(descriptor, header_params or {})
    if content is not None:
        if descriptor.body == "none":
            raise RequestBuildError(
                f"{descriptor.operation_id} does not accept a request body",
                operation=descriptor.operation_id,
            )
        if not content_type:
            raise RequestBuildError(
                f"{descriptor.operation_id} request body requires a content type",
                operation=descriptor.operation_id,
            )
        headers["Content-Type"] = content_type

    return httpx.Request(descriptor.method, url, headers=headers, content=content)


def resolve_url(server: str, descriptor: OperationDescriptor, path_params: Mapping[str, Any]) -> str:
    _validate_server(server, descriptor)
    _reject_unknown(descriptor, descriptor.path_params, path_params, "path")

    path = descriptor.path
    for spec in descriptor.path_params:
        value = path_params.get(spec.attr)
        if value is None:
            raise TypeError(f"{descriptor.key}() missing required path parameter {spec.attr!r}")
        path = path.replace("{" + spec.name + "}", _style(descriptor, spec, value), 1)

    # Always join relatively so a sub-path prefix on the server survives.
    if path.startswith("/"):
        path = "." + path
    return urljoin(str(server), path)


def encode_query(descriptor: OperationDescriptor, query_params: Mapping[str, Any]) -> str:
    _reject_unknown(descriptor, descriptor.query_params, query_params, "query")

    pairs: list[tuple[str, str]] = []
    for spec in descriptor.query_params:
        value = query_params.get(spec.attr)
        # An empty collection is N=0 values: the key is omitted.
        if value is None or (isinstance(value, (list, tuple, set, frozenset)) and not value):
            continue
        fragment = _style(descriptor, spec, value)
        pairs.extend(parse_qsl(fragment, keep_blank_values=True))

    if not pairs:
        return ""
    # Stable sort: keys ordered, repeated values keep their order.
    return urlencode(sorted(pairs, key=lambda pair: pair[0]))


def encode_headers(descriptor: OperationDescriptor, header_params: Mapping[str, Any]) -> dict[str, str]:
    _reject_unknown(descriptor, descriptor.header_params, header_params, "header")

    headers: dict[str, str] = {}
    for spec in descriptor.header_params:
        value = header_params.get(spec.attr)
        if value is None:
            if spec.required:
                raise TypeError(f"{descriptor.key}() missing required header parameter {spec.attr!r}")
            continue
        headers[spec.name] = _style(descriptor, spec, value)
    return headers


def marshal_json(descriptor: OperationDescriptor, value: Any) -> bytes:
    """Serialize a request body; pydantic models are dumped by alias without ``None`` fields."""
    model_type = descriptor.request_model
    if model_type is not None and isinstance(value, Mapping):
        try:
            value = model_type.model_validate(value)
        except ValidationError as error:
            raise RequestBuildError(
                f"{descriptor.operation_id} request body does not match {model_type.__name__}: {error}",
                operation=descriptor.operation_id,
            ) from error

    try:
        if isinstance(value, BaseModel):
            return value.model_dump_json(by_alias=True, exclude_none=True).encode("utf-8")
        return json.dumps(value, separators=(",", ":")).encode("utf-8")
    except (TypeError, ValueError, PydanticSerializationError) as error:
        raise RequestBuildError(
            f"failed to marshal {descriptor.operation_id} request body: {error}",
            operation=descriptor.operation_id,
        ) from error


def _validate_server(server: str, descriptor: OperationDescriptor) -> None:
    try:
        url = httpx.URL(server)
    except (httpx.InvalidURL, TypeError) as error:
        raise RequestBuildError(f"invalid server url {server!r}: {error}", operation=descriptor.operation_id) from error
    if url.scheme not in ("http", "https") or not url.host:
        raise RequestBuildError(
            f"invalid server url {server!r}: expected an absolute http(s) url",
            operation=descriptor.operation_id,
        )


def _style(descriptor: OperationDescriptor, spec: ParamSpec, value: Any) -> str:
    try:
        return style_param(spec.style, spec.explode, spec.name, value, spec.location)
    except ParameterStyleError as error:
        error.operation = descriptor.operation_id
        raise


def _reject_unknown(
    descriptor: OperationDescriptor,
    specs: tuple[ParamSpec, ...],
    values: Mapping[str, Any],
    location: str,
) -> None:
    known = {spec.attr for spec in specs}
    unknown = sorted(key for key in values if key not in known)
    if unknown:
        raise TypeError(f"{descriptor.key}() got unexpected {location} parameter(s): {', '.join(unknown)}")
