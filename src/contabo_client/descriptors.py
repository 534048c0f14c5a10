"""Operation descriptors: the per-operation metadata driving the engine."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any, Literal, TypeAlias

from pydantic import BaseModel

from .styling import ParamLocation, Style

HttpMethod: TypeAlias = Literal["GET", "POST", "PATCH", "PUT", "DELETE"]
BodyEncoding: TypeAlias = Literal["none", "json"]

REQUEST_ID_HEADER = "x-request-id"
TRACE_ID_HEADER = "x-trace-id"

_PLACEHOLDER = re.compile(r"\{([^{}]+)\}")
_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])")


def path_placeholders(path: str) -> tuple[str, ...]:
    return tuple(_PLACEHOLDER.findall(path))


def snake_case(name: str) -> str:
    return _CAMEL_BOUNDARY.sub("_", name).replace("-", "_").lower()


@dataclass(frozen=True, slots=True)
class ParamSpec:
    name: str
    location: ParamLocation
    required: bool = False
    style: Style = "simple"
    explode: bool = False
    attr: str = ""

    def __post_init__(self) -> None:
        if not self.attr:
            object.__setattr__(self, "attr", snake_case(self.name))


def path_param(name: str) -> ParamSpec:
    return ParamSpec(name=name, location="path", required=True)


def query_param(name: str, *, required: bool = False) -> ParamSpec:
    return ParamSpec(name=name, location="query", required=required, style="form", explode=True)


def header_param(name: str, *, required: bool = False) -> ParamSpec:
    return ParamSpec(name=name, location="header", required=required)


STANDARD_HEADERS: tuple[ParamSpec, ...] = (
    header_param(REQUEST_ID_HEADER, required=True),
    header_param(TRACE_ID_HEADER),
)


def content_type_is_json(content_type: str) -> bool:
    return "json" in content_type


@dataclass(frozen=True, slots=True)
class ResponseVariant:
    """One typed payload slot: activated by a status code plus a JSON content type."""

    status_code: int
    model: Any

    def matches(self, status_code: int, content_type: str) -> bool:
        return status_code == self.status_code and content_type_is_json(content_type)

    @property
    def model_name(self) -> str:
        return getattr(self.model, "__name__", repr(self.model))


@dataclass(frozen=True, slots=True)
class OperationDescriptor:
    key: str
    operation_id: str
    group: str
    action: str
    method: HttpMethod
    path: str
    path_params: tuple[ParamSpec, ...] = ()
    query_params: tuple[ParamSpec, ...] = ()
    header_params: tuple[ParamSpec, ...] = STANDARD_HEADERS
    body: BodyEncoding = "none"
    request_model: type[BaseModel] | None = None
    responses: tuple[ResponseVariant, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        placeholders = path_placeholders(self.path)
        declared = tuple(param.name for param in self.path_params)
        if placeholders != declared:
            raise ValueError(
                f"{self.operation_id}: path placeholders {placeholders} do not match path params {declared}"
            )

    @property
    def params(self) -> tuple[ParamSpec, ...]:
        return (*self.path_params, *self.query_params, *self.header_params)

    def variant_for(self, status_code: int, content_type: str) -> ResponseVariant | None:
        for variant in self.responses:
            if variant.matches(status_code, content_type):
                return variant
        return None
