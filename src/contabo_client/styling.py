"""Parameter styling for path, query and header locations.

Values are rendered following the OpenAPI ``style``/``explode`` rules for the
two styles this API uses:

``simple``
    ``5`` / ``a,b,c`` / ``k1,v1,k2,v2`` (exploded objects: ``k1=v1,k2=v2``).
``form``
    ``name=5`` / ``name=a&name=b`` when exploded, ``name=a,b`` otherwise.
    Exploded objects become ``k1=v1&k2=v2``.

Each primitive is escaped for its location: path segments keep the
sub-delimiters a path segment may carry, query values use form encoding and
header values are left verbatim.
"""

from __future__ import annotations

import datetime as dt
import decimal
import enum
import uuid
from collections.abc import Mapping
from typing import Any, Literal, TypeAlias
from urllib.parse import quote, quote_plus

from pydantic import BaseModel

from .errors import ParameterStyleError

Style: TypeAlias = Literal["simple", "form"]
ParamLocation: TypeAlias = Literal["path", "query", "header"]

_PATH_SAFE = "$&+:=@"
_STYLES = ("simple", "form")


def style_param(
    style: Style,
    explode: bool,
    name: str,
    value: Any,
    location: ParamLocation,
) -> str:
    """Render ``value`` as the string fragment for parameter ``name``."""
    if style not in _STYLES:
        raise ParameterStyleError(f"unsupported parameter style {style!r}", param_name=name)
    if value is None:
        raise ParameterStyleError(f"parameter {name} has no value to style", param_name=name)

    if isinstance(value, BaseModel):
        value = value.model_dump(mode="json", by_alias=True, exclude_none=True)

    if isinstance(value, Mapping):
        return _style_object(style, explode, name, value, location)
    if isinstance(value, (list, tuple, set, frozenset)):
        items = sorted(value, key=str) if isinstance(value, (set, frozenset)) else list(value)
        return _style_array(style, explode, name, items, location)

    rendered = _escape(_primitive_to_string(name, value), location)
    if style == "form":
        return f"{name}={rendered}"
    return rendered


def _style_array(style: Style, explode: bool, name: str, items: list[Any], location: ParamLocation) -> str:
    if not items:
        raise ParameterStyleError(f"parameter {name} is an empty list", param_name=name)

    parts = [_escape(_primitive_to_string(name, item), location) for item in items]
    if style == "simple":
        return ",".join(parts)
    if explode:
        return "&".join(f"{name}={part}" for part in parts)
    return f"{name}=" + ",".join(parts)


def _style_object(
    style: Style,
    explode: bool,
    name: str,
    value: Mapping[Any, Any],
    location: ParamLocation,
) -> str:
    fields: list[tuple[str, str]] = []
    for key in sorted(value, key=str):
        nested = value[key]
        if nested is None:
            continue
        fields.append((_escape(str(key), location), _escape(_primitive_to_string(name, nested), location)))

    if not fields:
        raise ParameterStyleError(f"parameter {name} is an empty object", param_name=name)

    if explode:
        separator = "&" if style == "form" else ","
        return separator.join(f"{key}={nested}" for key, nested in fields)

    flattened = ",".join(f"{key},{nested}" for key, nested in fields)
    if style == "form":
        return f"{name}={flattened}"
    return flattened


def _primitive_to_string(name: str, value: Any) -> str:
    # bool before int: bool is an int subclass.
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, enum.Enum):
        return _primitive_to_string(name, value.value)
    if isinstance(value, float):
        return _float_to_string(value)
    if isinstance(value, (str, int)):
        return str(value)
    if isinstance(value, dt.datetime):
        return value.isoformat().replace("+00:00", "Z")
    if isinstance(value, dt.date):
        return value.isoformat()
    if isinstance(value, uuid.UUID):
        return str(value)
    raise ParameterStyleError(
        f"parameter {name} has unsupported value type {type(value).__name__}",
        param_name=name,
    )


def _float_to_string(value: float) -> str:
    # Positional notation only: 1e20 renders as 100000000000000000000.
    return format(decimal.Decimal(repr(value)).normalize(), "f")


def _escape(value: str, location: ParamLocation) -> str:
    if location == "path":
        return quote(value, safe=_PATH_SAFE)
    if location == "query":
        return quote_plus(value, safe="")
    return value
