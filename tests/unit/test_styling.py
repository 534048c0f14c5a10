from __future__ import annotations

import datetime as dt
import enum
import uuid

import pytest

from contabo_client.errors import ParameterStyleError
from contabo_client.styling import style_param


class _Color(enum.Enum):
    RED = "red"


def test_simple_path_primitive_is_bare_value() -> None:
    assert style_param("simple", False, "instanceId", 12345, "path") == "12345"


def test_path_values_are_escaped_as_a_single_segment() -> None:
    assert style_param("simple", False, "name", "a b/c", "path") == "a%20b%2Fc"
    assert style_param("simple", False, "ip", "user@host:80", "path") == "user@host:80"


def test_form_query_primitive_is_name_value_pair() -> None:
    assert style_param("form", True, "page", 2, "query") == "page=2"
    assert style_param("form", True, "name", "a b&c", "query") == "name=a+b%26c"


def test_bools_render_lowercase() -> None:
    assert style_param("form", True, "standardImage", True, "query") == "standardImage=true"
    assert style_param("simple", False, "enabled", False, "header") == "false"


@pytest.mark.parametrize(
    ("value", "expected"),
    [(1e20, "100000000000000000000"), (2.5, "2.5"), (3.0, "3"), (1.5e-7, "0.00000015")],
)
def test_floats_render_without_exponent(value: float, expected: str) -> None:
    assert style_param("simple", False, "amount", value, "path") == expected
    assert style_param("form", True, "amount", value, "query") == f"amount={expected}"


def test_exploded_form_list_repeats_the_key() -> None:
    fragment = style_param("form", True, "orderBy", ["name:asc", "size:desc"], "query")
    assert fragment == "orderBy=name%3Aasc&orderBy=size%3Adesc"


def test_unexploded_form_list_is_comma_joined() -> None:
    assert style_param("form", False, "ids", [1, 2, 3], "query") == "ids=1,2,3"


def test_simple_list_is_comma_joined() -> None:
    assert style_param("simple", False, "ids", (1, 2, 3), "path") == "1,2,3"


def test_objects_render_sorted_and_skip_none() -> None:
    value = {"b": 2, "a": 1, "c": None}
    assert style_param("form", True, "filter", value, "query") == "a=1&b=2"
    assert style_param("simple", False, "filter", value, "header") == "a,1,b,2"
    assert style_param("simple", True, "filter", value, "header") == "a=1,b=2"
    assert style_param("form", False, "filter", value, "query") == "filter=a,1,b,2"


def test_special_values_use_wire_formats() -> None:
    stamp = dt.datetime(2024, 1, 2, 3, 4, 5, tzinfo=dt.timezone.utc)
    assert style_param("simple", False, "startDate", stamp, "header") == "2024-01-02T03:04:05Z"
    assert style_param("form", True, "startDate", dt.date(2024, 1, 2), "query") == "startDate=2024-01-02"
    token = uuid.UUID("12345678-1234-5678-1234-567812345678")
    assert style_param("simple", False, "x-request-id", token, "header") == str(token)
    assert style_param("form", True, "color", _Color.RED, "query") == "color=red"


def test_header_values_are_not_escaped() -> None:
    assert style_param("simple", False, "x-request-id", "abc 123/x", "header") == "abc 123/x"


@pytest.mark.parametrize(
    ("style", "value"),
    [
        ("matrix", 1),
        ("simple", None),
        ("simple", []),
        ("form", {}),
        ("simple", object()),
    ],
)
def test_unstyleable_values_raise(style: str, value: object) -> None:
    with pytest.raises(ParameterStyleError) as captured:
        style_param(style, False, "param", value, "query")  # type: ignore[arg-type]

    assert captured.value.param_name == "param"
