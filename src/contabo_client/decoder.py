"""Status-driven response decoding into typed envelopes."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Any

import httpx
from pydantic import TypeAdapter, ValidationError

from .descriptors import OperationDescriptor, ResponseVariant
from .errors import TypedModelValidationError

logger = logging.getLogger(__name__)

_adapter_cache: dict[Any, TypeAdapter[Any]] = {}
_MAX_SAMPLE_DEPTH = 2
_MAX_SAMPLE_ITEMS = 5
_MAX_SAMPLE_STRING = 200


@dataclass(slots=True)
class ResponseEnvelope:
    """Raw body, the HTTP response and at most one typed payload."""

    operation: str
    body: bytes
    http_response: httpx.Response
    variant: ResponseVariant | None = None
    payload: Any | None = None

    @property
    def status_code(self) -> int:
        return self.http_response.status_code

    @property
    def content_type(self) -> str:
        return self.http_response.headers.get("content-type", "")

    @property
    def matched(self) -> bool:
        return self.variant is not None

    def payload_for(self, status_code: int) -> Any | None:
        if self.variant is None or self.variant.status_code != status_code:
            return None
        return self.payload


def decode_response(descriptor: OperationDescriptor, response: httpx.Response) -> ResponseEnvelope:
    """Read, close and type ``response``; httpx read errors propagate unchanged."""
    try:
        body = response.read()
    finally:
        response.close()
    return decode_body(descriptor, response, body)


async def decode_response_async(descriptor: OperationDescriptor, response: httpx.Response) -> ResponseEnvelope:
    try:
        body = await response.aread()
    finally:
        await response.aclose()
    return decode_body(descriptor, response, body)


def decode_body(descriptor: OperationDescriptor, response: httpx.Response, body: bytes) -> ResponseEnvelope:
    envelope = ResponseEnvelope(operation=descriptor.operation_id, body=body, http_response=response)
    variant = descriptor.variant_for(response.status_code, envelope.content_type)
    if variant is None:
        logger.debug(
            "%s: no typed payload for status %s (%s)",
            descriptor.operation_id,
            response.status_code,
            envelope.content_type or "no content type",
        )
        return envelope

    try:
        payload = _adapter_for(variant.model).validate_json(body)
    except ValidationError as error:
        raise TypedModelValidationError(
            operation=descriptor.operation_id,
            model_name=variant.model_name,
            status_code=response.status_code,
            errors=error.errors(),
            raw_sample=_sample_body(body),
        ) from error

    envelope.variant = variant
    envelope.payload = payload
    return envelope


def _adapter_for(model_type: Any) -> TypeAdapter[Any]:
    try:
        adapter = _adapter_cache.get(model_type)
    except TypeError:
        return TypeAdapter(model_type)

    if adapter is None:
        adapter = TypeAdapter(model_type)
        _adapter_cache[model_type] = adapter
    return adapter


def _sample_body(body: bytes) -> Any:
    try:
        return _sample_payload(json.loads(body))
    except ValueError:
        return _sample_payload(body.decode("utf-8", errors="replace"))


def _sample_payload(value: Any, depth: int = 0) -> Any:
    if depth > _MAX_SAMPLE_DEPTH:
        return "<trimmed>"

    if isinstance(value, dict):
        sampled: dict[str, Any] = {}
        for index, (key, nested) in enumerate(value.items()):
            if index >= _MAX_SAMPLE_ITEMS:
                sampled["..."] = "<trimmed>"
                break
            sampled[str(key)] = _sample_payload(nested, depth + 1)
        return sampled

    if isinstance(value, list):
        sampled_items = [_sample_payload(item, depth + 1) for item in value[:_MAX_SAMPLE_ITEMS]]
        if len(value) > _MAX_SAMPLE_ITEMS:
            sampled_items.append("<trimmed>")
        return sampled_items

    if isinstance(value, str):
        return value if len(value) <= _MAX_SAMPLE_STRING else f"{value[:_MAX_SAMPLE_STRING]}..."

    if isinstance(value, (int, float, bool)) or value is None:
        return value

    return repr(value)
