from __future__ import annotations

import json
from collections.abc import AsyncIterator, Iterator

import httpx
import pytest

from contabo_client.decoder import decode_response, decode_response_async
from contabo_client.errors import ResponseDecodeError, TypedModelValidationError
from contabo_client.models import CreateCustomImageFailResponse, ListInstancesResponse
from contabo_client.operations import get_operation

JSON = {"content-type": "application/json"}

INSTANCES_PAGE = {
    "_pagination": {"size": 10, "totalElements": 1, "totalPages": 1, "page": 1},
    "_links": {"self": "/v1/compute/instances?page=1&size=10", "first": "/v1/compute/instances?page=1"},
    "data": [
        {
            "instanceId": 12345,
            "tenantId": "DE",
            "name": "vmd12345",
            "displayName": "web-1",
            "status": "running",
            "ipConfig": {"v4": {"ip": "203.0.113.10", "netmaskCidr": 24, "gateway": "203.0.113.1"}},
            "sshKeys": [1, 2],
        }
    ],
}


class _TrackingStream(httpx.SyncByteStream):
    def __init__(self, chunks: list[bytes], error: Exception | None = None) -> None:
        self._chunks = chunks
        self._error = error
        self.closed = False

    def __iter__(self) -> Iterator[bytes]:
        yield from self._chunks
        if self._error is not None:
            raise self._error

    def close(self) -> None:
        self.closed = True


class _AsyncTrackingStream(httpx.AsyncByteStream):
    def __init__(self, chunks: list[bytes], error: Exception | None = None) -> None:
        self._chunks = chunks
        self._error = error
        self.closed = False

    async def __aiter__(self) -> AsyncIterator[bytes]:
        for chunk in self._chunks:
            yield chunk
        if self._error is not None:
            raise self._error

    async def aclose(self) -> None:
        self.closed = True


def _response(status: int, body: bytes, headers: dict[str, str] | None = None) -> httpx.Response:
    return httpx.Response(
        status,
        headers=headers or {},
        content=body,
        request=httpx.Request("GET", "https://api.contabo.com/v1/compute/instances"),
    )


def test_declared_status_with_json_populates_the_typed_slot() -> None:
    body = json.dumps(INSTANCES_PAGE).encode("utf-8")

    envelope = decode_response(get_operation("retrieveInstancesList"), _response(200, body, JSON))

    assert envelope.status_code == 200
    assert envelope.body == body
    assert envelope.matched
    payload = envelope.payload_for(200)
    assert isinstance(payload, ListInstancesResponse)
    assert payload.pagination is not None and payload.pagination.total_elements == 1
    assert payload.links is not None and payload.links.self_ == "/v1/compute/instances?page=1&size=10"
    assert payload.data[0].instance_id == 12345
    assert payload.data[0].ip_config is not None
    assert payload.data[0].ip_config.v4 is not None
    assert payload.data[0].ip_config.v4.netmask_cidr == 24
    assert envelope.payload_for(201) is None


@pytest.mark.parametrize(
    ("status", "headers"),
    [
        (404, JSON),
        (500, {"content-type": "text/plain"}),
        (200, {"content-type": "text/plain"}),
        (200, {}),
    ],
)
def test_unmatched_responses_are_not_errors(status: int, headers: dict[str, str]) -> None:
    envelope = decode_response(get_operation("retrieveInstancesList"), _response(status, b'{"message":"x"}', headers))

    assert envelope.status_code == status
    assert envelope.body == b'{"message":"x"}'
    assert envelope.variant is None
    assert envelope.payload is None
    assert envelope.payload_for(200) is None


def test_json_suffix_content_types_match() -> None:
    body = json.dumps(INSTANCES_PAGE).encode("utf-8")

    envelope = decode_response(
        get_operation("retrieveInstancesList"),
        _response(200, body, {"content-type": "application/hal+json; charset=utf-8"}),
    )

    assert isinstance(envelope.payload, ListInstancesResponse)


def test_alternate_failure_variant_is_decoded() -> None:
    body = b'{"message":"unsupported image format","statusCode":415}'

    envelope = decode_response(get_operation("createCustomImage"), _response(415, body, JSON))

    assert envelope.payload_for(201) is None
    failure = envelope.payload_for(415)
    assert isinstance(failure, CreateCustomImageFailResponse)
    assert failure.status_code == 415
    assert failure.message == "unsupported image format"


def test_delete_without_variants_returns_raw_body() -> None:
    envelope = decode_response(get_operation("deleteSecret"), _response(204, b""))

    assert envelope.status_code == 204
    assert envelope.body == b""
    assert not envelope.matched


def test_invalid_json_on_matched_variant_raises_validation_error() -> None:
    with pytest.raises(TypedModelValidationError) as captured:
        decode_response(get_operation("retrieveInstancesList"), _response(200, b"{not json", JSON))

    error = captured.value
    assert isinstance(error, ResponseDecodeError)
    assert error.operation == "retrieveInstancesList"
    assert error.model_name == "ListInstancesResponse"
    assert error.status_code == 200
    assert error.raw_sample == "{not json"


def test_wrong_shape_on_matched_variant_raises_validation_error() -> None:
    body = json.dumps({"data": "not-a-list", "extra": list(range(20))}).encode("utf-8")

    with pytest.raises(TypedModelValidationError) as captured:
        decode_response(get_operation("retrieveInstancesList"), _response(200, body, JSON))

    assert captured.value.errors
    assert captured.value.raw_sample["extra"][-1] == "<trimmed>"


def test_body_is_read_and_closed() -> None:
    stream = _TrackingStream([b'{"data": [], ', b'"_pagination": {"page": 1}}'])
    response = httpx.Response(200, headers=JSON, stream=stream)

    envelope = decode_response(get_operation("retrieveInstancesList"), response)

    assert stream.closed
    assert response.is_closed
    assert envelope.body == b'{"data": [], "_pagination": {"page": 1}}'
    assert isinstance(envelope.payload, ListInstancesResponse)


@pytest.mark.parametrize(
    "error",
    [httpx.ReadError("connection reset"), httpx.ReadTimeout("read timed out")],
    ids=["read-error", "read-timeout"],
)
def test_read_failure_propagates_unchanged_and_closes(error: httpx.TransportError) -> None:
    stream = _TrackingStream([b'{"data"'], error=error)
    response = httpx.Response(200, headers=JSON, stream=stream)

    with pytest.raises(type(error)) as captured:
        decode_response(get_operation("retrieveInstancesList"), response)

    assert captured.value is error
    assert not isinstance(captured.value, ResponseDecodeError)
    assert stream.closed


@pytest.mark.asyncio
async def test_async_decode_reads_and_closes() -> None:
    stream = _AsyncTrackingStream([json.dumps(INSTANCES_PAGE).encode("utf-8")])
    response = httpx.Response(200, headers=JSON, stream=stream)

    envelope = await decode_response_async(get_operation("retrieveInstancesList"), response)

    assert stream.closed
    assert isinstance(envelope.payload, ListInstancesResponse)


@pytest.mark.asyncio
async def test_async_read_failure_propagates_and_closes() -> None:
    stream = _AsyncTrackingStream([b"{"], error=httpx.ReadError("connection reset"))
    response = httpx.Response(200, headers=JSON, stream=stream)

    with pytest.raises(httpx.ReadError):
        await decode_response_async(get_operation("retrieveInstancesList"), response)

    assert stream.closed
