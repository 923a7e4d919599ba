"""Unit tests for request execution and status mapping."""

import asyncio
import logging

import httpx
import pytest

from snapchat_ads import exceptions
from snapchat_ads.config import ClientConfig
from snapchat_ads.models import GetAdsResponse
from snapchat_ads.utils.http import build_request, execute

STATUS_ERRORS = {
    400: exceptions.BadRequestError,
    401: exceptions.UnauthorizedError,
    402: exceptions.PaymentRequiredError,
    403: exceptions.ForbiddenError,
    404: exceptions.NotFoundError,
    405: exceptions.MethodNotAllowedError,
    406: exceptions.NotAcceptableError,
    410: exceptions.GoneError,
    429: exceptions.TooManyRequestsError,
    500: exceptions.InternalServerError,
    503: exceptions.ServiceUnavailableError,
}


class TrackingStream(httpx.AsyncByteStream):
    """Response stream that records whether it was closed."""

    def __init__(self, data: bytes):
        self.data = data
        self.closed = False

    async def __aiter__(self):
        yield self.data

    async def aclose(self) -> None:
        self.closed = True


def make_http_client(handler) -> httpx.AsyncClient:
    return httpx.AsyncClient(transport=httpx.MockTransport(handler))


def ads_request():
    return build_request(ClientConfig(access_token="tok"), "GET", "ads/42")


@pytest.mark.asyncio
@pytest.mark.parametrize("status_code,error_class", sorted(STATUS_ERRORS.items()))
async def test_recognized_status_codes(status_code, error_class):
    http_client = make_http_client(
        lambda request: httpx.Response(status_code, text="nope")
    )
    with pytest.raises(error_class) as exc_info:
        await execute(http_client, ads_request(), GetAdsResponse)
    error = exc_info.value
    assert type(error) is error_class
    assert error.status_code == status_code
    assert error.response_body == "nope"
    assert error.url == "https://adsapi.snapchat.com/v1/ads/42"


@pytest.mark.asyncio
@pytest.mark.parametrize("status_code", [199, 408, 409, 418, 422, 501, 502, 504])
async def test_other_status_codes_raise_generic_error(status_code):
    http_client = make_http_client(lambda request: httpx.Response(status_code))
    with pytest.raises(exceptions.HTTPStatusError) as exc_info:
        await execute(http_client, ads_request(), GetAdsResponse)
    assert type(exc_info.value) is exceptions.HTTPStatusError
    assert exc_info.value.status_code == status_code
    assert exc_info.value.details["status_code"] == status_code


@pytest.mark.asyncio
@pytest.mark.parametrize("status_code", [200, 201, 204, 302, 399])
async def test_success_range_is_decoded(status_code):
    payload = {"request_status": "SUCCESS", "request_id": "r1", "ads": []}
    http_client = make_http_client(
        lambda request: httpx.Response(status_code, json=payload)
    )
    decoded, meta = await execute(http_client, ads_request(), GetAdsResponse)
    assert decoded.request_id == "r1"
    assert meta.status_code == status_code
    assert str(meta.request_url) == "https://adsapi.snapchat.com/v1/ads/42"


@pytest.mark.asyncio
async def test_response_metadata_headers():
    http_client = make_http_client(
        lambda request: httpx.Response(
            200,
            json={"request_status": "SUCCESS"},
            headers={"X-Request-Id": "abc"},
        )
    )
    _, meta = await execute(http_client, ads_request(), GetAdsResponse)
    assert meta.headers["x-request-id"] == "abc"


@pytest.mark.asyncio
async def test_malformed_json_raises_decode_error():
    http_client = make_http_client(
        lambda request: httpx.Response(200, text="{not json")
    )
    with pytest.raises(exceptions.DecodeError) as exc_info:
        await execute(http_client, ads_request(), GetAdsResponse)
    assert exc_info.value.details["target"] == "GetAdsResponse"
    assert exc_info.value.__cause__ is not None


@pytest.mark.asyncio
async def test_unexpected_shape_raises_decode_error():
    http_client = make_http_client(
        lambda request: httpx.Response(200, json={"ads": "not-a-list"})
    )
    with pytest.raises(exceptions.DecodeError):
        await execute(http_client, ads_request(), GetAdsResponse)


@pytest.mark.asyncio
@pytest.mark.parametrize("status_code", [200, 404, 500])
async def test_stream_always_closed(status_code):
    streams = []

    def handler(request):
        stream = TrackingStream(b'{"request_status": "SUCCESS"}')
        streams.append(stream)
        return httpx.Response(status_code, stream=stream)

    http_client = make_http_client(handler)
    try:
        await execute(http_client, ads_request(), GetAdsResponse)
    except exceptions.HTTPStatusError:
        pass
    assert streams and streams[0].closed


@pytest.mark.asyncio
async def test_deadline_raises_timeout_error():
    async def slow(request):
        await asyncio.sleep(1)
        return httpx.Response(200, json={"request_status": "SUCCESS"})

    http_client = make_http_client(slow)
    with pytest.raises(exceptions.TimeoutError) as exc_info:
        await execute(http_client, ads_request(), GetAdsResponse, timeout=0.01)
    assert exc_info.value.details["timeout"] == 0.01
    assert isinstance(exc_info.value, exceptions.TransportError)


@pytest.mark.asyncio
async def test_httpx_timeout_maps_to_timeout_error():
    def handler(request):
        raise httpx.ReadTimeout("slow", request=request)

    with pytest.raises(exceptions.TimeoutError):
        await execute(make_http_client(handler), ads_request(), GetAdsResponse)


@pytest.mark.asyncio
async def test_connection_failure_maps_to_transport_error():
    def handler(request):
        raise httpx.ConnectError("refused", request=request)

    with pytest.raises(exceptions.TransportError) as exc_info:
        await execute(make_http_client(handler), ads_request(), GetAdsResponse)
    assert type(exc_info.value) is exceptions.TransportError
    assert exc_info.value.url == "https://adsapi.snapchat.com/v1/ads/42"


@pytest.mark.asyncio
async def test_cancellation_propagates():
    started = asyncio.Event()

    async def hang(request):
        started.set()
        await asyncio.sleep(10)
        return httpx.Response(200, json={})

    task = asyncio.create_task(
        execute(make_http_client(hang), ads_request(), GetAdsResponse)
    )
    await started.wait()
    task.cancel()
    with pytest.raises(asyncio.CancelledError):
        await task


@pytest.mark.asyncio
async def test_single_attempt_only():
    calls = []

    def handler(request):
        calls.append(request)
        return httpx.Response(503)

    with pytest.raises(exceptions.ServiceUnavailableError):
        await execute(make_http_client(handler), ads_request(), GetAdsResponse)
    assert len(calls) == 1


@pytest.mark.asyncio
async def test_debug_log_lists_header_names_without_values(caplog):
    config = ClientConfig(access_token="secret-token", headers={"X-Api-Key": "k-123"})
    request = build_request(config, "GET", "ads/42")
    http_client = make_http_client(
        lambda request: httpx.Response(200, json={"request_status": "SUCCESS"})
    )

    with caplog.at_level(logging.DEBUG, logger="snapchat_ads.utils.http.executor"):
        await execute(http_client, request, GetAdsResponse)

    assert "x-api-key" in caplog.text
    assert "authorization" in caplog.text
    assert "k-123" not in caplog.text
    assert "secret-token" not in caplog.text
