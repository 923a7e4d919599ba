"""Request execution and response decoding.

This module sends a built request, maps non-success HTTP
status codes to typed exceptions and decodes successful JSON bodies
into Pydantic models. Each request is sent once, without retry or
backoff, and every failure is raised to the caller.
"""

import asyncio
import logging
from typing import Optional, Tuple, Type, TypeVar

import httpx
from pydantic import BaseModel, ConfigDict, ValidationError

from ...exceptions import DecodeError, TimeoutError, TransportError, error_for_status

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


class RequestResponse(BaseModel):
    """Metadata of an executed request.

    :param status_code: HTTP status code returned by the API
    :type status_code: int
    :param headers: Response headers
    :type headers: httpx.Headers
    :param request_url: URL the request was sent to
    :type request_url: httpx.URL
    """

    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    status_code: int
    headers: httpx.Headers
    request_url: httpx.URL


def is_success_status(status_code: int) -> bool:
    """Return whether a status code should be decoded (200-399)."""
    return 200 <= status_code < 400


async def _send(
    http_client: httpx.AsyncClient, request: httpx.Request
) -> Tuple[httpx.Response, bytes]:
    """Send the request and read the whole body, always closing the stream."""
    response = await http_client.send(request, stream=True)
    try:
        body = await response.aread()
    finally:
        await response.aclose()
    return response, body


def _log_request(request: httpx.Request) -> None:
    logger.debug(f"=== SEND: {request.method} {request.url}")
    logger.debug(f"    Headers: {list(request.headers.keys())}")


async def execute(
    http_client: httpx.AsyncClient,
    request: httpx.Request,
    target: Type[ModelT],
    timeout: Optional[float] = None,
) -> Tuple[ModelT, RequestResponse]:
    """Send a request and decode its JSON response into ``target``.

    The network round trip (sending the request and reading the body)
    is bounded by ``timeout`` when given. Decoding starts only after the
    body has been read completely. Cancelling the calling task cancels
    the round trip and propagates ``asyncio.CancelledError`` unchanged.

    :param http_client: Client used to send the request
    :type http_client: httpx.AsyncClient
    :param request: Request built by ``build_request``
    :type request: httpx.Request
    :param target: Pydantic model the body is decoded into
    :type target: Type[ModelT]
    :param timeout: Optional deadline in seconds for the round trip
    :type timeout: Optional[float]
    :return: Decoded body and request metadata
    :rtype: Tuple[ModelT, RequestResponse]
    :raises TimeoutError: If the deadline elapses or httpx times out
    :raises TransportError: On any other network failure
    :raises HTTPStatusError: If the status code is outside [200, 400)
    :raises DecodeError: If the body is not the expected JSON
    """
    url = str(request.url)
    _log_request(request)

    try:
        if timeout is None:
            response, body = await _send(http_client, request)
        else:
            response, body = await asyncio.wait_for(
                _send(http_client, request), timeout
            )
    except asyncio.TimeoutError as e:
        raise TimeoutError(
            f"request to {url} timed out after {timeout}s", url=url, timeout=timeout
        ) from e
    except httpx.TimeoutException as e:
        raise TimeoutError(f"request to {url} timed out: {e}", url=url) from e
    except httpx.RequestError as e:
        raise TransportError(f"request to {url} failed: {e}", url=url) from e

    meta = RequestResponse(
        status_code=response.status_code,
        headers=response.headers,
        request_url=request.url,
    )
    logger.debug(f"=== RECV: {response.status_code} {request.method} {url}")

    if not is_success_status(response.status_code):
        raise error_for_status(
            response.status_code,
            response_body=body.decode("utf-8", errors="replace") or None,
            url=url,
        )

    try:
        decoded = target.model_validate_json(body)
    except ValidationError as e:
        raise DecodeError(
            f"failed to decode response from {url} as {target.__name__}: {e}",
            target=target.__name__,
        ) from e
    return decoded, meta
