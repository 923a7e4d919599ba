"""Request construction for Snapchat Ads API calls.

This module turns a method, a relative path and an optional body into a
ready-to-send ``httpx.Request``. It performs no network I/O: the URL is
joined from the configuration snapshot, the body is serialized to JSON
and the standard headers (User-Agent, Content-Type, Authorization) are
applied on top of any custom headers.
"""

import json
import logging
from typing import Any, Optional

import httpx
from pydantic import BaseModel

from ...config.client_config import ClientConfig
from ...exceptions import EncodingError, RequestBuildError

logger = logging.getLogger(__name__)

ALLOWED_METHODS = ("GET", "POST", "PUT", "DELETE")
_BODY_METHODS = ("POST", "PUT")
JSON_CONTENT_TYPE = "application/json"


def encode_body(body: Any) -> bytes:
    """Serialize a request body to JSON bytes.

    Pydantic models are dumped in JSON mode (by alias, unset fields
    excluded); anything else goes through ``json.dumps``.

    :param body: Body value to encode
    :type body: Any
    :return: UTF-8 encoded JSON document
    :rtype: bytes
    :raises EncodingError: If the value cannot be represented as JSON
    """
    try:
        if isinstance(body, BaseModel):
            return body.model_dump_json(by_alias=True, exclude_unset=True).encode(
                "utf-8"
            )
        return json.dumps(body, allow_nan=False).encode("utf-8")
    except (TypeError, ValueError) as e:
        raise EncodingError(
            f"failed to encode request body as json: {e}",
            body_type=type(body).__name__,
        ) from e


def build_url(config: ClientConfig, path: str) -> str:
    """Join host, version and relative path.

    No escaping or normalization happens; the path must already be in
    its final form, entity ids included.

    :param config: Client configuration snapshot
    :type config: ClientConfig
    :param path: Relative API path
    :type path: str
    :return: Absolute URL
    :rtype: str
    """
    return f"{config.host}/{config.version}/{path}"


def build_headers(config: ClientConfig, has_content: bool) -> httpx.Headers:
    """Compose the headers for one request.

    Custom headers go first so the User-Agent, Content-Type and
    Authorization headers set here always win.

    :param config: Client configuration snapshot
    :type config: ClientConfig
    :param has_content: Whether the request carries a JSON body
    :type has_content: bool
    :return: Header collection
    :rtype: httpx.Headers
    """
    headers = httpx.Headers(config.headers)
    headers["User-Agent"] = config.user_agent
    if has_content:
        headers["Content-Type"] = JSON_CONTENT_TYPE
    if config.access_token:
        headers["Authorization"] = f"Bearer {config.access_token}"
    return headers


def build_request(
    config: ClientConfig,
    method: str,
    path: str,
    body: Optional[Any] = None,
) -> httpx.Request:
    """Build a request against the Snapchat Ads API.

    POST and PUT requests always carry a body: an empty one when no
    body is given, still labelled as JSON.

    :param config: Client configuration snapshot
    :type config: ClientConfig
    :param method: HTTP method (GET, POST, PUT or DELETE)
    :type method: str
    :param path: Relative API path, e.g. ``ads/42``
    :type path: str
    :param body: Optional value to send as JSON
    :type body: Optional[Any]
    :return: The request, ready for ``httpx.AsyncClient.send``
    :rtype: httpx.Request
    :raises RequestBuildError: If the method, path or URL is invalid
    :raises EncodingError: If the body cannot be encoded
    """
    method = (method or "").upper()
    if method not in ALLOWED_METHODS:
        raise RequestBuildError(
            f"unsupported http method: {method or '<empty>'}",
            method=method,
            path=path,
        )
    if not path:
        raise RequestBuildError("request path must not be empty", method=method)

    raw_url = build_url(config, path)
    try:
        url = httpx.URL(raw_url)
    except (httpx.InvalidURL, TypeError) as e:
        raise RequestBuildError(
            f"invalid request url {raw_url}: {e}", method=method, path=path
        ) from e
    if url.scheme not in ("http", "https") or not url.host:
        raise RequestBuildError(
            f"request url must be absolute http(s): {raw_url}",
            method=method,
            path=path,
        )

    content: Optional[bytes] = None
    if body is not None:
        content = encode_body(body)
    elif method in _BODY_METHODS:
        content = b""

    headers = build_headers(config, has_content=content is not None)
    request = httpx.Request(method, url, content=content, headers=headers)
    logger.debug(f"Built request: {method} {url}")
    return request
