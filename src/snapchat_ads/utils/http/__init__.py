"""HTTP utilities public API (barrel module).

This package provides:
- Request construction (URL joining, JSON bodies, standard headers)
- Request execution with status-code mapping and JSON decoding
- Default HTTP client construction

Recommended import pattern for consumers:
    from snapchat_ads.utils.http import build_request, execute
"""

from .client_factory import create_http_client, create_limits, create_timeout
from .executor import RequestResponse, execute, is_success_status
from .request import (
    ALLOWED_METHODS,
    JSON_CONTENT_TYPE,
    build_headers,
    build_request,
    build_url,
    encode_body,
)

__all__ = [
    "ALLOWED_METHODS",
    "JSON_CONTENT_TYPE",
    "RequestResponse",
    "build_headers",
    "build_request",
    "build_url",
    "create_http_client",
    "create_limits",
    "create_timeout",
    "encode_body",
    "execute",
    "is_success_status",
]
