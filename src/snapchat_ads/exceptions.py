"""Structured exception classes for the Snapchat Ads API client."""

import json
from typing import Any, Dict, Optional, Type


class SnapchatAdsError(Exception):
    """Base exception for all Snapchat Ads client errors.

    This exception serves as the parent class for every error raised by
    the client, providing a consistent interface for error handling
    across request construction, execution and envelope interpretation.

    :param message: Human-readable error message
    :param code: Optional error code for programmatic handling
    :param details: Optional dictionary containing additional error context
    """

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        """Initialize the exception with message, code, and details."""
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary format.

        :return: Dictionary containing error code, message, and details
        """
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }

    def to_json(self) -> str:
        """Convert exception to JSON string.

        :return: JSON-encoded string representation of the exception
        """
        return json.dumps(self.to_dict())


class ConfigurationError(SnapchatAdsError):
    """Raised when client configuration is invalid.

    :param message: Description of the configuration error
    :param setting: Optional name of the problematic setting
    """

    def __init__(self, message: str, setting: Optional[str] = None):
        """Initialize configuration error with message and optional setting."""
        details = {}
        if setting:
            details["setting"] = setting
        super().__init__(message=message, code="CONFIGURATION_ERROR", details=details)


class RequestBuildError(SnapchatAdsError):
    """Raised when an HTTP request cannot be constructed.

    Covers unsupported methods, empty paths and URLs that httpx
    refuses to parse. No network I/O has happened when this is raised.

    :param message: Description of the build failure
    :param method: Optional HTTP method of the request
    :param path: Optional relative path of the request
    """

    def __init__(
        self,
        message: str,
        method: Optional[str] = None,
        path: Optional[str] = None,
    ):
        """Initialize request build error with message and request context."""
        details = {}
        if method:
            details["method"] = method
        if path:
            details["path"] = path
        super().__init__(message=message, code="REQUEST_BUILD_ERROR", details=details)


class EncodingError(SnapchatAdsError):
    """Raised when a request body cannot be serialized to JSON.

    :param message: Description of the encoding failure
    :param body_type: Optional type name of the body that failed
    """

    def __init__(self, message: str, body_type: Optional[str] = None):
        """Initialize encoding error with message and body type."""
        details = {}
        if body_type:
            details["body_type"] = body_type
        super().__init__(message=message, code="ENCODING_ERROR", details=details)


class TransportError(SnapchatAdsError):
    """Raised for network-level failures.

    This exception is raised when the request never produced an HTTP
    response, e.g. connection refused, DNS failure or a dropped socket.

    :param message: Description of the transport failure
    :param url: Optional URL of the request
    """

    def __init__(self, message: str, url: Optional[str] = None):
        """Initialize transport error with message and optional URL."""
        details = {}
        if url:
            details["url"] = url
        super().__init__(message=message, code="TRANSPORT_ERROR", details=details)
        self.url = url


class TimeoutError(TransportError):
    """Raised when a request does not complete before its deadline.

    :param message: Description of the timeout error
    :param url: Optional URL of the request
    :param timeout: Optional timeout, in seconds, that elapsed
    """

    def __init__(
        self,
        message: str,
        url: Optional[str] = None,
        timeout: Optional[float] = None,
    ):
        """Initialize timeout error with message, URL and timeout."""
        super().__init__(message=message, url=url)
        self.code = "TIMEOUT_ERROR"
        if timeout is not None:
            self.details["timeout"] = timeout


class HTTPStatusError(SnapchatAdsError):
    """Raised when the API answers with a status code outside [200, 400).

    Recognized status codes raise one of the subclasses below; any other
    code raises this class directly.

    :param message: Description of the HTTP error
    :param status_code: HTTP status code from the API response
    :param response_body: Optional response body from the failed request
    :param url: Optional URL of the request
    """

    def __init__(
        self,
        message: str,
        status_code: int,
        response_body: Optional[str] = None,
        url: Optional[str] = None,
    ):
        """Initialize HTTP status error with message and response details."""
        details: Dict[str, Any] = {"status_code": status_code}
        if response_body:
            details["response_body"] = response_body
        if url:
            details["url"] = url
        super().__init__(message=message, code="HTTP_STATUS_ERROR", details=details)
        self.status_code = status_code
        self.response_body = response_body
        self.url = url


class BadRequestError(HTTPStatusError):
    """Raised on HTTP 400."""


class UnauthorizedError(HTTPStatusError):
    """Raised on HTTP 401."""


class PaymentRequiredError(HTTPStatusError):
    """Raised on HTTP 402."""


class ForbiddenError(HTTPStatusError):
    """Raised on HTTP 403."""


class NotFoundError(HTTPStatusError):
    """Raised on HTTP 404."""


class MethodNotAllowedError(HTTPStatusError):
    """Raised on HTTP 405."""


class NotAcceptableError(HTTPStatusError):
    """Raised on HTTP 406."""


class GoneError(HTTPStatusError):
    """Raised on HTTP 410."""


class TooManyRequestsError(HTTPStatusError):
    """Raised on HTTP 429."""


class InternalServerError(HTTPStatusError):
    """Raised on HTTP 500."""


class ServiceUnavailableError(HTTPStatusError):
    """Raised on HTTP 503."""


STATUS_CODE_ERRORS: Dict[int, Type[HTTPStatusError]] = {
    400: BadRequestError,
    401: UnauthorizedError,
    402: PaymentRequiredError,
    403: ForbiddenError,
    404: NotFoundError,
    405: MethodNotAllowedError,
    406: NotAcceptableError,
    410: GoneError,
    429: TooManyRequestsError,
    500: InternalServerError,
    503: ServiceUnavailableError,
}


def error_for_status(
    status_code: int,
    response_body: Optional[str] = None,
    url: Optional[str] = None,
) -> HTTPStatusError:
    """Build the exception matching an HTTP status code.

    :param status_code: HTTP status code outside the success range
    :param response_body: Optional response body text
    :param url: Optional URL of the request
    :return: Instance of the matching HTTPStatusError subclass
    """
    error_class = STATUS_CODE_ERRORS.get(status_code, HTTPStatusError)
    return error_class(
        f"{status_code} status code returned from snapchat api",
        status_code=status_code,
        response_body=response_body,
        url=url,
    )


class DecodeError(SnapchatAdsError):
    """Raised when a response body is not valid or expected JSON.

    :param message: Description of the decode failure
    :param target: Optional name of the model the body was decoded into
    """

    def __init__(self, message: str, target: Optional[str] = None):
        """Initialize decode error with message and target model name."""
        details = {}
        if target:
            details["target"] = target
        super().__init__(message=message, code="DECODE_ERROR", details=details)


class NonSuccessStatusError(SnapchatAdsError):
    """Raised when an envelope reports a non-success request status.

    The HTTP exchange itself succeeded but the API flagged the request
    as failed in the ``request_status`` field.

    :param message: Description of the failure
    :param request_status: Status string returned by the API
    :param request_id: Optional request id returned by the API
    """

    def __init__(
        self,
        message: str,
        request_status: Optional[str] = None,
        request_id: Optional[str] = None,
    ):
        """Initialize non-success error with the reported status."""
        details = {}
        if request_status is not None:
            details["request_status"] = request_status
        if request_id:
            details["request_id"] = request_id
        super().__init__(message=message, code="NON_SUCCESS_STATUS", details=details)
        self.request_status = request_status
        self.request_id = request_id


class EmptyResultError(SnapchatAdsError):
    """Raised when a successful envelope holds no usable entity.

    :param message: Description of the empty result
    :param request_id: Optional request id returned by the API
    """

    def __init__(self, message: str, request_id: Optional[str] = None):
        """Initialize empty result error with message and request id."""
        details = {}
        if request_id:
            details["request_id"] = request_id
        super().__init__(message=message, code="EMPTY_RESULT", details=details)
        self.request_id = request_id


class EntityNotFoundError(EmptyResultError):
    """Raised when a single-entity lookup returns no sub-envelopes."""

    def __init__(self, message: str, request_id: Optional[str] = None):
        """Initialize entity not found error with message and request id."""
        super().__init__(message=message, request_id=request_id)
        self.code = "ENTITY_NOT_FOUND"
