"""HTTP client construction with timeout and connection limits.

The Snapchat Ads client owns at most one ``httpx.AsyncClient``. This
module builds it with explicit timeout and pool limits; callers that
need different transport behaviour pass their own client instead.
"""

import logging
from typing import Optional

import httpx

from ...config.settings import DEFAULT_TIMEOUT

logger = logging.getLogger(__name__)


def create_timeout(
    timeout: float = DEFAULT_TIMEOUT,
    connect: Optional[float] = None,
    read: Optional[float] = None,
    write: Optional[float] = None,
    pool: Optional[float] = None,
) -> httpx.Timeout:
    """Create a timeout configuration.

    :param timeout: Default for every phase not set explicitly, in seconds
    :type timeout: float
    :param connect: Connection timeout in seconds
    :type connect: Optional[float]
    :param read: Read timeout in seconds
    :type read: Optional[float]
    :param write: Write timeout in seconds
    :type write: Optional[float]
    :param pool: Pool acquisition timeout in seconds
    :type pool: Optional[float]
    :return: Configured timeout object
    :rtype: httpx.Timeout
    """
    return httpx.Timeout(
        timeout,
        connect=connect if connect is not None else timeout,
        read=read if read is not None else timeout,
        write=write if write is not None else timeout,
        pool=pool if pool is not None else timeout,
    )


def create_limits(
    max_keepalive: int = 10,
    max_connections: int = 20,
    keepalive_expiry: float = 30.0,
) -> httpx.Limits:
    """Create connection limits configuration.

    :param max_keepalive: Maximum keep-alive connections
    :type max_keepalive: int
    :param max_connections: Maximum total connections
    :type max_connections: int
    :param keepalive_expiry: Keep-alive expiry time in seconds
    :type keepalive_expiry: float
    :return: Configured limits object
    :rtype: httpx.Limits
    """
    return httpx.Limits(
        max_keepalive_connections=max_keepalive,
        max_connections=max_connections,
        keepalive_expiry=keepalive_expiry,
    )


def create_http_client(
    timeout: Optional[httpx.Timeout] = None,
    limits: Optional[httpx.Limits] = None,
) -> httpx.AsyncClient:
    """Create the default HTTP client used by ``SnapchatAdsClient``.

    :param timeout: Optional timeout, one minute overall by default
    :type timeout: Optional[httpx.Timeout]
    :param limits: Optional connection limits
    :type limits: Optional[httpx.Limits]
    :return: New async HTTP client
    :rtype: httpx.AsyncClient
    """
    client = httpx.AsyncClient(
        timeout=timeout or create_timeout(),
        limits=limits or create_limits(),
    )
    logger.debug("Created default HTTP client")
    return client
