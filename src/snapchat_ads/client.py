"""Snapchat Ads API client.

The client holds the shared configuration snapshot and the underlying
``httpx.AsyncClient``, and exposes one accessor per resource type.

Examples:
    >>> async with SnapchatAdsClient(access_token="token") as client:
    ...     campaigns = await client.campaigns.list("ad-account-id")
"""

import logging
import threading
from typing import Any, Dict, Optional, Tuple, Type, TypeVar

import httpx
from pydantic import BaseModel

from .config.client_config import ClientConfig
from .config.settings import SnapchatAdsSettings
from .exceptions import ConfigurationError
from .resources import (
    AdAccountService,
    AdService,
    AdSquadService,
    CampaignService,
    FundingSourceService,
    MeasurementService,
    OrganizationService,
    UserService,
)
from .utils.http import (
    RequestResponse,
    build_request,
    create_http_client,
    create_timeout,
    execute,
)

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


class SnapchatAdsClient:
    """Perform all operations against the Snapchat Ads API.

    Configuration is fixed at construction time except for the access
    token, which can be replaced with ``update_access_token``. Each
    request captures the configuration snapshot current when it is
    built, so rotating the token never affects a request in flight.

    :param access_token: Bearer token attached to every request
    :type access_token: Optional[str]
    :param http_client: Custom HTTP client; replaces the default one
    :type http_client: Optional[httpx.AsyncClient]
    :param host: Custom API host
    :type host: Optional[str]
    :param version: Custom API version segment
    :type version: Optional[str]
    :param headers: Custom headers merged into every request
    :type headers: Optional[Dict[str, str]]
    :param timeout: Overall timeout, in seconds, of the default HTTP client
    :type timeout: Optional[float]
    :raises ConfigurationError: If host or version is empty
    """

    def __init__(
        self,
        access_token: Optional[str] = None,
        http_client: Optional[httpx.AsyncClient] = None,
        host: Optional[str] = None,
        version: Optional[str] = None,
        headers: Optional[Dict[str, str]] = None,
        timeout: Optional[float] = None,
    ):
        config: Dict[str, Any] = {
            "access_token": access_token,
            "headers": dict(headers or {}),
        }
        if host is not None:
            if not host.strip():
                raise ConfigurationError("host must not be empty", setting="host")
            config["host"] = host.strip()
        if version is not None:
            if not version.strip():
                raise ConfigurationError(
                    "version must not be empty", setting="version"
                )
            config["version"] = version.strip()
            config["custom_version"] = True
        self._config = ClientConfig(**config)
        self._config_lock = threading.Lock()

        if http_client is not None:
            self._http_client = http_client
            self._owns_http_client = False
        else:
            self._http_client = create_http_client(
                timeout=create_timeout(timeout) if timeout else None
            )
            self._owns_http_client = True

        self.users = UserService(self)
        self.organizations = OrganizationService(self)
        self.ad_accounts = AdAccountService(self)
        self.campaigns = CampaignService(self)
        self.funding_sources = FundingSourceService(self)
        self.ad_squads = AdSquadService(self)
        self.ads = AdService(self)
        self.measurements = MeasurementService(self)

    @classmethod
    def from_env(cls, **overrides: Any) -> "SnapchatAdsClient":
        """Create a client configured from environment variables.

        ``SNAPCHAT_ADS_HOST``, ``SNAPCHAT_ADS_API_VERSION``,
        ``SNAPCHAT_ADS_ACCESS_TOKEN`` and ``SNAPCHAT_ADS_REQUEST_TIMEOUT``
        are read (a ``.env`` file is honoured too). Keyword arguments
        that are not None take precedence over the environment.

        :param overrides: Constructor keyword arguments
        :return: Configured client
        :rtype: SnapchatAdsClient
        """
        settings = SnapchatAdsSettings()
        kwargs: Dict[str, Any] = {
            "access_token": settings.access_token,
            "host": settings.host,
            "version": settings.api_version,
            "timeout": settings.request_timeout,
        }
        kwargs.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**kwargs)

    @property
    def config(self) -> ClientConfig:
        """Return the current configuration snapshot."""
        return self._config

    @property
    def http_client(self) -> httpx.AsyncClient:
        """Return the underlying HTTP client."""
        return self._http_client

    @property
    def custom_http_headers(self) -> Dict[str, str]:
        """Return a copy of the custom headers sent with every request."""
        return dict(self._config.headers)

    def update_access_token(self, access_token: str) -> None:
        """Replace the access token used for subsequent requests.

        :param access_token: New bearer token
        :type access_token: str
        """
        with self._config_lock:
            self._config = self._config.with_access_token(access_token)
        logger.debug("Access token updated")

    async def request(
        self,
        method: str,
        path: str,
        target: Type[ModelT],
        body: Optional[Any] = None,
        timeout: Optional[float] = None,
    ) -> Tuple[ModelT, RequestResponse]:
        """Send one request and decode the response into ``target``.

        :param method: HTTP method
        :type method: str
        :param path: Path relative to ``{host}/{version}``
        :type path: str
        :param target: Pydantic model for the response body
        :type target: Type[ModelT]
        :param body: Optional JSON body
        :type body: Optional[Any]
        :param timeout: Optional deadline in seconds
        :type timeout: Optional[float]
        :return: Decoded body and request metadata
        :rtype: Tuple[ModelT, RequestResponse]
        """
        request = build_request(self._config, method, path, body)
        return await execute(self._http_client, request, target, timeout=timeout)

    async def aclose(self) -> None:
        """Close the HTTP client if this client created it."""
        if self._owns_http_client:
            await self._http_client.aclose()

    async def __aenter__(self) -> "SnapchatAdsClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()
