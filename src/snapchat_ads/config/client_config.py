"""Immutable client configuration snapshot."""

from typing import Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .settings import DEFAULT_HOST, DEFAULT_VERSION

USER_AGENT_PREFIX = "Snapchat Ads API Python SDK"


class ClientConfig(BaseModel):
    """Configuration shared by every request a client sends.

    Instances are frozen. The client replaces its snapshot wholesale
    (``model_copy``) when the access token changes, so a request that
    already captured a snapshot keeps a consistent view of it.

    :param host: Base URL of the API, without trailing slash
    :type host: str
    :param version: API version path segment
    :type version: str
    :param access_token: Bearer token attached to every request
    :type access_token: Optional[str]
    :param headers: Custom headers merged into every request
    :type headers: Dict[str, str]
    :param custom_version: Whether the version was set explicitly
    :type custom_version: bool
    """

    model_config = ConfigDict(frozen=True)

    host: str = DEFAULT_HOST
    version: str = DEFAULT_VERSION
    access_token: Optional[str] = None
    headers: Dict[str, str] = Field(default_factory=dict)
    custom_version: bool = False

    @field_validator("host")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")

    @property
    def base_url(self) -> str:
        """Return ``{host}/{version}``."""
        return f"{self.host}/{self.version}"

    @property
    def user_agent(self) -> str:
        """Return the User-Agent sent with every request."""
        return f"{USER_AGENT_PREFIX} {self.version}"

    def with_access_token(self, access_token: Optional[str]) -> "ClientConfig":
        """Return a copy of this snapshot carrying a different token."""
        return self.model_copy(update={"access_token": access_token})
