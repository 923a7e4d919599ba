"""Configuration settings for the Snapchat Ads API client.

This module defines the environment-driven settings for the client,
covering the API host, API version, access token and request timeout.
Settings are loaded from environment variables and .env files. Reading
them is opt-in: ``SnapchatAdsClient.from_env`` is the only caller.
"""

from typing import Optional

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_HOST = "https://adsapi.snapchat.com"
"""Default host address for calls to the Snapchat Ads API."""

DEFAULT_VERSION = "v1"
"""Default version segment for calls to the Snapchat Ads API."""

DEFAULT_TIMEOUT = 60.0
"""Default overall timeout, in seconds, for requests sent by the client."""


class SnapchatAdsSettings(BaseSettings):
    """Client settings loaded from environment variables.

    Empty values are treated as unset so an exported but blank variable
    never overrides the built-in defaults.

    :param host: Override for the API host
    :type host: Optional[str]
    :param api_version: Override for the API version segment
    :type api_version: Optional[str]
    :param access_token: Bearer token used for authorization
    :type access_token: Optional[str]
    :param request_timeout: Overall request timeout in seconds
    :type request_timeout: float
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # The TWITTER_* names are the ones read by earlier releases
    host: Optional[str] = Field(
        None,
        validation_alias=AliasChoices("SNAPCHAT_ADS_HOST", "TWITTER_ADS_HOST"),
        description="Snapchat Ads API host",
    )
    api_version: Optional[str] = Field(
        None,
        validation_alias=AliasChoices(
            "SNAPCHAT_ADS_API_VERSION", "TWITTER_ADS_API_VERSION"
        ),
        description="Snapchat Ads API version segment",
    )
    access_token: Optional[str] = Field(
        None,
        validation_alias=AliasChoices("SNAPCHAT_ADS_ACCESS_TOKEN"),
        description="Bearer token for the Snapchat Ads API",
    )
    request_timeout: float = Field(
        DEFAULT_TIMEOUT,
        validation_alias=AliasChoices("SNAPCHAT_ADS_REQUEST_TIMEOUT"),
        gt=0,
        description="Overall request timeout in seconds",
    )

    @field_validator("host", "api_version", "access_token", mode="before")
    @classmethod
    def blank_as_unset(cls, v: Optional[str]) -> Optional[str]:
        """Treat empty or whitespace-only values as missing.

        :param v: Raw value from the environment
        :type v: Optional[str]
        :return: Stripped value, or None when blank
        :rtype: Optional[str]
        """
        if v is None:
            return None
        v = str(v).strip()
        return v or None

    @field_validator("host")
    @classmethod
    def strip_trailing_slash(cls, v: Optional[str]) -> Optional[str]:
        """Drop a trailing slash so URL joining stays predictable.

        :param v: Host value
        :type v: Optional[str]
        :return: Host without trailing slash
        :rtype: Optional[str]
        """
        return v.rstrip("/") if v else v
