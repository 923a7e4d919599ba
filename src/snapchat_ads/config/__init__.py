"""Configuration for the Snapchat Ads API client."""

from .client_config import USER_AGENT_PREFIX, ClientConfig
from .settings import (
    DEFAULT_HOST,
    DEFAULT_TIMEOUT,
    DEFAULT_VERSION,
    SnapchatAdsSettings,
)

__all__ = [
    "ClientConfig",
    "DEFAULT_HOST",
    "DEFAULT_TIMEOUT",
    "DEFAULT_VERSION",
    "SnapchatAdsSettings",
    "USER_AGENT_PREFIX",
]
