"""Snapchat Ads API client package.

This package provides a typed, asynchronous client for the Snapchat Ads
REST API. It covers organizations, ad accounts, funding sources,
campaigns, ad squads, ads, measurement stats and the authenticated user.

:var __version__: Current package version
:type __version__: str
"""

from .client import SnapchatAdsClient
from .config import DEFAULT_HOST, DEFAULT_VERSION, ClientConfig

__version__ = "0.1.0"

__all__ = [
    "ClientConfig",
    "DEFAULT_HOST",
    "DEFAULT_VERSION",
    "SnapchatAdsClient",
    "__version__",
]
