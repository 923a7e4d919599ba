"""Snapchat Ads models package.

This package contains the Pydantic models for every entity returned by
the Snapchat Ads API, the response envelopes that wrap them, and the
helpers that apply the envelope success contract.
"""

from .account_models import (
    AdAccount,
    AdAccountResponse,
    FundingSource,
    FundingSourceResponse,
    GetAdAccountsResponse,
    GetAuthenticatedUserResponse,
    GetFundingSourcesResponse,
    GetOrganizationsResponse,
    Organization,
    OrganizationResponse,
    User,
)
from .base_models import BaseAPIResponse
from .campaign_models import (
    Ad,
    AdResponse,
    AdSquad,
    AdSquadResponse,
    Campaign,
    CampaignMeasurementSpec,
    CampaignResponse,
    GetAdSquadsResponse,
    GetAdsResponse,
    GetCampaignsResponse,
)
from .envelope import (
    Envelope,
    SubEnvelope,
    extract_all,
    extract_delete_ack,
    extract_list,
    extract_single,
    first_entity,
    is_success,
)
from .measurement_models import (
    GetMeasurementsResponse,
    MeasurementStats,
    TotalStat,
    TotalStatResponse,
)

__all__ = [
    # Base models
    "BaseAPIResponse",
    # Envelope protocol
    "Envelope",
    "SubEnvelope",
    "extract_all",
    "extract_delete_ack",
    "extract_list",
    "extract_single",
    "first_entity",
    "is_success",
    # Entities
    "Ad",
    "AdAccount",
    "AdSquad",
    "Campaign",
    "CampaignMeasurementSpec",
    "FundingSource",
    "MeasurementStats",
    "Organization",
    "TotalStat",
    "User",
    # Envelopes
    "AdAccountResponse",
    "AdResponse",
    "AdSquadResponse",
    "CampaignResponse",
    "FundingSourceResponse",
    "GetAdAccountsResponse",
    "GetAdSquadsResponse",
    "GetAdsResponse",
    "GetAuthenticatedUserResponse",
    "GetCampaignsResponse",
    "GetFundingSourcesResponse",
    "GetMeasurementsResponse",
    "GetOrganizationsResponse",
    "OrganizationResponse",
    "TotalStatResponse",
]
