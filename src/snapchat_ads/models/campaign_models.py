"""Pydantic models for campaigns, ad squads and ads.

These are the delivery-side entities of the Snapchat Ads API. A campaign
belongs to an ad account, an ad squad belongs to a campaign and an ad
belongs to an ad squad. Monetary values are micro-currency integers.
"""

from datetime import datetime
from typing import ClassVar, List, Optional

from pydantic import Field

from .base_models import BaseAPIResponse
from .envelope import Envelope, SubEnvelope


class CampaignMeasurementSpec(BaseAPIResponse):
    """App identifiers used to measure a campaign.

    :param ios_app_id: App Store id of the advertised iOS app
    :type ios_app_id: Optional[str]
    :param android_app_url: Play Store URL of the advertised Android app
    :type android_app_url: Optional[str]
    """

    ios_app_id: Optional[str] = None
    android_app_url: Optional[str] = None


class Campaign(BaseAPIResponse):
    """Campaign model.

    Represents an advertising campaign with its schedule and spend caps.

    :param id: Unique identifier for the campaign
    :type id: Optional[str]
    :param ad_account_id: Ad account the campaign belongs to
    :type ad_account_id: Optional[str]
    :param name: Campaign name
    :type name: Optional[str]
    :param status: Campaign status (ACTIVE, PAUSED)
    :type status: Optional[str]
    :param measurement_spec: App measurement settings
    :type measurement_spec: Optional[CampaignMeasurementSpec]
    :param start_time: When the campaign starts
    :type start_time: Optional[datetime]
    :param end_time: When the campaign ends
    :type end_time: Optional[datetime]
    :param daily_budget_micro: Daily spend cap in micro-currency
    :type daily_budget_micro: Optional[int]
    :param lifetime_spend_cap_micro: Lifetime spend cap in micro-currency
    :type lifetime_spend_cap_micro: Optional[int]
    """

    id: Optional[str] = None
    ad_account_id: Optional[str] = None
    name: Optional[str] = None
    status: Optional[str] = None
    measurement_spec: Optional[CampaignMeasurementSpec] = None
    start_time: Optional[datetime] = None
    end_time: Optional[datetime] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    daily_budget_micro: Optional[int] = None
    lifetime_spend_cap_micro: Optional[int] = None


class AdSquad(BaseAPIResponse):
    """Ad squad model.

    An ad squad groups ads that share targeting, bidding and budget
    within one campaign.
    """

    id: Optional[str] = None
    campaign_id: Optional[str] = None
    name: Optional[str] = None
    status: Optional[str] = None
    type: Optional[str] = None
    bid_micro: Optional[int] = None
    billing_event: Optional[str] = None
    daily_budget_micro: Optional[int] = None
    lifetime_budget_micro: Optional[int] = None
    start_time: Optional[datetime] = None
    end_time: Optional[datetime] = None
    optimization_goal: Optional[str] = None
    placement: Optional[str] = None
    included_content_types: List[str] = Field(default_factory=list)
    excluded_content_types: List[str] = Field(default_factory=list)


class Ad(BaseAPIResponse):
    """Ad model.

    :param id: Unique identifier for the ad
    :type id: Optional[str]
    :param ad_squad_id: Ad squad the ad belongs to
    :type ad_squad_id: Optional[str]
    :param creative_id: Creative shown by the ad
    :type creative_id: Optional[str]
    :param review_status: State of the ad review process
    :type review_status: Optional[str]
    :param review_status_reason: Rejection reason, if rejected
    :type review_status_reason: Optional[str]
    """

    id: Optional[str] = None
    ad_squad_id: Optional[str] = None
    creative_id: Optional[str] = None
    name: Optional[str] = None
    status: Optional[str] = None
    review_status: Optional[str] = None
    review_status_reason: Optional[str] = None
    type: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


# Envelopes
class CampaignResponse(SubEnvelope[Campaign]):
    entity_key: ClassVar[str] = "campaign"

    campaign: Campaign = Field(default_factory=Campaign)


class GetCampaignsResponse(Envelope[Campaign]):
    """Envelope returned by campaign endpoints."""

    items_key: ClassVar[str] = "campaigns"

    campaigns: List[CampaignResponse] = Field(default_factory=list)


class AdSquadResponse(SubEnvelope[AdSquad]):
    entity_key: ClassVar[str] = "adsquad"

    adsquad: AdSquad = Field(default_factory=AdSquad)


class GetAdSquadsResponse(Envelope[AdSquad]):
    """Envelope returned by ad squad endpoints."""

    items_key: ClassVar[str] = "adsquads"

    adsquads: List[AdSquadResponse] = Field(default_factory=list)


class AdResponse(SubEnvelope[Ad]):
    entity_key: ClassVar[str] = "ad"

    ad: Ad = Field(default_factory=Ad)


class GetAdsResponse(Envelope[Ad]):
    """Envelope returned by ad endpoints."""

    items_key: ClassVar[str] = "ads"

    ads: List[AdResponse] = Field(default_factory=list)
