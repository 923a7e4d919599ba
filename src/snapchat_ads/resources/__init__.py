"""Resource accessors for the Snapchat Ads API."""

from .ad_accounts import AdAccountService
from .ad_squads import AdSquadService
from .ads import AdService
from .base import ResourceService
from .campaigns import CampaignService
from .funding_sources import FundingSourceService
from .measurements import MeasurementService
from .organizations import OrganizationService
from .users import UserService

__all__ = [
    "AdAccountService",
    "AdService",
    "AdSquadService",
    "CampaignService",
    "FundingSourceService",
    "MeasurementService",
    "OrganizationService",
    "ResourceService",
    "UserService",
]
