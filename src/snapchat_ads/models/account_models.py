"""Pydantic models for organizations, ad accounts, funding sources and users.

These are the billing-side entities of the Snapchat Ads API: an
organization owns ad accounts and funding sources, and users belong to
an organization.
"""

from datetime import datetime
from typing import ClassVar, List, Optional

from pydantic import Field

from .base_models import BaseAPIResponse
from .envelope import Envelope, SubEnvelope


class Organization(BaseAPIResponse):
    """Organization model.

    :param id: Unique identifier for the organization
    :type id: Optional[str]
    :param name: Organization name
    :type name: Optional[str]
    :param administrative_district_level_1: State or region of the address
    :type administrative_district_level_1: Optional[str]
    :param type: Organization type (ENTERPRISE, PARTNER)
    :type type: Optional[str]
    """

    id: Optional[str] = None
    name: Optional[str] = None
    address_line_1: Optional[str] = None
    locality: Optional[str] = None
    administrative_district_level_1: Optional[str] = None
    country: Optional[str] = None
    postal_code: Optional[str] = None
    type: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class AdAccount(BaseAPIResponse):
    """Ad account model.

    Represents an ad account owned by an organization, with its
    currency, spend cap and the funding sources it may draw on.
    """

    id: Optional[str] = None
    name: Optional[str] = None
    organization_id: Optional[str] = None
    timezone: Optional[str] = None
    type: Optional[str] = None
    currency: Optional[str] = None
    advertiser: Optional[str] = None
    advertiser_organization_id: Optional[str] = None
    lifetime_spend_cap_micro: Optional[int] = None
    funding_source_ids: List[str] = Field(default_factory=list)
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class FundingSource(BaseAPIResponse):
    """Funding source model.

    Funding sources come in several types (credit card, line of credit,
    coupon, ...); fields that do not apply to a type are left unset.
    Monetary values are micro-currency integers.
    """

    id: Optional[str] = None
    type: Optional[str] = None
    status: Optional[str] = None
    name: Optional[str] = None
    email: Optional[str] = None
    currency: Optional[str] = None
    budget_spent_micro: Optional[int] = None
    total_budget_micro: Optional[int] = None
    available_credit_micro: Optional[int] = None
    value_micro: Optional[int] = None
    card_type: Optional[str] = None
    last_4: Optional[str] = None
    expiration_year: Optional[str] = None
    expiration_month: Optional[str] = None
    daily_spend_limit_micro: Optional[int] = None
    daily_spend_limit_currency: Optional[str] = None
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class User(BaseAPIResponse):
    """Authenticated user model."""

    id: Optional[str] = None
    email: Optional[str] = None
    organization_id: Optional[str] = None
    display_name: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


# Envelopes
class OrganizationResponse(SubEnvelope[Organization]):
    entity_key: ClassVar[str] = "organization"

    organization: Organization = Field(default_factory=Organization)


class GetOrganizationsResponse(Envelope[Organization]):
    """Envelope returned by organization endpoints."""

    items_key: ClassVar[str] = "organizations"

    organizations: List[OrganizationResponse] = Field(default_factory=list)


class AdAccountResponse(SubEnvelope[AdAccount]):
    entity_key: ClassVar[str] = "adaccount"

    adaccount: AdAccount = Field(default_factory=AdAccount)


class GetAdAccountsResponse(Envelope[AdAccount]):
    """Envelope returned by ad account endpoints."""

    items_key: ClassVar[str] = "adaccounts"

    adaccounts: List[AdAccountResponse] = Field(default_factory=list)


class FundingSourceResponse(SubEnvelope[FundingSource]):
    entity_key: ClassVar[str] = "fundingsource"

    fundingsource: FundingSource = Field(default_factory=FundingSource)


class GetFundingSourcesResponse(Envelope[FundingSource]):
    """Envelope returned by funding source endpoints."""

    items_key: ClassVar[str] = "fundingsources"

    fundingsources: List[FundingSourceResponse] = Field(default_factory=list)


class GetAuthenticatedUserResponse(BaseAPIResponse):
    """Response of the ``me`` endpoint.

    Unlike the other endpoints it carries no request status and wraps
    the user directly.
    """

    request_id: Optional[str] = None
    me: Optional[User] = None
