"""Funding source operations."""

from typing import List, Optional

from ..models.account_models import FundingSource, GetFundingSourcesResponse
from .base import ResourceService


class FundingSourceService(ResourceService[FundingSource]):
    """Provide functions for interacting with Snapchat funding sources."""

    envelope_model = GetFundingSourcesResponse

    async def get(
        self, funding_source_id: str, timeout: Optional[float] = None
    ) -> FundingSource:
        """Return the funding source with the given id."""
        return await self._get(
            f"fundingsources/{funding_source_id}",
            f"get funding source with id {funding_source_id}",
            timeout,
        )

    async def list(
        self, organization_id: str, timeout: Optional[float] = None
    ) -> List[FundingSource]:
        """Return all funding sources of an organization."""
        return await self._list(
            f"organizations/{organization_id}/funding-sources",
            f"list funding sources for organization with id {organization_id}",
            timeout,
        )
