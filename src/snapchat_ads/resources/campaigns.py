"""Campaign operations."""

from typing import List, Optional

from ..models.campaign_models import Campaign, GetCampaignsResponse
from .base import ResourceService


class CampaignService(ResourceService[Campaign]):
    """Provide functions for interacting with Snapchat campaigns."""

    envelope_model = GetCampaignsResponse

    async def get(self, campaign_id: str, timeout: Optional[float] = None) -> Campaign:
        """Return the campaign with the given id.

        :param campaign_id: Campaign identifier
        :type campaign_id: str
        :param timeout: Optional deadline in seconds
        :type timeout: Optional[float]
        :return: The campaign
        :rtype: Campaign
        :raises EntityNotFoundError: If the API returns no campaign
        """
        return await self._get(
            f"campaigns/{campaign_id}",
            f"get campaign with id {campaign_id}",
            timeout,
        )

    async def list(
        self, ad_account_id: str, timeout: Optional[float] = None
    ) -> List[Campaign]:
        """Return all campaigns of an ad account."""
        return await self._list(
            f"adaccounts/{ad_account_id}/campaigns",
            f"list campaigns for ad account with id {ad_account_id}",
            timeout,
        )

    async def delete(self, campaign_id: str, timeout: Optional[float] = None) -> None:
        """Delete a campaign."""
        await self._delete(
            f"campaigns/{campaign_id}",
            f"delete campaign with id {campaign_id}",
            timeout,
        )
