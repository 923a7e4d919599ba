"""Ad operations."""

from typing import List, Optional

from ..models.campaign_models import Ad, GetAdsResponse
from .base import ResourceService


class AdService(ResourceService[Ad]):
    """Provide functions for interacting with Snapchat ads."""

    envelope_model = GetAdsResponse

    async def get(self, ad_id: str, timeout: Optional[float] = None) -> Ad:
        """Return the ad with the given id.

        :param ad_id: Ad identifier
        :type ad_id: str
        :param timeout: Optional deadline in seconds
        :type timeout: Optional[float]
        :return: The ad
        :rtype: Ad
        """
        return await self._get(f"ads/{ad_id}", f"get ad with id {ad_id}", timeout)

    async def list_by_ad_squad(
        self, ad_squad_id: str, timeout: Optional[float] = None
    ) -> List[Ad]:
        """Return all ads of an ad squad."""
        return await self._list(
            f"adsquads/{ad_squad_id}/ads",
            f"list ads for ad squad with id {ad_squad_id}",
            timeout,
        )

    async def list_by_ad_account(
        self, ad_account_id: str, timeout: Optional[float] = None
    ) -> List[Ad]:
        """Return all ads of an ad account."""
        return await self._list(
            f"adaccounts/{ad_account_id}/ads",
            f"list ads for ad account with id {ad_account_id}",
            timeout,
        )

    async def delete(self, ad_id: str, timeout: Optional[float] = None) -> None:
        """Delete an ad."""
        await self._delete(f"ads/{ad_id}", f"delete ad with id {ad_id}", timeout)
