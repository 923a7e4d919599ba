"""Ad squad operations."""

from typing import List, Optional

from ..models.campaign_models import AdSquad, GetAdSquadsResponse
from .base import ResourceService


class AdSquadService(ResourceService[AdSquad]):
    """Provide functions for interacting with Snapchat ad squads."""

    envelope_model = GetAdSquadsResponse

    async def get(self, ad_squad_id: str, timeout: Optional[float] = None) -> AdSquad:
        """Return the ad squad with the given id."""
        return await self._get(
            f"adsquads/{ad_squad_id}",
            f"get ad squad with id {ad_squad_id}",
            timeout,
        )

    async def list_by_campaign(
        self, campaign_id: str, timeout: Optional[float] = None
    ) -> List[AdSquad]:
        """Return all ad squads of a campaign."""
        return await self._list(
            f"campaigns/{campaign_id}/adsquads",
            f"list ad squads for campaign with id {campaign_id}",
            timeout,
        )

    async def list_by_ad_account(
        self, ad_account_id: str, timeout: Optional[float] = None
    ) -> List[AdSquad]:
        """Return all ad squads of an ad account."""
        return await self._list(
            f"adaccounts/{ad_account_id}/adsquads",
            f"list ad squads for ad account with id {ad_account_id}",
            timeout,
        )

    async def delete(self, ad_squad_id: str, timeout: Optional[float] = None) -> None:
        """Delete an ad squad."""
        await self._delete(
            f"adsquads/{ad_squad_id}",
            f"delete ad squad with id {ad_squad_id}",
            timeout,
        )
