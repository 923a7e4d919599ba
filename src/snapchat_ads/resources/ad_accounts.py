"""Ad account operations."""

from typing import List, Optional

from ..models.account_models import AdAccount, GetAdAccountsResponse
from .base import ResourceService


class AdAccountService(ResourceService[AdAccount]):
    """Provide functions for interacting with Snapchat ad accounts."""

    envelope_model = GetAdAccountsResponse

    async def get(
        self, ad_account_id: str, timeout: Optional[float] = None
    ) -> AdAccount:
        """Return the ad account with the given id."""
        return await self._get(
            f"adaccounts/{ad_account_id}",
            f"get ad account with id {ad_account_id}",
            timeout,
        )

    async def list(
        self, organization_id: str, timeout: Optional[float] = None
    ) -> List[AdAccount]:
        """Return all ad accounts of an organization."""
        return await self._list(
            f"organizations/{organization_id}/adaccounts",
            f"list ad accounts for organization with id {organization_id}",
            timeout,
        )
