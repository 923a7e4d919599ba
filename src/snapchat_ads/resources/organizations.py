"""Organization operations."""

from typing import List, Optional

from ..models.account_models import GetOrganizationsResponse, Organization
from .base import ResourceService


class OrganizationService(ResourceService[Organization]):
    """Provide functions for interacting with Snapchat organizations."""

    envelope_model = GetOrganizationsResponse

    async def get(
        self, organization_id: str, timeout: Optional[float] = None
    ) -> Organization:
        """Return the organization with the given id."""
        return await self._get(
            f"organizations/{organization_id}",
            f"get organization with id {organization_id}",
            timeout,
        )

    async def list(self, timeout: Optional[float] = None) -> List[Organization]:
        """Return the organizations the authenticated user belongs to."""
        return await self._list("me/organizations", "list organizations", timeout)
