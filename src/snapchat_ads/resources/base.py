"""Generic resource accessor shared by every Snapchat Ads entity.

Each resource (ads, campaigns, ...) follows the same shape: build a path,
issue one request, decode the envelope and apply the success contract.
``ResourceService`` implements that shape once; subclasses only bind an
envelope model and expose named operations with their path templates.
"""

from typing import TYPE_CHECKING, Generic, List, Optional, Type, TypeVar

from ..models.envelope import (
    Envelope,
    extract_delete_ack,
    extract_list,
    extract_single,
)

if TYPE_CHECKING:
    from ..client import SnapchatAdsClient

EntityT = TypeVar("EntityT")


class ResourceService(Generic[EntityT]):
    """Get/List/Delete operations bound to one envelope model.

    :param client: Client used to send requests
    :type client: SnapchatAdsClient
    """

    envelope_model: Type[Envelope]

    def __init__(self, client: "SnapchatAdsClient"):
        self._client = client

    async def _fetch(
        self, method: str, path: str, timeout: Optional[float]
    ) -> Envelope[EntityT]:
        envelope, _ = await self._client.request(
            method, path, self.envelope_model, timeout=timeout
        )
        return envelope

    async def _get(
        self, path: str, context: str, timeout: Optional[float] = None
    ) -> EntityT:
        """Fetch ``path`` and return the single entity it holds."""
        envelope = await self._fetch("GET", path, timeout)
        return extract_single(envelope, context)

    async def _list(
        self, path: str, context: str, timeout: Optional[float] = None
    ) -> List[EntityT]:
        """Fetch ``path`` and return its successful entities."""
        envelope = await self._fetch("GET", path, timeout)
        return extract_list(envelope, context)

    async def _delete(
        self, path: str, context: str, timeout: Optional[float] = None
    ) -> None:
        """Send a DELETE to ``path`` and check the acknowledgement."""
        envelope = await self._fetch("DELETE", path, timeout)
        extract_delete_ack(envelope, context)
