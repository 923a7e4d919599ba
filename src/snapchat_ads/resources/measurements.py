"""Measurement operations."""

from typing import List, Optional

from ..models.envelope import extract_all
from ..models.measurement_models import GetMeasurementsResponse, TotalStat
from .base import ResourceService


class MeasurementService(ResourceService[TotalStat]):
    """Provide functions for getting Snapchat measurement metrics."""

    envelope_model = GetMeasurementsResponse

    async def get_stats_for_ad_squad(
        self, ad_squad_id: str, timeout: Optional[float] = None
    ) -> List[TotalStat]:
        """Return the total stats of an ad squad.

        An ad squad without delivery yields an empty list.

        :param ad_squad_id: Ad squad identifier
        :type ad_squad_id: str
        :param timeout: Optional deadline in seconds
        :type timeout: Optional[float]
        :return: Every stats entry of the response, in order
        :rtype: List[TotalStat]
        :raises NonSuccessStatusError: If the request status is not success
        """
        envelope = await self._fetch("GET", f"adsquads/{ad_squad_id}/stats", timeout)
        return extract_all(envelope, f"get stats for ad squad with id {ad_squad_id}")
