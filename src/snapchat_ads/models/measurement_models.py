"""Pydantic models for measurement stats."""

from typing import ClassVar, List, Optional

from pydantic import Field

from .base_models import BaseAPIResponse
from .envelope import Envelope, SubEnvelope


class MeasurementStats(BaseAPIResponse):
    """Delivery metrics for one entity.

    :param impressions: Number of impressions
    :type impressions: int
    :param swipes: Number of swipe-ups
    :type swipes: int
    :param spend: Amount spent in micro-currency
    :type spend: int
    :param screen_time_millis: Total time spent on the top snap, in milliseconds
    :type screen_time_millis: int
    :param video_views: Impressions with at least two seconds of consecutive
        watch time or a swipe-up on the top snap
    :type video_views: int
    """

    impressions: int = 0
    swipes: int = 0
    spend: int = 0
    first_quartile: int = Field(0, alias="quartile_1")
    second_quartile: int = Field(0, alias="quartile_2")
    third_quartile: int = Field(0, alias="quartile_3")
    screen_time_millis: int = 0
    view_completion: int = 0
    video_views: int = 0


class TotalStat(BaseAPIResponse):
    """Total metrics for the requested entity.

    :param id: Id of the entity the stats belong to
    :type id: Optional[str]
    :param type: Entity type (AD_SQUAD, CAMPAIGN, ...)
    :type type: Optional[str]
    :param granularity: Reporting granularity (TOTAL, DAY, HOUR)
    :type granularity: Optional[str]
    :param stats: The metrics themselves
    :type stats: MeasurementStats
    """

    id: Optional[str] = None
    type: Optional[str] = None
    granularity: Optional[str] = None
    stats: MeasurementStats = Field(default_factory=MeasurementStats)


class TotalStatResponse(SubEnvelope[TotalStat]):
    entity_key: ClassVar[str] = "total_stat"

    total_stat: TotalStat = Field(default_factory=TotalStat)


class GetMeasurementsResponse(Envelope[TotalStat]):
    """Envelope returned by stats endpoints."""

    items_key: ClassVar[str] = "total_stats"

    total_stats: List[TotalStatResponse] = Field(default_factory=list)
