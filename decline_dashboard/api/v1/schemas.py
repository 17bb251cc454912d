"""Pydantic schemas for API response serialization"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel
from datetime import date
from typing import List, Optional


class CamelModel(BaseModel):
    """Serializes snake_case fields as camelCase for the dashboard front end"""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class OverviewResponse(CamelModel):
    """Response for GET /v1/analytics/overview"""

    total: int
    approved: int
    declined: int
    approval_rate: float
    decline_rate: float
    total_amount: float


class BreakdownItemSchema(CamelModel):
    """Single row of GET /v1/analytics/breakdown"""

    label: str
    total: int
    approved: int
    declined: int
    decline_rate: float
    approval_rate: float


class TimeSeriesPointSchema(CamelModel):
    """One day of activity"""

    date: date
    total: int
    declined: int
    decline_rate: float


class TimeSeriesGroupSchema(CamelModel):
    """Single group of GET /v1/analytics/timeseries"""

    group_key: str
    series: List[TimeSeriesPointSchema]


class DeclineCodeItemSchema(CamelModel):
    """Single row of GET /v1/analytics/decline-codes"""

    rank: int
    code: str
    category: str
    count: int
    percent_of_declines: float
    top_processors: List[str]


class DateRangeSchema(CamelModel):
    """Earliest and latest transaction day in the dataset"""

    min: date
    max: date


class FilterOptionsResponse(CamelModel):
    """Response for GET /v1/analytics/filter-options"""

    processors: List[str]
    payment_methods: List[str]
    countries: List[str]
    decline_categories: List[str]
    decline_codes: List[str]
    date_range: Optional[DateRangeSchema] = None
