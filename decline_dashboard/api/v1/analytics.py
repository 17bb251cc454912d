"""GET /v1/analytics/* - filtered aggregate views for the decline dashboard"""

import time
import logging
from dataclasses import asdict
from typing import List, Optional
from fastapi import APIRouter, Depends, HTTPException, Query, Request

from decline_dashboard.api.v1.schemas import (
    BreakdownItemSchema,
    DateRangeSchema,
    DeclineCodeItemSchema,
    FilterOptionsResponse,
    OverviewResponse,
    TimeSeriesGroupSchema,
)
from decline_dashboard.api.dependencies import (
    get_breakdown_filter_params,
    get_filter_params,
    get_request_id,
    get_store,
)
from decline_dashboard.config import settings
from decline_dashboard.domain import catalog
from decline_dashboard.domain.aggregations import (
    aggregate_breakdown,
    aggregate_decline_codes,
    aggregate_time_series,
    compute_metrics,
)
from decline_dashboard.domain.dimensions import Dimension, TimeSeriesDimension
from decline_dashboard.domain.exceptions import DomainException
from decline_dashboard.domain.filters import apply_filters
from decline_dashboard.domain.models import FilterParams
from decline_dashboard.infrastructure.data.store import TransactionStore
from decline_dashboard.infrastructure.observability.logging import log_query
from decline_dashboard.infrastructure.observability.metrics import record_query
from decline_dashboard.utils.date_utils import utc_date

router = APIRouter(prefix="/analytics")


def _complete(request: Request, endpoint: str, filters: FilterParams, matched: int, start_time: float) -> None:
    """Record metrics and the structured query log"""
    duration_ms = (time.time() - start_time) * 1000
    record_query(endpoint, matched)
    log_query(get_request_id(request), endpoint, filters, matched, duration_ms)


def _unprocessable(request: Request, error: DomainException) -> HTTPException:
    logging.warning(f"Rejected analytics query: {error}", extra={"request_id": get_request_id(request)})
    return HTTPException(status_code=422, detail=str(error))


@router.get("/overview", response_model=OverviewResponse)
def get_overview(
    request: Request,
    filters: FilterParams = Depends(get_filter_params),
    store: TransactionStore = Depends(get_store),
):
    """
    Headline metrics for the metric cards.

    Returns:
        Counts, approval/decline rates and total volume of the filtered set
    """
    start_time = time.time()
    filtered = apply_filters(store.get_transactions(), filters)
    metrics = compute_metrics(filtered)

    _complete(request, "overview", filters, len(filtered), start_time)
    return OverviewResponse(**asdict(metrics))


@router.get("/breakdown", response_model=List[BreakdownItemSchema])
def get_breakdown(
    request: Request,
    dimension: Dimension = Query(Dimension.PROCESSOR, description="Field to group by"),
    filters: FilterParams = Depends(get_breakdown_filter_params),
    store: TransactionStore = Depends(get_store),
):
    """
    Approval/decline split per value of a dimension.

    Returns:
        One row per distinct value, largest total first
    """
    start_time = time.time()
    filtered = apply_filters(store.get_transactions(), filters)

    try:
        items = aggregate_breakdown(filtered, dimension)
    except DomainException as e:
        raise _unprocessable(request, e)

    _complete(request, "breakdown", filters, len(filtered), start_time)
    return [BreakdownItemSchema(**asdict(item)) for item in items]


@router.get("/timeseries", response_model=List[TimeSeriesGroupSchema])
def get_timeseries(
    request: Request,
    group_by: Optional[TimeSeriesDimension] = Query(None, alias="groupBy", description="Optional split"),
    filters: FilterParams = Depends(get_filter_params),
    store: TransactionStore = Depends(get_store),
):
    """
    Daily volume and decline rate, optionally one series per group.

    Returns:
        Groups sharing a gap-free daily date axis (empty when nothing matches)
    """
    start_time = time.time()
    filtered = apply_filters(store.get_transactions(), filters)

    try:
        groups = aggregate_time_series(filtered, group_by)
    except DomainException as e:
        raise _unprocessable(request, e)

    _complete(request, "timeseries", filters, len(filtered), start_time)
    return [TimeSeriesGroupSchema(**asdict(group)) for group in groups]


@router.get("/decline-codes", response_model=List[DeclineCodeItemSchema])
def get_decline_codes(
    request: Request,
    filters: FilterParams = Depends(get_filter_params),
    store: TransactionStore = Depends(get_store),
):
    """
    Most frequent decline codes among declined transactions.

    Returns:
        Up to the configured number of ranked codes with their top processors
    """
    start_time = time.time()
    filtered = apply_filters(store.get_transactions(), filters)
    items = aggregate_decline_codes(
        filtered,
        limit=settings.top_decline_codes,
        processors_per_code=settings.top_processors_per_code,
    )

    _complete(request, "decline_codes", filters, len(filtered), start_time)
    return [DeclineCodeItemSchema(**asdict(item)) for item in items]


@router.get("/filter-options", response_model=FilterOptionsResponse)
def get_filter_options(request: Request, store: TransactionStore = Depends(get_store)):
    """
    Values the filter panel can offer.

    Returns:
        Closed categorical domains plus the dataset's first and last day
    """
    start_time = time.time()
    transactions = store.get_transactions()

    date_range = None
    if transactions:
        days = [utc_date(t.timestamp) for t in transactions]
        date_range = DateRangeSchema(min=min(days), max=max(days))

    _complete(request, "filter_options", FilterParams(), len(transactions), start_time)
    return FilterOptionsResponse(
        processors=catalog.PROCESSORS,
        payment_methods=catalog.PAYMENT_METHODS,
        countries=catalog.COUNTRIES,
        decline_categories=catalog.DECLINE_CATEGORIES,
        decline_codes=catalog.DECLINE_CODES,
        date_range=date_range,
    )
