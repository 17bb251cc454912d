"""Dependency injection for FastAPI endpoints"""

from typing import Optional
from fastapi import Query, Request

from decline_dashboard.domain.models import FilterParams
from decline_dashboard.infrastructure.data.store import TransactionStore


def get_request_id(request: Request) -> str:
    """Extract request ID from request state"""
    return getattr(request.state, "request_id", "unknown")


def get_store(request: Request) -> TransactionStore:
    """Provide the application's transaction store"""
    return request.app.state.store


def get_filter_params(
    payment_method: Optional[str] = Query(None, alias="paymentMethod"),
    processor: Optional[str] = Query(None),
    country: Optional[str] = Query(None),
    decline_category: Optional[str] = Query(None, alias="declineCategory"),
    decline_code: Optional[str] = Query(None, alias="declineCode"),
    card_bin: Optional[str] = Query(None, alias="cardBin"),
    date_from: Optional[str] = Query(None, alias="dateFrom", description="ISO date, inclusive"),
    date_to: Optional[str] = Query(None, alias="dateTo", description="ISO date, inclusive through end of day"),
) -> FilterParams:
    """Parse every dashboard filter from the query string"""
    return FilterParams(
        payment_method=payment_method,
        processor=processor,
        country=country,
        decline_category=decline_category,
        decline_code=decline_code,
        card_bin=card_bin,
        date_from=date_from,
        date_to=date_to,
    )


def get_breakdown_filter_params(
    payment_method: Optional[str] = Query(None, alias="paymentMethod"),
    processor: Optional[str] = Query(None),
    country: Optional[str] = Query(None),
    decline_category: Optional[str] = Query(None, alias="declineCategory"),
    date_from: Optional[str] = Query(None, alias="dateFrom", description="ISO date, inclusive"),
    date_to: Optional[str] = Query(None, alias="dateTo", description="ISO date, inclusive through end of day"),
) -> FilterParams:
    """Parse the filters the breakdown view accepts (no decline code or BIN)"""
    return FilterParams(
        payment_method=payment_method,
        processor=processor,
        country=country,
        decline_category=decline_category,
        date_from=date_from,
        date_to=date_to,
    )
