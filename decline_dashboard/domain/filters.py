"""Filter engine - narrows the transaction set to what a dashboard view asks for"""

import logging
from datetime import date, datetime
from typing import Iterable, List, Optional

from decline_dashboard.domain.models import FilterParams, Transaction
from decline_dashboard.utils.date_utils import end_of_day, ensure_utc, start_of_day

logger = logging.getLogger(__name__)

# FilterParams field -> Transaction attribute, all exact-match
EQUALITY_FIELDS = (
    "payment_method",
    "processor",
    "country",
    "decline_category",
    "decline_code",
    "card_bin",
)


def parse_date_bound(value: str) -> Optional[datetime]:
    """
    Parse an ISO date or datetime filter value into a UTC instant.

    Bare dates become UTC midnight. Returns None when the value cannot be
    parsed or its UTC instant falls outside the representable calendar
    (e.g. 0001-01-01T00:00:00+01:00), which callers treat as "no bound".
    """
    text = value.strip()
    try:
        if len(text) == 10:
            return start_of_day(date.fromisoformat(text))
        return ensure_utc(datetime.fromisoformat(text.replace("Z", "+00:00")))
    except (ValueError, OverflowError):
        return None


def _resolve_bounds(params: FilterParams) -> tuple[Optional[datetime], Optional[datetime]]:
    lower = None
    upper = None

    if params.date_from:
        lower = parse_date_bound(params.date_from)
        if lower is None:
            logger.warning(
                "Ignoring malformed date filter",
                extra={"field": "dateFrom", "value": params.date_from},
            )

    if params.date_to:
        parsed = parse_date_bound(params.date_to)
        if parsed is None:
            logger.warning(
                "Ignoring malformed date filter",
                extra={"field": "dateTo", "value": params.date_to},
            )
        else:
            upper = end_of_day(parsed.date())

    return lower, upper


def apply_filters(transactions: Iterable[Transaction], params: FilterParams) -> List[Transaction]:
    """
    Keep transactions that satisfy every constraint set in `params`.

    Rules:
    - Categorical fields: exact string equality; unset or empty = no constraint
    - dateFrom: timestamp >= the bound (bare date = start of that UTC day)
    - dateTo: timestamp <= 23:59:59.999 UTC of the bound's day
    - A malformed date leaves that side of the range open

    Input order is preserved.
    """
    if params.is_empty():
        return list(transactions)

    constraints = [
        (name, getattr(params, name)) for name in EQUALITY_FIELDS if getattr(params, name)
    ]
    lower, upper = _resolve_bounds(params)

    result = []
    for txn in transactions:
        if any(getattr(txn, name) != expected for name, expected in constraints):
            continue
        if lower is not None and txn.timestamp < lower:
            continue
        if upper is not None and txn.timestamp > upper:
            continue
        result.append(txn)

    return result
