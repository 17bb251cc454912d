"""Aggregation engine - reducers behind each dashboard panel"""

from collections import Counter
from typing import Dict, List, Optional, Sequence, Union

from decline_dashboard.domain.dimensions import (
    ALL_DIMENSIONS,
    TIME_SERIES_DIMENSIONS,
    Dimension,
    dimension_key,
    resolve_dimension,
)
from decline_dashboard.domain.models import (
    BreakdownItem,
    DeclineCodeItem,
    OverviewMetrics,
    TimeSeriesGroup,
    TimeSeriesPoint,
    Transaction,
)
from decline_dashboard.utils.date_utils import generate_date_range, utc_date
from decline_dashboard.utils.rounding import round2, round_share

ALL_GROUP_KEY = "all"
UNKNOWN_KEY = "unknown"

TOP_DECLINE_CODES = 10
TOP_PROCESSORS_PER_CODE = 3


def _percent(part: int, whole: int) -> float:
    """part/whole as a percentage, 0 when whole is 0 (unrounded)"""
    return part / whole * 100 if whole > 0 else 0.0


def compute_metrics(transactions: Sequence[Transaction]) -> OverviewMetrics:
    """
    Headline counts, rates and volume.

    Rates are percentages rounded to 2 decimals; an empty input reports
    0 for both rates.
    """
    total = len(transactions)
    approved = sum(1 for t in transactions if t.status == "approved")
    declined = total - approved
    total_amount = sum(t.amount for t in transactions)

    return OverviewMetrics(
        total=total,
        approved=approved,
        declined=declined,
        approval_rate=round2(_percent(approved, total)),
        decline_rate=round2(_percent(declined, total)),
        total_amount=round2(total_amount),
    )


def aggregate_breakdown(
    transactions: Sequence[Transaction],
    dimension: Union[Dimension, str],
) -> List[BreakdownItem]:
    """
    Group transactions by a categorical dimension.

    approvalRate is 100 - declineRate (before rounding), not approved/total,
    so the two always complement each other. Rows are sorted by total
    descending; ties keep the order in which the label was first seen.

    Raises:
        UnsupportedDimensionError: `dimension` is not a known dimension
    """
    dimension = resolve_dimension(dimension, ALL_DIMENSIONS)

    counts: Dict[str, List[int]] = {}
    for txn in transactions:
        bucket = counts.setdefault(dimension_key(txn, dimension), [0, 0])
        if txn.status == "approved":
            bucket[0] += 1
        else:
            bucket[1] += 1

    items = []
    for label, (approved, declined) in counts.items():
        total = approved + declined
        decline_rate = _percent(declined, total)
        items.append(
            BreakdownItem(
                label=label,
                total=total,
                approved=approved,
                declined=declined,
                decline_rate=round2(decline_rate),
                approval_rate=round2(100 - decline_rate),
            )
        )

    # sorted() is stable, so equal totals stay in first-seen order
    return sorted(items, key=lambda item: -item.total)


def aggregate_time_series(
    transactions: Sequence[Transaction],
    group_by: Optional[Union[Dimension, str]] = None,
) -> List[TimeSeriesGroup]:
    """
    Daily totals and decline rates, optionally split by a dimension.

    Every group shares the same date axis: each UTC calendar day from the
    earliest to the latest transaction in the input, with zero-filled days
    where a group had no activity. Without `group_by` a single "all" group
    is returned. Empty input returns an empty list.

    Raises:
        UnsupportedDimensionError: `group_by` is not processor, paymentMethod or country
    """
    if not transactions:
        return []

    dimension = resolve_dimension(group_by, TIME_SERIES_DIMENSIONS) if group_by else None

    days = [utc_date(t.timestamp) for t in transactions]
    axis = generate_date_range(min(days), max(days))

    # group key -> day -> [total, declined]; dict order = first-seen group order
    grouped: Dict[str, Dict] = {}
    for txn, day in zip(transactions, days):
        key = dimension_key(txn, dimension) if dimension else ALL_GROUP_KEY
        per_day = grouped.setdefault(key, {})
        bucket = per_day.setdefault(day, [0, 0])
        bucket[0] += 1
        if txn.status == "declined":
            bucket[1] += 1

    result = []
    for key, per_day in grouped.items():
        series = []
        for day in axis:
            total, declined = per_day.get(day, (0, 0))
            series.append(
                TimeSeriesPoint(
                    date=day,
                    total=total,
                    declined=declined,
                    decline_rate=round2(_percent(declined, total)),
                )
            )
        result.append(TimeSeriesGroup(group_key=key, series=series))

    return result


def aggregate_decline_codes(
    transactions: Sequence[Transaction],
    limit: int = TOP_DECLINE_CODES,
    processors_per_code: int = TOP_PROCESSORS_PER_CODE,
) -> List[DeclineCodeItem]:
    """
    Rank decline codes by frequency among declined transactions.

    Each code carries its share of all declines (2 decimals) and the
    processors that produced it most often. Only the top `limit` codes are
    returned, ranked 1..n; ties keep first-seen order.
    """
    declined = [t for t in transactions if t.status == "declined"]
    total_declined = len(declined)

    categories: Dict[str, str] = {}
    counts: Counter = Counter()
    processors: Dict[str, Counter] = {}

    for txn in declined:
        code = txn.decline_code or UNKNOWN_KEY
        categories.setdefault(code, txn.decline_category or UNKNOWN_KEY)
        counts[code] += 1
        processors.setdefault(code, Counter())[txn.processor] += 1

    ranked_codes = sorted(counts, key=lambda code: -counts[code])[:limit]

    items = []
    for rank, code in enumerate(ranked_codes, start=1):
        # Counter.most_common keeps insertion order among equal counts
        top_processors = [name for name, _ in processors[code].most_common(processors_per_code)]
        items.append(
            DeclineCodeItem(
                rank=rank,
                code=code,
                category=categories[code],
                count=counts[code],
                percent_of_declines=round_share(counts[code], total_declined),
                top_processors=top_processors,
            )
        )

    return items
