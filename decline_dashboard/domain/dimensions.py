"""Grouping dimensions and their field accessors"""

from enum import Enum
from typing import Callable, Dict, FrozenSet, Union

from decline_dashboard.domain.exceptions import UnsupportedDimensionError
from decline_dashboard.domain.models import Transaction

MISSING_KEY = "none"


class Dimension(str, Enum):
    """Categorical transaction fields a dashboard view can group by"""

    PROCESSOR = "processor"
    PAYMENT_METHOD = "paymentMethod"
    COUNTRY = "country"
    DECLINE_CODE = "declineCode"
    DECLINE_CATEGORY = "declineCategory"


class TimeSeriesDimension(str, Enum):
    """Subset of dimensions accepted for splitting the time series"""

    PROCESSOR = "processor"
    PAYMENT_METHOD = "paymentMethod"
    COUNTRY = "country"


ACCESSORS: Dict[Dimension, Callable[[Transaction], str]] = {
    Dimension.PROCESSOR: lambda t: t.processor,
    Dimension.PAYMENT_METHOD: lambda t: t.payment_method,
    Dimension.COUNTRY: lambda t: t.country,
    Dimension.DECLINE_CODE: lambda t: t.decline_code or MISSING_KEY,
    Dimension.DECLINE_CATEGORY: lambda t: t.decline_category or MISSING_KEY,
}

ALL_DIMENSIONS: FrozenSet[Dimension] = frozenset(Dimension)
TIME_SERIES_DIMENSIONS: FrozenSet[Dimension] = frozenset(
    Dimension(d.value) for d in TimeSeriesDimension
)


def resolve_dimension(
    value: Union[str, Enum],
    allowed: FrozenSet[Dimension] = ALL_DIMENSIONS,
) -> Dimension:
    """
    Map a dimension name (or enum member) to a Dimension.

    Raises:
        UnsupportedDimensionError: Unknown name, or a name outside `allowed`
    """
    raw = value.value if isinstance(value, Enum) else value
    try:
        dimension = Dimension(raw)
    except ValueError as e:
        raise UnsupportedDimensionError(f"Unknown dimension: {raw!r}") from e

    if dimension not in allowed:
        raise UnsupportedDimensionError(f"Dimension {raw!r} is not supported here")
    return dimension


def dimension_key(transaction: Transaction, dimension: Dimension) -> str:
    """Extract the grouping key for a transaction"""
    return ACCESSORS[dimension](transaction)
