"""Domain models - pure Python dataclasses representing business entities"""

from dataclasses import dataclass, field, fields
from datetime import date, datetime
from typing import List, Optional

CARD_METHODS = frozenset({"credit_card", "debit_card"})


@dataclass(frozen=True)
class Transaction:
    """Single payment attempt routed through a processor"""

    id: str
    timestamp: datetime  # UTC, timezone-aware
    status: str  # "approved" or "declined"
    payment_method: str
    processor: str
    country: str
    currency: str
    amount: float
    decline_code: Optional[str] = None
    decline_category: Optional[str] = None
    card_bin: Optional[str] = None

    @property
    def is_declined(self) -> bool:
        return self.status == "declined"

    @property
    def is_card(self) -> bool:
        return self.payment_method in CARD_METHODS


@dataclass(frozen=True)
class FilterParams:
    """Optional equality/range constraints parsed from a dashboard request"""

    payment_method: Optional[str] = None
    processor: Optional[str] = None
    country: Optional[str] = None
    decline_category: Optional[str] = None
    decline_code: Optional[str] = None
    card_bin: Optional[str] = None
    date_from: Optional[str] = None
    date_to: Optional[str] = None

    def is_empty(self) -> bool:
        return not any(getattr(self, f.name) for f in fields(self))


@dataclass
class OverviewMetrics:
    """Headline approval/decline numbers for the metric cards"""

    total: int
    approved: int
    declined: int
    approval_rate: float
    decline_rate: float
    total_amount: float


@dataclass
class BreakdownItem:
    """Counts and rates for one value of a breakdown dimension"""

    label: str
    total: int
    approved: int
    declined: int
    decline_rate: float
    approval_rate: float


@dataclass
class TimeSeriesPoint:
    """Activity for a single calendar day"""

    date: date
    total: int
    declined: int
    decline_rate: float


@dataclass
class TimeSeriesGroup:
    """Daily series for one value of the grouping dimension"""

    group_key: str
    series: List[TimeSeriesPoint] = field(default_factory=list)


@dataclass
class DeclineCodeItem:
    """Ranked decline code with its most affected processors"""

    rank: int
    code: str
    category: str
    count: int
    percent_of_declines: float
    top_processors: List[str] = field(default_factory=list)
