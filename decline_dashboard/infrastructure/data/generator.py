"""Synthetic transaction generator with a processor outage scenario"""

import logging
import random
from datetime import date, timedelta
from typing import List, Optional

from decline_dashboard.domain.catalog import (
    BAD_BINS,
    BROKEN_PROCESSOR,
    COUNTRIES,
    COUNTRY_CURRENCY,
    COUNTRY_METHODS,
    DECLINE_CODE_CATEGORY,
    DECLINE_CODES_CRISIS,
    DECLINE_CODES_NORMAL,
    PROCESSOR_BASE_DECLINE,
    PROCESSOR_VOLUME,
)
from decline_dashboard.domain.models import CARD_METHODS, Transaction
from decline_dashboard.utils.date_utils import start_of_day
from decline_dashboard.utils.random_utils import uniform_between, weighted_choice
from decline_dashboard.utils.rounding import round2

logger = logging.getLogger(__name__)

GENERATION_START = date(2025, 1, 1)
GENERATION_DAYS = 21

MIN_DAILY_TRANSACTIONS = 25
MAX_DAILY_TRANSACTIONS = 35

# Day indexes (0-based) shaping the non-broken processors' decline rate
DEGRADATION_START_DAY = 11
CRISIS_START_DAY = 14
DEGRADATION_STEP = 0.10
CRISIS_MULTIPLIER = 1.20

BAD_BIN_PROBABILITY = 0.15
BAD_BIN_MULTIPLIER = 1.20
MAX_DECLINE_PROBABILITY = 0.99

MIN_AMOUNT = 10.0
MAX_AMOUNT = 500.0


def decline_rate(day: int, processor: str) -> float:
    """
    Decline probability for a processor on a given day of the window.

    Timeline for every processor except the broken one:
    - days 0-10:  base rate
    - days 11-13: base * (1 + 0.10 * (day - 10)), a linear ramp
    - days 14+:   base * 1.20, the crisis plateau

    The broken processor stays at its (already high) base rate throughout.
    """
    base = PROCESSOR_BASE_DECLINE[processor]
    if processor == BROKEN_PROCESSOR:
        return base

    if day < DEGRADATION_START_DAY:
        return base
    if day < CRISIS_START_DAY:
        return base * (1 + DEGRADATION_STEP * (day - (DEGRADATION_START_DAY - 1)))
    return base * CRISIS_MULTIPLIER


def _card_bin(rng: random.Random) -> str:
    if rng.random() < BAD_BIN_PROBABILITY:
        return rng.choice(BAD_BINS)
    return f"4{int(10000 + rng.random() * 89999)}"


def _generate_transaction(
    sequence: int,
    day: int,
    window_start: date,
    rng: random.Random,
) -> Transaction:
    """Build one transaction for the given day of the window"""
    # Truncated ranges (hour < 23, minute/second < 59) are the historical shape
    hour = int(uniform_between(rng, 0, 23))
    minute = int(uniform_between(rng, 0, 59))
    second = int(uniform_between(rng, 0, 59))
    timestamp = start_of_day(window_start + timedelta(days=day)).replace(
        hour=hour, minute=minute, second=second
    )

    processor = weighted_choice(PROCESSOR_VOLUME, rng)
    country = rng.choice(COUNTRIES)
    payment_method = rng.choice(COUNTRY_METHODS[country])

    card_bin = _card_bin(rng) if payment_method in CARD_METHODS else None

    probability = decline_rate(day, processor)
    if card_bin in BAD_BINS:
        probability = min(MAX_DECLINE_PROBABILITY, probability * BAD_BIN_MULTIPLIER)

    status = "declined" if rng.random() < probability else "approved"

    decline_code = None
    decline_category = None
    if status == "declined":
        table = DECLINE_CODES_CRISIS if day >= CRISIS_START_DAY else DECLINE_CODES_NORMAL
        decline_code = weighted_choice(table, rng)
        decline_category = DECLINE_CODE_CATEGORY[decline_code]

    amount = round2(uniform_between(rng, MIN_AMOUNT, MAX_AMOUNT))

    return Transaction(
        id=f"txn_{sequence:06d}",
        timestamp=timestamp,
        status=status,
        payment_method=payment_method,
        processor=processor,
        country=country,
        currency=COUNTRY_CURRENCY[country],
        amount=amount,
        decline_code=decline_code,
        decline_category=decline_category,
        card_bin=card_bin,
    )


def generate_transactions(
    rng: Optional[random.Random] = None,
    start: date = GENERATION_START,
    days: int = GENERATION_DAYS,
) -> List[Transaction]:
    """
    Generate the synthetic transaction history for the dashboard.

    Covers `days` consecutive UTC days from `start`, 25-34 transactions per
    day. Content is random; pass a seeded `random.Random` to reproduce it.

    Returns:
        Transactions sorted ascending by timestamp
    """
    rng = rng or random.Random()
    transactions: List[Transaction] = []

    for day in range(days):
        per_day = int(uniform_between(rng, MIN_DAILY_TRANSACTIONS, MAX_DAILY_TRANSACTIONS))
        for _ in range(per_day):
            transactions.append(_generate_transaction(len(transactions) + 1, day, start, rng))

    transactions.sort(key=lambda t: t.timestamp)

    logger.info(
        "Generated synthetic transactions",
        extra={
            "step": "dataset_generated",
            "transaction_count": len(transactions),
            "window_start": start.isoformat(),
            "window_days": days,
        },
    )
    return transactions
