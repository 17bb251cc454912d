"""Unit tests for the synthetic transaction generator"""

import random
import pytest
from collections import Counter
from datetime import date, timedelta
from decline_dashboard.domain.catalog import (
    BAD_BINS,
    COUNTRIES,
    COUNTRY_CURRENCY,
    COUNTRY_METHODS,
    DECLINE_CODE_CATEGORY,
    PROCESSORS,
)
from decline_dashboard.infrastructure.data.generator import (
    GENERATION_DAYS,
    GENERATION_START,
    decline_rate,
    generate_transactions,
)
from decline_dashboard.utils.date_utils import utc_date


@pytest.fixture(scope="module")
def generated():
    return generate_transactions(rng=random.Random(42))


def test_generate_transactions_window_and_volume(generated):
    """Test 21 days from the epoch date with 25-34 transactions each"""
    per_day = Counter(utc_date(t.timestamp) for t in generated)
    expected_days = {GENERATION_START + timedelta(days=i) for i in range(GENERATION_DAYS)}

    assert set(per_day) == expected_days
    assert all(25 <= count <= 34 for count in per_day.values())


def test_generate_transactions_sorted_and_unique_ids(generated):
    """Test output is ordered by timestamp and ids are unique"""
    timestamps = [t.timestamp for t in generated]
    assert timestamps == sorted(timestamps)
    assert len({t.id for t in generated}) == len(generated)
    assert all(t.timestamp.utcoffset() == timedelta(0) for t in generated)


def test_generate_transactions_field_invariants(generated):
    """Test categorical domains and presence rules hold for every record"""
    for txn in generated:
        assert txn.processor in PROCESSORS
        assert txn.country in COUNTRIES
        assert txn.payment_method in COUNTRY_METHODS[txn.country]
        assert txn.currency == COUNTRY_CURRENCY[txn.country]
        assert 10 <= txn.amount <= 500
        assert round(txn.amount, 2) == txn.amount

        # decline code and category present together, only when declined
        assert (txn.decline_code is not None) == txn.is_declined
        assert (txn.decline_category is not None) == txn.is_declined
        if txn.is_declined:
            assert DECLINE_CODE_CATEGORY[txn.decline_code] == txn.decline_category

        # BIN present only for card methods
        assert (txn.card_bin is not None) == txn.is_card
        if txn.card_bin is not None:
            assert len(txn.card_bin) == 6
            assert txn.card_bin.isdigit()
            assert txn.card_bin.startswith("4")


def test_generate_transactions_seeded_is_reproducible():
    """Test the same seed yields the same dataset"""
    first = generate_transactions(rng=random.Random(7))
    second = generate_transactions(rng=random.Random(7))
    assert first == second


def test_generate_transactions_custom_window():
    """Test start date and length are configurable"""
    transactions = generate_transactions(rng=random.Random(1), start=date(2024, 6, 1), days=2)
    days = {utc_date(t.timestamp) for t in transactions}

    assert days == {date(2024, 6, 1), date(2024, 6, 2)}
    assert transactions[0].id.startswith("txn_")


def test_decline_rate_timeline():
    """Test base, ramp and crisis phases for healthy processors"""
    assert decline_rate(0, "AcquireMax") == pytest.approx(0.28)
    assert decline_rate(10, "AcquireMax") == pytest.approx(0.28)
    assert decline_rate(11, "AcquireMax") == pytest.approx(0.28 * 1.1)
    assert decline_rate(13, "AcquireMax") == pytest.approx(0.28 * 1.3)
    assert decline_rate(14, "AcquireMax") == pytest.approx(0.28 * 1.2)
    assert decline_rate(20, "dLocal") == pytest.approx(0.38 * 1.2)


def test_decline_rate_broken_processor_constant():
    """Test LatamPay stays at its elevated base rate all window"""
    assert {decline_rate(day, "LatamPay") for day in range(GENERATION_DAYS)} == {0.75}


def test_generate_transactions_statistical_shape():
    """Test the crisis pattern shows up across a few seeded datasets"""
    transactions = []
    for seed in range(5):
        transactions.extend(generate_transactions(rng=random.Random(seed)))

    def rate(subset):
        return sum(t.is_declined for t in subset) / len(subset)

    latampay = [t for t in transactions if t.processor == "LatamPay"]
    acquiremax = [t for t in transactions if t.processor == "AcquireMax"]
    assert rate(latampay) > rate(acquiremax) + 0.2

    crisis_start = GENERATION_START + timedelta(days=14)
    crisis_codes = Counter(
        t.decline_code for t in transactions if t.is_declined and utc_date(t.timestamp) >= crisis_start
    )
    normal_codes = Counter(
        t.decline_code for t in transactions if t.is_declined and utc_date(t.timestamp) < crisis_start
    )
    assert crisis_codes.most_common(1)[0][0] == "issuer_unavailable"
    assert normal_codes.most_common(1)[0][0] == "insufficient_funds"
    assert "issuer_unavailable" not in normal_codes

    bad_bin_share = sum(t.card_bin in BAD_BINS for t in transactions if t.is_card) / sum(
        t.is_card for t in transactions
    )
    assert 0.08 < bad_bin_share < 0.22
