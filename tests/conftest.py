"""Pytest fixtures for testing"""

import pytest
from datetime import datetime, timedelta, timezone
from typing import Callable, List
from fastapi.testclient import TestClient
from decline_dashboard.api.main import create_app
from decline_dashboard.domain.catalog import DECLINE_CODE_CATEGORY
from decline_dashboard.domain.models import Transaction
from decline_dashboard.infrastructure.data.store import TransactionStore

BASE_TIME = datetime(2025, 1, 1, 12, 0, tzinfo=timezone.utc)


def build_transaction(
    id: str = "txn_000001",
    timestamp: datetime = BASE_TIME,
    status: str = "approved",
    payment_method: str = "credit_card",
    processor: str = "AcquireMax",
    country: str = "MX",
    currency: str = "MXN",
    amount: float = 100.0,
    decline_code: str | None = None,
    card_bin: str | None = "412345",
) -> Transaction:
    """Transaction with sensible defaults; decline category follows the code"""
    return Transaction(
        id=id,
        timestamp=timestamp,
        status=status,
        payment_method=payment_method,
        processor=processor,
        country=country,
        currency=currency,
        amount=amount,
        decline_code=decline_code,
        decline_category=DECLINE_CODE_CATEGORY.get(decline_code) if decline_code else None,
        card_bin=card_bin,
    )


@pytest.fixture
def make_transaction() -> Callable[..., Transaction]:
    """Factory for hand-built transactions"""
    return build_transaction


@pytest.fixture
def sample_transactions() -> List[Transaction]:
    """Three days of mixed activity across processors, countries and methods"""
    return [
        build_transaction("txn_000001", BASE_TIME, "approved", "credit_card", "AcquireMax", "MX", "MXN", 120.50),
        build_transaction("txn_000002", BASE_TIME + timedelta(hours=1), "declined", "credit_card", "LatamPay", "MX", "MXN", 80.00,
                          decline_code="insufficient_funds", card_bin="400001"),
        build_transaction("txn_000003", BASE_TIME + timedelta(hours=2), "approved", "pix", "Kushki", "BR", "BRL", 45.25,
                          card_bin=None),
        build_transaction("txn_000004", BASE_TIME + timedelta(days=1), "declined", "oxxo", "LatamPay", "MX", "MXN", 300.00,
                          decline_code="do_not_honor", card_bin=None),
        build_transaction("txn_000005", BASE_TIME + timedelta(days=1, hours=3), "declined", "debit_card", "dLocal", "CO", "COP", 19.99,
                          decline_code="insufficient_funds", card_bin="400002"),
        build_transaction("txn_000006", BASE_TIME + timedelta(days=2), "approved", "pse", "AcquireMax", "CO", "COP", 250.00,
                          card_bin=None),
        build_transaction("txn_000007", BASE_TIME + timedelta(days=2, hours=5), "declined", "debit_card", "LatamPay", "AR", "ARS", 60.00,
                          decline_code="issuer_unavailable", card_bin="498765"),
    ]


@pytest.fixture
def store(sample_transactions: List[Transaction]) -> TransactionStore:
    """Store whose dataset is the fixed sample"""
    return TransactionStore(factory=lambda: sample_transactions)


@pytest.fixture
def client(store: TransactionStore) -> TestClient:
    """Create FastAPI test client backed by the sample store"""
    app = create_app(store=store)
    return TestClient(app)
