"""In-memory transaction store, materialized once per process"""

import logging
import random
import threading
from typing import Callable, Optional, Sequence, Tuple

from decline_dashboard.config import settings
from decline_dashboard.domain.models import Transaction
from decline_dashboard.infrastructure.data.generator import generate_transactions
from decline_dashboard.infrastructure.observability.metrics import (
    dataset_generation_histogram,
    dataset_size_gauge,
)

logger = logging.getLogger(__name__)

TransactionFactory = Callable[[], Sequence[Transaction]]


def default_factory() -> Sequence[Transaction]:
    """Generate the dataset using the configured window and seed"""
    rng = random.Random(settings.generator_seed)
    return generate_transactions(
        rng=rng,
        start=settings.generator_start_date,
        days=settings.generator_days,
    )


class TransactionStore:
    """
    Lazily generated, read-only transaction collection.

    The first `get_transactions()` call runs the factory under a lock; every
    later call returns the same tuple without locking. Concurrent first
    callers block until the single generation finishes, so readers never see
    a partially built collection.
    """

    def __init__(self, factory: Optional[TransactionFactory] = None):
        self._factory = factory or default_factory
        self._transactions: Optional[Tuple[Transaction, ...]] = None
        self._lock = threading.Lock()

    @property
    def is_loaded(self) -> bool:
        return self._transactions is not None

    def get_transactions(self) -> Tuple[Transaction, ...]:
        """Return the memoized collection, generating it on first access"""
        transactions = self._transactions
        if transactions is not None:
            return transactions

        with self._lock:
            if self._transactions is None:
                with dataset_generation_histogram.time():
                    generated = tuple(self._factory())
                dataset_size_gauge.set(len(generated))
                logger.info(
                    "Transaction store initialized",
                    extra={"step": "store_loaded", "transaction_count": len(generated)},
                )
                self._transactions = generated
            return self._transactions

    def reset(self) -> None:
        """Drop the memoized collection so the next read regenerates it"""
        with self._lock:
            self._transactions = None
