"""Random sampling helpers for synthetic data"""

import random
from typing import Sequence, Tuple, TypeVar

T = TypeVar("T")


def weighted_choice(items: Sequence[Tuple[T, float]], rng: random.Random) -> T:
    """
    Pick one value from (value, weight) pairs proportionally to its weight.

    Weights need not sum to 1. Floating-point residue after the walk falls
    back to the last item.

    Raises:
        ValueError: Empty item list or non-positive total weight
    """
    if not items:
        raise ValueError("weighted_choice requires at least one item")

    total = sum(weight for _, weight in items)
    if total <= 0:
        raise ValueError("weighted_choice requires a positive total weight")

    remaining = rng.random() * total
    for value, weight in items:
        remaining -= weight
        if remaining <= 0:
            return value

    return items[-1][0]


def uniform_between(rng: random.Random, low: float, high: float) -> float:
    """Uniform float in [low, high)"""
    return rng.random() * (high - low) + low
