"""Calculate the chance of an opening hand with exactly one low HP basic."""

from __future__ import annotations

import logging
from math import comb, isnan, nan

logger = logging.getLogger(__name__)

DECK_SIZE = 60
DRAW_SIZE = 7
CONDITION_DRAW_SIZE = DRAW_SIZE - 1


def binomial(n: int, k: int) -> int:
    """Get the number of ways to choose `k` items out of `n`, zero when that is impossible.

    Args:
    ----
    n (int): Size of the pool
    k (int): Number of items chosen
    """
    if n < 0 or k < 0 or k > n:
        return 0
    return comb(n, k)


def is_missing(value: int | float | None) -> bool:
    """Check if a value is the not-a-number sentinel."""
    return value is None or (isinstance(value, float) and isnan(value))


def compute_probability(target_count: int | None, other_count: int | None) -> float:
    """Get the chance that the only basic in an opening hand is a low HP one.

    The hand is conditioned on holding at least one basic, so the result is
    `P(exactly 1 low HP basic and no high HP basic | at least 1 basic)`.

    Args:
    ----
    target_count (int): The number of low HP basics in the deck
    other_count (int): The number of cards that aren't basics
    """
    if is_missing(target_count) or is_missing(other_count):
        return nan
    if target_count < 1 or other_count < CONDITION_DRAW_SIZE:
        return 0.0

    numerator = binomial(target_count, 1) * binomial(other_count, CONDITION_DRAW_SIZE)
    denominator = binomial(DECK_SIZE, DRAW_SIZE) - binomial(other_count, DRAW_SIZE)
    if denominator == 0:
        return nan
    return numerator / denominator


def probability_curve(high_count: int, max_low: int | None = None) -> list[float]:
    """Get the probability for every low HP count from 0 up to `max_low`.

    Args:
    ----
    high_count (int): The number of high HP basics in the deck
    max_low (int): The largest low HP count to include, defaults to filling the deck
    """
    if high_count < 0 or high_count > DECK_SIZE:
        return []
    if max_low is None:
        max_low = DECK_SIZE - high_count
    max_low = min(max_low, DECK_SIZE - high_count)

    curve = [
        compute_probability(low, DECK_SIZE - low - high_count) for low in range(max_low + 1)
    ]
    logger.debug("Curve for %s high HP basics: %s points", high_count, len(curve))
    return curve
