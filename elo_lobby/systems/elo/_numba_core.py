"""
Numba-accelerated core functions for the Elo update rule.

All functions are compiled with @njit(cache=True). fastmath is left off so
that equal ratings give an expected score of exactly 0.5.
"""

import numpy as np
from numba import njit


@njit(cache=True)
def expected_score(rating_a: float, rating_b: float, scale: float) -> float:
    """Expected score for player A against player B (logistic, base 10)."""
    return 1.0 / (1.0 + 10.0 ** ((rating_b - rating_a) / scale))


@njit(cache=True)
def rating_delta(
    rating: float,
    opponent_rating: float,
    result: float,
    k_factor: float,
    scale: float,
) -> float:
    """Rating change for a single result: K * (result - expected)."""
    return k_factor * (result - expected_score(rating, opponent_rating, scale))


@njit(cache=True)
def expected_scores_against_field(
    rating: float,
    field_ratings: np.ndarray,
    scale: float,
) -> np.ndarray:
    """Expected score of one rating against every rating in a field."""
    n = len(field_ratings)
    out = np.empty(n, dtype=np.float64)
    for i in range(n):
        out[i] = expected_score(rating, field_ratings[i], scale)
    return out
