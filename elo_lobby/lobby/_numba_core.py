"""
Numba-accelerated core functions for matchmaking searches.

Levels are ratings bucketed into bands of `level_width` points, rounded
half away from zero (450 -> 5, not 4).
"""

import numpy as np
from numba import njit


@njit(cache=True)
def rating_level(rating: float, level_width: float) -> float:
    """Level of a single rating."""
    x = rating / level_width
    if x >= 0.0:
        return np.floor(x + 0.5)
    return -np.floor(-x + 0.5)


@njit(cache=True)
def rating_levels(ratings: np.ndarray, level_width: float) -> np.ndarray:
    """Level of every rating in the array."""
    n = len(ratings)
    out = np.empty(n, dtype=np.float64)
    for i in range(n):
        out[i] = rating_level(ratings[i], level_width)
    return out


@njit(cache=True)
def eligible_mask(levels: np.ndarray, min_level: float, max_level: float) -> np.ndarray:
    """Boolean mask of levels inside [min_level, max_level]."""
    n = len(levels)
    out = np.empty(n, dtype=np.bool_)
    for i in range(n):
        out[i] = min_level <= levels[i] <= max_level
    return out
