"""
Elo rated players.

One player class parameterised by an EloConfig. The standard and blitz
variants differ only in their config: blitz starts higher and moves four
times faster.
"""

import logging
from dataclasses import dataclass
from typing import Iterable, Optional, Tuple

import numpy as np

from ...base import RatedPlayer
from ...errors import UnsupportedOperationError
from ._numba_core import expected_score, expected_scores_against_field, rating_delta

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EloConfig:
    """Configuration for an Elo update rule."""

    initial_rating: float = 400.0
    k_factor: float = 32.0
    scale: float = 400.0  # Rating difference for 10x expected score


STANDARD_CONFIG = EloConfig(initial_rating=400.0, k_factor=32.0)
BLITZ_CONFIG = EloConfig(initial_rating=1200.0, k_factor=4 * 32.0)


class EloPlayer(RatedPlayer):
    """
    Player rated with the classic Elo update rule.

        expected = 1 / (1 + 10 ** ((opponent - self) / scale))
        rating  += k_factor * (result - expected)

    Parameters:
        name: Player name
        rating: Starting rating (default: config.initial_rating)
        config: Update rule parameters (default: STANDARD_CONFIG)

    Example:
        >>> greg = EloPlayer("Greg", 400.0)
        >>> jade = EloPlayer("Jade", 400.0)
        >>> greg.update_rating_against(jade, 1)
        >>> greg.rating
        416.0
    """

    def __init__(
        self,
        name: str,
        rating: Optional[float] = None,
        config: EloConfig = STANDARD_CONFIG,
    ):
        self.config = config
        super().__init__(name, config.initial_rating if rating is None else rating)

    @property
    def k_factor(self) -> float:
        return self.config.k_factor

    def expected_score_against(self, opponent: RatedPlayer) -> float:
        """Probability that this player beats the opponent."""
        return expected_score(self.rating, opponent.rating, self.config.scale)

    def expected_scores_against(self, opponents: Iterable[RatedPlayer]) -> np.ndarray:
        """Expected score against each opponent, in the given order."""
        field = np.fromiter((p.rating for p in opponents), dtype=np.float64)
        return expected_scores_against_field(self.rating, field, self.config.scale)

    def rating_change(self, opponent_rating: float, result: float) -> float:
        return rating_delta(
            self.rating,
            float(opponent_rating),
            float(result),
            self.config.k_factor,
            self.config.scale,
        )

    def update_rating_against(self, opponent: RatedPlayer, result: float) -> None:
        delta = self.rating_change(opponent.rating, result)
        self._adjust_rating(delta)
        logger.debug(
            "%s vs %s (result=%s): %+.2f -> %.2f",
            self.name, opponent.name, result, delta, self.rating,
        )


class StandardPlayer(EloPlayer):
    """Standard time control player: starts at 400 by default, K = 32."""

    def __init__(self, name: str, rating: float = STANDARD_CONFIG.initial_rating):
        super().__init__(name, rating, config=STANDARD_CONFIG)


class BlitzPlayer(EloPlayer):
    """Blitz player: always starts at 1200, K = 128 for faster movement."""

    def __init__(self, name: str):
        super().__init__(name, config=BLITZ_CONFIG)


def record_match(
    player_a: RatedPlayer,
    player_b: RatedPlayer,
    score: float,
) -> Tuple[float, float]:
    """
    Update both players from a single result.

    Both pre-match ratings are read before either player is changed, so the
    outcome does not depend on update order. Each side uses its own K-factor.

    Args:
        player_a: First player
        player_b: Second player
        score: Score for player_a (1.0 = A wins, 0.0 = B wins, 0.5 = draw)

    Returns:
        (delta_a, delta_b) applied to each player
    """
    for player in (player_a, player_b):
        if not isinstance(player, EloPlayer):
            raise UnsupportedOperationError(
                f"{player.__class__.__name__} cannot take part in a rated match"
            )

    rating_a, rating_b = player_a.rating, player_b.rating
    delta_a = player_a.rating_change(rating_b, score)
    delta_b = player_b.rating_change(rating_a, 1.0 - score)

    player_a._adjust_rating(delta_a)
    player_b._adjust_rating(delta_b)
    logger.debug(
        "Recorded %s vs %s (score=%s): %+.2f / %+.2f",
        player_a.name, player_b.name, score, delta_a, delta_b,
    )
    return delta_a, delta_b
