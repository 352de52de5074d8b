"""Abstract base class for rated players."""

from abc import ABC, abstractmethod
from typing import Iterable

import polars as pl


DEFAULT_RATING = 400.0


class RatedPlayer(ABC):
    """
    Abstract base class for every player that carries a rating.

    Subclasses must implement:
    - rating_change(): Rating delta for a result against a given rating
    - update_rating_against(): Apply a match result in place

    The base class provides:
    - name / rating read access
    - clamping of negative starting ratings to zero

    Ratings are only clamped at construction. An update that drives the
    rating below zero is applied as is.
    """

    def __init__(self, name: str, rating: float = DEFAULT_RATING):
        """
        Initialize a rated player.

        Args:
            name: Display name (immutable)
            rating: Starting rating; negative values are clamped to 0.0
        """
        self._name = name
        self._rating = max(0.0, float(rating))

    @property
    def name(self) -> str:
        """Player name."""
        return self._name

    @property
    def rating(self) -> float:
        """Current rating."""
        return self._rating

    def get_name(self) -> str:
        return self._name

    def get_rating(self) -> float:
        return self._rating

    def _adjust_rating(self, delta: float) -> None:
        self._rating += delta

    @abstractmethod
    def rating_change(self, opponent_rating: float, result: float) -> float:
        """
        Compute the rating delta for a result against an opponent rating.

        Args:
            opponent_rating: Opponent's rating before the match
            result: 1.0 = win, 0.0 = loss, 0.5 = draw

        Returns:
            Delta to add to this player's rating
        """
        pass

    @abstractmethod
    def update_rating_against(self, opponent: "RatedPlayer", result: float) -> None:
        """
        Update this player's rating in place after a match.

        The opponent's rating is read at call time, so when both sides are
        updated one after the other the second call sees the first one's
        change. Use record_match() to update both from pre-match ratings.

        Args:
            opponent: The player this match was played against
            result: 1.0 = win, 0.0 = loss, 0.5 = draw
        """
        pass

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self._name!r}, rating={self._rating:.1f})"


def players_to_dataframe(players: Iterable[RatedPlayer]) -> pl.DataFrame:
    """Convert players to a Polars DataFrame (name, variant, rating)."""
    players = list(players)
    return pl.DataFrame(
        {
            "name": [p.name for p in players],
            "variant": [p.__class__.__name__ for p in players],
            "rating": [p.rating for p in players],
        },
        schema={"name": pl.Utf8, "variant": pl.Utf8, "rating": pl.Float64},
    )
