"""
Matchmaking pool - level-band opponent search over waiting players.

Ratings are bucketed into levels of `level_width` points. An entry at level
L with range R accepts opponents whose level lies in [L, L + R]. The band
only widens upward: an opponent one level below L is never eligible, however
close its raw rating.
"""

import logging
import threading
from dataclasses import dataclass
from typing import Iterator, List, Optional, Tuple

import numpy as np
import polars as pl

from ..base import RatedPlayer
from ..errors import InvalidArgumentError
from ._numba_core import eligible_mask, rating_level, rating_levels
from .queued_player import DEFAULT_RANGE, QueuedPlayer, check_range

logger = logging.getLogger(__name__)


@dataclass
class PoolConfig:
    """Configuration for a matchmaking pool."""

    default_range: int = DEFAULT_RANGE
    level_width: float = 100.0  # Rating points per level


class MatchmakingPool:
    """
    Ordered, append-mostly collection of queued players.

    Adding a player stores a QueuedPlayer snapshot, so later rating changes
    on the source player do not affect matchmaking. Entries are compared by
    identity: two entries with the same name are distinct and can be matched
    against each other.

    All operations on one pool are serialized by a lock; a search always
    scans a consistent view of the entries.

    Parameters:
        default_range: Range used by add_players() and add_player() (default: 100)
        level_width: Rating points per level (default: 100)

    Example:
        >>> from elo_lobby import BlitzPlayer, StandardPlayer
        >>> pool = MatchmakingPool(default_range=1)
        >>> greg, jade = pool.add_players(StandardPlayer("Greg", 400), BlitzPlayer("Jade"))
        >>> pool.find_opponents(greg)
        []
    """

    def __init__(self, default_range: int = DEFAULT_RANGE, level_width: float = 100.0):
        check_range(default_range)
        if level_width <= 0:
            raise InvalidArgumentError(f"level_width must be positive, got {level_width}")
        self.config = PoolConfig(default_range=default_range, level_width=level_width)
        self._entries: List[QueuedPlayer] = []
        self._lock = threading.Lock()

    @property
    def players(self) -> Tuple[QueuedPlayer, ...]:
        """Snapshot of the queued entries in insertion order."""
        with self._lock:
            return tuple(self._entries)

    def level_of(self, player: RatedPlayer) -> int:
        """Matchmaking level of a player's current rating."""
        return int(rating_level(player.rating, self.config.level_width))

    def add_player(self, player: RatedPlayer, search_range: Optional[int] = None) -> QueuedPlayer:
        """
        Snapshot a player into the pool.

        Args:
            player: Player to queue
            search_range: Levels above its own the entry accepts
                (default: config.default_range)

        Returns:
            The new QueuedPlayer entry

        Raises:
            InvalidArgumentError: If search_range is negative (pool unchanged)
        """
        if search_range is None:
            search_range = self.config.default_range
        entry = QueuedPlayer(player, search_range)
        with self._lock:
            self._entries.append(entry)
        logger.debug("Queued %r", entry)
        return entry

    def add_players(self, *players: RatedPlayer) -> List[QueuedPlayer]:
        """Queue several players with the default range."""
        entries = [QueuedPlayer(p, self.config.default_range) for p in players]
        with self._lock:
            self._entries.extend(entries)
        logger.debug("Queued %d players", len(entries))
        return entries

    def remove_player(self, entry: QueuedPlayer) -> None:
        """
        Remove one entry, matched by identity.

        Raises:
            InvalidArgumentError: If the entry is not in the pool
        """
        with self._lock:
            for i, queued in enumerate(self._entries):
                if queued is entry:
                    del self._entries[i]
                    break
            else:
                raise InvalidArgumentError(f"{entry!r} is not in the pool")
        logger.debug("Removed %r", entry)

    def find_opponents(self, player: QueuedPlayer) -> List[QueuedPlayer]:
        """
        Find every entry eligible to play against `player`.

        The queried entry does not need to be in the pool; if it is, it is
        never returned.

        Args:
            player: Entry to find opponents for

        Returns:
            Eligible entries in insertion order (possibly empty)
        """
        min_level = rating_level(player.rating, self.config.level_width)
        max_level = min_level + player.range

        with self._lock:
            entries = list(self._entries)

        ratings = np.fromiter((e.rating for e in entries), dtype=np.float64, count=len(entries))
        mask = eligible_mask(
            rating_levels(ratings, self.config.level_width),
            min_level,
            float(max_level),
        )
        opponents = [e for e, ok in zip(entries, mask) if ok and e is not player]

        logger.debug(
            "%s: levels [%d, %d], %d of %d entries eligible",
            player.name, int(min_level), int(max_level), len(opponents), len(entries),
        )
        return opponents

    def to_dataframe(self) -> pl.DataFrame:
        """Convert the pool to a Polars DataFrame (name, rating, level, range)."""
        entries = self.players
        ratings = np.fromiter((e.rating for e in entries), dtype=np.float64, count=len(entries))
        levels = rating_levels(ratings, self.config.level_width).astype(np.int64)
        return pl.DataFrame(
            {
                "name": [e.name for e in entries],
                "rating": ratings,
                "level": levels,
                "range": np.array([e.range for e in entries], dtype=np.int64),
            },
            schema={"name": pl.Utf8, "rating": pl.Float64, "level": pl.Int64, "range": pl.Int64},
        )

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __iter__(self) -> Iterator[QueuedPlayer]:
        return iter(self.players)

    def __repr__(self) -> str:
        return (
            f"MatchmakingPool(players={len(self)}, "
            f"default_range={self.config.default_range})"
        )
