"""
elo_lobby - Elo rated players and level-band matchmaking.

Players carry a rating updated with the Elo expected-score rule; blitz
players move four times faster than standard ones. A matchmaking pool
snapshots waiting players and finds opponents whose rating level lies in
the band [own level, own level + range].

Quick Start:
    from elo_lobby import StandardPlayer, BlitzPlayer, MatchmakingPool, record_match

    greg = StandardPlayer("Greg", 400)
    jade = BlitzPlayer("Jade")

    # Rate a finished match (both sides from pre-match ratings)
    record_match(greg, jade, 1)

    # Queue players and search for opponents
    pool = MatchmakingPool()
    greg_entry, jade_entry = pool.add_players(greg, jade)
    print(pool.find_opponents(greg_entry))
    print(pool.to_dataframe())

Command-line interface:
    python -m elo_lobby demo
    python -m elo_lobby update 400 400 1
    python -m elo_lobby match Greg:400 Ann:420 Jade:1200 --query Greg
"""

from .base import RatedPlayer, players_to_dataframe
from .errors import InvalidArgumentError, LobbyError, UnsupportedOperationError
from .lobby import DEFAULT_RANGE, MatchmakingPool, PoolConfig, QueuedPlayer
from .systems import (
    BLITZ_CONFIG,
    STANDARD_CONFIG,
    BlitzPlayer,
    EloConfig,
    EloPlayer,
    StandardPlayer,
    record_match,
)

__version__ = "0.1.0"

__all__ = [
    # Base
    "RatedPlayer",
    "players_to_dataframe",
    # Errors
    "LobbyError",
    "InvalidArgumentError",
    "UnsupportedOperationError",
    # Elo players
    "EloConfig",
    "EloPlayer",
    "StandardPlayer",
    "BlitzPlayer",
    "STANDARD_CONFIG",
    "BLITZ_CONFIG",
    "record_match",
    # Matchmaking
    "MatchmakingPool",
    "PoolConfig",
    "QueuedPlayer",
    "DEFAULT_RANGE",
]
