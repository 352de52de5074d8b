"""Matchmaking pool and queued player snapshots."""

from .pool import MatchmakingPool, PoolConfig
from .queued_player import DEFAULT_RANGE, QueuedPlayer

__all__ = ["DEFAULT_RANGE", "MatchmakingPool", "PoolConfig", "QueuedPlayer"]
