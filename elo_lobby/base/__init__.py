"""Base classes for rated players."""

from .rated_player import RatedPlayer, players_to_dataframe

__all__ = ["RatedPlayer", "players_to_dataframe"]
