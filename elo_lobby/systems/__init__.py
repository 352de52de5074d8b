"""Rated player variants.

- StandardPlayer: Elo, K = 32, starts at 400 unless told otherwise
- BlitzPlayer: Elo, K = 128, always starts at 1200

Both are EloPlayer instances with a fixed EloConfig; build an EloPlayer
directly for any other K-factor or starting rating.
"""

from .elo import (
    BLITZ_CONFIG,
    STANDARD_CONFIG,
    BlitzPlayer,
    EloConfig,
    EloPlayer,
    StandardPlayer,
    record_match,
)

__all__ = [
    "BLITZ_CONFIG",
    "STANDARD_CONFIG",
    "BlitzPlayer",
    "EloConfig",
    "EloPlayer",
    "StandardPlayer",
    "record_match",
]
