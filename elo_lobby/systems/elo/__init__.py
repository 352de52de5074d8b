"""Elo rated player implementations."""

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
