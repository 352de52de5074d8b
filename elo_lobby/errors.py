"""Exceptions raised by the lobby and rating code."""


class LobbyError(Exception):
    """Base class for all elo_lobby errors."""


class InvalidArgumentError(LobbyError, ValueError):
    """An argument is outside its valid domain (e.g. a negative search range)."""


class UnsupportedOperationError(LobbyError, NotImplementedError):
    """The operation is not available for this kind of player."""
