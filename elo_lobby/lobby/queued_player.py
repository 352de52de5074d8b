"""Queuing-only player snapshot."""

from numbers import Integral

from ..base import RatedPlayer
from ..errors import InvalidArgumentError, UnsupportedOperationError

DEFAULT_RANGE = 100


class QueuedPlayer(RatedPlayer):
    """
    Snapshot of a rated player waiting in a matchmaking pool.

    Name and rating are copied at construction; later changes to the
    source player are not seen here. `range` is how many levels above its
    own level this entry will accept an opponent from.

    Queued players never take part in a rated match: both rating_change()
    and update_rating_against() raise UnsupportedOperationError.
    """

    def __init__(self, player: RatedPlayer, search_range: int = DEFAULT_RANGE):
        check_range(search_range)
        super().__init__(player.name, player.rating)
        self._range = int(search_range)

    @property
    def range(self) -> int:
        return self._range

    @range.setter
    def range(self, value: int) -> None:
        check_range(value)
        self._range = int(value)

    def get_range(self) -> int:
        return self._range

    def set_range(self, value: int) -> None:
        self.range = value

    def rating_change(self, opponent_rating: float, result: float) -> float:
        raise UnsupportedOperationError("QueuedPlayer does not support rating updates")

    def update_rating_against(self, opponent: RatedPlayer, result: float) -> None:
        raise UnsupportedOperationError("QueuedPlayer does not support rating updates")

    def __repr__(self) -> str:
        return (
            f"QueuedPlayer(name={self.name!r}, rating={self.rating:.1f}, "
            f"range={self._range})"
        )


def check_range(value: int) -> None:
    """Raise InvalidArgumentError unless value is a non-negative integer."""
    if isinstance(value, bool) or not isinstance(value, Integral):
        raise InvalidArgumentError(f"Range must be an integer, got {value!r}")
    if value < 0:
        raise InvalidArgumentError(f"Range must be non-negative, got {value}")
