"""Tests for the matchmaking pool."""

import threading

import numpy as np
import pytest

from elo_lobby import (
    BlitzPlayer,
    InvalidArgumentError,
    MatchmakingPool,
    QueuedPlayer,
    StandardPlayer,
)


def make_pool(*ratings, search_range=100):
    pool = MatchmakingPool(default_range=search_range)
    entries = [pool.add_player(StandardPlayer(f"p{i}", r)) for i, r in enumerate(ratings)]
    return pool, entries


# =========================================================================
# Reference scenarios
# =========================================================================

def test_standard_sees_blitz_with_default_range():
    """Greg at level 4 with range 100 searches levels 4..104, so Jade (12) is in."""
    greg = StandardPlayer("Greg", 400)
    jade = BlitzPlayer("Jade")

    pool = MatchmakingPool()
    greg_entry, jade_entry = pool.add_players(greg, jade)

    assert pool.find_opponents(greg_entry) == [jade_entry]
    # Jade's band starts at level 12 and never reaches down to Greg
    assert pool.find_opponents(jade_entry) == []


def test_range_counts_levels_not_rating_points():
    """Greg only misses Jade when the range stops short of level 12."""
    pool = MatchmakingPool()
    jade_entry = pool.add_player(BlitzPlayer("Jade"))
    narrow = pool.add_player(StandardPlayer("Greg", 400), search_range=7)   # 4..11
    exact = pool.add_player(StandardPlayer("Greg", 400), search_range=8)    # 4..12

    assert pool.find_opponents(narrow) == [exact]
    assert pool.find_opponents(exact) == [jade_entry, narrow]


def test_two_equal_players_match_each_other():
    pool = MatchmakingPool()
    first, second = pool.add_players(StandardPlayer("Greg", 400), StandardPlayer("Ann", 400))

    assert pool.find_opponents(first) == [second]
    assert pool.find_opponents(second) == [first]


# =========================================================================
# Eligibility band
# =========================================================================

def test_never_returns_queried_entry():
    pool, entries = make_pool(400, 400, 450, 500, 1200, 0)
    for entry in entries:
        assert all(o is not entry for o in pool.find_opponents(entry))


def test_band_edges():
    pool = MatchmakingPool()
    query = pool.add_player(StandardPlayer("q", 400), search_range=1)  # levels 4..5
    inside_low = pool.add_player(StandardPlayer("a", 350))    # 3.5 -> 4
    inside_high = pool.add_player(StandardPlayer("b", 549))   # 5.49 -> 5
    below = pool.add_player(StandardPlayer("c", 349))         # 3.49 -> 3
    above = pool.add_player(StandardPlayer("d", 550))         # 5.5 -> 6

    opponents = pool.find_opponents(query)

    assert opponents == [inside_low, inside_high]
    assert below not in opponents
    assert above not in opponents


def test_band_only_widens_upward():
    """The range never reaches below the player's own level.

    This asymmetry is kept deliberately; a player at 1200 with a huge range
    still cannot see a player at 1100.
    """
    pool = MatchmakingPool()
    strong = pool.add_player(StandardPlayer("strong", 1200), search_range=1000)
    weak = pool.add_player(StandardPlayer("weak", 1100), search_range=1000)

    assert pool.find_opponents(strong) == []
    assert pool.find_opponents(weak) == [strong]


def test_one_level_below_excluded_even_when_close():
    pool = MatchmakingPool()
    query = pool.add_player(StandardPlayer("q", 450))      # level 5
    near = pool.add_player(StandardPlayer("near", 449))    # level 4, one point away

    assert pool.find_opponents(query) == []
    assert pool.find_opponents(near) == [query]


def test_half_level_rounds_away_from_zero():
    pool = MatchmakingPool(default_range=0)
    query = pool.add_player(StandardPlayer("q", 450))
    same_level = pool.add_player(StandardPlayer("r", 500))

    assert pool.level_of(query) == 5
    assert pool.level_of(StandardPlayer("x", 250)) == 3
    assert pool.find_opponents(query) == [same_level]


def test_zero_range_matches_same_level_only():
    pool, (a, b, c) = make_pool(400, 420, 500, search_range=0)
    assert pool.find_opponents(a) == [b]
    assert pool.find_opponents(c) == []


def test_result_keeps_insertion_order():
    pool, entries = make_pool(900, 400, 700, 500, 400)
    assert pool.find_opponents(entries[1]) == [entries[0], entries[2], entries[3], entries[4]]


def test_duplicate_names_are_distinct_entries():
    pool = MatchmakingPool()
    greg = StandardPlayer("Greg", 400)
    first = pool.add_player(greg)
    second = pool.add_player(greg)

    assert len(pool) == 2
    assert pool.find_opponents(first) == [second]
    assert pool.find_opponents(second) == [first]


def test_query_not_in_pool():
    pool, entries = make_pool(400, 500)
    outsider = QueuedPlayer(StandardPlayer("outsider", 400), search_range=0)
    assert pool.find_opponents(outsider) == [entries[0]]


def test_empty_pool():
    pool = MatchmakingPool()
    assert pool.find_opponents(QueuedPlayer(StandardPlayer("q"))) == []


def test_custom_level_width():
    pool = MatchmakingPool(default_range=0, level_width=50.0)
    query = pool.add_player(StandardPlayer("q", 400))      # level 8
    pool.add_player(StandardPlayer("r", 430))              # 8.6 -> 9
    same = pool.add_player(StandardPlayer("s", 410))       # 8.2 -> 8

    assert pool.find_opponents(query) == [same]


# =========================================================================
# Snapshots and validation
# =========================================================================

def test_snapshot_not_linked_to_source_player():
    greg = StandardPlayer("Greg", 400)
    ann = StandardPlayer("Ann", 400)

    pool = MatchmakingPool()
    greg_entry, ann_entry = pool.add_players(greg, ann)

    for _ in range(10):
        greg.update_rating_against(StandardPlayer("strong", 2000), 1)

    assert greg.rating > 600
    assert greg_entry.rating == 400.0
    assert pool.find_opponents(ann_entry) == [greg_entry]


def test_snapshot_clamps_negative_rating():
    player = StandardPlayer("Greg", 0)
    player.update_rating_against(StandardPlayer("Ann", 0), 0)
    assert player.rating < 0

    entry = MatchmakingPool().add_player(player)
    assert entry.rating == 0.0


def test_negative_range_rejected():
    pool = MatchmakingPool()
    pool.add_player(StandardPlayer("Greg", 400))

    with pytest.raises(InvalidArgumentError):
        pool.add_player(StandardPlayer("Ann", 400), search_range=-1)

    assert len(pool) == 1
    assert [e.name for e in pool] == ["Greg"]


def test_negative_range_is_value_error():
    with pytest.raises(ValueError):
        QueuedPlayer(StandardPlayer("Greg"), search_range=-1)
    with pytest.raises(InvalidArgumentError):
        MatchmakingPool(default_range=-5)


def test_range_setter_validates():
    entry = QueuedPlayer(StandardPlayer("Greg"), search_range=3)
    assert entry.get_range() == 3

    entry.set_range(0)
    assert entry.range == 0

    with pytest.raises(InvalidArgumentError):
        entry.range = -1
    assert entry.range == 0


@pytest.mark.parametrize("bad", [0.9, 1.5, "3", True])
def test_non_integer_range_rejected(bad):
    with pytest.raises(InvalidArgumentError):
        QueuedPlayer(StandardPlayer("Greg"), search_range=bad)

    entry = QueuedPlayer(StandardPlayer("Greg"), search_range=2)
    with pytest.raises(InvalidArgumentError):
        entry.range = bad
    assert entry.range == 2

    pool = MatchmakingPool()
    with pytest.raises(InvalidArgumentError):
        pool.add_player(StandardPlayer("Ann"), search_range=bad)
    assert len(pool) == 0

    with pytest.raises(InvalidArgumentError):
        MatchmakingPool(default_range=bad)


def test_numpy_integer_range_accepted():
    entry = QueuedPlayer(StandardPlayer("Greg"), search_range=np.int64(3))
    assert entry.range == 3
    assert type(entry.range) is int


def test_range_change_affects_search():
    pool, (a, b) = make_pool(400, 600, search_range=0)
    assert pool.find_opponents(a) == []

    a.range = 2
    assert pool.find_opponents(a) == [b]


# =========================================================================
# Removal and inspection
# =========================================================================

def test_remove_player():
    pool, (a, b, c) = make_pool(400, 400, 400)

    pool.remove_player(b)

    assert pool.players == (a, c)
    assert pool.find_opponents(a) == [c]


def test_remove_player_by_identity():
    pool = MatchmakingPool()
    greg = StandardPlayer("Greg", 400)
    first = pool.add_player(greg)
    second = pool.add_player(greg)

    pool.remove_player(second)
    assert pool.players == (first,)

    with pytest.raises(InvalidArgumentError):
        pool.remove_player(second)
    with pytest.raises(InvalidArgumentError):
        pool.remove_player(QueuedPlayer(greg))
    assert len(pool) == 1


def test_to_dataframe():
    pool = MatchmakingPool()
    pool.add_players(StandardPlayer("Greg", 400), BlitzPlayer("Jade"))
    pool.add_player(StandardPlayer("Ann", 450), search_range=2)

    df = pool.to_dataframe()

    assert df.columns == ["name", "rating", "level", "range"]
    assert df["name"].to_list() == ["Greg", "Jade", "Ann"]
    assert df["level"].to_list() == [4, 12, 5]
    assert df["range"].to_list() == [100, 100, 2]
    assert MatchmakingPool().to_dataframe().height == 0


def test_concurrent_inserts():
    pool = MatchmakingPool()
    query = pool.add_player(StandardPlayer("q", 400))

    def worker():
        for i in range(200):
            pool.add_player(StandardPlayer(f"w{i}", 400))
            pool.find_opponents(query)

    threads = [threading.Thread(target=worker) for _ in range(4)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert len(pool) == 801
    assert len(pool.find_opponents(query)) == 800


def test_len_reads_under_lock():
    pool, _ = make_pool(400, 500)
    real_lock = pool._lock
    acquired = []

    class RecordingLock:
        def __enter__(self):
            acquired.append(True)
            return real_lock.__enter__()

        def __exit__(self, *exc):
            return real_lock.__exit__(*exc)

    pool._lock = RecordingLock()
    assert len(pool) == 2
    assert acquired == [True]
