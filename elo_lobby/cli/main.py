"""
Command-line interface for elo_lobby.

Usage:
    python -m elo_lobby demo [options]
    python -m elo_lobby update <rating> <opponent_rating> <result> [options]
    python -m elo_lobby match <name:rating>... --query <name> [options]
"""

import argparse
import logging
import sys
from typing import List, Optional

import polars as pl


def parse_player(value: str):
    """Parse a NAME:RATING argument into (name, rating)."""
    name, sep, rating = value.rpartition(":")
    if not sep or not name:
        raise argparse.ArgumentTypeError(f"Expected NAME:RATING, got {value!r}")
    try:
        return name, float(rating)
    except ValueError:
        raise argparse.ArgumentTypeError(f"Invalid rating in {value!r}")


def cmd_demo(args):
    """Queue a standard and a blitz player and search for opponents."""
    from ..base import players_to_dataframe
    from ..lobby import MatchmakingPool
    from ..systems import BlitzPlayer, StandardPlayer

    greg = StandardPlayer("Greg", 400)
    jade = BlitzPlayer("Jade")

    pool = MatchmakingPool(default_range=args.range)
    pool.add_players(greg, jade)

    print("Players:")
    print(players_to_dataframe([greg, jade]))
    print("\nPool:")
    print(pool.to_dataframe())

    query = pool.players[0]
    opponents = pool.find_opponents(query)
    print(f"\nOpponents for {query.name} (level {pool.level_of(query)}, range {query.range}):")
    if opponents:
        print(pl.DataFrame({"name": [o.name for o in opponents],
                            "rating": [o.rating for o in opponents]}))
    else:
        print("  none")

    return 0


def cmd_update(args):
    """Apply one result to a player and show the rating change."""
    from ..systems import BLITZ_CONFIG, STANDARD_CONFIG, EloPlayer

    config = BLITZ_CONFIG if args.variant == "blitz" else STANDARD_CONFIG
    player = EloPlayer("player", args.rating, config=config)
    opponent = EloPlayer("opponent", args.opponent_rating, config=config)

    expected = player.expected_score_against(opponent)
    before = player.rating
    player.update_rating_against(opponent, args.result)

    print(f"\nRating Update ({args.variant.upper()}, K={config.k_factor:g}):")
    print(f"  Expected score: {expected:.3f}")
    print(f"  Change: {player.rating - before:+.2f}")
    print(f"  New rating: {player.rating:.2f}")

    return 0


def cmd_match(args):
    """Build a pool of standard players and list opponents for one of them."""
    from ..lobby import MatchmakingPool
    from ..systems import StandardPlayer

    pool = MatchmakingPool(default_range=args.range)
    entries = [pool.add_player(StandardPlayer(name, rating)) for name, rating in args.players]

    query = next((e for e in entries if e.name == args.query), None)
    if query is None:
        print(f"Unknown player: {args.query}", file=sys.stderr)
        return 1

    opponents = pool.find_opponents(query)
    print(f"Opponents for {query.name} (level {pool.level_of(query)}, range {query.range}):\n")
    if not opponents:
        print("  none")
        return 0

    expected = StandardPlayer(query.name, query.rating).expected_scores_against(opponents)
    print(pl.DataFrame({
        "name": [o.name for o in opponents],
        "rating": [o.rating for o in opponents],
        "level": [pool.level_of(o) for o in opponents],
        "p_win": expected,
    }))

    return 0


def main(argv: Optional[List[str]] = None):
    """Main entry point for CLI."""
    from ..errors import LobbyError

    parser = argparse.ArgumentParser(
        description="Elo lobby CLI",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    # demo command
    demo_parser = subparsers.add_parser("demo", help="Run the two-player lobby demo")
    demo_parser.add_argument("--range", "-r", type=int, default=100,
                             help="Levels above own level to search (default: 100)")

    # update command
    update_parser = subparsers.add_parser("update", help="Apply one match result")
    update_parser.add_argument("rating", type=float, help="Player rating")
    update_parser.add_argument("opponent_rating", type=float, help="Opponent rating")
    update_parser.add_argument("result", type=float, help="1 = win, 0 = loss, 0.5 = draw")
    update_parser.add_argument("--variant", default="standard",
                               choices=["standard", "blitz"],
                               help="Update rule (default: standard)")

    # match command
    match_parser = subparsers.add_parser("match", help="Find opponents in a pool")
    match_parser.add_argument("players", nargs="+", type=parse_player,
                              help="Players as NAME:RATING")
    match_parser.add_argument("--query", "-q", required=True,
                              help="Name of the player to find opponents for")
    match_parser.add_argument("--range", "-r", type=int, default=100,
                              help="Levels above own level to search (default: 100)")

    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s %(levelname)s: %(message)s")

    if args.command is None:
        parser.print_help()
        return 1

    commands = {
        "demo": cmd_demo,
        "update": cmd_update,
        "match": cmd_match,
    }

    try:
        return commands[args.command](args)
    except LobbyError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
