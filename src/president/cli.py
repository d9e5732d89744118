"""
Command-line interface for simulating Président rounds between AI players.

Usage examples (after installing the package):

    president-sim simulate --players 5 --rounds 10 --difficulty hard --seed 3
    president-sim moves --hand "4H 4S 6C 8D" --last "8C"
"""
from __future__ import annotations

import argparse
import random
from typing import Optional

from .agents import make_ai_strategy
from .config import Difficulty, RoundConfig
from .deck import parse_card
from .game import Game
from .logging_config import setup_logging
from .moves import Move
from .observers import LoggingObserver, NullObserver
from .play import possible_moves
from .players import Player


def _player_count(text: str) -> int:
    value = int(text)
    if value < 2:
        raise argparse.ArgumentTypeError(f"Président needs at least 2 players, got {value}")
    return value


def _add_simulate_parser(subparsers: argparse._SubParsersAction) -> None:
    parser = subparsers.add_parser(
        "simulate",
        help="Play rounds between AI players and print the rankings.",
    )
    parser.add_argument(
        "--players",
        type=_player_count,
        default=4,
        help="Number of players at the table (2 or more).",
    )
    parser.add_argument(
        "--rounds",
        type=int,
        default=5,
        help="Number of rounds to play.",
    )
    parser.add_argument(
        "--difficulty",
        choices=[d.value for d in Difficulty],
        default=Difficulty.MEDIUM.value,
        help="AI difficulty for every seat.",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=0,
        help="Random seed for dealing and random AIs.",
    )
    parser.add_argument(
        "--no-magic-square",
        action="store_true",
        help="Disable the carré magique rule.",
    )
    parser.add_argument(
        "--no-force-play",
        action="store_true",
        help="Disable the Ta Gueule rule.",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default="WARNING",
        help="Log level; INFO shows every move.",
    )
    parser.add_argument(
        "--json-logs",
        action="store_true",
        help="Emit logs as JSON lines.",
    )
    parser.set_defaults(func=_cmd_simulate)


def _cmd_simulate(args: argparse.Namespace) -> None:
    setup_logging(args.log_level, json_format=args.json_logs)
    config = RoundConfig(
        num_players=args.players,
        magic_square=not args.no_magic_square,
        force_play=not args.no_force_play,
        ai_difficulty=Difficulty(args.difficulty),
    )
    players = [
        Player(f"Bot {i + 1}", make_ai_strategy(config.ai_difficulty, seed=args.seed + i))
        for i in range(config.num_players)
    ]
    observer = LoggingObserver() if args.log_level.upper() in ("DEBUG", "INFO") else NullObserver()
    game = Game(players, config, observer=observer, rng=random.Random(args.seed))

    for i in range(1, args.rounds + 1):
        result = game.play_round()
        ranking = ", ".join(f"{p.name} ({p.role})" for p in result.ranking)
        print(f"[round {i}/{args.rounds}] tricks={len(result.tricks)} ranking: {ranking}", flush=True)

    print("Roles earned:")
    for p in players:
        counts = ", ".join(f"{role}={n}" for role, n in game.role_counts[p.name].items() if n)
        print(f"  {p.name}: {counts}")


def _add_moves_parser(subparsers: argparse._SubParsersAction) -> None:
    parser = subparsers.add_parser(
        "moves",
        help="List the legal moves of a hand.",
    )
    parser.add_argument(
        "--hand",
        type=str,
        required=True,
        help='Cards separated by spaces, e.g. "4H 4S 6C" (suits C, D, H, S).',
    )
    parser.add_argument(
        "--last",
        type=str,
        default=None,
        help='Move on top of the pile, e.g. "8D" or "9C 9H".',
    )
    parser.add_argument(
        "--lock",
        type=str,
        default=None,
        help='Rank every move must contain (Ta Gueule), e.g. "9".',
    )
    parser.set_defaults(func=_cmd_moves)


def _cmd_moves(args: argparse.Namespace) -> None:
    hand = [parse_card(text) for text in args.hand.split()]
    last_move = Move.of(parse_card(text) for text in args.last.split()) if args.last else None
    rank_lock = parse_card(f"{args.lock}C").rank if args.lock else None
    moves = possible_moves(hand, last_move, rank_lock)
    if not moves:
        print("No legal move: pass.")
        return
    for m in moves:
        print(m)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="president-sim", description="Président rule engine CLI.")
    subparsers = parser.add_subparsers(dest="command", required=True)
    _add_simulate_parser(subparsers)
    _add_moves_parser(subparsers)
    return parser


def main(argv: Optional[list[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    if hasattr(args, "func"):
        args.func(args)
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
