"""
Tiny CLI to run one seeded round between random AI players.

Usage (from project root, after installing in editable mode):
    python -m president.play_random --players 4 --seed 42
"""
from __future__ import annotations

import argparse
import random

from .agents import PolicyAgent, RandomAgent
from .config import RoundConfig
from .game import Game
from .players import Player


def run_random_round(num_players: int, seed: int) -> None:
    players = [
        Player(f"Random {i + 1}", PolicyAgent(RandomAgent(seed=seed + i)))
        for i in range(num_players)
    ]
    game = Game(players, RoundConfig(num_players=num_players), rng=random.Random(seed))
    result = game.play_round()

    print(
        f"players={num_players}, tricks={len(result.tricks)}, "
        f"discarded={len(result.discard_pile)}, "
        f"ranking={[f'{p.name}:{p.role.name}' for p in result.ranking]}"
    )


def main() -> None:
    parser = argparse.ArgumentParser(description="Run one Président round between random players.")
    parser.add_argument(
        "--players",
        type=int,
        default=4,
        help="Number of players at the table.",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=42,
        help="Random seed for reproducibility.",
    )
    args = parser.parse_args()
    run_random_round(args.players, args.seed)


if __name__ == "__main__":
    main()
