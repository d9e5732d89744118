"""
Round configuration: player count, optional house rules, AI difficulty.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Sequence


class ConfigurationError(ValueError):
    """Raised before any card is dealt when a round cannot be started."""


class Difficulty(Enum):
    """AI difficulty; only the AI factory looks at it."""
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"


@dataclass
class RoundConfig:
    num_players: int = 4
    # Carré magique: four same-rank cards stacked in a row win the trick.
    magic_square: bool = True
    # Ta Gueule: after two consecutive equal-rank moves the next player must match the rank or pass.
    force_play: bool = True
    ai_difficulty: Difficulty = Difficulty.MEDIUM

    def __post_init__(self) -> None:
        if self.num_players < 2:
            raise ConfigurationError(f"Président needs at least 2 players, got {self.num_players}")
        if not isinstance(self.ai_difficulty, Difficulty):
            try:
                self.ai_difficulty = Difficulty(self.ai_difficulty)
            except ValueError:
                raise ConfigurationError(f"Unknown AI difficulty: {self.ai_difficulty!r}") from None

    def validate_players(self, players: Sequence[object]) -> None:
        """Fail fast when the seated players do not match the configured count."""
        if len(players) != self.num_players:
            raise ConfigurationError(
                f"expected {self.num_players} players, got {len(players)}"
            )
        if len(set(map(id, players))) != len(players):
            raise ConfigurationError("the same player is seated twice")
