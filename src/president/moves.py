"""
Moves: a non-empty set of same-rank cards tagged with its combination type.
A structurally impossible move can never be built (InvalidCombinationError at construction).
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Iterable

from .deck import Card, Rank


class InvalidCombinationError(ValueError):
    """Raised when cards do not form the requested combination."""


class MoveType(IntEnum):
    """Combination type; the value is the number of cards."""
    SINGLE = 1
    PAIR = 2
    THREE_OF_A_KIND = 3
    FOUR_OF_A_KIND = 4

    @classmethod
    def for_size(cls, size: int) -> "MoveType":
        try:
            return cls(size)
        except ValueError:
            raise InvalidCombinationError(f"No combination holds {size} cards") from None

    @property
    def label(self) -> str:
        return self.name.replace("_", " ").lower()


@dataclass(frozen=True)
class Move:
    """
    Cards laid down together by one player.

    Usage:
        Move((card,), MoveType.SINGLE)
        Move.of([c1, c2])  # PAIR, inferred from the size
    """

    cards: tuple[Card, ...]
    move_type: MoveType = MoveType.SINGLE

    def __post_init__(self) -> None:
        cards = tuple(self.cards)
        object.__setattr__(self, "cards", cards)
        if not cards:
            raise InvalidCombinationError("A move needs at least one card")
        if len(cards) != int(self.move_type):
            raise InvalidCombinationError(
                f"{self.move_type.label} needs {int(self.move_type)} cards, got {len(cards)}"
            )
        first = cards[0].rank
        if any(c.rank != first for c in cards):
            raise InvalidCombinationError(
                f"Cards of a {self.move_type.label} must share one rank: {list(cards)}"
            )

    @classmethod
    def of(cls, cards: Iterable[Card]) -> "Move":
        cards = tuple(cards)
        return cls(cards, MoveType.for_size(len(cards)))

    @property
    def rank(self) -> Rank:
        return self.cards[0].rank

    @property
    def size(self) -> int:
        return len(self.cards)

    @property
    def sort_key(self) -> tuple[int, int]:
        """Weakest first: by rank, then by combination size."""
        return (int(self.rank), int(self.move_type))

    def contains_rank(self, rank: Rank) -> bool:
        return any(c.rank == rank for c in self.cards)

    def can_be_played_on(self, top: "Move | None") -> bool:
        """Same combination type and a rank at least equal to the top of the pile."""
        if top is None:
            return True
        if self.move_type != top.move_type:
            return False
        return self.rank >= top.rank

    def __str__(self) -> str:
        return f"{self.move_type.label} of {self.rank.label}: {', '.join(str(c) for c in self.cards)}"
