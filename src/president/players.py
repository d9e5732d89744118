"""
Players: owned per-seat data (name, hand, role) plus a move-selection Strategy.

A Strategy is the only pluggable part of a player. Implementations are
independent (deterministic AI, random policy, human bridge, remote stub) and
never hold the hand themselves: they receive immutable snapshots.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, List, Protocol, Sequence

from .deck import Card, Rank
from .moves import Move


class RoundAborted(Exception):
    """
    A round was cancelled while waiting on a player. Never treated as a pass:
    the round is torn down as a whole.
    """


class Role(Enum):
    PRESIDENT = "Président"
    VICE_PRESIDENT = "Vice-Président"
    NEUTRAL = "Neutre"
    VICE_ASSHOLE = "Vice-Trou-du-Cul"
    ASSHOLE = "Trou-du-Cul"

    def __str__(self) -> str:
        return self.value


class Strategy(Protocol):
    """Move selection for one seat."""

    def play_turn(
        self,
        hand: Sequence[Card],
        pile: Sequence[Card],
        discard_pile: Sequence[Card],
        last_move: Move | None,
        rank_lock: Rank | None,
    ) -> Move | None:
        """Return a move built from ``hand``, or None to pass."""

    def choose_cards_for_exchange(
        self,
        hand: Sequence[Card],
        count: int,
        prefer_highest: bool,
    ) -> List[Card]:
        """Pick ``count`` cards of ``hand`` to give away."""


def select_by_rank(hand: Sequence[Card], count: int, highest: bool) -> List[Card]:
    """
    The ``count`` highest (or lowest) cards by rank strength. Suit is ignored:
    among equal ranks, hand order decides.
    """
    if count <= 0:
        return []
    ordered = sorted(hand, key=lambda c: c.rank)
    return ordered[-count:] if highest else ordered[:count]


@dataclass(eq=False)
class Player:
    """
    One seat at the table. Equality is identity: two players with the same
    name are still two seats.
    """

    name: str
    strategy: Strategy
    hand: list[Card] = field(default_factory=list)
    role: Role = Role.NEUTRAL

    @property
    def has_cards(self) -> bool:
        return bool(self.hand)

    def play_turn(
        self,
        pile: Sequence[Card],
        discard_pile: Sequence[Card],
        last_move: Move | None,
        rank_lock: Rank | None,
    ) -> Move | None:
        return self.strategy.play_turn(
            tuple(self.hand), tuple(pile), tuple(discard_pile), last_move, rank_lock
        )

    def receive_cards(self, cards: Iterable[Card]) -> None:
        """Add cards to the hand and keep it sorted by rank."""
        self.hand.extend(cards)
        self.hand.sort(key=lambda c: (c.rank, c.suit))

    def remove_cards(self, cards: Iterable[Card]) -> None:
        for c in cards:
            self.hand.remove(c)

    def choose_cards_for_exchange(self, count: int, prefer_highest: bool) -> List[Card]:
        if count <= 0 or not self.hand:
            return []
        return list(self.strategy.choose_cards_for_exchange(tuple(self.hand), count, prefer_highest))

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return f"Player({self.name!r}, cards={len(self.hand)}, role={self.role.name})"
