"""
Président deck: 52 cards (4 suits × 13 ranks).
Rank strength: 3 < 4 < ... < Roi < As < 2. The 2 is the strongest rank and wins a trick outright.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum


class Rank(IntEnum):
    """Ranks in strength order. The value is the strength, never the face value."""
    THREE = 0
    FOUR = 1
    FIVE = 2
    SIX = 3
    SEVEN = 4
    EIGHT = 5
    NINE = 6
    TEN = 7
    JACK = 8
    QUEEN = 9
    KING = 10
    ACE = 11
    TWO = 12

    @property
    def label(self) -> str:
        return _RANK_LABELS[self]

    def __str__(self) -> str:
        return self.label


class Suit(IntEnum):
    """Trèfle, Carreau, Cœur, Pique. Decorative only: never affects legality or strength."""
    CLUBS = 0
    DIAMONDS = 1
    HEARTS = 2
    SPADES = 3

    @property
    def icon(self) -> str:
        return "♣♦♥♠"[self]


_RANK_LABELS = {
    Rank.THREE: "3",
    Rank.FOUR: "4",
    Rank.FIVE: "5",
    Rank.SIX: "6",
    Rank.SEVEN: "7",
    Rank.EIGHT: "8",
    Rank.NINE: "9",
    Rank.TEN: "10",
    Rank.JACK: "J",
    Rank.QUEEN: "Q",
    Rank.KING: "K",
    Rank.ACE: "A",
    Rank.TWO: "2",
}

STRONGEST_RANK = Rank.TWO
DECK_SIZE = len(Rank) * len(Suit)


@dataclass(frozen=True)
class Card:
    """
    A single card. Equality and hashing use (rank, suit) so every card of the
    deck is distinct; ordering compares rank strength only (suit breaks no tie).
    """

    rank: Rank
    suit: Suit

    def __lt__(self, other: "Card") -> bool:
        if not isinstance(other, Card):
            return NotImplemented
        return self.rank < other.rank

    def __gt__(self, other: "Card") -> bool:
        if not isinstance(other, Card):
            return NotImplemented
        return self.rank > other.rank

    def __le__(self, other: "Card") -> bool:
        if not isinstance(other, Card):
            return NotImplemented
        return self.rank <= other.rank

    def __ge__(self, other: "Card") -> bool:
        if not isinstance(other, Card):
            return NotImplemented
        return self.rank >= other.rank

    def __str__(self) -> str:
        return f"{self.rank.label}{self.suit.icon}"

    def __repr__(self) -> str:
        return str(self)


_SUIT_LETTERS = {"C": Suit.CLUBS, "D": Suit.DIAMONDS, "H": Suit.HEARTS, "S": Suit.SPADES}
_RANKS_BY_LABEL = {label: rank for rank, label in _RANK_LABELS.items()}


def parse_card(text: str) -> Card:
    """
    Parse a short card label such as ``"10H"``, ``"QS"`` or ``"2c"``
    (rank label followed by one of C/D/H/S).
    """
    text = text.strip().upper()
    if len(text) < 2:
        raise ValueError(f"Invalid card label: {text!r}")
    rank_label, suit_letter = text[:-1], text[-1]
    if rank_label not in _RANKS_BY_LABEL or suit_letter not in _SUIT_LETTERS:
        raise ValueError(f"Invalid card label: {text!r}")
    return Card(rank=_RANKS_BY_LABEL[rank_label], suit=_SUIT_LETTERS[suit_letter])


def make_deck_52() -> list[Card]:
    """Build a full 52-card deck (suit-major, then rank in strength order)."""
    return [Card(rank=r, suit=s) for s in Suit for r in Rank]


def verify_deck(deck: list[Card]) -> None:
    """Raise ValueError unless ``deck`` holds exactly the 52 distinct cards."""
    if len(deck) != DECK_SIZE:
        raise ValueError(f"Deck must contain {DECK_SIZE} cards, got {len(deck)}")
    unique = set(deck)
    if len(unique) != DECK_SIZE:
        raise ValueError("Deck contains duplicate cards")
    if unique != set(make_deck_52()):
        raise ValueError("Deck does not contain the expected cards")


def sort_hand(hand: list[Card]) -> list[Card]:
    """Hand sorted for display: by rank strength, then suit."""
    return sorted(hand, key=lambda c: (c.rank, c.suit))
