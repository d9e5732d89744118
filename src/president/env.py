"""
Observation / action encoding for policy-driven players.

Flat observations so that any ``Policy`` (random baseline or learned model)
can act on a Président turn:
- the acting player's hand, the current pile and the discard pile, card-by-card;
- the move to beat (rank and combination type) and the Ta Gueule rank lock.

Actions are abstract (rank, combination type) pairs plus PASS; the concrete
cards are picked afterwards as the weakest matching legal move.
"""
from __future__ import annotations

from typing import Iterable, Sequence

import numpy as np

from .deck import Card, Rank, Suit
from .moves import Move, MoveType


NUM_CARDS: int = len(Rank) * len(Suit)  # 52
NUM_RANKS: int = len(Rank)
NUM_MOVE_TYPES: int = len(MoveType)
PASS_ACTION: int = 0
NUM_ACTIONS: int = 1 + NUM_RANKS * NUM_MOVE_TYPES  # 53
# hand + pile + discard + last move rank (+1 for "none") + last move type (+1) + rank lock (+1)
OBS_DIM: int = 3 * NUM_CARDS + (NUM_RANKS + 1) + (NUM_MOVE_TYPES + 1) + (NUM_RANKS + 1)


def card_index(card: Card) -> int:
    """Stable index 0..51, suit-major then rank strength, matching make_deck_52()."""
    return int(card.suit) * NUM_RANKS + int(card.rank)


def encode_card_set(cards: Iterable[Card]) -> np.ndarray:
    """Binary 52-dim vector: 1 where the card is present."""
    vec = np.zeros(NUM_CARDS, dtype=np.float32)
    for c in cards:
        vec[card_index(c)] = 1.0
    return vec


def _one_hot(index: int | None, size: int) -> np.ndarray:
    """One-hot of ``size + 1`` entries; the last entry flags "none"."""
    vec = np.zeros(size + 1, dtype=np.float32)
    vec[size if index is None else index] = 1.0
    return vec


def encode_observation(
    hand: Sequence[Card],
    pile: Sequence[Card],
    discard_pile: Sequence[Card],
    last_move: Move | None,
    rank_lock: Rank | None,
) -> np.ndarray:
    """Flat float32 observation of size OBS_DIM for the acting player."""
    parts = [
        encode_card_set(hand),
        encode_card_set(pile),
        encode_card_set(discard_pile),
        _one_hot(int(last_move.rank) if last_move is not None else None, NUM_RANKS),
        _one_hot(int(last_move.move_type) - 1 if last_move is not None else None, NUM_MOVE_TYPES),
        _one_hot(int(rank_lock) if rank_lock is not None else None, NUM_RANKS),
    ]
    return np.concatenate(parts)


def action_index(move: Move | None) -> int:
    """PASS (None) → 0; otherwise 1 + rank * 4 + (size - 1)."""
    if move is None:
        return PASS_ACTION
    return 1 + int(move.rank) * NUM_MOVE_TYPES + (int(move.move_type) - 1)


def legal_action_mask(moves: Iterable[Move], allow_pass: bool = True) -> np.ndarray:
    """
    Boolean mask over NUM_ACTIONS. PASS is legal when ``allow_pass`` is set or
    when there is no legal move at all.
    """
    mask = np.zeros(NUM_ACTIONS, dtype=bool)
    for m in moves:
        mask[action_index(m)] = True
    if allow_pass or not mask.any():
        mask[PASS_ACTION] = True
    return mask


def move_for_action(action: int, moves: Sequence[Move]) -> Move | None:
    """
    Weakest concrete move of ``moves`` (sorted weakest first) for ``action``.
    Returns None for PASS or when no move maps to the action.
    """
    if action == PASS_ACTION:
        return None
    for m in moves:
        if action_index(m) == action:
            return m
    return None
