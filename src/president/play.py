"""
Legal moves: enumeration from a hand and the defensive legality check used by the trick engine.
A move must match the combination type on the pile with a rank greater than or equal to it;
an equal rank is legal (it "matches" the pile).
"""
from __future__ import annotations

from collections import Counter
from itertools import combinations
from typing import Iterable, Sequence

from .deck import Card, Rank
from .moves import Move, MoveType


def group_by_rank(hand: Iterable[Card]) -> dict[Rank, list[Card]]:
    """Cards of the hand grouped by rank, hand order kept inside each group."""
    groups: dict[Rank, list[Card]] = {}
    for c in hand:
        groups.setdefault(c.rank, []).append(c)
    return groups


def possible_moves(
    hand: Sequence[Card],
    last_move: Move | None = None,
    rank_lock: Rank | None = None,
) -> list[Move]:
    """
    Every legal move for ``hand``, weakest first.

    - Singles for every card; for each rank held 2+ times, every combination of
      2..min(4, count) of those cards (combinations, not permutations).
    - rank_lock: keep only moves containing that rank (empty list = must pass).
    - last_move: keep only the same combination type with rank >= last_move.rank.

    Sorted by rank, then by combination size; equal keys keep hand order.
    """
    moves: list[Move] = [Move((c,), MoveType.SINGLE) for c in hand]
    for cards in group_by_rank(hand).values():
        for size in range(2, min(4, len(cards)) + 1):
            move_type = MoveType(size)
            for combo in combinations(cards, size):
                moves.append(Move(combo, move_type))

    if rank_lock is not None:
        moves = [m for m in moves if m.contains_rank(rank_lock)]
    if last_move is not None:
        moves = [m for m in moves if m.can_be_played_on(last_move)]

    moves.sort(key=lambda m: m.sort_key)
    return moves


def holds_cards(hand: Sequence[Card], cards: Iterable[Card]) -> bool:
    """True if every card is in the hand (as a multiset)."""
    available = Counter(hand)
    needed = Counter(cards)
    return all(available[c] >= n for c, n in needed.items())


def is_legal_move(
    hand: Sequence[Card],
    move: object,
    last_move: Move | None,
    rank_lock: Rank | None = None,
) -> bool:
    """
    Check a move returned by a player: the engine never trusts a player to
    validate its own move.
    """
    if not isinstance(move, Move):
        return False
    if not holds_cards(hand, move.cards):
        return False
    if rank_lock is not None and not move.contains_rank(rank_lock):
        return False
    return move.can_be_played_on(last_move)
