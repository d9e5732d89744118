"""
Distribution (deal) for 2+ players.
The whole 52-card pack is dealt one card at a time, starting at seat 0, until it is exhausted;
with a player count that does not divide 52 the first seats get one card more.
"""
from __future__ import annotations

import random

from .deck import Card, make_deck_52, verify_deck


def deal_cards(
    num_players: int,
    deck: list[Card] | None = None,
    rng: random.Random | None = None,
) -> list[list[Card]]:
    """
    Shuffle and deal the full pack. Returns one hand per seat (seat 0 first).
    Raises ValueError for fewer than 2 players or an incomplete deck.
    """
    if num_players < 2:
        raise ValueError(f"Président needs at least 2 players, got {num_players}")
    if deck is None:
        deck = make_deck_52()
    if rng is None:
        rng = random.Random()
    deck = list(deck)
    verify_deck(deck)
    rng.shuffle(deck)

    hands: list[list[Card]] = [[] for _ in range(num_players)]
    for i, card in enumerate(deck):
        hands[i % num_players].append(card)
    return hands
