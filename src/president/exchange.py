"""
Card exchange between rounds, from the previous round's ranking.
Président gives their 2 highest cards to the Trou-du-Cul, who gives back their 2 lowest.
With 4+ players the Vice-Président and Vice-Trou-du-Cul swap 1 card the same way.
Both sides choose before any card moves.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Sequence

from .deck import Card
from .observers import NullObserver, RoundObserver
from .players import Player, RoundAborted, select_by_rank

logger = logging.getLogger(__name__)

PRESIDENT_EXCHANGE_COUNT = 2
VICE_EXCHANGE_COUNT = 1


@dataclass(frozen=True)
class Exchange:
    giver: Player
    receiver: Player
    cards: tuple[Card, ...]


def _valid_selection(hand: Sequence[Card], cards: Sequence[Card], count: int) -> bool:
    if len(cards) != min(count, len(hand)):
        return False
    remaining = list(hand)
    for c in cards:
        if c not in remaining:
            return False
        remaining.remove(c)
    return True


def choose_exchange_cards(player: Player, count: int, prefer_highest: bool) -> List[Card]:
    """
    Ask the player which cards to give. A selection that fails or does not
    come from the hand is replaced by the plain rank-based selection.
    """
    try:
        cards = player.choose_cards_for_exchange(count, prefer_highest)
    except RoundAborted:
        raise
    except Exception:
        logger.warning("Exception during %s.choose_cards_for_exchange", player.name, exc_info=True)
        cards = None
    if cards is None or not _valid_selection(player.hand, cards, count):
        logger.debug("Invalid exchange selection from %s, using rank selection", player.name)
        cards = select_by_rank(player.hand, count, highest=prefer_highest)
    return list(cards)


def swap_cards(high: Player, low: Player, count: int) -> tuple[Exchange, Exchange]:
    """``high`` gives its ``count`` best cards to ``low``, which gives back its ``count`` worst."""
    given = choose_exchange_cards(high, count, prefer_highest=True)
    returned = choose_exchange_cards(low, count, prefer_highest=False)
    high.remove_cards(given)
    low.remove_cards(returned)
    low.receive_cards(given)
    high.receive_cards(returned)
    return (
        Exchange(giver=high, receiver=low, cards=tuple(given)),
        Exchange(giver=low, receiver=high, cards=tuple(returned)),
    )


def exchange_cards(
    ranking: Sequence[Player],
    observer: RoundObserver | None = None,
) -> List[Exchange]:
    """Run the exchanges for a freshly dealt round. No-op with fewer than 2 ranked players."""
    observer = observer or NullObserver()
    if len(ranking) < 2:
        return []

    president, asshole = ranking[0], ranking[-1]
    exchanges = list(swap_cards(president, asshole, PRESIDENT_EXCHANGE_COUNT))

    if len(ranking) >= 4:
        vice_president, vice_asshole = ranking[1], ranking[-2]
        if vice_president is not vice_asshole:
            exchanges.extend(swap_cards(vice_president, vice_asshole, VICE_EXCHANGE_COUNT))

    for ex in exchanges:
        observer.on_exchange(ex.giver, ex.receiver, ex.cards)
    return exchanges
