"""Tests for the card exchange between rounds."""
import random
from collections import Counter

import pytest

from president.agents import LowestMoveAgent
from president.deal import deal_cards
from president.deck import parse_card
from president.exchange import exchange_cards, swap_cards
from president.players import Player, RoundAborted


def cards(labels: str):
    return [parse_card(x) for x in labels.split()]


class FixedExchange(LowestMoveAgent):
    def __init__(self, answer):
        self.answer = answer

    def choose_cards_for_exchange(self, hand, count, prefer_highest):
        if isinstance(self.answer, BaseException):
            raise self.answer
        return self.answer


def test_president_and_asshole_swap_two_cards():
    president = Player("P", LowestMoveAgent(), hand=cards("2H AS 3C"))
    asshole = Player("D", LowestMoveAgent(), hand=cards("3D 4C 5S"))

    exchanges = exchange_cards([president, asshole])

    assert Counter(president.hand) == Counter(cards("3C 3D 4C"))
    assert Counter(asshole.hand) == Counter(cards("5S AS 2H"))
    assert [(e.giver.name, e.receiver.name, len(e.cards)) for e in exchanges] == [
        ("P", "D", 2),
        ("D", "P", 2),
    ]


def test_vice_roles_swap_one_card_with_four_players():
    players = [Player(f"P{i}", LowestMoveAgent()) for i in range(4)]
    for player, hand in zip(players, deal_cards(4, rng=random.Random(9))):
        player.receive_cards(hand)
    before = Counter(c for p in players for c in p.hand)
    vice_best = max(players[1].hand, key=lambda c: c.rank)

    exchanges = exchange_cards(players)

    assert len(exchanges) == 4
    assert exchanges[2].giver is players[1] and exchanges[2].receiver is players[2]
    assert exchanges[2].cards[0].rank == vice_best.rank
    assert all(len(p.hand) == 13 for p in players)
    assert Counter(c for p in players for c in p.hand) == before


def test_three_players_have_no_vice_exchange():
    players = [Player(f"P{i}", LowestMoveAgent(), hand=cards(h)) for i, h in enumerate(["2H AS", "5C 6C", "3D 4C"])]
    assert len(exchange_cards(players)) == 2
    assert Counter(players[1].hand) == Counter(cards("5C 6C"))


def test_selection_not_taken_from_the_hand_falls_back_to_rank_selection():
    high = Player("P", FixedExchange(cards("KS KH")), hand=cards("2H AS 3C"))
    low = Player("D", FixedExchange(cards("5S")), hand=cards("3D 4C 5S"))

    swap_cards(high, low, 2)

    assert Counter(high.hand) == Counter(cards("3C 3D 4C"))
    assert Counter(low.hand) == Counter(cards("5S AS 2H"))


def test_failing_selection_falls_back_to_rank_selection():
    high = Player("P", FixedExchange(RuntimeError("broken")), hand=cards("2H AS 3C"))
    low = Player("D", LowestMoveAgent(), hand=cards("3D 4C 5S"))
    swap_cards(high, low, 2)
    assert Counter(low.hand) == Counter(cards("5S AS 2H"))


def test_valid_custom_selection_is_honoured():
    high = Player("P", FixedExchange(cards("3C AS")), hand=cards("2H AS 3C"))
    low = Player("D", LowestMoveAgent(), hand=cards("3D 4C 5S"))
    swap_cards(high, low, 2)
    assert Counter(low.hand) == Counter(cards("5S 3C AS"))


def test_round_aborted_during_exchange_propagates():
    high = Player("P", FixedExchange(RoundAborted()), hand=cards("2H AS 3C"))
    low = Player("D", LowestMoveAgent(), hand=cards("3D 4C 5S"))
    with pytest.raises(RoundAborted):
        swap_cards(high, low, 2)
    assert Counter(high.hand) == Counter(cards("2H AS 3C"))
