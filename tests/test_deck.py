"""Tests for the 52-card deck and the deal."""
import random

import pytest

from president.deal import deal_cards
from president.deck import (
    DECK_SIZE,
    STRONGEST_RANK,
    Card,
    Rank,
    Suit,
    make_deck_52,
    parse_card,
    sort_hand,
    verify_deck,
)


def test_deck_52_has_distinct_cards():
    deck = make_deck_52()
    assert len(deck) == DECK_SIZE == 52
    assert len(set(deck)) == 52
    verify_deck(deck)


def test_rank_order_puts_two_on_top():
    assert STRONGEST_RANK is Rank.TWO
    assert max(Rank) is Rank.TWO
    assert Rank.THREE < Rank.KING < Rank.ACE < Rank.TWO


def test_card_ordering_ignores_suit_but_equality_does_not():
    five_clubs = Card(Rank.FIVE, Suit.CLUBS)
    five_hearts = Card(Rank.FIVE, Suit.HEARTS)
    assert five_clubs != five_hearts
    assert not five_clubs < five_hearts
    assert not five_clubs > five_hearts
    assert Card(Rank.ACE, Suit.SPADES) < Card(Rank.TWO, Suit.CLUBS)


def test_parse_card_labels():
    assert parse_card("10H") == Card(Rank.TEN, Suit.HEARTS)
    assert parse_card("qs") == Card(Rank.QUEEN, Suit.SPADES)
    assert parse_card("2C") == Card(Rank.TWO, Suit.CLUBS)
    assert str(parse_card("10H")) == "10♥"
    for bad in ("", "1H", "10X", "ZZ"):
        with pytest.raises(ValueError):
            parse_card(bad)


def test_verify_deck_rejects_duplicates_and_short_decks():
    deck = make_deck_52()
    with pytest.raises(ValueError):
        verify_deck(deck[:-1])
    with pytest.raises(ValueError):
        verify_deck(deck[:-1] + [deck[0]])


def test_sort_hand_by_rank_then_suit():
    hand = [parse_card(x) for x in ("2C", "5S", "5C", "3D")]
    assert [str(c) for c in sort_hand(hand)] == ["3♦", "5♣", "5♠", "2♣"]


def test_deal_4p_gives_13_cards_each():
    hands = deal_cards(4, rng=random.Random(42))
    assert [len(h) for h in hands] == [13, 13, 13, 13]
    all_cards = [c for h in hands for c in h]
    assert set(all_cards) == set(make_deck_52())


def test_deal_uneven_count_favours_first_seats():
    hands = deal_cards(5, rng=random.Random(1))
    assert [len(h) for h in hands] == [11, 11, 10, 10, 10]
    assert sum(len(h) for h in hands) == 52


def test_deal_is_reproducible_with_a_seed():
    assert deal_cards(3, rng=random.Random(7)) == deal_cards(3, rng=random.Random(7))


def test_deal_requires_two_players():
    with pytest.raises(ValueError):
        deal_cards(1)


def test_card_le_ge_compare_rank_only():
    five_clubs = Card(Rank.FIVE, Suit.CLUBS)
    five_hearts = Card(Rank.FIVE, Suit.HEARTS)
    assert five_clubs <= five_hearts
    assert five_clubs >= five_hearts
    assert Card(Rank.KING, Suit.SPADES) <= Card(Rank.TWO, Suit.CLUBS)
    assert not Card(Rank.KING, Suit.SPADES) >= Card(Rank.TWO, Suit.CLUBS)
