"""Tests for move construction and the move generator."""
import pytest

from president.deck import Rank, parse_card
from president.moves import InvalidCombinationError, Move, MoveType
from president.play import is_legal_move, possible_moves


def cards(labels: str):
    return [parse_card(x) for x in labels.split()]


def move(labels: str) -> Move:
    return Move.of(cards(labels))


def test_move_of_infers_combination_type():
    assert move("7C").move_type is MoveType.SINGLE
    assert move("7C 7D").move_type is MoveType.PAIR
    assert move("7C 7D 7H").move_type is MoveType.THREE_OF_A_KIND
    assert move("7C 7D 7H 7S").move_type is MoveType.FOUR_OF_A_KIND
    assert move("7C 7D").rank is Rank.SEVEN


def test_invalid_combinations_cannot_be_built():
    with pytest.raises(InvalidCombinationError):
        Move.of([])
    with pytest.raises(InvalidCombinationError):
        move("7C 8C")
    with pytest.raises(InvalidCombinationError):
        Move(tuple(cards("7C 7D")), MoveType.SINGLE)
    five = cards("7C 7D 7H 7S") + cards("7C")
    with pytest.raises(InvalidCombinationError):
        Move.of(five)


def test_can_be_played_on_needs_same_type_and_equal_or_higher_rank():
    assert move("8C").can_be_played_on(None)
    assert move("8C").can_be_played_on(move("8D"))
    assert move("9C").can_be_played_on(move("8D"))
    assert not move("7C").can_be_played_on(move("8D"))
    assert not move("9C 9D").can_be_played_on(move("8D"))


def test_possible_moves_on_empty_pile():
    moves = possible_moves(cards("4H 4S 6C"))
    assert moves == [move("4H"), move("4S"), move("4H 4S"), move("6C")]


def test_possible_moves_over_a_single_eight():
    hand = cards("4C 8D 9C 9D 2S")
    moves = possible_moves(hand, last_move=move("8H"))
    assert moves == [move("8D"), move("9C"), move("9D"), move("2S")]
    assert all(m.move_type is MoveType.SINGLE for m in moves)


def test_possible_moves_with_four_of_a_kind_lists_every_combination():
    moves = possible_moves(cards("7C 7D 7H 7S"))
    sizes = [m.size for m in moves]
    assert sizes.count(1) == 4
    assert sizes.count(2) == 6
    assert sizes.count(3) == 4
    assert sizes.count(4) == 1
    assert sizes == sorted(sizes)


def test_rank_lock_keeps_only_matching_rank():
    hand = cards("8D 8C 9C")
    moves = possible_moves(hand, last_move=move("8H"), rank_lock=Rank.EIGHT)
    assert moves == [move("8D"), move("8C")]
    assert possible_moves(cards("9C KD"), last_move=move("8H"), rank_lock=Rank.EIGHT) == []


def test_possible_moves_empty_hand():
    assert possible_moves([]) == []


def test_is_legal_move_checks_hand_lock_and_pile():
    hand = cards("8D 8C 9C")
    assert is_legal_move(hand, move("9C"), move("8H"))
    assert not is_legal_move(hand, move("KS"), None)
    assert not is_legal_move(hand, move("9C"), move("8H"), rank_lock=Rank.EIGHT)
    assert not is_legal_move(hand, move("8D 8C"), move("8H"))
    assert not is_legal_move(hand, "8D", None)
