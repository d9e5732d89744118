"""Tests for round configuration."""
import pytest

from president.config import ConfigurationError, Difficulty, RoundConfig


def test_defaults():
    cfg = RoundConfig()
    assert cfg.num_players == 4
    assert cfg.magic_square is True
    assert cfg.force_play is True
    assert cfg.ai_difficulty is Difficulty.MEDIUM


def test_difficulty_is_coerced_from_its_name():
    assert RoundConfig(ai_difficulty="hard").ai_difficulty is Difficulty.HARD
    with pytest.raises(ConfigurationError):
        RoundConfig(ai_difficulty="impossible")


def test_at_least_two_players():
    with pytest.raises(ConfigurationError):
        RoundConfig(num_players=1)


def test_validate_players():
    cfg = RoundConfig(num_players=3)
    a, b, c = object(), object(), object()
    cfg.validate_players([a, b, c])
    with pytest.raises(ConfigurationError, match="expected 3 players, got 2"):
        cfg.validate_players([a, b])
    with pytest.raises(ConfigurationError):
        cfg.validate_players([a, b, a])
