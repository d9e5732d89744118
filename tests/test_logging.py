"""Tests for logging configuration and the logging observer."""
import json
import logging
import random

from president.agents import LowestMoveAgent
from president.config import RoundConfig
from president.game import Game
from president.logging_config import ConsoleFormatter, JSONFormatter, setup_logging
from president.observers import LoggingObserver
from president.players import Player


def _record(level=logging.INFO, msg="hello %s", args=("world",)):
    return logging.LogRecord("president.test", level, __file__, 10, msg, args, None)


def test_json_formatter_emits_one_object():
    data = json.loads(JSONFormatter().format(_record()))
    assert data["level"] == "INFO"
    assert data["logger"] == "president.test"
    assert data["message"] == "hello world"
    assert "source" not in data


def test_json_formatter_adds_source_for_errors():
    data = json.loads(JSONFormatter().format(_record(level=logging.ERROR)))
    assert data["source"]["line"] == 10


def test_console_formatter_without_color():
    line = ConsoleFormatter(use_color=False).format(_record(level=logging.WARNING))
    assert "WARNING" in line
    assert "president.test - hello world" in line
    assert "\033[" not in line


def test_setup_logging_replaces_root_handlers():
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    try:
        setup_logging("debug", json_format=True)
        assert root.level == logging.DEBUG
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0].formatter, JSONFormatter)
    finally:
        root.handlers = saved_handlers
        root.setLevel(saved_level)


def test_logging_observer_reports_a_round(caplog):
    caplog.set_level(logging.INFO, logger="president.round")
    players = [Player(f"P{i}", LowestMoveAgent()) for i in range(3)]
    game = Game(players, RoundConfig(num_players=3), observer=LoggingObserver(), rng=random.Random(4))

    game.play_round()

    messages = [r.getMessage() for r in caplog.records if r.name == "president.round"]
    assert any(" plays " in m for m in messages)
    assert any(m.startswith("Trick won by") for m in messages)
    assert messages[-1].startswith("Round over, ranking:")
