"""Président card game rule engine (trick resolution, rounds, roles, exchanges)."""

__version__ = "0.1.0"

from .deck import Card, Rank, Suit, STRONGEST_RANK, make_deck_52, parse_card
from .deal import deal_cards
from .moves import InvalidCombinationError, Move, MoveType
from .play import possible_moves, is_legal_move
from .config import ConfigurationError, Difficulty, RoundConfig
from .players import Player, Role, RoundAborted, Strategy, select_by_rank
from .observers import LoggingObserver, NullObserver, RoundObserver
from .trick import TrickEngine, TrickEndReason, TrickResult
from .exchange import Exchange, exchange_cards
from .roles import assign_roles, role_for_position
from .game import (
    Game,
    MatchResult,
    RoundResult,
    RoundStalledError,
    play_round,
)
from .agents import (
    EvaluateAgent,
    LowestMoveAgent,
    PolicyAgent,
    RandomAgent,
    RemoteAgent,
    make_ai_strategy,
)
from .human import HumanAgent
