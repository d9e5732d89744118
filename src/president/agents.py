"""
Baseline agents, the generic policy interface and the AI factory.

Every agent here implements the ``Strategy`` protocol of ``president.players``:
it only ever picks one of the legal moves from ``possible_moves`` (or passes).

The small ``Policy`` protocol is the flat-observation contract shared with
learned models: ``act(obs, legal_actions_mask) -> action_index``; ``PolicyAgent``
turns any Policy into a Strategy using the encoders of ``president.env``.
"""
from __future__ import annotations

import random
from collections import Counter
from dataclasses import dataclass
from typing import Iterable, List, Protocol, Sequence

from .config import Difficulty
from .deck import Card, Rank, STRONGEST_RANK
from .env import encode_observation, legal_action_mask, move_for_action
from .moves import Move
from .play import possible_moves
from .players import Strategy, select_by_rank


class Policy(Protocol):
    """Stateless or stateful decision policy working on flat observations."""

    def act(self, obs: Sequence[float], legal_actions_mask: Iterable[bool]) -> int:
        """
        Choose an action index given an observation and a boolean legal-action mask.

        Implementations must only return indices where ``legal_actions_mask[i]`` is
        true; callers are free to validate or fall back to a default if needed.
        """


@dataclass
class RandomAgent:
    """
    Baseline policy that samples uniformly among legal actions.

    Usage:
        agent = RandomAgent(seed=42)
        action = agent.act(obs, legal_actions_mask)
    """

    seed: int | None = None

    def __post_init__(self) -> None:
        self._rng = random.Random(self.seed)

    def act(self, obs: Sequence[float], legal_actions_mask: Iterable[bool]) -> int:
        """Pick a random legal action given an observation and a boolean mask."""
        legal_indices: List[int] = [i for i, ok in enumerate(legal_actions_mask) if ok]
        if not legal_indices:
            raise ValueError("No legal actions available for RandomAgent")
        return self._rng.choice(legal_indices)


class RankExchange:
    """Gives away the highest (or lowest) cards by rank."""

    def choose_cards_for_exchange(
        self, hand: Sequence[Card], count: int, prefer_highest: bool
    ) -> List[Card]:
        return select_by_rank(hand, count, highest=prefer_highest)


class LowestMoveAgent(RankExchange):
    """Deterministic: always plays the weakest legal move, passes only when forced to."""

    def play_turn(
        self,
        hand: Sequence[Card],
        pile: Sequence[Card],
        discard_pile: Sequence[Card],
        last_move: Move | None,
        rank_lock: Rank | None,
    ) -> Move | None:
        moves = possible_moves(hand, last_move, rank_lock)
        return moves[0] if moves else None


@dataclass
class EvaluateAgent(RankExchange):
    """
    Deterministic heuristic player.

    Scores each legal move: shedding more cards is good, breaking up a group of
    same-rank cards is bad, low ranks go first. Moves with a 2 are held back
    while the hand still holds more than ``keep_twos_until`` other cards.
    """

    keep_twos_until: int = 3

    def score(self, move: Move, counts: Counter, hand_size: int) -> float:
        if move.size == hand_size:
            return 1000.0
        left_behind = counts[move.rank] - move.size
        return 2.0 * move.size - int(move.rank) - 3.0 * left_behind

    def play_turn(
        self,
        hand: Sequence[Card],
        pile: Sequence[Card],
        discard_pile: Sequence[Card],
        last_move: Move | None,
        rank_lock: Rank | None,
    ) -> Move | None:
        moves = possible_moves(hand, last_move, rank_lock)
        if not moves:
            return None
        counts = Counter(c.rank for c in hand)
        saving_twos = len(hand) > self.keep_twos_until + 1
        candidates = moves
        if saving_twos:
            candidates = [m for m in moves if not m.contains_rank(STRONGEST_RANK)]
            if not candidates:
                # Only 2s left to beat the pile: wait, unless this is our lead.
                if last_move is not None:
                    return None
                candidates = moves
        # max() keeps the first of equal scores, i.e. the weakest move.
        return max(candidates, key=lambda m: self.score(m, counts, len(hand)))


@dataclass
class PolicyAgent(RankExchange):
    """
    Strategy driven by a flat-observation Policy.

    With ``allow_voluntary_pass`` False the policy may only pass when no move is legal.
    """

    policy: Policy
    allow_voluntary_pass: bool = False

    def play_turn(
        self,
        hand: Sequence[Card],
        pile: Sequence[Card],
        discard_pile: Sequence[Card],
        last_move: Move | None,
        rank_lock: Rank | None,
    ) -> Move | None:
        moves = possible_moves(hand, last_move, rank_lock)
        obs = encode_observation(hand, pile, discard_pile, last_move, rank_lock)
        mask = legal_action_mask(moves, allow_pass=self.allow_voluntary_pass)
        action = self.policy.act(obs, mask)
        return move_for_action(action, moves)


class RemoteAgent:
    """Placeholder for a player on another machine. Network play is not implemented."""

    def __init__(self, address: str = "") -> None:
        self.address = address

    def play_turn(
        self,
        hand: Sequence[Card],
        pile: Sequence[Card],
        discard_pile: Sequence[Card],
        last_move: Move | None,
        rank_lock: Rank | None,
    ) -> Move | None:
        raise NotImplementedError(f"Remote play is not available ({self.address or 'no address'})")

    def choose_cards_for_exchange(
        self, hand: Sequence[Card], count: int, prefer_highest: bool
    ) -> List[Card]:
        raise NotImplementedError(f"Remote play is not available ({self.address or 'no address'})")


def make_ai_strategy(difficulty: Difficulty | str, seed: int | None = None) -> Strategy:
    """EASY: random legal moves; MEDIUM: weakest legal move; HARD: evaluation heuristic."""
    difficulty = Difficulty(difficulty)
    if difficulty is Difficulty.EASY:
        return PolicyAgent(RandomAgent(seed=seed))
    if difficulty is Difficulty.MEDIUM:
        return LowestMoveAgent()
    return EvaluateAgent()


__all__ = [
    "Policy",
    "RandomAgent",
    "RankExchange",
    "LowestMoveAgent",
    "EvaluateAgent",
    "PolicyAgent",
    "RemoteAgent",
    "make_ai_strategy",
]
