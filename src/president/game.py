"""
Round and match orchestration: deal → exchange → tricks until one hand is left → ranking → roles.
The ranking lists players in the order they emptied their hand; the last hand-holder closes it.
"""
from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from typing import Dict, List, Sequence

from .config import RoundConfig
from .deal import deal_cards
from .deck import Card
from .exchange import Exchange, exchange_cards
from .observers import NullObserver, RoundObserver
from .players import Player, Role
from .roles import assign_roles
from .trick import TrickEngine, TrickResult

logger = logging.getLogger(__name__)

# Consecutive tricks ending with nobody playing before a round is declared stalled.
MAX_IDLE_TRICKS = 100


class RoundStalledError(RuntimeError):
    """No player ever plays: the round cannot reach a ranking."""


@dataclass
class RoundResult:
    ranking: List[Player]
    discard_pile: List[Card]
    tricks: List[TrickResult] = field(default_factory=list)
    exchanges: List[Exchange] = field(default_factory=list)


def play_round(
    players: Sequence[Player],
    config: RoundConfig,
    leader: Player | None = None,
    observer: RoundObserver | None = None,
    discard_pile: List[Card] | None = None,
) -> RoundResult:
    """
    Play tricks on the already dealt hands until at most one player holds cards.

    ``leader`` opens the first trick (seat 0 when None). Raises
    ConfigurationError if ``players`` does not match ``config.num_players``.
    """
    config.validate_players(players)
    observer = observer or NullObserver()
    engine = TrickEngine(players, config, observer)
    discard_pile = [] if discard_pile is None else discard_pile
    ranking: list[Player] = []
    tricks: list[TrickResult] = []
    current = leader if leader is not None else players[0]

    def rank(player: Player) -> None:
        if any(p is player for p in ranking):
            return
        ranking.append(player)
        observer.on_player_finished(player, len(ranking))

    # Hands emptied before the first trick (e.g. empty deal) still count, in seat order.
    for p in players:
        if not p.has_cards:
            rank(p)

    idle_tricks = 0
    while len(engine.active_seats()) > 1:
        result = engine.play(current, discard_pile)
        tricks.append(result)
        for p in result.finished:
            rank(p)
        current = result.next_leader
        idle_tricks = idle_tricks + 1 if result.winner is None else 0
        if idle_tricks >= MAX_IDLE_TRICKS:
            raise RoundStalledError("every player passes on an empty pile")

    for p in players:
        rank(p)

    logger.debug("Round finished after %d tricks: %s", len(tricks), [p.name for p in ranking])
    return RoundResult(ranking=ranking, discard_pile=discard_pile, tricks=tricks)


@dataclass
class MatchResult:
    rankings: List[List[Player]] = field(default_factory=list)
    # player name -> role -> number of rounds finished with that role
    role_counts: Dict[str, Dict[Role, int]] = field(default_factory=dict)


class Game:
    """
    A session of consecutive rounds at one table.

    Usage:
        game = Game(players, RoundConfig(num_players=len(players)), rng=random.Random(7))
        result = game.play_round()
    """

    def __init__(
        self,
        players: Sequence[Player],
        config: RoundConfig | None = None,
        observer: RoundObserver | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self.players = list(players)
        self.config = config or RoundConfig(num_players=len(self.players))
        self.observer = observer or NullObserver()
        self.rng = rng or random.Random()
        self.last_ranking: List[Player] = []
        self.rounds_played = 0
        # player name -> role -> rounds finished with that role
        self.role_counts: Dict[str, Dict[Role, int]] = {p.name: {r: 0 for r in Role} for p in self.players}
        for p in self.players:
            p.role = Role.NEUTRAL

    def deal(self) -> None:
        hands = deal_cards(len(self.players), rng=self.rng)
        for player, hand in zip(self.players, hands):
            player.hand.clear()
            player.receive_cards(hand)

    def next_leader(self) -> Player:
        """Last round's Trou-du-Cul opens; seat 0 on the first round."""
        if self.last_ranking:
            return self.last_ranking[-1]
        return self.players[0]

    def play_round(self) -> RoundResult:
        self.config.validate_players(self.players)
        self.deal()
        exchanges = exchange_cards(self.last_ranking, self.observer) if self.last_ranking else []
        result = play_round(self.players, self.config, self.next_leader(), self.observer)
        result.exchanges = exchanges
        assign_roles(result.ranking)
        for p in result.ranking:
            self.role_counts[p.name][p.role] += 1
        self.last_ranking = list(result.ranking)
        self.rounds_played += 1
        self.observer.on_round_end(result.ranking)
        return result

    def run_match(self, num_rounds: int) -> MatchResult:
        rankings = [self.play_round().ranking for _ in range(num_rounds)]
        return MatchResult(
            rankings=rankings,
            role_counts={name: dict(counts) for name, counts in self.role_counts.items()},
        )
