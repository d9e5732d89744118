"""
One trick ("pli"): players lay increasingly strong moves on the pile until all
but one pass, or a special rule ends the trick early.

Rules applied after every move, in this priority:
- a move containing a 2 (strongest rank) wins the trick at once;
- carré magique (optional): the last four cards of the pile share a rank;
- the player who led the trick just emptied their hand: the next seat holding
  cards wins instead (nobody plays on an empty-handed leader).

Ta Gueule (optional): after two consecutive moves of the same rank (passes in
between do not count), the very next turn must match that rank or pass. The
lock lasts exactly one turn and a third equal move does not re-arm it.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Sequence

from .config import RoundConfig
from .deck import Card, Rank, STRONGEST_RANK
from .moves import Move
from .observers import NullObserver, RoundObserver
from .play import is_legal_move
from .players import Player, RoundAborted

logger = logging.getLogger(__name__)


class TrickEndReason(Enum):
    STRONGEST_RANK = "strongest rank played"
    MAGIC_SQUARE = "magic square"
    LEADER_EMPTIED_HAND = "leader emptied their hand"
    ALL_OTHERS_PASSED = "all other players passed"
    ALL_PASSED = "everyone passed"


@dataclass
class TrickResult:
    leader: Player
    winner: Player | None  # None when everybody passed without a move
    next_leader: Player
    reason: TrickEndReason
    # Players who emptied their hand during this trick, in the order they did.
    finished: List[Player] = field(default_factory=list)
    moves: List[tuple[Player, Move]] = field(default_factory=list)


class TrickEngine:
    """
    Resolves tricks for a fixed seating. The engine owns the pile for the
    duration of a trick and moves its cards into the discard pile when the
    trick ends.
    """

    def __init__(
        self,
        players: Sequence[Player],
        config: RoundConfig | None = None,
        observer: RoundObserver | None = None,
    ) -> None:
        self.players = list(players)
        self.config = config or RoundConfig(num_players=len(self.players))
        self.observer = observer or NullObserver()

    def seat_of(self, player: Player) -> int:
        for i, p in enumerate(self.players):
            if p is player:
                return i
        raise ValueError(f"{player} is not seated at this table")

    def next_active_seat(self, seat: int, include_self: bool = False) -> int | None:
        """First seat holding cards after ``seat`` (or at it, with include_self), wrapping."""
        n = len(self.players)
        first = 0 if include_self else 1
        for step in range(first, first + n):
            i = (seat + step) % n
            if self.players[i].has_cards:
                return i
        return None

    def active_seats(self) -> list[int]:
        return [i for i, p in enumerate(self.players) if p.has_cards]

    def play(self, leader: Player, discard_pile: List[Card]) -> TrickResult:
        """
        Play one trick starting at ``leader`` (or the next seat holding cards).
        Cards of the resolved pile are appended to ``discard_pile``.
        """
        start = self.next_active_seat(self.seat_of(leader), include_self=True)
        if start is None or len(self.active_seats()) < 2:
            raise ValueError("A trick needs at least two players holding cards")

        trick_leader = self.players[start]
        pile: list[Card] = []
        passes: set[int] = set()
        last_move: Move | None = None
        last_mover: int | None = None
        streak_rank: Rank | None = None
        streak = 0
        rank_lock: Rank | None = None
        finished: list[Player] = []
        moves: list[tuple[Player, Move]] = []

        def end(winner: Player | None, next_seat: int | None, reason: TrickEndReason) -> TrickResult:
            discard_pile.extend(pile)
            pile.clear()
            self.observer.on_pile_changed(())
            next_leader = self.players[next_seat] if next_seat is not None else trick_leader
            result = TrickResult(
                leader=trick_leader,
                winner=winner,
                next_leader=next_leader,
                reason=reason,
                finished=finished,
                moves=moves,
            )
            logger.debug(
                "Trick led by %s won by %s: %s",
                trick_leader.name,
                winner.name if winner is not None else "nobody",
                reason.value,
            )
            self.observer.on_trick_end(result)
            return result

        def won_by(seat: int, reason: TrickEndReason) -> TrickResult:
            return end(self.players[seat], self.next_active_seat(seat, include_self=True), reason)

        self.observer.on_pile_changed(())
        seat = start
        while True:
            active = self.active_seats()
            if last_move is not None:
                if all(i in passes for i in active if i != last_mover):
                    return won_by(last_mover, TrickEndReason.ALL_OTHERS_PASSED)
            elif all(i in passes for i in active):
                return end(None, self.next_active_seat(start), TrickEndReason.ALL_PASSED)

            current = self.players[seat]
            if not current.has_cards or seat in passes:
                seat = (seat + 1) % len(self.players)
                continue

            lock, rank_lock = rank_lock, None
            move = self._ask(current, pile, discard_pile, last_move, lock)
            if move is not None and not is_legal_move(current.hand, move, last_move, lock):
                logger.debug("%s returned an illegal move %s, counted as a pass", current.name, move)
                move = None

            if move is None:
                passes.add(seat)
                self.observer.on_turn(current, None)
                seat = (seat + 1) % len(self.players)
                continue

            current.remove_cards(move.cards)
            pile.extend(move.cards)
            passes.clear()
            last_move, last_mover = move, seat
            moves.append((current, move))
            if not current.hand:
                finished.append(current)
            self.observer.on_turn(current, move)
            self.observer.on_pile_changed(tuple(pile))

            if move.rank == streak_rank:
                streak += 1
            else:
                streak_rank, streak = move.rank, 1
            if self.config.force_play and streak == 2:
                rank_lock = move.rank

            if move.contains_rank(STRONGEST_RANK):
                return won_by(seat, TrickEndReason.STRONGEST_RANK)
            if self.config.magic_square and len(pile) >= 4 and len({c.rank for c in pile[-4:]}) == 1:
                return won_by(seat, TrickEndReason.MAGIC_SQUARE)
            if current is trick_leader and not current.hand:
                nxt = self.next_active_seat(seat)
                if nxt is None:
                    return won_by(seat, TrickEndReason.LEADER_EMPTIED_HAND)
                return won_by(nxt, TrickEndReason.LEADER_EMPTIED_HAND)

            seat = (seat + 1) % len(self.players)

    def _ask(
        self,
        player: Player,
        pile: Sequence[Card],
        discard_pile: Sequence[Card],
        last_move: Move | None,
        rank_lock: Rank | None,
    ) -> Move | None:
        """Ask a player for a move; a player that raises is counted as passing."""
        try:
            return player.play_turn(tuple(pile), tuple(discard_pile), last_move, rank_lock)
        except RoundAborted:
            raise
        except Exception as exc:
            logger.warning("Exception during %s.play_turn, counted as a pass", player.name, exc_info=True)
            self.observer.on_player_error(player, exc)
            return None
