"""
Human player bridge.

The engine runs a round on one (background) thread and blocks inside
``HumanAgent.play_turn`` until a UI thread answers. The exchange is an explicit
request/response channel:

- every decision is published as a ``TurnRequest`` / ``ExchangeRequest`` on
  ``agent.requests`` (and passed to the optional ``on_request`` callback);
- the UI answers with ``submit_move(move_or_None)`` / ``submit_cards(cards)``;
- ``cancel()`` wakes the blocked engine thread with ``RoundAborted`` so the round
  is torn down without touching hands or pile. The cancel is consumed by that
  abort, so the same agent can sit at the next round.

An optional ``timeout`` (seconds) turns an unanswered turn into a pass and an
unanswered exchange into the rank-based selection.
"""
from __future__ import annotations

import queue
import threading
import time
from dataclasses import dataclass
from typing import Callable, Iterable, List, Optional, Sequence, Union

from .deck import Card, Rank
from .moves import Move
from .play import possible_moves
from .players import RoundAborted, select_by_rank


@dataclass(frozen=True)
class TurnRequest:
    hand: tuple[Card, ...]
    pile: tuple[Card, ...]
    discard_pile: tuple[Card, ...]
    last_move: Move | None
    rank_lock: Rank | None
    legal_moves: tuple[Move, ...]


@dataclass(frozen=True)
class ExchangeRequest:
    hand: tuple[Card, ...]
    count: int
    prefer_highest: bool


Request = Union[TurnRequest, ExchangeRequest]


class HumanAgent:
    def __init__(
        self,
        timeout: float | None = None,
        on_request: Optional[Callable[[Request], None]] = None,
        poll_interval: float = 0.05,
    ) -> None:
        self.timeout = timeout
        self.on_request = on_request
        self.poll_interval = poll_interval
        self.requests: "queue.Queue[Request]" = queue.Queue()
        self._responses: "queue.Queue[object]" = queue.Queue()
        self.cancel_requested = threading.Event()

    # ---- UI side ----

    def submit_move(self, move: Move | None) -> None:
        self._responses.put(move)

    def submit_cards(self, cards: Iterable[Card]) -> None:
        self._responses.put(list(cards))

    def cancel(self) -> None:
        self.cancel_requested.set()

    # ---- engine side ----

    def _publish(self, request: Request) -> None:
        # Drop answers that arrived after an earlier request timed out.
        while True:
            try:
                self._responses.get_nowait()
            except queue.Empty:
                break
        self.requests.put(request)
        if self.on_request is not None:
            self.on_request(request)

    def _wait(self) -> object:
        deadline = None if self.timeout is None else time.monotonic() + self.timeout
        while True:
            if self.cancel_requested.is_set():
                # One cancel aborts one wait; the seat can join the next round.
                self.cancel_requested.clear()
                raise RoundAborted("human player wait cancelled")
            wait = self.poll_interval
            if deadline is not None:
                remaining = deadline - time.monotonic()
                if remaining <= 0:
                    raise TimeoutError("no answer from the human player")
                wait = min(wait, remaining)
            try:
                return self._responses.get(timeout=wait)
            except queue.Empty:
                continue

    def play_turn(
        self,
        hand: Sequence[Card],
        pile: Sequence[Card],
        discard_pile: Sequence[Card],
        last_move: Move | None,
        rank_lock: Rank | None,
    ) -> Move | None:
        self._publish(
            TurnRequest(
                hand=tuple(hand),
                pile=tuple(pile),
                discard_pile=tuple(discard_pile),
                last_move=last_move,
                rank_lock=rank_lock,
                legal_moves=tuple(possible_moves(hand, last_move, rank_lock)),
            )
        )
        try:
            answer = self._wait()
        except TimeoutError:
            return None
        return answer if isinstance(answer, Move) else None

    def choose_cards_for_exchange(
        self, hand: Sequence[Card], count: int, prefer_highest: bool
    ) -> List[Card]:
        self._publish(ExchangeRequest(hand=tuple(hand), count=count, prefer_highest=prefer_highest))
        try:
            answer = self._wait()
        except TimeoutError:
            return select_by_rank(hand, count, highest=prefer_highest)
        return list(answer) if isinstance(answer, list) else select_by_rank(hand, count, prefer_highest)
