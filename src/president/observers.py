"""
Round observers: the hook through which a UI or a log follows a round.

The engine never exposes live state: every pile passed to an observer is a
snapshot (tuple). ``NullObserver`` is the default; ``LoggingObserver`` writes
each event with the standard logging module.
"""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Protocol, Sequence

from .deck import Card
from .moves import Move

if TYPE_CHECKING:  # pragma: no cover - import cycle guard for type checking only
    from .players import Player
    from .trick import TrickResult


class RoundObserver(Protocol):
    def on_pile_changed(self, pile: tuple[Card, ...]) -> None:
        ...

    def on_turn(self, player: "Player", move: Move | None) -> None:
        """``move`` is None when the player passed."""

    def on_player_error(self, player: "Player", error: BaseException) -> None:
        ...

    def on_trick_end(self, result: "TrickResult") -> None:
        ...

    def on_player_finished(self, player: "Player", position: int) -> None:
        ...

    def on_exchange(self, giver: "Player", receiver: "Player", cards: Sequence[Card]) -> None:
        ...

    def on_round_end(self, ranking: Sequence["Player"]) -> None:
        ...


class NullObserver:
    """Observer that ignores everything."""

    def on_pile_changed(self, pile: tuple[Card, ...]) -> None:
        pass

    def on_turn(self, player: "Player", move: Move | None) -> None:
        pass

    def on_player_error(self, player: "Player", error: BaseException) -> None:
        pass

    def on_trick_end(self, result: "TrickResult") -> None:
        pass

    def on_player_finished(self, player: "Player", position: int) -> None:
        pass

    def on_exchange(self, giver: "Player", receiver: "Player", cards: Sequence[Card]) -> None:
        pass

    def on_round_end(self, ranking: Sequence["Player"]) -> None:
        pass


class LoggingObserver(NullObserver):
    """Writes round events to a logger (``president.round`` by default)."""

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self.logger = logger or logging.getLogger("president.round")

    def on_pile_changed(self, pile: tuple[Card, ...]) -> None:
        self.logger.debug("Pile: %s", " ".join(str(c) for c in pile) or "(empty)")

    def on_turn(self, player: "Player", move: Move | None) -> None:
        if move is None:
            self.logger.info("%s passes", player.name)
        else:
            self.logger.info("%s plays %s", player.name, move)

    def on_player_error(self, player: "Player", error: BaseException) -> None:
        self.logger.warning("%s failed to play (%s), counted as a pass", player.name, error)

    def on_trick_end(self, result: "TrickResult") -> None:
        winner = result.winner.name if result.winner is not None else "nobody"
        self.logger.info("Trick won by %s (%s)", winner, result.reason.value)

    def on_player_finished(self, player: "Player", position: int) -> None:
        self.logger.info("%s finished (position %d)", player.name, position)

    def on_exchange(self, giver: "Player", receiver: "Player", cards: Sequence[Card]) -> None:
        self.logger.info(
            "%s gives %s to %s", giver.name, ", ".join(str(c) for c in cards), receiver.name
        )

    def on_round_end(self, ranking: Sequence["Player"]) -> None:
        self.logger.info(
            "Round over, ranking: %s",
            ", ".join(f"{p.name} ({p.role})" for p in ranking),
        )
