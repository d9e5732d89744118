"""
Social roles from the finishing order of a round.
First = Président, second = Vice-Président, second-to-last = Vice-Trou-du-Cul,
last = Trou-du-Cul, everybody else Neutre. With 2 or 3 players positions
overlap: an earlier assignment is never overwritten.
"""
from __future__ import annotations

from typing import List, Sequence

from .players import Player, Role


def role_for_position(index: int, count: int) -> Role:
    """Role of the player finishing at ``index`` (0-based) among ``count`` players."""
    if not 0 <= index < count:
        raise IndexError(f"position {index} out of range for {count} players")
    last = count - 1
    if index == 0:
        return Role.PRESIDENT
    if index == last:
        return Role.ASSHOLE
    if index == 1:
        return Role.VICE_PRESIDENT
    if index == last - 1:
        return Role.VICE_ASSHOLE
    return Role.NEUTRAL


def assign_roles(ranking: Sequence[Player]) -> List[Role]:
    """Set ``player.role`` for every ranked player and return the roles in ranking order."""
    roles = [role_for_position(i, len(ranking)) for i in range(len(ranking))]
    for player, role in zip(ranking, roles):
        player.role = role
    return roles
