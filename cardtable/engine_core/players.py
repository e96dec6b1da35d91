"""
Players - Player identities and the seating circle.

The circle defines turn succession and partnerships. It is fixed for the
life of an engine: no late joins, no leaves.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Iterable, Iterator

from .errors import IllegalAction, NotFound, StructuralViolation


@dataclass(frozen=True)
class Player:
    """A seated player. Identity is player_id; name is for display."""
    player_id: str
    name: str = field(default="", compare=False)

    def __str__(self) -> str:
        return self.name or self.player_id


class PlayerCircle:
    """
    Fixed cyclic seating order.

    "Left" is the next seat in order, wrapping around at the end.
    """

    def __init__(self, players: Iterable[Player]):
        players = tuple(players)
        if not players:
            raise StructuralViolation("A circle needs at least one player")
        ids = [p.player_id for p in players]
        if len(set(ids)) != len(ids):
            raise StructuralViolation("Player ids must be unique")
        self._players = players

    @property
    def players(self) -> tuple[Player, ...]:
        return self._players

    def __len__(self) -> int:
        return len(self._players)

    def __iter__(self) -> Iterator[Player]:
        return iter(self._players)

    def __contains__(self, player: object) -> bool:
        return player in self._players

    def includes(self, player: Player) -> bool:
        return player in self._players

    def seat_of(self, player: Player) -> int:
        """Seat index of a player; NotFound if they are not seated."""
        try:
            return self._players.index(player)
        except ValueError:
            raise NotFound(f"{player} is not seated in this circle") from None

    def left_of(self, player: Player) -> Player:
        seat = self.seat_of(player)
        return self._players[(seat + 1) % len(self._players)]

    def left_of_excluding(self, player: Player, excluded: Iterable[Player]) -> Player:
        """
        Next seated player to the left who is not in `excluded`.

        The starting player may itself be excluded. Fails when every
        seat is excluded.
        """
        excluded = set(excluded)
        seat = self.seat_of(player)
        if all(p in excluded for p in self._players):
            raise IllegalAction("Every player is excluded")
        for step in range(1, len(self._players) + 1):
            candidate = self._players[(seat + step) % len(self._players)]
            if candidate not in excluded:
                return candidate
        raise IllegalAction("Every player is excluded")

    def opposite_of(self, player: Player) -> Player:
        """Partner across the table. Only defined for an even seat count."""
        seat = self.seat_of(player)
        if len(self._players) % 2 != 0:
            raise StructuralViolation("opposite_of needs an even number of players")
        half = len(self._players) // 2
        return self._players[(seat + half) % len(self._players)]

    def __repr__(self) -> str:
        return f"PlayerCircle({[p.player_id for p in self._players]!r})"
