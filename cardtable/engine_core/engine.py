"""
Game Engine - Base class for the per-game rule state machines.

The engine is the single point of state mutation. All changes go through
submit(), which:
- Checks the action belongs to this game
- Refuses everything once the game is over
- Dispatches on (current phase, action type) to a handler
- Returns an ActionResult

Design principles:
- Progress is an explicit phase value plus saved fields, not a suspended
  coroutine; nested sub-decisions are their own phases
- Handlers validate everything before they mutate anything, so a
  rejected action leaves the engine exactly as it was
- Accepted actions are appended to history for replay and logging
"""

from __future__ import annotations
import logging
import random
from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, Callable, ClassVar, Optional

from .action import ActionResult
from .errors import GameRuleError, IllegalAction, NotFound, OutOfTurn, StructuralViolation
from .pile import Pile
from .players import Player, PlayerCircle
from .view import TableView, table_view

logger = logging.getLogger(__name__)

Handler = Callable[[Any], list[str]]


class GameEngine(ABC):
    """
    Shared plumbing for all games.

    Subclasses set `game_name` and `action_types`, build their state in
    __init__, and implement _handlers() and piles().
    """
    game_name: ClassVar[str] = ""
    action_types: ClassVar[tuple[type, ...]] = ()

    def __init__(self, circle: PlayerCircle, rng: random.Random | None = None):
        self.circle = circle
        self.rng = rng or random.Random()
        self.dealer: Player = circle.players[0]
        self.phase: Enum
        self.current_player: Optional[Player] = None
        self.result: Any | None = None
        self.history: list[Any] = []

    @property
    def is_over(self) -> bool:
        return self.result is not None

    @property
    def required_player(self) -> Optional[Player]:
        """The player the game is waiting on; None for joint actions."""
        if self.is_over:
            return None
        return self.current_player

    def submit(self, action: Any) -> ActionResult:
        """
        Apply one action.

        Returns IN_PROGRESS, FINISHED (with the terminal result) or
        REJECTED. Rule violations never escape as exceptions.
        """
        try:
            handler = self._resolve_handler(action)
            changes = handler(action)
        except GameRuleError as e:
            logger.info(
                "%s rejected %s: [%s] %s",
                self.game_name, type(action).__name__, e.error_code, e.message,
            )
            return ActionResult.rejected(e)

        self.history.append(action)
        logger.debug("%s accepted %s: %s", self.game_name, type(action).__name__, changes)

        if self.is_over:
            logger.info("%s finished: %s", self.game_name, self.result)
            return ActionResult.finished(self.result, changes)
        return ActionResult.in_progress(changes)

    def _resolve_handler(self, action: Any) -> Handler:
        if not isinstance(action, self.action_types):
            raise StructuralViolation(
                f"{type(action).__name__} is not a {self.game_name} action"
            )
        if self.is_over:
            raise IllegalAction("Game is over - no actions allowed")
        # Turn before phase, except during joint actions where nobody holds the turn.
        player = getattr(action, "player", None)
        if player is not None and self.current_player is not None:
            self._require_turn(player)
        handler = self._handlers().get(self.phase, {}).get(type(action))
        if handler is None:
            raise IllegalAction(
                f"Can't {action.action_type.value} during {self.phase.value}"
            )
        return handler

    @abstractmethod
    def _handlers(self) -> dict[Enum, dict[type, Handler]]:
        """Map of phase -> {action class -> handler}."""

    def _require_seated(self, player: Player) -> None:
        if not self.circle.includes(player):
            raise NotFound(f"{player} is not in the game")

    def _require_turn(self, player: Player) -> None:
        self._require_seated(player)
        if player != self.current_player:
            raise OutOfTurn(f"Not {player}'s turn")

    @abstractmethod
    def piles(self) -> list[Pile]:
        """Every pile on the table, for snapshots and conservation checks."""

    def view_details(self) -> dict[str, Any]:
        """Game-specific scalars to include in snapshots."""
        return {}

    def snapshot(self, viewer: Player | None = None) -> TableView:
        return table_view(self, viewer)
