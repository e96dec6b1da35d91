"""
Action Results - Outcome of submitting one action to an engine.

Each game defines its own closed union of action dataclasses (see
games/*/actions.py). Whatever the game, submit() answers with an
ActionResult:
1. IN_PROGRESS - accepted, the game waits for the next action
2. FINISHED - accepted, and the game produced its terminal result
3. REJECTED - refused; the engine state is exactly as before the call
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from .errors import GameRuleError


class ActionStatus(Enum):
    IN_PROGRESS = "in_progress"
    FINISHED = "finished"
    REJECTED = "rejected"


@dataclass
class ActionResult:
    """
    Result of submitting an action.

    Contains:
    - The status
    - The terminal result (if the game just finished)
    - Error and error code (if rejected)
    - Human-readable state changes (for a driving harness to display)
    """
    status: ActionStatus
    result: Any | None = None
    error: str | None = None
    error_code: str | None = None
    exception: GameRuleError | None = None
    state_changes: list[str] = field(default_factory=list)

    @property
    def success(self) -> bool:
        return self.status != ActionStatus.REJECTED

    @property
    def is_finished(self) -> bool:
        return self.status == ActionStatus.FINISHED

    @classmethod
    def in_progress(cls, changes: list[str] | None = None) -> ActionResult:
        return cls(status=ActionStatus.IN_PROGRESS, state_changes=changes or [])

    @classmethod
    def finished(cls, result: Any, changes: list[str] | None = None) -> ActionResult:
        """Create a terminal result."""
        return cls(
            status=ActionStatus.FINISHED,
            result=result,
            state_changes=changes or [],
        )

    @classmethod
    def rejected(cls, error: GameRuleError) -> ActionResult:
        """Create a rejection from a rule error."""
        return cls(
            status=ActionStatus.REJECTED,
            error=error.message,
            error_code=error.error_code,
            exception=error,
        )
