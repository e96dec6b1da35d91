"""
Rule Errors - Exception taxonomy for rejected actions.

Every rule violation raised by the primitives or an engine handler is a
GameRuleError. GameEngine.submit() turns them into rejected ActionResults;
anything else is a programming error and propagates.

Error codes:
- NOT_FOUND: a referenced card or player is absent from its container
- OUT_OF_TURN: the acting player is not the one the game is waiting on
- ILLEGAL_ACTION: right player, but the move breaks a game rule
- STRUCTURAL_VIOLATION: malformed payload (wrong counts, duplicates)
- EXHAUSTED: no cards left to draw or deal
"""

from __future__ import annotations


class GameRuleError(Exception):
    """Base class for all rule violations."""
    error_code = "RULE_ERROR"

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class NotFound(GameRuleError):
    """A card or player is not where the action says it is."""
    error_code = "NOT_FOUND"


class OutOfTurn(GameRuleError):
    error_code = "OUT_OF_TURN"


class IllegalAction(GameRuleError):
    error_code = "ILLEGAL_ACTION"


class StructuralViolation(GameRuleError):
    """Malformed payload: wrong counts, duplicate or foreign cards."""
    error_code = "STRUCTURAL_VIOLATION"


class Exhausted(GameRuleError):
    """Deck (and discard, where it refills the deck) ran dry."""
    error_code = "EXHAUSTED"
