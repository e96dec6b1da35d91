"""
Engine Core - Card primitives and the shared engine runtime.

The core provides:
1. Cards, piles, hands and grids (cards only ever move, never copy)
2. Players and the seating circle
3. Deck builders and dealing
4. The GameEngine base with submit() dispatch
5. Rule errors, action results and table snapshots
"""

from .cards import Card, Facing, Suit, Value, SUITS, VALUES
from .pile import Grid, Hand, Pile, Position, require_distinct
from .players import Player, PlayerCircle
from .deck import can_draw, deal, draw_with_reshuffle, pinochle_deck, regular_deck
from .errors import Exhausted, GameRuleError, IllegalAction, NotFound, OutOfTurn, StructuralViolation
from .action import ActionResult, ActionStatus
from .engine import GameEngine
from .view import CardView, PileView, TableView, table_view

__all__ = [
    "Card",
    "Facing",
    "Suit",
    "Value",
    "SUITS",
    "VALUES",
    "Grid",
    "Hand",
    "Pile",
    "Position",
    "require_distinct",
    "Player",
    "PlayerCircle",
    "can_draw",
    "deal",
    "draw_with_reshuffle",
    "pinochle_deck",
    "regular_deck",
    "Exhausted",
    "GameRuleError",
    "IllegalAction",
    "NotFound",
    "OutOfTurn",
    "StructuralViolation",
    "ActionResult",
    "ActionStatus",
    "GameEngine",
    "CardView",
    "PileView",
    "TableView",
    "table_view",
]
