"""
Golf Scoring - Column-by-column grid scoring.

Low score wins. Per column, left to right:
- Both cards share a rank: 0
- ...and the previous column matched with that same rank: -20 (a dream).
  The previous column is used up, so three matching columns in a row
  dream once, not twice.
- Otherwise the column costs the sum of its cards.
"""

from __future__ import annotations
from typing import Optional

from ...engine_core.cards import Card, Value
from ...engine_core.pile import Grid

DREAM_BONUS = -20

CARD_COSTS = {
    Value.ACE: 1,
    Value.TWO: 2,
    Value.THREE: 3,
    Value.FOUR: 4,
    Value.FIVE: 5,
    Value.SIX: 6,
    Value.SEVEN: 7,
    Value.EIGHT: 8,
    Value.NINE: 9,
    Value.TEN: 10,
    Value.JACK: 0,
    Value.QUEEN: 13,
    Value.KING: 0,
}


def card_cost(card: Card) -> int:
    return CARD_COSTS[card.value]


def grid_columns(grid: Grid) -> list[list[Card]]:
    """Cards of each column, top row first. Every slot must hold one card."""
    return [
        [grid.get((x, y)).peek_top() for y in range(grid.height)]
        for x in range(grid.width)
    ]


def score_columns(columns: list[list[Card]]) -> int:
    total = 0
    previous_match: Optional[Value] = None
    for column in columns:
        ranks = {card.value for card in column}
        if len(ranks) == 1:
            rank = column[0].value
            if previous_match == rank:
                total += DREAM_BONUS
                previous_match = None
            else:
                previous_match = rank
        else:
            total += sum(card_cost(card) for card in column)
            previous_match = None
    return total


def score_grid(grid: Grid) -> int:
    return score_columns(grid_columns(grid))
