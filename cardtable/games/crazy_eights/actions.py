"""
Crazy Eights Actions - The moves a player may submit.

Action Types:
- PlayCard: play a card from hand (or the card just drawn)
- AnnounceSuit: name the suit after playing an eight
- DrawCard: draw from the deck
- AnnounceDone: keep the drawn card and end the turn
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Union

from ...engine_core.cards import Card, Suit
from ...engine_core.players import Player


class ActionType(Enum):
    PLAY_CARD = "play_card"
    ANNOUNCE_SUIT = "announce_suit"
    DRAW_CARD = "draw_card"
    ANNOUNCE_DONE = "announce_done"


@dataclass(frozen=True)
class PlayCard:
    player: Player
    card: Card

    @property
    def action_type(self) -> ActionType:
        return ActionType.PLAY_CARD


@dataclass(frozen=True)
class AnnounceSuit:
    """Name the suit that follow-on plays must match. Only after an eight."""
    player: Player
    suit: Suit

    @property
    def action_type(self) -> ActionType:
        return ActionType.ANNOUNCE_SUIT


@dataclass(frozen=True)
class DrawCard:
    player: Player

    @property
    def action_type(self) -> ActionType:
        return ActionType.DRAW_CARD


@dataclass(frozen=True)
class AnnounceDone:
    """
    End the turn without playing.

    After a draw the drawn card joins the hand. With nothing left to
    draw it simply passes the turn.
    """
    player: Player

    @property
    def action_type(self) -> ActionType:
        return ActionType.ANNOUNCE_DONE


CrazyEightsAction = Union[PlayCard, AnnounceSuit, DrawCard, AnnounceDone]
