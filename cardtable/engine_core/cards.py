"""
Cards - Suits, values, facings and card instances.

A Card is a runtime instance: two cards with the same value and suit are
still different cards (pinochle uses a doubled deck). Cards compare and
hash by identity; card_id is the stable handle the deck builder assigns.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum


class Suit(Enum):
    HEARTS = "hearts"
    SPADES = "spades"
    DIAMONDS = "diamonds"
    CLUBS = "clubs"


class Value(Enum):
    ACE = "ace"
    TWO = "two"
    THREE = "three"
    FOUR = "four"
    FIVE = "five"
    SIX = "six"
    SEVEN = "seven"
    EIGHT = "eight"
    NINE = "nine"
    TEN = "ten"
    JACK = "jack"
    QUEEN = "queen"
    KING = "king"


class Facing(Enum):
    """
    Logical visibility of a card.

    PLAYER and AWAY_FROM_PLAYER are relative to the owner of the pile
    holding the card.
    """
    DOWN = "down"  # nobody
    UP = "up"  # everybody
    PLAYER = "player"  # owner only
    AWAY_FROM_PLAYER = "away_from_player"  # everybody but the owner


SUITS = [Suit.HEARTS, Suit.SPADES, Suit.DIAMONDS, Suit.CLUBS]

VALUES = [
    Value.ACE, Value.TWO, Value.THREE, Value.FOUR, Value.FIVE, Value.SIX,
    Value.SEVEN, Value.EIGHT, Value.NINE, Value.TEN, Value.JACK,
    Value.QUEEN, Value.KING,
]


@dataclass(eq=False)
class Card:
    """
    A card instance in a game.

    Identity-based equality: membership tests and removal from piles
    look for this exact object, never for an equal-looking one.
    """
    value: Value
    suit: Suit
    facing: Facing = Facing.DOWN
    card_id: int = 0

    def matches(self, value: Value, suit: Suit) -> bool:
        return self.value == value and self.suit == suit

    def __str__(self) -> str:
        return f"{self.value.value} of {self.suit.value}"
