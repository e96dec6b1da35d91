"""
Pinochle Actions - The moves players may submit, phase by phase.

Action Types:
- Bid / PassBid: bidding
- ChooseTrump: declarer names trump
- PassCards: declarer and partner swap three cards each
- RevealMeld: all four players show their meld at once
- PlayCard: trick play
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Mapping, Sequence, Union

from ...engine_core.cards import Card, Suit
from ...engine_core.players import Player


class ActionType(Enum):
    BID = "bid"
    PASS_BID = "pass_bid"
    CHOOSE_TRUMP = "choose_trump"
    PASS_CARDS = "pass_cards"
    REVEAL_MELD = "reveal_meld"
    PLAY_CARD = "play_card"


@dataclass(frozen=True)
class Bid:
    player: Player
    amount: int

    @property
    def action_type(self) -> ActionType:
        return ActionType.BID


@dataclass(frozen=True)
class PassBid:
    player: Player

    @property
    def action_type(self) -> ActionType:
        return ActionType.PASS_BID


@dataclass(frozen=True)
class ChooseTrump:
    player: Player
    suit: Suit

    @property
    def action_type(self) -> ActionType:
        return ActionType.CHOOSE_TRUMP


@dataclass(frozen=True)
class PassCards:
    """
    Declarer and partner each hand the other exactly three cards.

    Examples:
        PassCards(bidder=alice, bidder_cards=[a, b, c], partner=carol, partner_cards=[d, e, f])
    """
    bidder: Player
    bidder_cards: Sequence[Card]
    partner: Player
    partner_cards: Sequence[Card]

    @property
    def action_type(self) -> ActionType:
        return ActionType.PASS_CARDS


@dataclass(frozen=True)
class RevealMeld:
    """Every player's claimed meld, possibly empty, keyed by player."""
    melds: Mapping[Player, Sequence[Card]]

    @property
    def action_type(self) -> ActionType:
        return ActionType.REVEAL_MELD


@dataclass(frozen=True)
class PlayCard:
    player: Player
    card: Card

    @property
    def action_type(self) -> ActionType:
        return ActionType.PLAY_CARD


PinochleAction = Union[Bid, PassBid, ChooseTrump, PassCards, RevealMeld, PlayCard]
