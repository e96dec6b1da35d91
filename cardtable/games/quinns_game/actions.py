"""
Quinn's Game Actions - The moves players may submit.

Action Types:
- ChooseTopCards: joint setup move; every player stacks cards on their front piles
- PlayCards: play one or more equal-rank cards
- PickUpDiscard: take the whole discard into hand when nothing can be played
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Mapping, Sequence, Union

from ...engine_core.cards import Card
from ...engine_core.players import Player


class ActionType(Enum):
    CHOOSE_TOP_CARDS = "choose_top_cards"
    PLAY_CARDS = "play_cards"
    PICK_UP_DISCARD = "pick_up_discard"


@dataclass(frozen=True)
class ChooseTopCards:
    """
    Place face-up cards from hand onto each front pile.

    `placements` maps every seated player to one list of cards per front
    pile, in pile order.

    Examples:
        ChooseTopCards({alice: [[k1], [q1, q2], [five]], bob: [...]})
    """
    placements: Mapping[Player, Sequence[Sequence[Card]]]

    @property
    def action_type(self) -> ActionType:
        return ActionType.CHOOSE_TOP_CARDS


@dataclass(frozen=True)
class PlayCards:
    player: Player
    cards: Sequence[Card]

    @property
    def action_type(self) -> ActionType:
        return ActionType.PLAY_CARDS


@dataclass(frozen=True)
class PickUpDiscard:
    player: Player

    @property
    def action_type(self) -> ActionType:
        return ActionType.PICK_UP_DISCARD


QuinnsGameAction = Union[ChooseTopCards, PlayCards, PickUpDiscard]
