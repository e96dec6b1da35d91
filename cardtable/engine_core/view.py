"""
Table Views - Pydantic snapshots of a running game.

A snapshot is taken from one viewer's seat. Card faces are included only
when the card's Facing lets that viewer see them; hidden cards still show
their card_id and facing so piles can be counted and tracked.

Facing only models logical visibility. Keeping the data away from a
client is up to whatever transports these models.
"""

from __future__ import annotations
from typing import Any, Optional, TYPE_CHECKING

from pydantic import BaseModel, Field

from .cards import Card, Facing
from .pile import Pile
from .players import Player

if TYPE_CHECKING:
    from .engine import GameEngine


class CardView(BaseModel):
    """One card as seen by the viewer."""
    card_id: int
    facing: str
    value: Optional[str] = None
    suit: Optional[str] = None

    @property
    def hidden(self) -> bool:
        return self.value is None


class PileView(BaseModel):
    """A pile as seen by the viewer, bottom card first."""
    name: str
    owner_id: Optional[str] = None
    count: int = 0
    cards: list[CardView] = Field(default_factory=list)


class TableView(BaseModel):
    """Everything on the table from one seat."""
    game: str
    phase: str
    viewer_id: Optional[str] = None
    required_player_id: Optional[str] = None
    is_over: bool = False
    piles: list[PileView] = Field(default_factory=list)
    details: dict[str, Any] = Field(default_factory=dict)

    def pile(self, name: str) -> Optional[PileView]:
        for pile in self.piles:
            if pile.name == name:
                return pile
        return None


def can_see(card: Card, owner: Player | None, viewer: Player | None) -> bool:
    """Whether `viewer` may see the face of `card` held in a pile owned by `owner`."""
    if card.facing == Facing.UP:
        return True
    if card.facing == Facing.PLAYER:
        return viewer is not None and viewer == owner
    if card.facing == Facing.AWAY_FROM_PLAYER:
        return viewer is not None and viewer != owner
    return False


def card_view(card: Card, owner: Player | None, viewer: Player | None) -> CardView:
    if can_see(card, owner, viewer):
        return CardView(
            card_id=card.card_id,
            facing=card.facing.value,
            value=card.value.value,
            suit=card.suit.value,
        )
    return CardView(card_id=card.card_id, facing=card.facing.value)


def pile_view(pile: Pile, viewer: Player | None) -> PileView:
    return PileView(
        name=pile.name,
        owner_id=pile.owner.player_id if pile.owner else None,
        count=pile.count(),
        cards=[card_view(card, pile.owner, viewer) for card in pile.cards],
    )


def table_view(engine: GameEngine, viewer: Player | None = None) -> TableView:
    required = engine.required_player
    return TableView(
        game=engine.game_name,
        phase=engine.phase.value,
        viewer_id=viewer.player_id if viewer else None,
        required_player_id=required.player_id if required else None,
        is_over=engine.is_over,
        piles=[pile_view(pile, viewer) for pile in engine.piles()],
        details=engine.view_details(),
    )
