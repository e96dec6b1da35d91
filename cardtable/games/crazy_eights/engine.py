"""
Crazy Eights - Shed your hand by matching the discard.

Turn flow:
1. TURN: play a card matching the discard top's suit or rank (eights are
   always wild), or draw
2. ANNOUNCE_SUIT: after an eight, the same player names a suit
3. DRAWN: after a draw, play the drawn card if it is legal or announce
   done to keep it

A named suit is bound to the eight it was announced on. It holds while
that eight is the discard top and lapses as soon as another card lands.
"""

from __future__ import annotations
import random
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from ...engine_core.cards import Card, Facing, Suit, Value
from ...engine_core.deck import can_draw, deal, draw_with_reshuffle, regular_deck
from ...engine_core.engine import GameEngine
from ...engine_core.errors import IllegalAction, NotFound, StructuralViolation
from ...engine_core.pile import Hand, Pile
from ...engine_core.players import Player, PlayerCircle
from .actions import AnnounceDone, AnnounceSuit, DrawCard, PlayCard


class Phase(Enum):
    TURN = "turn"
    ANNOUNCE_SUIT = "announce_suit"
    DRAWN = "drawn"
    GAME_OVER = "game_over"


# Hand size by number of players
HAND_SIZES = {2: 7, 3: 7, 4: 5, 5: 5, 6: 5, 7: 5}


@dataclass(frozen=True)
class DeclaredSuit:
    """A suit named after an eight, valid while `eight` tops the discard."""
    suit: Suit
    eight: Card


def can_play_on(card: Card, top: Card, declared: Optional[Suit] = None) -> bool:
    """Whether `card` may go on `top` given the active declared suit, if any."""
    if card.value == Value.EIGHT:
        return True
    if declared is not None:
        return card.suit == declared
    return card.suit == top.suit or card.value == top.value


class CrazyEights(GameEngine):
    """
    Crazy Eights for 2-7 players.

    The dealer (first seated player) shuffles, deals and takes the
    opening turn. Result: the winning Player.
    """
    game_name = "crazy_eights"
    action_types = (PlayCard, AnnounceSuit, DrawCard, AnnounceDone)

    def __init__(self, circle: PlayerCircle, rng: random.Random | None = None):
        super().__init__(circle, rng)
        hand_size = HAND_SIZES.get(len(circle))
        if hand_size is None:
            raise StructuralViolation(
                f"Crazy Eights needs 2-7 players, got {len(circle)}"
            )

        self.deck = regular_deck()
        self.discard = Pile(name="discard")
        self.drawn = Pile(name="drawn")
        self.hands: dict[Player, Hand] = {p: Hand(p) for p in circle}
        self.declared: Optional[DeclaredSuit] = None

        self.deck.shuffle(self.rng)
        deal(hand_size, self.deck, [self.hands[p] for p in circle], Facing.PLAYER)
        self.discard.add(self.deck.take_top(), Facing.UP)

        self.current_player = self.dealer
        self.phase = Phase.TURN

    def _handlers(self):
        return {
            Phase.TURN: {
                PlayCard: self._handle_play,
                DrawCard: self._handle_draw,
                AnnounceDone: self._handle_pass,
            },
            Phase.ANNOUNCE_SUIT: {
                AnnounceSuit: self._handle_announce_suit,
            },
            Phase.DRAWN: {
                PlayCard: self._handle_play_drawn,
                AnnounceDone: self._handle_keep_drawn,
            },
        }

    @property
    def declared_suit(self) -> Optional[Suit]:
        """The named suit, if its eight is still the discard top."""
        if self.declared is not None and self.discard.peek_top() is self.declared.eight:
            return self.declared.suit
        return None

    def is_playable(self, card: Card) -> bool:
        return can_play_on(card, self.discard.peek_top(), self.declared_suit)

    def playable_cards(self, player: Player) -> list[Card]:
        """Cards in the player's hand that could go on the discard right now."""
        self._require_seated(player)
        return [card for card in self.hands[player] if self.is_playable(card)]

    def _handle_play(self, action: PlayCard) -> list[str]:
        self._require_turn(action.player)
        hand = self.hands[action.player]
        if not hand.includes(action.card):
            raise NotFound(f"{action.card} is not in {action.player}'s hand")
        if not self.is_playable(action.card):
            raise IllegalAction(f"Can't play {action.card} on {self.discard.peek_top()}")

        hand.take(action.card)
        return self._land_on_discard(action.player, action.card)

    def _handle_draw(self, action: DrawCard) -> list[str]:
        self._require_turn(action.player)
        card = draw_with_reshuffle(self.deck, self.discard, self.rng)
        self.drawn.owner = action.player
        self.drawn.add(card, Facing.PLAYER)
        self.phase = Phase.DRAWN
        return [f"{action.player} drew a card"]

    def _handle_pass(self, action: AnnounceDone) -> list[str]:
        """Done without drawing: only allowed when nothing can be drawn."""
        self._require_turn(action.player)
        if can_draw(self.deck, self.discard):
            raise IllegalAction("Must play or draw while there are cards to draw")
        return [f"{action.player} passed"] + self._end_turn(action.player)

    def _handle_announce_suit(self, action: AnnounceSuit) -> list[str]:
        self._require_turn(action.player)
        if not isinstance(action.suit, Suit):
            raise StructuralViolation(f"{action.suit!r} is not a suit")
        self.declared = DeclaredSuit(suit=action.suit, eight=self.discard.peek_top())
        return [f"{action.player} named {action.suit.value}"] + self._end_turn(action.player)

    def _handle_play_drawn(self, action: PlayCard) -> list[str]:
        self._require_turn(action.player)
        if not self.drawn.includes(action.card):
            raise IllegalAction("After drawing, only the drawn card may be played")
        if not self.is_playable(action.card):
            raise IllegalAction(f"Can't play {action.card} on {self.discard.peek_top()}")

        self.drawn.take(action.card)
        return self._land_on_discard(action.player, action.card)

    def _handle_keep_drawn(self, action: AnnounceDone) -> list[str]:
        self._require_turn(action.player)
        self.hands[action.player].add_all(self.drawn.take_all(), Facing.PLAYER)
        return [f"{action.player} kept the drawn card"] + self._end_turn(action.player)

    def _land_on_discard(self, player: Player, card: Card) -> list[str]:
        self.discard.add(card, Facing.UP)
        self.declared = None
        changes = [f"{player} played {card}"]
        if card.value == Value.EIGHT:
            self.phase = Phase.ANNOUNCE_SUIT
            return changes
        return changes + self._end_turn(player)

    def _end_turn(self, player: Player) -> list[str]:
        if self.hands[player].is_empty:
            self.phase = Phase.GAME_OVER
            self.result = player
            return [f"{player} wins"]
        self.phase = Phase.TURN
        self.current_player = self.circle.left_of(player)
        return []

    def piles(self) -> list[Pile]:
        return [self.deck, self.discard, self.drawn] + [self.hands[p] for p in self.circle]

    def view_details(self) -> dict:
        suit = self.declared_suit
        return {"declared_suit": suit.value if suit else None}
