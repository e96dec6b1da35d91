"""
Golf - Swap cards into a face-down grid and keep your score low.

Turn flow:
1. TURN: draw from the deck, or take the discard top straight into a slot
2. DRAWN: discard the drawn card, or swap it into a slot

A swap sends the replaced slot card face up to the discard. Before each
turn, a player whose whole grid is face up ends the game.
"""

from __future__ import annotations
import random
from enum import Enum

from ...engine_core.cards import Card, Facing
from ...engine_core.deck import deal, draw_with_reshuffle, regular_deck
from ...engine_core.engine import GameEngine
from ...engine_core.errors import IllegalAction, NotFound, StructuralViolation
from ...engine_core.pile import Grid, Pile
from ...engine_core.players import Player, PlayerCircle
from .actions import DiscardDrawn, Draw, Play
from .scoring import score_grid


class Phase(Enum):
    TURN = "turn"
    DRAWN = "drawn"
    GAME_OVER = "game_over"


GRID_WIDTH = 4
GRID_HEIGHT = 2
MIN_PLAYERS = 2
MAX_PLAYERS = 6  # 8 cards each plus the first discard must fit in 52


class Golf(GameEngine):
    """
    Golf for 2-6 players.

    Result: dict mapping each Player to their grid score.
    """
    game_name = "golf"
    action_types = (Draw, Play, DiscardDrawn)

    def __init__(self, circle: PlayerCircle, rng: random.Random | None = None):
        super().__init__(circle, rng)
        if not MIN_PLAYERS <= len(circle) <= MAX_PLAYERS:
            raise StructuralViolation(
                f"Golf needs {MIN_PLAYERS}-{MAX_PLAYERS} players, got {len(circle)}"
            )

        self.deck = regular_deck()
        self.discard = Pile(name="discard")
        self.drawn = Pile(name="drawn")
        self.grids: dict[Player, Grid] = {
            p: Grid(GRID_WIDTH, GRID_HEIGHT, name=f"{p.player_id}_grid", owner=p)
            for p in circle
        }

        self.deck.shuffle(self.rng)
        deal(1, self.deck, [slot for p in circle for slot in self.grids[p].items], Facing.DOWN)
        self.discard.add(self.deck.take_top(), Facing.UP)

        self.current_player = self.dealer
        self.phase = Phase.TURN

    def _handlers(self):
        return {
            Phase.TURN: {
                Draw: self._handle_draw,
                Play: self._handle_take_discard,
            },
            Phase.DRAWN: {
                Play: self._handle_play_drawn,
                DiscardDrawn: self._handle_discard_drawn,
            },
        }

    def _handle_draw(self, action: Draw) -> list[str]:
        self._require_turn(action.player)
        card = draw_with_reshuffle(self.deck, self.discard, self.rng)
        self.drawn.owner = action.player
        self.drawn.add(card, Facing.PLAYER)
        self.phase = Phase.DRAWN
        return [f"{action.player} drew a card"]

    def _handle_take_discard(self, action: Play) -> list[str]:
        self._require_turn(action.player)
        if action.take_card is not self.discard.peek_top():
            raise IllegalAction("Without drawing, only the discard top can be taken")
        slot = self._find_slot(action.player, action.replace_card)

        self.discard.take_top()
        return self._swap(action.player, slot, action.take_card)

    def _handle_play_drawn(self, action: Play) -> list[str]:
        self._require_turn(action.player)
        if not self.drawn.includes(action.take_card):
            raise IllegalAction("After drawing, only the drawn card can be played")
        slot = self._find_slot(action.player, action.replace_card)

        self.drawn.take(action.take_card)
        return self._swap(action.player, slot, action.take_card)

    def _handle_discard_drawn(self, action: DiscardDrawn) -> list[str]:
        self._require_turn(action.player)
        card = self.drawn.take_top()
        self.discard.add(card, Facing.UP)
        return [f"{action.player} discarded {card}"] + self._end_turn(action.player)

    def _find_slot(self, player: Player, card: Card) -> Pile:
        grid = self.grids[player]
        pos = grid.find_xy(lambda pile: pile.includes(card))
        if pos is None:
            raise NotFound(f"{card} is not in {player}'s grid")
        return grid.get(pos)

    def _swap(self, player: Player, slot: Pile, card: Card) -> list[str]:
        replaced = slot.take_top()
        self.discard.add(replaced, Facing.UP)
        slot.add(card, Facing.UP)
        changes = [f"{player} swapped {card} in for {replaced}"]
        return changes + self._end_turn(player)

    def _end_turn(self, player: Player) -> list[str]:
        self.phase = Phase.TURN
        self.current_player = self.circle.left_of(player)
        if self.grid_revealed(self.current_player):
            self.phase = Phase.GAME_OVER
            self.result = self.scores()
            return [f"{self.current_player} has a full grid; game over"]
        return []

    def grid_revealed(self, player: Player) -> bool:
        return all(card.facing == Facing.UP for card in self.grids[player].cards())

    def scores(self) -> dict[Player, int]:
        return {p: score_grid(self.grids[p]) for p in self.circle}

    def piles(self) -> list[Pile]:
        slots = [slot for p in self.circle for slot in self.grids[p].items]
        return [self.deck, self.discard, self.drawn] + slots
