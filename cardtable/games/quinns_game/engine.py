"""
Quinn's Game - Climb the ranks, burn the pile, empty your hand and table.

Each player holds a hand and three front piles: a face-down card with
face-up cards stacked on it during setup. Cards are played in this order:
1. From hand, while it has cards
2. Then a whole face-up run from one front pile
3. Then, blind, one face-down card at a time

Ranks climb 4 < 5 < ... < 9 < J < Q < K < A. Twos, threes and tens go on
anything; threes are see-through when working out what to beat, twos reset
the climb. A ten, or four equal ranks on top, burns the discard to the
trash and the same player goes again.
"""

from __future__ import annotations
import random
from enum import Enum
from typing import Optional, Sequence

from ...engine_core.cards import Card, Facing, Value
from ...engine_core.deck import deal, regular_deck
from ...engine_core.engine import GameEngine
from ...engine_core.errors import IllegalAction, NotFound, StructuralViolation
from ...engine_core.pile import Grid, Hand, Pile, require_distinct
from ...engine_core.players import Player, PlayerCircle
from .actions import ChooseTopCards, PickUpDiscard, PlayCards


class Phase(Enum):
    SETUP = "setup"
    TURN = "turn"
    GAME_OVER = "game_over"


RANK_ORDER = [
    Value.FOUR, Value.FIVE, Value.SIX, Value.SEVEN, Value.EIGHT, Value.NINE,
    Value.JACK, Value.QUEEN, Value.KING, Value.ACE,
]
ALWAYS_PLAYABLE = {Value.TWO, Value.THREE, Value.TEN}

INITIAL_HAND = 6
FRONT_PILES = 3
DRAW_UP_TO = 3
MIN_PLAYERS = 2
MAX_PLAYERS = 5  # 9 cards each


def active_rank(discard: Pile) -> Optional[Value]:
    """The rank a play must meet, or None when anything goes."""
    for card in reversed(discard.cards):
        if card.value == Value.THREE:
            continue
        if card.value in RANK_ORDER:
            return card.value
        return None
    return None


def can_play(card: Card, discard: Pile) -> bool:
    if card.value in ALWAYS_PLAYABLE:
        return True
    rank = active_rank(discard)
    if rank is None:
        return True
    return RANK_ORDER.index(card.value) >= RANK_ORDER.index(rank)


def _require_same_rank(cards: Sequence[Card]) -> None:
    if any(card.value != cards[0].value for card in cards):
        raise IllegalAction("All cards played together must share a rank")


class QuinnsGame(GameEngine):
    """
    Quinn's Game for 2-5 players.

    Result: the first Player to run out of hand and front-pile cards.
    """
    game_name = "quinns_game"
    action_types = (ChooseTopCards, PlayCards, PickUpDiscard)

    def __init__(self, circle: PlayerCircle, rng: random.Random | None = None):
        super().__init__(circle, rng)
        if not MIN_PLAYERS <= len(circle) <= MAX_PLAYERS:
            raise StructuralViolation(
                f"Quinn's Game needs {MIN_PLAYERS}-{MAX_PLAYERS} players, got {len(circle)}"
            )

        self.deck = regular_deck()
        self.discard = Pile(name="discard")
        self.trash = Pile(name="trash")
        self.hands: dict[Player, Hand] = {p: Hand(p) for p in circle}
        self.fronts: dict[Player, Grid] = {
            p: Grid(FRONT_PILES, 1, name=f"{p.player_id}_front", owner=p) for p in circle
        }

        self.deck.shuffle(self.rng)
        deal(INITIAL_HAND, self.deck, [self.hands[p] for p in circle], Facing.PLAYER)
        deal(1, self.deck, [pile for p in circle for pile in self.fronts[p].items], Facing.DOWN)

        self.phase = Phase.SETUP

    def _handlers(self):
        return {
            Phase.SETUP: {
                ChooseTopCards: self._handle_choose_top_cards,
            },
            Phase.TURN: {
                PlayCards: self._handle_play,
                PickUpDiscard: self._handle_pick_up,
            },
        }

    def _handle_choose_top_cards(self, action: ChooseTopCards) -> list[str]:
        placements = action.placements
        for player in placements:
            self._require_seated(player)
        missing = [p for p in self.circle if p not in placements]
        if missing:
            raise StructuralViolation(
                f"Top cards missing for {', '.join(str(p) for p in missing)}"
            )

        for player, piles in placements.items():
            if len(piles) != FRONT_PILES:
                raise StructuralViolation(
                    f"{player} must choose cards for exactly {FRONT_PILES} piles"
                )
            if any(len(cards) == 0 for cards in piles):
                raise StructuralViolation(f"{player} must add a card to every front pile")
            placed = [card for cards in piles for card in cards]
            require_distinct(placed)
            hand = self.hands[player]
            for card in placed:
                if not hand.includes(card):
                    raise NotFound(f"{card} is not in {player}'s hand")
            for cards in piles:
                _require_same_rank(cards)

        for player, piles in placements.items():
            hand = self.hands[player]
            for pile, cards in zip(self.fronts[player].items, piles):
                pile.add_all(hand.take_all_of(cards), Facing.UP)

        self.phase = Phase.TURN
        self.current_player = self.dealer
        return ["Top cards placed"]

    def _handle_play(self, action: PlayCards) -> list[str]:
        self._require_turn(action.player)
        cards = list(action.cards)
        if not cards:
            raise StructuralViolation("Must play at least one card")
        require_distinct(cards)

        player = action.player
        hand = self.hands[player]
        if not hand.is_empty:
            return self._play_from(player, hand, cards, "hand")

        face_up = [pile for pile in self.fronts[player] if self._face_up_cards(pile)]
        if face_up:
            source = next((pile for pile in face_up if pile.includes(cards[0])), None)
            if source is None:
                raise NotFound(f"{cards[0]} is not one of {player}'s face-up cards")
            run = self._face_up_cards(source)
            if any(not any(card is c for c in run) for card in cards):
                raise IllegalAction("Only face-up cards can be played now")
            if len(cards) != len(run):
                raise IllegalAction("The whole face-up pile must be played at once")
            return self._play_from(player, source, cards, "front pile")

        return self._play_face_down(player, cards)

    def _play_from(self, player: Player, source: Pile, cards: list[Card], label: str) -> list[str]:
        for card in cards:
            if not source.includes(card):
                raise NotFound(f"{card} is not in {player}'s {label}")
        _require_same_rank(cards)
        if not can_play(cards[0], self.discard):
            raise IllegalAction(f"Can't play {cards[0]} on {self.discard.peek_top()}")

        source.take_all_of(cards)
        return self._land(player, cards)

    def _play_face_down(self, player: Player, cards: list[Card]) -> list[str]:
        if len(cards) != 1:
            raise StructuralViolation("Face-down cards are played one at a time")
        card = cards[0]
        source = next((pile for pile in self.fronts[player] if pile.includes(card)), None)
        if source is None:
            raise NotFound(f"{card} is not one of {player}'s face-down cards")

        source.take(card)
        card.facing = Facing.UP
        if can_play(card, self.discard):
            return self._land(player, [card])

        # Flipped a dud: it goes to hand with the whole discard, same player again.
        self.hands[player].add_all(self.discard.take_all() + [card], Facing.PLAYER)
        return [f"{player} flipped {card}, which can't be played, and picked up the discard"]

    def _land(self, player: Player, cards: list[Card]) -> list[str]:
        self.discard.add_all(cards, Facing.UP)
        changes = [f"{player} played {', '.join(str(c) for c in cards)}"]

        if self._is_out(player):
            self.phase = Phase.GAME_OVER
            self.result = player
            return changes + [f"{player} wins"]

        if self._burns():
            self.trash.add_all(self.discard.take_all(), Facing.DOWN)
            return changes + [f"{player} burned the discard and goes again"]

        self._draw_up(player)
        self.current_player = self.circle.left_of(player)
        return changes

    def _handle_pick_up(self, action: PickUpDiscard) -> list[str]:
        self._require_turn(action.player)
        player = action.player
        if self.discard.is_empty:
            raise IllegalAction("The discard is empty")
        if self.playable_cards(player):
            raise IllegalAction("Must play if you can")

        self.hands[player].add_all(self.discard.take_all(), Facing.PLAYER)
        self._draw_up(player)
        return [f"{player} picked up the discard"]

    def playable_cards(self, player: Player) -> list[Card]:
        """Known cards the player could legally lead with right now."""
        self._require_seated(player)
        hand = self.hands[player]
        if not hand.is_empty:
            candidates = hand.cards
        else:
            candidates = [c for pile in self.fronts[player] for c in self._face_up_cards(pile)]
        return [card for card in candidates if can_play(card, self.discard)]

    def _burns(self) -> bool:
        top = self.discard.peek_top()
        if top is not None and top.value == Value.TEN:
            return True
        top_four = self.discard.peek_top_n(4)
        return len(top_four) == 4 and len({c.value for c in top_four}) == 1

    def _draw_up(self, player: Player) -> None:
        hand = self.hands[player]
        while hand.count() < DRAW_UP_TO and not self.deck.is_empty:
            hand.add(self.deck.take_top(), Facing.PLAYER)

    def _is_out(self, player: Player) -> bool:
        return self.hands[player].is_empty and all(p.is_empty for p in self.fronts[player])

    @staticmethod
    def _face_up_cards(pile: Pile) -> list[Card]:
        return [card for card in pile if card.facing == Facing.UP]

    def piles(self) -> list[Pile]:
        fronts = [pile for p in self.circle for pile in self.fronts[p].items]
        return [self.deck, self.discard, self.trash] + [self.hands[p] for p in self.circle] + fronts

    def view_details(self) -> dict:
        rank = active_rank(self.discard)
        return {"active_rank": rank.value if rank else None}
