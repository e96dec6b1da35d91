"""
Piles - Ordered card containers with move semantics.

Cards move between piles via take/add; they are never copied. The top of
a pile is the most recently added end (the end of the list).

A Grid is a fixed width x height array of piles addressed row-major, used
where a player owns several fixed slots (golf grids, front piles).
"""

from __future__ import annotations
import random
from typing import Callable, Iterable, Iterator, Optional, TYPE_CHECKING

from .cards import Card, Facing
from .errors import NotFound, StructuralViolation

if TYPE_CHECKING:
    from .players import Player


Position = tuple[int, int]


def require_distinct(cards: Iterable[Card]) -> None:
    """Reject a selection that names the same card instance twice."""
    seen: set[int] = set()
    for card in cards:
        if id(card) in seen:
            raise StructuralViolation(f"{card} is named more than once")
        seen.add(id(card))


class Pile:
    """
    An ordered sequence of cards.

    `owner` is the player PLAYER / AWAY_FROM_PLAYER facings are relative
    to; shared piles (deck, discard) have none.
    """

    def __init__(self, name: str = "", owner: Player | None = None):
        self.name = name
        self.owner = owner
        self.cards: list[Card] = []
        self._once_add: list[Callable[[], None]] = []

    def add(self, card: Card, facing: Facing) -> None:
        """Put a card on top with the given facing, then fire add hooks."""
        card.facing = facing
        self.cards.append(card)
        self._emit_add()

    def add_all(self, cards: Iterable[Card], facing: Facing) -> None:
        """Batch add; hooks fire once, after every card has landed."""
        cards = list(cards)
        for card in cards:
            card.facing = facing
        self.cards.extend(cards)
        self._emit_add()

    def shuffle(self, rng: random.Random | None = None) -> None:
        """Uniform in-place permutation (Fisher-Yates via random.shuffle)."""
        (rng or random).shuffle(self.cards)

    def take(self, card: Card) -> Card:
        """Remove this exact card. NotFound leaves the pile untouched."""
        for idx, c in enumerate(self.cards):
            if c is card:
                return self.cards.pop(idx)
        raise NotFound(f"{card} is not in {self._label()}")

    def take_all_of(self, cards: Iterable[Card]) -> list[Card]:
        """
        Remove several cards atomically.

        Every card is checked before any is removed, so a failure leaves
        the pile exactly as it was.
        """
        cards = list(cards)
        seen: set[int] = set()
        for card in cards:
            if id(card) in seen:
                raise StructuralViolation(f"{card} is named more than once")
            seen.add(id(card))
            if not self.includes(card):
                raise NotFound(f"{card} is not in {self._label()}")
        self.cards = [c for c in self.cards if id(c) not in seen]
        return cards

    def peek_top(self) -> Optional[Card]:
        return self.cards[-1] if self.cards else None

    def peek_top_n(self, n: int) -> list[Card]:
        """Up to n cards from the top, bottom-most first."""
        if n <= 0:
            return []
        return self.cards[-n:]

    def take_top(self) -> Optional[Card]:
        """Remove and return the top card, or None if the pile is empty."""
        if not self.cards:
            return None
        return self.cards.pop()

    def take_all(self) -> list[Card]:
        cards = self.cards
        self.cards = []
        return cards

    def includes(self, card: Card) -> bool:
        return any(c is card for c in self.cards)

    def count(self) -> int:
        return len(self.cards)

    @property
    def is_empty(self) -> bool:
        return len(self.cards) == 0

    def once(self, event: str, callback: Callable[[], None]) -> None:
        """Register a callback fired exactly once, on the next add."""
        if event != "add":
            raise ValueError(f"Unknown pile event: {event}")
        self._once_add.append(callback)

    def _emit_add(self) -> None:
        callbacks = self._once_add
        self._once_add = []
        for callback in callbacks:
            callback()

    def _label(self) -> str:
        return self.name or "pile"

    def __len__(self) -> int:
        return len(self.cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self.cards)

    def __contains__(self, card: object) -> bool:
        return any(c is card for c in self.cards)

    def __repr__(self) -> str:
        return f"Pile(name={self.name!r}, count={len(self.cards)})"


class Hand(Pile):
    """A pile that belongs to one player."""

    def __init__(self, owner: Player, name: str = ""):
        super().__init__(name=name or f"{owner.player_id}_hand", owner=owner)


class Grid:
    """Fixed width x height array of piles, row-major."""

    def __init__(self, width: int, height: int, name: str = "", owner: Player | None = None):
        if width <= 0 or height <= 0:
            raise StructuralViolation("Grid dimensions must be positive")
        self.width = width
        self.height = height
        self.name = name
        self.owner = owner
        self.items: list[Pile] = [
            Pile(name=f"{name}[{i % width},{i // width}]" if name else "", owner=owner)
            for i in range(width * height)
        ]

    def index_to_xy(self, index: int) -> Position:
        return index % self.width, index // self.width

    def xy_to_index(self, pos: Position) -> Optional[int]:
        x, y = pos
        if x < 0 or y < 0 or x >= self.width or y >= self.height:
            return None
        return y * self.width + x

    def find_xy(self, predicate: Callable[[Pile], bool]) -> Optional[Position]:
        """First slot (in index order) whose pile satisfies the predicate."""
        for idx, pile in enumerate(self.items):
            if predicate(pile):
                return self.index_to_xy(idx)
        return None

    def get(self, pos: Position) -> Optional[Pile]:
        idx = self.xy_to_index(pos)
        if idx is None:
            return None
        return self.items[idx]

    def cards(self) -> list[Card]:
        return [card for pile in self.items for card in pile.cards]

    def __iter__(self) -> Iterator[Pile]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)
