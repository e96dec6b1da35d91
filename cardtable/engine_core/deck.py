"""
Deck builders and dealing.

Builders allocate every card of a game once, numbering them with a stable
card_id in build order. After that, cards only move.
"""

from __future__ import annotations
import random
from typing import Sequence

from .cards import Card, Facing, Suit, Value, SUITS, VALUES
from .errors import Exhausted
from .pile import Pile

PINOCHLE_VALUES = [Value.NINE, Value.JACK, Value.QUEEN, Value.KING, Value.TEN, Value.ACE]


def regular_deck() -> Pile:
    """52 distinct cards, face down."""
    return _build_deck(SUITS, VALUES, copies=1, name="deck")


def pinochle_deck() -> Pile:
    """48 cards: two copies of 9, J, Q, K, 10, A in each suit, face down."""
    return _build_deck(SUITS, PINOCHLE_VALUES, copies=2, name="deck")


def _build_deck(suits: Sequence[Suit], values: Sequence[Value], copies: int, name: str) -> Pile:
    pile = Pile(name=name)
    card_id = 0
    for _ in range(copies):
        for suit in suits:
            for value in values:
                pile.add(Card(value=value, suit=suit, card_id=card_id), Facing.DOWN)
                card_id += 1
    return pile


def can_draw(deck: Pile, discard: Pile) -> bool:
    """True when draw_with_reshuffle would find a card."""
    return deck.count() > 0 or discard.count() > 1


def draw_with_reshuffle(deck: Pile, discard: Pile, rng: random.Random | None = None) -> Card:
    """
    Take the deck's top card, refilling the deck from the discard first if
    it is empty.

    The discard's top card stays where it is; everything under it goes
    face down into the deck, which is then shuffled. Raises Exhausted
    (before moving anything) when neither pile can supply a card.
    """
    if not can_draw(deck, discard):
        raise Exhausted("Deck and discard are both exhausted")
    if deck.is_empty:
        top = discard.take_top()
        deck.add_all(discard.take_all(), Facing.DOWN)
        discard.add(top, top.facing)
        deck.shuffle(rng)
    return deck.take_top()


def deal(n: int, source: Pile, destinations: Sequence[Pile], facing: Facing) -> None:
    """
    Deal n rounds, one card per destination per round, from the top.

    The source must hold enough cards for the whole deal; otherwise
    nothing moves and Exhausted is raised. No reshuffle happens here.
    """
    needed = n * len(destinations)
    if source.count() < needed:
        raise Exhausted(
            f"Need {needed} cards to deal, {source.name or 'source'} has {source.count()}"
        )
    for _ in range(n):
        for destination in destinations:
            destination.add(source.take_top(), facing)
