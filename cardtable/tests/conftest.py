"""
Pytest fixtures for cardtable tests.
"""

import random

import pytest

from ..engine_core.cards import Card, Facing, Suit, Value
from ..engine_core.pile import Pile
from ..engine_core.players import Player, PlayerCircle


@pytest.fixture
def alice() -> Player:
    return Player("alice", "Alice")


@pytest.fixture
def bob() -> Player:
    return Player("bob", "Bob")


@pytest.fixture
def carol() -> Player:
    return Player("carol", "Carol")


@pytest.fixture
def dave() -> Player:
    return Player("dave", "Dave")


@pytest.fixture
def two_players(alice, bob) -> PlayerCircle:
    return PlayerCircle([alice, bob])


@pytest.fixture
def three_players(alice, bob, carol) -> PlayerCircle:
    return PlayerCircle([alice, bob, carol])


@pytest.fixture
def four_players(alice, bob, carol, dave) -> PlayerCircle:
    return PlayerCircle([alice, bob, carol, dave])


@pytest.fixture
def rng() -> random.Random:
    """Seeded randomness so shuffles repeat exactly."""
    return random.Random(1234)


def make_card(value: Value, suit: Suit, card_id: int = 0) -> Card:
    """A loose card for primitive-level tests."""
    return Card(value=value, suit=suit, card_id=card_id)


def all_cards(engine) -> list[Card]:
    return [card for pile in engine.piles() for card in pile.cards]


def pull(engine, value: Value, suit: Suit) -> Card:
    """
    Remove the first matching card from wherever it sits on the table.

    Tests use this to assemble a scenario from the engine's own cards, so
    the card population stays exactly the one the engine dealt.
    """
    for pile in engine.piles():
        for card in pile.cards:
            if card.matches(value, suit):
                return pile.take(card)
    raise LookupError(f"No {value.value} of {suit.value} left on the table")


def place(engine, pile: Pile, cards: list[tuple[Value, Suit]], facing: Facing) -> list[Card]:
    """Move the named cards onto `pile` (bottom first) with the given facing."""
    moved = [pull(engine, value, suit) for value, suit in cards]
    pile.add_all(moved, facing)
    return moved


def clear_to(engine, pile: Pile, target: Pile) -> None:
    """Empty `pile` onto `target`, face down."""
    target.add_all(pile.take_all(), Facing.DOWN)


def table_state(engine) -> tuple:
    """Everything a rejected action must leave untouched, in comparable form."""
    return (
        engine.phase,
        engine.current_player,
        engine.result,
        len(engine.history),
        [
            (pile.name, pile.owner, [(card.card_id, card.suit, card.value, card.facing) for card in pile])
            for pile in engine.piles()
        ],
    )
