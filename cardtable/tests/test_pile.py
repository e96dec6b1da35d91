"""
Tests for piles and hands.

Tests:
- Move semantics and facing on add
- Atomic multi-card removal
- Peeking and taking from the top
- One-shot add hooks
- Seeded shuffles
"""

import random

import pytest

from ..engine_core.cards import Card, Facing, Suit, Value
from ..engine_core.errors import NotFound, StructuralViolation
from ..engine_core.pile import Hand, Pile, require_distinct
from .conftest import make_card


@pytest.fixture
def three_cards() -> list[Card]:
    return [
        make_card(Value.ACE, Suit.SPADES, 0),
        make_card(Value.TWO, Suit.HEARTS, 1),
        make_card(Value.KING, Suit.CLUBS, 2),
    ]


@pytest.fixture
def pile(three_cards) -> Pile:
    pile = Pile(name="test")
    pile.add_all(three_cards, Facing.DOWN)
    return pile


class TestAdd:
    """Tests for add and add_all."""

    def test_add_sets_facing_and_puts_on_top(self):
        """The added card becomes the top and takes the given facing."""
        pile = Pile()
        card = make_card(Value.NINE, Suit.DIAMONDS)
        pile.add(card, Facing.UP)

        assert pile.peek_top() is card
        assert card.facing == Facing.UP
        assert pile.count() == 1

    def test_add_all_keeps_order(self, three_cards):
        """Batch add keeps the given order, last card on top."""
        pile = Pile()
        pile.add_all(three_cards, Facing.PLAYER)

        assert pile.cards == three_cards
        assert pile.peek_top() is three_cards[-1]
        assert all(card.facing == Facing.PLAYER for card in pile)

    def test_len_iter_contains(self, pile, three_cards):
        assert len(pile) == 3
        assert list(pile) == three_cards
        assert three_cards[1] in pile


class TestTake:
    """Tests for removal by identity."""

    def test_take_removes_exact_card(self, pile, three_cards):
        """take() returns the named card and shrinks the pile."""
        taken = pile.take(three_cards[1])

        assert taken is three_cards[1]
        assert pile.cards == [three_cards[0], three_cards[2]]

    def test_take_lookalike_is_not_found(self, pile):
        """An equal-looking card that isn't in the pile is NotFound."""
        lookalike = make_card(Value.ACE, Suit.SPADES, 0)

        with pytest.raises(NotFound):
            pile.take(lookalike)
        assert pile.count() == 3

    def test_take_all_of_is_atomic(self, pile, three_cards):
        """One missing card means nothing is removed."""
        stranger = make_card(Value.QUEEN, Suit.HEARTS, 99)

        with pytest.raises(NotFound):
            pile.take_all_of([three_cards[0], stranger])
        assert pile.cards == three_cards

    def test_take_all_of_rejects_duplicates(self, pile, three_cards):
        """Naming the same card twice is malformed."""
        with pytest.raises(StructuralViolation):
            pile.take_all_of([three_cards[0], three_cards[0]])
        assert pile.count() == 3

    def test_take_all_of_removes_all(self, pile, three_cards):
        taken = pile.take_all_of([three_cards[2], three_cards[0]])

        assert taken == [three_cards[2], three_cards[0]]
        assert pile.cards == [three_cards[1]]

    def test_take_all_drains(self, pile, three_cards):
        assert pile.take_all() == three_cards
        assert pile.is_empty


class TestTop:
    """Tests for peeking and taking from the top."""

    def test_peek_top_empty(self):
        assert Pile().peek_top() is None

    def test_take_top_empty(self):
        """Taking from an empty pile signals empty rather than raising."""
        assert Pile().take_top() is None

    def test_take_top(self, pile, three_cards):
        assert pile.take_top() is three_cards[2]
        assert pile.count() == 2

    def test_peek_top_n_caps_at_count(self, pile, three_cards):
        """peek_top_n returns at most what the pile holds, bottom first."""
        assert pile.peek_top_n(2) == three_cards[1:]
        assert pile.peek_top_n(10) == three_cards
        assert pile.peek_top_n(0) == []
        assert pile.count() == 3


class TestOnce:
    """Tests for one-shot add hooks."""

    def test_hook_fires_once_after_append(self, three_cards):
        """The hook sees the new top and is cleared after firing."""
        pile = Pile()
        seen = []
        pile.once("add", lambda: seen.append(pile.peek_top()))

        pile.add(three_cards[0], Facing.UP)
        pile.add(three_cards[1], Facing.UP)

        assert seen == [three_cards[0]]

    def test_hook_fires_once_for_batch(self, three_cards):
        pile = Pile()
        calls = []
        pile.once("add", lambda: calls.append(pile.count()))

        pile.add_all(three_cards, Facing.UP)

        assert calls == [3]

    def test_unknown_event(self):
        with pytest.raises(ValueError):
            Pile().once("remove", lambda: None)


class TestShuffle:
    """Tests for shuffling."""

    def test_seeded_shuffle_repeats(self):
        """Same seed, same order; the cards themselves are kept."""
        first = Pile()
        first.add_all([make_card(Value.ACE, Suit.HEARTS, i) for i in range(20)], Facing.DOWN)
        second = Pile()
        second.add_all([make_card(Value.ACE, Suit.HEARTS, i) for i in range(20)], Facing.DOWN)

        first.shuffle(random.Random(7))
        second.shuffle(random.Random(7))

        assert [c.card_id for c in first] == [c.card_id for c in second]
        assert sorted(c.card_id for c in first) == list(range(20))


class TestHand:
    """Tests for hands."""

    def test_hand_is_owned(self, alice):
        hand = Hand(alice)
        assert hand.owner == alice
        assert hand.name == "alice_hand"


class TestRequireDistinct:
    """Tests for the duplicate selection check."""

    def test_distinct_passes(self, three_cards):
        require_distinct(three_cards)

    def test_repeat_fails(self, three_cards):
        with pytest.raises(StructuralViolation):
            require_distinct([three_cards[0], three_cards[1], three_cards[0]])
