"""
Tests for deck builders, dealing and reshuffling draws.
"""

import random
from collections import Counter

import pytest

from ..engine_core.cards import Facing, Suit, Value
from ..engine_core.deck import can_draw, deal, draw_with_reshuffle, pinochle_deck, regular_deck
from ..engine_core.errors import Exhausted
from ..engine_core.pile import Pile


class TestBuilders:
    """Tests for deck construction."""

    def test_regular_deck(self):
        """52 distinct face-down cards with ids 0..51."""
        deck = regular_deck()

        assert deck.count() == 52
        assert len({(c.value, c.suit) for c in deck}) == 52
        assert [c.card_id for c in deck] == list(range(52))
        assert all(c.facing == Facing.DOWN for c in deck)

    def test_pinochle_deck(self):
        """48 cards, two of each 9-A per suit."""
        deck = pinochle_deck()
        counts = Counter((c.value, c.suit) for c in deck)

        assert deck.count() == 48
        assert len(counts) == 24
        assert set(counts.values()) == {2}
        assert Value.TWO not in {c.value for c in deck}

    def test_pinochle_copies_are_distinct(self):
        """The two nines of hearts are different cards."""
        deck = pinochle_deck()
        nines = [c for c in deck if c.matches(Value.NINE, Suit.HEARTS)]

        assert len(nines) == 2
        assert nines[0] is not nines[1]
        assert nines[0] != nines[1]


class TestDeal:
    """Tests for round-robin dealing."""

    def test_deal_round_robin(self):
        """Each destination gets n cards, one per round, in turn."""
        deck = regular_deck()
        top_six = list(reversed(deck.peek_top_n(6)))
        hands = [Pile(), Pile(), Pile()]

        deal(2, deck, hands, Facing.PLAYER)

        assert [h.count() for h in hands] == [2, 2, 2]
        assert hands[0].cards == [top_six[0], top_six[3]]
        assert hands[2].cards == [top_six[2], top_six[5]]
        assert deck.count() == 46
        assert all(c.facing == Facing.PLAYER for h in hands for c in h)

    def test_deal_too_many(self):
        """A short source deals nothing."""
        source = Pile()
        source.add_all(list(regular_deck().take_all())[:5], Facing.DOWN)
        hands = [Pile(), Pile()]

        with pytest.raises(Exhausted):
            deal(3, source, hands, Facing.PLAYER)
        assert source.count() == 5
        assert all(h.is_empty for h in hands)


class TestDrawWithReshuffle:
    """Tests for drawing with discard recycling."""

    def test_draw_from_deck(self):
        deck = regular_deck()
        discard = Pile()
        top = deck.peek_top()

        assert draw_with_reshuffle(deck, discard) is top
        assert deck.count() == 51

    def test_empty_deck_recycles_discard(self):
        """All but the discard top go back to the deck, face down."""
        discard = regular_deck()
        for card in discard:
            card.facing = Facing.UP
        deck = Pile()
        top = discard.peek_top()

        card = draw_with_reshuffle(deck, discard, random.Random(3))

        assert discard.cards == [top]
        assert top.facing == Facing.UP
        assert deck.count() == 50
        assert card not in deck and card is not top
        assert all(c.facing == Facing.DOWN for c in deck)

    def test_nothing_to_draw(self):
        """One discard card and no deck: Exhausted, nothing moves."""
        deck = Pile()
        discard = Pile()
        only = regular_deck().take_top()
        discard.add(only, Facing.UP)

        assert not can_draw(deck, discard)
        with pytest.raises(Exhausted):
            draw_with_reshuffle(deck, discard)
        assert discard.cards == [only]
        assert only.facing == Facing.UP
