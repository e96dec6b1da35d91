"""
Pinochle Tricks - Card ranking, trick winners and legal plays.

Within a suit: 9 < J < Q < K < 10 < A. A trump beats any non-trump; a
card off the led suit that is not trump never wins. Between identical
cards the one played first holds the trick.
"""

from __future__ import annotations
from typing import Optional, Sequence

from ...engine_core.cards import Card, Suit, Value

TRICK_ORDER = [Value.NINE, Value.JACK, Value.QUEEN, Value.KING, Value.TEN, Value.ACE]
COUNTER_VALUES = {Value.ACE, Value.TEN, Value.KING}
LAST_TRICK_BONUS = 1


def trick_rank(card: Card) -> int:
    return TRICK_ORDER.index(card.value)


def beats(card: Card, best: Card, trump: Suit) -> bool:
    """Whether `card`, played after `best`, takes the lead from it."""
    if card.suit == best.suit:
        return trick_rank(card) > trick_rank(best)
    return card.suit == trump


def winning_index(trick: Sequence[Card], trump: Suit) -> int:
    """Index of the card currently holding the trick."""
    best = 0
    for idx in range(1, len(trick)):
        if beats(trick[idx], trick[best], trump):
            best = idx
    return best


def legal_cards(hand: Sequence[Card], trick: Sequence[Card], trump: Suit) -> list[Card]:
    """
    Cards from `hand` that may be played on `trick`.

    - Leading: anything
    - Holding the led suit: must follow, and must beat the winning card
      if a card of the led suit can (not possible once it is trumped)
    - Otherwise holding trump: must trump, and must overtrump if able
    - Otherwise: anything
    """
    if not trick:
        return list(hand)
    led = trick[0].suit
    winning = trick[winning_index(trick, trump)]

    followers = [card for card in hand if card.suit == led]
    if followers:
        return _must_beat(followers, winning)

    trumps = [card for card in hand if card.suit == trump]
    if trumps:
        return _must_beat(trumps, winning)

    return list(hand)


def _must_beat(options: list[Card], winning: Card) -> list[Card]:
    if winning.suit != options[0].suit:
        # The options can't compete with a card of another suit here: either
        # trump was played on a non-trump lead, or these are the first trumps.
        return options
    higher = [card for card in options if trick_rank(card) > trick_rank(winning)]
    return higher or options


def counters(cards: Sequence[Card]) -> int:
    """One point per ace, ten and king."""
    return sum(1 for card in cards if card.value in COUNTER_VALUES)


def deal_score(trick_points: int, meld_points: int, bid: Optional[int], declaring: bool) -> int:
    """
    A partnership's score for one deal.

    Meld counts only if the trick points reach the bid. The declaring
    partnership is set (loses the bid) if its total falls short of it.
    """
    bid = bid or 0
    total = trick_points + (meld_points if trick_points >= bid else 0)
    if declaring and total < bid:
        return -bid
    return total
