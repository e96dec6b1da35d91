"""
Pinochle Meld - Scoring a revealed meld.

A meld is broken into independent components, each scored once. A
component scores its double value when the meld holds two complete sets
of it, its single value when it holds one:

    component           single  double
    trump run (J Q K 10 A) 11    142
    aces around           10    100
    kings around           8     80
    queens around          6     60
    jacks around           4     40
    pinochle (JD + QS)     4     30
    marriage (K Q)         2      4
    trump marriage         4      8
    nine of trump          1 each

The run's royal marriage is scored by the marriage component, so a single
run totals 15 and a double run 150 without counting that marriage twice.
"""

from __future__ import annotations
from typing import Iterable, Sequence

from ...engine_core.cards import Card, Suit, Value, SUITS

RUN_VALUES = [Value.JACK, Value.QUEEN, Value.KING, Value.TEN, Value.ACE]

RUN_SCORE = (15 - 4, 150 - 8)
AROUND_SCORES = {
    Value.ACE: (10, 100),
    Value.KING: (8, 80),
    Value.QUEEN: (6, 60),
    Value.JACK: (4, 40),
}
PINOCHLE_SCORE = (4, 30)
MARRIAGE_SCORE = (2, 4)
TRUMP_MARRIAGE_SCORE = (4, 8)
NINE_OF_TRUMP_SCORE = 1


def score_has_every(
    meld: Sequence[Card],
    required: Iterable[tuple[Value, Suit]],
    score: tuple[int, int],
) -> int:
    """Double score if every required card is held twice, single if once, else 0."""
    required = list(required)
    single = double = 0
    for value, suit in required:
        held = sum(1 for card in meld if card.matches(value, suit))
        if held >= 1:
            single += 1
        if held >= 2:
            double += 1
    if double == len(required):
        return score[1]
    if single == len(required):
        return score[0]
    return 0


def score_run(meld: Sequence[Card], trump: Suit) -> int:
    return score_has_every(meld, [(value, trump) for value in RUN_VALUES], RUN_SCORE)


def score_around(meld: Sequence[Card], value: Value) -> int:
    return score_has_every(meld, [(value, suit) for suit in SUITS], AROUND_SCORES[value])


def score_pinochle(meld: Sequence[Card]) -> int:
    return score_has_every(
        meld, [(Value.JACK, Suit.DIAMONDS), (Value.QUEEN, Suit.SPADES)], PINOCHLE_SCORE
    )


def score_marriage(meld: Sequence[Card], suit: Suit, trump: Suit) -> int:
    score = TRUMP_MARRIAGE_SCORE if suit == trump else MARRIAGE_SCORE
    return score_has_every(meld, [(Value.KING, suit), (Value.QUEEN, suit)], score)


def score_nines(meld: Sequence[Card], trump: Suit) -> int:
    return NINE_OF_TRUMP_SCORE * sum(1 for card in meld if card.matches(Value.NINE, trump))


def meld_breakdown(meld: Sequence[Card], trump: Suit) -> dict[str, int]:
    """Points per component, zero components included."""
    breakdown = {"run": score_run(meld, trump)}
    for value in AROUND_SCORES:
        breakdown[f"{value.value}s_around"] = score_around(meld, value)
    breakdown["nines_of_trump"] = score_nines(meld, trump)
    breakdown["pinochle"] = score_pinochle(meld)
    for suit in SUITS:
        breakdown[f"marriage_{suit.value}"] = score_marriage(meld, suit, trump)
    return breakdown


def score_meld(meld: Sequence[Card], trump: Suit) -> int:
    return sum(meld_breakdown(meld, trump).values())
