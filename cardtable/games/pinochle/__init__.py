"""
Pinochle - Partnership bidding, meld and trick-taking over four deals.
"""

from .actions import ActionType, Bid, ChooseTrump, PassBid, PassCards, PinochleAction, PlayCard, RevealMeld
from .engine import Partnership, Phase, Pinochle
from .meld import meld_breakdown, score_meld
from .tricks import beats, counters, deal_score, legal_cards, winning_index

__all__ = [
    "ActionType",
    "Bid",
    "ChooseTrump",
    "PassBid",
    "PassCards",
    "Partnership",
    "Phase",
    "Pinochle",
    "PinochleAction",
    "PlayCard",
    "RevealMeld",
    "beats",
    "counters",
    "deal_score",
    "legal_cards",
    "meld_breakdown",
    "score_meld",
    "winning_index",
]
