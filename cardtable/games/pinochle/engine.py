"""
Pinochle - Four-handed partnership pinochle over a full dealer rotation.

Each deal runs through these phases:
1. BIDDING: opens left of the dealer; raise or pass, passed players are
   skipped for the rest of the auction
2. TRUMP: the declarer (auction winner) names trump
3. PASSING: declarer and partner swap three cards each
4. MELD: everyone reveals and scores a meld at once
5. TRICKS: twelve tricks, declarer leads the first

After each deal the dealer moves one seat left. The game ends after four
deals, when every seat has dealt once.
"""

from __future__ import annotations
import random
from enum import Enum
from typing import Optional

from ...engine_core.cards import Card, Facing, Suit
from ...engine_core.deck import deal, pinochle_deck
from ...engine_core.engine import GameEngine
from ...engine_core.errors import IllegalAction, NotFound, OutOfTurn, StructuralViolation
from ...engine_core.pile import Hand, Pile, require_distinct
from ...engine_core.players import Player, PlayerCircle
from .actions import Bid, ChooseTrump, PassBid, PassCards, PlayCard, RevealMeld
from .meld import score_meld
from .tricks import LAST_TRICK_BONUS, counters, deal_score, legal_cards, winning_index


class Phase(Enum):
    BIDDING = "bidding"
    TRUMP = "trump"
    PASSING = "passing"
    MELD = "meld"
    TRICKS = "tricks"
    GAME_OVER = "game_over"


Partnership = tuple[Player, Player]

SEATS = 4
CARDS_EACH = 12
OPENING_BID = 20
PASS_COUNT = 3
DEALS_PER_GAME = 4


class Pinochle(GameEngine):
    """
    Partnership pinochle for exactly four players.

    Seats 0 and 2 play against seats 1 and 3. Result: dict mapping each
    partnership (a pair of Players in seat order) to its net score.
    """
    game_name = "pinochle"
    action_types = (Bid, PassBid, ChooseTrump, PassCards, RevealMeld, PlayCard)

    def __init__(self, circle: PlayerCircle, rng: random.Random | None = None):
        super().__init__(circle, rng)
        if len(circle) != SEATS:
            raise StructuralViolation(f"Pinochle needs exactly {SEATS} players, got {len(circle)}")

        seats = circle.players
        self.partnerships: tuple[Partnership, Partnership] = (
            (seats[0], seats[2]),
            (seats[1], seats[3]),
        )
        self.deck = pinochle_deck()
        self.hands: dict[Player, Hand] = {p: Hand(p) for p in circle}
        self.trick = Pile(name="trick")
        self.won: dict[Partnership, Pile] = {
            team: Pile(name=f"{team[0].player_id}_{team[1].player_id}_won")
            for team in self.partnerships
        }
        self.scores: dict[Partnership, int] = {team: 0 for team in self.partnerships}
        self.deal_scores: list[dict[Partnership, int]] = []
        self.deals_played = 0

        self._start_deal()

    def _start_deal(self) -> None:
        for pile in [self.trick, *self.won.values(), *self.hands.values()]:
            self.deck.add_all(pile.take_all(), Facing.DOWN)

        self.bid: Optional[int] = None
        self.declarer: Optional[Player] = None
        self.passed: set[Player] = set()
        self.trump: Optional[Suit] = None
        self.melds: dict[Player, list[Card]] = {}
        self.meld_points: dict[Player, int] = {p: 0 for p in self.circle}
        self.trick_players: list[Player] = []

        self.deck.shuffle(self.rng)
        deal(CARDS_EACH, self.deck, [self.hands[p] for p in self.circle], Facing.PLAYER)

        self.phase = Phase.BIDDING
        self.current_player = self.circle.left_of(self.dealer)

    def _handlers(self):
        return {
            Phase.BIDDING: {
                Bid: self._handle_bid,
                PassBid: self._handle_pass_bid,
            },
            Phase.TRUMP: {
                ChooseTrump: self._handle_choose_trump,
            },
            Phase.PASSING: {
                PassCards: self._handle_pass_cards,
            },
            Phase.MELD: {
                RevealMeld: self._handle_reveal_meld,
            },
            Phase.TRICKS: {
                PlayCard: self._handle_play_card,
            },
        }

    def team_of(self, player: Player) -> Partnership:
        self._require_seated(player)
        return next(team for team in self.partnerships if player in team)

    # Bidding

    def _handle_bid(self, action: Bid) -> list[str]:
        self._require_turn(action.player)
        if isinstance(action.amount, bool) or not isinstance(action.amount, int):
            raise StructuralViolation(f"Bid must be a whole number, got {action.amount!r}")
        if self.bid is None and action.amount < OPENING_BID:
            raise IllegalAction(f"Opening bid must be at least {OPENING_BID}")
        if self.bid is not None and action.amount <= self.bid:
            raise IllegalAction(f"Bid must be higher than {self.bid}")

        self.bid = action.amount
        return [f"{action.player} bid {action.amount}"] + self._next_bidder(action.player)

    def _handle_pass_bid(self, action: PassBid) -> list[str]:
        self._require_turn(action.player)
        self.passed.add(action.player)
        return [f"{action.player} passed"] + self._next_bidder(action.player)

    def _next_bidder(self, player: Player) -> list[str]:
        remaining = [p for p in self.circle if p not in self.passed]
        if not remaining:
            # Nobody bid: the last player to pass takes it at the minimum.
            self.bid = OPENING_BID
            declarer = player
        elif len(remaining) == 1 and self.bid is not None:
            declarer = remaining[0]
        else:
            self.current_player = self.circle.left_of_excluding(player, self.passed)
            return []

        self.declarer = declarer
        self.phase = Phase.TRUMP
        self.current_player = declarer
        return [f"{declarer} wins the bid at {self.bid}"]

    # Trump and passing

    def _handle_choose_trump(self, action: ChooseTrump) -> list[str]:
        self._require_turn(action.player)
        if not isinstance(action.suit, Suit):
            raise StructuralViolation(f"{action.suit!r} is not a suit")

        self.trump = action.suit
        self.phase = Phase.PASSING
        self.current_player = None
        return [f"{action.player} named {action.suit.value} trump"]

    def _handle_pass_cards(self, action: PassCards) -> list[str]:
        self._require_seated(action.bidder)
        self._require_seated(action.partner)
        partner = self.circle.opposite_of(self.declarer)
        if action.bidder != self.declarer:
            raise OutOfTurn(f"{action.bidder} didn't win the bid")
        if action.partner != partner:
            raise OutOfTurn(f"{action.partner} is not {self.declarer}'s partner")

        bidder_cards = list(action.bidder_cards)
        partner_cards = list(action.partner_cards)
        for player, cards in ((self.declarer, bidder_cards), (partner, partner_cards)):
            if len(cards) != PASS_COUNT:
                raise StructuralViolation(f"{player} must pass exactly {PASS_COUNT} cards")
            require_distinct(cards)
            for card in cards:
                if not self.hands[player].includes(card):
                    raise NotFound(f"{card} is not in {player}'s hand")

        to_partner = self.hands[self.declarer].take_all_of(bidder_cards)
        to_bidder = self.hands[partner].take_all_of(partner_cards)
        self.hands[partner].add_all(to_partner, Facing.PLAYER)
        self.hands[self.declarer].add_all(to_bidder, Facing.PLAYER)

        self.phase = Phase.MELD
        return [f"{self.declarer} and {partner} passed {PASS_COUNT} cards each"]

    # Meld

    def _handle_reveal_meld(self, action: RevealMeld) -> list[str]:
        melds = action.melds
        for player in melds:
            self._require_seated(player)
        missing = [p for p in self.circle if p not in melds]
        if missing:
            raise StructuralViolation(
                f"Every player must meld, even with no cards: missing {', '.join(str(p) for p in missing)}"
            )
        for player, cards in melds.items():
            require_distinct(list(cards))
            for card in cards:
                if not self.hands[player].includes(card):
                    raise NotFound(f"{card} is not in {player}'s hand")

        self.melds = {p: list(melds[p]) for p in self.circle}
        for cards in self.melds.values():
            for card in cards:
                card.facing = Facing.UP
        changes = []
        for player in self.circle:
            self.meld_points[player] = score_meld(self.melds[player], self.trump)
            changes.append(f"{player} melded {self.meld_points[player]}")
        for cards in self.melds.values():
            for card in cards:
                card.facing = Facing.PLAYER

        self.phase = Phase.TRICKS
        self.current_player = self.declarer
        return changes

    # Tricks

    def legal_plays(self, player: Player) -> list[Card]:
        """Cards the player may play to the current trick."""
        self._require_seated(player)
        if self.phase != Phase.TRICKS or player != self.current_player:
            return []
        return legal_cards(self.hands[player].cards, self.trick.cards, self.trump)

    def _handle_play_card(self, action: PlayCard) -> list[str]:
        self._require_turn(action.player)
        hand = self.hands[action.player]
        if not hand.includes(action.card):
            raise NotFound(f"{action.card} is not in {action.player}'s hand")
        allowed = legal_cards(hand.cards, self.trick.cards, self.trump)
        if not any(card is action.card for card in allowed):
            raise IllegalAction(self._explain_illegal(hand))

        self.trick.add(hand.take(action.card), Facing.UP)
        self.trick_players.append(action.player)
        changes = [f"{action.player} played {action.card}"]
        if self.trick.count() < SEATS:
            self.current_player = self.circle.left_of(action.player)
            return changes
        return changes + self._close_trick()

    def _explain_illegal(self, hand: Hand) -> str:
        led = self.trick.cards[0].suit
        if any(card.suit == led for card in hand):
            return f"Must follow {led.value}, beating the trick if possible"
        if any(card.suit == self.trump for card in hand):
            return "Must play trump, beating the trick if possible"
        return "That card can't be played now"

    def _close_trick(self) -> list[str]:
        winner = self.trick_players[winning_index(self.trick.cards, self.trump)]
        team = self.team_of(winner)
        self.won[team].add_all(self.trick.take_all(), Facing.DOWN)
        self.trick_players = []
        changes = [f"{winner} takes the trick"]

        if all(hand.is_empty for hand in self.hands.values()):
            return changes + self._finish_deal(last_trick=team)
        self.current_player = winner
        return changes

    def _finish_deal(self, last_trick: Partnership) -> list[str]:
        declaring = self.team_of(self.declarer)
        result = {}
        for team in self.partnerships:
            trick_points = counters(self.won[team].cards)
            if team == last_trick:
                trick_points += LAST_TRICK_BONUS
            meld_points = sum(self.meld_points[p] for p in team)
            result[team] = deal_score(trick_points, meld_points, self.bid, team == declaring)
            self.scores[team] += result[team]
        self.deal_scores.append(result)
        self.deals_played += 1
        changes = [
            f"Deal {self.deals_played}: " + ", ".join(
                f"{team[0]}/{team[1]} {points:+d}" for team, points in result.items()
            )
        ]

        if self.deals_played >= DEALS_PER_GAME:
            self.phase = Phase.GAME_OVER
            self.current_player = None
            self.result = dict(self.scores)
            return changes

        self.dealer = self.circle.left_of(self.dealer)
        self._start_deal()
        return changes + [f"{self.dealer} deals"]

    def piles(self) -> list[Pile]:
        return [self.deck, self.trick] + [self.hands[p] for p in self.circle] + list(self.won.values())

    def view_details(self) -> dict:
        return {
            "dealer": self.dealer.player_id,
            "deal_number": self.deals_played + 1,
            "bid": self.bid,
            "declarer": self.declarer.player_id if self.declarer else None,
            "trump": self.trump.value if self.trump else None,
            "passed": sorted(p.player_id for p in self.passed),
            "meld_points": {p.player_id: pts for p, pts in self.meld_points.items()},
            "scores": {
                f"{team[0].player_id}+{team[1].player_id}": pts
                for team, pts in self.scores.items()
            },
        }
