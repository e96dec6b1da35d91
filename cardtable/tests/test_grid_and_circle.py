"""
Tests for grids and the seating circle.

Tests:
- Row-major grid addressing
- Slot search
- Turn order, exclusion and partners
"""

import pytest

from ..engine_core.cards import Facing, Suit, Value
from ..engine_core.errors import IllegalAction, NotFound, StructuralViolation
from ..engine_core.pile import Grid
from ..engine_core.players import Player, PlayerCircle
from .conftest import make_card


class TestGrid:
    """Tests for Grid addressing."""

    def test_index_and_xy_round_trip(self):
        """Index i is column i % width of row i // width."""
        grid = Grid(4, 2)

        assert grid.index_to_xy(0) == (0, 0)
        assert grid.index_to_xy(3) == (3, 0)
        assert grid.index_to_xy(5) == (1, 1)
        assert grid.xy_to_index((1, 1)) == 5
        assert grid.xy_to_index((3, 1)) == 7

    def test_out_of_bounds(self):
        grid = Grid(4, 2)

        assert grid.xy_to_index((4, 0)) is None
        assert grid.xy_to_index((0, 2)) is None
        assert grid.xy_to_index((-1, 0)) is None
        assert grid.get((4, 0)) is None

    def test_find_xy(self):
        """find_xy returns the first slot whose pile matches."""
        grid = Grid(3, 1)
        card = make_card(Value.SEVEN, Suit.CLUBS)
        grid.get((2, 0)).add(card, Facing.DOWN)

        assert grid.find_xy(lambda pile: pile.includes(card)) == (2, 0)
        assert grid.find_xy(lambda pile: pile.count() > 5) is None

    def test_bad_dimensions(self):
        with pytest.raises(StructuralViolation):
            Grid(0, 2)

    def test_slots_share_owner(self, alice):
        grid = Grid(2, 2, name="g", owner=alice)
        assert len(grid) == 4
        assert all(pile.owner == alice for pile in grid)


class TestPlayerCircle:
    """Tests for seating order."""

    def test_left_of_wraps(self, alice, bob, carol, three_players):
        assert three_players.left_of(alice) == bob
        assert three_players.left_of(carol) == alice

    @pytest.mark.parametrize("circle", ["two_players", "three_players", "four_players"])
    def test_left_of_full_lap_returns_home(self, circle, request):
        """Stepping left once per seat comes back to the starting player."""
        circle = request.getfixturevalue(circle)
        for start in circle:
            player = start
            for _ in range(len(circle)):
                player = circle.left_of(player)
            assert player == start

    def test_left_of_unseated(self, three_players):
        with pytest.raises(NotFound):
            three_players.left_of(Player("zed"))

    def test_left_of_excluding_skips(self, alice, bob, carol, dave, four_players):
        """Excluded players are skipped, wrapping as needed."""
        assert four_players.left_of_excluding(alice, {bob}) == carol
        assert four_players.left_of_excluding(alice, {bob, carol, dave}) == alice
        assert four_players.left_of_excluding(dave, {alice}) == bob

    def test_left_of_excluding_from_excluded_player(self, alice, bob, carol, three_players):
        """The starting player may itself be excluded."""
        assert three_players.left_of_excluding(alice, {alice, bob}) == carol

    def test_left_of_excluding_everyone(self, alice, bob, two_players):
        with pytest.raises(IllegalAction):
            two_players.left_of_excluding(alice, {alice, bob})

    def test_opposite_of(self, alice, bob, carol, dave, four_players):
        assert four_players.opposite_of(alice) == carol
        assert four_players.opposite_of(dave) == bob

    def test_opposite_of_twice_is_identity(self, four_players):
        for player in four_players:
            assert four_players.opposite_of(four_players.opposite_of(player)) == player

    def test_opposite_of_odd_circle(self, alice, three_players):
        with pytest.raises(StructuralViolation):
            three_players.opposite_of(alice)

    def test_players_compare_by_id(self):
        """Display names don't affect identity."""
        assert Player("alice", "Alice") == Player("alice", "Al")

    def test_empty_circle(self):
        with pytest.raises(StructuralViolation):
            PlayerCircle([])

    def test_duplicate_ids(self):
        with pytest.raises(StructuralViolation):
            PlayerCircle([Player("a"), Player("a", "Again")])

    def test_seat_of(self, bob, three_players):
        assert three_players.seat_of(bob) == 1
        assert bob in three_players
        assert len(three_players) == 3
