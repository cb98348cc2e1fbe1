"""
Tests for the player implementations.
"""

import os
import random
import sys

import pytest

# Add backend to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from domain.constants import DOWN, LEFT, RIGHT, UP, VALID_MOVES
from domain.game_state import GameState
from players import Player, RandomPlayer


def make_state(snake_positions, direction):
    return GameState(
        tick_number=0,
        status="running",
        score=0,
        tick_interval_ms=150,
        snake_positions=snake_positions,
        direction=direction,
        food=(300, 300),
        power_up=(400, 400),
        background_color=(0, 0, 0),
        board_size=650,
        tile_size=25,
    )


class TestPlayer:
    """Tests for the base Player interface."""

    def test_get_move_not_implemented(self):
        """The base class must be subclassed."""
        with pytest.raises(NotImplementedError):
            Player().get_move(make_state([(100, 100)], RIGHT))


class TestRandomPlayer:
    """Tests for the RandomPlayer class."""

    def test_returns_valid_move(self):
        """RandomPlayer.get_move() returns a valid direction."""
        player = RandomPlayer(random.Random(0))
        move = player.get_move(make_state([(300, 300), (275, 300), (250, 300)], RIGHT))
        assert move in VALID_MOVES

    def test_never_reverses(self):
        """The move is never the opposite of the current heading."""
        player = RandomPlayer(random.Random(1))
        state = make_state([(300, 300), (275, 300), (250, 300)], RIGHT)
        for _ in range(50):
            assert player.get_move(state) != LEFT

    def test_avoids_walls_when_possible(self):
        """In the top-left corner heading up, only right is safe."""
        player = RandomPlayer(random.Random(2))
        state = make_state([(0, 0), (0, 25), (0, 50)], UP)
        for _ in range(20):
            assert player.get_move(state) == RIGHT

    def test_avoids_own_body(self):
        """Cells occupied by the body (other than the tail) are avoided."""
        player = RandomPlayer(random.Random(3))
        # Head at (100, 100) heading up; body wraps around its right side
        state = make_state(
            [(100, 100), (100, 125), (125, 125), (125, 100), (125, 75), (150, 75)],
            UP,
        )
        for _ in range(20):
            assert player.get_move(state) in (UP, LEFT)

    def test_boxed_in_still_moves(self):
        """With no safe cell left, some non-reversing move is still returned."""
        player = RandomPlayer(random.Random(4))
        # Heading right into the right wall with body above and below
        state = make_state(
            [(625, 100), (600, 100), (600, 75), (625, 75), (625, 125), (600, 125), (575, 125)],
            RIGHT,
        )
        move = player.get_move(state)
        assert move in {UP, DOWN, RIGHT}
