"""
Tests for players/ - input mapping and the autopilot.
"""

import os
import random
import sys

import pytest

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from domain import UP, DOWN, LEFT, RIGHT, GameLoop  # noqa: E402
from players import (  # noqa: E402
    Player,
    RandomPlayer,
    VirtualDPad,
    direction_from_key,
    direction_from_swipe,
    is_restart_key,
)


class TestKeyboard:

    @pytest.mark.parametrize("key, expected", [
        ("ArrowUp", UP),
        ("ArrowDown", DOWN),
        ("ArrowLeft", LEFT),
        ("ArrowRight", RIGHT),
        ("w", UP),
        ("S", DOWN),
        ("a", LEFT),
        ("D", RIGHT),
    ])
    def test_bound_keys(self, key, expected):
        assert direction_from_key(key) == expected

    @pytest.mark.parametrize("key", [" ", "Enter", "x", "arrowup", "", None])
    def test_unbound_keys(self, key):
        assert direction_from_key(key) is None

    def test_space_restarts(self):
        assert is_restart_key(" ") is True

    @pytest.mark.parametrize("key", ["Enter", "ArrowUp", "w", "", None])
    def test_other_keys_do_not_restart(self, key):
        assert is_restart_key(key) is False


class TestSwipe:

    @pytest.mark.parametrize("dx, dy, expected", [
        (50, 10, RIGHT),
        (-50, 0, LEFT),
        (5, 40, DOWN),
        (-5, -40, UP),
        (40, 40, DOWN),
    ])
    def test_dominant_axis(self, dx, dy, expected):
        assert direction_from_swipe(dx, dy) == expected

    @pytest.mark.parametrize("dx, dy", [(20, 0), (30, 5), (0, -30), (0, 0)])
    def test_short_swipes_ignored(self, dx, dy):
        assert direction_from_swipe(dx, dy) is None

    def test_custom_threshold(self):
        assert direction_from_swipe(15, 0, min_distance=10) == RIGHT


class TestVirtualDPad:

    def test_button_centres(self):
        pad = VirtualDPad()
        assert pad.button_centers() == {
            UP: (80, 38),
            DOWN: (80, 122),
            LEFT: (38, 80),
            RIGHT: (122, 80),
        }

    @pytest.mark.parametrize("x, y, expected", [
        (80, 38, UP),
        (80, 122, DOWN),
        (38, 80, LEFT),
        (122, 80, RIGHT),
        (58, 80, LEFT),
        (90, 45, UP),
    ])
    def test_hits(self, x, y, expected):
        assert VirtualDPad().hit_test(x, y) == expected

    @pytest.mark.parametrize("x, y", [(80, 80), (0, 0), (159, 159), (59, 60)])
    def test_misses(self, x, y):
        assert VirtualDPad().hit_test(x, y) is None

    def test_scaled_canvas(self):
        """A canvas drawn at twice its pixel size maps touches back down."""
        pad = VirtualDPad()
        assert pad.hit_test(244, 160, rendered_width=320, rendered_height=320) == RIGHT
        assert pad.hit_test(20, 20, rendered_width=320, rendered_height=320) is None


class TestPlayers:

    def test_base_player_is_abstract(self):
        loop = GameLoop()
        with pytest.raises(NotImplementedError):
            Player().get_move(loop.start().snapshot())

    def test_random_player_avoids_walls_and_reversal(self):
        loop = GameLoop(grid_size=10)
        state = loop.start(initial_snake=[(0, 0)], initial_direction=UP)
        state.food = (9, 9)
        player = RandomPlayer(rng=random.Random(0))

        for _ in range(20):
            assert player.get_move(state.snapshot()) == RIGHT

    def test_random_player_avoids_body(self):
        loop = GameLoop(grid_size=10)
        # Heading UP along the left wall with the body curling to the right
        state = loop.start(initial_snake=[(0, 5), (0, 6), (1, 6), (1, 5), (1, 4)], initial_direction=UP)
        state.food = (9, 9)
        player = RandomPlayer(rng=random.Random(3))

        for _ in range(20):
            assert player.get_move(state.snapshot()) == UP

    def test_random_player_takes_adjacent_food(self):
        loop = GameLoop(grid_size=10)
        state = loop.start(initial_snake=[(5, 5)], initial_direction=RIGHT)
        state.food = (5, 4)
        assert RandomPlayer(rng=random.Random(0)).get_move(state.snapshot()) == UP

    def test_trapped_player_keeps_direction(self):
        loop = GameLoop(grid_size=3)
        state = loop.start(initial_snake=[(0, 0), (1, 0), (1, 1), (0, 1), (0, 2)], initial_direction=LEFT)
        state.food = (2, 2)
        assert RandomPlayer(rng=random.Random(0)).get_move(state.snapshot()) == LEFT
