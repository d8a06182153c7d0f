"""
Game constants for the Snake engine.
"""

from enum import Enum
from typing import Dict, Tuple


class Direction(str, Enum):
    """Movement directions. Values match the strings the front end sends."""

    UP = "UP"
    DOWN = "DOWN"
    LEFT = "LEFT"
    RIGHT = "RIGHT"


UP = Direction.UP
DOWN = Direction.DOWN
LEFT = Direction.LEFT
RIGHT = Direction.RIGHT
VALID_MOVES = {UP, DOWN, LEFT, RIGHT}

# Screen coordinates: (0, 0) is the top-left cell, so UP => y - 1
DELTAS: Dict[Direction, Tuple[int, int]] = {
    UP:    (0, -1),
    DOWN:  (0, 1),
    LEFT:  (-1, 0),
    RIGHT: (1, 0),
}

OPPOSITES: Dict[Direction, Direction] = {
    UP: DOWN,
    DOWN: UP,
    LEFT: RIGHT,
    RIGHT: LEFT,
}

# Game settings
GRID_SIZE = 20
INITIAL_DIRECTION = RIGHT
POINTS_PER_FOOD = 1

# Tick interval: 180ms at score 0, 5ms faster per point, never below 60ms
BASE_SPEED_MS = 180
SPEED_DECREMENT_MS = 5
MIN_SPEED_MS = 60
