"""
Domain entities for the Snake game engine.

This module contains the core simulation that is independent of
infrastructure concerns (HTTP, rendering, input devices).
"""

from .constants import (
    UP, DOWN, LEFT, RIGHT, VALID_MOVES, Direction,
    GRID_SIZE, BASE_SPEED_MS, SPEED_DECREMENT_MS, MIN_SPEED_MS, POINTS_PER_FOOD,
)
from .grid import Cell, Grid
from .food import FoodSpawner
from .snake import Snake, parse_direction, resolve_direction
from .collision import CollisionResult, check_collision
from .speed import SpeedController
from .game_state import GameState, GameSnapshot, GameStatus
from .game_loop import GameLoop

__all__ = [
    'UP', 'DOWN', 'LEFT', 'RIGHT', 'VALID_MOVES', 'Direction',
    'GRID_SIZE', 'BASE_SPEED_MS', 'SPEED_DECREMENT_MS', 'MIN_SPEED_MS', 'POINTS_PER_FOOD',
    'Cell', 'Grid',
    'FoodSpawner',
    'Snake', 'parse_direction', 'resolve_direction',
    'CollisionResult', 'check_collision',
    'SpeedController',
    'GameState', 'GameSnapshot', 'GameStatus',
    'GameLoop',
]
