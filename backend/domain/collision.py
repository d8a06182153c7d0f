"""
Wall and self-collision checks.
"""

from enum import Enum

from .grid import Cell, Grid
from .snake import Snake


class CollisionResult(str, Enum):
    NONE = "none"
    WALL = "wall"
    SELF = "self"


def check_collision(snake: Snake, next_head: Cell, grid: Grid, grows: bool = False) -> CollisionResult:
    """
    Decide what happens if the head moves to `next_head`.

    Read-only: the snake is inspected before any part of the step is applied.

    The head collides with itself only on cells that stay occupied through
    this step. Two segments move out of the way as the body shifts:
      - the tail, unless the snake grows this step
      - the neck (segment right behind the head), which the head can only
        reach with a reversed starting direction; in play the reversal rule
        rejects that move before it gets here

    Args:
        snake: the snake before the move
        next_head: the cell the head is about to enter
        grid: the board
        grows: True when the snake eats on this step and keeps its tail

    Returns:
        CollisionResult.WALL, CollisionResult.SELF or CollisionResult.NONE
    """
    if not grid.is_in_bounds(next_head):
        return CollisionResult.WALL

    body = list(snake.positions)
    end = len(body) if grows else len(body) - 1
    # body[0] is the head itself and body[1] the neck
    if next_head in body[2:end]:
        return CollisionResult.SELF

    return CollisionResult.NONE
