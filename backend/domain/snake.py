"""
Snake entity for the game engine.
"""

from collections import deque
from typing import Iterable, Optional

from .constants import DELTAS, OPPOSITES, Direction
from .grid import Cell


def parse_direction(value) -> Optional[Direction]:
    """
    Turn user input into a Direction.

    Accepts Direction members and case-insensitive strings ("up", "Left").
    Anything else returns None.
    """
    if isinstance(value, Direction):
        return value
    if isinstance(value, str):
        try:
            return Direction(value.strip().upper())
        except ValueError:
            return None
    return None


def resolve_direction(current: Direction, requested) -> Direction:
    """
    Return the direction to use given the active one and a request.

    The exact reverse of the current direction would run the head straight
    into the neck, so it is ignored, as is unrecognised input.
    """
    direction = parse_direction(requested)
    if direction is None or direction == OPPOSITES[current]:
        return current
    return direction


class Snake:
    """
    Represents the snake on the board.

    Attributes:
        positions: deque of (x, y) from head at index 0 to tail at the end
    """

    def __init__(self, positions: Iterable[Cell]):
        self.positions = deque(tuple(cell) for cell in positions)
        if not self.positions:
            raise ValueError("A snake needs at least one segment.")

    @property
    def head(self) -> Cell:
        """Return the head position (first element)."""
        return self.positions[0]

    @property
    def tail(self) -> Cell:
        """Return the tail position (last element)."""
        return self.positions[-1]

    def peek_next_head(self, direction: Direction) -> Cell:
        """Where the head would be after one step in `direction`. Does not move."""
        dx, dy = DELTAS[direction]
        hx, hy = self.head
        return (hx + dx, hy + dy)

    def advance(self, new_head: Cell, grew: bool) -> None:
        """Push `new_head`; the tail is kept only when the snake grew."""
        self.positions.appendleft(new_head)
        if not grew:
            self.positions.pop()

    def __len__(self):
        return len(self.positions)

    def __contains__(self, cell):
        return cell in self.positions

    def __iter__(self):
        return iter(self.positions)

    def __repr__(self):
        return f"<Snake length={len(self.positions)}, head={self.head}>"
