"""
GameState entity - the single mutable state of a running game, and the
read-only snapshot handed to renderers.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional, Tuple

from .collision import CollisionResult
from .constants import Direction
from .grid import Cell
from .snake import Snake


class GameStatus(str, Enum):
    READY = "ready"
    RUNNING = "running"
    OVER = "over"
    WON = "won"


TERMINAL_STATUSES = {GameStatus.OVER, GameStatus.WON}


class GameState:
    """
    The state of one game, owned by whoever drives the GameLoop.

    Attributes:
        grid_size: board is grid_size x grid_size cells
        snake: the Snake (head first)
        direction: direction used by the last tick
        pending_direction: requested direction, applied at the next tick
        food: (x, y) of the food, None once the board is full
        score: points collected so far
        speed_ms: delay before the next tick
        status: READY, RUNNING, OVER or WON
        tick_count: number of ticks processed
        last_collision: collision found on the last tick
        last_grew: whether the last tick ate food
    """

    def __init__(
        self,
        grid_size: int,
        snake: Snake,
        direction: Direction,
        food: Optional[Cell],
        speed_ms: int,
        score: int = 0,
        status: GameStatus = GameStatus.READY
    ):
        self.grid_size = grid_size
        self.snake = snake
        self.direction = direction
        self.pending_direction = direction
        self.food = food
        self.score = score
        self.speed_ms = speed_ms
        self.status = status
        self.tick_count = 0
        self.last_collision = CollisionResult.NONE
        self.last_grew = False

    @property
    def alive(self) -> bool:
        return self.status not in TERMINAL_STATUSES

    @property
    def is_terminal(self) -> bool:
        return self.status in TERMINAL_STATUSES

    def snapshot(self) -> "GameSnapshot":
        return GameSnapshot(
            grid_size=self.grid_size,
            snake=tuple(self.snake.positions),
            direction=self.direction,
            pending_direction=self.pending_direction,
            food=self.food,
            score=self.score,
            speed_ms=self.speed_ms,
            status=self.status,
            tick_count=self.tick_count,
            last_collision=self.last_collision,
            last_grew=self.last_grew,
        )

    def __repr__(self):
        return (
            f"<GameState tick={self.tick_count}, status={self.status.value}, "
            f"score={self.score}, length={len(self.snake)}, food={self.food}>"
        )


@dataclass(frozen=True)
class GameSnapshot:
    """Read-only copy of a GameState. Renderers read this, never the live state."""

    grid_size: int
    snake: Tuple[Cell, ...]
    direction: Direction
    pending_direction: Direction
    food: Optional[Cell]
    score: int
    speed_ms: int
    status: GameStatus
    tick_count: int
    last_collision: CollisionResult
    last_grew: bool

    @property
    def alive(self) -> bool:
        return self.status not in TERMINAL_STATUSES

    @property
    def head(self) -> Cell:
        return self.snake[0]

    def to_dict(self) -> Dict[str, Any]:
        """
        JSON-friendly representation. Cells become [x, y] lists.
        """
        return {
            "grid_size": self.grid_size,
            "snake": [list(cell) for cell in self.snake],
            "direction": self.direction.value,
            "pending_direction": self.pending_direction.value,
            "food": list(self.food) if self.food is not None else None,
            "score": self.score,
            "speed_ms": self.speed_ms,
            "status": self.status.value,
            "alive": self.alive,
            "tick_count": self.tick_count,
            "last_collision": self.last_collision.value,
            "last_grew": self.last_grew,
        }

    def print_board(self) -> str:
        """
        Returns a string representation of the board with:
        . = empty space
        F = food
        H = snake head
        S = snake body
        Row 0 is printed first (top of the screen), x-axis labels at the bottom.
        """
        board = [['.' for _ in range(self.grid_size)] for _ in range(self.grid_size)]

        if self.food is not None:
            fx, fy = self.food
            board[fy][fx] = 'F'

        # Draw the body back to front so the head wins any shared cell
        for pos_idx in range(len(self.snake) - 1, -1, -1):
            x, y = self.snake[pos_idx]
            if 0 <= x < self.grid_size and 0 <= y < self.grid_size:
                board[y][x] = 'H' if pos_idx == 0 else 'S'

        result = []
        for y in range(self.grid_size):
            result.append(f"{y:2d} {' '.join(board[y])}")

        # Single digit labels keep the columns aligned on large boards
        result.append("   " + " ".join(str(i % 10) for i in range(self.grid_size)))

        return "\n".join(result)
