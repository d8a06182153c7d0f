"""
GameLoop - the rules of one tick and the READY -> RUNNING -> OVER/WON
state machine.

The loop never schedules anything itself. A driver (the terminal runner, the
HTTP adapter, a test) calls tick() every `state.speed_ms` milliseconds and
re-reads `speed_ms` after each tick, since eating food changes it.
"""

import logging
import random
from typing import Callable, Iterable, List, Optional

from .collision import CollisionResult, check_collision
from .constants import GRID_SIZE, INITIAL_DIRECTION, POINTS_PER_FOOD, Direction
from .food import FoodSpawner
from .game_state import GameSnapshot, GameState, GameStatus
from .grid import Cell, Grid
from .snake import Snake, parse_direction, resolve_direction
from .speed import SpeedController

logger = logging.getLogger(__name__)

GameOverListener = Callable[[int], None]


class GameLoop:
    """
    Manages:
      - Grid and food placement
      - Tick interval
      - Game-over listeners (e.g. the scoreboard reporter)

    The GameState itself is passed in and out; the loop keeps only its
    configuration.
    """

    def __init__(
        self,
        grid_size: int = GRID_SIZE,
        speed: Optional[SpeedController] = None,
        rng: Optional[random.Random] = None
    ):
        self.grid = Grid(grid_size)
        self.rng = rng if rng is not None else random.Random()
        self.spawner = FoodSpawner(self.grid, self.rng)
        self.speed = speed if speed is not None else SpeedController()
        self._listeners: List[GameOverListener] = []

    def add_game_over_listener(self, listener: GameOverListener) -> None:
        """Register a callback that receives the final score once per game."""
        self._listeners.append(listener)

    def _use_grid(self, grid_size: Optional[int]) -> None:
        if grid_size is not None and grid_size != self.grid.size:
            self.grid = Grid(grid_size)
            self.spawner = FoodSpawner(self.grid, self.rng)

    def new_game(
        self,
        grid_size: Optional[int] = None,
        initial_snake: Optional[Iterable[Cell]] = None,
        initial_direction: Direction = INITIAL_DIRECTION
    ) -> GameState:
        """
        Build a fresh READY state.

        Raises:
            ValueError: for an empty, overlapping or out-of-bounds snake, or
                an unknown direction.
        """
        self._use_grid(grid_size)

        direction = parse_direction(initial_direction)
        if direction is None:
            raise ValueError(f"Unknown direction {initial_direction!r}.")

        cells = list(initial_snake) if initial_snake is not None else [self.grid.center()]
        snake = Snake(cells)
        for cell in snake:
            if not self.grid.is_in_bounds(cell):
                raise ValueError(f"Snake segment out of bounds at {cell}.")
        if len(set(snake.positions)) != len(snake):
            raise ValueError("Snake segments must not overlap.")

        state = GameState(
            grid_size=self.grid.size,
            snake=snake,
            direction=direction,
            food=self.spawner.spawn(snake.positions),
            speed_ms=self.speed.next_interval_ms(0),
        )
        if state.food is None:
            # The snake already covers the whole board
            state.status = GameStatus.WON
        return state

    def begin(self, state: GameState) -> GameState:
        """READY -> RUNNING. Any other status is left alone."""
        if state.status == GameStatus.READY:
            state.status = GameStatus.RUNNING
            logger.info(f"Game started on a {state.grid_size}x{state.grid_size} grid")
        return state

    def start(
        self,
        grid_size: Optional[int] = None,
        initial_snake: Optional[Iterable[Cell]] = None,
        initial_direction: Direction = INITIAL_DIRECTION
    ) -> GameState:
        """Create a new game and put it straight into RUNNING."""
        return self.begin(self.new_game(grid_size, initial_snake, initial_direction))

    def restart(self, grid_size: Optional[int] = None) -> GameState:
        """
        Throw the old game away and start over from the default layout:
        one segment in the centre of the board, heading RIGHT, score 0.
        """
        return self.start(grid_size)

    def request_direction(self, state: GameState, direction) -> bool:
        """
        Buffer a direction for the next tick.

        Only `pending_direction` is written. Returns False when the request
        is ignored (unknown input, reversal of the active direction, or a
        finished game).
        """
        if state.is_terminal:
            return False
        requested = parse_direction(direction)
        if requested is None:
            return False
        if resolve_direction(state.direction, requested) != requested:
            return False
        state.pending_direction = requested
        return True

    def tick(self, state: GameState) -> GameState:
        """
        Execute one step:
          1) Resolve the pending direction
          2) Compute the next head
          3) Check collisions (game over on wall/self)
          4) Eat food: grow, score, respawn food, speed up
          5) Otherwise move, dropping the tail

        Ticks on a game that is not RUNNING do nothing.
        """
        if state.status != GameStatus.RUNNING:
            return state

        state.direction = resolve_direction(state.direction, state.pending_direction)
        state.pending_direction = state.direction

        next_head = state.snake.peek_next_head(state.direction)
        grows = next_head == state.food
        collision = check_collision(state.snake, next_head, self.grid, grows=grows)

        state.tick_count += 1
        state.last_collision = collision
        state.last_grew = False

        if collision != CollisionResult.NONE:
            state.status = GameStatus.OVER
            logger.info(
                f"Game over: {collision.value} collision at {next_head} "
                f"after {state.tick_count} ticks, score {state.score}"
            )
            self._notify_game_over(state)
            return state

        state.snake.advance(next_head, grew=grows)

        if grows:
            state.last_grew = True
            state.score += POINTS_PER_FOOD
            state.speed_ms = self.speed.next_interval_ms(state.score)
            state.food = self.spawner.spawn(state.snake.positions)
            if state.food is None:
                state.status = GameStatus.WON
                logger.info(f"Board full after {state.tick_count} ticks, score {state.score}")
                self._notify_game_over(state)

        return state

    def snapshot(self, state: GameState) -> GameSnapshot:
        return state.snapshot()

    def _notify_game_over(self, state: GameState) -> None:
        for listener in self._listeners:
            try:
                listener(state.score)
            except Exception as e:
                logger.warning(f"Game-over listener {listener!r} failed: {e}")
