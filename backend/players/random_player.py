"""
Random player implementation - picks random safe moves.
"""

import random
from typing import List, Optional

from domain.constants import DELTAS, OPPOSITES, Direction
from domain.game_state import GameSnapshot
from .base import Player


class RandomPlayer(Player):
    """
    An autopilot that picks a random direction avoiding walls, its own body
    and a reversal. Used by the terminal runner and for demos.
    """

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng if rng is not None else random.Random()

    def get_move(self, snapshot: GameSnapshot) -> Direction:
        head_x, head_y = snapshot.head
        body = snapshot.snake
        # The tail moves away this tick unless the snake is about to eat
        blocking = set(body[:-1])

        valid_moves: List[Direction] = []
        for move, (dx, dy) in DELTAS.items():
            if move == OPPOSITES[snapshot.direction]:
                continue

            new_x, new_y = head_x + dx, head_y + dy

            # Check wall collisions
            if not (0 <= new_x < snapshot.grid_size and 0 <= new_y < snapshot.grid_size):
                continue

            # Check self collisions (excluding tail which will move)
            if (new_x, new_y) in blocking:
                continue

            # Take food when it is one step away
            if (new_x, new_y) == snapshot.food:
                return move

            valid_moves.append(move)

        # If no valid moves, keep going (we'll die anyway)
        if not valid_moves:
            return snapshot.direction

        return self.rng.choice(valid_moves)
