"""
Base player interface for the game engine.
"""

from typing import Optional

from domain.constants import Direction
from domain.game_state import GameSnapshot


class Player:
    """
    Base class/interface for anything that steers the snake.

    A player looks at a snapshot of the game and returns the direction it
    wants for the next tick. The driver passes that to
    GameLoop.request_direction(), so reversals are still filtered there.
    """

    def get_move(self, snapshot: GameSnapshot) -> Optional[Direction]:
        """
        Return a direction given the current snapshot.

        Args:
            snapshot: Read-only view of the game

        Returns:
            One of UP, DOWN, LEFT, RIGHT, or None to keep going straight
        """
        raise NotImplementedError
