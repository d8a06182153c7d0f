"""
Food placement.

Picks a uniformly random free cell. Sampling is bounded: a few random draws
while the board is sparse, then a direct pick from the list of free cells.
A full board yields None.
"""

import random
from typing import Collection, Optional

from .grid import Cell, Grid

# Rejection sampling is only worth it while at least half the board is free
MAX_RANDOM_ATTEMPTS = 32
SPARSE_OCCUPANCY = 0.5


class FoodSpawner:
    """
    Chooses food cells for a grid.

    Attributes:
        grid: the board food is placed on
        rng: random source (anything with randrange/choice, e.g. random.Random)
    """

    def __init__(self, grid: Grid, rng: Optional[random.Random] = None):
        self.grid = grid
        self.rng = rng if rng is not None else random.Random()

    def spawn(self, occupied: Collection[Cell]) -> Optional[Cell]:
        """
        Return a random cell not contained in `occupied`.

        Args:
            occupied: cells that food must not land on (the snake body)

        Returns:
            The chosen cell, or None when every cell is occupied (board full).
        """
        blocked = set(occupied)
        free_count = self.grid.cell_count() - sum(
            1 for cell in blocked if self.grid.is_in_bounds(cell)
        )
        if free_count <= 0:
            return None

        if free_count >= self.grid.cell_count() * SPARSE_OCCUPANCY:
            size = self.grid.size
            for _ in range(MAX_RANDOM_ATTEMPTS):
                cell = (self.rng.randrange(size), self.rng.randrange(size))
                if cell not in blocked:
                    return cell

        free_cells = [cell for cell in self.grid.cells() if cell not in blocked]
        return self.rng.choice(free_cells)
