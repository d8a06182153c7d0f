"""
Grid entity - the fixed square board the snake moves on.
"""

from typing import Iterator, Tuple

Cell = Tuple[int, int]


class Grid:
    """
    A square board of size x size cells.

    The size is fixed at construction; every check is a pure function of it.
    """

    def __init__(self, size: int):
        if not isinstance(size, int) or isinstance(size, bool) or size < 1:
            raise ValueError(f"Grid size must be a positive integer, got {size!r}.")
        self._size = size

    @property
    def size(self) -> int:
        return self._size

    def is_in_bounds(self, cell: Cell) -> bool:
        x, y = cell
        return 0 <= x < self._size and 0 <= y < self._size

    def cell_count(self) -> int:
        return self._size * self._size

    def cells(self) -> Iterator[Cell]:
        """Yield every cell, row by row from the top."""
        for y in range(self._size):
            for x in range(self._size):
                yield (x, y)

    def center(self) -> Cell:
        """The default starting cell, (10, 10) on a 20x20 board."""
        return (self._size // 2, self._size // 2)

    def __repr__(self):
        return f"<Grid {self._size}x{self._size}>"
