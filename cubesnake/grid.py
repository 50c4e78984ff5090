"""Discrete board model: cells, headings and food placement."""

import random
from dataclasses import dataclass

UP = (0, -1)
DOWN = (0, 1)
LEFT = (-1, 0)
RIGHT = (1, 0)
DIRECTIONS = (UP, DOWN, LEFT, RIGHT)

# Random rolls tried before falling back to a scan of the free cells.
FOOD_ROLL_ATTEMPTS = 1000


@dataclass(frozen=True)
class Grid:
    """Fixed-size board; cells are (x, y) with the origin at the top left."""

    width: int
    height: int

    def contains(self, cell):
        """Return True if cell lies on the board."""
        x, y = cell
        return 0 <= x < self.width and 0 <= y < self.height

    @property
    def cell_count(self):
        """Number of cells on the board."""
        return self.width * self.height

    def cells(self):
        """Yield every cell row by row."""
        for y in range(self.height):
            for x in range(self.width):
                yield (x, y)


def place_food(grid, occupied, rng=random, max_attempts=FOOD_ROLL_ATTEMPTS):
    """Return a uniformly random cell of the grid that is not in occupied.

    Rolls are retried in a loop; once max_attempts rolls have all landed on
    the snake the choice is made among the remaining free cells instead, so
    the call always terminates.
    """
    blocked = set(occupied)
    for _ in range(max_attempts):
        pos = (rng.randrange(grid.width), rng.randrange(grid.height))
        if pos not in blocked:
            return pos

    free = [cell for cell in grid.cells() if cell not in blocked]
    if not free:
        raise ValueError("no free cell left for food")
    return rng.choice(free)
