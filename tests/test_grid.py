import random

import pytest

from cubesnake.grid import Grid, place_food


def test_contains_bounds():
    grid = Grid(30, 20)
    assert grid.contains((0, 0))
    assert grid.contains((29, 19))
    assert not grid.contains((-1, 0))
    assert not grid.contains((30, 5))
    assert not grid.contains((5, 20))
    assert not grid.contains((5, -1))


def test_cells_cover_grid():
    grid = Grid(3, 2)
    cells = list(grid.cells())
    assert len(cells) == grid.cell_count == 6
    assert cells[0] == (0, 0)
    assert cells[-1] == (2, 1)


def test_food_never_lands_on_snake():
    grid = Grid(6, 4)
    snake = [(x, y) for x in range(6) for y in range(3)]
    rng = random.Random(3)
    for _ in range(200):
        food = place_food(grid, snake, rng)
        assert food not in snake
        assert grid.contains(food)


def test_food_falls_back_to_free_cell_scan():
    grid = Grid(3, 1)
    occupied = [(0, 0), (1, 0)]
    assert place_food(grid, occupied, random.Random(1), max_attempts=0) == (2, 0)


def test_full_grid_has_no_food_cell():
    grid = Grid(2, 1)
    with pytest.raises(ValueError):
        place_food(grid, [(0, 0), (1, 0)], random.Random(1))
