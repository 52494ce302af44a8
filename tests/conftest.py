import random

import pytest

from gridpath.core.levels import SYMBOLS
from gridpath.core.types import CellType, Grid, Position


def grid_from(*rows):
    """Build (grid, start, goal) from map rows using the level legend."""
    cells = []
    start = goal = None
    for r, line in enumerate(rows):
        row = []
        for c, ch in enumerate(line):
            t = SYMBOLS[ch]
            if t == CellType.START:
                start = Position(r, c)
            elif t == CellType.GOAL:
                goal = Position(r, c)
            row.append(t)
        cells.append(row)
    return Grid.from_rows(cells), start, goal


def random_grid(rng: random.Random, width: int = 12, height: int = 9):
    terrain = [CellType.EMPTY, CellType.WALL, CellType.MUD, CellType.WATER]
    weights = [55, 20, 15, 10]
    rows = [rng.choices(terrain, weights, k=width) for _ in range(height)]
    cells = [(r, c) for r in range(height) for c in range(width)]
    (sr, sc), (gr, gc) = rng.sample(cells, 2)
    rows[sr][sc] = CellType.START
    rows[gr][gc] = CellType.GOAL
    return Grid.from_rows(rows), Position(sr, sc), Position(gr, gc)


@pytest.fixture
def make_grid():
    return grid_from


@pytest.fixture
def open_grid():
    # "First Steps" layout: 10x5, no obstacles
    return grid_from(
        "..........",
        "..........",
        "S........G",
        "..........",
        "..........",
    )
