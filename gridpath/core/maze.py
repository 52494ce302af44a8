#!/usr/bin/env python3
"""
Maze generation with recursive backtracking (iterative DFS over a stack).

Cells on odd (row, col) coordinates form the maze lattice; the walls between
them sit on the even coordinates. Carving from (1, 1) reaches every lattice
cell exactly once, so the result is a perfect maze. A second pass sprinkles
mud and water over empty cells; both are passable so connectivity holds.
"""

import random
from typing import List, Optional, Tuple

from gridpath.core.errors import InvalidOption
from gridpath.core.types import CellType, Grid, Position

MIN_MAZE_SIZE = 5
TERRAIN_CHANCE = 0.1
STEPS2 = [(0, 2), (2, 0), (0, -2), (-2, 0)]


def _carve(cells: List[List[CellType]], width: int, height: int, rng: random.Random) -> None:
    start = Position(1, 1)
    cells[start.row][start.col] = CellType.EMPTY
    stack = [start]

    while stack:
        cur = stack[-1]
        candidates = []
        for dr, dc in STEPS2:
            nr, nc = cur.row + dr, cur.col + dc
            if 0 < nr < height - 1 and 0 < nc < width - 1 and cells[nr][nc] == CellType.WALL:
                candidates.append(Position(nr, nc))
        if not candidates:
            stack.pop()
            continue
        nxt = rng.choice(candidates)
        cells[(cur.row + nxt.row) // 2][(cur.col + nxt.col) // 2] = CellType.EMPTY
        cells[nxt.row][nxt.col] = CellType.EMPTY
        stack.append(nxt)


def _connect(cells: List[List[CellType]], p: Position) -> None:
    """Join p to the nearest lattice cell up-left of it (even dimensions leave p off the lattice)."""
    target = Position(p.row - (p.row % 2 == 0), p.col - (p.col % 2 == 0))
    r, c = p
    cells[r][c] = CellType.EMPTY
    while r != target.row:
        r -= 1
        cells[r][c] = CellType.EMPTY
    while c != target.col:
        c -= 1
        cells[r][c] = CellType.EMPTY


def _sprinkle_terrain(cells: List[List[CellType]], rng: random.Random) -> None:
    for row in cells:
        for c, t in enumerate(row):
            if t == CellType.EMPTY and rng.random() < TERRAIN_CHANCE:
                row[c] = CellType.MUD if rng.random() < 0.5 else CellType.WATER


def generate_maze(
    width: int,
    height: int,
    rng: Optional[random.Random] = None,
) -> Tuple[Grid, Position, Position]:
    """Return (grid, start, goal); start is (1, 1), goal is (height-2, width-2)."""
    if width < MIN_MAZE_SIZE or height < MIN_MAZE_SIZE:
        raise InvalidOption(f"Maze needs at least {MIN_MAZE_SIZE}x{MIN_MAZE_SIZE} cells, got {width}x{height}")
    rng = rng or random.Random()

    cells = [[CellType.WALL] * width for _ in range(height)]
    _carve(cells, width, height, rng)

    start = Position(1, 1)
    goal = Position(height - 2, width - 2)
    _connect(cells, goal)
    _sprinkle_terrain(cells, rng)

    cells[start.row][start.col] = CellType.START
    cells[goal.row][goal.col] = CellType.GOAL
    return Grid.from_rows(cells), start, goal
