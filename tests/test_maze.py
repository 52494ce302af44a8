import random

import pytest

from gridpath.core.algorithms import run_search
from gridpath.core.errors import InvalidOption
from gridpath.core.maze import generate_maze
from gridpath.core.types import CellType, Position, is_passable

SIZES = [(5, 5), (10, 10), (11, 7), (20, 15), (6, 9), (30, 20)]


@pytest.mark.parametrize("width,height", SIZES)
@pytest.mark.parametrize("seed", range(8))
def test_goal_always_reachable(width, height, seed):
    grid, start, goal = generate_maze(width, height, random.Random(seed))
    assert start == Position(1, 1)
    assert goal == Position(height - 2, width - 2)
    assert grid[start] == CellType.START
    assert grid[goal] == CellType.GOAL
    assert run_search("bfs", grid, start, goal).found


@pytest.mark.parametrize("width,height", SIZES)
def test_border_stays_walled(width, height):
    grid, _, _ = generate_maze(width, height, random.Random(3))
    for c in range(width):
        assert grid[Position(0, c)] == CellType.WALL
        assert grid[Position(height - 1, c)] == CellType.WALL
    for r in range(height):
        assert grid[Position(r, 0)] == CellType.WALL
        assert grid[Position(r, width - 1)] == CellType.WALL


@pytest.mark.parametrize("width,height", SIZES)
@pytest.mark.parametrize("seed", range(4))
def test_carved_cells_form_a_tree(width, height, seed):
    grid, _, _ = generate_maze(width, height, random.Random(seed))
    open_cells = [Position(r, c) for r in range(height) for c in range(width)
                  if is_passable(grid[Position(r, c)])]
    edges = sum(len(grid.neighbors4(p)) for p in open_cells) // 2
    # perfect maze: connected with exactly one simple path between any two cells
    assert edges == len(open_cells) - 1


def test_same_seed_same_maze():
    a = generate_maze(15, 11, random.Random(42))
    b = generate_maze(15, 11, random.Random(42))
    assert a == b


def test_different_seeds_differ():
    mazes = {generate_maze(21, 21, random.Random(s))[0] for s in range(5)}
    assert len(mazes) > 1


def test_terrain_sprinkled_on_large_mazes():
    grid, _, _ = generate_maze(41, 41, random.Random(1))
    kinds = {t for row in grid.cells for t in row}
    assert CellType.MUD in kinds
    assert CellType.WATER in kinds


def test_too_small_maze_rejected():
    with pytest.raises(InvalidOption):
        generate_maze(4, 10)
    with pytest.raises(InvalidOption):
        generate_maze(10, 3)


def test_default_rng_used_when_none_given():
    grid, start, goal = generate_maze(9, 9)
    assert run_search("astar", grid, start, goal).found
