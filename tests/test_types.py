from math import inf

import pytest

from gridpath.core.types import CellType, Grid, Position, cost_of, is_passable, manhattan


def test_cost_table():
    assert cost_of(CellType.EMPTY) == 1
    assert cost_of(CellType.START) == 1
    assert cost_of(CellType.GOAL) == 1
    assert cost_of(CellType.MUD) == 5
    assert cost_of(CellType.WATER) == 10
    assert cost_of(CellType.WALL) == inf


def test_only_walls_are_impassable():
    assert not is_passable(CellType.WALL)
    for t in (CellType.EMPTY, CellType.START, CellType.GOAL, CellType.MUD, CellType.WATER):
        assert is_passable(t)


def test_manhattan():
    assert manhattan(Position(0, 0), Position(2, 3)) == 5
    assert manhattan(Position(4, 1), Position(1, 4)) == 6


def test_position_equality_is_structural():
    assert Position(1, 2) == Position(1, 2)
    assert Position(1, 2) == (1, 2)
    assert Position(1, 2) != Position(2, 1)


def test_in_bounds():
    g = Grid.filled(4, 3)
    assert g.in_bounds(Position(0, 0))
    assert g.in_bounds(Position(2, 3))
    assert not g.in_bounds(Position(3, 0))
    assert not g.in_bounds(Position(0, 4))
    assert not g.in_bounds(Position(-1, 0))


def test_with_cell_copies_only_touched_row():
    g = Grid.filled(3, 3)
    g2 = g.with_cell(Position(1, 2), CellType.MUD)
    assert g[Position(1, 2)] == CellType.EMPTY
    assert g2[Position(1, 2)] == CellType.MUD
    assert g2.cells[0] is g.cells[0]
    assert g2.cells[2] is g.cells[2]
    assert g2.cells[1] is not g.cells[1]


def test_neighbors_skip_walls_and_edges(make_grid):
    g, _, _ = make_grid(
        ".#.",
        "...",
        ".~.",
    )
    assert set(g.neighbors4(Position(0, 0))) == {Position(1, 0)}
    assert set(g.neighbors4(Position(1, 1))) == {Position(1, 0), Position(1, 2), Position(2, 1)}


def test_cost_at_wall_raises(make_grid):
    g, _, _ = make_grid("#.")
    assert g.cost_at(Position(0, 1)) == 1
    with pytest.raises(ValueError):
        g.cost_at(Position(0, 0))


def test_find():
    g = Grid.filled(3, 2).with_cells({Position(0, 1): CellType.START, Position(1, 2): CellType.GOAL})
    assert g.find(CellType.START) == [Position(0, 1)]
    assert g.find(CellType.GOAL) == [Position(1, 2)]


def test_from_rows_rejects_ragged_rows():
    with pytest.raises(ValueError):
        Grid.from_rows([[CellType.EMPTY, CellType.EMPTY], [CellType.EMPTY]])
