# gridpath/core/types.py
#!/usr/bin/env python3
from dataclasses import dataclass, field
from enum import Enum
from math import inf
from typing import List, Tuple, Optional, Dict, Any, NamedTuple


class CellType(str, Enum):
    EMPTY = "empty"
    WALL = "wall"
    START = "start"
    GOAL = "goal"
    MUD = "mud"
    WATER = "water"


CELL_COSTS: Dict[CellType, float] = {
    CellType.EMPTY: 1,
    CellType.START: 1,
    CellType.GOAL: 1,
    CellType.MUD: 5,
    CellType.WATER: 10,
    CellType.WALL: inf,
}

# types a player may paint with set_cell
PAINTABLE = (CellType.EMPTY, CellType.WALL, CellType.MUD, CellType.WATER)


def cost_of(cell_type: CellType) -> float:
    return CELL_COSTS[cell_type]


def is_passable(cell_type: CellType) -> bool:
    return cost_of(cell_type) != inf


class Position(NamedTuple):
    row: int
    col: int


def manhattan(a: Position, b: Position) -> int:
    return abs(a.row - b.row) + abs(a.col - b.col)


@dataclass(frozen=True)
class Grid:
    width: int
    height: int
    cells: Tuple[Tuple[CellType, ...], ...]     # [row][col]

    @classmethod
    def filled(cls, width: int, height: int, cell_type: CellType = CellType.EMPTY) -> "Grid":
        row = (cell_type,) * width
        return cls(width, height, tuple(row for _ in range(height)))

    @classmethod
    def from_rows(cls, rows: List[List[CellType]]) -> "Grid":
        height = len(rows)
        width = len(rows[0]) if rows else 0
        if any(len(r) != width for r in rows):
            raise ValueError("rows size mismatch")
        return cls(width, height, tuple(tuple(r) for r in rows))

    def in_bounds(self, p: Position) -> bool:
        r, c = p
        return 0 <= r < self.height and 0 <= c < self.width

    def __getitem__(self, p: Position) -> CellType:
        r, c = p
        return self.cells[r][c]

    def is_block(self, p: Position) -> bool:
        return not is_passable(self[p])

    def cost_at(self, p: Position) -> float:
        """Cost of stepping INTO p."""
        if self.is_block(p):
            raise ValueError("Asked cost of a wall cell")
        return cost_of(self[p])

    def with_cell(self, p: Position, cell_type: CellType) -> "Grid":
        """Copy-on-write: only the touched row is rebuilt."""
        r, c = p
        row = self.cells[r]
        new_row = row[:c] + (cell_type,) + row[c + 1:]
        return Grid(self.width, self.height, self.cells[:r] + (new_row,) + self.cells[r + 1:])

    def with_cells(self, changes: Dict[Position, CellType]) -> "Grid":
        rows = [list(r) for r in self.cells]
        for (r, c), t in changes.items():
            rows[r][c] = t
        return Grid(self.width, self.height, tuple(tuple(r) for r in rows))

    def find(self, cell_type: CellType) -> List[Position]:
        return [
            Position(r, c)
            for r, row in enumerate(self.cells)
            for c, t in enumerate(row)
            if t == cell_type
        ]

    def neighbors4(self, p: Position) -> List[Position]:
        """In-bounds, non-wall 4-connected neighbors (up, down, left, right)."""
        r, c = p
        out: List[Position] = []
        for n in (Position(r - 1, c), Position(r + 1, c), Position(r, c - 1), Position(r, c + 1)):
            if self.in_bounds(n) and not self.is_block(n):
                out.append(n)
        return out


@dataclass(frozen=True)
class SearchResult:
    path: Tuple[Position, ...] = ()
    nodes_expanded: int = 0
    total_cost: float = 0

    @property
    def found(self) -> bool:
        return len(self.path) > 0


@dataclass
class StepResult:
    status: str                   # "idle" | "running" | "done" | "no_path"
    opened: List[Position] = field(default_factory=list)
    closed: List[Position] = field(default_factory=list)
    current: Optional[Position] = None
    path: Optional[List[Position]] = None
    metrics: Dict[str, Any] = field(default_factory=dict)
