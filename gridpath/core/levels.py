#!/usr/bin/env python3
"""
Challenge level catalog.

Each level is a JSON file under gridpath/maps/ named NN_slug.json. The file
order is the catalog order; level numbers are 1-based.

Map legend: . empty, # wall, ~ mud, ≈ water, S start, G goal.
Rows shorter than the level width are padded with empty cells, characters
past the width are ignored, and whitespace reads as empty.
"""

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Optional, Tuple

from gridpath.core.errors import InvalidLevel, LevelFormatError
from gridpath.core.types import CellType, Grid, Position

MAP_DIR = Path(__file__).resolve().parents[1] / "maps"

SYMBOLS: Dict[str, CellType] = {
    ".": CellType.EMPTY,
    " ": CellType.EMPTY,
    "\t": CellType.EMPTY,
    "#": CellType.WALL,
    "~": CellType.MUD,
    "≈": CellType.WATER,
    "S": CellType.START,
    "G": CellType.GOAL,
}

DIFFICULTIES = ("easy", "medium", "hard")


@dataclass(frozen=True)
class Level:
    id: int
    name: str
    description: str
    width: int
    height: int
    map: Tuple[str, ...]
    par_cost: float
    par_nodes: int
    difficulty: str
    hint: Optional[str] = None


def parse_level(level: Level) -> Tuple[Grid, Optional[Position], Optional[Position]]:
    """Scan the ASCII map into (grid, start, goal)."""
    rows: List[List[CellType]] = []
    start: Optional[Position] = None
    goal: Optional[Position] = None

    for r, line in enumerate(level.map):
        row = [CellType.EMPTY] * level.width
        for c, ch in enumerate(line[:level.width]):
            t = SYMBOLS.get(ch)
            if t is None:
                raise LevelFormatError(f"Level {level.id}: unknown symbol {ch!r} at ({r}, {c})")
            if t == CellType.START:
                if start is not None:
                    raise LevelFormatError(f"Level {level.id}: more than one start")
                start = Position(r, c)
            elif t == CellType.GOAL:
                if goal is not None:
                    raise LevelFormatError(f"Level {level.id}: more than one goal")
                goal = Position(r, c)
            row[c] = t
        rows.append(row)

    return Grid(level.width, len(rows), tuple(tuple(r) for r in rows)), start, goal


def load_level_file(path: Path) -> Level:
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    try:
        rows = data["map"]
        if isinstance(rows, str):
            rows = [line for line in rows.split("\n") if line]
        level = Level(
            id=int(data["id"]),
            name=str(data["name"]),
            description=str(data.get("description", "")),
            width=int(data["width"]),
            height=int(data["height"]),
            map=tuple(rows),
            par_cost=data["parCost"],
            par_nodes=int(data["parNodes"]),
            difficulty=str(data.get("difficulty", "medium")),
            hint=data.get("hint"),
        )
    except (KeyError, TypeError, ValueError) as ex:
        raise LevelFormatError(f"{path.name}: {ex}") from ex

    if len(level.map) != level.height:
        raise LevelFormatError(f"{path.name}: map has {len(level.map)} rows, expected {level.height}")
    if level.difficulty not in DIFFICULTIES:
        raise LevelFormatError(f"{path.name}: unknown difficulty {level.difficulty!r}")
    # validates symbols and single start/goal
    parse_level(level)
    return level


def load_catalog(map_dir: Path = MAP_DIR) -> Tuple[Level, ...]:
    return tuple(load_level_file(p) for p in sorted(map_dir.glob("*.json")))


LEVELS: Tuple[Level, ...] = load_catalog()
TOTAL_LEVELS = len(LEVELS)


def get_level(number: int, catalog: Tuple[Level, ...] = LEVELS) -> Level:
    """1-based lookup."""
    if isinstance(number, bool) or not isinstance(number, int) or not 1 <= number <= len(catalog):
        raise InvalidLevel(f"Level must be 1-{len(catalog)}, got {number!r}")
    return catalog[number - 1]
