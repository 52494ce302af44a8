#!/usr/bin/env python3
"""
Immutable game snapshot and session creation.

A PathfindingState is never mutated; moves build a new one with
dataclasses.replace, and the Grid inside is itself copy-on-write.
"""

import uuid
from dataclasses import dataclass, field, replace
from typing import Optional, Tuple

from gridpath.core.algorithms import DEFAULT_ALGORITHM
from gridpath.core.errors import InvalidOption
from gridpath.core.levels import DIFFICULTIES, TOTAL_LEVELS, Level, get_level, parse_level
from gridpath.core.types import Grid, Position

MODES = ("sandbox", "challenge")

DIFFICULTY_SIZES = {
    "easy": (10, 8),
    "medium": (20, 15),
    "hard": (30, 20),
}


def new_game_id() -> str:
    return uuid.uuid4().hex


@dataclass(frozen=True)
class PathfindingState:
    grid: Grid
    start: Optional[Position] = None
    goal: Optional[Position] = None
    algorithm: str = DEFAULT_ALGORITHM
    # last search result; path_found is None until a search has run
    path_found: Optional[bool] = None
    path_length: int = 0
    path_cost: float = 0
    nodes_expanded: int = 0
    path: Tuple[Position, ...] = ()
    # level metadata
    mode: str = "sandbox"
    difficulty: str = "medium"
    level_index: int = 0
    total_levels: int = TOTAL_LEVELS
    level_name: str = "Sandbox"
    level_description: str = ""
    level_hint: Optional[str] = None
    par_cost: float = 0
    par_nodes: int = 0
    # session bookkeeping
    game_id: str = field(default_factory=new_game_id)
    status: str = "playing"       # "playing" | "won"
    move_count: int = 0

    @property
    def width(self) -> int:
        return self.grid.width

    @property
    def height(self) -> int:
        return self.grid.height

    def cleared_result(self) -> "PathfindingState":
        return replace(self, path_found=None, path_length=0, path_cost=0,
                       nodes_expanded=0, path=())


@dataclass(frozen=True)
class GameOptions:
    width: Optional[int] = None
    height: Optional[int] = None
    difficulty: str = "medium"
    level: int = 1
    mode: str = "challenge"

    def __post_init__(self):
        if self.mode not in MODES:
            raise InvalidOption(f"mode must be one of {MODES}, got {self.mode!r}")
        if self.difficulty not in DIFFICULTIES:
            raise InvalidOption(f"difficulty must be one of {DIFFICULTIES}, got {self.difficulty!r}")
        for name in ("width", "height"):
            v = getattr(self, name)
            if v is not None and (not isinstance(v, int) or v < 1):
                raise InvalidOption(f"{name} must be a positive integer, got {v!r}")


def level_state(state: PathfindingState, number: int) -> PathfindingState:
    """Replace grid/endpoints with catalog level `number` and reset the result."""
    level: Level = get_level(number)
    grid, start, goal = parse_level(level)
    return replace(
        state.cleared_result(),
        grid=grid,
        start=start,
        goal=goal,
        mode="challenge",
        status="playing",
        difficulty=level.difficulty,
        level_index=number,
        level_name=level.name,
        level_description=level.description,
        level_hint=level.hint,
        par_cost=level.par_cost,
        par_nodes=level.par_nodes,
    )


def new_game(options: Optional[GameOptions] = None) -> PathfindingState:
    options = options or GameOptions()

    if options.mode == "challenge" and 1 <= options.level <= TOTAL_LEVELS:
        return level_state(PathfindingState(grid=Grid.filled(1, 1)), options.level)

    # sandbox, or a challenge level outside the catalog
    width, height = DIFFICULTY_SIZES[options.difficulty]
    width = options.width or width
    height = options.height or height
    return PathfindingState(grid=Grid.filled(width, height), difficulty=options.difficulty)


