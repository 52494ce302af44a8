#!/usr/bin/env python3
"""
Move dispatcher: apply one discrete action to an immutable state.

Handlers raise PathfindingError subclasses; apply_move turns them into a
failed MoveResult that carries the untouched previous state. A successful
move always returns a brand-new state (move_count + 1).
"""

import random
from dataclasses import dataclass, replace
from typing import Any, Callable, Dict, List, Mapping, Optional

from gridpath.core.algorithms import ALGORITHMS, make_algo
from gridpath.core.errors import (
    InvalidCellType,
    MissingParameters,
    MissingStartOrGoal,
    NoMoreLevels,
    NotInChallengeMode,
    OutOfBounds,
    PathfindingError,
    UnknownAction,
)
from gridpath.core.levels import TOTAL_LEVELS
from gridpath.core.maze import generate_maze
from gridpath.core.scoring import GameResult, score_state
from gridpath.core.state import PathfindingState, level_state
from gridpath.core.types import PAINTABLE, CellType, Grid, Position

ACTIONS = (
    "set_cell", "set_start", "set_goal", "find_path",
    "clear", "generate_maze", "load_level", "next_level",
)


@dataclass(frozen=True)
class Move:
    action: str
    row: Optional[int] = None
    col: Optional[int] = None
    cell_type: Optional[str] = None
    algorithm: Optional[str] = None
    level: Optional[int] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Move":
        """Build from the tagged request record ({action, row?, col?, cellType?, algorithm?, level?})."""
        return cls(
            action=data.get("action"),
            row=data.get("row"),
            col=data.get("col"),
            cell_type=data.get("cellType", data.get("cell_type")),
            algorithm=data.get("algorithm"),
            level=data.get("level"),
        )

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {"action": self.action}
        for key, value in (("row", self.row), ("col", self.col), ("cellType", self.cell_type),
                           ("algorithm", self.algorithm), ("level", self.level)):
            if value is not None:
                out[key] = value
        return out


@dataclass(frozen=True)
class MoveResult:
    state: PathfindingState
    valid: bool
    error: Optional[PathfindingError] = None
    result: Optional[GameResult] = None


# -------------------- validation helpers --------------------

def _is_int(v) -> bool:
    return isinstance(v, int) and not isinstance(v, bool)


def _target(state: PathfindingState, move: Move) -> Position:
    if move.row is None or move.col is None:
        raise MissingParameters(f"{move.action} needs row and col")
    if not (_is_int(move.row) and _is_int(move.col)):
        raise MissingParameters(f"{move.action} needs integer row and col")
    p = Position(move.row, move.col)
    if not state.grid.in_bounds(p):
        raise OutOfBounds(f"Position ({p.row}, {p.col}) is outside {state.height}x{state.width}")
    return p


def _paint_type(move: Move) -> CellType:
    if not move.cell_type:
        raise MissingParameters("set_cell needs row, col and cellType")
    try:
        t = CellType(move.cell_type)
    except ValueError:
        raise InvalidCellType(f"Unknown cell type {move.cell_type!r}") from None
    if t not in PAINTABLE:
        raise InvalidCellType(f"set_cell cannot place {t.value}; use set_start / set_goal")
    return t


def _edited(state: PathfindingState, **changes) -> PathfindingState:
    return replace(state.cleared_result(), status="playing", **changes)


# -------------------- handlers --------------------

def _set_cell(state: PathfindingState, move: Move, rng) -> PathfindingState:
    p = _target(state, move)
    t = _paint_type(move)
    start = None if state.start == p else state.start
    goal = None if state.goal == p else state.goal
    return _edited(state, grid=state.grid.with_cell(p, t), start=start, goal=goal)


def _place_endpoint(state: PathfindingState, move: Move, which: str) -> PathfindingState:
    p = _target(state, move)
    kind = CellType.START if which == "start" else CellType.GOAL
    other = "goal" if which == "start" else "start"

    changes: Dict[Position, CellType] = {}
    old = getattr(state, which)
    if old is not None:
        changes[old] = CellType.EMPTY
    changes[p] = kind
    fields = {which: p}
    if getattr(state, other) == p:
        fields[other] = None
    return _edited(state, grid=state.grid.with_cells(changes), **fields)


def _set_start(state, move, rng):
    return _place_endpoint(state, move, "start")


def _set_goal(state, move, rng):
    return _place_endpoint(state, move, "goal")


def _find_path(state: PathfindingState, move: Move, rng) -> PathfindingState:
    if state.start is None or state.goal is None:
        raise MissingStartOrGoal("Set start and goal first")
    tag = move.algorithm or state.algorithm
    algo = make_algo(tag)
    algo.init(state.grid, state.start, state.goal)
    res = algo.run()
    return replace(
        state,
        algorithm=tag,
        path_found=res.found,
        path_length=len(res.path),
        path_cost=res.total_cost,
        nodes_expanded=res.nodes_expanded,
        path=res.path,
        status="won" if res.found else "playing",
    )


def _clear(state: PathfindingState, move: Move, rng) -> PathfindingState:
    return _edited(state, grid=Grid.filled(state.width, state.height), start=None, goal=None)


def _generate_maze(state: PathfindingState, move: Move, rng) -> PathfindingState:
    grid, start, goal = generate_maze(state.width, state.height, rng)
    return _edited(
        state, grid=grid, start=start, goal=goal,
        mode="sandbox", level_index=0, level_name="Random Maze",
        level_description="", level_hint=None, par_cost=0, par_nodes=0,
    )


def _load_level(state: PathfindingState, move: Move, rng) -> PathfindingState:
    return level_state(state, 1 if move.level is None else move.level)


def _next_level(state: PathfindingState, move: Move, rng) -> PathfindingState:
    if state.mode != "challenge":
        raise NotInChallengeMode("Not in challenge mode")
    if state.level_index + 1 > TOTAL_LEVELS:
        raise NoMoreLevels("No more levels - you completed all challenges!")
    return level_state(state, state.level_index + 1)


HANDLERS: Dict[str, Callable[[PathfindingState, Move, Optional[random.Random]], PathfindingState]] = {
    "set_cell": _set_cell,
    "set_start": _set_start,
    "set_goal": _set_goal,
    "find_path": _find_path,
    "clear": _clear,
    "generate_maze": _generate_maze,
    "load_level": _load_level,
    "next_level": _next_level,
}


# -------------------- public API --------------------

def apply_move(state: PathfindingState, move: Move, rng: Optional[random.Random] = None) -> MoveResult:
    """Apply one move. rng only feeds generate_maze; pass a seeded Random for reproducible mazes."""
    handler = HANDLERS.get(move.action) if isinstance(move.action, str) else None
    try:
        if handler is None:
            raise UnknownAction(f"Unknown action {move.action!r}")
        new_state = handler(state, move, rng)
    except PathfindingError as ex:
        return MoveResult(state=state, valid=False, error=ex)

    new_state = replace(new_state, move_count=state.move_count + 1)
    result = score_state(new_state) if move.action == "find_path" else None
    return MoveResult(state=new_state, valid=True, result=result)


def is_game_over(state: PathfindingState) -> bool:
    return state.status == "won"


def legal_moves(state: PathfindingState) -> List[Move]:
    moves = [Move("load_level", level=i) for i in range(1, TOTAL_LEVELS + 1)]
    if state.mode == "challenge" and state.level_index < TOTAL_LEVELS and state.path_found:
        moves.append(Move("next_level"))

    if state.mode == "sandbox":
        for r in range(state.height):
            for c in range(state.width):
                for t in (CellType.WALL, CellType.MUD, CellType.WATER, CellType.EMPTY):
                    moves.append(Move("set_cell", row=r, col=c, cell_type=t.value))
        if state.start is None:
            moves.append(Move("set_start", row=0, col=0))
        if state.goal is None:
            moves.append(Move("set_goal", row=state.height - 1, col=state.width - 1))

    if state.start is not None and state.goal is not None:
        moves.extend(Move("find_path", algorithm=tag) for tag in ALGORITHMS)

    moves.append(Move("clear"))
    moves.append(Move("generate_maze"))
    return moves


def is_legal_move(state: PathfindingState, move: Move) -> bool:
    if move.action in ("set_cell", "set_start", "set_goal"):
        try:
            _target(state, move)
        except PathfindingError:
            return False
        return True
    if move.action == "find_path":
        return state.start is not None and state.goal is not None
    return move.action in ACTIONS
