#!/usr/bin/env python3
"""
Persisted and exported forms of a PathfindingState.

serialize/deserialize go through a pydantic schema (camelCase keys, cell
types as strings). Only cell types are stored: search scratch data never
lives on the grid, so nothing needs stripping.
"""

from typing import Any, Dict, List, Literal, Optional, Union

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StrictBool,
    StrictFloat,
    StrictInt,
    StrictStr,
    ValidationError,
    model_validator,
)
from pydantic.alias_generators import to_camel

from gridpath.core.errors import DeserializationError
from gridpath.core.state import PathfindingState
from gridpath.core.types import CellType, Grid, Position

CellName = Literal["empty", "wall", "start", "goal", "mud", "water"]
Number = Union[StrictInt, StrictFloat]

SANDBOX_ACTIONS = ["set_cell", "set_start", "set_goal", "find_path", "clear", "generate_maze", "load_level"]
CHALLENGE_ACTIONS = ["find_path", "load_level", "next_level"]


class _Schema(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")


class PositionSchema(_Schema):
    row: StrictInt
    col: StrictInt


class StateSchema(_Schema):
    game_id: StrictStr
    status: Literal["playing", "won"]
    move_count: StrictInt = Field(ge=0)
    width: StrictInt = Field(ge=1)
    height: StrictInt = Field(ge=1)
    grid: List[List[CellName]]
    start: Optional[PositionSchema] = None
    goal: Optional[PositionSchema] = None
    algorithm: Literal["bfs", "dijkstra", "astar"]
    path_found: Optional[StrictBool] = None
    path_length: StrictInt = Field(ge=0)
    path_cost: Number = Field(ge=0)
    nodes_expanded: StrictInt = Field(ge=0)
    path: List[PositionSchema] = Field(default_factory=list)
    mode: Literal["sandbox", "challenge"]
    difficulty: Literal["easy", "medium", "hard"]
    level_index: StrictInt = Field(ge=0)
    total_levels: StrictInt = Field(ge=0)
    level_name: StrictStr
    level_description: StrictStr = ""
    level_hint: Optional[StrictStr] = None
    par_cost: Number = Field(ge=0)
    par_nodes: StrictInt = Field(ge=0)

    @model_validator(mode="after")
    def _check_shape(self):
        if len(self.grid) != self.height or any(len(row) != self.width for row in self.grid):
            raise ValueError(f"grid is not {self.height}x{self.width}")

        for name, kind in (("start", "start"), ("goal", "goal")):
            declared = getattr(self, name)
            marked = [(r, c) for r, row in enumerate(self.grid) for c, t in enumerate(row) if t == kind]
            expected = [] if declared is None else [(declared.row, declared.col)]
            if marked != expected:
                raise ValueError(f"{name} {expected} does not match grid cells {marked}")

        for p in self.path:
            if not (0 <= p.row < self.height and 0 <= p.col < self.width):
                raise ValueError(f"path position ({p.row}, {p.col}) out of bounds")
        if len(self.path) != self.path_length:
            raise ValueError("pathLength does not match path")
        return self


def _pos(p: Optional[Position]) -> Optional[Dict[str, int]]:
    return None if p is None else {"row": p.row, "col": p.col}


def to_schema(state: PathfindingState) -> StateSchema:
    return StateSchema(
        game_id=state.game_id,
        status=state.status,
        move_count=state.move_count,
        width=state.width,
        height=state.height,
        grid=[[t.value for t in row] for row in state.grid.cells],
        start=_pos(state.start),
        goal=_pos(state.goal),
        algorithm=state.algorithm,
        path_found=state.path_found,
        path_length=state.path_length,
        path_cost=state.path_cost,
        nodes_expanded=state.nodes_expanded,
        path=[_pos(p) for p in state.path],
        mode=state.mode,
        difficulty=state.difficulty,
        level_index=state.level_index,
        total_levels=state.total_levels,
        level_name=state.level_name,
        level_description=state.level_description,
        level_hint=state.level_hint,
        par_cost=state.par_cost,
        par_nodes=state.par_nodes,
    )


def from_schema(s: StateSchema) -> PathfindingState:
    def pos(p: Optional[PositionSchema]) -> Optional[Position]:
        return None if p is None else Position(p.row, p.col)

    return PathfindingState(
        grid=Grid(s.width, s.height, tuple(tuple(CellType(t) for t in row) for row in s.grid)),
        start=pos(s.start),
        goal=pos(s.goal),
        algorithm=s.algorithm,
        path_found=s.path_found,
        path_length=s.path_length,
        path_cost=s.path_cost,
        nodes_expanded=s.nodes_expanded,
        path=tuple(pos(p) for p in s.path),
        mode=s.mode,
        difficulty=s.difficulty,
        level_index=s.level_index,
        total_levels=s.total_levels,
        level_name=s.level_name,
        level_description=s.level_description,
        level_hint=s.level_hint,
        par_cost=s.par_cost,
        par_nodes=s.par_nodes,
        game_id=s.game_id,
        status=s.status,
        move_count=s.move_count,
    )


def serialize(state: PathfindingState) -> str:
    return to_schema(state).model_dump_json(by_alias=True)


def deserialize(data: Union[str, bytes]) -> PathfindingState:
    try:
        schema = StateSchema.model_validate_json(data)
    except (ValidationError, ValueError, TypeError) as ex:
        raise DeserializationError(f"Invalid pathfinding state data: {ex}") from ex
    return from_schema(schema)


def render_json(state: PathfindingState) -> Dict[str, Any]:
    """Structured snapshot for a UI layer."""
    path: List[Dict[str, int]] = [_pos(p) for p in state.path]
    return {
        "gameType": "pathfinding",
        "gameId": state.game_id,
        "status": state.status,
        "moveCount": state.move_count,
        "legalMoves": list(SANDBOX_ACTIONS if state.mode == "sandbox" else CHALLENGE_ACTIONS),
        "board": {
            "grid": [[t.value for t in row] for row in state.grid.cells],
            "width": state.width,
            "height": state.height,
            "start": _pos(state.start),
            "goal": _pos(state.goal),
        },
        "extra": {
            "mode": state.mode,
            "levelIndex": state.level_index,
            "totalLevels": state.total_levels,
            "levelName": state.level_name,
            "levelDescription": state.level_description,
            "levelHint": state.level_hint,
            "parCost": state.par_cost,
            "parNodes": state.par_nodes,
            "algorithm": state.algorithm,
            "pathFound": state.path_found,
            "pathLength": state.path_length,
            "pathCost": state.path_cost,
            "nodesExpanded": state.nodes_expanded,
            "path": path,
        },
    }
