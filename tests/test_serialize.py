import json
import random

import pytest

from gridpath.core.errors import DeserializationError
from gridpath.core.moves import Move, apply_move
from gridpath.core.serialize import deserialize, render_json, serialize
from gridpath.core.state import GameOptions, new_game


def solved_level():
    return apply_move(new_game(), Move("find_path")).state


def edited_sandbox():
    state = new_game(GameOptions(mode="sandbox", width=5, height=4))
    for move in (Move("set_start", row=0, col=0), Move("set_cell", row=1, col=1, cell_type="water"),
                 Move("set_cell", row=2, col=2, cell_type="mud")):
        state = apply_move(state, move).state
    return state


def random_maze():
    state = new_game(GameOptions(mode="sandbox", width=9, height=7))
    return apply_move(state, Move("generate_maze"), rng=random.Random(4)).state


@pytest.mark.parametrize("make", [new_game, solved_level, edited_sandbox, random_maze])
def test_round_trip(make):
    state = make()
    assert deserialize(serialize(state)) == state


def test_keys_are_camel_case():
    data = json.loads(serialize(solved_level()))
    assert data["gameId"]
    assert data["pathFound"] is True
    assert data["nodesExpanded"] == 10
    assert data["levelName"] == "First Steps"
    assert data["grid"][2][0] == "start"
    assert data["path"][0] == {"row": 2, "col": 0}
    assert "game_id" not in data


def _tampered(**changes):
    data = json.loads(serialize(solved_level()))
    data.update(changes)
    return json.dumps(data)


@pytest.mark.parametrize("payload", [
    "not json",
    "{}",
    "[]",
    json.dumps({"gameId": "x"}),
    _tampered(width="10"),
    _tampered(width=11),
    _tampered(height=0),
    _tampered(status="lost"),
    _tampered(algorithm="dfs"),
    _tampered(start={"row": 0, "col": 0}),
    _tampered(goal=None),
    _tampered(grid=[["lava"] * 10] * 5),
    _tampered(path=[{"row": 9, "col": 9}], pathLength=1),
    _tampered(pathLength=3),
    _tampered(moveCount=-1),
])
def test_malformed_data(payload):
    with pytest.raises(DeserializationError) as info:
        deserialize(payload)
    assert info.value.kind == "DeserializationError"


def test_render_json_board():
    view = render_json(solved_level())
    assert view["gameType"] == "pathfinding"
    assert view["status"] == "won"
    assert view["moveCount"] == 1
    assert view["board"]["width"] == 10
    assert view["board"]["height"] == 5
    assert view["board"]["start"] == {"row": 2, "col": 0}
    assert view["board"]["goal"] == {"row": 2, "col": 9}
    assert len(view["board"]["grid"]) == 5


def test_render_json_extra():
    extra = render_json(solved_level())["extra"]
    assert extra["mode"] == "challenge"
    assert extra["levelIndex"] == 1
    assert extra["totalLevels"] == 10
    assert extra["parCost"] == 9
    assert extra["pathCost"] == 9
    assert extra["pathLength"] == 10
    assert len(extra["path"]) == 10


def test_render_json_lists_actions_for_mode():
    assert "next_level" in render_json(new_game())["legalMoves"]
    sandbox = render_json(edited_sandbox())
    assert "set_cell" in sandbox["legalMoves"]
    assert sandbox["board"]["goal"] is None
    assert sandbox["extra"]["pathFound"] is None
