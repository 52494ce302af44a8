import pytest

from gridpath.core.moves import Move
from gridpath.core.notation import format_move, parse_move


@pytest.mark.parametrize("text,move", [
    ("set_cell 2,3 wall", Move("set_cell", row=2, col=3, cell_type="wall")),
    ("  SET_CELL 0,0 Mud ", Move("set_cell", row=0, col=0, cell_type="mud")),
    ("set_start 1,4", Move("set_start", row=1, col=4)),
    ("set_goal 0,9", Move("set_goal", row=0, col=9)),
    ("find_path", Move("find_path")),
    ("find_path bfs", Move("find_path", algorithm="bfs")),
    ("clear", Move("clear")),
    ("maze", Move("generate_maze")),
    ("generate_maze", Move("generate_maze")),
    ("level 4", Move("load_level", level=4)),
    ("load_level 10", Move("load_level", level=10)),
    ("next", Move("next_level")),
])
def test_parse(text, move):
    assert parse_move(text) == move


@pytest.mark.parametrize("text", [
    "",
    "   ",
    "jump",
    "set_cell",
    "set_cell 1 wall",
    "set_cell 1,2",
    "set_cell 1,2 start",
    "set_cell a,b wall",
    "set_start 1,2,3",
    "level",
    "level two",
])
def test_unparseable(text):
    assert parse_move(text) is None


@pytest.mark.parametrize("text", [
    "set_cell 2,3 water",
    "set_start 0,0",
    "set_goal 4,9",
    "find_path dijkstra",
    "find_path",
    "clear",
    "generate_maze",
    "load_level 7",
    "next_level",
])
def test_format_reads_back(text):
    assert format_move(parse_move(text)) == text
