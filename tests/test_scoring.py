import pytest

from gridpath.core.moves import Move, apply_move
from gridpath.core.scoring import rate, rate_sandbox, round_half_up, score_state
from gridpath.core.state import GameOptions, new_game


@pytest.mark.parametrize("x,expected", [(0.4, 0), (0.5, 1), (37.5, 38), (86.9, 87), (2.0, 2)])
def test_round_half_up(x, expected):
    assert round_half_up(x) == expected


def test_three_stars_under_par_on_both_metrics():
    # nodes well under par earns a node bonus of 25 * 1.5, rounded up
    assert rate(9, 10, 9, 25) == (3, 338)


def test_two_stars_within_cost_slack():
    assert rate(10, 30, 9, 25) == (2, 200)


def test_one_star_over_slack_keeps_node_bonus():
    assert rate(20, 10, 9, 25) == (1, 138)


def test_cost_bonus():
    # 50 * (10/8 - 1) = 12.5 rounds up
    stars, score = rate(8, 25, 10, 25)
    assert stars == 3
    assert score == 300 + 13 + 0


def test_sandbox_rating():
    assert rate_sandbox(9, 10, 10, 50) == (3, 87)
    assert rate_sandbox(4, 10, 50, 50) == (1, 28)
    stars, score = rate_sandbox(6, 10, 20, 50)
    assert (stars, score) == (2, 60)


def test_no_result_before_search():
    assert score_state(new_game()) is None


def test_first_steps_with_astar_is_perfect():
    res = apply_move(new_game(), Move("find_path", algorithm="astar"))
    assert res.valid
    assert res.result is not None
    assert res.result.status == "won"
    assert res.result.stars == 3
    assert res.result.score == 338
    assert res.result.total_moves == 1
    meta = res.result.metadata
    assert meta["pathLength"] == 10
    assert meta["pathCost"] == 9
    assert meta["nodesExpanded"] == 10
    assert meta["gridSize"] == "10x5"
    assert meta["levelName"] == "First Steps"


def test_sandbox_search_uses_sandbox_rating():
    state = new_game(GameOptions(mode="sandbox", width=6, height=3))
    state = apply_move(state, Move("set_start", row=1, col=0)).state
    state = apply_move(state, Move("set_goal", row=1, col=5)).state
    res = apply_move(state, Move("find_path", algorithm="astar"))
    assert res.result.metadata["mode"] == "sandbox"
    assert res.result.metadata["parCost"] == 0
    # 5 hops over a 6 cell path, 6 of 18 cells expanded
    assert res.result.score == round_half_up((5 / 6 * 0.7 + (1 - 6 / 18) * 0.3) * 100)
