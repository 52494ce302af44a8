#!/usr/bin/env python3
"""
Star rating for a solved grid.

Challenge (par present):
  3 stars  cost <= par cost and nodes <= par nodes
  2 stars  cost <= par cost * 1.2
  1 star   otherwise
  score = stars * 100 + bonus for beating par on cost (x50) and nodes (x25)

Sandbox (no par):
  score = 100 * (0.7 * manhattan/path_length + 0.3 * (1 - nodes/cells)),
  stars at >= 80 / >= 50.
"""

import math
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from gridpath.core.types import manhattan

THREE_STAR_SANDBOX = 80
TWO_STAR_SANDBOX = 50
TWO_STAR_COST_SLACK = 1.2


def round_half_up(x: float) -> int:
    return int(math.floor(x + 0.5))


@dataclass(frozen=True)
class GameResult:
    status: str
    score: int
    stars: int
    total_moves: int
    metadata: Dict[str, Any] = field(default_factory=dict)


def rate(path_cost: float, nodes_expanded: int, par_cost: float, par_nodes: int):
    """Challenge rating -> (stars, score)."""
    if path_cost <= par_cost and nodes_expanded <= par_nodes:
        stars = 3
    elif path_cost <= par_cost * TWO_STAR_COST_SLACK:
        stars = 2
    else:
        stars = 1

    score = stars * 100
    cost_ratio = par_cost / max(path_cost, 1)
    nodes_ratio = par_nodes / max(nodes_expanded, 1)
    if cost_ratio >= 1:
        score += round_half_up((cost_ratio - 1) * 50)
    if nodes_ratio >= 1:
        score += round_half_up((nodes_ratio - 1) * 25)
    return stars, score


def rate_sandbox(optimal_length: int, path_length: int, nodes_expanded: int, cells: int):
    """Sandbox rating -> (stars, score)."""
    length_efficiency = optimal_length / path_length
    expansion_efficiency = max(0.0, 1 - nodes_expanded / cells)
    score = round_half_up((length_efficiency * 0.7 + expansion_efficiency * 0.3) * 100)
    if score >= THREE_STAR_SANDBOX:
        stars = 3
    elif score >= TWO_STAR_SANDBOX:
        stars = 2
    else:
        stars = 1
    return stars, score


def score_state(state) -> Optional[GameResult]:
    """Result for a solved state, None if the last search found no path (or none ran)."""
    if not state.path_found:
        return None

    if state.mode == "challenge" and state.par_cost > 0:
        stars, score = rate(state.path_cost, state.nodes_expanded, state.par_cost, state.par_nodes)
    else:
        optimal = manhattan(state.start, state.goal) if state.start and state.goal else state.path_length
        stars, score = rate_sandbox(optimal, state.path_length, state.nodes_expanded,
                                    state.width * state.height)

    return GameResult(
        status="won",
        score=score,
        stars=stars,
        total_moves=state.move_count,
        metadata={
            "algorithm": state.algorithm,
            "pathLength": state.path_length,
            "pathCost": state.path_cost,
            "nodesExpanded": state.nodes_expanded,
            "gridSize": f"{state.width}x{state.height}",
            "level": state.level_index,
            "levelName": state.level_name,
            "parCost": state.par_cost,
            "parNodes": state.par_nodes,
            "stars": stars,
            "mode": state.mode,
        },
    )
