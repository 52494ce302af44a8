"""Plain-text rendering of a PathfindingState for terminals and chat transports."""

from gridpath.core.scoring import score_state
from gridpath.core.state import PathfindingState
from gridpath.core.types import CellType

SYMBOLS = {
    CellType.EMPTY: "·",
    CellType.WALL: "█",
    CellType.START: "S",
    CellType.GOAL: "G",
    CellType.MUD: "~",
    CellType.WATER: "≋",
}
PATH_MARK = "★"

LEGEND = "Legend: · empty  █ wall  ~ mud(5)  ≋ water(10)  S start  G goal  ★ path"
TOOLS = "Tools: find_path [bfs|dijkstra|astar], load_level N, next_level, generate_maze, clear"


def format_grid(state: PathfindingState) -> str:
    on_path = set(state.path)
    lines = []
    for r, row in enumerate(state.grid.cells):
        line = []
        for c, t in enumerate(row):
            if (r, c) in on_path and t not in (CellType.START, CellType.GOAL):
                line.append(PATH_MARK)
            else:
                line.append(SYMBOLS[t])
        lines.append("".join(line))
    return "\n".join(lines)


def _result_lines(state: PathfindingState):
    if state.path_found is None:
        if state.mode == "challenge":
            yield "Use find_path to solve the level!"
        else:
            yield "Set start (S), goal (G), add obstacles, then run find_path"
        return

    if not state.path_found:
        yield f"✗ No path found. Nodes expanded: {state.nodes_expanded}"
        return

    yield (f"✓ Path found! Length: {state.path_length}, Cost: {state.path_cost:g}, "
           f"Nodes: {state.nodes_expanded}")
    if state.mode != "challenge" or state.par_cost <= 0:
        result = score_state(state)
        yield f"Score: {result.score} ({'⭐' * result.stars})"
        return

    cost_ok = state.path_cost <= state.par_cost
    nodes_ok = state.nodes_expanded <= state.par_nodes
    if cost_ok and nodes_ok:
        yield "⭐⭐⭐ PERFECT! Under par on both metrics!"
    elif cost_ok:
        yield f"⭐⭐ Good! Cost at par, but {state.nodes_expanded - state.par_nodes} extra nodes expanded"
    else:
        yield f"⭐ Completed! Cost {state.path_cost - state.par_cost:g} over par"

    yield ""
    if state.level_index < state.total_levels:
        yield "Use 'next_level' to continue!"
    else:
        yield "🎉 Congratulations! All levels completed!"


def render_text(state: PathfindingState) -> str:
    out = []
    if state.mode == "challenge" and state.level_index > 0:
        out.append(f"═══ Level {state.level_index}/{state.total_levels}: {state.level_name} ═══")
        if state.level_description:
            out.append(state.level_description)
        out.append(f"Par: Cost ≤{state.par_cost:g}, Nodes ≤{state.par_nodes}")
        if state.level_hint:
            out.append(f"Hint: {state.level_hint}")
    else:
        out.append(f"═══ Sandbox Mode: {state.level_name} ═══")
    out.append("")
    out.append(format_grid(state))
    out.append("")
    out.append(LEGEND)
    out.append(f"Algorithm: {state.algorithm.upper()}")
    out.append("")
    out.extend(_result_lines(state))
    out.append("")
    out.append(TOOLS)
    return "\n".join(out)
