"""
Text console for the pathfinding game.

Run "gridpath-console" (or python -m gridpath.app.console) and type commands:
    set_cell 2,3 wall | set_start 0,0 | set_goal 4,4 | find_path astar
    clear | maze | level 3 | next | compare | help | quit
"""

import argparse
import logging
import random
import sys
from dataclasses import replace
from typing import Iterable, Optional, TextIO

from gridpath.app.config import Settings
from gridpath.app.logger_config import configure_logging
from gridpath.app.text_view import render_text
from gridpath.core.algorithms import ALGORITHMS, run_search
from gridpath.core.moves import apply_move
from gridpath.core.notation import format_move, parse_move
from gridpath.core.state import PathfindingState, new_game

logger = logging.getLogger(__name__)

QUIT_WORDS = ("quit", "exit", "q")


def compare_algorithms(state: PathfindingState) -> str:
    """Run every algorithm on the current grid and tabulate the outcome."""
    if state.start is None or state.goal is None:
        return "Set start and goal first"
    lines = [f"{'algorithm':<10} {'found':<6} {'length':>6} {'cost':>6} {'expanded':>8}"]
    for tag in ALGORITHMS:
        res = run_search(tag, state.grid, state.start, state.goal)
        lines.append(f"{tag:<10} {'yes' if res.found else 'no':<6} {len(res.path):>6} "
                     f"{res.total_cost:>6g} {res.nodes_expanded:>8}")
    return "\n".join(lines)


def run_session(state: PathfindingState, commands: Iterable[str], out: TextIO,
                rng: Optional[random.Random] = None) -> PathfindingState:
    print(render_text(state), file=out)
    for raw in commands:
        line = raw.strip()
        if not line:
            continue
        if line.lower() in QUIT_WORDS:
            break
        if line.lower() == "help":
            print(__doc__, file=out)
            continue
        if line.lower() == "compare":
            print(compare_algorithms(state), file=out)
            continue

        move = parse_move(line)
        if move is None:
            logger.warning("Unparseable command: %r", line)
            print(f"Can't parse {line!r}; type 'help' for commands", file=out)
            continue

        res = apply_move(state, move, rng)
        if not res.valid:
            logger.warning("Rejected %s: %s", format_move(move), res.error.kind)
            print(f"[{res.error.kind}] {res.error.message}", file=out)
            continue

        state = res.state
        if move.action == "find_path":
            logger.info("%s on %s: found=%s cost=%s expanded=%d", state.algorithm, state.level_name,
                        state.path_found, state.path_cost, state.nodes_expanded)
        print(render_text(state), file=out)
        if res.result is not None:
            print(f"Score: {res.result.score} | Stars: {res.result.stars}", file=out)
    return state


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Grid pathfinding game (text console).")
    parser.add_argument("--mode", choices=["sandbox", "challenge"], default=None, help="Game mode.")
    parser.add_argument("--difficulty", choices=["easy", "medium", "hard"], default=None, help="Sandbox grid size preset.")
    parser.add_argument("--level", type=int, default=None, help="Challenge level to start on.")
    parser.add_argument("--width", type=int, default=None, help="Sandbox grid width.")
    parser.add_argument("--height", type=int, default=None, help="Sandbox grid height.")
    parser.add_argument("--algorithm", choices=list(ALGORITHMS), default=None, help="Default search algorithm.")
    parser.add_argument("--seed", type=int, default=None, help="Seed for maze generation (default: random).")
    parser.add_argument("--log-level", type=str, default=None, help="Logging level.")
    return parser.parse_args(argv)


def main(argv=None, stdin: TextIO = sys.stdin, stdout: TextIO = sys.stdout):
    args = parse_args(argv)
    overrides = {k.upper(): v for k, v in vars(args).items() if v is not None}
    settings = Settings(**overrides)
    configure_logging(settings.LOG_LEVEL)

    rng = random.Random(settings.SEED) if settings.SEED is not None else None
    state = replace(new_game(settings.game_options()), algorithm=settings.ALGORITHM)
    logger.info("New %s game: %s", state.mode, state.level_name)
    run_session(state, stdin, stdout, rng)


if __name__ == "__main__":
    main()
