#!/usr/bin/env python3
"""
Text command notation for moves.

    set_cell R,C TYPE      TYPE in empty|wall|mud|water
    set_start R,C
    set_goal R,C
    find_path [bfs|dijkstra|astar]   (default: the state's algorithm)
    clear
    generate_maze | maze
    load_level N | level N
    next_level | next
"""

from typing import Optional

from gridpath.core.moves import Move
from gridpath.core.types import PAINTABLE


def _coords(token: Optional[str]):
    if not token:
        return None
    parts = token.split(",")
    if len(parts) != 2:
        return None
    try:
        return int(parts[0]), int(parts[1])
    except ValueError:
        return None


def parse_move(text: str) -> Optional[Move]:
    parts = text.strip().lower().split()
    if not parts:
        return None
    cmd, args = parts[0], parts[1:]

    if cmd in ("set_cell", "set_start", "set_goal"):
        rc = _coords(args[0] if args else None)
        if rc is None:
            return None
        if cmd != "set_cell":
            return Move(cmd, row=rc[0], col=rc[1])
        if len(args) < 2 or args[1] not in {t.value for t in PAINTABLE}:
            return None
        return Move("set_cell", row=rc[0], col=rc[1], cell_type=args[1])

    if cmd == "find_path":
        return Move("find_path", algorithm=args[0] if args else None)
    if cmd == "clear":
        return Move("clear")
    if cmd in ("generate_maze", "maze"):
        return Move("generate_maze")
    if cmd in ("load_level", "level"):
        try:
            return Move("load_level", level=int(args[0]))
        except (IndexError, ValueError):
            return None
    if cmd in ("next_level", "next"):
        return Move("next_level")
    return None


def format_move(move: Move) -> str:
    if move.action == "set_cell":
        return f"set_cell {move.row},{move.col} {move.cell_type}"
    if move.action in ("set_start", "set_goal"):
        return f"{move.action} {move.row},{move.col}"
    if move.action == "find_path":
        return f"find_path {move.algorithm}" if move.algorithm else "find_path"
    if move.action == "load_level":
        return f"load_level {move.level if move.level is not None else 1}"
    return str(move.action)
