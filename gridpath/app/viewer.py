#!/usr/bin/env python3
"""
Pathfinding Game Viewer: pygame front-end over the move dispatcher

- Keyboard:
    [1]..[9], [0] -> load level 1..10
    [B]/[D]/[A]   -> find path with BFS / Dijkstra / A*
    [N]           -> next level
    [M]           -> random maze (sandbox)
    [C]           -> clear grid
    [W]/[U]/[R]/[E] -> brush: wall / mud / water / empty
    [S]/[G]       -> brush: place start / goal
    [Q]/[ESC]     -> quit
- Mouse: left click paints the brush on a cell, right click erases.

Settings: GRIDPATH_* env vars or --mode=, --level=, --difficulty=, --seed= flags.
"""

import logging
import random
from dataclasses import replace
from typing import Dict, List, Optional, Tuple

import pygame

from gridpath.app.config import Settings, load_settings
from gridpath.app.logger_config import configure_logging
from gridpath.core.moves import Move, MoveResult, apply_move
from gridpath.core.scoring import score_state
from gridpath.core.state import PathfindingState, new_game
from gridpath.core.types import CellType, Position

logger = logging.getLogger(__name__)

# ---------- Config ----------
PANEL_W = 320            # right band: metrics + buttons
GRID_MARGIN = 16
FONT_NAME = None  # default pygame font

# Colors
WHITE       = (255,255,255)
BLACK       = (  0,  0,  0)
BLUE        = ( 70,130,180)
RED         = (220, 50, 47)
NEON_MINT   = (0,255,200)

CARD_BG     = (24,28,36,220)
CARD_HI     = (255,255,255,18)
TEXT_LIGHT  = (230,235,240)
ACCENT_GOLD = (255,210,0)
ERROR_RED   = (255,120,120)

TERRAIN_COLORS: Dict[CellType, Tuple[int,int,int]] = {
    CellType.EMPTY: (200,200,200),
    CellType.START: (200,200,200),
    CellType.GOAL:  (200,200,200),
    CellType.WALL:  ( 30, 30, 34),
    CellType.MUD:   (139, 98, 58),
    CellType.WATER: ( 64,128,214),
}

LEVEL_KEYS = {getattr(pygame, f"K_{i}"): (i or 10) for i in range(10)}
ALGO_KEYS = {pygame.K_b: "bfs", pygame.K_d: "dijkstra", pygame.K_a: "astar"}
BRUSH_KEYS = {
    pygame.K_w: "wall",
    pygame.K_u: "mud",
    pygame.K_r: "water",
    pygame.K_e: "empty",
    pygame.K_s: "start",
    pygame.K_g: "goal",
}


# ---------- Simple UI Button ----------
class UIButton:
    def __init__(self, label: str, rect: pygame.Rect, callback, *, togglable: bool = False):
        self.label = label
        self.rect = rect
        self.callback = callback
        self.hover = False
        self.togglable = togglable
        self.active = False  # highlight state

    def set_active(self, value: bool):
        self.active = bool(value)

    def draw(self, screen: pygame.Surface, font: pygame.font.Font):
        base = pygame.Surface(self.rect.size, pygame.SRCALPHA)
        bg_idle   = (36, 40, 48, 220)
        bg_hover  = (46, 50, 60, 230)
        bg_active = (58, 86, 160, 235)
        border_active = (120, 170, 255, 255)

        if self.active and self.togglable:
            bg = bg_active
        elif self.hover:
            bg = bg_hover
        else:
            bg = bg_idle
        pygame.draw.rect(base, bg, base.get_rect(), border_radius=10)
        screen.blit(base, self.rect.topleft)

        if self.active and self.togglable:
            pygame.draw.rect(screen, border_active, self.rect, width=2, border_radius=10)

        text = font.render(self.label, True, (235,238,242))
        screen.blit(text, text.get_rect(center=self.rect.center))

    def handle_mouse(self, event: pygame.event.Event) -> bool:
        if event.type == pygame.MOUSEMOTION:
            self.hover = self.rect.collidepoint(event.pos)
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            if self.rect.collidepoint(event.pos):
                self.callback()
                return True
        return False


# ---------- Viewer ----------
class Viewer:
    def __init__(self, state: PathfindingState, settings: Optional[Settings] = None):
        pygame.init()

        self.settings = settings or Settings()
        self.state = state
        self.rng = random.Random(self.settings.SEED) if self.settings.SEED is not None else None
        self.brush = "wall"
        self.message = ""
        self.alive = True

        self.font_small = pygame.font.Font(FONT_NAME, 14)
        self.font = pygame.font.Font(FONT_NAME, 18)
        self.font_big = pygame.font.Font(FONT_NAME, 22)

        self.cell_size = self.settings.CELL_SIZE
        win_w, win_h = self._window_size()
        self.screen = pygame.display.set_mode((win_w, win_h))
        self._buttons: List[UIButton] = []
        self._layout(win_w, win_h)
        self._caption()
        self.clock = pygame.time.Clock()

    # ---------- layout ----------
    def _window_size(self) -> Tuple[int, int]:
        grid_px_w = GRID_MARGIN*2 + self.state.width  * self.cell_size
        grid_px_h = GRID_MARGIN*2 + self.state.height * self.cell_size
        return grid_px_w + PANEL_W, max(grid_px_h, 620)

    def _layout(self, win_w: int, win_h: int):
        """Fit an integer cell_size to the window and keep PANEL_W free on the right."""
        avail_w = max(1, win_w - PANEL_W - 2 * GRID_MARGIN)
        avail_h = max(1, win_h - 2 * GRID_MARGIN)
        cs_by_w = avail_w // self.state.width
        cs_by_h = avail_h // self.state.height
        self.cell_size = int(max(8, min(cs_by_w, cs_by_h, self.settings.CELL_SIZE)))

        self._grid_origin = (GRID_MARGIN, GRID_MARGIN)
        self._right_band = pygame.Rect(win_w - PANEL_W, 0, PANEL_W, win_h)
        self._build_buttons()

    def _resize_for_state(self):
        win_w, win_h = self._window_size()
        if (win_w, win_h) != self.screen.get_size():
            self.screen = pygame.display.set_mode((win_w, win_h))
        self._layout(win_w, win_h)

    def _caption(self):
        pygame.display.set_caption(f"Pathfinding: {self.state.level_name}")

    def cell_at(self, pixel: Tuple[int, int]) -> Optional[Position]:
        ox, oy = self._grid_origin
        x, y = pixel
        col = (x - ox) // self.cell_size
        row = (y - oy) // self.cell_size
        p = Position(row, col)
        return p if x >= ox and y >= oy and self.state.grid.in_bounds(p) else None

    # ---------- moves ----------
    def dispatch(self, move: Move) -> MoveResult:
        res = apply_move(self.state, move, self.rng)
        if not res.valid:
            self.message = f"{res.error.kind}: {res.error.message}"
            logger.warning("Rejected %s: %s", move.action, res.error.message)
            return res

        resized = (res.state.width, res.state.height) != (self.state.width, self.state.height)
        self.state = res.state
        self.message = ""
        if move.action in ("load_level", "next_level", "generate_maze", "clear"):
            logger.info("%s -> %s", move.action, self.state.level_name)
            self._caption()
        if resized:
            self._resize_for_state()
        if res.result is not None:
            self.message = f"Score {res.result.score}  " + "*" * res.result.stars
            logger.info("%s solved %s: cost=%s expanded=%d stars=%d", self.state.algorithm,
                        self.state.level_name, self.state.path_cost, self.state.nodes_expanded,
                        res.result.stars)
        elif move.action == "find_path":
            self.message = "No path"
        self._refresh_active_states()
        return res

    def paint(self, p: Position, erase: bool = False) -> MoveResult:
        if erase:
            return self.dispatch(Move("set_cell", row=p.row, col=p.col, cell_type="empty"))
        if self.brush in ("start", "goal"):
            return self.dispatch(Move(f"set_{self.brush}", row=p.row, col=p.col))
        return self.dispatch(Move("set_cell", row=p.row, col=p.col, cell_type=self.brush))

    def _set_brush(self, brush: str):
        self.brush = brush
        self._refresh_active_states()

    # ---------- loop ----------
    def run(self):
        while self.alive:
            self._handle_events()
            self._draw()
            self.clock.tick(60)
        pygame.quit()

    def _handle_events(self):
        for e in pygame.event.get():
            if e.type == pygame.QUIT:
                self.alive = False
            elif e.type == pygame.KEYDOWN:
                self._handle_key(e.key)
            elif e.type in (pygame.MOUSEMOTION, pygame.MOUSEBUTTONDOWN):
                if any(b.handle_mouse(e) for b in self._buttons):
                    continue
                if e.type == pygame.MOUSEBUTTONDOWN and e.button in (1, 3):
                    p = self.cell_at(e.pos)
                    if p is not None:
                        self.paint(p, erase=e.button == 3)

    def _handle_key(self, key: int):
        if key in (pygame.K_ESCAPE, pygame.K_q):
            self.alive = False
        elif key in LEVEL_KEYS:
            self.dispatch(Move("load_level", level=LEVEL_KEYS[key]))
        elif key in ALGO_KEYS:
            self.dispatch(Move("find_path", algorithm=ALGO_KEYS[key]))
        elif key in BRUSH_KEYS:
            self._set_brush(BRUSH_KEYS[key])
        elif key == pygame.K_n:
            self.dispatch(Move("next_level"))
        elif key == pygame.K_m:
            self.dispatch(Move("generate_maze"))
        elif key == pygame.K_c:
            self.dispatch(Move("clear"))

    # ---------- drawing ----------
    def _draw(self):
        self.screen.fill((24, 26, 32))
        self._draw_grid()
        self._draw_metrics_and_buttons()
        pygame.display.flip()

    def _draw_grid(self):
        cs = self.cell_size
        ox, oy = self._grid_origin

        for row, cells in enumerate(self.state.grid.cells):
            for col, t in enumerate(cells):
                rect = pygame.Rect(ox + col*cs, oy + row*cs, cs, cs)
                pygame.draw.rect(self.screen, TERRAIN_COLORS[t], rect)
                pygame.draw.rect(self.screen, BLACK, rect, 1)

        if len(self.state.path) >= 2:
            pts = [(ox + c*cs + cs//2, oy + r*cs + cs//2) for (r, c) in self.state.path]
            pygame.draw.lines(self.screen, NEON_MINT, False, pts, max(2, cs // 5))

        if self.state.start is not None:
            self._draw_badge(self.state.start, BLUE, "S")
        if self.state.goal is not None:
            self._draw_badge(self.state.goal, RED, "G")

    def _draw_badge(self, p: Position, color: Tuple[int,int,int], label: str):
        cs = self.cell_size
        ox, oy = self._grid_origin
        cx = ox + p.col*cs + cs//2
        cy = oy + p.row*cs + cs//2
        pygame.draw.circle(self.screen, color, (cx, cy), max(4, cs//2 - 2))
        txt = self.font_small.render(label, True, WHITE)
        self.screen.blit(txt, txt.get_rect(center=(cx, cy)))

    # ---------- buttons + metrics ----------
    def _build_buttons(self):
        self._buttons.clear()
        rb = self._right_band
        x = rb.x + 16
        y = rb.y + 300  # leaves space for metrics card above
        w = rb.width - 32
        h = 34
        gap = 8
        half = (w - 8) // 2

        def add(label, cb, rect, *, togglable=False, store_as: Optional[str] = None):
            btn = UIButton(label, rect, cb, togglable=togglable)
            self._buttons.append(btn)
            if store_as:
                setattr(self, store_as, btn)

        third = (w - 16) // 3
        for i, (label, tag) in enumerate((("BFS", "bfs"), ("Dijkstra", "dijkstra"), ("A*", "astar"))):
            add(label, lambda tag=tag: self.dispatch(Move("find_path", algorithm=tag)),
                pygame.Rect(x + i*(third + 8), y, third, h), togglable=True, store_as=f"btn_algo_{tag}")
        y += h + gap

        add("Maze", lambda: self.dispatch(Move("generate_maze")), pygame.Rect(x, y, half, h))
        add("Clear", lambda: self.dispatch(Move("clear")), pygame.Rect(x + half + 8, y, half, h))
        y += h + gap
        add("Next level", lambda: self.dispatch(Move("next_level")), pygame.Rect(x, y, w, h))
        y += h + gap

        for i, brush in enumerate(("wall", "mud", "water")):
            add(brush.title(), lambda brush=brush: self._set_brush(brush),
                pygame.Rect(x + i*(third + 8), y, third, h), togglable=True, store_as=f"btn_brush_{brush}")
        y += h + gap
        for i, brush in enumerate(("empty", "start", "goal")):
            add(brush.title(), lambda brush=brush: self._set_brush(brush),
                pygame.Rect(x + i*(third + 8), y, third, h), togglable=True, store_as=f"btn_brush_{brush}")

        self._refresh_active_states()

    def _refresh_active_states(self):
        for tag in ("bfs", "dijkstra", "astar"):
            btn = getattr(self, f"btn_algo_{tag}", None)
            if btn:
                btn.set_active(self.state.algorithm == tag)
        for brush in ("wall", "mud", "water", "empty", "start", "goal"):
            btn = getattr(self, f"btn_brush_{brush}", None)
            if btn:
                btn.set_active(self.brush == brush)

    def _metric_lines(self) -> List[Tuple[str, Tuple[int,int,int]]]:
        s = self.state
        lines = []
        if s.mode == "challenge" and s.level_index > 0:
            lines.append((f"Level {s.level_index}/{s.total_levels}: {s.level_name}", ACCENT_GOLD))
            lines.append((f"Par: cost {s.par_cost:g}, nodes {s.par_nodes}", TEXT_LIGHT))
        else:
            lines.append((f"Sandbox: {s.level_name}", ACCENT_GOLD))
        lines.append((f"Algo: {s.algorithm}", TEXT_LIGHT))
        if s.path_found is None:
            lines.append(("No search yet", TEXT_LIGHT))
        else:
            lines.append((f"Path found: {'yes' if s.path_found else 'no'}", TEXT_LIGHT))
            lines.append((f"Path Len: {s.path_length}", TEXT_LIGHT))
            lines.append((f"Total Cost: {s.path_cost:g}", TEXT_LIGHT))
            lines.append((f"Expanded: {s.nodes_expanded}", TEXT_LIGHT))
            result = score_state(s)
            if result is not None:
                lines.append((f"Stars: {result.stars}  Score: {result.score}", ACCENT_GOLD))
        lines.append((f"Brush: {self.brush}", TEXT_LIGHT))
        if self.message:
            lines.append((self.message, ERROR_RED if ":" in self.message else TEXT_LIGHT))
        return lines

    def _draw_metrics_and_buttons(self):
        rb = self._right_band

        card = pygame.Surface((rb.width - 20, 280), pygame.SRCALPHA)
        pygame.draw.rect(card, CARD_BG, card.get_rect(), border_radius=14)
        hi = pygame.Surface((card.get_width(), 24), pygame.SRCALPHA)
        pygame.draw.rect(hi, CARD_HI, hi.get_rect(), border_radius=14)
        card.blit(hi, (0,0))
        self.screen.blit(card, (rb.x + 10, rb.y + 10))

        x0 = rb.x + 24
        y0 = rb.y + 18
        header = self.font_big.render("Metrics", True, ACCENT_GOLD)
        self.screen.blit(header, (x0, y0))
        y0 += header.get_height() + 8
        for text, color in self._metric_lines():
            surf = self.font.render(text, True, color)
            self.screen.blit(surf, (x0, y0))
            y0 += surf.get_height() + 6

        for b in self._buttons:
            b.draw(self.screen, self.font)


# ---------- main ----------
def main():
    settings = load_settings()
    configure_logging(settings.LOG_LEVEL)
    state = replace(new_game(settings.game_options()), algorithm=settings.ALGORITHM)
    logger.info("Starting viewer: %s (%s)", state.level_name, state.mode)
    Viewer(state, settings).run()


if __name__ == "__main__":
    main()
