#!/usr/bin/env python3
"""
Pathfinder Viewer — paint a grid, then watch the search step by step

- Mouse:
    [LEFT CLICK] -> toggle the current paint role on a cell
- Keyboard:
    [W]/[S]/[E]  -> paint walls / start / end
    [B]/[I]      -> run best-first / insertion-order search
    [R]          -> reset (cancels a running search)
    [C]          -> clear grid
    [G]          -> random walls
    [+]/[-]      -> step delay
    [Q]/[ESC]    -> quit

Settings: see pathfinder/core/config.py (--size=, --delay=, --algo=).
"""

# --- bootstrap import path so `from pathfinder...` works when run as a script ---
import sys, os, time, logging
from pathlib import Path
_REPO_ROOT = Path(__file__).resolve().parents[2]
if str(_REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(_REPO_ROOT))
# ---------------------------------------------------------------------------------

from typing import Iterator, List, Optional, Tuple
import pygame

from pathfinder.core.config import SearchConfig, load_config
from pathfinder.core.controller import RunController
from pathfinder.core.grid import Cell, Grid, create_grid, set_cell_role
from pathfinder.core.types import Algorithm, Role, RunState

log = logging.getLogger(__name__)

# ---------- Layout ----------
PANEL_W = 360            # right band: metrics + buttons
GRID_MARGIN = 16
FONT_NAME = None  # default pygame font

# Colors
BLACK       = (  0,  0,  0)
BLUE        = ( 70,130,180)
RED         = (220, 50, 47)
EMPTY_GRAY  = (200,200,200)
OPEN_CYAN   = (  0,150,255)
CLOSED_MAG  = (255,  0,120)
ROUTE_MINT  = (  0,255,200)

CARD_BG     = (24,28,36,220)
CARD_HI     = (255,255,255,18)
TEXT_LIGHT  = (230,235,240)
ACCENT_GOLD = (255,210,0)

ALGO_LABELS = {
    Algorithm.BEST_FIRST: "Best-first",
    Algorithm.INSERTION_ORDER: "Insertion order",
}
ROLE_LABELS = {Role.WALL: "Wall", Role.START: "Start", Role.END: "End"}


def cell_color(cell: Cell, highlighted: bool) -> Tuple[int, int, int]:
    """Fill colour for one cell; the failure flash paints everything like the end cell."""
    if cell.is_end or highlighted:
        return RED
    if cell.is_start:
        return BLUE
    if cell.is_wall:
        return BLACK
    if cell.is_part_of_route:
        return ROUTE_MINT
    if cell.is_part_of_closed_list:
        return CLOSED_MAG
    if cell.is_part_of_open_list:
        return OPEN_CYAN
    return EMPTY_GRAY


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
    def __init__(self, config: SearchConfig):
        pygame.init()

        self.config = config
        self.font_small = pygame.font.Font(FONT_NAME, 14)
        self.font = pygame.font.Font(FONT_NAME, 18)
        self.font_big = pygame.font.Font(FONT_NAME, 22)

        self.grid: Grid = create_grid(config.grid_size)
        self.controller = RunController(self.grid, notify=self._mark_dirty, config=config)
        self.selected_algo = config.algorithm
        self.click_role = Role.WALL

        self._search: Optional[Iterator[int]] = None
        self._next_step_t = 0.0
        self._dirty = True
        self.status = "Idle"

        win_w = GRID_MARGIN*2 + 720 + PANEL_W
        win_h = GRID_MARGIN*2 + 720
        self.screen = pygame.display.set_mode((win_w, win_h), pygame.RESIZABLE)
        pygame.display.set_caption("Pathfinder")

        self._buttons: List[UIButton] = []
        self._layout(win_w, win_h)
        self.clock = pygame.time.Clock()

    # ---------- layout ----------
    def _layout(self, win_w: int, win_h: int):
        """Integer cell size that fits the window; grid on the left, panel on the right."""
        avail_w = max(1, win_w - PANEL_W - 2 * GRID_MARGIN)
        avail_h = max(1, win_h - 2 * GRID_MARGIN)
        self.cell_size = max(4, min(avail_w, avail_h) // self.grid.size)

        grid_px = self.grid.size * self.cell_size
        self.canvas_rect = pygame.Rect(0, 0, grid_px + 2 * GRID_MARGIN, grid_px + 2 * GRID_MARGIN)
        self._grid_origin = (GRID_MARGIN, GRID_MARGIN)
        self._right_band = pygame.Rect(self.canvas_rect.right, 0,
                                       max(PANEL_W, win_w - self.canvas_rect.right), win_h)
        self._build_buttons()

    def _cell_at_pixel(self, pos: Tuple[int, int]) -> Optional[Cell]:
        ox, oy = self._grid_origin
        col = (pos[0] - ox) // self.cell_size
        row = (pos[1] - oy) // self.cell_size
        if 0 <= col < self.grid.size and 0 <= row < self.grid.size:
            return self.grid.cells[row][col]
        return None

    # ---------- main loop ----------
    def run(self):
        while True:
            self._handle_events()
            self._tick_search()
            if self._dirty:
                self._draw()
            self.clock.tick(60)

    def _mark_dirty(self):
        self._dirty = True

    def _tick_search(self):
        if self._search is None:
            return
        now = time.time()
        if now < self._next_step_t:
            return
        try:
            delay_ms = next(self._search)
        except StopIteration:
            self._search = None
            self._dirty = True
            self._on_finished()
            return
        self._next_step_t = now + delay_ms / 1000.0
        self.status = "Running"

    def _on_finished(self):
        outcome = self.controller.outcome
        if outcome.state is RunState.SUCCEEDED:
            self.status = f"Route found ({outcome.route_length} steps)"
        elif outcome.state is RunState.FAILED:
            self.status = f"Failed: {outcome.reason.value}"
        elif outcome.state is RunState.CANCELLED:
            self.status = "Cancelled"
        else:
            self.status = outcome.state.value.capitalize()
        self._refresh_active_states()

    # ---------- actions ----------
    def _start(self, algo: Algorithm):
        if self._search is not None:
            return
        self.selected_algo = algo
        self._search = self.controller.iter_search(algo)
        self._next_step_t = 0.0
        self._refresh_active_states()

    def _reset(self):
        self.controller.request_reset()
        if self._search is None:
            self.status = "Idle"

    def _clear(self):
        if self._search is not None:
            return
        self.grid = create_grid(self.config.grid_size)
        self.controller = RunController(self.grid, notify=self._mark_dirty, config=self.config)
        self.status = "Idle"
        self._layout(*self.screen.get_size())

    def _random_walls(self):
        if self._search is not None:
            return
        self.controller.request_reset()
        self.grid.random_walls(self.config.wall_density)
        self.status = "Idle"

    def _set_click_role(self, role: Role):
        self.click_role = role
        self._refresh_active_states()

    def _bump_delay(self, dv: int):
        self.config.delay_ms = int(max(0, min(500, self.config.delay_ms + dv)))
        self.controller.pacing.delay_ms = self.config.delay_ms

    def _paint(self, pos: Tuple[int, int]):
        if self._search is not None:
            return  # the run owns the grid
        cell = self._cell_at_pixel(pos)
        if cell is not None:
            set_cell_role(cell, self.click_role)

    def _handle_events(self):
        for e in pygame.event.get():
            self._dirty = True
            if e.type == pygame.QUIT:
                pygame.quit(); sys.exit(0)
            elif e.type == pygame.KEYDOWN:
                if e.key in (pygame.K_ESCAPE, pygame.K_q):
                    pygame.quit(); sys.exit(0)
                elif e.key == pygame.K_b:
                    self._start(Algorithm.BEST_FIRST)
                elif e.key == pygame.K_i:
                    self._start(Algorithm.INSERTION_ORDER)
                elif e.key == pygame.K_r:
                    self._reset()
                elif e.key == pygame.K_c:
                    self._clear()
                elif e.key == pygame.K_g:
                    self._random_walls()
                elif e.key == pygame.K_w:
                    self._set_click_role(Role.WALL)
                elif e.key == pygame.K_s:
                    self._set_click_role(Role.START)
                elif e.key == pygame.K_e:
                    self._set_click_role(Role.END)
                elif e.key in (pygame.K_PLUS, pygame.K_EQUALS):
                    self._bump_delay(+10)
                elif e.key in (pygame.K_MINUS, pygame.K_UNDERSCORE):
                    self._bump_delay(-10)
            elif e.type == pygame.VIDEORESIZE:
                self.screen = pygame.display.set_mode((e.w, e.h), pygame.RESIZABLE)
                self._layout(e.w, e.h)
            elif e.type in (pygame.MOUSEMOTION, pygame.MOUSEBUTTONDOWN):
                handled = False
                for b in self._buttons:
                    handled = b.handle_mouse(e) or handled
                if not handled and e.type == pygame.MOUSEBUTTONDOWN and e.button == 1:
                    self._paint(e.pos)

    # ---------- drawing ----------
    def _draw(self):
        self._draw_backdrop()
        self._draw_grid()
        self._draw_metrics_and_buttons()
        pygame.display.flip()
        self._dirty = False

    def _draw_backdrop(self):
        w, h = self.screen.get_size()
        top = (24, 26, 32); bot = (36, 40, 48)
        for y in range(h):
            t = y / max(1, h-1)
            c = (
                int(top[0] + (bot[0]-top[0]) * t),
                int(top[1] + (bot[1]-top[1]) * t),
                int(top[2] + (bot[2]-top[2]) * t),
            )
            pygame.draw.line(self.screen, c, (0, y), (w, y))

    def _draw_grid(self):
        cs = self.cell_size
        ox, oy = self._grid_origin
        highlighted = self.grid.highlighted

        for row in self.grid.cells:
            for cell in row:
                col, r = cell.coordinate
                rect = pygame.Rect(ox + col*cs, oy + r*cs, cs, cs)
                pygame.draw.rect(self.screen, cell_color(cell, highlighted), rect)
                if cs >= 6:
                    pygame.draw.rect(self.screen, BLACK, rect, 1)

    # ---------- buttons + metrics ----------
    def _build_buttons(self):
        self._buttons.clear()
        rb = self._right_band
        x = rb.x + 16
        y = rb.y + 250  # leaves space for metrics card above
        w = max(160, rb.width - 32)
        h = 34
        gap = 8

        def add(label, cb, *, togglable=False, store_as: Optional[str] = None):
            rect = pygame.Rect(x, y, w, h)
            btn = UIButton(label, rect, cb, togglable=togglable)
            self._buttons.append(btn)
            if store_as:
                setattr(self, store_as, btn)

        add("Run: Best-first", lambda: self._start(Algorithm.BEST_FIRST),
            togglable=True, store_as="btn_algo_best"); y += h + gap
        add("Run: Insertion order", lambda: self._start(Algorithm.INSERTION_ORDER),
            togglable=True, store_as="btn_algo_insertion"); y += h + gap
        add("Reset", self._reset); y += h + gap
        add("Clear grid", self._clear); y += h + gap
        add("Random walls", self._random_walls); y += h + gap

        third = (w - 16) // 3
        for i, role in enumerate((Role.WALL, Role.START, Role.END)):
            rect = pygame.Rect(x + i * (third + 8), y, third, h)
            btn = UIButton(ROLE_LABELS[role], rect, lambda r=role: self._set_click_role(r), togglable=True)
            btn.role = role
            self._buttons.append(btn)
        y += h + gap

        minus_rect = pygame.Rect(x, y, (w-8)//2, h)
        plus_rect  = pygame.Rect(x + (w-8)//2 + 8, y, (w-8)//2, h)
        self._buttons.append(UIButton("Delay −", minus_rect, lambda: self._bump_delay(-10)))
        self._buttons.append(UIButton("Delay +", plus_rect,  lambda: self._bump_delay(+10)))

        self._refresh_active_states()

    def _refresh_active_states(self):
        running = self._search is not None
        if hasattr(self, "btn_algo_best"):
            self.btn_algo_best.set_active(running and self.selected_algo is Algorithm.BEST_FIRST)
        if hasattr(self, "btn_algo_insertion"):
            self.btn_algo_insertion.set_active(running and self.selected_algo is Algorithm.INSERTION_ORDER)
        for b in self._buttons:
            if hasattr(b, "role"):
                b.set_active(b.role is self.click_role)

    def _draw_metrics_and_buttons(self):
        rb = self._right_band

        card_h = 230
        card = pygame.Surface((rb.width - 20, card_h), pygame.SRCALPHA)
        pygame.draw.rect(card, CARD_BG, card.get_rect(), border_radius=14)
        hi = pygame.Surface((card.get_width(), 24), pygame.SRCALPHA)
        pygame.draw.rect(hi, CARD_HI, hi.get_rect(), border_radius=14)
        card.blit(hi, (0,0))
        self.screen.blit(card, (rb.x + 10, rb.y + 10))

        x0 = rb.x + 24
        y0 = rb.y + 18

        def line(text, big=False, color=TEXT_LIGHT):
            nonlocal y0
            f = self.font_big if big else self.font
            surf = f.render(text, True, color)
            self.screen.blit(surf, (x0, y0))
            y0 += surf.get_height() + 6

        line("Metrics", big=True, color=ACCENT_GOLD)
        last = self.controller.last_result
        m = last.metrics if last else {}
        line(f"Expanded: {m.get('expanded', 0)}")
        line(f"Open: {m.get('open_size', 0)}")
        line(f"Closed: {m.get('closed_count', 0)}")
        line(f"Relaxations: {m.get('relaxations', 0)}")
        line(f"Route Len: {m.get('route_len', 0)}")
        line("-" * 26)
        line(f"Algo: {ALGO_LABELS[self.selected_algo]}")
        line(f"Delay: {self.controller.pacing.delay_ms} ms   Paint: {ROLE_LABELS[self.click_role]}")
        line(self.status, color=ACCENT_GOLD)

        for b in self._buttons:
            b.draw(self.screen, self.font_small)


# ---------- main ----------
def main(argv=None):
    logging.basicConfig(level=os.getenv("PATHFINDER_LOG_LEVEL", "INFO").upper(),
                        format="[%(levelname)s] %(message)s")
    try:
        config = load_config(argv)
    except ValueError as ex:
        print(f"Invalid settings: {ex}")
        sys.exit(1)
    log.info("grid %dx%d, delay %d ms", config.grid_size, config.grid_size, config.delay_ms)
    Viewer(config).run()

if __name__ == "__main__":
    main()
