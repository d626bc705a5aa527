"""
Curses overlay surface: one floating window per layer over the terminal
"""

import curses
import logging
from typing import Dict, Iterable, List, Optional, Tuple

from .colors import RGB, to_hex
from .layout import Placement
from .mapper import CellColor
from .surface import LAYERS, OverlaySurface, crop, visible_cells

logger = logging.getLogger(__name__)

BASIC_COLORS = {
    curses.COLOR_BLACK: (0, 0, 0),
    curses.COLOR_RED: (255, 0, 0),
    curses.COLOR_GREEN: (0, 255, 0),
    curses.COLOR_YELLOW: (255, 255, 0),
    curses.COLOR_BLUE: (0, 0, 255),
    curses.COLOR_MAGENTA: (255, 0, 255),
    curses.COLOR_CYAN: (0, 255, 255),
    curses.COLOR_WHITE: (255, 255, 255),
}

# Colors below this number belong to the terminal theme
FIRST_CUSTOM_COLOR = 16


def closest_basic_color(rgb: RGB, candidates: Optional[Iterable[int]] = None) -> int:
    """Find the closest of the 8 curses colors (or of `candidates`) to the given RGB"""
    min_distance = float('inf')
    closest_color = curses.COLOR_WHITE

    r, g, b = rgb
    for color in BASIC_COLORS if candidates is None else candidates:
        cr, cg, cb = BASIC_COLORS[color]
        distance = (r - cr) ** 2 + (g - cg) ** 2 + (b - cb) ** 2
        if distance < min_distance:
            min_distance = distance
            closest_color = color

    return closest_color


class CursesColors:
    """Allocates curses color pairs for RGB colors on demand.

    Pairs for the basic colors are reserved when colors are initialized, so
    a color that finds the pair table full still gets the nearest basic one.
    """

    def __init__(self):
        self._attrs: Dict[RGB, int] = {}
        self._basic_pairs: Dict[int, int] = {}
        self._next_color = FIRST_CUSTOM_COLOR
        self._next_pair = 1
        self._background = curses.COLOR_BLACK
        self._truecolor = False
        self.enabled = False

    def init_colors(self):
        """Initialize color support; call once after curses started"""
        if not curses.has_colors():
            logger.info("Terminal has no colors, drawing monochrome")
            return
        curses.start_color()
        try:
            curses.use_default_colors()
            self._background = -1
        except curses.error:
            self._background = curses.COLOR_BLACK
        self._truecolor = curses.can_change_color() and curses.COLORS > FIRST_CUSTOM_COLOR
        self.enabled = True
        self._reserve_basic_pairs()
        logger.debug("Curses colors: %d colors, %d pairs, custom=%s",
                     curses.COLORS, curses.COLOR_PAIRS, self._truecolor)

    def _reserve_basic_pairs(self):
        for color in BASIC_COLORS:
            pair = self._new_pair()
            if pair is None:
                logger.debug("Only %d basic color pairs available", len(self._basic_pairs))
                return
            curses.init_pair(pair, color, self._background)
            self._basic_pairs[color] = pair

    def attr(self, rgb: Optional[RGB]) -> int:
        """Attribute drawing text in the given color"""
        if rgb is None or not self.enabled:
            return curses.A_NORMAL
        rgb = tuple(rgb)
        if rgb in self._attrs:
            return self._attrs[rgb]

        attr = None
        if self._truecolor and self._next_color < curses.COLORS:
            pair = self._new_pair()
            if pair is not None:
                color = self._next_color
                self._next_color += 1
                curses.init_color(color, *(channel * 1000 // 255 for channel in rgb))
                curses.init_pair(pair, color, self._background)
                attr = curses.color_pair(pair)
                logger.debug("Color %s on custom color %d, pair %d", to_hex(rgb), color, pair)
        if attr is None:
            attr = self._basic_attr(rgb)

        self._attrs[rgb] = attr
        return attr

    def _basic_attr(self, rgb: RGB) -> int:
        if not self._basic_pairs:
            return curses.A_NORMAL
        color = closest_basic_color(rgb, self._basic_pairs)
        logger.debug("Color %s drawn as basic color %d", to_hex(rgb), color)
        return curses.color_pair(self._basic_pairs[color])

    def _new_pair(self) -> Optional[int]:
        if self._next_pair >= curses.COLOR_PAIRS:
            return None
        pair = self._next_pair
        self._next_pair += 1
        return pair


class CursesSurface(OverlaySurface):
    """Draws clock layers as curses windows above stdscr."""

    def __init__(self, stdscr, colors: Optional[CursesColors] = None, footer: str = ""):
        self.stdscr = stdscr
        self.colors = colors or CursesColors()
        self.footer = footer
        self._windows = {}

    def viewport(self) -> Tuple[int, int]:
        rows, cols = self.stdscr.getmaxyx()
        return cols, rows

    def is_open(self, layer: str) -> bool:
        return layer in self._windows

    def show(self, layer: str, placement: Placement, rows: List[str],
             cells: Iterable[CellColor], base_color: Optional[RGB], dim: bool = False):
        if placement.width <= 0 or placement.height <= 0:
            self.close(layer)
            return

        win = self._place_window(layer, placement)
        win.erase()

        extra = curses.A_DIM if dim else curses.A_NORMAL
        base_attr = self.colors.attr(base_color) | extra
        for y, row in enumerate(crop(rows, placement)):
            # insstr never advances past the last cell
            win.insstr(y, 0, row, base_attr)
        for cell in visible_cells(cells, placement):
            win.chgat(cell.row, cell.column, 1, self.colors.attr(cell.color) | extra)

    def _place_window(self, layer: str, placement: Placement):
        win = self._windows.get(layer)
        if win is not None:
            try:
                win.resize(placement.height, placement.width)
                win.mvwin(placement.y, placement.x)
                return win
            except curses.error:
                logger.debug("Could not move %s window, recreating it", layer)
                self.close(layer)

        win = curses.newwin(placement.height, placement.width, placement.y, placement.x)
        self._windows[layer] = win
        logger.debug("Opened %s window at %s", layer, placement)
        return win

    def close(self, layer: str):
        if self._windows.pop(layer, None) is not None:
            logger.debug("Closed %s window", layer)

    def flush(self):
        """Redraw the backdrop, then every open layer bottom to top"""
        self.stdscr.erase()
        self._draw_footer()
        self.stdscr.noutrefresh()
        for layer in LAYERS:
            win = self._windows.get(layer)
            if win is not None:
                win.touchwin()
                win.noutrefresh()
        curses.doupdate()

    def _draw_footer(self):
        rows, cols = self.stdscr.getmaxyx()
        if not self.footer or rows < 2 or cols < 2:
            return
        text = self.footer[:cols - 1]
        self.stdscr.addstr(rows - 1, max(0, (cols - 1 - len(text)) // 2), text, curses.A_DIM)
