"""
ANSI overlay surface: cursor-positioned truecolor output through colorama
"""

import logging
import os
import sys
from itertools import groupby
from typing import Dict, Iterable, List, NamedTuple, Optional, Tuple

from colorama import Cursor, Style, ansi

from .colors import RGB
from .layout import Placement
from .mapper import CellColor
from .surface import LAYERS, OverlaySurface, crop, visible_cells

logger = logging.getLogger(__name__)

HIDE_CURSOR = ansi.CSI + "?25l"
SHOW_CURSOR = ansi.CSI + "?25h"


def get_terminal_size():
    """Get terminal dimensions"""
    try:
        columns, rows = os.get_terminal_size()
        return columns, rows
    except OSError:
        return 80, 24  # Default fallback


def fg_code(color: RGB) -> str:
    """24-bit foreground escape for an RGB color"""
    return ansi.CSI + "38;2;{};{};{}m".format(*color)


class _Layer(NamedTuple):
    placement: Placement
    rows: List[str]
    colors: Dict[Tuple[int, int], RGB]
    base_color: Optional[RGB]
    dim: bool


class AnsiSurface(OverlaySurface):
    """Repaints the whole screen on flush, layers bottom to top."""

    def __init__(self, stream=None, size=get_terminal_size):
        self.stream = stream or sys.stdout
        self._size = size
        self._layers: Dict[str, _Layer] = {}

    def viewport(self) -> Tuple[int, int]:
        return self._size()

    def is_open(self, layer: str) -> bool:
        return layer in self._layers

    def show(self, layer: str, placement: Placement, rows: List[str],
             cells: Iterable[CellColor], base_color: Optional[RGB], dim: bool = False):
        if placement.width <= 0 or placement.height <= 0:
            self.close(layer)
            return
        colors = {(cell.row, cell.column): cell.color
                  for cell in visible_cells(cells, placement)}
        self._layers[layer] = _Layer(placement, crop(rows, placement), colors, base_color, dim)

    def close(self, layer: str):
        self._layers.pop(layer, None)

    def flush(self):
        out = [HIDE_CURSOR, ansi.clear_screen()]
        for name in LAYERS:
            layer = self._layers.get(name)
            if layer is not None:
                out.extend(self._draw(layer))
        out.append(Style.RESET_ALL)
        self.stream.write("".join(out))
        self.stream.flush()

    def _draw(self, layer: _Layer) -> List[str]:
        place = layer.placement
        prefix = Style.DIM if layer.dim else ""
        out = []
        for y, row in enumerate(layer.rows):
            # Cursor.POS is 1-based
            out.append(Cursor.POS(place.x + 1, place.y + y + 1))
            cells = enumerate(row)
            for color, run in groupby(cells, key=lambda cell: layer.colors.get((y, cell[0]),
                                                                               layer.base_color)):
                text = "".join(char for _, char in run)
                if color is None:
                    out.append(Style.RESET_ALL + prefix + text)
                else:
                    out.append(Style.RESET_ALL + prefix + fg_code(color) + text)
        return out

    def restore(self):
        """Clear the screen and give the cursor back"""
        self._layers.clear()
        self.stream.write(Style.RESET_ALL + ansi.clear_screen() + Cursor.POS(1, 1) + SHOW_CURSOR)
        self.stream.flush()
