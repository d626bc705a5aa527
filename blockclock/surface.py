"""
Overlay surface interface the clock paints through.
"""

from typing import Iterable, List, Optional, Tuple

from rich.cells import set_cell_size

from .colors import RGB
from .layout import Placement
from .mapper import CellColor

SHADOW = "shadow"
MAIN = "main"

# Layers are painted in this order, later ones on top
LAYERS = (SHADOW, MAIN)


class OverlaySurface:
    """A host that can show rectangular text panels over its content."""

    def viewport(self) -> Tuple[int, int]:
        """Current (columns, rows) of the display area"""
        raise NotImplementedError

    def show(self, layer: str, placement: Placement, rows: List[str],
             cells: Iterable[CellColor], base_color: Optional[RGB], dim: bool = False):
        """Create or update a layer, cropping rows to the placement"""
        raise NotImplementedError

    def close(self, layer: str):
        """Tear a layer down; no-op when it is not shown"""
        raise NotImplementedError

    def close_all(self):
        for layer in LAYERS:
            self.close(layer)

    def flush(self):
        """Push pending changes to the screen"""

    def is_open(self, layer: str) -> bool:
        raise NotImplementedError


def crop(rows: List[str], placement: Placement) -> List[str]:
    """Rows cut down to the placement size"""
    return [set_cell_size(row, placement.width) for row in rows[:placement.height]]


def visible_cells(cells: Iterable[CellColor], placement: Placement) -> List[CellColor]:
    """Cell colors that land inside the cropped panel"""
    return [cell for cell in cells
            if cell.row < placement.height and cell.column < placement.width]
