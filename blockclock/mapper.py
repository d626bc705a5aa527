"""
Maps rendered glyph cells back to the clock characters they belong to.

Slot identity always comes from the index into the source string. The
rendered rows are only walked to find which cells carry ink and at which
display column they sit; nothing is inferred from the glyph shapes.
"""

from typing import List, NamedTuple, Optional

from rich.cells import cell_len

from .colors import RGB, ColorForSlot
from .font import is_filled, lookup
from .renderer import SEPARATOR_WIDTH, normalize_padding, normalize_scale


class CellColor(NamedTuple):
    row: int
    column: int
    color: RGB


def band_width(scale: int) -> int:
    """Display columns covered by one scaled glyph"""
    return cell_len(lookup("0")[0]) * normalize_scale(scale)


def slot_at(column: int, source_length: int, scale=1, padding=1) -> Optional[int]:
    """Index of the source character drawn at a display column.

    Returns None for padding and separator columns and for columns past the
    last glyph.
    """
    relative = column - normalize_padding(padding)
    if relative < 0:
        return None

    band = band_width(scale)
    stride = band + SEPARATOR_WIDTH
    slot, within = divmod(relative, stride)
    if slot >= source_length or within >= band:
        return None
    return slot


def assign_colors(grid: List[str], source: str, scale, padding,
                  color_for_slot: ColorForSlot) -> List[CellColor]:
    """Color every filled cell of the grid by the slot it belongs to"""
    assignments = []
    for row_index, row in enumerate(grid):
        column = 0
        for cell in row:
            if is_filled(cell):
                slot = slot_at(column, len(source), scale, padding)
                if slot is not None:
                    color = color_for_slot(slot, source[slot])
                    if color is not None:
                        assignments.append(CellColor(row_index, column, color))
            column += cell_len(cell)
    return assignments
