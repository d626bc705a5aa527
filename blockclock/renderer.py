"""
Block renderer: turns a time string into rows of block glyphs
"""

import logging
from typing import List, Tuple

from rich.cells import cell_len

from .font import EMPTY, Glyph, lookup

logger = logging.getLogger(__name__)

SEPARATOR_WIDTH = 1


def normalize_scale(scale) -> int:
    """Coerce a scale factor to an integer >= 1"""
    try:
        value = int(scale)
    except (TypeError, ValueError):
        logger.warning("Invalid scale %r, using 1", scale)
        return 1
    return max(1, value)


def normalize_padding(padding) -> int:
    """Coerce a padding width to an integer >= 0"""
    try:
        value = int(padding)
    except (TypeError, ValueError):
        logger.warning("Invalid padding %r, using 0", padding)
        return 0
    return max(0, value)


def scale_glyph(glyph: Glyph, scale: int) -> List[str]:
    """Repeat every cell `scale` times across and every row `scale` times down"""
    if scale <= 1:
        return list(glyph)

    scaled = []
    for row in glyph:
        wide_row = "".join(cell * scale for cell in row)
        scaled.extend([wide_row] * scale)
    return scaled


def render(source: str, scale=1, padding=1) -> List[str]:
    """Render the source string as block glyph rows.

    Glyphs are joined with a single blank column and every row gets
    `padding` blank columns on both ends. An empty string renders to no rows.
    """
    if not source:
        return []

    scale = normalize_scale(scale)
    padding = normalize_padding(padding)

    blocks = [scale_glyph(lookup(char), scale) for char in source]
    pad = EMPTY * padding
    separator = EMPTY * SEPARATOR_WIDTH

    lines = []
    for row in range(len(blocks[0])):
        lines.append(pad + separator.join(block[row] for block in blocks) + pad)
    return lines


def grid_size(lines: List[str]) -> Tuple[int, int]:
    """Display width and height of a rendered grid"""
    width = max((cell_len(line) for line in lines), default=0)
    return width, len(lines)
