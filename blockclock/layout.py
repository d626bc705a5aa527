"""
Viewport layout for the clock overlay
"""

from dataclasses import dataclass

# Columns/rows kept free around a grid that does not fit the viewport
MARGIN = 2


@dataclass(frozen=True)
class Placement:
    """Origin and size of an overlay layer, in viewport cells."""

    x: int
    y: int
    width: int
    height: int

    @property
    def right(self) -> int:
        return self.x + self.width

    @property
    def bottom(self) -> int:
        return self.y + self.height


def _fit(size: int, extent: int) -> int:
    if size <= extent:
        return max(0, size)
    return max(min(extent, 1), extent - MARGIN)


def _origin(size: int, extent: int, offset: int) -> int:
    origin = (extent - size) // 2 + offset
    if origin < 0:
        origin = 0
    if origin + size > extent:
        origin = max(0, extent - size)
    return origin


def place(grid_width: int, grid_height: int, viewport_width: int, viewport_height: int,
          horizontal_offset: int = 0, vertical_offset: int = 0) -> Placement:
    """Center a grid in the viewport without ever crossing its edges.

    A grid larger than the viewport is clamped to the viewport minus a small
    margin; the caller crops its content to the reported size. Offsets shift
    the centered origin before it is clamped.
    """
    viewport_width = max(0, viewport_width)
    viewport_height = max(0, viewport_height)

    width = _fit(grid_width, viewport_width)
    height = _fit(grid_height, viewport_height)

    return Placement(
        x=_origin(width, viewport_width, horizontal_offset),
        y=_origin(height, viewport_height, vertical_offset),
        width=width,
        height=height,
    )
