"""
Colors for the clock face: parsing, gradients, per-digit palettes and the
slot coloring strategies built on top of them.
"""

import logging
import math
from enum import Enum
from typing import Callable, Dict, List, Optional, Sequence, Tuple

from PIL import ImageColor

logger = logging.getLogger(__name__)

RGB = Tuple[int, int, int]
ColorForSlot = Callable[[int, str], Optional[RGB]]

COLOR_MODES = ("palette", "gradient", "solid")


class DigitKey(Enum):
    """Logical color key of a clock character."""

    ZERO = "0"
    ONE = "1"
    TWO = "2"
    THREE = "3"
    FOUR = "4"
    FIVE = "5"
    SIX = "6"
    SEVEN = "7"
    EIGHT = "8"
    NINE = "9"
    COLON = ":"

    @classmethod
    def for_char(cls, char: str) -> Optional["DigitKey"]:
        """Key for a character, or None when it has no palette entry"""
        try:
            return cls(char)
        except ValueError:
            return None


def parse_color(value) -> RGB:
    """Parse '#rrggbb', CSS color strings or an (r, g, b) sequence.

    Raises ValueError for anything that is not a color.
    """
    if isinstance(value, str):
        rgb = ImageColor.getrgb(value)
        return rgb[0], rgb[1], rgb[2]

    try:
        channels = [int(channel) for channel in value]
    except TypeError:
        raise ValueError(f"not a color: {value!r}") from None
    if len(channels) != 3:
        raise ValueError(f"expected 3 channels, got {len(channels)}")
    return tuple(_clamp_channel(channel) for channel in channels)


def to_hex(color: RGB) -> str:
    """Format an RGB tuple as #rrggbb"""
    return "#{:02x}{:02x}{:02x}".format(*color)


def _clamp_channel(value: float) -> int:
    # Round half up, once, after clamping
    return int(math.floor(min(255.0, max(0.0, value)) + 0.5))


def build_gradient(from_color: RGB, to_color: RGB, n: int) -> List[RGB]:
    """Evenly interpolate n colors from from_color to to_color inclusive"""
    if n <= 0:
        return []
    if n == 1:
        return [tuple(from_color)]

    ramp = []
    for i in range(n):
        t = i / (n - 1)
        ramp.append(tuple(
            _clamp_channel(start + (end - start) * t)
            for start, end in zip(from_color, to_color)
        ))
    return ramp


def _palette(colors: Dict[str, str], assignment: Dict[str, str]) -> Dict[DigitKey, RGB]:
    return {DigitKey(char): parse_color(colors[name]) for char, name in assignment.items()}


GRUVBOX = {
    'red': "#fb4934",
    'green': "#b8bb26",
    'yellow': "#fabd2f",
    'blue': "#83a598",
    'purple': "#d3869b",
    'aqua': "#8ec07c",
    'orange': "#fe8019",
    'gray': "#928374",
    'light': "#fbf1c7",
    'darkred': "#cc241d",
}

KANAGAWA = {
    'red': "#D14A3A",
    'orange': "#DCA561",
    'yellow': "#E6C384",
    'green': "#7FB4CA",
    'blue': "#7FB4D1",
    'purple': "#CBA6D6",
    'teal': "#6FB3B8",
    'gray': "#81707a",
    'light': "#E6D7B6",
    'dark': "#2a2a2e",
}

PALETTES = {
    'gruvbox': _palette(GRUVBOX, {
        '0': 'gray', '1': 'red', '2': 'green', '3': 'yellow', '4': 'blue',
        '5': 'purple', '6': 'aqua', '7': 'orange', '8': 'light', '9': 'darkred',
        ':': 'blue',
    }),
    'kanagawa': _palette(KANAGAWA, {
        '0': 'gray', '1': 'red', '2': 'green', '3': 'yellow', '4': 'blue',
        '5': 'purple', '6': 'teal', '7': 'orange', '8': 'light', '9': 'dark',
        ':': 'blue',
    }),
}


def palette_strategy(palette: Dict[DigitKey, RGB], fallback: Optional[RGB]) -> ColorForSlot:
    """Color each slot by the character it shows"""
    def color_for_slot(index: int, char: str) -> Optional[RGB]:
        key = DigitKey.for_char(char)
        if key is None:
            return fallback
        return palette.get(key, fallback)
    return color_for_slot


def gradient_strategy(from_color: RGB, to_color: RGB, slot_count: int) -> ColorForSlot:
    """Color each slot by its position along a gradient across the string"""
    ramp = build_gradient(from_color, to_color, slot_count)

    def color_for_slot(index: int, char: str) -> Optional[RGB]:
        if 0 <= index < len(ramp):
            return ramp[index]
        return None
    return color_for_slot


def solid_strategy(color: RGB) -> ColorForSlot:
    """Same color for every slot"""
    return lambda index, char: color


def make_color_strategy(mode: str, slot_count: int, fg: RGB,
                        palette: str = "gruvbox",
                        gradient: Sequence[RGB] = ()) -> ColorForSlot:
    """Build the color_for_slot callable for a color mode"""
    if mode == "gradient" and len(gradient) == 2:
        return gradient_strategy(gradient[0], gradient[1], slot_count)
    if mode == "solid":
        return solid_strategy(fg)
    if mode not in ("palette", "gradient"):
        logger.warning("Unknown color mode %r, using palette", mode)
    elif mode == "gradient":
        logger.warning("Gradient needs two endpoints, using palette")

    colors = PALETTES.get(palette)
    if colors is None:
        logger.warning("Unknown palette %r, using gruvbox", palette)
        colors = PALETTES['gruvbox']
    return palette_strategy(colors, fg)
