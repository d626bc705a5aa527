"""
One-shot rich rendering of the clock face
"""

from typing import Dict, Tuple

from rich import box
from rich.color import Color
from rich.console import RenderableType
from rich.panel import Panel
from rich.style import Style
from rich.text import Text

from .colors import RGB, make_color_strategy
from .config import ClockConfig
from .mapper import assign_colors
from .renderer import render

BORDERS = {
    'single': box.SQUARE,
    'rounded': box.ROUNDED,
    'double': box.DOUBLE,
    'solid': box.HEAVY,
    'shadow': box.SQUARE,
}


def _style(color: RGB) -> Style:
    return Style(color=Color.from_rgb(*color))


def clock_text(config: ClockConfig, time_str: str) -> Text:
    """Block digits of time_str as styled rich Text"""
    lines = render(time_str, config.scale, config.padding)
    color_for_slot = make_color_strategy(config.color_mode, len(time_str), config.fg,
                                         palette=config.palette, gradient=config.gradient)
    colors: Dict[Tuple[int, int], RGB] = {
        (cell.row, cell.column): cell.color
        for cell in assign_colors(lines, time_str, config.scale, config.padding, color_for_slot)
    }

    text = Text(no_wrap=True, overflow="crop")
    base = _style(config.fg)
    for y, line in enumerate(lines):
        if y:
            text.append("\n")
        for x, char in enumerate(line):
            color = colors.get((y, x))
            text.append(char, _style(color) if color else base)
    return text


def render_snapshot(config: ClockConfig, time_str: str) -> RenderableType:
    """The clock face, framed when the config asks for a border"""
    text = clock_text(config, time_str)
    frame = BORDERS.get(config.border)
    if frame is None:
        return text
    return Panel(text, box=frame, expand=False, border_style=_style(config.fg),
                 padding=(0, 0))
