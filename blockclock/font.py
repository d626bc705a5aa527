"""
Block glyph font for the clock face
Solid 7x5 digits drawn with full-block cells
"""

from typing import Tuple

FILLED = "█"
EMPTY = " "

GLYPH_WIDTH = 7
GLYPH_HEIGHT = 5

Glyph = Tuple[str, ...]

DIGITS = {
    '0': (
        " █████ ",
        "█     █",
        "█     █",
        "█     █",
        " █████ ",
    ),
    '1': (
        "   ██  ",
        " ████  ",
        "   ██  ",
        "   ██  ",
        " █████ ",
    ),
    '2': (
        " █████ ",
        "█     █",
        "    ██ ",
        "  ███  ",
        "███████",
    ),
    '3': (
        " █████ ",
        "█     █",
        "  ████ ",
        "█     █",
        " █████ ",
    ),
    '4': (
        "█   ██ ",
        "█   ██ ",
        "█   ██ ",
        "███████",
        "    ██ ",
    ),
    '5': (
        "███████",
        "█      ",
        "██████ ",
        "      █",
        "██████ ",
    ),
    '6': (
        " █████ ",
        "█      ",
        "██████ ",
        "█     █",
        " █████ ",
    ),
    '7': (
        "███████",
        "█    ██",
        "   ██  ",
        "  ██   ",
        "  ██   ",
    ),
    '8': (
        " █████ ",
        "█     █",
        " █████ ",
        "█     █",
        " █████ ",
    ),
    '9': (
        " █████ ",
        "█     █",
        " ██████",
        "      █",
        " █████ ",
    ),
    ':': (
        "       ",
        "   ██  ",
        "       ",
        "   ██  ",
        "       ",
    ),
    ' ': (
        "       ",
        "       ",
        "       ",
        "       ",
        "       ",
    ),
}

SUPPORTED = frozenset(DIGITS)


def lookup(char: str) -> Glyph:
    """Return the glyph for a character, blank for anything unsupported"""
    return DIGITS.get(char, DIGITS[' '])


def is_filled(cell: str) -> bool:
    """True when a rendered cell carries glyph ink"""
    return cell == FILLED
