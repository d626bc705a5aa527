"""
Tests for color parsing, gradients, palettes and slot color strategies.
"""

import pytest

from blockclock.colors import (PALETTES, DigitKey, build_gradient, make_color_strategy,
                               palette_strategy, parse_color, to_hex)

RED = (251, 73, 52)
BLUE = (131, 165, 152)


class TestParseColor:
    """Color values from configuration."""

    def test_hex_string(self):
        assert parse_color("#fb4934") == RED

    def test_named_color(self):
        assert parse_color("red") == (255, 0, 0)

    def test_sequence_is_clamped(self):
        assert parse_color([300, -5, 10]) == (255, 0, 10)

    @pytest.mark.parametrize("value", ["nope", [1, 2], 5, "#12"])
    def test_invalid_values_raise(self, value):
        with pytest.raises(ValueError):
            parse_color(value)

    def test_to_hex(self):
        assert to_hex(RED) == "#fb4934"


class TestGradient:
    """Evenly interpolated color ramps."""

    @pytest.mark.parametrize("n", [0, -1])
    def test_no_colors(self, n):
        assert build_gradient(RED, BLUE, n) == []

    def test_single_color_is_the_start(self):
        assert build_gradient(RED, BLUE, 1) == [RED]

    def test_same_endpoints(self):
        assert build_gradient(RED, RED, 6) == [RED] * 6

    @pytest.mark.parametrize("n", range(2, 12))
    def test_endpoints_are_exact(self, n):
        ramp = build_gradient(RED, BLUE, n)
        assert len(ramp) == n
        assert ramp[0] == RED
        assert ramp[-1] == BLUE

    def test_midpoint_rounds_half_up(self):
        assert build_gradient((0, 0, 0), (255, 255, 255), 3)[1] == (128, 128, 128)

    def test_channels_move_monotonically(self):
        ramp = build_gradient((0, 200, 50), (255, 0, 50), 8)
        reds = [color[0] for color in ramp]
        greens = [color[1] for color in ramp]
        assert reds == sorted(reds)
        assert greens == sorted(greens, reverse=True)
        assert {color[2] for color in ramp} == {50}


class TestDigitKey:
    """Typed color keys for clock characters."""

    def test_digits_and_colon(self):
        assert DigitKey.for_char("7") is DigitKey.SEVEN
        assert DigitKey.for_char(":") is DigitKey.COLON

    @pytest.mark.parametrize("char", [" ", "a", "", "10"])
    def test_other_characters_have_no_key(self, char):
        assert DigitKey.for_char(char) is None

    @pytest.mark.parametrize("name", sorted(PALETTES))
    def test_palettes_cover_every_key(self, name):
        assert set(PALETTES[name]) == set(DigitKey)


class TestStrategies:
    """color_for_slot strategies."""

    def test_palette_by_character(self):
        color_for_slot = palette_strategy(PALETTES['gruvbox'], fallback=(1, 2, 3))
        assert color_for_slot(0, "1") == RED
        assert color_for_slot(5, "1") == RED
        assert color_for_slot(2, ":") == BLUE
        assert color_for_slot(3, " ") == (1, 2, 3)

    def test_gradient_by_slot_index(self):
        color_for_slot = make_color_strategy("gradient", 8, (0, 0, 0), gradient=(RED, BLUE))
        assert color_for_slot(0, "0") == RED
        assert color_for_slot(7, "7") == BLUE
        assert color_for_slot(8, "x") is None

    def test_gradient_ignores_character(self):
        color_for_slot = make_color_strategy("gradient", 4, (0, 0, 0), gradient=(RED, BLUE))
        assert color_for_slot(1, "1") == color_for_slot(1, "9")

    def test_solid(self):
        color_for_slot = make_color_strategy("solid", 8, (9, 9, 9))
        assert color_for_slot(0, "1") == (9, 9, 9)
        assert color_for_slot(7, ":") == (9, 9, 9)

    def test_unknown_mode_falls_back_to_palette(self):
        color_for_slot = make_color_strategy("sparkle", 8, (9, 9, 9))
        assert color_for_slot(0, "1") == RED

    def test_unknown_palette_falls_back_to_gruvbox(self):
        color_for_slot = make_color_strategy("palette", 8, (9, 9, 9), palette="nord")
        assert color_for_slot(0, "1") == RED

    def test_kanagawa(self):
        color_for_slot = make_color_strategy("palette", 8, (9, 9, 9), palette="kanagawa")
        assert color_for_slot(0, "1") == parse_color("#D14A3A")
