"""
Tests for mapping rendered cells back to clock characters.
"""

import pytest

from blockclock.font import FILLED
from blockclock.mapper import CellColor, assign_colors, band_width, slot_at
from blockclock.renderer import render


def slot_color(index, char):
    """Encodes the slot identity in the color so tests can read it back"""
    return (index, ord(char), 0)


def filled_cells(grid):
    return {(row, col) for row, line in enumerate(grid)
            for col, cell in enumerate(line) if cell == FILLED}


class TestSlotAt:
    """Column to slot arithmetic."""

    def test_padding_columns(self):
        assert slot_at(0, 5, scale=1, padding=1) is None

    def test_band_edges(self):
        assert slot_at(1, 5, 1, 1) == 0
        assert slot_at(7, 5, 1, 1) == 0
        assert slot_at(9, 5, 1, 1) == 1

    def test_separator_column(self):
        assert slot_at(8, 5, 1, 1) is None

    def test_past_the_last_slot(self):
        assert slot_at(1 + 5 * 8, 5, 1, 1) is None

    def test_scaled_bands(self):
        assert band_width(2) == 14
        assert slot_at(3 + 13, 3, scale=2, padding=3) == 0
        assert slot_at(3 + 14, 3, scale=2, padding=3) is None
        assert slot_at(3 + 15, 3, scale=2, padding=3) == 1


class TestAssignColors:
    """Per-cell color assignment."""

    def test_each_band_gets_its_own_slot(self):
        source = "12:30"
        grid = render(source, 1, 1)
        cells = assign_colors(grid, source, 1, 1, slot_color)

        for cell in cells:
            index = (cell.column - 1) // 8
            assert cell.color == (index, ord(source[index]), 0)
            assert 1 + index * 8 <= cell.column < 1 + index * 8 + 7

    def test_colon_band_never_takes_neighbour_colors(self):
        source = "12:30"
        grid = render(source, 1, 1)
        cells = assign_colors(grid, source, 1, 1, slot_color)

        colon_cells = [cell for cell in cells if 17 <= cell.column < 24]
        assert colon_cells
        assert {cell.color for cell in colon_cells} == {(2, ord(":"), 0)}

    @pytest.mark.parametrize("source,scale,padding", [
        ("12:30", 1, 1),
        ("09:05:07", 2, 3),
        ("1 1", 1, 0),
        ("88:88", 3, 0),
    ])
    def test_every_filled_cell_is_colored_once(self, source, scale, padding):
        grid = render(source, scale, padding)
        cells = assign_colors(grid, source, scale, padding, slot_color)

        positions = [(cell.row, cell.column) for cell in cells]
        assert len(positions) == len(set(positions))
        assert set(positions) == filled_cells(grid)

    def test_multibyte_glyph_cells_use_display_columns(self):
        grid = render("1", 1, 1)
        cells = assign_colors(grid, "1", 1, 1, slot_color)
        # "   ██  " behind one column of padding
        assert [cell.column for cell in cells if cell.row == 0] == [4, 5]

    def test_blank_slots_shift_nothing(self):
        source = "1 1"
        grid = render(source, 1, 0)
        cells = assign_colors(grid, source, 1, 0, slot_color)
        assert {cell.color[0] for cell in cells} == {0, 2}

    def test_missing_color_emits_nothing(self):
        grid = render("12", 1, 1)
        cells = assign_colors(grid, "12", 1, 1, lambda index, char: None)
        assert cells == []

    def test_identity_comes_from_the_source_string(self):
        # Same raster, different logical characters
        grid = render("11", 1, 1)
        cells = assign_colors(grid, "ab", 1, 1, slot_color)
        assert {cell.color[1] for cell in cells} == {ord("a"), ord("b")}

    def test_deterministic(self):
        grid = render("23:59:59", 2, 1)
        first = assign_colors(grid, "23:59:59", 2, 1, slot_color)
        second = assign_colors(grid, "23:59:59", 2, 1, slot_color)
        assert first == second

    def test_empty_grid(self):
        assert assign_colors([], "", 1, 1, slot_color) == []

    def test_cells_are_named_tuples(self):
        cells = assign_colors(render("1", 1, 0), "1", 1, 0, slot_color)
        assert isinstance(cells[0], CellColor)
        assert cells[0] == CellColor(0, 3, (0, ord("1"), 0))
