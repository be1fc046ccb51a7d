"""Unit tests for domain models: CellType, Glyph, Block and themes."""

import pytest

from blockfont.domain import (
    DARK_THEME,
    GRID_ROWS,
    LIGHT_THEME,
    Block,
    CellType,
    ColoredBlock,
    Glyph,
    ThemeType,
    color_for_cell,
    get_theme,
    parse_cell,
)
from blockfont.exceptions import GlyphDefinitionError


class TestCellType:
    """Tests for CellType and row-string parsing."""

    def test_only_blank_has_no_ink(self):
        """Test BLANK is the only cell type without ink."""
        assert not CellType.BLANK.is_ink
        assert CellType.PRIMARY.is_ink
        assert CellType.SECONDARY.is_ink
        assert CellType.TERTIARY.is_ink

    def test_parse_explicit_markers(self):
        """Test explicit markers map to fixed cell types in any row."""
        assert parse_cell(".", 0) is CellType.BLANK
        assert parse_cell("+", 0) is CellType.SECONDARY
        assert parse_cell("*", 6) is CellType.TERTIARY

    def test_parse_auto_marker_shading(self):
        """Test '#' becomes SECONDARY in rows 3-5 and PRIMARY elsewhere."""
        assert [parse_cell("#", row) for row in range(GRID_ROWS)] == [
            CellType.PRIMARY,
            CellType.PRIMARY,
            CellType.PRIMARY,
            CellType.SECONDARY,
            CellType.SECONDARY,
            CellType.SECONDARY,
            CellType.PRIMARY,
        ]

    def test_parse_unknown_marker(self):
        """Test unknown markers raise ValueError."""
        with pytest.raises(ValueError, match="unknown cell marker"):
            parse_cell("x", 2)


class TestGlyph:
    """Tests for Glyph construction and queries."""

    def test_from_rows(self):
        """Test building a glyph from row strings."""
        glyph = Glyph.from_rows("L", ["#.", "#.", "#.", "#.", "#.", "#.", "##"])

        assert glyph.name == "L"
        assert glyph.width == 2
        assert glyph.height == GRID_ROWS
        assert glyph.ink_count == 8
        assert glyph.cell(0, 0) is CellType.PRIMARY
        assert glyph.cell(4, 0) is CellType.SECONDARY
        assert glyph.cell(0, 1) is CellType.BLANK

    def test_ink_mask(self):
        """Test the ink mask mirrors the grid."""
        glyph = Glyph.from_rows("'", ["#", "#", ".", ".", ".", ".", "."])
        assert glyph.ink_mask() == ((True,), (True,), (False,), (False,), (False,), (False,), (False,))

    def test_wrong_row_count(self):
        """Test a grid with the wrong number of rows is rejected."""
        with pytest.raises(GlyphDefinitionError, match="expected 7 rows"):
            Glyph.from_rows("X", ["#"] * 6)

    def test_ragged_rows(self):
        """Test rows of different lengths are rejected."""
        with pytest.raises(GlyphDefinitionError, match="different lengths"):
            Glyph.from_rows("X", ["##", "#", "#", "#", "#", "#", "#"])

    def test_too_wide(self):
        """Test grids wider than five columns are rejected."""
        with pytest.raises(GlyphDefinitionError, match="outside 1-5"):
            Glyph.from_rows("X", ["######"] * 7)

    def test_empty_rows(self):
        """Test zero-width grids are rejected."""
        with pytest.raises(GlyphDefinitionError, match="outside 1-5"):
            Glyph.from_rows("X", [""] * 7)

    def test_unknown_marker_wrapped(self):
        """Test bad markers surface as GlyphDefinitionError naming the glyph."""
        with pytest.raises(GlyphDefinitionError) as exc_info:
            Glyph.from_rows("Q", ["#", "#", "#", "?", "#", "#", "#"])

        assert exc_info.value.char == "Q"
        assert "unknown cell marker" in exc_info.value.reason

    def test_empty_and_full(self):
        """Test empty and full glyph predicates."""
        space = Glyph.from_rows(" ", ["..."] * 7)
        bar = Glyph.from_rows("|", ["#"] * 7)

        assert space.is_empty()
        assert not space.is_full()
        assert bar.is_full()
        assert not bar.is_empty()

    def test_immutable(self):
        """Test glyphs cannot be modified after construction."""
        glyph = Glyph.from_rows("|", ["#"] * 7)
        with pytest.raises(AttributeError):
            glyph.name = "I"  # type: ignore[misc]

    def test_equality_ignores_mask(self):
        """Test glyphs built from the same rows compare equal."""
        rows = ["#.#"] * 7
        assert Glyph.from_rows("H", rows) == Glyph.from_rows("H", rows)


class TestBlock:
    """Tests for Block rectangles."""

    def test_defaults_to_single_cell(self):
        """Test a Block defaults to one cell."""
        block = Block(col=2, row=3)
        assert block.area == 1
        assert list(block.cells()) == [(3, 2)]

    def test_cells_row_major(self):
        """Test covered cells are listed row-major."""
        block = Block(col=1, row=0, width=2, height=2)
        assert list(block.cells()) == [(0, 1), (0, 2), (1, 1), (1, 2)]

    def test_non_positive_size(self):
        """Test zero-sized Blocks are rejected."""
        with pytest.raises(ValueError):
            Block(col=0, row=0, width=0)

    def test_scaled(self):
        """Test scaling to design units with an offset."""
        block = Block(col=1, row=2, width=3, height=1)
        assert block.scaled(10, x_offset=5) == (15, 20, 45, 30)

    def test_to_path(self):
        """Test the emitted subpath traces the rectangle and closes."""
        block = Block(col=0, row=0, width=2, height=1)
        assert block.to_path(100) == "M0 0H200V100H0V0Z"


class TestThemes:
    """Tests for color themes."""

    def test_get_theme_by_name(self):
        """Test themes resolve from enum values and strings."""
        assert get_theme(ThemeType.DARK) is DARK_THEME
        assert get_theme("light") is LIGHT_THEME

    def test_backgrounds_differ(self):
        """Test light and dark themes differ in background."""
        assert LIGHT_THEME.background == "#FFFFFF"
        assert DARK_THEME.background == "#000000"

    def test_color_for_cell(self):
        """Test cell types map to theme colors."""
        assert color_for_cell(None, ThemeType.LIGHT, CellType.PRIMARY) == "#F1ECEC"
        assert color_for_cell(None, ThemeType.LIGHT, CellType.SECONDARY) == "#B7B1B1"
        assert color_for_cell(None, ThemeType.DARK, CellType.TERTIARY) == "#4B4646"

    def test_colored_block_is_hashable(self):
        """Test rendered cells can be collected in sets."""
        cells = {ColoredBlock(0, 0, "#000"), ColoredBlock(0, 0, "#000")}
        assert len(cells) == 1
