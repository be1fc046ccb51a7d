"""Unit tests for the alphabet table."""

import string

import pytest

from blockfont.alphabet import AlphabetTable, build_alphabet, get_alphabet, glyph_name
from blockfont.domain import GRID_ROWS, MAX_COLUMNS, MIN_COLUMNS, Glyph
from blockfont.exceptions import GlyphDefinitionError, GlyphNotFoundError


@pytest.fixture
def table() -> AlphabetTable:
    """Fresh alphabet table."""
    return build_alphabet()


class TestAlphabetTable:
    """Tests for the built-in alphabet."""

    def test_covers_letters_and_symbols(self, table):
        """Test every letter and supported symbol has a glyph."""
        for char in string.ascii_uppercase + "-|'\"?! ":
            assert char in table

    def test_character_order(self, table):
        """Test letters come first, then symbols."""
        chars = table.characters()
        assert chars[:26] == list(string.ascii_uppercase)
        assert set(chars[26:]) == set(table.symbols)
        assert len(table) == len(chars)

    def test_all_glyphs_well_formed(self, table):
        """Test every grid has seven rows and an allowed width."""
        for glyph in table.glyphs():
            assert glyph.height == GRID_ROWS
            assert MIN_COLUMNS <= glyph.width <= MAX_COLUMNS

    def test_only_space_is_empty(self, table):
        """Test space is the only glyph without ink."""
        empty = [glyph.name for glyph in table.glyphs() if glyph.is_empty()]
        assert empty == [" "]

    def test_get_missing(self, table):
        """Test looking up an undefined character raises GlyphNotFoundError."""
        with pytest.raises(GlyphNotFoundError) as exc_info:
            table.get("a")
        assert exc_info.value.char == "a"

    def test_find_missing(self, table):
        """Test find returns None for undefined characters."""
        assert table.find("@") is None
        assert "@" not in table
        assert 5 not in table

    def test_read_only_views(self, table):
        """Test the glyph mappings cannot be modified."""
        with pytest.raises(TypeError):
            table.letters["A"] = table.get("B")  # type: ignore[index]

    def test_key_must_match_glyph_name(self):
        """Test a glyph registered under another character is rejected."""
        glyph = Glyph.from_rows("A", ["#"] * 7)
        with pytest.raises(GlyphDefinitionError, match="registered under"):
            AlphabetTable({"B": glyph}, {})

    def test_overlap_rejected(self):
        """Test a character cannot be both letter and symbol."""
        glyph = Glyph.from_rows("A", ["#"] * 7)
        with pytest.raises(GlyphDefinitionError, match="both letter and symbol"):
            AlphabetTable({"A": glyph}, {"A": glyph})

    def test_shared_table_is_cached(self):
        """Test get_alphabet returns the same instance every time."""
        assert get_alphabet() is get_alphabet()


class TestGlyphName:
    """Tests for glyph naming."""

    @pytest.mark.parametrize(
        ("char", "expected"),
        [
            ("A", "A"),
            ("-", "hyphen"),
            ("|", "bar"),
            ("'", "quotesingle"),
            ('"', "quotedbl"),
            ("?", "question"),
            ("!", "exclam"),
            (" ", "space"),
            ("é", "uni00E9"),
        ],
    )
    def test_names(self, char, expected):
        """Test letters, AGL symbol names and the uniXXXX fallback."""
        assert glyph_name(char) == expected
