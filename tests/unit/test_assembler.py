"""Unit tests for the SVG font assembler."""

import xml.etree.ElementTree as ET
from dataclasses import replace

import pytest
from fontTools.pens.areaPen import AreaPen
from fontTools.pens.boundsPen import ControlBoundsPen
from fontTools.svgLib.path import parse_path

from blockfont.alphabet import get_alphabet
from blockfont.config import FontConfig
from blockfont.core.assembler import PUA_START, FontAssembler, assign_codepoints, icon_to_font_path
from blockfont.core.svg import SVG_NAMESPACE, render_glyph_icon
from blockfont.exceptions import AssemblyError, GlyphNotFoundError

NS = {"svg": SVG_NAMESPACE}


@pytest.fixture
def assembler() -> FontAssembler:
    """Assembler with default font settings."""
    return FontAssembler(FontConfig())


class TestAssignCodepoints:
    """Tests for codepoint assignment."""

    def test_ascii_keeps_own_codepoint(self):
        """Test printable ASCII maps to itself."""
        assert assign_codepoints(["A", " ", "?"]) == {"A": 0x41, " ": 0x20, "?": 0x3F}

    def test_other_characters_use_pua(self):
        """Test non-ASCII characters get sequential Private Use Area codepoints."""
        assert assign_codepoints(["é", "A", "ß"]) == {"é": PUA_START, "A": 0x41, "ß": PUA_START + 1}

    def test_duplicates_rejected(self):
        """Test repeated characters raise AssemblyError."""
        with pytest.raises(AssemblyError, match="duplicate"):
            assign_codepoints(["A", "A"])


class TestIconToFontPath:
    """Tests for icon space to font space conversion."""

    def test_flips_onto_baseline(self):
        """Test the icon is flipped so it spans baseline to cap height."""
        icon = render_glyph_icon(get_alphabet().get("|"), cell_size=100)
        pen = ControlBoundsPen(None)
        parse_path(icon_to_font_path(icon), pen)
        assert pen.bounds == (0, 0, 100, 700)

    def test_contours_clockwise_in_font_space(self):
        """Test filled contours wind clockwise (negative area) as TrueType expects."""
        icon = render_glyph_icon(get_alphabet().get("O"), cell_size=100)
        pen = AreaPen()
        parse_path(icon_to_font_path(icon), pen)
        assert pen.value < 0

    def test_empty_icon(self):
        """Test an icon without paths gives empty path data."""
        icon = render_glyph_icon(get_alphabet().get(" "), cell_size=100)
        assert icon_to_font_path(icon) == ""

    def test_invalid_document(self):
        """Test unparsable icons raise AssemblyError."""
        icon = render_glyph_icon(get_alphabet().get("A"), cell_size=100)
        with pytest.raises(AssemblyError, match="not valid SVG"):
            icon_to_font_path(replace(icon, svg="<svg"))

    def test_wrong_root(self):
        """Test documents without an svg root raise AssemblyError."""
        icon = render_glyph_icon(get_alphabet().get("A"), cell_size=100)
        with pytest.raises(AssemblyError, match="no <svg> root"):
            icon_to_font_path(replace(icon, svg="<g/>"))


class TestFontAssembler:
    """Tests for the SVG font document."""

    def test_document_structure(self, assembler):
        """Test the font element, face metrics and one glyph per icon."""
        icons = assembler.render_icons()
        root = ET.fromstring(assembler.assemble(icons))

        font = root.find("svg:defs/svg:font", NS)
        assert font is not None
        assert font.get("id") == "BlockFont"

        face = font.find("svg:font-face", NS)
        assert face.get("units-per-em") == "1000"
        assert face.get("ascent") == "800"
        assert face.get("descent") == "-200"
        assert font.find("svg:missing-glyph", NS) is not None

        glyphs = font.findall("svg:glyph", NS)
        assert len(glyphs) == len(get_alphabet())

    def test_glyph_attributes(self, assembler):
        """Test each glyph carries its name, character and advance."""
        icons = assembler.render_icons(["W", "-", " "])
        root = ET.fromstring(assembler.assemble(icons))
        glyphs = {g.get("glyph-name"): g for g in root.iterfind(".//svg:glyph", NS)}

        assert glyphs["W"].get("unicode") == "W"
        assert glyphs["W"].get("horiz-adv-x") == "500"
        assert glyphs["hyphen"].get("unicode") == "-"
        assert glyphs["hyphen"].get("d")
        assert glyphs["space"].get("unicode") == " "
        assert glyphs["space"].get("d") is None

    def test_deterministic(self, assembler):
        """Test assembling twice gives identical documents."""
        icons = assembler.render_icons()
        assert assembler.assemble(icons) == assembler.assemble(icons)

    def test_missing_character_fails(self, assembler):
        """Test requesting an undefined character fails the whole render."""
        with pytest.raises(GlyphNotFoundError, match="'@'") as exc_info:
            assembler.render_icons(["A", "@", "B"])

        assert exc_info.value.char == "@"

    def test_empty_icons(self, assembler):
        """Test assembling nothing raises AssemblyError."""
        with pytest.raises(AssemblyError, match="no glyph icons"):
            assembler.assemble([])

    def test_duplicate_names(self, assembler):
        """Test duplicate glyph names raise AssemblyError."""
        icon = assembler.render_icons(["A"])[0]
        with pytest.raises(AssemblyError, match="duplicate glyph name"):
            assembler.assemble([icon, replace(icon, char="a")])

    def test_custom_metrics(self):
        """Test font settings flow into the document."""
        assembler = FontAssembler(FontConfig(font_name="Tiny", units_per_em=2048, descent=400))
        root = ET.fromstring(assembler.assemble(assembler.render_icons(["A"])))
        face = root.find(".//svg:font-face", NS)

        assert face.get("font-family") == "Tiny"
        assert face.get("ascent") == "1648"
        assert face.get("descent") == "-400"
