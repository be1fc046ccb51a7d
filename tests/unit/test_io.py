"""Unit tests for the I/O layer.

Tests for FontReader and ArtifactWriter.
"""

from pathlib import Path
from unittest.mock import MagicMock, Mock, patch

import pytest

from blockfont.config import FontConfig
from blockfont.core.assembler import FontAssembler
from blockfont.core.converters import FontArtifacts, convert_all
from blockfont.exceptions import ArtifactWriteError
from blockfont.io.reader import FontReader
from blockfont.io.writer import ArtifactWriter


@pytest.fixture(scope="module")
def artifacts() -> FontArtifacts:
    """Artifacts for a two-glyph font."""
    config = FontConfig()
    assembler = FontAssembler(config)
    return convert_all(assembler.assemble(assembler.render_icons(["H", "I"])), config)


class TestFontReader:
    """Tests for FontReader class."""

    def test_init(self):
        """Test FontReader initialization."""
        path = Path("test.ttf")
        reader = FontReader(path)
        assert reader._source == path
        assert reader._font is None

    def test_load_nonexistent_file(self):
        """Test loading a nonexistent file raises FileNotFoundError."""
        reader = FontReader(Path("nonexistent.ttf"))
        with pytest.raises(FileNotFoundError):
            reader.load()

    def test_format_before_load(self):
        """Test accessing format before loading raises RuntimeError."""
        reader = FontReader(Path("test.ttf"))
        with pytest.raises(RuntimeError, match="Font not loaded"):
            _ = reader.format

    def test_glyph_count_before_load(self):
        """Test accessing glyph_count before loading raises RuntimeError."""
        reader = FontReader(Path("test.ttf"))
        with pytest.raises(RuntimeError, match="Font not loaded"):
            _ = reader.glyph_count

    @patch("blockfont.io.reader.TTFont")
    @patch.object(Path, "exists", return_value=True)
    def test_format_opentype(self, _mock_exists, mock_ttfont):  # noqa: ARG002
        """Test format property for CFF-flavoured fonts."""
        mock_font = MagicMock()
        mock_font.flavor = None
        mock_font.__contains__ = Mock(side_effect=lambda x: x == "CFF ")
        mock_ttfont.return_value = mock_font

        reader = FontReader(Path("test.otf"))
        reader.load()

        assert reader.format == "OpenType"

    @pytest.mark.parametrize(
        ("kind", "expected"),
        [("ttf", "TrueType"), ("woff2", "WOFF2"), ("woff", "WOFF")],
    )
    def test_format_from_bytes(self, artifacts, kind, expected):
        """Test container formats are recognised from raw bytes."""
        with FontReader(artifacts.as_dict()[kind]) as reader:
            assert reader.format == expected

    def test_queries(self, artifacts):
        """Test glyph order, cmap and advances of a compiled font."""
        with FontReader(artifacts.ttf) as reader:
            assert reader.units_per_em == 1000
            assert reader.glyph_count == 3
            assert reader.glyph_order() == [".notdef", "H", "I"]
            assert reader.cmap() == {0x48: "H", 0x49: "I"}
            assert reader.advance_widths()["I"] == 300
            assert reader.contour_count(".notdef") == 0
            assert reader.missing_codepoints([0x48, 0x4A]) == [0x4A]
            assert reader.family_name == "BlockFont"

    def test_load_from_path(self, artifacts, tmp_path):
        """Test loading a font file from disk."""
        path = tmp_path / "font.woff2"
        path.write_bytes(artifacts.woff2)
        with FontReader(path) as reader:
            assert reader.format == "WOFF2"
            assert reader.glyph_count == 3

    def test_close(self, artifacts):
        """Test closing releases the font."""
        reader = FontReader(artifacts.ttf)
        reader.load()
        reader.close()
        assert reader._font is None


class TestArtifactWriter:
    """Tests for ArtifactWriter class."""

    def test_write_fonts(self, artifacts, tmp_path):
        """Test artifacts land in the output directory under the font name."""
        writer = ArtifactWriter(tmp_path / "fonts", "BlockFont")
        paths = writer.write_fonts(artifacts)

        assert paths == {
            "ttf": tmp_path / "fonts" / "BlockFont.ttf",
            "woff2": tmp_path / "fonts" / "BlockFont.woff2",
            "woff": tmp_path / "fonts" / "BlockFont.woff",
        }
        assert paths["woff2"].read_bytes() == artifacts.woff2
        assert not list((tmp_path / "fonts").glob("*.tmp"))

    def test_write_icons_and_clean(self, tmp_path):
        """Test icons are written to and removed from the icon directory."""
        config = FontConfig()
        icons = FontAssembler(config).render_icons(["A", "?"])
        writer = ArtifactWriter(tmp_path, "BlockFont", ".temp-glyphs")

        paths = writer.write_icons(icons)
        assert sorted(p.name for p in paths) == ["A.svg", "question.svg"]
        assert all(p.parent == tmp_path / ".temp-glyphs" for p in paths)

        writer.clean_icons()
        assert not writer.icon_dir.exists()

    def test_clean_icons_when_absent(self, tmp_path):
        """Test cleaning a missing icon directory is a no-op."""
        ArtifactWriter(tmp_path, "BlockFont").clean_icons()

    def test_write_failure(self, artifacts, tmp_path):
        """Test an unwritable location raises ArtifactWriteError."""
        blocker = tmp_path / "blocker"
        blocker.write_text("not a directory")
        writer = ArtifactWriter(blocker / "fonts", "BlockFont")

        with pytest.raises(ArtifactWriteError) as exc_info:
            writer.write_fonts(artifacts)
        assert "BlockFont.ttf" in exc_info.value.path
