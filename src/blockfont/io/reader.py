"""Font reader for inspecting compiled fonts.

This module provides the FontReader class for loading TTF, WOFF and
WOFF2 data and querying glyph coverage and metrics.
"""

from io import BytesIO
from pathlib import Path

from fontTools.ttLib import TTFont


class FontReader:
    """Loads a compiled font from a path or from bytes.

    The FontReader exposes the tables the pipeline cares about: glyph
    order, character map and horizontal metrics.

    Example:
        with FontReader(Path("fonts/BlockFont.woff2")) as reader:
            print(reader.format, reader.glyph_count)
    """

    def __init__(self, source: Path | bytes) -> None:
        """Initialize the font reader.

        Args:
            source: Path to a font file, or the font bytes themselves
        """
        self._source = source
        self._font: TTFont | None = None

    def load(self) -> None:
        """Load the font.

        Raises:
            FileNotFoundError: If the font file does not exist
            Exception: If the data is not a valid font
        """
        if isinstance(self._source, Path):
            if not self._source.exists():
                raise FileNotFoundError(f"Font file not found: {self._source}")
            self._font = TTFont(str(self._source), recalcBBoxes=False, recalcTimestamp=False)
        else:
            self._font = TTFont(
                BytesIO(self._source), recalcBBoxes=False, recalcTimestamp=False
            )

    def _loaded(self) -> TTFont:
        if self._font is None:
            raise RuntimeError("Font not loaded. Call load() first.")
        return self._font

    @property
    def format(self) -> str:
        """Return container format: 'WOFF2', 'WOFF', 'OpenType' or 'TrueType'."""
        font = self._loaded()
        if font.flavor == "woff2":
            return "WOFF2"
        if font.flavor == "woff":
            return "WOFF"
        if "CFF " in font or "CFF2" in font:
            return "OpenType"
        return "TrueType"

    @property
    def units_per_em(self) -> int:
        """Return font's units per em."""
        return self._loaded()["head"].unitsPerEm  # type: ignore[attr-defined]

    @property
    def glyph_count(self) -> int:
        """Return total number of glyphs, including .notdef."""
        return len(self._loaded().getGlyphOrder())

    @property
    def family_name(self) -> str | None:
        """Return the family name from the name table."""
        name = self._loaded()["name"].getDebugName(1)  # type: ignore[attr-defined]
        return name

    def glyph_order(self) -> list[str]:
        """Return glyph names in font order."""
        return list(self._loaded().getGlyphOrder())

    def cmap(self) -> dict[int, str]:
        """Return the best Unicode character map (codepoint to glyph name)."""
        return dict(self._loaded().getBestCmap() or {})

    def advance_widths(self) -> dict[str, int]:
        """Return advance width per glyph name."""
        metrics = self._loaded()["hmtx"].metrics  # type: ignore[attr-defined]
        return {name: advance for name, (advance, _lsb) in metrics.items()}

    def contour_count(self, glyph_name: str) -> int:
        """Return the number of contours in a TrueType glyph."""
        glyph = self._loaded()["glyf"][glyph_name]  # type: ignore[index]
        return max(glyph.numberOfContours, 0)

    def missing_codepoints(self, codepoints: list[int]) -> list[int]:
        """Return the codepoints that have no glyph in the cmap."""
        cmap = self.cmap()
        return [cp for cp in codepoints if cp not in cmap]

    def close(self) -> None:
        """Close the font and free resources."""
        if self._font is not None:
            self._font.close()
            self._font = None

    def __enter__(self) -> "FontReader":
        """Context manager entry."""
        self.load()
        return self

    def __exit__(self, _exc_type: object, _exc_val: object, _exc_tb: object) -> None:
        """Context manager exit."""
        self.close()
