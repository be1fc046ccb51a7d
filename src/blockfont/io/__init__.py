"""File I/O layer for blockfont.

This module handles reading compiled fonts with fonttools and writing
build outputs to disk.

Key responsibilities:
- Load TTF/WOFF/WOFF2 data for inspection
- Write font artifacts atomically
- Write and clean up per-glyph SVG icons

Key classes:
- FontReader: Inspect compiled fonts
- ArtifactWriter: Save build outputs
"""

from blockfont.io.reader import FontReader
from blockfont.io.writer import ArtifactWriter

__all__ = [
    "ArtifactWriter",
    "FontReader",
]
