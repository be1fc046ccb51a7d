"""blockfont - Build web fonts from a fixed-grid block alphabet.

blockfont turns a small pictographic alphabet, defined as 7-row grids of
cells, into vector outlines, merges adjacent cells into larger rectangles,
and packages the result as TTF, WOFF2 and WOFF font files.

Example:
    $ blockfont generate

This writes fonts/BlockFont.ttf, fonts/BlockFont.woff2 and
fonts/BlockFont.woff. Run `blockfont validate` afterwards to check sizes
and container formats.
"""

__version__ = "0.1.0"

__all__ = ["__version__"]
