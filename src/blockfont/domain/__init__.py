"""Domain models for blockfont.

This module contains the core domain models representing glyph grids,
the rectangles produced by the optimizer, and presentation themes. All
models are immutable frozen dataclasses and carry no fontTools types.

Key classes:
- CellType: Kind of a single grid cell
- Glyph: Grid definition of one character
- Block: Rectangle of merged ink cells
- ColoredBlock: Rendered cell with a fill color
- Theme: Colors for presentational output
"""

from blockfont.domain.block import Block, ColoredBlock
from blockfont.domain.cell import GRID_ROWS, MAX_COLUMNS, MIN_COLUMNS, CellType, parse_cell
from blockfont.domain.glyph import Glyph, Mask
from blockfont.domain.theme import (
    DARK_THEME,
    LIGHT_THEME,
    Theme,
    ThemeType,
    color_for_cell,
    get_theme,
)

__all__: list[str] = [
    # Constants
    "GRID_ROWS",
    "MAX_COLUMNS",
    "MIN_COLUMNS",
    # Enums
    "CellType",
    "ThemeType",
    # Core types
    "Block",
    "ColoredBlock",
    "Glyph",
    "Mask",
    "Theme",
    # Themes
    "DARK_THEME",
    "LIGHT_THEME",
    "color_for_cell",
    "get_theme",
    "parse_cell",
]
