"""Cell types for glyph grids.

Every position in a glyph grid holds one CellType. Only BLANK cells are
empty; the other kinds are all ink and differ only in presentation color.
"""

from enum import Enum

# Fixed row count shared by every glyph in the alphabet.
GRID_ROWS = 7

MIN_COLUMNS = 1
MAX_COLUMNS = 5

# Rows that receive the secondary (shaded) color when a cell is marked "auto".
SHADED_ROWS = range(3, 6)


class CellType(str, Enum):
    """Visual kind of a single grid cell.

    - BLANK: Empty cell, no ink
    - PRIMARY: Main ink color
    - SECONDARY: Accent ink used for shading
    - TERTIARY: Dark accent ink
    """

    BLANK = "blank"
    PRIMARY = "primary"
    SECONDARY = "secondary"
    TERTIARY = "tertiary"

    @property
    def is_ink(self) -> bool:
        """Check if the cell is filled."""
        return self is not CellType.BLANK


# Source characters accepted in glyph row strings.
CELL_CHARS = {
    ".": CellType.BLANK,
    "+": CellType.SECONDARY,
    "*": CellType.TERTIARY,
}
AUTO_CHAR = "#"


def parse_cell(char: str, row: int) -> CellType:
    """Convert one row-string character into a CellType.

    The auto ink marker "#" becomes SECONDARY inside the shaded band
    (rows 3-5) and PRIMARY elsewhere.

    Args:
        char: Single character from a glyph row string
        row: Zero-based row index of the cell

    Returns:
        Parsed cell type

    Raises:
        ValueError: If the character is not a known cell marker
    """
    if char == AUTO_CHAR:
        return CellType.SECONDARY if row in SHADED_ROWS else CellType.PRIMARY
    try:
        return CELL_CHARS[char]
    except KeyError:
        raise ValueError(f"unknown cell marker {char!r} in row {row}") from None
