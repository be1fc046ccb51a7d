"""Glyph representation.

A glyph is the grid definition of one renderable character: a fixed
number of rows, each holding the same number of typed cells.
"""

from collections.abc import Sequence
from dataclasses import dataclass, field

from blockfont.domain.cell import GRID_ROWS, MAX_COLUMNS, MIN_COLUMNS, CellType, parse_cell
from blockfont.exceptions import GlyphDefinitionError

Mask = tuple[tuple[bool, ...], ...]


@dataclass(frozen=True)
class Glyph:
    """Grid definition of a single character.

    Immutable once built. Construction validates the grid shape, so any
    Glyph instance in circulation is well formed.

    Attributes:
        name: The character this glyph renders (e.g., "A", "?", " ")
        cells: Rows of cell types, top row first
    """

    name: str
    cells: tuple[tuple[CellType, ...], ...]
    _mask: Mask = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if len(self.cells) != GRID_ROWS:
            raise GlyphDefinitionError(
                self.name, f"expected {GRID_ROWS} rows, got {len(self.cells)}"
            )

        widths = {len(row) for row in self.cells}
        if len(widths) != 1:
            raise GlyphDefinitionError(
                self.name, f"rows have different lengths {sorted(widths)}"
            )

        width = widths.pop()
        if not MIN_COLUMNS <= width <= MAX_COLUMNS:
            raise GlyphDefinitionError(
                self.name,
                f"width {width} outside {MIN_COLUMNS}-{MAX_COLUMNS} columns",
            )

        mask = tuple(tuple(cell.is_ink for cell in row) for row in self.cells)
        object.__setattr__(self, "_mask", mask)

    @classmethod
    def from_rows(cls, name: str, rows: Sequence[str]) -> "Glyph":
        """Build a glyph from row strings.

        Each string is one grid row; see `blockfont.domain.cell` for the
        accepted markers.

        Args:
            name: Character the glyph renders
            rows: Row strings, top row first

        Returns:
            Validated Glyph

        Raises:
            GlyphDefinitionError: If a marker is unknown or the grid is malformed
        """
        try:
            cells = tuple(
                tuple(parse_cell(char, row_idx) for char in row)
                for row_idx, row in enumerate(rows)
            )
        except ValueError as e:
            raise GlyphDefinitionError(name, str(e)) from e
        return cls(name=name, cells=cells)

    @property
    def width(self) -> int:
        """Logical width in grid columns."""
        return len(self.cells[0])

    @property
    def height(self) -> int:
        """Height in grid rows."""
        return len(self.cells)

    @property
    def ink_count(self) -> int:
        """Number of filled cells."""
        return sum(sum(row) for row in self._mask)

    def cell(self, row: int, col: int) -> CellType:
        """Get the cell type at a grid position."""
        return self.cells[row][col]

    def ink_mask(self) -> Mask:
        """Get the grid as booleans, True where a cell is ink."""
        return self._mask

    def is_empty(self) -> bool:
        """Check if glyph has no ink (e.g., space)."""
        return self.ink_count == 0

    def is_full(self) -> bool:
        """Check if every cell is ink."""
        return all(all(row) for row in self._mask)
