"""Block type produced by the path optimizer.

A Block is an axis-aligned rectangle of ink cells, expressed in cell
units. It only exists between coalescing and path emission.
"""

from collections.abc import Iterator
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Block:
    """Rectangle of merged ink cells.

    Attributes:
        col: Left column of the rectangle
        row: Top row of the rectangle
        width: Width in cells (>= 1)
        height: Height in cells (>= 1)
    """

    col: int
    row: int
    width: int = 1
    height: int = 1

    def __post_init__(self) -> None:
        if self.width < 1 or self.height < 1:
            raise ValueError(f"Block size must be positive, got {self.width}x{self.height}")

    @property
    def area(self) -> int:
        """Number of cells covered."""
        return self.width * self.height

    def cells(self) -> Iterator[tuple[int, int]]:
        """Iterate covered (row, col) positions in row-major order."""
        for r in range(self.row, self.row + self.height):
            for c in range(self.col, self.col + self.width):
                yield (r, c)

    def scaled(self, block_size: int, x_offset: int = 0, y_offset: int = 0) -> tuple[int, int, int, int]:
        """Get the rectangle in design units.

        Returns:
            Tuple of (x0, y0, x1, y1), y pointing down
        """
        x0 = x_offset + self.col * block_size
        y0 = y_offset + self.row * block_size
        return (x0, y0, x0 + self.width * block_size, y0 + self.height * block_size)

    def to_path(self, block_size: int, x_offset: int = 0, y_offset: int = 0) -> str:
        """Emit one closed SVG subpath tracing the rectangle clockwise."""
        x0, y0, x1, y1 = self.scaled(block_size, x_offset, y_offset)
        return f"M{x0} {y0}H{x1}V{y1}H{x0}V{y0}Z"


@dataclass(frozen=True, slots=True)
class ColoredBlock:
    """Single rendered cell with its presentation color.

    Positions are in cell units on the rendered text canvas.
    """

    col: int
    row: int
    color: str
