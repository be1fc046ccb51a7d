"""Grid-to-polygon vectorization.

Turns a glyph's cell grid into closed polygons in design units. Polygons
live in icon space: origin at the glyph's top-left corner, y pointing
down, one cell spanning `cell_size` units on each axis.
"""

from collections.abc import Sequence

from blockfont.core.optimizer import (
    merge_outlines,
    optimize_blocks,
    polygon_to_path,
    simplify_polygon,
)
from blockfont.domain import Block, Glyph

Polygon = tuple[tuple[int, int], ...]


def block_polygon(block: Block, cell_size: int) -> Polygon:
    """Get the outline of a Block, clockwise on screen (y down)."""
    x0, y0, x1, y1 = block.scaled(cell_size)
    return tuple(simplify_polygon([(x0, y0), (x1, y0), (x1, y1), (x0, y1)]))


def blocks_to_polygons(blocks: Sequence[Block], cell_size: int, merge: bool = True) -> list[Polygon]:
    """Convert Blocks into polygons in design units.

    Args:
        blocks: Non-overlapping Blocks in cell units
        cell_size: Design units per grid cell
        merge: Trace the union of the Blocks with colinear segments
            coalesced; otherwise emit one rectangle per Block

    Returns:
        Polygons wound clockwise on screen, holes counter-clockwise
    """
    if not merge:
        return [block_polygon(block, cell_size) for block in blocks]
    return [
        tuple((x * cell_size, y * cell_size) for x, y in outline)
        for outline in merge_outlines(blocks)
    ]


def polygons_to_path(polygons: Sequence[Polygon]) -> str:
    """Join polygons into one SVG path string, one closed subpath each."""
    return "".join(polygon_to_path(polygon) for polygon in polygons)


def vectorize(glyph: Glyph, cell_size: int, optimize: bool = True) -> list[Polygon]:
    """Convert a glyph into filled polygon outlines.

    Args:
        glyph: Glyph to vectorize
        cell_size: Design units per grid cell
        optimize: Coalesce cells into rectangles and merge their outlines;
            otherwise emit one square per ink cell

    Returns:
        Polygon outlines. Empty for a glyph without ink.

    Raises:
        ValueError: If cell_size is not positive
    """
    if cell_size < 1:
        raise ValueError(f"cell_size must be positive, got {cell_size}")
    blocks = optimize_blocks(glyph.ink_mask(), optimize)
    return blocks_to_polygons(blocks, cell_size, merge=optimize)


def polygons_bounds(polygons: Sequence[Polygon]) -> tuple[int, int, int, int] | None:
    """Calculate the bounding box of a set of polygons.

    Returns:
        Tuple of (min_x, min_y, max_x, max_y), or None for no polygons
    """
    xs = [x for polygon in polygons for x, _ in polygon]
    ys = [y for polygon in polygons for _, y in polygon]
    if not xs:
        return None
    return (min(xs), min(ys), max(xs), max(ys))


class Vectorizer:
    """Vectorizes glyphs with a fixed cell size and optimization mode.

    Example:
        vectorizer = Vectorizer(cell_size=100)
        d = vectorizer.path_data(get_alphabet().get("A"))
    """

    def __init__(self, cell_size: int, optimize: bool = True) -> None:
        if cell_size < 1:
            raise ValueError(f"cell_size must be positive, got {cell_size}")
        self.cell_size = cell_size
        self.optimize = optimize

    def blocks(self, glyph: Glyph) -> list[Block]:
        """Get the Blocks for a glyph."""
        return optimize_blocks(glyph.ink_mask(), self.optimize)

    def outlines(self, glyph: Glyph, blocks: Sequence[Block] | None = None) -> list[Polygon]:
        """Get the polygon outlines for a glyph, reusing `blocks` when given."""
        if blocks is None:
            blocks = self.blocks(glyph)
        return blocks_to_polygons(blocks, self.cell_size, merge=self.optimize)

    def path_data(self, glyph: Glyph) -> str:
        """Get the SVG path data for a glyph, empty for blank glyphs."""
        return polygons_to_path(self.outlines(glyph))

    def extent(self, glyph: Glyph) -> tuple[int, int]:
        """Get the (width, height) of the glyph cell box in design units."""
        return (glyph.width * self.cell_size, glyph.height * self.cell_size)
