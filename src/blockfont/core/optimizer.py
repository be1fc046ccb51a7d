"""Path optimization by greedy rectangle coalescing.

Adjacent ink cells are merged into axis-aligned rectangles (Blocks) so a
glyph is drawn with far fewer path segments than one square per cell.

The coalescing is greedy: cells are scanned row-major and each unvisited
ink cell seeds a rectangle that grows right, then down. This does not
find a minimum rectangle cover (an NP-hard exact-cover problem); the
greedy result is the contract. The scan order makes the output fully
deterministic for a given grid.

The Blocks of a glyph are then traced as one outline: edges shared by
neighbouring Blocks cancel and colinear segments collapse, which leaves
the fewest points needed to draw the same shape.

All coordinates are integers. Nothing in this module introduces floats.
"""

from collections.abc import Iterator, Sequence

from blockfont.domain import Block, ColoredBlock

Grid = Sequence[Sequence[bool]]
Point = tuple[int, int]
Edge = tuple[Point, Point]
PolygonPoints = Sequence[Point]


def cell_blocks(mask: Grid) -> list[Block]:
    """Emit one 1x1 Block per ink cell, in row-major order.

    This is the unoptimized path: one path rectangle per cell.

    Args:
        mask: Grid of booleans, True for ink

    Returns:
        List of unit Blocks
    """
    return [
        Block(col=col, row=row)
        for row, cells in enumerate(mask)
        for col, ink in enumerate(cells)
        if ink
    ]


def coalesce_blocks(mask: Grid) -> list[Block]:
    """Merge ink cells into rectangles with a greedy row-major scan.

    For each unvisited ink cell the rectangle first extends right while
    cells in the row are ink and unvisited, then extends down while the
    whole span of the next row is ink and unvisited. Covered cells are
    marked visited and one Block is emitted per rectangle.

    Args:
        mask: Grid of booleans, True for ink. Rows may differ in length;
            missing cells count as blank.

    Returns:
        Blocks in the order their top-left cell was reached

    Examples:
        >>> coalesce_blocks([[True, True], [True, True]])
        [Block(col=0, row=0, width=2, height=2)]
        >>> coalesce_blocks([[True, False], [True, True]])
        [Block(col=0, row=0, width=1, height=2), Block(col=1, row=1, width=1, height=1)]
    """
    rows = len(mask)
    visited = [[False] * len(cells) for cells in mask]

    def free(r: int, c: int) -> bool:
        return c < len(mask[r]) and mask[r][c] and not visited[r][c]

    blocks: list[Block] = []
    for row in range(rows):
        for col in range(len(mask[row])):
            if not free(row, col):
                continue

            width = 1
            while free(row, col + width):
                width += 1

            height = 1
            while row + height < rows and all(
                free(row + height, c) for c in range(col, col + width)
            ):
                height += 1

            block = Block(col=col, row=row, width=width, height=height)
            for r, c in block.cells():
                visited[r][c] = True
            blocks.append(block)

    return blocks


def optimize_blocks(mask: Grid, optimize: bool = True) -> list[Block]:
    """Get the Blocks for a grid with optimization on or off."""
    return coalesce_blocks(mask) if optimize else cell_blocks(mask)


def simplify_polygon(points: PolygonPoints) -> list[tuple[int, int]]:
    """Coalesce colinear segments of a closed polygon.

    Repeated points and points lying on the straight line between their
    neighbours are dropped. The polygon is treated as closed, so the
    first and last points are neighbours too.

    Args:
        points: Polygon vertices in order

    Returns:
        Vertices with redundant points removed; fewer than three points
        means the polygon was degenerate
    """
    pts: list[tuple[int, int]] = []
    for pt in points:
        if not pts or pts[-1] != pt:
            pts.append(pt)
    if len(pts) > 1 and pts[0] == pts[-1]:
        pts.pop()

    changed = True
    while changed and len(pts) >= 3:
        changed = False
        for i in range(len(pts)):
            prev_pt = pts[i - 1]
            cur = pts[i]
            next_pt = pts[(i + 1) % len(pts)]
            cross = (cur[0] - prev_pt[0]) * (next_pt[1] - cur[1]) - (
                cur[1] - prev_pt[1]
            ) * (next_pt[0] - cur[0])
            if cross == 0:
                del pts[i]
                changed = True
                break

    return pts


def _block_edges(block: Block) -> Iterator[Edge]:
    """Yield the unit-length boundary edges of a Block, clockwise on screen."""
    x0, y0 = block.col, block.row
    x1, y1 = x0 + block.width, y0 + block.height
    for x in range(x0, x1):
        yield (x, y0), (x + 1, y0)
    for y in range(y0, y1):
        yield (x1, y), (x1, y + 1)
    for x in range(x1, x0, -1):
        yield (x, y1), (x - 1, y1)
    for y in range(y1, y0, -1):
        yield (x0, y), (x0, y - 1)


def _next_point(candidates: list[Point], prev: Point, cur: Point) -> Point:
    # Interior lies to the right of every edge, so turning right first keeps
    # regions that only touch at a corner in separate loops.
    dx, dy = cur[0] - prev[0], cur[1] - prev[1]
    for tx, ty in ((-dy, dx), (dx, dy), (dy, -dx)):
        point = (cur[0] + tx, cur[1] + ty)
        if point in candidates:
            return point
    raise ValueError(f"outline is not closed at {cur}")


def trace_outlines(blocks: Sequence[Block]) -> list[list[Point]]:
    """Trace the outline of the union of non-overlapping Blocks.

    Every Block contributes its boundary as unit edges. An edge shared by
    two Blocks appears once in each direction and both copies cancel, so
    only the boundary of the union remains. The remaining edges are
    chained into closed loops: outer boundaries run clockwise on screen
    and holes run counter-clockwise.

    Args:
        blocks: Non-overlapping Blocks in cell units

    Returns:
        Closed loops in cell units, one point per unit step. Loops start
        at their top-left vertex and are ordered by that vertex, row-major.

    Examples:
        >>> trace_outlines([Block(col=0, row=0), Block(col=1, row=0)])
        [[(0, 0), (1, 0), (2, 0), (2, 1), (1, 1), (0, 1)]]
    """
    edges: set[Edge] = set()
    for block in blocks:
        for start, end in _block_edges(block):
            if (end, start) in edges:
                edges.discard((end, start))
            else:
                edges.add((start, end))

    outgoing: dict[Point, list[Point]] = {}
    for start, end in edges:
        outgoing.setdefault(start, []).append(end)

    def take(start: Point, end: Point) -> None:
        edges.discard((start, end))
        outgoing[start].remove(end)

    loops: list[list[Point]] = []
    while edges:
        start, end = min(edges, key=lambda e: (e[0][1], e[0][0], e[1][1], e[1][0]))
        take(start, end)
        loop = [start]
        prev, cur = start, end
        while cur != start:
            loop.append(cur)
            nxt = _next_point(outgoing.get(cur, []), prev, cur)
            take(cur, nxt)
            prev, cur = cur, nxt
        loops.append(loop)
    return loops


def merge_outlines(blocks: Sequence[Block]) -> list[list[Point]]:
    """Trace the union of Blocks and coalesce colinear segments.

    Shared edges between adjacent Blocks disappear and straight runs of
    unit edges collapse into one segment, so an L made of two Blocks
    becomes a single six-point outline instead of two rectangles.
    """
    return [simplify_polygon(loop) for loop in trace_outlines(blocks)]


def polygon_to_path(points: PolygonPoints) -> str:
    """Emit one closed SVG subpath for a polygon.

    Axis-aligned segments use H and V commands, anything else uses L.
    """
    if not points:
        return ""
    x0, y0 = points[0]
    parts = [f"M{x0} {y0}"]
    px, py = x0, y0
    for x, y in [*points[1:], (x0, y0)]:
        if y == py:
            parts.append(f"H{x}")
        elif x == px:
            parts.append(f"V{y}")
        else:
            parts.append(f"L{x} {y}")
        px, py = x, y
    parts.append("Z")
    return "".join(parts)


def blocks_to_path(
    blocks: Sequence[Block], block_size: int, x_offset: int = 0, y_offset: int = 0
) -> str:
    """Join Blocks into one SVG path string, one closed subpath each."""
    return "".join(block.to_path(block_size, x_offset, y_offset) for block in blocks)


def optimize_colored_blocks(blocks: Sequence[ColoredBlock], block_size: int) -> list[str]:
    """Merge same-colored cells and emit one <path> element per color.

    Colors keep the order in which they first appear in `blocks`.

    Args:
        blocks: Rendered cells in cell units
        block_size: Size of one cell in output units

    Returns:
        List of SVG path element strings
    """
    if not blocks:
        return []

    width = max(b.col for b in blocks) + 1
    height = max(b.row for b in blocks) + 1

    masks: dict[str, list[list[bool]]] = {}
    for b in blocks:
        mask = masks.get(b.color)
        if mask is None:
            mask = [[False] * width for _ in range(height)]
            masks[b.color] = mask
        mask[b.row][b.col] = True

    return [
        f'<path d="{blocks_to_path(coalesce_blocks(mask), block_size)}" fill="{color}"/>'
        for color, mask in masks.items()
    ]
