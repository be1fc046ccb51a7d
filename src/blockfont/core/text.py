"""Blocky pixel-art text rendering.

Renders text straight from the alphabet grids as colored squares, with
no font involved. Used for previews, logos and favicons.
"""

from enum import Enum

import structlog
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from blockfont.alphabet import AlphabetTable, get_alphabet
from blockfont.core.optimizer import optimize_colored_blocks
from blockfont.core.svg import SVG_NAMESPACE
from blockfont.domain import GRID_ROWS, ColoredBlock, Glyph, ThemeType, color_for_cell
from blockfont.exceptions import GlyphNotFoundError

logger = structlog.get_logger("blockfont.text")


class MissingGlyphPolicy(str, Enum):
    """What to do with characters the alphabet does not define.

    - STRICT: Raise GlyphNotFoundError
    - SKIP: Best effort; drop the character without advancing
    """

    STRICT = "strict"
    SKIP = "skip"


class BlockyTextOptions(BaseModel):
    """Options for blocky text rendering.

    Accepts camelCase aliases (`blockSize`, `charSpacing`) as well as
    field names. Unknown keys are rejected.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="forbid")

    theme: ThemeType = Field(default=ThemeType.LIGHT)
    block_size: int = Field(default=6, ge=1, description="Size of one cell in pixels")
    char_spacing: int = Field(default=1, ge=0, description="Blank columns between characters")
    optimize: bool = Field(default=True, description="Merge adjacent same-colored cells")
    missing: MissingGlyphPolicy = Field(default=MissingGlyphPolicy.STRICT)


def _resolve_glyphs(
    text: str, options: BlockyTextOptions, table: AlphabetTable
) -> list[Glyph]:
    glyphs: list[Glyph] = []
    for char in text.upper():
        glyph = table.find(char)
        if glyph is None:
            if options.missing is MissingGlyphPolicy.STRICT:
                raise GlyphNotFoundError(char)
            logger.debug("Skipping character without glyph", char=char)
            continue
        glyphs.append(glyph)
    return glyphs


def text_to_blocks(
    text: str,
    options: BlockyTextOptions | None = None,
    table: AlphabetTable | None = None,
) -> list[ColoredBlock]:
    """Lay out text as colored cells.

    Positions are in cell units. Each character starts `char_spacing`
    columns after the previous one ends.

    Args:
        text: Text to render (upper-cased before lookup)
        options: Rendering options
        table: Alphabet to read glyphs from (defaults to the built-in one)

    Returns:
        One ColoredBlock per ink cell, characters left to right, each in
        row-major order

    Raises:
        GlyphNotFoundError: If a character is missing and the policy is STRICT
    """
    options = options or BlockyTextOptions()
    table = table if table is not None else get_alphabet()

    blocks: list[ColoredBlock] = []
    col_offset = 0
    for glyph in _resolve_glyphs(text, options, table):
        for row in range(glyph.height):
            for col in range(glyph.width):
                cell = glyph.cell(row, col)
                if not cell.is_ink:
                    continue
                blocks.append(
                    ColoredBlock(
                        col=col_offset + col,
                        row=row,
                        color=color_for_cell(glyph, options.theme, cell),
                    )
                )
        col_offset += glyph.width + options.char_spacing
    return blocks


def calculate_width(
    text: str,
    options: BlockyTextOptions | None = None,
    table: AlphabetTable | None = None,
) -> int:
    """Calculate the rendered width of text in pixels.

    Trailing spacing after the last character is not counted.
    """
    options = options or BlockyTextOptions()
    table = table if table is not None else get_alphabet()

    glyphs = _resolve_glyphs(text, options, table)
    if not glyphs:
        return 0
    columns = sum(g.width for g in glyphs) + options.char_spacing * (len(glyphs) - 1)
    return columns * options.block_size


def blocks_to_svg_paths(blocks: list[ColoredBlock], block_size: int) -> list[str]:
    """Emit one <path> element per cell, without merging."""
    paths = []
    for b in blocks:
        x = b.col * block_size
        y = b.row * block_size
        paths.append(
            f'<path d="M{x} {y}H{x + block_size}V{y + block_size}H{x}V{y}Z" fill="{b.color}"/>'
        )
    return paths


def blocky_text_to_svg(text: str, options: BlockyTextOptions | dict | None = None) -> str:
    """Convert text to a blocky pixel-art SVG.

    Args:
        text: Text to render (A-Z and the symbols - | ' " ? ! and space)
        options: BlockyTextOptions or a dict of its fields

    Returns:
        SVG document text

    Raises:
        GlyphNotFoundError: If a character is missing and the policy is STRICT

    Example:
        svg = blocky_text_to_svg("HELLO", {"theme": "dark", "block_size": 8})
    """
    if options is None:
        opts = BlockyTextOptions()
    elif isinstance(options, BlockyTextOptions):
        opts = options
    else:
        opts = BlockyTextOptions.model_validate(options)

    blocks = text_to_blocks(text, opts)
    width = calculate_width(text, opts)
    height = GRID_ROWS * opts.block_size

    if opts.optimize:
        paths = optimize_colored_blocks(blocks, opts.block_size)
    else:
        paths = blocks_to_svg_paths(blocks, opts.block_size)

    body = "\n".join(paths)
    return (
        f'<svg width="{width}" height="{height}" viewBox="0 0 {width} {height}" '
        f'fill="none" xmlns="{SVG_NAMESPACE}">\n{body}\n</svg>'
    )


def render_favicon(
    char: str = "W",
    theme: ThemeType = ThemeType.DARK,
    block_size: int = 8,
) -> str:
    """Render a single character as a favicon SVG."""
    return blocky_text_to_svg(
        char,
        BlockyTextOptions(theme=theme, block_size=block_size, char_spacing=0, optimize=True),
    )
