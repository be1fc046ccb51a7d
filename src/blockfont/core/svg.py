"""SVG emission for glyph icons and font-based text.

Each glyph becomes a standalone SVG icon, the unit of input for the font
assembler. `convert_text_to_svg` produces a small SVG that renders text
with the generated font family instead of outlines.
"""

import re
from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from blockfont.alphabet import glyph_name
from blockfont.config import FontConfig
from blockfont.core.vectorizer import Vectorizer, polygons_to_path
from blockfont.domain import Glyph

SVG_NAMESPACE = "http://www.w3.org/2000/svg"
DEFAULT_FONT_FAMILY = FontConfig().font_name

_XML_ESCAPES = {
    "&": "&amp;",
    "<": "&lt;",
    ">": "&gt;",
    '"': "&quot;",
    "'": "&apos;",
}

# "&" is left alone when it already starts a character or entity reference.
_XML_SPECIAL = re.compile(
    r"&(?!(?:amp|lt|gt|quot|apos|#[0-9]+|#x[0-9A-Fa-f]+);)|[<>\"']"
)


def escape_xml(text: str | None) -> str:
    """Escape the five XML special characters.

    Escaping is idempotent: an existing reference such as "&amp;" or
    "&#38;" is kept as is, so escaping twice gives the same result.

    Args:
        text: Text to escape; None is treated as empty

    Returns:
        Escaped text

    Examples:
        >>> escape_xml("<&>\\"'")
        '&lt;&amp;&gt;&quot;&apos;'
        >>> escape_xml(escape_xml("a & b"))
        'a &amp; b'
    """
    if text is None:
        return ""
    return _XML_SPECIAL.sub(lambda m: _XML_ESCAPES[m.group(0)[0]], str(text))


@dataclass(frozen=True)
class GlyphIcon:
    """Standalone SVG document for one glyph.

    Attributes:
        char: Character the icon renders
        name: Stable glyph name (e.g., "A", "question")
        width: Icon width in design units (the advance width)
        height: Icon height in design units
        path_data: Path data in icon space, empty for blank glyphs
        svg: Full SVG document text
        block_count: Number of Blocks the outline was built from
    """

    char: str
    name: str
    width: int
    height: int
    path_data: str
    svg: str
    block_count: int = 0

    @property
    def filename(self) -> str:
        """File name used when the icon is written to disk."""
        return f"{self.name}.svg"


def render_glyph_icon(glyph: Glyph, cell_size: int, optimize: bool = True) -> GlyphIcon:
    """Render a glyph as a standalone SVG icon.

    Args:
        glyph: Glyph to render
        cell_size: Design units per grid cell
        optimize: Merge adjacent ink cells and trace one outline per shape;
            otherwise draw one square per ink cell

    Returns:
        GlyphIcon carrying the document and its metrics
    """
    vectorizer = Vectorizer(cell_size=cell_size, optimize=optimize)
    width, height = vectorizer.extent(glyph)
    blocks = vectorizer.blocks(glyph)
    path_data = polygons_to_path(vectorizer.outlines(glyph, blocks))

    lines = [
        '<?xml version="1.0" encoding="UTF-8"?>',
        f'<svg xmlns="{SVG_NAMESPACE}" width="{width}" height="{height}" '
        f'viewBox="0 0 {width} {height}">',
    ]
    if path_data:
        lines.append(f'  <path d="{path_data}" fill="#000000"/>')
    lines.append("</svg>")

    return GlyphIcon(
        char=glyph.name,
        name=glyph_name(glyph.name),
        width=width,
        height=height,
        path_data=path_data,
        svg="\n".join(lines) + "\n",
        block_count=len(blocks),
    )


class TextSvgOptions(BaseModel):
    """Options for `convert_text_to_svg`.

    Fields accept both snake_case names and their camelCase aliases
    (`fontSize`, `fontFamily`, `includeNamespace`, `ariaLabel`). Unknown
    keys are rejected. A width or height of 0 omits the attribute.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="forbid")

    font_size: float = Field(default=48, gt=0)
    color: str = Field(default="#000")
    font_family: str = Field(default=DEFAULT_FONT_FAMILY)
    width: float | None = Field(default=None, ge=0)
    height: float | None = Field(default=None, ge=0)
    include_namespace: bool = Field(default=True)
    role: str | None = Field(default=None)
    aria_label: str | None = Field(default=None)


def _format_number(value: float) -> str:
    return str(int(value)) if float(value).is_integer() else str(value)


def _svg_attributes(options: TextSvgOptions) -> str:
    attrs: list[str] = []
    if options.include_namespace:
        attrs.append(f'xmlns="{SVG_NAMESPACE}"')
    if options.width:
        attrs.append(f'width="{_format_number(options.width)}"')
    if options.height:
        attrs.append(f'height="{_format_number(options.height)}"')
    attrs.append('viewBox="0 0 100 20"')
    if options.role:
        attrs.append(f'role="{escape_xml(options.role)}"')
    if options.aria_label:
        attrs.append(f'aria-label="{escape_xml(options.aria_label)}"')
    return " ".join(attrs)


def convert_text_to_svg(text: str | None, options: TextSvgOptions | dict | None = None) -> str:
    """Convert text to an SVG that renders it with the block font.

    The SVG holds a single <text> node referencing the font family, so
    the consumer must load the generated font (e.g., via @font-face).

    Args:
        text: Text to render; None renders as empty text
        options: TextSvgOptions or a dict of its fields, keyed by field
            name or camelCase alias

    Returns:
        SVG document text starting with "<svg"

    Example:
        convert_text_to_svg("HELLO", {"fontSize": 72, "color": "#667eea"})
    """
    if options is None:
        opts = TextSvgOptions()
    elif isinstance(options, TextSvgOptions):
        opts = options
    else:
        opts = TextSvgOptions.model_validate(options)

    text_element = (
        f'<text x="0" y="14" font-family="{escape_xml(opts.font_family)}" '
        f'font-size="{_format_number(opts.font_size)}" fill="{escape_xml(opts.color)}">'
        f"{escape_xml(text)}</text>"
    )
    return f"<svg {_svg_attributes(opts)}>\n  {text_element}\n</svg>"
