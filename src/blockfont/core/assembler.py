"""Font assembly from per-glyph SVG icons.

The assembler reads each icon document, moves its outline from icon
space (y down, origin top-left) into font space (y up, baseline at 0)
and writes everything into a single SVG font document. That document
is the outline-font intermediate consumed by `compile_ttf`.
"""

import xml.etree.ElementTree as ET
from collections.abc import Sequence

from fontTools.misc.roundTools import otRound
from fontTools.pens.svgPathPen import SVGPathPen
from fontTools.pens.transformPen import TransformPen
from fontTools.svgLib.path import parse_path

from blockfont.alphabet import AlphabetTable, get_alphabet
from blockfont.config import FontConfig
from blockfont.core.svg import SVG_NAMESPACE, GlyphIcon, render_glyph_icon
from blockfont.exceptions import AssemblyError

PUA_START = 0xE000
PUA_END = 0xF8FF

# Printable ASCII maps to itself; everything else goes to the PUA.
_BASIC_RANGE = range(0x20, 0x7F)

_NS = {"svg": SVG_NAMESPACE}

ET.register_namespace("", SVG_NAMESPACE)


def _ntos(value: float) -> str:
    return str(otRound(value))


def _tag(name: str) -> str:
    return f"{{{SVG_NAMESPACE}}}{name}"


def assign_codepoints(chars: Sequence[str]) -> dict[str, int]:
    """Assign a codepoint to every character.

    Single printable ASCII characters keep their own codepoint. Anything
    else (multi-character names, non-ASCII) gets the next free Private
    Use Area codepoint, in input order.

    Raises:
        AssemblyError: If a character repeats or the PUA is exhausted
    """
    if len(set(chars)) != len(chars):
        raise AssemblyError("duplicate characters in glyph set")

    codepoints: dict[str, int] = {}
    next_pua = PUA_START
    for char in chars:
        if len(char) == 1 and ord(char) in _BASIC_RANGE:
            codepoints[char] = ord(char)
            continue
        if next_pua > PUA_END:
            raise AssemblyError("private use area exhausted")
        codepoints[char] = next_pua
        next_pua += 1
    return codepoints


def icon_to_font_path(icon: GlyphIcon) -> str:
    """Parse an icon document and return its outline in font space.

    The icon is flipped vertically so its bottom edge sits on the
    baseline. Outer icon contours run clockwise on screen and holes run
    counter-clockwise; the flip keeps both directions in font space, which
    is what TrueType expects.

    Raises:
        AssemblyError: If the icon document cannot be parsed
    """
    try:
        root = ET.fromstring(icon.svg)
    except ET.ParseError as e:
        raise AssemblyError(f"icon {icon.name!r} is not valid SVG: {e}") from e

    if root.tag != _tag("svg"):
        raise AssemblyError(f"icon {icon.name!r} has no <svg> root element")

    try:
        height = float(root.get("height", icon.height))
    except ValueError as e:
        raise AssemblyError(f"icon {icon.name!r} has invalid height") from e

    svg_pen = SVGPathPen(None, ntos=_ntos)
    pen = TransformPen(svg_pen, (1, 0, 0, -1, 0, height))
    for path_el in root.iterfind("svg:path", _NS):
        d = path_el.get("d", "")
        if d:
            parse_path(d, pen)
    return svg_pen.getCommands()


class FontAssembler:
    """Stitches glyph icons into a single SVG font document.

    Example:
        assembler = FontAssembler(FontConfig())
        icons = assembler.render_icons()
        document = assembler.assemble(icons)
    """

    def __init__(
        self,
        config: FontConfig,
        table: AlphabetTable | None = None,
        optimize: bool = True,
    ) -> None:
        """Initialize the assembler.

        Args:
            config: Font metrics and naming
            table: Alphabet to read glyphs from (defaults to the built-in one)
            optimize: Merge adjacent ink cells when rendering icons
        """
        self.config = config
        self.table = table if table is not None else get_alphabet()
        self.optimize = optimize

    def render_icons(self, chars: Sequence[str] | None = None) -> list[GlyphIcon]:
        """Render icons for the given characters, or the whole alphabet.

        Every requested character must exist; the build never skips one.

        Raises:
            GlyphNotFoundError: If a requested character has no glyph
        """
        if chars is None:
            chars = self.table.characters()
        return [
            render_glyph_icon(self.table.get(char), self.config.cell_size, self.optimize)
            for char in chars
        ]

    def assemble(self, icons: Sequence[GlyphIcon]) -> str:
        """Build the SVG font document.

        Args:
            icons: Glyph icons in the order they should appear in the font

        Returns:
            SVG font document text

        Raises:
            AssemblyError: If icons are empty, names collide or an icon
                cannot be parsed
        """
        if not icons:
            raise AssemblyError("no glyph icons to assemble")

        names = [icon.name for icon in icons]
        if len(set(names)) != len(names):
            duplicate = next(n for n in names if names.count(n) > 1)
            raise AssemblyError(f"duplicate glyph name {duplicate!r}")

        codepoints = assign_codepoints([icon.char for icon in icons])
        config = self.config
        default_advance = 4 * config.cell_size

        root = ET.Element(_tag("svg"))
        defs = ET.SubElement(root, _tag("defs"))
        font_el = ET.SubElement(
            defs,
            _tag("font"),
            {"id": config.font_name, "horiz-adv-x": str(default_advance)},
        )
        ET.SubElement(
            font_el,
            _tag("font-face"),
            {
                "font-family": config.font_name,
                "font-weight": "400",
                "font-style": "normal",
                "units-per-em": str(config.units_per_em),
                "ascent": str(config.ascent),
                "descent": str(-config.descent),
            },
        )
        ET.SubElement(font_el, _tag("missing-glyph"), {"horiz-adv-x": str(default_advance)})

        for icon in icons:
            attrs = {
                "glyph-name": icon.name,
                "unicode": chr(codepoints[icon.char]),
                "horiz-adv-x": str(icon.width),
            }
            d = icon_to_font_path(icon)
            if d:
                attrs["d"] = d
            ET.SubElement(font_el, _tag("glyph"), attrs)

        ET.indent(root)
        return '<?xml version="1.0" standalone="no"?>\n' + ET.tostring(root, encoding="unicode") + "\n"
