"""Format conversion chain.

Three pure conversions:

1. SVG font document -> TrueType font program (`compile_ttf`)
2. TrueType -> WOFF2, the most compressed web format (`ttf_to_woff2`)
3. TrueType -> WOFF, the fallback web format (`ttf_to_woff`)

WOFF and WOFF2 are both derived from the TrueType bytes; neither is
chained off the other. Timestamps in the head table are fixed by
configuration, so identical input always produces identical bytes.
"""

import xml.etree.ElementTree as ET
from collections.abc import Callable
from dataclasses import dataclass
from io import BytesIO

from fontTools.fontBuilder import FontBuilder
from fontTools.misc.timeTools import timestampSinceEpoch
from fontTools.pens.boundsPen import ControlBoundsPen
from fontTools.pens.recordingPen import RecordingPen
from fontTools.pens.roundingPen import RoundingPen
from fontTools.pens.ttGlyphPen import TTGlyphPen
from fontTools.svgLib.path import parse_path
from fontTools.ttLib import TTFont

from blockfont.config import FontConfig
from blockfont.core.svg import SVG_NAMESPACE
from blockfont.exceptions import ConversionError, ConversionStage

NOTDEF = ".notdef"

_NS = {"svg": SVG_NAMESPACE}


@dataclass(frozen=True)
class FontArtifacts:
    """Binary outputs of one pipeline run."""

    ttf: bytes
    woff2: bytes
    woff: bytes

    def as_dict(self) -> dict[str, bytes]:
        """Get artifacts keyed by file extension."""
        return {"ttf": self.ttf, "woff2": self.woff2, "woff": self.woff}


@dataclass(frozen=True)
class _SvgGlyph:
    name: str
    codepoint: int | None
    advance: int
    path_data: str


def _int_attr(el: ET.Element, attr: str, default: int | None = None) -> int:
    raw = el.get(attr)
    if raw is None:
        if default is None:
            raise ValueError(f"<{el.tag.split('}')[-1]}> is missing '{attr}'")
        return default
    return int(float(raw))


def _parse_svg_font(document: str) -> tuple[dict[str, int], int, list[_SvgGlyph]]:
    """Read metrics and glyphs from an SVG font document.

    Returns:
        Tuple of (face metrics, default advance, glyphs in document order)
    """
    root = ET.fromstring(document)
    font_el = root.find(".//svg:font", _NS)
    if font_el is None:
        raise ValueError("no <font> element in document")
    face = font_el.find("svg:font-face", _NS)
    if face is None:
        raise ValueError("no <font-face> element in document")

    metrics = {
        "units_per_em": _int_attr(face, "units-per-em"),
        "ascent": _int_attr(face, "ascent"),
        "descent": _int_attr(face, "descent"),
    }
    default_advance = _int_attr(font_el, "horiz-adv-x", metrics["units_per_em"])

    missing = font_el.find("svg:missing-glyph", _NS)
    if missing is not None:
        default_advance = _int_attr(missing, "horiz-adv-x", default_advance)

    glyphs: list[_SvgGlyph] = []
    for idx, glyph_el in enumerate(font_el.iterfind("svg:glyph", _NS)):
        unicode_value = glyph_el.get("unicode")
        codepoint = ord(unicode_value) if unicode_value and len(unicode_value) == 1 else None
        name = glyph_el.get("glyph-name") or (
            f"uni{codepoint:04X}" if codepoint is not None else f"glyph{idx}"
        )
        glyphs.append(
            _SvgGlyph(
                name=name,
                codepoint=codepoint,
                advance=_int_attr(glyph_el, "horiz-adv-x", default_advance),
                path_data=glyph_el.get("d", ""),
            )
        )
    return metrics, default_advance, glyphs


def _build_glyph(path_data: str) -> tuple[object, int]:
    """Draw path data into a TrueType glyph.

    Returns:
        Tuple of (glyf glyph, left side bearing)
    """
    recording = RecordingPen()
    if path_data:
        parse_path(path_data, RoundingPen(recording))

    tt_pen = TTGlyphPen(None)
    recording.replay(tt_pen)

    bounds_pen = ControlBoundsPen(None)
    recording.replay(bounds_pen)
    lsb = int(bounds_pen.bounds[0]) if bounds_pen.bounds else 0

    return tt_pen.glyph(), lsb


def compile_ttf(document: str, config: FontConfig) -> bytes:
    """Compile an SVG font document into a TrueType font.

    Args:
        document: SVG font document from `FontAssembler.assemble`
        config: Font naming, version and timestamp

    Returns:
        TTF bytes with glyf, cmap, hmtx, hhea, OS/2, name, post, maxp and head

    Raises:
        ConversionError: If the document is malformed or compilation fails
    """
    try:
        metrics, default_advance, svg_glyphs = _parse_svg_font(document)
        if not svg_glyphs:
            raise ValueError("document defines no glyphs")

        glyph_order = [NOTDEF]
        glyphs = {NOTDEF: TTGlyphPen(None).glyph()}
        h_metrics: dict[str, tuple[int, int]] = {NOTDEF: (default_advance, 0)}
        cmap: dict[int, str] = {}

        for svg_glyph in svg_glyphs:
            if svg_glyph.name in glyphs:
                raise ValueError(f"duplicate glyph name {svg_glyph.name!r}")
            glyph, lsb = _build_glyph(svg_glyph.path_data)
            glyph_order.append(svg_glyph.name)
            glyphs[svg_glyph.name] = glyph
            h_metrics[svg_glyph.name] = (svg_glyph.advance, lsb)
            if svg_glyph.codepoint is not None:
                cmap[svg_glyph.codepoint] = svg_glyph.name

        ascent = metrics["ascent"]
        descent = metrics["descent"]
        family = config.font_name

        fb = FontBuilder(metrics["units_per_em"], isTTF=True)
        fb.setupGlyphOrder(glyph_order)
        fb.setupCharacterMap(cmap)
        fb.setupGlyf(glyphs)
        fb.setupHorizontalMetrics(h_metrics)
        fb.setupHorizontalHeader(ascent=ascent, descent=descent, lineGap=0)
        fb.setupOS2(
            sTypoAscender=ascent,
            sTypoDescender=descent,
            sTypoLineGap=0,
            usWinAscent=ascent,
            usWinDescent=abs(descent),
        )
        name_strings = {
            "copyright": config.copyright,
            "familyName": family,
            "styleName": "Regular",
            "uniqueFontIdentifier": f"{family}-Regular;{config.version}",
            "fullName": f"{family} Regular",
            "version": f"Version {config.version}",
            "psName": f"{family}-Regular",
            "description": config.description,
        }
        if config.url:
            name_strings["vendorURL"] = config.url
        fb.setupNameTable(name_strings)
        fb.setupPost()
        fb.setupMaxp()

        timestamp = timestampSinceEpoch(config.build_timestamp)
        head = fb.font["head"]
        head.fontRevision = float(config.version)
        head.created = timestamp
        head.modified = timestamp

        fb.font.recalcTimestamp = False
        fb.font.recalcBBoxes = True

        buf = BytesIO()
        fb.save(buf)
        return buf.getvalue()
    except ConversionError:
        raise
    except Exception as e:
        raise ConversionError(ConversionStage.COMPILE, str(e)) from e


def _reflavor(ttf: bytes, flavor: str, stage: ConversionStage) -> bytes:
    try:
        font = TTFont(BytesIO(ttf), recalcBBoxes=False, recalcTimestamp=False)
        font.flavor = flavor
        buf = BytesIO()
        font.save(buf)
        font.close()
        return buf.getvalue()
    except Exception as e:
        raise ConversionError(stage, str(e)) from e


def ttf_to_woff2(ttf: bytes) -> bytes:
    """Encode a TrueType font as WOFF2 (needs the brotli module).

    Raises:
        ConversionError: If the input is not a font or encoding fails
    """
    return _reflavor(ttf, "woff2", ConversionStage.WOFF2)


def ttf_to_woff(ttf: bytes) -> bytes:
    """Encode a TrueType font as WOFF.

    Raises:
        ConversionError: If the input is not a font or encoding fails
    """
    return _reflavor(ttf, "woff", ConversionStage.WOFF)


CONVERSION_CHAIN: tuple[tuple[ConversionStage, Callable[[bytes], bytes]], ...] = (
    (ConversionStage.WOFF2, ttf_to_woff2),
    (ConversionStage.WOFF, ttf_to_woff),
)


def convert_all(document: str, config: FontConfig) -> FontArtifacts:
    """Run the whole chain: SVG font -> TTF -> WOFF2 and WOFF.

    Raises:
        ConversionError: Naming the first stage that failed
    """
    ttf = compile_ttf(document, config)
    encoded = {stage: convert(ttf) for stage, convert in CONVERSION_CHAIN}
    return FontArtifacts(
        ttf=ttf,
        woff2=encoded[ConversionStage.WOFF2],
        woff=encoded[ConversionStage.WOFF],
    )
