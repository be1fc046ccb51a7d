"""Core build logic for blockfont.

This module contains the main pipeline stages:
- Vectorizer: Glyph grids to polygon outlines
- Optimizer: Rectangle coalescing and path simplification
- SVG: Glyph icons, blocky text and font-based text SVG
- Assembler: SVG font document from glyph icons
- Converters: TTF, WOFF2 and WOFF encoding
- Validator: Size and format checks on written artifacts
- FontPipeline: Main orchestrator
"""

from blockfont.core.assembler import FontAssembler, assign_codepoints, icon_to_font_path
from blockfont.core.converters import (
    CONVERSION_CHAIN,
    FontArtifacts,
    compile_ttf,
    convert_all,
    ttf_to_woff,
    ttf_to_woff2,
)
from blockfont.core.detect import FileCommandDetector, FormatDetector, NullFormatDetector
from blockfont.core.optimizer import (
    blocks_to_path,
    cell_blocks,
    coalesce_blocks,
    merge_outlines,
    optimize_blocks,
    optimize_colored_blocks,
    polygon_to_path,
    simplify_polygon,
    trace_outlines,
)
from blockfont.core.pipeline import PIPELINE_STAGES, FontPipeline
from blockfont.core.svg import (
    GlyphIcon,
    TextSvgOptions,
    convert_text_to_svg,
    escape_xml,
    render_glyph_icon,
)
from blockfont.core.text import (
    BlockyTextOptions,
    MissingGlyphPolicy,
    blocks_to_svg_paths,
    blocky_text_to_svg,
    calculate_width,
    render_favicon,
    text_to_blocks,
)
from blockfont.core.validator import (
    ArtifactReport,
    ArtifactSpec,
    ArtifactState,
    ArtifactValidator,
    CheckResult,
    CheckStatus,
    ValidationReport,
)
from blockfont.core.vectorizer import Vectorizer, blocks_to_polygons, polygons_to_path, vectorize

__all__ = [
    "CONVERSION_CHAIN",
    "PIPELINE_STAGES",
    "ArtifactReport",
    "ArtifactSpec",
    "ArtifactState",
    "ArtifactValidator",
    "BlockyTextOptions",
    "CheckResult",
    "CheckStatus",
    "FileCommandDetector",
    "FontArtifacts",
    "FontAssembler",
    "FontPipeline",
    "FormatDetector",
    "GlyphIcon",
    "MissingGlyphPolicy",
    "NullFormatDetector",
    "TextSvgOptions",
    "ValidationReport",
    "Vectorizer",
    "assign_codepoints",
    "blocks_to_path",
    "blocks_to_polygons",
    "blocks_to_svg_paths",
    "blocky_text_to_svg",
    "calculate_width",
    "cell_blocks",
    "coalesce_blocks",
    "compile_ttf",
    "convert_all",
    "convert_text_to_svg",
    "escape_xml",
    "icon_to_font_path",
    "merge_outlines",
    "optimize_blocks",
    "optimize_colored_blocks",
    "polygon_to_path",
    "polygons_to_path",
    "render_favicon",
    "render_glyph_icon",
    "simplify_polygon",
    "text_to_blocks",
    "trace_outlines",
    "ttf_to_woff",
    "ttf_to_woff2",
    "vectorize",
]
