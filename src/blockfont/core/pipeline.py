"""Build orchestration for the font pipeline.

This module runs the whole build, strictly in sequence:

1. Load the alphabet table
2. Vectorize every glyph and render its SVG icon
3. Assemble the icons into one SVG font document
4. Compile TTF and encode WOFF2 and WOFF
5. Write artifacts to the output directory

Nothing is written until every conversion has succeeded, so a failed
build never leaves a partial set of artifacts behind.

Key components:
- FontPipeline: Main orchestrator class
- PIPELINE_STAGES: Stage names in execution order
"""

import time
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from pathlib import Path

from blockfont.alphabet import AlphabetTable, get_alphabet
from blockfont.config import BlockFontSettings
from blockfont.core.assembler import FontAssembler, assign_codepoints
from blockfont.core.converters import FontArtifacts, convert_all
from blockfont.core.svg import GlyphIcon, render_glyph_icon
from blockfont.core.validator import ArtifactValidator, ValidationReport
from blockfont.exceptions import ConversionError, ConversionStage, PipelineError
from blockfont.io import ArtifactWriter, FontReader
from blockfont.utils import BuildLogger, BuildStats, configure_logging

PIPELINE_STAGES = ("alphabet", "vectorize", "assemble", "convert", "write")


class FontPipeline:
    """Orchestrates a full font build.

    Example:
        settings = BlockFontSettings()
        pipeline = FontPipeline(settings)
        stats = pipeline.run()
        report = pipeline.validate()
    """

    def __init__(
        self,
        settings: BlockFontSettings,
        table: AlphabetTable | None = None,
        quiet: bool = False,
    ) -> None:
        """Initialize the pipeline with configuration.

        Args:
            settings: Font, build, validation and logging settings
            table: Alphabet to build from (defaults to the built-in one)
            quiet: Suppress console logging except errors
        """
        self.settings = settings
        self._table = table
        self.logger = configure_logging(
            log_file=settings.logging.log_file,
            console_level=settings.logging.log_level,
            file_level=settings.logging.file_log_level,
            quiet=quiet,
        )
        self.build_logger = BuildLogger(self.logger)

    @property
    def output_dir(self) -> Path:
        """Directory receiving the artifacts."""
        return self.settings.build.output_dir

    def _writer(self) -> ArtifactWriter:
        return ArtifactWriter(
            self.output_dir,
            self.settings.font.font_name,
            self.settings.build.temp_dir_name,
        )

    @contextmanager
    def _stage(self, stage: str, details: dict[str, object]) -> Iterator[None]:
        """Time a stage and convert its failure into a PipelineError."""
        self.build_logger.log_stage_start(stage)
        start = time.perf_counter()
        try:
            yield
        except Exception as e:
            self.build_logger.log_stage_error(stage, e)
            raise PipelineError(stage, str(e)) from e
        duration_ms = (time.perf_counter() - start) * 1000
        self.build_logger.log_stage_complete(stage, duration_ms, **details)

    def run(
        self,
        progress_callback: Callable[[str, int, int], None] | None = None,
    ) -> BuildStats:
        """Run the build and write all artifacts.

        Args:
            progress_callback: Optional callback(stage, completed, total),
                called after each stage finishes

        Returns:
            BuildStats with glyph counts, stage timings and artifact sizes

        Raises:
            PipelineError: Naming the failed stage, with the underlying
                BlockFontError (or other error) chained
        """
        stats = self.build_logger.stats
        stats.start_time = time.time()
        build = self.settings.build
        total = len(PIPELINE_STAGES)

        def advance(stage: str) -> None:
            if progress_callback is not None:
                progress_callback(stage, PIPELINE_STAGES.index(stage) + 1, total)

        self.logger.info(
            "Starting build",
            font_name=self.settings.font.font_name,
            output_dir=str(self.output_dir),
            optimize=build.optimize,
        )

        details: dict[str, object] = {}
        with self._stage("alphabet", details):
            table = self._table if self._table is not None else get_alphabet()
            details["glyphs"] = len(table)
        advance("alphabet")

        details = {}
        with self._stage("vectorize", details):
            icons = self._render_icons(table)
            details["blocks"] = stats.blocks_emitted
        advance("vectorize")

        details = {}
        with self._stage("assemble", details):
            assembler = FontAssembler(self.settings.font, table=table, optimize=build.optimize)
            document = assembler.assemble(icons)
            details["document_bytes"] = len(document.encode("utf-8"))
        advance("assemble")

        details = {}
        with self._stage("convert", details):
            artifacts = convert_all(document, self.settings.font)
            self._check_coverage(artifacts, table)
            details.update({kind: len(data) for kind, data in artifacts.as_dict().items()})
        advance("convert")

        with self._stage("write", {}):
            self._write(artifacts, icons)
        advance("write")

        stats.end_time = time.time()
        self.logger.info(
            "Build complete",
            glyphs=stats.glyph_count,
            blocks=stats.blocks_emitted,
            total_size=stats.total_size,
            duration_s=round(stats.duration_seconds, 3),
        )
        return stats

    def _render_icons(self, table: AlphabetTable) -> list[GlyphIcon]:
        build = self.settings.build
        icons = []
        for char in table.characters():
            glyph = table.get(char)
            icon = render_glyph_icon(glyph, self.settings.font.cell_size, build.optimize)
            self.build_logger.log_glyph(icon.name, glyph.ink_count, icon.block_count)
            icons.append(icon)
        return icons

    def _check_coverage(self, artifacts: FontArtifacts, table: AlphabetTable) -> None:
        """Check that every alphabet character is reachable through the TTF cmap."""
        expected = assign_codepoints(table.characters())
        with FontReader(artifacts.ttf) as reader:
            missing = reader.missing_codepoints(list(expected.values()))
        if missing:
            chars = ", ".join(f"U+{cp:04X}" for cp in missing)
            raise ConversionError(ConversionStage.COMPILE, f"codepoints missing from cmap: {chars}")

    def _write(self, artifacts: FontArtifacts, icons: list[GlyphIcon]) -> None:
        writer = self._writer()
        paths = writer.write_fonts(artifacts)
        for kind, path in paths.items():
            self.build_logger.log_artifact(kind, path, len(artifacts.as_dict()[kind]))

        if self.settings.build.keep_temp:
            written = writer.write_icons(icons)
            self.logger.debug("Glyph icons kept", directory=str(writer.icon_dir), count=len(written))
        else:
            writer.clean_icons()

    def validate(self) -> ValidationReport:
        """Validate the artifacts currently in the output directory."""
        validator = ArtifactValidator(self.settings.font, self.settings.validation)
        return validator.validate(self.output_dir)

