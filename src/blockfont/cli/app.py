"""CLI application entry point for blockfont.

This module provides the main CLI interface using Typer.
"""

from pathlib import Path
from typing import Annotated

import typer

from blockfont import __version__
from blockfont.cli.output import (
    console,
    create_progress,
    print_artifact_report,
    print_build_success,
    print_error,
    print_header,
    print_step,
    print_validation_summary,
)
from blockfont.config import (
    BlockFontSettings,
    BuildConfig,
    FontConfig,
    LoggingConfig,
    ValidationConfig,
)
from blockfont.core import (
    PIPELINE_STAGES,
    ArtifactValidator,
    BlockyTextOptions,
    FontPipeline,
    MissingGlyphPolicy,
    TextSvgOptions,
    blocky_text_to_svg,
    convert_text_to_svg,
)
from blockfont.domain import ThemeType
from blockfont.exceptions import BlockFontError, PipelineError
from blockfont.utils import configure_logging

# Create the Typer app
app = typer.Typer(
    name="blockfont",
    help="Build a blocky pixel font (TTF, WOFF2, WOFF) from a fixed grid alphabet.",
    add_completion=False,
    no_args_is_help=True,
)

OutputDirOption = Annotated[
    Path,
    typer.Option(
        "--output-dir",
        "-d",
        help="Directory holding the font artifacts",
    ),
]
FontNameOption = Annotated[
    str,
    typer.Option(
        "--font-name",
        help="Font family name and artifact file stem",
    ),
]
LogFileOption = Annotated[
    Path | None,
    typer.Option(
        "--log-file",
        help="Write detailed logs to file",
    ),
]
LogLevelOption = Annotated[
    str,
    typer.Option(
        "--log-level",
        help="Logging level (DEBUG|INFO|WARNING|ERROR)",
    ),
]
QuietOption = Annotated[
    bool,
    typer.Option(
        "--quiet",
        "-q",
        help="Minimal console output",
    ),
]

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]BlockFont[/bold blue] v{__version__}")
        raise typer.Exit()


def _check_log_level(log_level: str) -> str:
    level = log_level.upper()
    if level not in _LOG_LEVELS:
        print_error(
            f"Invalid log level: {log_level}",
            details=f"Valid values: {', '.join(_LOG_LEVELS)}",
        )
        raise typer.Exit(code=1)
    return level


@app.callback()
def main_callback(
    _version: Annotated[  # noqa: ARG001
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Build and validate the BlockFont web fonts."""


@app.command()
def generate(
    output_dir: OutputDirOption = Path("fonts"),
    font_name: FontNameOption = "BlockFont",
    no_optimize: Annotated[
        bool,
        typer.Option(
            "--no-optimize",
            help="Emit one square per ink cell instead of merged rectangles",
        ),
    ] = False,
    keep_temp: Annotated[
        bool,
        typer.Option(
            "--keep-temp",
            help="Keep the per-glyph SVG icons next to the fonts",
        ),
    ] = False,
    timestamp: Annotated[
        int,
        typer.Option(
            "--timestamp",
            help="Unix time stored in the font header (fixed for reproducible builds)",
            min=0,
        ),
    ] = 0,
    log_file: LogFileOption = None,
    log_level: LogLevelOption = "WARNING",
    quiet: QuietOption = False,
) -> None:
    """Generate TTF, WOFF2 and WOFF fonts from the built-in alphabet.

    Example:
        blockfont generate --output-dir fonts
    """
    level = _check_log_level(log_level)

    if not quiet:
        print_header(__version__)

    try:
        settings = BlockFontSettings(
            font=FontConfig(font_name=font_name, build_timestamp=timestamp),
            build=BuildConfig(
                output_dir=output_dir,
                keep_temp=keep_temp,
                optimize=not no_optimize,
            ),
            logging=LoggingConfig(log_file=log_file, log_level=level),
        )
    except ValueError as e:
        print_error("Invalid configuration", details=str(e))
        raise typer.Exit(code=1)

    pipeline = FontPipeline(settings, quiet=quiet)

    try:
        if not quiet:
            print_step("Building")
            with create_progress() as progress:
                task_id = progress.add_task(PIPELINE_STAGES[0], total=len(PIPELINE_STAGES))

                def update_progress(_stage: str, completed: int, _total: int) -> None:
                    next_stage = PIPELINE_STAGES[min(completed, len(PIPELINE_STAGES) - 1)]
                    progress.update(task_id, completed=completed, description=next_stage)

                stats = pipeline.run(progress_callback=update_progress)
        else:
            stats = pipeline.run()
    except PipelineError as e:
        print_error(f"Build failed at stage '{e.stage}'", details=e.reason)
        raise typer.Exit(code=1)
    except BlockFontError as e:
        print_error(str(e))
        raise typer.Exit(code=1)

    if not quiet:
        print_build_success(stats)


@app.command()
def validate(
    output_dir: OutputDirOption = Path("fonts"),
    font_name: FontNameOption = "BlockFont",
    strict: Annotated[
        bool,
        typer.Option(
            "--strict",
            help="Treat magic byte and format sniffing mismatches as failures",
        ),
    ] = False,
    no_sniff: Annotated[
        bool,
        typer.Option(
            "--no-sniff",
            help="Skip the 'file' utility cross-check",
        ),
    ] = False,
    log_file: LogFileOption = None,
    log_level: LogLevelOption = "WARNING",
    quiet: QuietOption = False,
) -> None:
    """Check that every font artifact exists, fits its size limit and has the right format.

    Exits with code 0 when all artifacts are valid, 1 otherwise.
    """
    level = _check_log_level(log_level)
    configure_logging(log_file=log_file, console_level=level, quiet=quiet)

    try:
        font_config = FontConfig(font_name=font_name)
    except ValueError as e:
        print_error("Invalid configuration", details=str(e))
        raise typer.Exit(code=1)

    validation = ValidationConfig(
        strict_magic=strict,
        strict_sniff=strict,
        use_file_command=not no_sniff,
    )
    report = ArtifactValidator(font_config, validation).validate(output_dir)

    if not quiet:
        print_header(__version__)
        print_step(f"Validating {output_dir}")
        for artifact in report.artifacts:
            print_artifact_report(artifact)
    print_validation_summary(report)

    if not report.passed:
        raise typer.Exit(code=1)


@app.command()
def render(
    text: Annotated[
        str,
        typer.Argument(
            help="Text to render (A-Z, space and - | ' \" ? !)",
            show_default=False,
        ),
    ],
    output: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            help="Write SVG to this file instead of stdout",
        ),
    ] = None,
    theme: Annotated[
        ThemeType,
        typer.Option(
            "--theme",
            "-t",
            help="Color theme",
        ),
    ] = ThemeType.LIGHT,
    block_size: Annotated[
        int,
        typer.Option(
            "--block-size",
            "-b",
            help="Size of one cell in pixels",
            min=1,
        ),
    ] = 6,
    char_spacing: Annotated[
        int,
        typer.Option(
            "--char-spacing",
            help="Blank columns between characters",
            min=0,
        ),
    ] = 1,
    no_optimize: Annotated[
        bool,
        typer.Option(
            "--no-optimize",
            help="Emit one path per cell instead of merged rectangles",
        ),
    ] = False,
    skip_missing: Annotated[
        bool,
        typer.Option(
            "--skip-missing",
            help="Drop characters the alphabet does not define instead of failing",
        ),
    ] = False,
) -> None:
    """Render text as a blocky pixel-art SVG, without using the font.

    Example:
        blockfont render HELLO --theme dark -o hello.svg
    """
    options = BlockyTextOptions(
        theme=theme,
        block_size=block_size,
        char_spacing=char_spacing,
        optimize=not no_optimize,
        missing=MissingGlyphPolicy.SKIP if skip_missing else MissingGlyphPolicy.STRICT,
    )
    try:
        svg = blocky_text_to_svg(text, options)
    except BlockFontError as e:
        print_error(str(e))
        raise typer.Exit(code=1)

    _emit(svg, output)


@app.command("text-svg")
def text_svg(
    text: Annotated[
        str,
        typer.Argument(
            help="Text to place in the SVG",
            show_default=False,
        ),
    ],
    output: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            help="Write SVG to this file instead of stdout",
        ),
    ] = None,
    font_family: Annotated[
        str,
        typer.Option(
            "--font-family",
            help="Font family referenced by the text node",
        ),
    ] = "BlockFont",
    font_size: Annotated[
        float,
        typer.Option(
            "--font-size",
            help="Font size",
            min=0.1,
        ),
    ] = 48,
    color: Annotated[
        str,
        typer.Option(
            "--color",
            help="Fill color",
        ),
    ] = "#000",
    width: Annotated[
        float | None,
        typer.Option(
            "--width",
            help="SVG width attribute",
        ),
    ] = None,
    height: Annotated[
        float | None,
        typer.Option(
            "--height",
            help="SVG height attribute",
        ),
    ] = None,
    no_namespace: Annotated[
        bool,
        typer.Option(
            "--no-namespace",
            help="Omit the xmlns attribute (for inline HTML)",
        ),
    ] = False,
    aria_label: Annotated[
        str | None,
        typer.Option(
            "--aria-label",
            help="Accessible label",
        ),
    ] = None,
) -> None:
    """Emit an SVG that draws TEXT with the generated font.

    The consumer must load the font (e.g., with @font-face) for the
    text to appear in block letters.
    """
    try:
        options = TextSvgOptions(
            font_family=font_family,
            font_size=font_size,
            color=color,
            width=width,
            height=height,
            include_namespace=not no_namespace,
            role="img" if aria_label else None,
            aria_label=aria_label,
        )
    except ValueError as e:
        print_error("Invalid options", details=str(e))
        raise typer.Exit(code=1)

    _emit(convert_text_to_svg(text, options), output)


def _emit(svg: str, output: Path | None) -> None:
    """Write SVG to a file, or to stdout when no file is given."""
    if output is None:
        typer.echo(svg)
        return
    try:
        output.write_text(svg + "\n", encoding="utf-8")
    except OSError as e:
        print_error(f"Could not write {output}", details=str(e))
        raise typer.Exit(code=1)


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
