"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with progress bars and formatted messages.
"""

from rich.console import Console
from rich.progress import (
    BarColumn,
    Progress,
    TaskProgressColumn,
    TextColumn,
    TimeElapsedColumn,
)
from rich.text import Text

from blockfont.core.validator import ArtifactReport, CheckStatus, ValidationReport
from blockfont.utils import BuildStats

console = Console()

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_WARN = "!"  # Warning
SYM_DOT = "·"  # Separator/secondary info

_STATUS_STYLE = {
    CheckStatus.PASS: ("green", SYM_OK),
    CheckStatus.WARN: ("yellow", SYM_WARN),
    CheckStatus.FAIL: ("red", SYM_ERR),
    CheckStatus.SKIP: ("dim", SYM_DOT),
}


def create_progress() -> Progress:
    """Create a rich progress bar for pipeline stages.

    Returns:
        Configured Progress instance with stage name and time elapsed.
    """
    return Progress(
        TextColumn("  {task.description:<10}"),
        BarColumn(bar_width=30, complete_style="green", finished_style="green"),
        TaskProgressColumn(),
        TimeElapsedColumn(),
        console=console,
        transient=False,
    )


def format_size(size_bytes: int) -> str:
    """Format a byte count in human-readable form (e.g., "12.3 KB")."""
    if size_bytes < 1024:
        return f"{size_bytes} B"
    elif size_bytes < 1024 * 1024:
        return f"{size_bytes / 1024:.1f} KB"
    else:
        return f"{size_bytes / (1024 * 1024):.1f} MB"


def _format_time(seconds: float) -> str:
    """Format seconds into human-readable time string."""
    if seconds < 1:
        return f"{seconds * 1000:.0f}ms"
    elif seconds < 60:
        return f"{seconds:.1f}s"
    else:
        mins = int(seconds // 60)
        secs = seconds % 60
        return f"{mins}m {secs:.1f}s"


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]BlockFont[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator.

    Args:
        message: Step description message
    """
    console.print(f"\n{SYM_STEP} {message}")


def print_build_success(stats: BuildStats) -> None:
    """Print build summary with one line per artifact.

    Args:
        stats: Statistics returned by the pipeline
    """
    console.print(
        f"\n[bold green]{SYM_OK} Complete[/bold green] in {_format_time(stats.duration_seconds)}"
    )

    for kind, path in stats.artifact_paths.items():
        line = Text("  ")
        line.append(str(path), style="bold")
        line.append(f" ({format_size(stats.artifact_sizes.get(kind, 0))})")
        console.print(line)

    console.print(
        f"  {stats.glyph_count} glyphs {SYM_DOT} {stats.blocks_emitted} rectangles "
        f"{SYM_DOT} {stats.blocks_saved} merged away"
    )


def print_artifact_report(report: ArtifactReport) -> None:
    """Print the checks for one artifact.

    Args:
        report: Validation outcome for the artifact
    """
    style = "red" if report.failed else "green"
    symbol = SYM_ERR if report.failed else SYM_OK
    line = Text("  ")
    line.append(f"{symbol} ", style=style)
    line.append(report.spec.filename, style="bold")
    line.append(f" {SYM_DOT} {report.state.value}")
    if report.size:
        line.append(f" {SYM_DOT} {format_size(report.size)} of {format_size(report.spec.max_size)}")
    console.print(line)

    for check in report.checks:
        check_style, check_symbol = _STATUS_STYLE[check.status]
        detail = Text("      ")
        detail.append(f"{check_symbol} {check.name}", style=check_style)
        if check.message:
            detail.append(f"  {check.message}")
        console.print(detail)


def print_validation_summary(report: ValidationReport) -> None:
    """Print the aggregate validation line.

    Args:
        report: Validation outcome for all artifacts
    """
    warnings = len(report.warnings)
    failed = sum(1 for artifact in report.artifacts if artifact.failed)
    if report.passed:
        console.print(
            f"\n[bold green]{SYM_OK} All artifacts valid[/bold green] "
            f"{SYM_DOT} {format_size(report.total_size)} total {SYM_DOT} {warnings} warnings"
        )
    else:
        console.print(
            f"\n[bold red]{SYM_ERR} {failed} of {len(report.artifacts)} artifacts failed[/bold red] "
            f"{SYM_DOT} {warnings} warnings"
        )


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {message}")
    if details:
        console.print(f"  {details}")
