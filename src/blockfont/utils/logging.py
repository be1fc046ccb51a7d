"""Logging utilities for blockfont."""

import logging
from dataclasses import dataclass, field
from pathlib import Path

import structlog


@dataclass
class BuildStats:
    """Statistics from a pipeline run."""

    glyph_count: int = 0
    empty_glyph_count: int = 0
    ink_cells: int = 0
    blocks_emitted: int = 0
    stage_timings_ms: dict[str, float] = field(default_factory=dict)
    artifact_sizes: dict[str, int] = field(default_factory=dict)
    artifact_paths: dict[str, Path] = field(default_factory=dict)
    start_time: float | None = None
    end_time: float | None = None

    @property
    def duration_seconds(self) -> float:
        """Calculate build duration."""
        if self.start_time is not None and self.end_time is not None:
            return self.end_time - self.start_time
        return 0.0

    @property
    def blocks_saved(self) -> int:
        """Path rectangles avoided by coalescing ink cells."""
        return self.ink_cells - self.blocks_emitted

    @property
    def total_size(self) -> int:
        """Combined size of all written artifacts in bytes."""
        return sum(self.artifact_sizes.values())


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "WARNING",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure dual-output structured logging.

    Args:
        log_file: Path to log file (no file output if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output except errors

    Returns:
        Configured structlog logger
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    for handler in list(root_logger.handlers):
        if getattr(handler, "_blockfont", False):
            root_logger.removeHandler(handler)
            handler.close()

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        file_handler._blockfont = True  # type: ignore[attr-defined]
        root_logger.addHandler(file_handler)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(
        logging.ERROR if quiet else getattr(logging, console_level.upper())
    )
    console_handler.setFormatter(logging.Formatter("%(message)s"))
    console_handler._blockfont = True  # type: ignore[attr-defined]
    root_logger.addHandler(console_handler)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logger = structlog.get_logger("blockfont")
    logger.debug(
        "Logging initialized",
        log_file=str(log_file) if log_file else None,
        level=file_level,
    )

    return logger


class BuildLogger:
    """Logger for tracking pipeline progress and statistics."""

    def __init__(self, logger: structlog.stdlib.BoundLogger) -> None:
        self._logger = logger
        self._stats = BuildStats()

    def log_stage_start(self, stage: str) -> None:
        """Log start of a pipeline stage."""
        self._logger.debug("Stage started", stage=stage)

    def log_stage_complete(self, stage: str, duration_ms: float, **details: object) -> None:
        """Log successful completion of a pipeline stage."""
        self._logger.info(
            "Stage complete",
            stage=stage,
            duration_ms=round(duration_ms, 2),
            **details,
        )
        self._stats.stage_timings_ms[stage] = duration_ms

    def log_stage_error(self, stage: str, error: Exception) -> None:
        """Log a failed pipeline stage."""
        self._logger.error(
            "Stage failed",
            stage=stage,
            error=str(error),
            error_type=type(error).__name__,
        )

    def log_glyph(self, name: str, ink_cells: int, blocks: int) -> None:
        """Log vectorization result for one glyph."""
        self._logger.debug("Glyph vectorized", glyph=name, cells=ink_cells, blocks=blocks)
        self._stats.glyph_count += 1
        if ink_cells == 0:
            self._stats.empty_glyph_count += 1
        self._stats.ink_cells += ink_cells
        self._stats.blocks_emitted += blocks

    def log_artifact(self, kind: str, path: Path, size: int) -> None:
        """Log an artifact written to disk."""
        self._logger.info("Artifact written", kind=kind, path=str(path), size=size)
        self._stats.artifact_sizes[kind] = size
        self._stats.artifact_paths[kind] = path

    @property
    def stats(self) -> BuildStats:
        """Get current build statistics."""
        return self._stats
