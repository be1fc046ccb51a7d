"""Configuration settings for blockfont."""

from pathlib import Path

from pydantic import BaseModel, Field, field_validator, model_validator


class FontConfig(BaseModel):
    """Configuration for the generated font program.

    Design units are integers. One grid cell is `cell_size` units square,
    so the cap height of the alphabet is 7 * cell_size.
    """

    font_name: str = Field(
        default="BlockFont",
        min_length=1,
        pattern=r"^[A-Za-z0-9]+$",
        description="Family name, also used as PostScript name and file stem",
    )
    units_per_em: int = Field(
        default=1000,
        ge=16,
        le=16384,
        description="Units per em of the compiled font",
    )
    cell_size: int = Field(
        default=100,
        ge=1,
        le=1000,
        description="Design units per grid cell",
    )
    descent: int = Field(
        default=200,
        ge=0,
        description="Distance below the baseline in design units",
    )
    version: str = Field(
        default="1.000",
        pattern=r"^\d+\.\d+$",
        description="Font revision written to head and name tables",
    )
    build_timestamp: int = Field(
        default=0,
        ge=0,
        description="Unix time stored as head.created/modified (fixed for reproducible builds)",
    )
    copyright: str = Field(default="BlockFont block alphabet")
    description: str = Field(default="Blocky display font built from a 7-row cell grid")
    url: str = Field(default="")

    @property
    def ascent(self) -> int:
        """Ascent in design units (units per em minus descent)."""
        return self.units_per_em - self.descent

    @model_validator(mode="after")
    def _check_vertical_metrics(self) -> "FontConfig":
        if self.descent >= self.units_per_em:
            raise ValueError("descent must be smaller than units_per_em")
        return self


class BuildConfig(BaseModel):
    """Configuration for a pipeline run."""

    output_dir: Path = Field(
        default=Path("fonts"),
        description="Directory receiving the font artifacts",
    )
    temp_dir_name: str = Field(
        default=".temp-glyphs",
        min_length=1,
        pattern=r"^[A-Za-z0-9._-]+$",
        description="Name of the per-glyph SVG directory inside output_dir",
    )
    keep_temp: bool = Field(
        default=False,
        description="Keep the per-glyph SVG icons after the build",
    )
    optimize: bool = Field(
        default=True,
        description="Merge adjacent ink cells into rectangles",
    )

    @field_validator("temp_dir_name")
    @classmethod
    def _check_temp_dir_name(cls, value: str) -> str:
        if value in {".", ".."}:
            raise ValueError("temp_dir_name must name a subdirectory")
        return value


class SizeLimits(BaseModel):
    """Maximum artifact sizes in bytes."""

    woff2: int = Field(default=50 * 1024, ge=1)
    woff: int = Field(default=100 * 1024, ge=1)
    ttf: int = Field(default=200 * 1024, ge=1)


class ValidationConfig(BaseModel):
    """Configuration for artifact validation."""

    limits: SizeLimits = Field(default_factory=SizeLimits)
    strict_magic: bool = Field(
        default=False,
        description="Treat wrong magic bytes as a failure instead of a warning",
    )
    strict_sniff: bool = Field(
        default=False,
        description="Treat format sniffing disagreement as a failure",
    )
    use_file_command: bool = Field(
        default=True,
        description="Cross-check formats with the 'file' utility when available",
    )
    sniff_timeout: float = Field(
        default=5.0,
        gt=0.0,
        le=120.0,
        description="Timeout in seconds for the format sniffing subprocess",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )


class BlockFontSettings(BaseModel):
    """Main application settings."""

    font: FontConfig = Field(default_factory=FontConfig)
    build: BuildConfig = Field(default_factory=BuildConfig)
    validation: ValidationConfig = Field(default_factory=ValidationConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> BlockFontSettings:
    """Get default application settings."""
    return BlockFontSettings()
