"""Configuration management for blockfont.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- FontConfig: Font program metrics and naming
- BuildConfig: Output directory and optimization settings
- ValidationConfig: Size ceilings and strictness of format checks
- LoggingConfig: Logging settings
- BlockFontSettings: Main application settings
"""

from blockfont.config.settings import (
    BlockFontSettings,
    BuildConfig,
    FontConfig,
    LoggingConfig,
    SizeLimits,
    ValidationConfig,
    get_default_settings,
)

__all__ = [
    "BlockFontSettings",
    "BuildConfig",
    "FontConfig",
    "LoggingConfig",
    "SizeLimits",
    "ValidationConfig",
    "get_default_settings",
]
