"""Utility functions for blockfont.

This module provides utility functions including:

- Logging setup and configuration
- Build statistics collection
"""

from blockfont.utils.logging import (
    BuildLogger,
    BuildStats,
    configure_logging,
)

__all__ = [
    "BuildLogger",
    "BuildStats",
    "configure_logging",
]
