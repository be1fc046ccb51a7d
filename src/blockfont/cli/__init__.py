"""Command-line interface for blockfont.

This module provides the CLI using Typer with rich output for
user-friendly feedback and progress reporting.

Key features:
- Font generation with per-stage progress
- Artifact validation with per-check breakdown
- Blocky and font-based SVG text rendering
- Verbose logging to file, quiet console mode
"""

from blockfont.cli.app import app, cli, main

__all__ = ["app", "cli", "main"]
