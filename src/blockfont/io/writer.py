"""Artifact writer.

This module provides the ArtifactWriter class, which writes font
artifacts and optional glyph icons. Every path it touches lives inside
the configured output directory.
"""

import os
import shutil
from pathlib import Path
from typing import TYPE_CHECKING

from blockfont.exceptions import ArtifactWriteError

if TYPE_CHECKING:
    from blockfont.core.converters import FontArtifacts
    from blockfont.core.svg import GlyphIcon


class ArtifactWriter:
    """Writes pipeline outputs into one output directory.

    Font files are written to a temporary name and renamed into place,
    so a failed write never leaves a truncated artifact behind.

    Example:
        writer = ArtifactWriter(Path("fonts"), "BlockFont")
        paths = writer.write_fonts(artifacts)
    """

    def __init__(self, output_dir: Path, font_name: str, temp_dir_name: str = ".temp-glyphs") -> None:
        """Initialize the writer.

        Args:
            output_dir: Directory receiving all outputs
            font_name: File stem of the font artifacts
            temp_dir_name: Subdirectory name for glyph icons
        """
        self._output_dir = output_dir
        self._font_name = font_name
        self._temp_dir_name = temp_dir_name

    @property
    def output_dir(self) -> Path:
        """Directory receiving all outputs."""
        return self._output_dir

    @property
    def icon_dir(self) -> Path:
        """Directory receiving glyph icons."""
        return self._output_dir / self._temp_dir_name

    def artifact_path(self, extension: str) -> Path:
        """Get the path of one font artifact (e.g., "woff2")."""
        return self._output_dir / f"{self._font_name}.{extension}"

    def _write_bytes(self, path: Path, data: bytes) -> None:
        tmp_path = path.with_name(path.name + ".tmp")
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            tmp_path.write_bytes(data)
            os.replace(tmp_path, path)
        except OSError as e:
            if tmp_path.exists():
                tmp_path.unlink()
            raise ArtifactWriteError(str(path), str(e)) from e

    def write_fonts(self, artifacts: "FontArtifacts") -> dict[str, Path]:
        """Write all font artifacts.

        Returns:
            Mapping of extension to written path

        Raises:
            ArtifactWriteError: If a file cannot be written
        """
        paths: dict[str, Path] = {}
        for extension, data in artifacts.as_dict().items():
            path = self.artifact_path(extension)
            self._write_bytes(path, data)
            paths[extension] = path
        return paths

    def write_icons(self, icons: list["GlyphIcon"]) -> list[Path]:
        """Write glyph icons, one SVG file each, into the icon directory.

        Raises:
            ArtifactWriteError: If a file cannot be written
        """
        paths = []
        for icon in icons:
            path = self.icon_dir / icon.filename
            self._write_bytes(path, icon.svg.encode("utf-8"))
            paths.append(path)
        return paths

    def clean_icons(self) -> None:
        """Remove the icon directory if it exists."""
        if self.icon_dir.exists():
            shutil.rmtree(self.icon_dir)
