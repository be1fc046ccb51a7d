"""Exception hierarchy for blockfont."""

from enum import Enum


class BlockFontError(Exception):
    """Base exception for all blockfont errors."""

    pass


class GlyphError(BlockFontError):
    """Errors related to glyph definitions or lookup."""

    pass


class GlyphDefinitionError(GlyphError):
    """A glyph grid in the alphabet table is malformed."""

    def __init__(self, char: str, reason: str) -> None:
        self.char = char
        self.reason = reason
        super().__init__(f"Invalid glyph definition for {char!r}: {reason}")


class GlyphNotFoundError(GlyphError):
    """Requested character has no glyph in the alphabet table."""

    def __init__(self, char: str) -> None:
        self.char = char
        super().__init__(f"Glyph {char!r} not found in alphabet")


class AssemblyError(BlockFontError):
    """Error stitching glyph icons into the outline font document."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Font assembly failed: {reason}")


class ConversionStage(str, Enum):
    """Stages of the font format conversion chain."""

    COMPILE = "compile"
    WOFF2 = "woff2"
    WOFF = "woff"


class ConversionError(BlockFontError):
    """A format conversion stage failed."""

    def __init__(self, stage: ConversionStage, reason: str) -> None:
        self.stage = stage
        self.reason = reason
        super().__init__(f"Conversion stage '{stage.value}' failed: {reason}")


class ArtifactWriteError(BlockFontError):
    """Error writing a build artifact to disk."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to write '{path}': {reason}")


class PipelineError(BlockFontError):
    """A pipeline stage failed; the original error is chained as __cause__."""

    def __init__(self, stage: str, reason: str) -> None:
        self.stage = stage
        self.reason = reason
        super().__init__(f"Stage '{stage}' failed: {reason}")
