"""Color themes for presentational SVG output.

Themes never affect font geometry; they only color blocky text renders
such as previews and favicons.
"""

from dataclasses import dataclass
from enum import Enum

from blockfont.domain.cell import CellType
from blockfont.domain.glyph import Glyph


class ThemeType(str, Enum):
    """Named themes."""

    LIGHT = "light"
    DARK = "dark"


@dataclass(frozen=True)
class Theme:
    """Color mapping for cell types."""

    background: str
    primary: str
    secondary: str
    tertiary: str


LIGHT_THEME = Theme(
    background="#FFFFFF",
    primary="#F1ECEC",
    secondary="#B7B1B1",
    tertiary="#4B4646",
)

DARK_THEME = Theme(
    background="#000000",
    primary="#F1ECEC",
    secondary="#B7B1B1",
    tertiary="#4B4646",
)


def get_theme(theme: ThemeType | str) -> Theme:
    """Resolve a theme name to its colors."""
    return DARK_THEME if ThemeType(theme) is ThemeType.DARK else LIGHT_THEME


def color_for_cell(_glyph: Glyph | None, theme: ThemeType | str, cell: CellType) -> str:
    """Get the fill color for a cell.

    The glyph argument allows per-letter palettes; the built-in themes
    color by cell type only.
    """
    colors = get_theme(theme)
    if cell is CellType.PRIMARY:
        return colors.primary
    if cell is CellType.SECONDARY:
        return colors.secondary
    if cell is CellType.TERTIARY:
        return colors.tertiary
    return colors.background
