"""Alphabet table: the single source of glyph definitions.

The table is built once per process from the row strings in
`letters` and `symbols` and is never mutated afterwards. Every later
pipeline stage reads glyphs from here.
"""

from collections.abc import Iterator, Mapping
from functools import cache
from types import MappingProxyType

from blockfont.alphabet.letters import LETTER_ROWS
from blockfont.alphabet.symbols import SYMBOL_GLYPH_NAMES, SYMBOL_ROWS
from blockfont.domain import Glyph
from blockfont.exceptions import GlyphDefinitionError, GlyphNotFoundError


class AlphabetTable:
    """Read-only lookup of letter and symbol glyphs by character.

    Example:
        table = get_alphabet()
        glyph = table.get("A")
        print(glyph.width)
    """

    def __init__(self, letters: Mapping[str, Glyph], symbols: Mapping[str, Glyph]) -> None:
        """Initialize the table.

        Args:
            letters: Mapping of letter to glyph
            symbols: Mapping of symbol character to glyph

        Raises:
            GlyphDefinitionError: If a key does not match its glyph or a
                character appears in both mappings
        """
        for char, glyph in [*letters.items(), *symbols.items()]:
            if glyph.name != char:
                raise GlyphDefinitionError(
                    char, f"registered under {char!r} but named {glyph.name!r}"
                )
        overlap = set(letters) & set(symbols)
        if overlap:
            char = sorted(overlap)[0]
            raise GlyphDefinitionError(char, "defined as both letter and symbol")

        self._letters = MappingProxyType(dict(letters))
        self._symbols = MappingProxyType(dict(symbols))

    @property
    def letters(self) -> Mapping[str, Glyph]:
        """Letter glyphs keyed by character."""
        return self._letters

    @property
    def symbols(self) -> Mapping[str, Glyph]:
        """Symbol glyphs keyed by character."""
        return self._symbols

    def find(self, char: str) -> Glyph | None:
        """Get a glyph by character, or None if it is not defined."""
        glyph = self._letters.get(char)
        if glyph is None:
            glyph = self._symbols.get(char)
        return glyph

    def get(self, char: str) -> Glyph:
        """Get a glyph by character.

        Raises:
            GlyphNotFoundError: If the character has no glyph
        """
        glyph = self.find(char)
        if glyph is None:
            raise GlyphNotFoundError(char)
        return glyph

    def characters(self) -> list[str]:
        """All characters, letters first, then symbols."""
        return [*self._letters, *self._symbols]

    def glyphs(self) -> list[Glyph]:
        """All glyphs in `characters()` order."""
        return [self.get(char) for char in self.characters()]

    def __contains__(self, char: object) -> bool:
        return isinstance(char, str) and self.find(char) is not None

    def __iter__(self) -> Iterator[str]:
        return iter(self.characters())

    def __len__(self) -> int:
        return len(self._letters) + len(self._symbols)


def glyph_name(char: str) -> str:
    """Get the PostScript glyph name for a character.

    Letters are named after themselves, known symbols use their AGL names
    and anything else falls back to a uniXXXX name.
    """
    if len(char) == 1 and "A" <= char <= "Z":
        return char
    if char in SYMBOL_GLYPH_NAMES:
        return SYMBOL_GLYPH_NAMES[char]
    return "uni" + "".join(f"{ord(c):04X}" for c in char)


def build_alphabet() -> AlphabetTable:
    """Build a fresh table from the built-in grid definitions.

    Raises:
        GlyphDefinitionError: If any built-in grid is malformed
    """
    letters = {char: Glyph.from_rows(char, rows) for char, rows in LETTER_ROWS.items()}
    symbols = {char: Glyph.from_rows(char, rows) for char, rows in SYMBOL_ROWS.items()}
    return AlphabetTable(letters, symbols)


@cache
def get_alphabet() -> AlphabetTable:
    """Get the process-wide alphabet table, building it on first use."""
    return build_alphabet()
