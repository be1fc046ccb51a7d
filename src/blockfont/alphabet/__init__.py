"""Built-in block alphabet.

Letters A-Z and the symbols - | ' " ? ! plus space, each defined as a
7-row grid between 1 and 5 columns wide.

Key functions:
- get_alphabet: Process-wide read-only AlphabetTable
- glyph_name: PostScript glyph name for a character
"""

from blockfont.alphabet.table import AlphabetTable, build_alphabet, get_alphabet, glyph_name

__all__ = [
    "AlphabetTable",
    "build_alphabet",
    "get_alphabet",
    "glyph_name",
]
