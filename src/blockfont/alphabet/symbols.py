"""Punctuation and symbol glyph grids."""

SYMBOL_ROWS: dict[str, tuple[str, ...]] = {
    "-": (
        "...",
        "...",
        "...",
        "###",
        "...",
        "...",
        "...",
    ),
    "|": ("#",) * 7,
    "'": (
        "#",
        "#",
        ".",
        ".",
        ".",
        ".",
        ".",
    ),
    '"': (
        "#.#",
        "#.#",
        "...",
        "...",
        "...",
        "...",
        "...",
    ),
    "?": (
        ".##.",
        "#..#",
        "...#",
        "..#.",
        "..#.",
        "....",
        "..#.",
    ),
    "!": (
        "#",
        "#",
        "#",
        "#",
        "#",
        ".",
        "#",
    ),
    " ": ("...",) * 7,
}

# AGL glyph names for symbols; letters use the letter itself.
SYMBOL_GLYPH_NAMES: dict[str, str] = {
    "-": "hyphen",
    "|": "bar",
    "'": "quotesingle",
    '"': "quotedbl",
    "?": "question",
    "!": "exclam",
    " ": "space",
}
