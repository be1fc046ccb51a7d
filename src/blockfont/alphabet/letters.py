"""Letter glyph grids A-Z.

One string per row, top row first. "#" is ink (shaded automatically in
rows 3-5), "." is blank.
"""

LETTER_ROWS: dict[str, tuple[str, ...]] = {
    "A": (
        ".##.",
        "#..#",
        "#..#",
        "####",
        "#..#",
        "#..#",
        "#..#",
    ),
    "B": (
        "###.",
        "#..#",
        "#..#",
        "###.",
        "#..#",
        "#..#",
        "###.",
    ),
    "C": (
        ".###",
        "#...",
        "#...",
        "#...",
        "#...",
        "#...",
        ".###",
    ),
    "D": (
        "###.",
        "#..#",
        "#..#",
        "#..#",
        "#..#",
        "#..#",
        "###.",
    ),
    "E": (
        "####",
        "#...",
        "#...",
        "###.",
        "#...",
        "#...",
        "####",
    ),
    "F": (
        "####",
        "#...",
        "#...",
        "###.",
        "#...",
        "#...",
        "#...",
    ),
    "G": (
        ".###",
        "#...",
        "#...",
        "#.##",
        "#..#",
        "#..#",
        ".###",
    ),
    "H": (
        "#..#",
        "#..#",
        "#..#",
        "####",
        "#..#",
        "#..#",
        "#..#",
    ),
    "I": (
        "###",
        ".#.",
        ".#.",
        ".#.",
        ".#.",
        ".#.",
        "###",
    ),
    "J": (
        "...#",
        "...#",
        "...#",
        "...#",
        "#..#",
        "#..#",
        ".##.",
    ),
    "K": (
        "#..#",
        "#..#",
        "#.#.",
        "##..",
        "#.#.",
        "#..#",
        "#..#",
    ),
    "L": (
        "#...",
        "#...",
        "#...",
        "#...",
        "#...",
        "#...",
        "####",
    ),
    "M": (
        "#...#",
        "##.##",
        "#.#.#",
        "#.#.#",
        "#...#",
        "#...#",
        "#...#",
    ),
    "N": (
        "#..#",
        "##.#",
        "##.#",
        "#.##",
        "#.##",
        "#..#",
        "#..#",
    ),
    "O": (
        ".##.",
        "#..#",
        "#..#",
        "#..#",
        "#..#",
        "#..#",
        ".##.",
    ),
    "P": (
        "###.",
        "#..#",
        "#..#",
        "###.",
        "#...",
        "#...",
        "#...",
    ),
    "Q": (
        ".##.",
        "#..#",
        "#..#",
        "#..#",
        "#.##",
        "#..#",
        ".###",
    ),
    "R": (
        "###.",
        "#..#",
        "#..#",
        "###.",
        "#.#.",
        "#..#",
        "#..#",
    ),
    "S": (
        ".###",
        "#...",
        "#...",
        ".##.",
        "...#",
        "...#",
        "###.",
    ),
    "T": (
        "#####",
        "..#..",
        "..#..",
        "..#..",
        "..#..",
        "..#..",
        "..#..",
    ),
    "U": (
        "#..#",
        "#..#",
        "#..#",
        "#..#",
        "#..#",
        "#..#",
        ".##.",
    ),
    "V": (
        "#...#",
        "#...#",
        "#...#",
        "#...#",
        ".#.#.",
        ".#.#.",
        "..#..",
    ),
    "W": (
        "#...#",
        "#...#",
        "#...#",
        "#.#.#",
        "#.#.#",
        "##.##",
        "#...#",
    ),
    "X": (
        "#...#",
        "#...#",
        ".#.#.",
        "..#..",
        ".#.#.",
        "#...#",
        "#...#",
    ),
    "Y": (
        "#...#",
        "#...#",
        ".#.#.",
        "..#..",
        "..#..",
        "..#..",
        "..#..",
    ),
    "Z": (
        "####",
        "...#",
        "...#",
        ".##.",
        "#...",
        "#...",
        "####",
    ),
}
