"""Hollerith character table.

Character to punch pattern translation for the printable characters of
the IBM 029 keypunch. Letters combine a zone punch (12, 11 or 0) with a
numeric punch; punctuation adds an 8 overpunch to a zone/numeric pair.

Lookup misses are never errors: ``encode_string`` substitutes a blank
column and ``decode_string`` substitutes ``?``.
"""

from collections.abc import Iterable

from punchcard.domain.pattern import EMPTY_PATTERN, PunchPattern

UNKNOWN_CHAR = "?"


def _letters(first: str, zone: int, numerics: Iterable[int]) -> dict[str, tuple[int, ...]]:
    return {chr(ord(first) + i): (zone, n) for i, n in enumerate(numerics)}


_CHAR_ROWS: dict[str, tuple[int, ...]] = {
    **{str(d): (d,) for d in range(10)},
    **_letters("A", 12, range(1, 10)),
    **_letters("J", 11, range(1, 10)),
    **_letters("S", 0, range(2, 10)),
    " ": (),
    "&": (12,),
    "-": (11,),
    "/": (0, 1),
    # 12 zone with 8 overpunch
    ".": (12, 3, 8),
    "<": (12, 4, 8),
    "(": (12, 5, 8),
    "+": (12, 6, 8),
    "|": (12, 7, 8),
    # 11 zone with 8 overpunch
    "!": (11, 2, 8),
    "$": (11, 3, 8),
    "*": (11, 4, 8),
    ")": (11, 5, 8),
    ";": (11, 6, 8),
    "¬": (11, 7, 8),
    # 0 zone with 8 overpunch
    ",": (0, 3, 8),
    "%": (0, 4, 8),
    "_": (0, 5, 8),
    ">": (0, 6, 8),
    "?": (0, 7, 8),
    # numeric with 8 overpunch
    ":": (2, 8),
    "#": (3, 8),
    "@": (4, 8),
    "'": (5, 8),
    "=": (6, 8),
    '"': (7, 8),
}

_CHAR_TO_PATTERN: dict[str, PunchPattern] = {
    char: PunchPattern.from_rows(rows) for char, rows in _CHAR_ROWS.items()
}
_PATTERN_TO_CHAR: dict[PunchPattern, str] = {
    pattern: char for char, pattern in _CHAR_TO_PATTERN.items()
}

SUPPORTED_CHARACTERS: str = "".join(_CHAR_ROWS)


def upcase(char: str) -> str:
    """Upcase ASCII letters, leaving every other character as is."""
    return char.upper() if char.isascii() else char


def is_supported(char: str) -> bool:
    """Check if a character can be punched on an IBM 029."""
    return char in _CHAR_TO_PATTERN


def char_to_pattern(char: str) -> PunchPattern | None:
    """Convert a character to its Hollerith punch pattern.

    Case is not normalized; lowercase letters are unsupported here.

    Args:
        char: A single character

    Returns:
        Canonical punch pattern, or None for unsupported characters
    """
    return _CHAR_TO_PATTERN.get(char)


def pattern_to_char(pattern: PunchPattern) -> str | None:
    """Convert a punch pattern to the character it encodes.

    Only exact matches are decoded. Patterns with four or more punches and
    combinations outside the table are not guessed.

    Args:
        pattern: Punch pattern of one column

    Returns:
        The character, or None for unsupported patterns
    """
    return _PATTERN_TO_CHAR.get(pattern)


def encode_string(text: str) -> list[PunchPattern]:
    """Encode a string into punch patterns, one per character.

    ASCII letters are upcased first. Unsupported characters become blank
    columns.

    Args:
        text: Text to encode

    Returns:
        List of punch patterns, same length as the text
    """
    return [_CHAR_TO_PATTERN.get(upcase(char), EMPTY_PATTERN) for char in text]


def decode_string(patterns: Iterable[PunchPattern]) -> str:
    """Decode punch patterns into a string.

    Unsupported patterns become ``?``.

    Args:
        patterns: Punch patterns to decode

    Returns:
        Decoded text
    """
    return "".join(_PATTERN_TO_CHAR.get(pattern, UNKNOWN_CHAR) for pattern in patterns)
