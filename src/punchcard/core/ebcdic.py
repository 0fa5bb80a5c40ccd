"""EBCDIC interchange table.

Maps punch patterns to 8-bit EBCDIC codes for the 80-byte card interchange
format. Only digits, letters, space, ``&``, ``-`` and ``/`` are covered;
overpunched punctuation has no EBCDIC code here and is written as a space.
"""

from punchcard.domain.pattern import EMPTY_PATTERN, PunchPattern

EBCDIC_SPACE = 0x40


def _run(first_code: int, zone: int | None, numerics: range) -> dict[int, tuple[int, ...]]:
    return {
        first_code + i: (n,) if zone is None else (zone, n)
        for i, n in enumerate(numerics)
    }


_CODE_ROWS: dict[int, tuple[int, ...]] = {
    EBCDIC_SPACE: (),
    **_run(0xF0, None, range(0, 10)),
    **_run(0xC1, 12, range(1, 10)),
    **_run(0xD1, 11, range(1, 10)),
    **_run(0xE2, 0, range(2, 10)),
    0x4C: (12,),
    0x60: (11,),
    0x61: (0, 1),
}

_EBCDIC_TO_PATTERN: dict[int, PunchPattern] = {
    code: PunchPattern.from_rows(rows) for code, rows in _CODE_ROWS.items()
}
_PATTERN_TO_EBCDIC: dict[PunchPattern, int] = {
    pattern: code for code, pattern in _EBCDIC_TO_PATTERN.items()
}

# Printed characters by code range, independent of the punch table
_CHAR_RANGES: tuple[tuple[int, int, str], ...] = (
    (0xF0, 0xF9, "0"),
    (0xC1, 0xC9, "A"),
    (0xD1, 0xD9, "J"),
    (0xE2, 0xE9, "S"),
)


def _check_byte(code: int) -> None:
    if not 0 <= code <= 0xFF:
        raise ValueError(f"EBCDIC code must be a byte value (0-255), got {code}")


def pattern_to_ebcdic(pattern: PunchPattern) -> int:
    """Convert a punch pattern to its EBCDIC code.

    Patterns without a code, including every pattern with three or more
    punches, map to 0x40 (space).

    Args:
        pattern: Punch pattern of one column

    Returns:
        EBCDIC byte value
    """
    return _PATTERN_TO_EBCDIC.get(pattern, EBCDIC_SPACE)


def ebcdic_to_pattern(code: int) -> PunchPattern:
    """Convert an EBCDIC code to its punch pattern.

    Unknown codes map to the blank pattern.

    Args:
        code: EBCDIC byte value

    Returns:
        Punch pattern

    Raises:
        ValueError: If code is not a byte value
    """
    _check_byte(code)
    return _EBCDIC_TO_PATTERN.get(code, EMPTY_PATTERN)


def ebcdic_to_char(code: int) -> str | None:
    """Get the printed character for an EBCDIC code.

    Only space, digits and letters have a printed character.

    Args:
        code: EBCDIC byte value

    Returns:
        The character, or None for any other code

    Raises:
        ValueError: If code is not a byte value
    """
    _check_byte(code)
    if code == EBCDIC_SPACE:
        return " "
    for low, high, first in _CHAR_RANGES:
        if low <= code <= high:
            return chr(ord(first) + code - low)
    return None
