"""Domain models for punchcard.

This module contains the value types shared by every codec. They are:

- Immutable (frozen dataclasses)
- Serializable to plain dictionaries
- Independent of any lookup table or file format

Key classes:
- PunchPattern: The punched rows of one card column
"""

from punchcard.domain.pattern import (
    EMPTY_PATTERN,
    NUMERIC_ROWS,
    POSITIONAL_ORDER,
    POSITIONAL_SLOTS,
    VALID_ROWS,
    ZONE_ROWS,
    PunchPattern,
)

__all__: list[str] = [
    # Row constants
    "NUMERIC_ROWS",
    "POSITIONAL_ORDER",
    "POSITIONAL_SLOTS",
    "VALID_ROWS",
    "ZONE_ROWS",
    # Core types
    "EMPTY_PATTERN",
    "PunchPattern",
]
