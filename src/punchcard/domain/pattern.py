"""Punch pattern value type.

This module defines the pattern of holes punched in a single card column:
- PunchPattern: Immutable, canonically ordered set of punched rows
- ZONE_ROWS / NUMERIC_ROWS / VALID_ROWS: Row identifiers found on a card
- POSITIONAL_ORDER: Row order of the 12-slot positional vector (top to bottom)
"""

from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass
from typing import Any

from punchcard.exceptions import InvalidRowError

ZONE_ROWS: tuple[int, ...] = (12, 11, 0)
NUMERIC_ROWS: tuple[int, ...] = tuple(range(1, 10))
VALID_ROWS: frozenset[int] = frozenset((*range(10), 11, 12))

# Physical order of the rows from the top edge of the card
POSITIONAL_ORDER: tuple[int, ...] = (12, 11, 0, 1, 2, 3, 4, 5, 6, 7, 8, 9)
POSITIONAL_SLOTS = len(POSITIONAL_ORDER)

_SLOT_OF_ROW: dict[int, int] = {row: slot for slot, row in enumerate(POSITIONAL_ORDER)}


@dataclass(frozen=True, slots=True)
class PunchPattern:
    """The holes punched in one column of a card.

    Rows are stored deduplicated and in ascending numeric order
    (0 < 1 < ... < 9 < 11 < 12), so two patterns compare equal exactly
    when the same rows are punched. Build instances with ``of()`` or
    ``from_rows()``; the plain constructor expects an already canonical tuple.

    Attributes:
        rows: Punched row identifiers in canonical order
    """

    rows: tuple[int, ...] = ()

    def __post_init__(self) -> None:
        for row in self.rows:
            # bool and float compare equal to int rows
            if type(row) is not int or row not in VALID_ROWS:
                raise InvalidRowError(row)
        canonical = tuple(sorted(set(self.rows)))
        if canonical != self.rows:
            object.__setattr__(self, "rows", canonical)

    @classmethod
    def of(cls, *rows: int) -> "PunchPattern":
        """Create a pattern from punched rows given as arguments."""
        return cls(tuple(rows))

    @classmethod
    def from_rows(cls, rows: Iterable[int]) -> "PunchPattern":
        """Create a pattern from any iterable of punched rows.

        Args:
            rows: Row identifiers (12, 11, 0-9), in any order, duplicates allowed

        Returns:
            Canonical PunchPattern

        Raises:
            InvalidRowError: If a row identifier does not exist on a card
        """
        return cls(tuple(rows))

    @classmethod
    def empty(cls) -> "PunchPattern":
        """Create a blank pattern (no punches)."""
        return cls()

    @property
    def is_blank(self) -> bool:
        """True when no row is punched."""
        return not self.rows

    def is_punched(self, row: int) -> bool:
        """Check if a specific row is punched."""
        return row in self.rows

    def to_positional(self) -> tuple[bool, ...]:
        """Get the punches as a 12-slot boolean vector.

        Slot 0 is row 12, slot 1 is row 11, slot 2 is row 0 and slots 3-11
        are rows 1-9.

        Returns:
            Tuple of 12 booleans
        """
        return tuple(row in self.rows for row in POSITIONAL_ORDER)

    @classmethod
    def from_positional(cls, slots: Sequence[object]) -> "PunchPattern":
        """Create a pattern from a 12-slot positional vector.

        Args:
            slots: Twelve truthy/falsy values in positional order

        Returns:
            PunchPattern with the rows of all truthy slots

        Raises:
            ValueError: If the vector does not have exactly 12 slots
        """
        if len(slots) != POSITIONAL_SLOTS:
            raise ValueError(
                f"Positional vector must have {POSITIONAL_SLOTS} slots, got {len(slots)}"
            )
        return cls.from_rows(row for row, punched in zip(POSITIONAL_ORDER, slots) if punched)

    def to_bits(self) -> int:
        """Pack the positional vector into a 12-bit word (bit k = slot k)."""
        word = 0
        for row in self.rows:
            word |= 1 << _SLOT_OF_ROW[row]
        return word

    @classmethod
    def from_bits(cls, word: int) -> "PunchPattern":
        """Create a pattern from a 12-bit word (bit k = slot k).

        Bits above the twelfth are ignored.
        """
        return cls.from_rows(
            row for slot, row in enumerate(POSITIONAL_ORDER) if word & (1 << slot)
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary representation of the pattern
        """
        return {"rows": list(self.rows)}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "PunchPattern":
        """Deserialize from dictionary.

        Args:
            data: Dictionary representation of a pattern

        Returns:
            PunchPattern instance
        """
        return cls.from_rows(data["rows"])

    def __len__(self) -> int:
        return len(self.rows)

    def __iter__(self) -> Iterator[int]:
        return iter(self.rows)

    def __str__(self) -> str:
        if not self.rows:
            return "blank"
        # Punch notation lists rows top to bottom, e.g. "12-3-8"
        return "-".join(str(row) for row in POSITIONAL_ORDER if row in self.rows)


EMPTY_PATTERN = PunchPattern()
