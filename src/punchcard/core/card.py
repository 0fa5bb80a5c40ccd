"""The 80-column punch card.

This module defines the card aggregate used by every caller:
- CardType: Whether a card carries printable text or raw punches
- Column: One column's punch pattern and optional printed character
- PunchCard: Eighty columns with whole-card import and export
"""

import logging
from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum
from typing import Any

from punchcard.core.binary import (
    CARD_COLUMNS,
    DENSE_COLUMNS,
    BinaryLayout,
    pack_dense,
    select_layout,
    unpack_dense,
    unpack_legacy,
)
from punchcard.core.ebcdic import ebcdic_to_char, ebcdic_to_pattern, pattern_to_ebcdic
from punchcard.core.hollerith import UNKNOWN_CHAR, char_to_pattern, pattern_to_char, upcase
from punchcard.domain.pattern import EMPTY_PATTERN, PunchPattern
from punchcard.exceptions import ColumnIndexError

logger = logging.getLogger(__name__)


class CardType(str, Enum):
    """Type of punch card.

    The type decides whether printed characters are shown; it never
    restricts which conversions a card supports.
    """

    TEXT = "text"
    BINARY = "binary"


def _check_single_char(value: object) -> None:
    if not isinstance(value, str) or len(value) != 1:
        raise ValueError(f"Expected a single character, got {value!r}")


@dataclass(frozen=True, slots=True)
class Column:
    """A single column of a punch card.

    Attributes:
        pattern: Punched rows of the column
        printed_char: Character printed above the column by the keypunch
            (None for binary columns)
    """

    pattern: PunchPattern = EMPTY_PATTERN
    printed_char: str | None = None

    def __post_init__(self) -> None:
        if self.printed_char is not None:
            _check_single_char(self.printed_char)

    @classmethod
    def from_char(cls, char: str) -> "Column":
        """Create a column by keying a character.

        ASCII letters are upcased. Unsupported characters punch nothing but
        are still recorded as the printed character.

        Raises:
            ValueError: If char is not exactly one character
        """
        _check_single_char(char)
        upper = upcase(char)
        return cls(pattern=char_to_pattern(upper) or EMPTY_PATTERN, printed_char=upper)

    @classmethod
    def from_pattern(cls, pattern: PunchPattern) -> "Column":
        """Create a column from raw punches, without a printed character."""
        return cls(pattern=pattern)

    @property
    def is_blank(self) -> bool:
        """True when no row of the column is punched."""
        return self.pattern.is_blank

    def to_char(self) -> str | None:
        """Decode the punches through the Hollerith table."""
        return pattern_to_char(self.pattern)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary representation of the column
        """
        return {"pattern": self.pattern.to_dict(), "printed_char": self.printed_char}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Column":
        """Deserialize from dictionary.

        Args:
            data: Dictionary representation of a column

        Returns:
            Column instance

        Raises:
            ValueError: If printed_char is not None or a single character
        """
        return cls(
            pattern=PunchPattern.from_dict(data["pattern"]),
            printed_char=data.get("printed_char"),
        )


BLANK_COLUMN = Column()


class PunchCard:
    """A complete 80-column punch card.

    Cards are created blank or in bulk from text, raw binary or EBCDIC, and
    edited column by column. Any card can be exported as text, dense binary
    or EBCDIC regardless of its type.

    Example:
        card = PunchCard.from_text("HELLO WORLD")
        data = card.to_binary()
        same_punches = PunchCard.from_binary(data)
    """

    COLUMNS = CARD_COLUMNS

    def __init__(self, card_type: CardType = CardType.TEXT) -> None:
        """Initialize a blank card.

        Args:
            card_type: Text or binary card
        """
        self._card_type = CardType(card_type)
        self._columns: list[Column] = [BLANK_COLUMN] * self.COLUMNS

    @classmethod
    def new(cls, card_type: CardType) -> "PunchCard":
        """Create a blank card of the given type."""
        return cls(card_type)

    @classmethod
    def from_text(cls, text: str) -> "PunchCard":
        """Create a text card by keying a string.

        Only the first 80 characters are punched. Each character is upcased;
        unsupported characters leave their column blank.

        Args:
            text: Text to punch

        Returns:
            Text card
        """
        card = cls(CardType.TEXT)
        if len(text) > cls.COLUMNS:
            logger.debug("Text of %d characters truncated to card width", len(text))
        for index, char in enumerate(text[: cls.COLUMNS]):
            card._columns[index] = Column.from_char(char)
        return card

    @classmethod
    def from_binary(cls, data: bytes) -> "PunchCard":
        """Create a binary card from a raw punch buffer.

        A 108-byte buffer is read in the dense layout and fills columns 1-72;
        any other length is read one byte per column in the lossy legacy
        layout. Binary columns never carry a printed character.

        Args:
            data: Raw punch buffer

        Returns:
            Binary card
        """
        layout = select_layout(data)
        logger.debug("Reading %d-byte binary card as %s layout", len(data), layout.value)
        if layout is BinaryLayout.DENSE:
            patterns = unpack_dense(data)
        else:
            patterns = unpack_legacy(data)

        card = cls(CardType.BINARY)
        for index, pattern in enumerate(patterns):
            card._columns[index] = Column.from_pattern(pattern)
        return card

    @classmethod
    def from_ebcdic(cls, data: bytes) -> "PunchCard":
        """Create a text card from EBCDIC bytes, one per column.

        The printed character comes from the byte's code range, so an
        unknown byte gives a blank column with no printed character.

        Args:
            data: EBCDIC buffer (only the first 80 bytes are used)

        Returns:
            Text card
        """
        card = cls(CardType.TEXT)
        for index, code in enumerate(data[: cls.COLUMNS]):
            card._columns[index] = Column(
                pattern=ebcdic_to_pattern(code),
                printed_char=ebcdic_to_char(code),
            )
        return card

    def to_binary(self) -> bytes:
        """Export the card in the 108-byte dense layout.

        Columns 73-80 are not part of the layout and are dropped.
        """
        dropped = sum(1 for column in self._columns[DENSE_COLUMNS:] if not column.is_blank)
        if dropped:
            logger.debug("Dropped %d punched columns beyond the dense layout", dropped)
        return pack_dense(column.pattern for column in self._columns)

    def to_ebcdic(self) -> bytes:
        """Export the card as 80 EBCDIC bytes."""
        return bytes(pattern_to_ebcdic(column.pattern) for column in self._columns)

    def to_text(self) -> str:
        """Decode every column through the Hollerith table.

        Returns:
            80 characters, with ``?`` for undecodable columns
        """
        return "".join(column.to_char() or UNKNOWN_CHAR for column in self._columns)

    def printed_text(self) -> str:
        """Get the characters printed along the top edge of the card.

        Returns:
            80 characters, with a space where nothing is printed
        """
        return "".join(column.printed_char or " " for column in self._columns)

    @property
    def card_type(self) -> CardType:
        """Get the card type."""
        return self._card_type

    @property
    def columns(self) -> tuple[Column, ...]:
        """Get all 80 columns."""
        return tuple(self._columns)

    def get_column(self, index: int) -> Column | None:
        """Get a column by index.

        Args:
            index: Column index (0-79)

        Returns:
            The column, or None if index is out of range
        """
        if not 0 <= index < self.COLUMNS:
            return None
        return self._columns[index]

    def _check_index(self, index: int) -> None:
        if not 0 <= index < self.COLUMNS:
            raise ColumnIndexError(index, self.COLUMNS)

    def set_column_char(self, index: int, char: str) -> None:
        """Key a character into a column.

        Raises:
            ColumnIndexError: If index is out of range (card unchanged)
            ValueError: If char is not exactly one character (card unchanged)
        """
        self._check_index(index)
        self._columns[index] = Column.from_char(char)

    def set_column_pattern(self, index: int, pattern: PunchPattern) -> None:
        """Punch a raw pattern into a column, without a printed character.

        Raises:
            ColumnIndexError: If index is out of range (card unchanged)
        """
        self._check_index(index)
        self._columns[index] = Column.from_pattern(pattern)

    def clear_column(self, index: int) -> None:
        """Make a column blank.

        Raises:
            ColumnIndexError: If index is out of range (card unchanged)
        """
        self._check_index(index)
        self._columns[index] = BLANK_COLUMN

    def clear(self) -> None:
        """Make every column blank. The card type is kept."""
        self._columns = [BLANK_COLUMN] * self.COLUMNS

    def punched_count(self) -> int:
        """Count columns with at least one punch."""
        return sum(1 for column in self._columns if not column.is_blank)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary representation of the card
        """
        return {
            "card_type": self._card_type.value,
            "columns": [column.to_dict() for column in self._columns],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "PunchCard":
        """Deserialize from dictionary.

        Columns beyond 80 are ignored; missing columns are blank.

        Args:
            data: Dictionary representation of a card

        Returns:
            PunchCard instance
        """
        card = cls(CardType(data["card_type"]))
        for index, column_data in enumerate(data["columns"][: cls.COLUMNS]):
            card._columns[index] = Column.from_dict(column_data)
        return card

    def __len__(self) -> int:
        return self.COLUMNS

    def __iter__(self) -> Iterator[Column]:
        return iter(self._columns)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PunchCard):
            return NotImplemented
        return self._card_type == other._card_type and self._columns == other._columns

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return (
            f"PunchCard(card_type={self._card_type.value!r}, "
            f"punched={self.punched_count()})"
        )
