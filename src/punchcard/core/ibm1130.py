"""IBM 1130 card conventions.

Example source and object deck cards, and checks that a card follows the
IBM 1130 assembler source or object deck conventions.
"""

from itertools import cycle, islice

from punchcard.core.card import CardType, PunchCard
from punchcard.exceptions import CardValidationError

EXAMPLE_SOURCE_TEXT = "START DC   0             IBM 1130 EXAMPLE PROGRAM"

# Legacy-layout bytes repeated over the 72 data columns of the example object card
EXAMPLE_OBJECT_BYTES: tuple[int, ...] = (0xF0, 0xCC, 0xAA, 0x99)
EXAMPLE_SEQUENCE = b"00000001"

# Assembler source card fields as 1-based inclusive column ranges
SOURCE_FIELDS: dict[str, tuple[int, int]] = {
    "label": (1, 5),
    "continuation": (6, 6),
    "opcode": (7, 10),
    "operands": (11, 80),
}

OPCODES: frozenset[str] = frozenset(
    {
        "LD",  # Load Accumulator
        "STO",  # Store Accumulator
        "ADD",  # Add to Accumulator
        "SUB",  # Subtract from Accumulator
        "MPY",  # Multiply
        "DIV",  # Divide
        "BSC",  # Branch or Skip Conditional
        "DC",  # Define Constant
        "DSA",  # Define Storage Area
        "END",  # End of Assembly
    }
)


def generate_example_source() -> PunchCard:
    """Generate an example assembler source card."""
    return PunchCard.from_text(EXAMPLE_SOURCE_TEXT)


def generate_example_object() -> PunchCard:
    """Generate an example object deck card.

    Columns 1-72 hold a repeating instruction-like bit pattern and columns
    73-80 the card sequence number, written in the 80-byte legacy layout.

    Returns:
        Binary card
    """
    data = bytes(islice(cycle(EXAMPLE_OBJECT_BYTES), 72)) + EXAMPLE_SEQUENCE
    return PunchCard.from_binary(data)


def source_fields(card: PunchCard) -> dict[str, str]:
    """Split a source card into its assembler fields.

    Args:
        card: Source card

    Returns:
        Mapping of field name to its decoded, stripped text
    """
    text = card.to_text()
    return {
        name: text[first - 1 : last].strip()
        for name, (first, last) in SOURCE_FIELDS.items()
    }


def validate_source_format(card: PunchCard) -> None:
    """Check that a card can be an assembler source card.

    Raises:
        CardValidationError: If the card is not a text card
    """
    if card.card_type is not CardType.TEXT:
        raise CardValidationError("Source cards must be text type")


def validate_object_format(card: PunchCard) -> None:
    """Check that a card can be an object deck card.

    Raises:
        CardValidationError: If the card is not a binary card or is blank
    """
    if card.card_type is not CardType.BINARY:
        raise CardValidationError("Object cards must be binary type")
    if card.punched_count() == 0:
        raise CardValidationError("Object card cannot be blank")
