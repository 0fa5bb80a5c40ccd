"""Binary card layouts.

Two raw punch layouts are read, selected by buffer length:

- DENSE: 108 bytes holding 72 columns of 12 bits each, packed
  least-significant-bit first. Bit k of the 864-bit stream is positional
  slot k % 12 of column k // 12. Columns 73-80 are reserved for a deck
  sequence number and are not stored.
- LEGACY: one byte per column. The low 8 bits fill positional slots 0-7
  (rows 12, 11, 0-5); rows 6-9 cannot be represented.

Only DENSE is ever written.
"""

import logging
from collections.abc import Iterable
from enum import Enum

from punchcard.domain.pattern import POSITIONAL_SLOTS, PunchPattern

logger = logging.getLogger(__name__)

CARD_COLUMNS = 80
DENSE_COLUMNS = 72
DENSE_SIZE = DENSE_COLUMNS * POSITIONAL_SLOTS // 8  # 108 bytes
LEGACY_BITS = 8


class BinaryLayout(str, Enum):
    """Raw punch layout of a binary card buffer."""

    DENSE = "dense"
    LEGACY = "legacy"


def select_layout(data: bytes) -> BinaryLayout:
    """Select the layout of a binary card buffer.

    Length is the only discriminator: exactly 108 bytes is DENSE, any
    other length is read as LEGACY.
    """
    if len(data) == DENSE_SIZE:
        return BinaryLayout.DENSE
    return BinaryLayout.LEGACY


def unpack_dense(data: bytes) -> list[PunchPattern]:
    """Unpack a 108-byte dense buffer into 72 column patterns.

    Args:
        data: Dense buffer

    Returns:
        Patterns for columns 1-72

    Raises:
        ValueError: If data is not exactly 108 bytes
    """
    if len(data) != DENSE_SIZE:
        raise ValueError(f"Dense layout requires {DENSE_SIZE} bytes, got {len(data)}")

    stream = int.from_bytes(data, "little")
    mask = (1 << POSITIONAL_SLOTS) - 1
    return [
        PunchPattern.from_bits((stream >> (column * POSITIONAL_SLOTS)) & mask)
        for column in range(DENSE_COLUMNS)
    ]


def pack_dense(patterns: Iterable[PunchPattern]) -> bytes:
    """Pack column patterns into the 108-byte dense layout.

    Only the first 72 patterns are stored; missing columns are blank.

    Args:
        patterns: Column patterns in card order

    Returns:
        108-byte dense buffer
    """
    stream = 0
    for column, pattern in enumerate(patterns):
        if column >= DENSE_COLUMNS:
            break
        stream |= pattern.to_bits() << (column * POSITIONAL_SLOTS)
    return stream.to_bytes(DENSE_SIZE, "little")


def unpack_legacy(data: bytes) -> list[PunchPattern]:
    """Unpack a one-byte-per-column buffer.

    Lossy: each byte supplies positional slots 0-7 only, so rows 6-9 are
    always read as unpunched. Bytes beyond column 80 are ignored.

    Args:
        data: Legacy buffer of any length

    Returns:
        One pattern per byte, at most 80
    """
    if len(data) > CARD_COLUMNS:
        logger.debug("Legacy buffer of %d bytes truncated to %d columns", len(data), CARD_COLUMNS)
    low_mask = (1 << LEGACY_BITS) - 1
    return [PunchPattern.from_bits(byte & low_mask) for byte in data[:CARD_COLUMNS]]
