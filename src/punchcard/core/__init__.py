"""Core codecs for punchcard.

This module contains the lookup tables and the card aggregate:

- Hollerith table (characters <-> punch patterns)
- EBCDIC table (punch patterns <-> EBCDIC bytes)
- Binary layouts (dense 108-byte and legacy one-byte-per-column buffers)
- PunchCard (80 columns with whole-card import and export)
- IBM 1130 source and object deck conventions

Every lookup is total: a miss resolves to a fallback value (blank pattern,
``?``, or the EBCDIC space) instead of raising.

Key functions:
- char_to_pattern / pattern_to_char: Single character lookups
- encode_string / decode_string: Whole string conversion
- pattern_to_ebcdic / ebcdic_to_pattern: EBCDIC lookups
- select_layout: Choose the binary layout of a buffer

Key classes:
- PunchCard: The 80-column card
- Column: One column of a card
- CardType: Text or binary card
"""

from punchcard.core.binary import (
    BinaryLayout,
    pack_dense,
    select_layout,
    unpack_dense,
    unpack_legacy,
)
from punchcard.core.card import CardType, Column, PunchCard
from punchcard.core.ebcdic import ebcdic_to_char, ebcdic_to_pattern, pattern_to_ebcdic
from punchcard.core.hollerith import (
    SUPPORTED_CHARACTERS,
    char_to_pattern,
    decode_string,
    encode_string,
    is_supported,
    pattern_to_char,
)
from punchcard.core.ibm1130 import (
    generate_example_object,
    generate_example_source,
    source_fields,
    validate_object_format,
    validate_source_format,
)

__all__ = [
    # Hollerith table
    "SUPPORTED_CHARACTERS",
    "char_to_pattern",
    "decode_string",
    "encode_string",
    "is_supported",
    "pattern_to_char",
    # EBCDIC table
    "ebcdic_to_char",
    "ebcdic_to_pattern",
    "pattern_to_ebcdic",
    # Binary layouts
    "BinaryLayout",
    "pack_dense",
    "select_layout",
    "unpack_dense",
    "unpack_legacy",
    # Card classes
    "CardType",
    "Column",
    "PunchCard",
    # IBM 1130
    "generate_example_object",
    "generate_example_source",
    "source_fields",
    "validate_object_format",
    "validate_source_format",
]
