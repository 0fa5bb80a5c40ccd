"""Card file I/O layer for punchcard.

This module handles reading and writing single-card files. It keeps file
access out of the codecs, which only see byte buffers and strings.

Key responsibilities:
- Select the file format from an explicit option or the file extension
- Load cards from binary, EBCDIC, text or JSON files
- Save cards in any of those formats

Key classes:
- CardFormat: Supported file formats
- CardReader: Load a card file
- CardWriter: Save a card file
"""

from punchcard.io.formats import CardFormat
from punchcard.io.reader import CardReader
from punchcard.io.writer import CardWriter, encode_card

__all__ = [
    "CardFormat",
    "CardReader",
    "CardWriter",
    "encode_card",
]
