"""Card reader for loading card files.

This module provides the CardReader class for loading a single card from
a binary, EBCDIC, text or JSON file.
"""

import json
import logging
from pathlib import Path

from punchcard.core.card import PunchCard
from punchcard.exceptions import CardLoadError
from punchcard.io.formats import CardFormat

logger = logging.getLogger(__name__)


class CardReader:
    """Loads a punch card from a file.

    The format is taken from the file extension unless given explicitly.

    Example:
        reader = CardReader(Path("deck/card01.bin"))
        card = reader.read()
        print(card.to_text())
    """

    def __init__(self, card_path: Path, card_format: CardFormat | None = None) -> None:
        """Initialize the card reader.

        Args:
            card_path: Path to the card file
            card_format: Explicit format (default: from the file extension)

        Raises:
            UnknownFormatError: If no format is given and the extension is unknown
        """
        self._card_path = card_path
        self._format = card_format or CardFormat.from_path(card_path)

    @property
    def format(self) -> CardFormat:
        """Return the format the file is read as."""
        return self._format

    def read(self) -> PunchCard:
        """Read the card file.

        Returns:
            The loaded card

        Raises:
            CardLoadError: If the file is missing, unreadable or malformed
        """
        if not self._card_path.is_file():
            raise CardLoadError(str(self._card_path), "file not found")

        try:
            data = self._card_path.read_bytes()
        except OSError as e:
            raise CardLoadError(str(self._card_path), str(e)) from e

        logger.debug("Read %s card file %s (%d bytes)", self._format.value, self._card_path, len(data))

        if self._format is CardFormat.BINARY:
            return PunchCard.from_binary(data)
        if self._format is CardFormat.EBCDIC:
            return PunchCard.from_ebcdic(data)
        if self._format is CardFormat.TEXT:
            return PunchCard.from_text(self._decode_text(data))
        return self._decode_json(data)

    def _decode_text(self, data: bytes) -> str:
        try:
            text = data.decode("utf-8")
        except UnicodeDecodeError as e:
            raise CardLoadError(str(self._card_path), f"not UTF-8 text: {e}") from e
        # Only the line terminator ends a card; form feeds and other
        # separators are card content.
        return text.split("\n", 1)[0].removesuffix("\r")

    def _decode_json(self, data: bytes) -> PunchCard:
        try:
            return PunchCard.from_dict(json.loads(data))
        except (ValueError, KeyError, TypeError) as e:
            raise CardLoadError(str(self._card_path), f"invalid card JSON: {e}") from e
