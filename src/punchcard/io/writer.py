"""Card writer for saving card files."""

import json
import logging
from pathlib import Path

from punchcard.core.card import PunchCard
from punchcard.exceptions import CardSaveError
from punchcard.io.formats import CardFormat

logger = logging.getLogger(__name__)


def encode_card(card: PunchCard, card_format: CardFormat) -> bytes:
    """Encode a card into the bytes of a card file.

    Binary files always use the dense 108-byte layout, so punches in
    columns 73-80 are not saved. Text files hold the decoded text with
    trailing blanks removed.

    Args:
        card: Card to encode
        card_format: Target file format

    Returns:
        File contents
    """
    if card_format is CardFormat.BINARY:
        return card.to_binary()
    if card_format is CardFormat.EBCDIC:
        return card.to_ebcdic()
    if card_format is CardFormat.TEXT:
        return (card.to_text().rstrip(" ") + "\n").encode("utf-8")
    return (json.dumps(card.to_dict(), indent=2) + "\n").encode("utf-8")


class CardWriter:
    """Writes a punch card to a file.

    Example:
        writer = CardWriter(Path("card.ebc"))
        writer.write(PunchCard.from_text("HELLO"))
    """

    def __init__(self, output_path: Path, card_format: CardFormat | None = None) -> None:
        """Initialize the card writer.

        Args:
            output_path: Path where the card will be saved
            card_format: Explicit format (default: from the file extension)

        Raises:
            UnknownFormatError: If no format is given and the extension is unknown
        """
        self._output_path = output_path
        self._format = card_format or CardFormat.from_path(output_path)

    @property
    def format(self) -> CardFormat:
        """Return the format the file is written as."""
        return self._format

    def write(self, card: PunchCard) -> None:
        """Write the card to the output path.

        Raises:
            CardSaveError: If the file cannot be written
        """
        data = encode_card(card, self._format)
        try:
            self._output_path.write_bytes(data)
        except OSError as e:
            raise CardSaveError(str(self._output_path), str(e)) from e

        logger.debug("Wrote %s card file %s (%d bytes)", self._format.value, self._output_path, len(data))

    @staticmethod
    def default_path(input_path: Path, card_format: CardFormat) -> Path:
        """Generate an output path next to the input with the format's extension.

        Converts: card.txt -> card.bin (for BINARY)
                  deck/card01.bin -> deck/card01.json (for JSON)

        Args:
            input_path: Original card file path
            card_format: Target format

        Returns:
            Path with the target extension
        """
        return input_path.with_suffix(card_format.extension)
