"""Card file formats."""

from enum import Enum
from pathlib import Path

from punchcard.exceptions import UnknownFormatError


class CardFormat(str, Enum):
    """On-disk representation of a single card."""

    BINARY = "binary"
    EBCDIC = "ebcdic"
    TEXT = "text"
    JSON = "json"

    @property
    def extension(self) -> str:
        """File extension for this format, including the dot."""
        return _EXTENSIONS[self]

    @classmethod
    def from_path(cls, path: Path) -> "CardFormat":
        """Determine the format of a card file from its extension.

        Args:
            path: Card file path

        Returns:
            Matching card format

        Raises:
            UnknownFormatError: If the extension is not recognized
        """
        suffix = path.suffix.lower()
        for card_format, extension in _EXTENSIONS.items():
            if suffix == extension:
                return card_format
        known = ", ".join(_EXTENSIONS.values())
        raise UnknownFormatError(str(path), f"unrecognized extension '{suffix}' (expected {known})")


_EXTENSIONS: dict[CardFormat, str] = {
    CardFormat.BINARY: ".bin",
    CardFormat.EBCDIC: ".ebc",
    CardFormat.TEXT: ".txt",
    CardFormat.JSON: ".json",
}
