"""Exception hierarchy for punchcard."""


class PunchCardError(Exception):
    """Base exception for all punchcard errors."""

    pass


class ColumnIndexError(PunchCardError, IndexError):
    """Column index outside the 80 columns of a card."""

    def __init__(self, index: int, column_count: int = 80) -> None:
        self.index = index
        self.column_count = column_count
        super().__init__(
            f"Column index out of range: {index} (valid 0-{column_count - 1})"
        )


class InvalidRowError(PunchCardError, ValueError):
    """Row identifier that does not exist on a card."""

    def __init__(self, row: object) -> None:
        self.row = row
        super().__init__(f"Invalid punch row {row!r}: expected 12, 11 or 0-9")


class CardFileError(PunchCardError):
    """Errors related to reading or writing card files."""

    pass


class CardLoadError(CardFileError):
    """Error loading a card file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load card '{path}': {reason}")


class CardSaveError(CardFileError):
    """Error saving a card file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to save card '{path}': {reason}")


class UnknownFormatError(CardFileError):
    """Card file format could not be determined."""

    def __init__(self, path: str, details: str) -> None:
        self.path = path
        self.details = details
        super().__init__(f"Unknown card format '{path}': {details}")


class CardValidationError(PunchCardError):
    """Card does not follow the expected deck conventions."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(reason)
