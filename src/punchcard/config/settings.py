"""Configuration settings for punchcard."""

from pathlib import Path

from pydantic import BaseModel, Field

from punchcard.io.formats import CardFormat


class OutputConfig(BaseModel):
    """Configuration for card output."""

    default_format: CardFormat = Field(
        default=CardFormat.BINARY,
        description="Format used when an output path has no recognized extension",
    )
    show_diagram: bool = Field(
        default=True,
        description="Print the card diagram after encoding",
    )
    hole_char: str = Field(
        default="█",
        min_length=1,
        max_length=1,
        description="Character drawn for a punched hole",
    )
    blank_char: str = Field(
        default="·",
        min_length=1,
        max_length=1,
        description="Character drawn for an unpunched position",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )


class PunchCardSettings(BaseModel):
    """Main application settings."""

    output: OutputConfig = Field(default_factory=OutputConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> PunchCardSettings:
    """Get default application settings."""
    return PunchCardSettings()
