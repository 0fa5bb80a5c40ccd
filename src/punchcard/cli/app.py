"""CLI application entry point for punchcard.

This module provides the main CLI interface using Typer.
"""

from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path
from typing import Annotated

import structlog
import typer
from rich.text import Text

from punchcard import __version__
from punchcard.cli.output import (
    SYM_DOT,
    console,
    print_card_diagram,
    print_card_info,
    print_error,
    print_header,
    print_step,
    print_success,
)
from punchcard.config import LoggingConfig, PunchCardSettings
from punchcard.core import (
    PunchCard,
    generate_example_object,
    generate_example_source,
    is_supported,
    source_fields,
    validate_object_format,
    validate_source_format,
)
from punchcard.core.binary import DENSE_COLUMNS
from punchcard.core.hollerith import upcase
from punchcard.exceptions import PunchCardError, UnknownFormatError
from punchcard.io import CardFormat, CardReader, CardWriter
from punchcard.utils import configure_logging

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")
CARD_KINDS = ("source", "object")

# Create the Typer app
app = typer.Typer(
    name="punchcard",
    help="Encode, decode and convert IBM 80-column punch cards.",
    add_completion=False,
    no_args_is_help=True,
)


@dataclass
class CliState:
    """Options shared by every command."""

    settings: PunchCardSettings
    logger: structlog.stdlib.BoundLogger
    quiet: bool = False


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]Punchcard[/bold blue] v{__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    ctx: typer.Context,
    log_file: Annotated[
        Path | None,
        typer.Option(
            "--log-file",
            help="Write detailed logs to file",
        ),
    ] = None,
    log_level: Annotated[
        str,
        typer.Option(
            "--log-level",
            help="Logging level (DEBUG|INFO|WARNING|ERROR)",
        ),
    ] = "WARNING",
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Minimal console output",
        ),
    ] = False,
    _version: Annotated[  # noqa: ARG001
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Encode, decode and convert IBM 80-column punch cards."""
    if log_level.upper() not in LOG_LEVELS:
        print_error(
            f"Invalid log level: {log_level}",
            details=f"Valid values: {', '.join(LOG_LEVELS)}",
        )
        raise typer.Exit(code=1)

    settings = PunchCardSettings(
        logging=LoggingConfig(
            log_file=log_file,
            log_level=log_level.upper(),
        ),
    )
    logger = configure_logging(
        log_file=settings.logging.log_file,
        console_level=settings.logging.log_level,
        file_level=settings.logging.file_log_level,
        quiet=quiet,
    )
    ctx.obj = CliState(settings=settings, logger=logger, quiet=quiet)


@contextmanager
def _handle_errors(state: CliState) -> Iterator[None]:
    """Turn punchcard errors into an error message and exit code 1."""
    try:
        yield
    except PunchCardError as e:
        state.logger.info("Command failed", error=str(e), error_type=type(e).__name__)
        print_error(str(e))
        raise typer.Exit(code=1) from e


def _parse_format(value: str | None) -> CardFormat | None:
    """Parse a --format option value."""
    if value is None:
        return None
    try:
        return CardFormat(value.lower())
    except ValueError:
        print_error(
            f"Invalid format: {value}",
            details=f"Valid values: {', '.join(f.value for f in CardFormat)}",
        )
        raise typer.Exit(code=1) from None


def _output_format(path: Path, explicit: CardFormat | None, state: CliState) -> CardFormat:
    """Pick the output format: explicit option, file extension, then default."""
    if explicit is not None:
        return explicit
    try:
        return CardFormat.from_path(path)
    except UnknownFormatError:
        return state.settings.output.default_format


def _write_card(card: PunchCard, path: Path, card_format: CardFormat, state: CliState) -> None:
    """Write a card and report it."""
    if card_format is CardFormat.BINARY and any(
        not column.is_blank for column in card.columns[DENSE_COLUMNS:]
    ):
        console.print(
            f"  [yellow]Columns {DENSE_COLUMNS + 1}-{PunchCard.COLUMNS} are not stored "
            "in the binary layout[/yellow]"
        )
    CardWriter(path, card_format).write(card)
    state.logger.info("Card written", path=str(path), format=card_format.value)
    if not state.quiet:
        print_success("Card written", output_path=str(path), size=path.stat().st_size)


def _show_card(card: PunchCard, state: CliState) -> None:
    output = state.settings.output
    print_card_diagram(card, hole_char=output.hole_char, blank_char=output.blank_char)


@app.command()
def encode(
    ctx: typer.Context,
    text: Annotated[
        str,
        typer.Argument(
            help="Text to punch (first 80 characters)",
            show_default=False,
        ),
    ],
    output: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            help="Write the card to this file",
        ),
    ] = None,
    card_format: Annotated[
        str | None,
        typer.Option(
            "--format",
            "-f",
            help="Output format (binary|ebcdic|text|json, default: from extension)",
        ),
    ] = None,
    no_diagram: Annotated[
        bool,
        typer.Option(
            "--no-diagram",
            help="Do not print the card diagram",
        ),
    ] = False,
) -> None:
    """Punch a text card.

    Lowercase letters are upcased. Characters the keypunch cannot punch
    leave their column blank.

    Example:
        punchcard encode "HELLO WORLD" -o hello.bin
    """
    state: CliState = ctx.obj
    explicit = _parse_format(card_format)

    with _handle_errors(state):
        card = PunchCard.from_text(text)
        state.logger.info("Card encoded", length=len(text), punched=card.punched_count())

        if not state.quiet:
            print_header(__version__)
            print_step("Encoding")
            print_card_info(card)
            unsupported = sorted(
                {c for c in map(upcase, text[: PunchCard.COLUMNS]) if not is_supported(c)}
            )
            if unsupported:
                line = Text(f"  Unsupported characters left blank {SYM_DOT} ")
                line.append("".join(unsupported), style="yellow")
                console.print(line)
            if state.settings.output.show_diagram and not no_diagram:
                print_step("Card")
                _show_card(card, state)

        if output is not None:
            _write_card(card, output, _output_format(output, explicit, state), state)


@app.command()
def decode(
    ctx: typer.Context,
    input_path: Annotated[
        Path,
        typer.Argument(
            help="Card file to read",
            show_default=False,
        ),
    ],
    card_format: Annotated[
        str | None,
        typer.Option(
            "--format",
            "-f",
            help="Input format (binary|ebcdic|text|json, default: from extension)",
        ),
    ] = None,
) -> None:
    """Decode a card file to text."""
    state: CliState = ctx.obj
    explicit = _parse_format(card_format)

    with _handle_errors(state):
        card = CardReader(input_path, explicit).read()
        state.logger.info("Card decoded", path=str(input_path), card_type=card.card_type.value)
        if state.quiet:
            console.print(Text(card.to_text().rstrip()), soft_wrap=True)
        else:
            print_step("Card")
            print_card_info(card, source=str(input_path))


@app.command()
def convert(
    ctx: typer.Context,
    input_path: Annotated[
        Path,
        typer.Argument(
            help="Card file to read",
            show_default=False,
        ),
    ],
    output_path: Annotated[
        Path,
        typer.Argument(
            help="Card file to write",
            show_default=False,
        ),
    ],
    from_format: Annotated[
        str | None,
        typer.Option(
            "--from",
            help="Input format (default: from extension)",
        ),
    ] = None,
    to_format: Annotated[
        str | None,
        typer.Option(
            "--to",
            help="Output format (default: from extension)",
        ),
    ] = None,
) -> None:
    """Convert a card file to another format.

    Example:
        punchcard convert card.ebc card.bin
    """
    state: CliState = ctx.obj
    source_format = _parse_format(from_format)
    target_format = _parse_format(to_format)

    with _handle_errors(state):
        card = CardReader(input_path, source_format).read()
        _write_card(card, output_path, _output_format(output_path, target_format, state), state)


@app.command()
def show(
    ctx: typer.Context,
    input_path: Annotated[
        Path,
        typer.Argument(
            help="Card file to show",
            show_default=False,
        ),
    ],
    card_format: Annotated[
        str | None,
        typer.Option(
            "--format",
            "-f",
            help="Input format (binary|ebcdic|text|json, default: from extension)",
        ),
    ] = None,
) -> None:
    """Print the punch diagram of a card file."""
    state: CliState = ctx.obj
    explicit = _parse_format(card_format)

    with _handle_errors(state):
        card = CardReader(input_path, explicit).read()
        _show_card(card, state)


@app.command()
def example(
    ctx: typer.Context,
    kind: Annotated[
        str,
        typer.Argument(
            help="Example card kind (source|object)",
            show_default=False,
        ),
    ],
    output: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            help="Write the card to this file",
        ),
    ] = None,
    card_format: Annotated[
        str | None,
        typer.Option(
            "--format",
            "-f",
            help="Output format (default: from extension)",
        ),
    ] = None,
) -> None:
    """Generate an IBM 1130 example source or object deck card."""
    state: CliState = ctx.obj
    explicit = _parse_format(card_format)
    kind = kind.lower()
    if kind not in CARD_KINDS:
        print_error(f"Invalid card kind: {kind}", details="Valid values: source, object")
        raise typer.Exit(code=1)

    with _handle_errors(state):
        card = generate_example_source() if kind == "source" else generate_example_object()
        if not state.quiet:
            print_step(f"Example {kind} card")
            print_card_info(card)
            _show_card(card, state)
        if output is not None:
            _write_card(card, output, _output_format(output, explicit, state), state)


@app.command()
def validate(
    ctx: typer.Context,
    input_path: Annotated[
        Path,
        typer.Argument(
            help="Card file to validate",
            show_default=False,
        ),
    ],
    kind: Annotated[
        str,
        typer.Option(
            "--kind",
            "-k",
            help="Expected card kind (source|object)",
        ),
    ] = "source",
    card_format: Annotated[
        str | None,
        typer.Option(
            "--format",
            "-f",
            help="Input format (default: from extension)",
        ),
    ] = None,
) -> None:
    """Check that a card file follows IBM 1130 source or object deck conventions."""
    state: CliState = ctx.obj
    explicit = _parse_format(card_format)
    kind = kind.lower()
    if kind not in CARD_KINDS:
        print_error(f"Invalid card kind: {kind}", details="Valid values: source, object")
        raise typer.Exit(code=1)

    with _handle_errors(state):
        card = CardReader(input_path, explicit).read()
        if kind == "source":
            validate_source_format(card)
        else:
            validate_object_format(card)

        if not state.quiet:
            print_success(f"Valid {kind} card")
            if kind == "source":
                for name, value in source_fields(card).items():
                    line = Text(f"  {name:<13}")
                    line.append(value)
                    console.print(line, soft_wrap=True)


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
