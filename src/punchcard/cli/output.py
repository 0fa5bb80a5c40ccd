"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with card diagrams and formatted messages.
"""

from rich.console import Console
from rich.markup import escape
from rich.text import Text

from punchcard.core.card import CardType, PunchCard
from punchcard.domain.pattern import POSITIONAL_ORDER

console = Console()

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info

_LABEL_WIDTH = 3


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]Punchcard[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator.

    Args:
        message: Step description message
    """
    console.print(f"\n{SYM_STEP} {message}")


def render_card(card: PunchCard, hole_char: str = "█", blank_char: str = "·") -> str:
    """Render a card as a text diagram.

    The first line holds the printed characters of a text card (binary
    cards print nothing), followed by one line per row from 12 down to 9.

    Args:
        card: Card to render
        hole_char: Character drawn for a punched hole
        blank_char: Character drawn for an unpunched position

    Returns:
        Multi-line diagram
    """
    printed = card.printed_text() if card.card_type is CardType.TEXT else ""
    lines = [" " * (_LABEL_WIDTH + 1) + printed.rstrip()]
    for row in POSITIONAL_ORDER:
        holes = "".join(
            hole_char if column.pattern.is_punched(row) else blank_char for column in card
        )
        lines.append(f"{row:>{_LABEL_WIDTH}} {holes}")
    return "\n".join(lines)


def print_card_diagram(card: PunchCard, hole_char: str = "█", blank_char: str = "·") -> None:
    """Print a card diagram.

    Args:
        card: Card to print
        hole_char: Character drawn for a punched hole
        blank_char: Character drawn for an unpunched position
    """
    console.print(Text(render_card(card, hole_char, blank_char)), soft_wrap=True)


def print_card_info(card: PunchCard, source: str | None = None) -> None:
    """Print card summary: type, punched columns and decoded text.

    Args:
        card: Card to describe
        source: Optional file path the card was loaded from
    """
    if source is not None:
        line = Text("  ")
        line.append(source)
        console.print(line)
    console.print(
        f"  {card.card_type.value} card {SYM_DOT} {card.punched_count()} punched columns"
    )
    text = Text("  ")
    text.append(card.to_text().rstrip(), style="bold")
    console.print(text, soft_wrap=True)


def print_success(message: str, output_path: str | None = None, size: int | None = None) -> None:
    """Print success message.

    Args:
        message: What was done
        output_path: Optional path of a written file
        size: Optional size of the written file in bytes
    """
    console.print(f"\n[bold green]{SYM_OK} {escape(message)}[/bold green]")
    if output_path is not None:
        line = Text("  ")
        line.append(output_path, style="bold")
        if size is not None:
            line.append(f" ({size} B)")
        console.print(line)


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {escape(message)}")
    if details:
        console.print(f"  {escape(details)}")
