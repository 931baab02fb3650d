"""
CLI entry point for satwords.
"""

# Standard library imports
import logging

# Third-party imports
import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

# Local application imports
from satwords.cli._study_logic import study_logic
from satwords.deck import load_builtin_deck
from satwords.exceptions import DeckError


console = Console()

app = typer.Typer(
    name="satwords",
    help="SAT Words: swipeable vocabulary flashcards.",
    add_completion=False,
    rich_markup_mode="markdown",
)


# ---------------------------------------------------------------------------
# Global options
# ---------------------------------------------------------------------------


def _configure_logging(verbose: bool) -> None:
    """
    Route log records to stderr through Rich when verbose output is requested.

    Parameters:
        verbose (bool): If True, log at DEBUG level; otherwise leave logging
            unconfigured.
    """
    if not verbose:
        return
    logging.basicConfig(
        level=logging.DEBUG,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )


@app.callback()
def callback(
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        envvar="SATWORDS_VERBOSE",
        help="Log navigation and gesture events to stderr.",
    ),
):
    """SAT Words: swipeable vocabulary flashcards."""
    _configure_logging(verbose)


# ---------------------------------------------------------------------------
# Study
# ---------------------------------------------------------------------------


@app.command()
def study():
    """Starts an interactive study session over the SAT deck."""
    try:
        study_logic()
    except DeckError as e:
        console.print(f"[bold red]Deck Error:[/bold red] {e}")
        raise typer.Exit(code=1) from e
    except Exception as e:
        console.print(f"[bold]An unexpected error occurred:[/bold] {e}")
        raise typer.Exit(code=1) from e


# ---------------------------------------------------------------------------
# List & show
# ---------------------------------------------------------------------------


@app.command("list")
def list_cards():
    """Lists every word in the deck with its meaning."""
    cards = load_builtin_deck()
    table = Table(title="SAT Words")
    table.add_column("#", style="cyan", justify="right")
    table.add_column("Word", style="magenta")
    table.add_column("Meaning")
    for number, card in enumerate(cards, start=1):
        table.add_row(str(number), card.term, card.definition)
    console.print(table)


@app.command()
def show(
    index: int = typer.Argument(  # noqa: B008
        ..., help="One-based position of the card in the deck."
    ),
    meaning: bool = typer.Option(
        False,
        "--meaning",
        "-m",
        help="Show the meaning instead of the word.",
    ),
):
    """
    Show a single card by its position in the deck.

    Parameters:
        index: One-based card position; must be between 1 and the deck size.
        meaning: If True, print the back of the card instead of the front.
    """
    cards = load_builtin_deck()
    if not 1 <= index <= len(cards):
        console.print(
            f"[bold red]Error: card index must be between 1 and "
            f"{len(cards)}, got {index}.[/bold red]"
        )
        raise typer.Exit(code=1)

    card = cards[index - 1]
    console.print(f"[bold]Card {index} of {len(cards)}[/bold]")
    console.print(card.definition if meaning else card.term)


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------


def main():
    """
    Run the CLI application.

    If an unexpected exception occurs, print a bold red error message to the console and exit the process with status code 1.
    """
    try:
        app()
    except Exception as e:
        console.print(f"[bold red]UNEXPECTED ERROR: {e}[/bold red]")
        raise SystemExit(1)


if __name__ == "__main__":
    main()
