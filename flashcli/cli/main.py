"""
CLI entry point for flashcli.
"""

# Standard library imports
from pathlib import Path
from typing import Optional

# Third-party imports
import typer
from rich.console import Console
from rich.markup import escape

# Local application imports
from flashcli.constants import DEFAULT_DECKS_DIRECTORY
from flashcli.deck_manager import DeckManager
from flashcli.exceptions import FlashCLIError, NotFoundError
from flashcli.storage import DeckStorage
from flashcli.cli._display import (
    display_created,
    display_deck,
    display_decks,
    display_flashcard,
)


console = Console()

app = typer.Typer(
    name="flashcli",
    help="FlashCLI: question/answer flashcard decks stored as text files.",
    add_completion=False,
    rich_markup_mode="markdown",
)


# ---------------------------------------------------------------------------
# Shared options & helpers
# ---------------------------------------------------------------------------

_decks_dir_option = typer.Option(  # noqa: B008
    DEFAULT_DECKS_DIRECTORY,
    "--decks-dir",
    help="Directory holding the deck files. "
    "Falls back to FLASHCLI_DECKS_DIR env var.",
    envvar="FLASHCLI_DECKS_DIR",
)


def _open_session(
    decks_dir: Path, deck_name: Optional[str] = None
) -> DeckManager:
    """
    Load every deck from `decks_dir` into a new DeckManager.

    Parameters:
        decks_dir (Path): Directory containing the deck files.
        deck_name (Optional[str]): If given, this deck is selected as current.

    Raises:
        DeckNotFoundError: If `deck_name` is given but no such deck exists.
    """
    manager = DeckManager(storage=DeckStorage(decks_dir))
    manager.load_decks()
    if deck_name is not None:
        manager.select_deck(deck_name)
    return manager


def _fail(e: Exception) -> typer.Exit:
    """Print an error for a failed command and build the exit to raise."""
    if isinstance(e, NotFoundError):
        console.print(
            f"[bold red]Not found:[/bold red] {escape(str(e))}",
            highlight=False,
        )
    elif isinstance(e, FlashCLIError):
        console.print(
            f"[bold red]Invalid input:[/bold red] {escape(str(e))}",
            highlight=False,
        )
    else:
        console.print(
            f"[bold red]A storage error occurred:[/bold red] {escape(str(e))}",
            highlight=False,
        )
    return typer.Exit(code=1)


# ---------------------------------------------------------------------------
# Deck commands
# ---------------------------------------------------------------------------


@app.command("decks")
def list_decks(decks_dir: Path = _decks_dir_option):
    """List all decks with their card counts."""
    try:
        manager = _open_session(decks_dir)
    except (FlashCLIError, OSError) as e:
        raise _fail(e) from e
    display_decks(console, manager.list_decks())


@app.command("new-deck")
def new_deck(
    name: str = typer.Argument(..., help="Name of the deck to create."),  # noqa: B008
    decks_dir: Path = _decks_dir_option,
):
    """Create a new, empty deck."""
    try:
        manager = _open_session(decks_dir)
        deck = manager.create_deck(name)
        manager.save_deck(deck.name)
    except (FlashCLIError, OSError) as e:
        raise _fail(e) from e
    console.print(
        f"[green]Created deck[/green] [bold cyan]{escape(deck.name)}[/bold cyan]"
    )


@app.command("rename-deck")
def rename_deck(
    old_name: str = typer.Argument(..., help="Current deck name."),  # noqa: B008
    new_name: str = typer.Argument(..., help="New deck name."),  # noqa: B008
    decks_dir: Path = _decks_dir_option,
):
    """Rename a deck and its file."""
    try:
        manager = _open_session(decks_dir)
        deck = manager.rename_deck(old_name, new_name)
    except (FlashCLIError, OSError) as e:
        raise _fail(e) from e
    console.print(
        f"[green]Renamed deck[/green] [cyan]{escape(old_name)}[/cyan] "
        f"to [bold cyan]{escape(deck.name)}[/bold cyan]"
    )


@app.command("delete-deck")
def delete_deck(
    name: str = typer.Argument(..., help="Name of the deck to delete."),  # noqa: B008
    decks_dir: Path = _decks_dir_option,
    yes: bool = typer.Option(
        False, "--yes", "-y", help="Bypass confirmation prompt."
    ),
):
    """Delete a deck and its file."""
    try:
        manager = _open_session(decks_dir)
        manager.get_deck(name)
    except (FlashCLIError, OSError) as e:
        raise _fail(e) from e

    if not yes:
        confirmed = typer.confirm(
            f"Are you sure you want to delete deck '{name}'?"
        )
        if not confirmed:
            console.print("Delete operation cancelled.")
            raise typer.Exit()

    try:
        manager.delete_deck(name)
    except (FlashCLIError, OSError) as e:
        raise _fail(e) from e
    console.print(
        f"[green]Deleted deck[/green] [cyan]{escape(name)}[/cyan]"
    )


# ---------------------------------------------------------------------------
# Flashcard commands
# ---------------------------------------------------------------------------


@app.command("add")
def add_flashcard(
    deck_name: str = typer.Argument(..., help="Deck to add the card to."),  # noqa: B008
    question: str = typer.Option(..., "--question", "-q", help="Question text."),  # noqa: B008
    answer: str = typer.Option(..., "--answer", "-a", help="Answer text."),  # noqa: B008
    decks_dir: Path = _decks_dir_option,
):
    """Add a flashcard to a deck."""
    try:
        manager = _open_session(decks_dir, deck_name)
        deck = manager.require_current_deck()
        card = deck.create_flashcard(question, answer)
        manager.save_current_deck()
    except (FlashCLIError, OSError) as e:
        raise _fail(e) from e
    display_created(console, card, deck)


@app.command("list")
def list_flashcards(
    deck_name: str = typer.Argument(..., help="Deck to list."),  # noqa: B008
    decks_dir: Path = _decks_dir_option,
):
    """List the flashcards of a deck."""
    try:
        manager = _open_session(decks_dir, deck_name)
    except (FlashCLIError, OSError) as e:
        raise _fail(e) from e
    display_deck(console, manager.require_current_deck())


@app.command("view")
def view_flashcard(
    deck_name: str = typer.Argument(..., help="Deck holding the card."),  # noqa: B008
    flashcard_id: int = typer.Argument(..., help="Flashcard id."),  # noqa: B008
    decks_dir: Path = _decks_dir_option,
):
    """Show one flashcard's question and answer."""
    try:
        manager = _open_session(decks_dir, deck_name)
        card = manager.require_current_deck().view_flashcard(flashcard_id)
    except (FlashCLIError, OSError) as e:
        raise _fail(e) from e
    display_flashcard(console, card)


@app.command("edit")
def edit_flashcard(
    deck_name: str = typer.Argument(..., help="Deck holding the card."),  # noqa: B008
    flashcard_id: int = typer.Argument(..., help="Flashcard id."),  # noqa: B008
    question: Optional[str] = typer.Option(None, "--question", "-q", help="New question."),  # noqa: B008
    answer: Optional[str] = typer.Option(None, "--answer", "-a", help="New answer."),  # noqa: B008
    decks_dir: Path = _decks_dir_option,
):
    """Change a flashcard's question and/or answer."""
    if question is None and answer is None:
        console.print("[bold red]Error: give --question and/or --answer to edit.[/bold red]")
        raise typer.Exit(code=1)
    try:
        manager = _open_session(decks_dir, deck_name)
        card = manager.require_current_deck().edit_flashcard(
            flashcard_id, question=question, answer=answer
        )
        manager.save_current_deck()
    except (FlashCLIError, OSError) as e:
        raise _fail(e) from e
    display_flashcard(console, card)


@app.command("delete")
def delete_flashcard(
    deck_name: str = typer.Argument(..., help="Deck holding the card."),  # noqa: B008
    flashcard_id: int = typer.Argument(..., help="Flashcard id."),  # noqa: B008
    decks_dir: Path = _decks_dir_option,
):
    """Delete a flashcard from a deck."""
    try:
        manager = _open_session(decks_dir, deck_name)
        deck = manager.require_current_deck()
        card = deck.delete_flashcard(flashcard_id)
        manager.save_current_deck()
    except (FlashCLIError, OSError) as e:
        raise _fail(e) from e
    console.print(
        f"[green]Deleted flashcard {card.id}.[/green] "
        f"You have {len(deck.get_flashcards())} flashcard(s) in your deck.",
        highlight=False,
    )


@app.command("mark")
def mark_flashcard(
    deck_name: str = typer.Argument(..., help="Deck holding the card."),  # noqa: B008
    flashcard_id: int = typer.Argument(..., help="Flashcard id."),  # noqa: B008
    unlearned: bool = typer.Option(
        False, "--unlearned", help="Mark the card as not learned instead."
    ),
    decks_dir: Path = _decks_dir_option,
):
    """Mark a flashcard as learned (or not learned with --unlearned)."""
    try:
        manager = _open_session(decks_dir, deck_name)
        card = manager.require_current_deck().change_is_learned(
            flashcard_id, not unlearned
        )
        manager.save_current_deck()
    except (FlashCLIError, OSError) as e:
        raise _fail(e) from e
    status = "learned" if card.is_learned else "not learned"
    console.print(
        f"[green]Flashcard {card.id} marked as {status}.[/green]",
        highlight=False,
    )


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
        console.print(
            f"[bold red]UNEXPECTED ERROR: {escape(str(e))}[/bold red]"
        )
        raise SystemExit(1)


if __name__ == "__main__":
    main()
