"""
Rich rendering helpers for the flashcli commands.
"""

from typing import List

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from flashcli.models import Deck, Flashcard

CREATE_SUCCESS = (
    "Added a new flashcard.\n"
    "Question: {question}\n"
    "Answer: {answer}\n"
    "You have {count} flashcard(s) in your deck."
)


def display_created(cons: Console, card: Flashcard, deck: Deck) -> None:
    cons.print(
        CREATE_SUCCESS.format(
            question=card.question,
            answer=card.answer,
            count=len(deck.get_flashcards()),
        ),
        markup=False,
    )


def display_flashcard(cons: Console, card: Flashcard) -> None:
    """Show a single card's question, then its answer."""
    status = "learned" if card.is_learned else "not learned"
    cons.print(
        Panel(
            Text(card.question),
            title=f"Flashcard {card.id}: Question",
            subtitle=status,
            border_style="green",
        )
    )
    cons.print(Panel(Text(card.answer), title="Answer", border_style="blue"))


def display_deck(cons: Console, deck: Deck) -> None:
    """
    Print a table of every flashcard in the deck.

    Parameters:
        cons (Console): Rich Console used to print the table.
        deck (Deck): Deck whose flashcards are listed in deck order.
    """
    cards = deck.get_flashcards()
    if not cards:
        cons.print(
            f"[yellow]Deck '{escape(deck.name)}' has no flashcards.[/yellow]"
        )
        return

    table = Table(title=f"Deck: {escape(deck.name)}")
    table.add_column("ID", style="cyan")
    table.add_column("Question", style="magenta")
    table.add_column("Answer")
    table.add_column("Learned", style="yellow")
    for card in cards:
        table.add_row(
            str(card.id),
            Text(card.question),
            Text(card.answer),
            "yes" if card.is_learned else "no",
        )
    cons.print(table)


def display_decks(cons: Console, decks: List[Deck]) -> None:
    """Print one row per deck with its card and learned counts."""
    if not decks:
        cons.print("[yellow]No decks found.[/yellow]")
        return

    table = Table(title="Decks")
    table.add_column("Deck Name", style="cyan")
    table.add_column("Card Count", style="magenta")
    table.add_column("Learned", style="yellow")
    for deck in decks:
        table.add_row(
            Text(deck.name),
            str(len(deck.get_flashcards())),
            str(deck.learned_count),
        )
    cons.print(table)
