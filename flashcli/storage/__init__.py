"""Deck file storage for flashcli.

`DeckStorage` is the public API. The module-level functions operate on the
default `data/decks` directory relative to the working directory.
"""

from pathlib import Path
from typing import Dict

from ..models import Deck
from .deck_storage import DeckStorage

__all__ = [
    "DeckStorage",
    "save_deck",
    "load_all_decks",
    "rename_deck_file",
    "delete_deck_file",
]


def save_deck(name: str, deck: Deck) -> Path:
    return DeckStorage().save_deck(name, deck)


def load_all_decks() -> Dict[str, Deck]:
    return DeckStorage().load_all_decks()


def rename_deck_file(old_name: str, new_name: str) -> Path:
    return DeckStorage().rename_deck_file(old_name, new_name)


def delete_deck_file(name: str) -> bool:
    return DeckStorage().delete_deck_file(name)
