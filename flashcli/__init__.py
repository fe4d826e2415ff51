"""flashcli - question/answer flashcard decks stored as plain text files."""

from .models import Deck, Flashcard
from .deck_manager import DeckManager
from .exceptions import (
    DeckNotFoundError,
    FlashCLIError,
    FlashcardNotFoundError,
    InvalidArgumentError,
    NotFoundError,
)
from .storage import DeckStorage, load_all_decks, save_deck

__all__ = [
    "Deck",
    "Flashcard",
    "DeckManager",
    "DeckStorage",
    "FlashCLIError",
    "InvalidArgumentError",
    "NotFoundError",
    "DeckNotFoundError",
    "FlashcardNotFoundError",
    "load_all_decks",
    "save_deck",
]
