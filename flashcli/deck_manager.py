"""
Registry of named decks and the current-deck selection.
"""

import logging
from typing import Dict, List, Mapping, Optional

from .exceptions import DeckNotFoundError, InvalidArgumentError
from .models import Deck, validate_deck_name
from .storage import DeckStorage

logger = logging.getLogger(__name__)


class DeckManager:
    """
    Holds the decks of one session and the deck selected for flashcard
    operations.

    The current deck is stored by name and resolved on every access, so
    deleting or renaming a deck never leaves a stale reference behind. File
    operations are delegated to the injected DeckStorage.
    """

    def __init__(self, storage: Optional[DeckStorage] = None):
        self.storage = storage if storage is not None else DeckStorage()
        self.decks: Dict[str, Deck] = {}
        self.current_deck_name: Optional[str] = None

    # --- Registry lifecycle ---

    def install_decks(self, decks: Mapping[str, Deck]) -> None:
        """Replace the registry with the given decks and clear the selection."""
        self.decks = dict(decks)
        self.current_deck_name = None

    def load_decks(self) -> Dict[str, Deck]:
        """Load all decks from storage into the registry."""
        loaded = self.storage.load_all_decks()
        self.install_decks(loaded)
        return self.decks

    def clear(self) -> None:
        self.decks.clear()
        self.current_deck_name = None

    # --- Lookup & selection ---

    def list_decks(self) -> List[Deck]:
        return list(self.decks.values())

    def get_deck(self, name: str) -> Deck:
        try:
            return self.decks[name]
        except KeyError:
            raise DeckNotFoundError(f"Deck '{name}' does not exist.") from None

    def select_deck(self, name: str) -> Deck:
        """
        Make `name` the current deck.

        Raises:
            DeckNotFoundError: If no deck has that name.
        """
        deck = self.get_deck(name)
        self.current_deck_name = name
        return deck

    @property
    def current_deck(self) -> Optional[Deck]:
        if self.current_deck_name is None:
            return None
        return self.decks.get(self.current_deck_name)

    def require_current_deck(self) -> Deck:
        deck = self.current_deck
        if deck is None:
            raise DeckNotFoundError("No deck is currently selected.")
        return deck

    # --- Mutations ---

    def _validate_new_name(self, name: str) -> str:
        cleaned = validate_deck_name(name)
        if cleaned in self.decks:
            raise InvalidArgumentError(f"Deck '{cleaned}' already exists.")
        # also covers files that were skipped at load time
        if self.storage.deck_file_exists(cleaned):
            raise InvalidArgumentError(
                f"A deck file for '{cleaned}' already exists."
            )
        return cleaned

    def create_deck(self, name: str) -> Deck:
        """
        Create an empty deck. The new deck is not selected.

        Raises:
            InvalidArgumentError: If the name is blank, contains a path separator, or is already taken.
        """
        cleaned = self._validate_new_name(name)
        deck = Deck(name=cleaned)
        self.decks[cleaned] = deck
        logger.info(f"Created deck '{cleaned}'")
        return deck

    def rename_deck(self, old_name: str, new_name: str) -> Deck:
        """
        Rename a deck in the registry and on disk.

        The backing file is renamed only if one exists; a deck that was never
        saved is renamed in memory alone. If the file rename fails the
        registry is left untouched.

        Raises:
            DeckNotFoundError: If `old_name` is not registered.
            InvalidArgumentError: If `new_name` is invalid or already taken.
            OSError: If the file rename fails.
        """
        deck = self.get_deck(old_name)
        cleaned = self._validate_new_name(new_name)

        if self.storage.deck_file_exists(old_name):
            self.storage.rename_deck_file(old_name, cleaned)

        # Re-key in place so registry order is preserved.
        self.decks = {
            (cleaned if key == old_name else key): value
            for key, value in self.decks.items()
        }
        deck.name = cleaned
        if self.current_deck_name == old_name:
            self.current_deck_name = cleaned
        logger.info(f"Renamed deck '{old_name}' to '{cleaned}'")
        return deck

    def delete_deck(self, name: str) -> Deck:
        """
        Remove a deck from the registry and delete its file.

        Raises:
            DeckNotFoundError: If no deck has that name.
        """
        deck = self.get_deck(name)
        self.storage.delete_deck_file(name)
        del self.decks[name]
        if self.current_deck_name == name:
            self.current_deck_name = None
        logger.info(f"Deleted deck '{name}'")
        return deck

    def save_deck(self, name: str) -> None:
        self.storage.save_deck(name, self.get_deck(name))

    def save_current_deck(self) -> None:
        deck = self.require_current_deck()
        self.storage.save_deck(deck.name, deck)
