"""
File-backed persistence for decks.

One UTF-8 text file per deck, named `<deck name>.txt`, inside a single decks
directory. See `deck_format` for the record layout.
"""

import logging
from pathlib import Path
from typing import Dict, Union

from ..constants import (
    DECK_FILE_ENCODING,
    DECK_FILE_SUFFIX,
    DEFAULT_DECKS_DIRECTORY,
)
from ..models import Deck
from .deck_format import format_deck, parse_deck

logger = logging.getLogger(__name__)


class DeckStorage:
    """
    Saves, loads, renames and deletes deck files in one directory.

    Save and rename failures propagate as OSError. Loading never fails on bad
    data: a missing directory yields no decks, an unreadable file is skipped,
    and incomplete records inside a file are dropped.
    """

    def __init__(
        self, decks_dir: Union[str, Path] = DEFAULT_DECKS_DIRECTORY
    ):
        """
        Parameters:
            decks_dir (Union[str, Path]): Directory holding the deck files. Relative paths are resolved against the working directory at the time of each operation.
        """
        self.decks_dir = Path(decks_dir)

    def deck_path(self, name: str) -> Path:
        return self.decks_dir / f"{name}{DECK_FILE_SUFFIX}"

    def deck_file_exists(self, name: str) -> bool:
        return self.deck_path(name).is_file()

    def save_deck(self, name: str, deck: Deck) -> Path:
        """
        Write the deck to `<name>.txt`, replacing any previous contents.

        Creates the decks directory if needed. Flashcards with an empty
        question or answer are not written.

        Returns:
            Path: The file that was written.

        Raises:
            OSError: If the directory or file cannot be written.
        """
        file_path = self.deck_path(name)
        try:
            self.decks_dir.mkdir(parents=True, exist_ok=True)
            with open(
                file_path, "w", encoding=DECK_FILE_ENCODING, newline="\n"
            ) as f:
                f.write(format_deck(deck))
        except OSError as e:
            logger.error(f"Could not save deck '{name}' to {file_path}: {e}")
            raise
        logger.info(
            f"Saved deck '{name}' ({len(deck.get_flashcards())} cards) "
            f"to {file_path}"
        )
        return file_path

    def load_deck_file(self, file_path: Path) -> Deck:
        """
        Parse a single deck file. The deck is named after the file stem.

        Raises:
            OSError: If the file cannot be opened.
            UnicodeDecodeError: If the file is not valid UTF-8.
        """
        with open(file_path, "r", encoding=DECK_FILE_ENCODING) as f:
            return parse_deck(file_path.stem, f)

    def load_all_decks(self) -> Dict[str, Deck]:
        """
        Load every deck file in the decks directory.

        Returns:
            Dict[str, Deck]: Decks keyed by name, in file-name order. Empty if
            the directory does not exist. Files that cannot be read are
            logged and skipped.
        """
        if not self.decks_dir.is_dir():
            logger.info(
                f"Decks directory {self.decks_dir} does not exist; "
                "no decks loaded."
            )
            return {}

        decks: Dict[str, Deck] = {}
        deck_files = sorted(
            p for p in self.decks_dir.glob(f"*{DECK_FILE_SUFFIX}") if p.is_file()
        )
        for file_path in deck_files:
            try:
                deck = self.load_deck_file(file_path)
            except (OSError, UnicodeDecodeError) as e:
                logger.warning(f"Skipping unreadable deck file {file_path}: {e}")
                continue
            decks[deck.name] = deck

        logger.info(
            f"Loaded {len(decks)} deck(s) from {self.decks_dir}"
        )
        return decks

    def rename_deck_file(self, old_name: str, new_name: str) -> Path:
        """
        Rename `<old_name>.txt` to `<new_name>.txt`.

        Returns:
            Path: The new file path.

        Raises:
            FileNotFoundError: If there is no file for `old_name`.
            FileExistsError: If `<new_name>.txt` already exists.
            OSError: If the filesystem rename fails.
        """
        old_path = self.deck_path(old_name)
        new_path = self.deck_path(new_name)
        if not old_path.is_file():
            raise FileNotFoundError(
                f"Deck file for '{old_name}' not found: {old_path}"
            )
        if new_path.exists():
            raise FileExistsError(
                f"Deck file for '{new_name}' already exists: {new_path}"
            )
        try:
            old_path.rename(new_path)
        except OSError as e:
            logger.error(
                f"Could not rename deck file {old_path} to {new_path}: {e}"
            )
            raise
        logger.info(f"Renamed deck file {old_path} to {new_path}")
        return new_path

    def delete_deck_file(self, name: str) -> bool:
        """
        Delete `<name>.txt` if it exists.

        Returns:
            bool: True if a file was removed, False if there was none.
        """
        file_path = self.deck_path(name)
        try:
            file_path.unlink()
        except FileNotFoundError:
            logger.debug(f"No deck file to delete at {file_path}")
            return False
        logger.info(f"Deleted deck file {file_path}")
        return True
