"""
Deck storage constants.

Static values shared by the model, storage and CLI layers.
No runtime configuration - the CLI resolves the decks directory itself.
"""
from pathlib import Path
from typing import Tuple

# Deck files live here, relative to the working directory.
DEFAULT_DECKS_DIRECTORY: Path = Path("data") / "decks"
DECK_FILE_SUFFIX: str = ".txt"
DECK_FILE_ENCODING: str = "utf-8"

# Record line prefixes, in the order they are written.
QUESTION_PREFIX: str = "Q:"
ANSWER_PREFIX: str = "A:"
LEARNED_PREFIX: str = "Learned:"

LEARNED_TRUE: str = "true"
LEARNED_FALSE: str = "false"

# Characters that would let a deck name escape the decks directory.
FORBIDDEN_DECK_NAME_CHARS: Tuple[str, ...] = ("/", "\\")

FIRST_FLASHCARD_ID: int = 1
