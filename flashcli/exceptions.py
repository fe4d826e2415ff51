class FlashCLIError(Exception):
    """Base exception for errors in deck and flashcard operations.

    Storage failures are not wrapped: file I/O problems propagate as the
    OSError raised by the filesystem call.
    """


class InvalidArgumentError(FlashCLIError):
    """Raised when a deck name or flashcard text is rejected.

    Covers blank deck names, names containing a path separator, names
    already taken by a registered deck or an existing deck file, and
    empty or multi-line question/answer text.
    """


class NotFoundError(FlashCLIError):
    """Raised when an addressed deck or flashcard does not exist."""


class DeckNotFoundError(NotFoundError):
    """Raised when no registered deck has the given name, or when a
    flashcard operation needs a current deck and none is selected."""


class FlashcardNotFoundError(NotFoundError):
    """Raised when the deck holds no flashcard with the requested id.

    Ids are per deck, so the same id may exist in a different deck.
    """
