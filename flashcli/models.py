"""
Deck and flashcard models.
"""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from .constants import FIRST_FLASHCARD_ID, FORBIDDEN_DECK_NAME_CHARS
from .exceptions import FlashcardNotFoundError, InvalidArgumentError


def validate_deck_name(name: str) -> str:
    """
    Check that a deck name can be used as a file name in the decks directory.

    Parameters:
        name (str): Candidate deck name.

    Returns:
        str: The name with surrounding whitespace removed.

    Raises:
        InvalidArgumentError: If the name is blank or contains a path separator.
    """
    cleaned = name.strip()
    if not cleaned:
        raise InvalidArgumentError("Deck name cannot be empty.")
    for char in FORBIDDEN_DECK_NAME_CHARS:
        if char in cleaned:
            raise InvalidArgumentError(
                f"Deck name '{cleaned}' cannot contain '{char}'."
            )
    return cleaned


def _clean_card_text(value: str, field_name: str) -> str:
    """Trim flashcard text and reject values the record format cannot hold."""
    cleaned = value.strip()
    if not cleaned:
        raise InvalidArgumentError(f"Flashcard {field_name} cannot be empty.")
    if "\n" in cleaned or "\r" in cleaned:
        raise InvalidArgumentError(
            f"Flashcard {field_name} must fit on a single line."
        )
    return cleaned


class Flashcard(BaseModel):
    """
    A question/answer pair with a learned flag.

    The id is unique within the owning deck and assigned by it.
    """

    model_config = ConfigDict(validate_assignment=True, extra="forbid")

    id: int = Field(
        ...,
        ge=FIRST_FLASHCARD_ID,
        description="Per-deck identifier, assigned sequentially from 1.",
    )
    question: str = Field(..., description="Question text. From 'Q:'.")
    answer: str = Field(..., description="Answer text. From 'A:'.")
    is_learned: bool = Field(
        default=False,
        description="Whether the card has been learned. From 'Learned:'.",
    )

    @property
    def is_persistable(self) -> bool:
        """Cards with a blank question or answer are skipped on save."""
        return bool(self.question.strip()) and bool(self.answer.strip())


class Deck(BaseModel):
    """
    Represents a named, ordered collection of flashcards.

    Name uniqueness is the registry's concern, not the deck's.
    """

    model_config = ConfigDict(validate_assignment=True, extra="forbid")

    name: str = Field(..., min_length=1, description="The name of the deck.")
    flashcards: List[Flashcard] = Field(
        default_factory=list, description="The cards in the deck."
    )

    def _next_id(self) -> int:
        if not self.flashcards:
            return FIRST_FLASHCARD_ID
        return max(card.id for card in self.flashcards) + 1

    def _find(self, flashcard_id: int) -> Flashcard:
        for card in self.flashcards:
            if card.id == flashcard_id:
                return card
        raise FlashcardNotFoundError(
            f"No flashcard with id {flashcard_id} in deck '{self.name}'."
        )

    def get_flashcards(self) -> List[Flashcard]:
        """Return the live ordered list of flashcards."""
        return self.flashcards

    @property
    def learned_count(self) -> int:
        return sum(1 for card in self.flashcards if card.is_learned)

    def create_flashcard(self, question: str, answer: str) -> Flashcard:
        """
        Append a new flashcard with the next sequential id.

        Parameters:
            question (str): Question text; surrounding whitespace is removed.
            answer (str): Answer text; surrounding whitespace is removed.

        Returns:
            Flashcard: The newly created card.

        Raises:
            InvalidArgumentError: If either text is empty after trimming or spans several lines.
        """
        card = Flashcard(
            id=self._next_id(),
            question=_clean_card_text(question, "question"),
            answer=_clean_card_text(answer, "answer"),
        )
        self.flashcards.append(card)
        return card

    def insert_flashcard(self, card: Flashcard) -> None:
        """Append a pre-built card without validating its content."""
        self.flashcards.append(card)

    def view_flashcard(self, flashcard_id: int) -> Flashcard:
        return self._find(flashcard_id)

    def edit_flashcard(
        self,
        flashcard_id: int,
        question: Optional[str] = None,
        answer: Optional[str] = None,
    ) -> Flashcard:
        """
        Replace the question and/or answer of an existing card in place.

        Values left as None are kept unchanged. Both are validated before
        either is assigned.
        """
        card = self._find(flashcard_id)
        new_question = (
            _clean_card_text(question, "question")
            if question is not None
            else card.question
        )
        new_answer = (
            _clean_card_text(answer, "answer")
            if answer is not None
            else card.answer
        )
        card.question = new_question
        card.answer = new_answer
        return card

    def delete_flashcard(self, flashcard_id: int) -> Flashcard:
        """
        Remove the card with the given id. Remaining ids are not renumbered.

        Raises:
            FlashcardNotFoundError: If no card has that id.
        """
        card = self._find(flashcard_id)
        self.flashcards.remove(card)
        return card

    def change_is_learned(self, flashcard_id: int, value: bool) -> Flashcard:
        card = self._find(flashcard_id)
        card.is_learned = value
        return card
