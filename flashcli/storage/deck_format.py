"""
Conversion between Deck models and the plain-text deck file format.

A deck file is a sequence of records, each terminated by a blank line:

    Q: <question>
    A: <answer>
    Learned: <true|false>

The parser is deliberately lenient so that a damaged file still yields every
record that can be recovered.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List, Optional

from ..constants import (
    ANSWER_PREFIX,
    FIRST_FLASHCARD_ID,
    LEARNED_FALSE,
    LEARNED_PREFIX,
    LEARNED_TRUE,
    QUESTION_PREFIX,
)
from ..models import Deck, Flashcard

logger = logging.getLogger(__name__)


def format_flashcard(card: Flashcard) -> str:
    """Render one flashcard as a record, including its terminating blank line."""
    learned = LEARNED_TRUE if card.is_learned else LEARNED_FALSE
    return (
        f"{QUESTION_PREFIX} {card.question}\n"
        f"{ANSWER_PREFIX} {card.answer}\n"
        f"{LEARNED_PREFIX} {learned}\n"
        "\n"
    )


def format_deck(deck: Deck) -> str:
    """
    Render every persistable flashcard of the deck, in deck order.

    Cards with a blank question or answer are left out.
    """
    records = []
    for card in deck.get_flashcards():
        if not card.is_persistable:
            logger.debug(
                f"Skipping flashcard {card.id} in deck '{deck.name}': "
                "empty question or answer."
            )
            continue
        records.append(format_flashcard(card))
    return "".join(records)


class _ParserState(Enum):
    AWAITING_Q = "awaiting_q"
    AWAITING_A = "awaiting_a"
    AWAITING_LEARNED_OR_BLANK = "awaiting_learned_or_blank"


@dataclass
class _PendingRecord:
    question: str
    answer: Optional[str] = None
    is_learned: bool = False

    @property
    def is_complete(self) -> bool:
        return bool(self.question) and bool(self.answer)


def parse_learned(value: str) -> bool:
    """Interpret a 'Learned:' value; anything but 'true' counts as not learned."""
    return value.strip().lower() == LEARNED_TRUE


class DeckFileParser:
    """
    Finite-state parser turning deck file lines into flashcards.

    States:
        AWAITING_Q: between records.
        AWAITING_A: a question has been read.
        AWAITING_LEARNED_OR_BLANK: question and answer have been read.

    A 'Q:' line always opens a new record. A blank line or the end of input
    closes the pending record, which is kept only if it has both a question
    and an answer. Unrecognised lines are ignored.
    """

    def __init__(self) -> None:
        self._state = _ParserState.AWAITING_Q
        self._pending: Optional[_PendingRecord] = None
        self._cards: List[Flashcard] = []
        self.dropped_records = 0

    def _finalize(self) -> None:
        pending = self._pending
        if pending is not None:
            if pending.is_complete:
                self._cards.append(
                    Flashcard(
                        id=FIRST_FLASHCARD_ID + len(self._cards),
                        question=pending.question,
                        answer=pending.answer,
                        is_learned=pending.is_learned,
                    )
                )
            else:
                self.dropped_records += 1
        self._pending = None
        self._state = _ParserState.AWAITING_Q

    def feed(self, line: str) -> None:
        """Advance the state machine by one line."""
        stripped = line.strip()

        if not stripped:
            self._finalize()
            return

        if stripped.startswith(QUESTION_PREFIX):
            self._finalize()
            question = stripped[len(QUESTION_PREFIX):].strip()
            self._pending = _PendingRecord(question=question)
            self._state = _ParserState.AWAITING_A
        elif stripped.startswith(ANSWER_PREFIX):
            if self._state is _ParserState.AWAITING_Q:
                return
            self._pending.answer = stripped[len(ANSWER_PREFIX):].strip()
            self._state = _ParserState.AWAITING_LEARNED_OR_BLANK
        elif stripped.startswith(LEARNED_PREFIX):
            if self._state is _ParserState.AWAITING_Q:
                return
            self._pending.is_learned = parse_learned(
                stripped[len(LEARNED_PREFIX):]
            )

    def close(self) -> List[Flashcard]:
        """Finish parsing and return the recovered cards in file order."""
        self._finalize()
        return self._cards

    @property
    def state(self) -> str:
        return self._state.value


def parse_flashcards(lines: Iterable[str]) -> List[Flashcard]:
    """Parse an iterable of lines into flashcards numbered from 1."""
    parser = DeckFileParser()
    for line in lines:
        parser.feed(line)
    cards = parser.close()
    if parser.dropped_records:
        logger.warning(
            f"Dropped {parser.dropped_records} incomplete record(s) "
            "while parsing deck file."
        )
    return cards


def parse_deck(name: str, lines: Iterable[str]) -> Deck:
    """Build a Deck named `name` from the lines of its file."""
    deck = Deck(name=name)
    for card in parse_flashcards(lines):
        deck.insert_flashcard(card)
    return deck

