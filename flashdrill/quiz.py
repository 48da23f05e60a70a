"""
Quiz engine: asks random cards, grades answers and records mistakes.
"""

import logging
import re
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict

from .exceptions import EmptyStoreError, InvalidInputError
from .models import Flashcard
from .store import CardStore
from .transcript import TranscriptIO

logger = logging.getLogger(__name__)


class Outcome(str, Enum):
    """How a single quiz answer was graded."""

    CORRECT = "correct"
    WRONG_OTHER_CARD = "wrong_other_card"
    WRONG = "wrong"


class QuizResult(BaseModel):
    """The graded result of one quiz round."""

    model_config = ConfigDict(frozen=True)

    term: str
    definition: str
    answer: str
    outcome: Outcome
    other_term: Optional[str] = None

    @property
    def is_correct(self) -> bool:
        return self.outcome is Outcome.CORRECT

    def message(self) -> str:
        """Return the feedback line shown to the user for this round."""
        if self.outcome is Outcome.CORRECT:
            return "Correct!"
        if self.outcome is Outcome.WRONG_OTHER_CARD:
            return (
                f'Wrong. The right answer is "{self.definition}", '
                f'but your definition is correct for "{self.other_term}".'
            )
        return f'Wrong. The right answer is "{self.definition}".'


def parse_round_count(text: str) -> int:
    """
    Parse the number of quiz rounds typed by the user.

    Raises:
        InvalidInputError: If `text` is not a non-negative whole number.
    """
    stripped = text.strip()
    if not re.fullmatch(r"[+-]?[0-9]+", stripped):
        raise InvalidInputError(f"Not a whole number: {text!r}")
    rounds = int(stripped)
    if rounds < 0:
        raise InvalidInputError(f"Round count cannot be negative: {rounds}")
    return rounds


def check_answer(store: CardStore, card: Flashcard, answer: str) -> QuizResult:
    """
    Grade `answer` for `card` and record a mistake when it is wrong.

    The comparison is exact and case-sensitive. A wrong answer that matches
    another card's definition names that card; if several cards share the
    definition the alphabetically first term is used.

    Parameters:
        store (CardStore): Store holding `card`; its mistake counter is
            incremented on a wrong answer.
        card (Flashcard): The card that was asked.
        answer (str): The user's answer, verbatim.

    Returns:
        QuizResult: The graded round.
    """
    if answer == card.definition:
        return QuizResult(
            term=card.term,
            definition=card.definition,
            answer=answer,
            outcome=Outcome.CORRECT,
        )

    store.increment_mistakes(card.term)
    other_terms = store.terms_for_definition(answer, exclude_term=card.term)
    if other_terms:
        return QuizResult(
            term=card.term,
            definition=card.definition,
            answer=answer,
            outcome=Outcome.WRONG_OTHER_CARD,
            other_term=other_terms[0],
        )
    return QuizResult(
        term=card.term,
        definition=card.definition,
        answer=answer,
        outcome=Outcome.WRONG,
    )


class QuizEngine:
    """Runs question/answer rounds against a card store."""

    def __init__(self, store: CardStore, io: TranscriptIO):
        self.store = store
        self.io = io

    def ask_card(self, card: Flashcard) -> QuizResult:
        answer = self.io.ask(f'Print the definition of "{card.term}":')
        result = check_answer(self.store, card, answer)
        self.io.say(result.message())
        return result

    def run(self, rounds: int) -> List[QuizResult]:
        """
        Ask `rounds` randomly drawn cards.

        Raises:
            EmptyStoreError: If `rounds` is positive and the store is empty.
        """
        if rounds > 0 and not len(self.store):
            raise EmptyStoreError("There are no cards to ask about.")

        results = []
        for _ in range(rounds):
            results.append(self.ask_card(self.store.get_random()))

        wrong = sum(1 for result in results if not result.is_correct)
        logger.info(f"Quiz finished: {rounds} rounds, {wrong} wrong")
        return results
