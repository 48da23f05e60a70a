"""Flashdrill - a command-line flashcard drill with mistake tracking."""

from .models import Flashcard
from .store import CardStore
from .csv_io import read_cards, write_cards
from .quiz import QuizEngine, QuizResult, Outcome
from .session import StudySession
from .transcript import Transcript, TranscriptIO

__all__ = [
    "Flashcard",
    "CardStore",
    "read_cards",
    "write_cards",
    "QuizEngine",
    "QuizResult",
    "Outcome",
    "StudySession",
    "Transcript",
    "TranscriptIO",
]
