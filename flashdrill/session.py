"""
The study session: state shared by every command for the process lifetime.
"""

import random
from typing import Optional

from rich.console import Console

from .store import CardStore
from .transcript import Transcript, TranscriptIO


class StudySession:
    """
    Holds the card store and the recording console for one run of the tool.

    Parameters:
        console (Optional[Console]): Console used for user I/O.
        seed (Optional[int]): Seed for the store's random card picker.
    """

    def __init__(
        self, console: Optional[Console] = None, seed: Optional[int] = None
    ):
        self.store = CardStore(rng=random.Random(seed))
        self.transcript = Transcript()
        self.io = TranscriptIO(console=console, transcript=self.transcript)
