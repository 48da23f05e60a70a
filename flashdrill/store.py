"""
This module defines the CardStore class, the in-memory collection of
flashcards shared by every command of a study session.

Cards are held in a dict keyed by a dense integer handle (0..n-1). Handles
are internal: removing a card moves the card with the highest handle into
the freed slot, so callers must never keep a handle across a removal.
"""

import logging
import random
from typing import Dict, Iterator, List, Optional

from .exceptions import EmptyStoreError
from .models import Flashcard

logger = logging.getLogger(__name__)


class CardStore:
    """
    Owns the set of flashcards and provides lookup, mutation and statistics.

    All lookups are linear scans; the store is sized for dozens to low
    thousands of cards.
    """

    def __init__(self, rng: Optional[random.Random] = None):
        """
        Create an empty store.

        Parameters:
            rng (Optional[random.Random]): Random source used by
                `get_random`. A fresh unseeded generator is used if omitted.
        """
        self._cards: Dict[int, Flashcard] = {}
        self._rng = rng or random.Random()

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self) -> Iterator[Flashcard]:
        return iter(list(self._cards.values()))

    def __contains__(self, term: object) -> bool:
        return self._find_handle(term) is not None

    def _find_handle(self, term: object) -> Optional[int]:
        for handle, card in self._cards.items():
            if card.term == term:
                return handle
        return None

    def find_definition_by_term(self, term: str) -> Optional[str]:
        """Return the definition of the first card with `term`, or None."""
        handle = self._find_handle(term)
        if handle is None:
            return None
        return self._cards[handle].definition

    def find_term_by_definition(self, definition: str) -> Optional[str]:
        """Return the term of the first card with `definition`, or None."""
        for card in self._cards.values():
            if card.definition == definition:
                return card.term
        return None

    def terms_for_definition(
        self, definition: str, exclude_term: Optional[str] = None
    ) -> List[str]:
        """
        Return every term whose definition equals `definition`.

        A well-formed store yields at most one term, but an imported file can
        break definition uniqueness, so the result is sorted to give callers a
        deterministic first choice.

        Parameters:
            definition (str): Definition to match exactly.
            exclude_term (Optional[str]): Term to leave out of the result.

        Returns:
            List[str]: Matching terms in alphabetical order.
        """
        return sorted(
            card.term
            for card in self._cards.values()
            if card.definition == definition and card.term != exclude_term
        )

    def create_or_update(self, card: Flashcard) -> None:
        """
        Insert `card`, or replace the existing card that has the same term.

        A replacement takes the new card's definition and mistake count
        wholesale; the previous mistake history is discarded.
        """
        handle = self._find_handle(card.term)
        if handle is None:
            handle = len(self._cards)
            logger.debug(f"Adding card '{card.term}' at handle {handle}")
        else:
            logger.debug(f"Replacing card '{card.term}' at handle {handle}")
        self._cards[handle] = card.model_copy()

    def remove_by_term(self, term: str) -> bool:
        """
        Remove the card with `term`.

        Returns:
            bool: True if a card was removed, False if no card matched.
        """
        handle = self._find_handle(term)
        if handle is None:
            return False
        last_handle = len(self._cards) - 1
        self._cards[handle] = self._cards[last_handle]
        del self._cards[last_handle]
        logger.debug(f"Removed card '{term}'")
        return True

    def get_random(self) -> Flashcard:
        """
        Pick one card uniformly at random.

        Raises:
            EmptyStoreError: If the store holds no cards.
        """
        if not self._cards:
            raise EmptyStoreError("Cannot pick a card from an empty store.")
        return self._cards[self._rng.randrange(len(self._cards))]

    def increment_mistakes(self, term: str) -> None:
        """Add one mistake to the card with `term`; no-op if it is absent."""
        handle = self._find_handle(term)
        if handle is not None:
            self._cards[handle].mistakes += 1

    def reset_stats(self) -> None:
        for card in self._cards.values():
            card.mistakes = 0

    def hardest_cards(self) -> List[Flashcard]:
        """
        Return the cards sharing the highest mistake count.

        Returns:
            List[Flashcard]: Cards whose mistakes equal the maximum, or an
            empty list when no card has any mistakes.
        """
        max_mistakes = max(
            (card.mistakes for card in self._cards.values()), default=0
        )
        if max_mistakes == 0:
            return []
        return [
            card
            for card in self._cards.values()
            if card.mistakes == max_mistakes
        ]
