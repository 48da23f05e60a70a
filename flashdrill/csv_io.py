"""
Reading and writing card sets as CSV files.

Each card is one ``term,definition,mistakes`` record with standard CSV
quoting and no header row.
"""

import csv
import logging
from pathlib import Path
from typing import List, Sequence, Union

from .exceptions import CardIOError, NotFoundError
from .models import Flashcard
from .store import CardStore

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def _parse_mistakes(raw: str) -> int:
    """Parse a mistake counter, treating anything but a non-negative int as 0."""
    try:
        mistakes = int(raw.strip())
    except ValueError:
        logger.warning(f"Invalid mistake count {raw!r}; using 0")
        return 0
    if mistakes < 0:
        logger.warning(f"Negative mistake count {raw!r}; using 0")
        return 0
    return mistakes


def _record_to_card(record: Sequence[str]) -> Flashcard:
    mistakes = _parse_mistakes(record[2]) if len(record) > 2 else 0
    return Flashcard(term=record[0], definition=record[1], mistakes=mistakes)


def write_cards(store: CardStore, path: PathLike) -> int:
    """
    Write every card in `store` to `path`, replacing any existing file.

    Parameters:
        store (CardStore): Cards to serialize.
        path (PathLike): Destination file.

    Returns:
        int: Number of records written.

    Raises:
        CardIOError: If the file cannot be created or written.
    """
    path = Path(path)
    count = 0
    try:
        with path.open("w", encoding="utf-8", newline="") as f:
            writer = csv.writer(f)
            for card in store:
                writer.writerow(card.as_record())
                count += 1
    except (OSError, ValueError) as e:
        logger.error(f"Could not write cards to {path}: {e}")
        raise CardIOError(f"Could not write to {path}: {e}", e) from e

    logger.info(f"Exported {count} cards to {path}")
    return count


def read_cards(store: CardStore, path: PathLike) -> int:
    """
    Load cards from `path` into `store`.

    Every record is parsed before the store is touched, so a failed read
    leaves the store unchanged. Records go through
    `CardStore.create_or_update`, which means an imported card replaces an
    existing card with the same term, mistake count included.

    Parameters:
        store (CardStore): Store to update.
        path (PathLike): CSV file to read.

    Returns:
        int: Number of cards applied to the store.

    Raises:
        NotFoundError: If the file does not exist or cannot be opened.
        CardIOError: If the file is opened but cannot be decoded or parsed.
    """
    path = Path(path)
    try:
        f = path.open("r", encoding="utf-8", newline="")
    except (OSError, ValueError) as e:
        logger.info(f"Card file {path} could not be opened: {e}")
        raise NotFoundError(f"File not found: {path}", e) from e

    cards: List[Flashcard] = []
    with f:
        try:
            for line_no, record in enumerate(csv.reader(f), start=1):
                if not record:
                    continue
                if len(record) < 2:
                    logger.warning(
                        f"Skipping record {line_no} in {path.name}: "
                        f"expected at least 2 fields, got {len(record)}"
                    )
                    continue
                cards.append(_record_to_card(record))
        except (csv.Error, UnicodeDecodeError) as e:
            logger.error(f"Could not parse {path}: {e}")
            raise CardIOError(f"Could not read {path}: {e}", e) from e
        except OSError as e:
            logger.error(f"Could not read {path}: {e}")
            raise CardIOError(f"Could not read {path}: {e}", e) from e

    for card in cards:
        store.create_or_update(card)
    logger.info(f"Imported {len(cards)} cards from {path}")
    return len(cards)
