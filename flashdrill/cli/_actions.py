"""
Handlers for the interactive commands.

Each handler takes the running `StudySession`, talks to the user only
through `session.io` and lets recoverable `FlashdrillError`s propagate to
the command loop, which reports them.
"""

import logging
from pathlib import Path
from typing import Callable, Dict, List, Union

from flashdrill.csv_io import read_cards, write_cards
from flashdrill.exceptions import NotFoundError
from flashdrill.models import Flashcard
from flashdrill.quiz import QuizEngine, parse_round_count
from flashdrill.session import StudySession
from flashdrill.transcript import TranscriptIO

logger = logging.getLogger(__name__)

ActionHandler = Callable[[StudySession], None]

ACTION_PROMPT = (
    "Input the action (add, remove, import, export, ask, exit, log, "
    "hardest card, reset stats):"
)


def _input_unique(
    io: TranscriptIO, exists: Callable[[str], bool], retry_message: str
) -> str:
    """Read lines until one is not rejected by `exists`."""
    value = io.listen()
    while exists(value):
        io.say(retry_message.format(value))
        value = io.listen()
    return value


def add_card(session: StudySession) -> None:
    store, io = session.store, session.io
    io.say("The card:")
    term = _input_unique(
        io,
        lambda s: store.find_definition_by_term(s) is not None,
        'The card "{}" already exists. Try again:',
    )
    io.say("The definition of the card:")
    definition = _input_unique(
        io,
        lambda s: store.find_term_by_definition(s) is not None,
        'The definition "{}" already exists. Try again:',
    )
    store.create_or_update(Flashcard(term=term, definition=definition))
    io.say(f'The pair ("{term}":"{definition}") has been added.')


def remove_card(session: StudySession) -> None:
    term = session.io.ask("Which card?")
    if session.store.remove_by_term(term):
        session.io.say("The card has been removed.")
    else:
        session.io.say(f'Can\'t remove "{term}": there is no such card.')


def import_from_file(session: StudySession, path: Union[str, Path]) -> None:
    """Import `path` and report the result; a missing file is reported, not raised."""
    try:
        count = read_cards(session.store, path)
    except NotFoundError as e:
        logger.info(f"Import skipped: {e}")
        session.io.say("File not found.")
        return
    session.io.say(f"{count} cards have been loaded.")


def export_to_file(session: StudySession, path: Union[str, Path]) -> None:
    count = write_cards(session.store, path)
    session.io.say(f"{count} cards have been saved.")


def import_cards(session: StudySession) -> None:
    import_from_file(session, session.io.ask("File name:"))


def export_cards(session: StudySession) -> None:
    export_to_file(session, session.io.ask("File name:"))


def ask_cards(session: StudySession) -> None:
    rounds = parse_round_count(session.io.ask("How many times to ask?"))
    QuizEngine(session.store, session.io).run(rounds)


def save_log(session: StudySession) -> None:
    """
    Append the session transcript to a user-named file.

    The saved log ends with the confirmation line, which is shown only after
    the write succeeded.
    """
    filename = session.io.ask("File name:")
    message = "The log has been saved."
    session.transcript.append_to(filename, closing_line=message)
    session.io.say(message)


def describe_hardest(cards: List[Flashcard]) -> str:
    """Build the user-facing summary for `CardStore.hardest_cards()`."""
    if not cards:
        return "There are no cards with errors."
    if len(cards) == 1:
        card = cards[0]
        return (
            f'The hardest card is "{card.term}". '
            f"You have {card.mistakes} errors answering it."
        )
    terms = ", ".join(f'"{card.term}"' for card in cards)
    return (
        f"The hardest cards are {terms}. "
        f"You have {cards[0].mistakes} errors answering them."
    )


def hardest_card(session: StudySession) -> None:
    session.io.say(describe_hardest(session.store.hardest_cards()))


def reset_stats(session: StudySession) -> None:
    session.store.reset_stats()
    session.io.say("Card statistics have been reset.")


ACTIONS: Dict[str, ActionHandler] = {
    "add": add_card,
    "remove": remove_card,
    "import": import_cards,
    "export": export_cards,
    "ask": ask_cards,
    "log": save_log,
    "hardest card": hardest_card,
    "reset stats": reset_stats,
}
