"""
CLI entry point for flashdrill.
"""

# Standard library imports
import logging
from pathlib import Path
from typing import Optional

# Third-party imports
import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.text import Text

# Local application imports
from flashdrill.config import Settings, get_settings
from flashdrill.csv_io import read_cards
from flashdrill.exceptions import (
    CardIOError,
    FlashdrillError,
    InvalidInputError,
    NotFoundError,
)
from flashdrill.session import StudySession
from flashdrill.store import CardStore
from flashdrill.cli._actions import (
    ACTION_PROMPT,
    ACTIONS,
    describe_hardest,
    export_to_file,
    import_from_file,
)

logger = logging.getLogger(__name__)

console = Console()

app = typer.Typer(
    name="flashdrill",
    help="Flashdrill: drill flashcards from the command line.",
    add_completion=False,
    rich_markup_mode="markdown",
)


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level,
        format="%(asctime)s:%(levelname)s:%(name)s:%(message)s",
    )


# ---------------------------------------------------------------------------
# Interactive loop
# ---------------------------------------------------------------------------


def _dispatch(session: StudySession, action: str) -> None:
    """
    Run the handler for `action` and report recoverable errors to the user.

    Unknown actions are answered with "Unknown command!". `EOFError` is not
    handled here; the caller ends the session on it.
    """
    handler = ACTIONS.get(action)
    if handler is None:
        session.io.say("Unknown command!")
        return
    try:
        handler(session)
    except InvalidInputError as e:
        logger.warning(f"Invalid input for '{action}': {e}")
        session.io.say("Please enter a whole number.")
    except FlashdrillError as e:
        logger.warning(f"Command '{action}' failed: {e}")
        session.io.say(str(e))


def run_session(
    session: StudySession,
    import_from: Optional[Path] = None,
    export_to: Optional[Path] = None,
) -> None:
    """
    Run the interactive command loop until the user types ``exit``.

    Parameters:
        session (StudySession): Session whose store and I/O the loop uses.
        import_from (Optional[Path]): Card file loaded before the loop.
        export_to (Optional[Path]): Card file written after the loop.

    Closing standard input ends the loop the same way ``exit`` does.
    """
    if import_from:
        try:
            import_from_file(session, import_from)
        except FlashdrillError as e:
            logger.warning(f"Could not import {import_from}: {e}")
            session.io.say(str(e))

    while True:
        session.io.say(ACTION_PROMPT)
        try:
            action = session.io.listen()
            if action != "exit":
                _dispatch(session, action)
        except EOFError:
            logger.info("Input closed; ending session.")
            break
        session.io.say()
        if action == "exit":
            break

    if export_to:
        try:
            export_to_file(session, export_to)
        except CardIOError as e:
            session.io.say(str(e))
    session.io.say("Bye bye!")


# ---------------------------------------------------------------------------
# Default command: interactive session
# ---------------------------------------------------------------------------


@app.callback(invoke_without_command=True)
def drill(
    ctx: typer.Context,
    import_from: Optional[Path] = typer.Option(  # noqa: B008
        None,
        "--import_from",
        help="CSV card file to load before the session starts. "
        "Falls back to FLASHDRILL_IMPORT_FROM.",
    ),
    export_to: Optional[Path] = typer.Option(  # noqa: B008
        None,
        "--export_to",
        help="CSV card file to save the cards to on exit. "
        "Falls back to FLASHDRILL_EXPORT_TO.",
    ),
    seed: Optional[int] = typer.Option(
        None,
        "--seed",
        help="Seed for picking quiz cards, for reproducible sessions.",
    ),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Log debug output to stderr."
    ),
):
    """
    Start an interactive session: add, remove, import, export and quiz
    flashcards, then optionally save them on exit.
    """
    if ctx.invoked_subcommand is not None:
        return

    settings: Settings = get_settings(
        import_from=import_from,
        export_to=export_to,
        seed=seed,
        log_level="DEBUG" if verbose else None,
    )
    _configure_logging(settings.log_level)

    session = StudySession(console=console, seed=settings.seed)
    run_session(
        session,
        import_from=settings.import_from,
        export_to=settings.export_to,
    )


# ---------------------------------------------------------------------------
# Stats command
# ---------------------------------------------------------------------------


def _display_card_table(cons: Console, store: CardStore) -> None:
    """
    Print every card with its mistake count, most-missed first.

    Parameters:
        cons (Console): Rich Console used to print the table.
        store (CardStore): Cards to list.
    """
    table = Table(title="Cards")
    table.add_column("Term", style="cyan")
    table.add_column("Definition")
    table.add_column("Mistakes", style="magenta", justify="right")
    for card in sorted(store, key=lambda c: (-c.mistakes, c.term)):
        table.add_row(
            Text(card.term), Text(card.definition), str(card.mistakes)
        )
    cons.print(table)


@app.command()
def stats(
    path: Path = typer.Argument(  # noqa: B008
        ..., help="CSV card file to summarize."
    ),
):
    """Display the cards in a card file and their mistake counts."""
    store = CardStore()
    try:
        read_cards(store, path)
    except NotFoundError:
        console.print(
            f"[bold red]Error: File not found: {escape(str(path))}[/bold red]"
        )
        raise typer.Exit(code=1)
    except CardIOError as e:
        console.print(f"[bold red]Error: {escape(str(e))}[/bold red]")
        raise typer.Exit(code=1) from e

    if not len(store):
        console.print("[yellow]No cards found in the file.[/yellow]")
        return

    _display_card_table(console, store)
    total_mistakes = sum(card.mistakes for card in store)
    console.print(
        f"Total cards: [bold]{len(store)}[/bold], "
        f"total mistakes: [bold]{total_mistakes}[/bold]"
    )
    console.print(describe_hardest(store.hardest_cards()), markup=False)


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------


def main():
    """
    Run the CLI application.

    If an unexpected exception occurs, print a bold red error message to the console and exit the process with status code 1.
    """
    try:
        app()
    except Exception as e:
        console.print(f"[bold red]UNEXPECTED ERROR: {e}[/bold red]")
        raise SystemExit(1)


if __name__ == "__main__":
    main()
