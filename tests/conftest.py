import io
import random
from typing import Callable, Iterable, List

import pytest
from rich.console import Console

from flashdrill.models import Flashcard
from flashdrill.session import StudySession
from flashdrill.store import CardStore


# each test runs on cwd to its temp dir
@pytest.fixture(autouse=True)
def go_to_tmpdir(request):
    """
    Temporarily change the process working directory to the test's tmpdir.

    Keeps relative file names used by the CLI (and any stray ``.env``)
    inside the per-test directory.
    """
    tmpdir = request.getfixturevalue("tmpdir")
    with tmpdir.as_cwd():
        yield


@pytest.fixture(autouse=True)
def clear_flashdrill_env(monkeypatch):
    """Keep FLASHDRILL_* variables from the developer's shell out of tests."""
    for name in (
        "FLASHDRILL_IMPORT_FROM",
        "FLASHDRILL_EXPORT_TO",
        "FLASHDRILL_SEED",
        "FLASHDRILL_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def cat_card() -> Flashcard:
    return Flashcard(term="cat", definition="a small domesticated feline")


@pytest.fixture
def dog_card() -> Flashcard:
    return Flashcard(term="dog", definition="a domesticated canine")


@pytest.fixture
def store() -> CardStore:
    """An empty store with a seeded random source."""
    return CardStore(rng=random.Random(1234))


@pytest.fixture
def pet_store(store: CardStore, cat_card: Flashcard, dog_card: Flashcard):
    """
    Provide a store holding the "cat" and "dog" cards, both without mistakes.
    """
    store.create_or_update(cat_card)
    store.create_or_update(dog_card)
    return store


def scripted_input(lines: Iterable[str]) -> Callable[..., str]:
    """
    Build a replacement for `Console.input` that returns `lines` in order.

    Raises EOFError once the lines run out, like the builtin `input()` does
    when stdin is closed.
    """
    remaining = iter(lines)

    def _input(*args, **kwargs) -> str:
        try:
            return next(remaining)
        except StopIteration:
            raise EOFError

    return _input


@pytest.fixture
def output_lines() -> Callable[[StudySession], List[str]]:
    """Return a helper that splits everything a test session printed into lines."""

    def _lines(session: StudySession) -> List[str]:
        return session.io.console.file.getvalue().splitlines()

    return _lines


@pytest.fixture
def make_session() -> Callable[..., StudySession]:
    """
    Factory for a StudySession whose console writes to a StringIO buffer and
    reads the given scripted lines.
    """

    def _make(lines: Iterable[str] = (), seed: int = 1234) -> StudySession:
        console = Console(file=io.StringIO(), width=200, color_system=None)
        console.input = scripted_input(lines)
        return StudySession(console=console, seed=seed)

    return _make
