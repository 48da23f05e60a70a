"""
Session transcript and the console wrapper that feeds it.

`TranscriptIO` sits at the input/output boundary: every line shown to the
user and every line read back passes through it and is copied into a
`Transcript`, so command handlers never log anything themselves.
"""

import logging
from pathlib import Path
from typing import List, Optional, Union

from rich.console import Console

from .exceptions import CardIOError

logger = logging.getLogger(__name__)


class Transcript:
    """In-memory record of a session, one entry per line."""

    def __init__(self) -> None:
        self._lines: List[str] = []

    def __len__(self) -> int:
        return len(self._lines)

    def record(self, text: str) -> None:
        self._lines.append(text + "\n")

    def text(self) -> str:
        return "".join(self._lines)

    def append_to(
        self, path: Union[str, Path], closing_line: Optional[str] = None
    ) -> None:
        """
        Append the whole transcript to `path`, creating the file if needed.

        Parameters:
            path (Union[str, Path]): File to append to.
            closing_line (Optional[str]): Extra line written after the
                transcript, e.g. a confirmation that is only shown once the
                write succeeded.

        Raises:
            CardIOError: If the file cannot be opened or written.
        """
        path = Path(path)
        content = self.text()
        if closing_line is not None:
            content += closing_line + "\n"
        try:
            with path.open("a", encoding="utf-8") as f:
                f.write(content)
        except (OSError, ValueError) as e:
            logger.error(f"Could not append transcript to {path}: {e}")
            raise CardIOError(f"Could not write log to {path}: {e}", e) from e
        logger.info(f"Appended {len(self._lines)} transcript lines to {path}")


class TranscriptIO:
    """
    Line-oriented console I/O that records everything it shows and reads.

    Output is written straight to the console's file rather than rendered,
    so card text with brackets, control characters or long lines is shown
    exactly as it is recorded.
    """

    def __init__(
        self,
        console: Optional[Console] = None,
        transcript: Optional[Transcript] = None,
    ):
        self.console = console or Console()
        self.transcript = transcript if transcript is not None else Transcript()

    def say(self, message: str = "") -> None:
        self.console.file.write(message + "\n")
        self.console.file.flush()
        self.transcript.record(message)

    def listen(self) -> str:
        """
        Read one line of user input.

        Raises:
            EOFError: When input is exhausted.
        """
        line = self.console.input()
        self.transcript.record(line)
        return line

    def ask(self, message: str) -> str:
        self.say(message)
        return self.listen()
