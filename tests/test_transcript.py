"""
Tests for the session transcript and the recording console wrapper.
"""

import io
from pathlib import Path
from unittest.mock import patch

import pytest
from rich.console import Console

from flashdrill.exceptions import CardIOError
from flashdrill.transcript import Transcript, TranscriptIO


@pytest.fixture
def console() -> Console:
    return Console(file=io.StringIO(), width=40, color_system=None)


class TestTranscript:
    def test_record_appends_newline(self):
        transcript = Transcript()
        transcript.record("first")
        transcript.record("")
        assert transcript.text() == "first\n\n"
        assert len(transcript) == 2

    def test_append_to_preserves_existing_content(self, tmp_path: Path):
        path = tmp_path / "session.log"
        path.write_text("earlier session\n", encoding="utf-8")
        transcript = Transcript()
        transcript.record("hello")

        transcript.append_to(path)
        transcript.append_to(path, closing_line="done")

        assert path.read_text(encoding="utf-8") == (
            "earlier session\nhello\nhello\ndone\n"
        )

    def test_closing_line_is_not_recorded(self, tmp_path: Path):
        transcript = Transcript()
        transcript.append_to(tmp_path / "a.log", closing_line="saved")
        assert transcript.text() == ""

    def test_append_to_failure(self, tmp_path: Path):
        transcript = Transcript()
        with pytest.raises(CardIOError, match="Could not write log"):
            transcript.append_to(tmp_path / "no_such_dir" / "x.log")

    def test_append_to_path_with_null_byte(self):
        transcript = Transcript()
        transcript.record("line")
        with pytest.raises(CardIOError, match="Could not write log"):
            transcript.append_to("ab\x00c.log")


class TestTranscriptIO:
    def test_say_prints_verbatim_and_records(self, console: Console):
        tio = TranscriptIO(console=console)
        text = '[bold]not markup[/bold] :smile: "' + "x" * 60 + '"'

        tio.say(text)

        assert console.file.getvalue() == text + "\n"
        assert tio.transcript.text() == text + "\n"

    def test_say_keeps_control_characters(self, console: Console):
        tio = TranscriptIO(console=console)
        text = "car\rriage\bback\x0cfeed"

        tio.say(text)

        assert console.file.getvalue() == text + "\n"
        assert tio.transcript.text() == console.file.getvalue()

    def test_say_without_message_prints_blank_line(self, console: Console):
        tio = TranscriptIO(console=console)
        tio.say()
        assert console.file.getvalue() == "\n"
        assert tio.transcript.text() == "\n"

    def test_listen_records_input(self, console: Console):
        tio = TranscriptIO(console=console)
        with patch("rich.console.Console.input", return_value="typed"):
            assert tio.listen() == "typed"
        assert tio.transcript.text() == "typed\n"

    def test_ask_prints_then_reads(self, console: Console):
        tio = TranscriptIO(console=console)
        with patch("rich.console.Console.input", return_value="3"):
            assert tio.ask("How many?") == "3"
        assert tio.transcript.text() == "How many?\n3\n"

    def test_listen_propagates_eof(self, console: Console):
        tio = TranscriptIO(console=console)
        with patch("rich.console.Console.input", side_effect=EOFError):
            with pytest.raises(EOFError):
                tio.listen()
        assert len(tio.transcript) == 0

    def test_shared_transcript(self, console: Console):
        transcript = Transcript()
        tio = TranscriptIO(console=console, transcript=transcript)
        tio.say("hi")
        assert transcript.text() == "hi\n"
