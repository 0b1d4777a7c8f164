"""Shared pytest fixtures for the notepad test suite."""
import io

import pytest

from cli import CLI
from notepad import Notepad
from theme import strip_ansi


@pytest.fixture
def notepad() -> Notepad:
    return Notepad()


@pytest.fixture
def filled_notepad() -> Notepad:
    pad = Notepad()
    for text in ("first note", "second note", "third note"):
        pad.create(text.split())
    return pad


@pytest.fixture
def run_session(capsys):
    """Feed lines to a CLI and return (exit status, plain stdout, notepad)."""

    def _run(lines, pad=None):
        pad = pad if pad is not None else Notepad()
        stdin = io.StringIO("".join(line + "\n" for line in lines))
        status = CLI(pad, stdin=stdin, show_prompt=False).run()
        out = strip_ansi(capsys.readouterr().out)
        return status, out, pad

    return _run
