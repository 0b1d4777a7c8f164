import io

import pytest

from cli import CLI, EXIT_INTERRUPTED, EXIT_OK, parse_command
from notepad import Notepad


@pytest.mark.parametrize(
    "line, expected",
    [
        ("", ("", [])),
        ("   ", ("", [])),
        ("create", ("create", [])),
        ("create        ", ("create", [])),
        ("create note", ("create", ["note"])),
        ("create a few words", ("create", ["a", "few", "words"])),
        ("   create  a \t single   word  \n", ("create", ["a", "single", "word"])),
    ],
)
def test_parse_command(line, expected):
    assert parse_command(line) == expected


def test_create_then_list(run_session):
    status, out, _ = run_session(["create buy milk", "list"])
    assert status == EXIT_OK
    assert "[OK] Note was successfully created" in out
    assert "1: buy milk" in out.splitlines()


def test_list_empty_is_info(run_session):
    _, out, _ = run_session(["list"])
    assert "[Info] (empty)" in out


def test_blank_lines_are_ignored(run_session):
    _, out, pad = run_session(["", "   ", "create x"])
    assert len(pad) == 1
    assert "[Error]" not in out


def test_unknown_command_changes_nothing(run_session):
    _, out, pad = run_session(["create x", "Create y", "remove 1"])
    assert "[Error] unknown command: Create" in out
    assert "[Error] unknown command: remove" in out
    assert [n.text for n in pad.notes] == ["x"]


def test_create_blank_reports_error(run_session):
    _, out, pad = run_session(["create"])
    assert "[Error] missing note text" in out
    assert len(pad) == 0


def test_done_twice_reports_already_done(run_session):
    _, out, pad = run_session(["create a", "done 1", "done 1"])
    assert "[OK] Note marked as done" in out
    assert "[Info] Note 1 is already done" in out
    assert pad.notes[0].done is True


def test_undone(run_session):
    _, out, pad = run_session(["create a", "done 1", "undone 1", "list"])
    assert "[OK] Note marked as not done" in out
    assert "1: a" in out.splitlines()
    assert pad.notes[0].done is False


def test_errors_do_not_stop_the_loop(run_session):
    status, out, pad = run_session(
        ["create a", "done one", "done 5", "update 1", "delete", "list extra", "create b"]
    )
    assert status == EXIT_OK
    assert "[Error] not a number: one" in out
    assert "[Error] invalid position: 5" in out
    assert out.count("[Error] invalid argument") == 3
    assert [n.text for n in pad.notes] == ["a", "b"]


def test_update_and_delete(run_session):
    _, out, pad = run_session(
        ["create one", "create two", "create three", "update 1 uno dos", "delete 2", "list"]
    )
    assert "[OK] Note updated" in out
    assert "[OK] Note deleted" in out
    lines = out.splitlines()
    assert "1: uno dos" in lines
    assert "2: three" in lines


def test_clear(run_session):
    _, out, pad = run_session(["create a", "create b", "clear"])
    assert "[OK] Notepad cleared (2 removed)" in out
    assert len(pad) == 0


def test_save_and_load(run_session, tmp_path):
    path = tmp_path / "notes.json"
    run_session(["create a", "create b", "done 2", f"save {path}"])
    _, out, pad = run_session([f"load {path}", "list"])
    assert f"[OK] Notepad loaded from {path} (2 notes)" in out
    assert "2: b / Status: Done" in out.splitlines()
    assert [(n.text, n.done) for n in pad.notes] == [("a", False), ("b", True)]


def test_load_missing_file_reports_error(run_session, tmp_path):
    _, out, pad = run_session(["create keep", f"load {tmp_path / 'missing.json'}"])
    assert "[Error] cannot read" in out
    assert [n.text for n in pad.notes] == ["keep"]


def test_exit_stops_reading(run_session):
    status, out, pad = run_session(["create a", "exit", "create b"])
    assert status == EXIT_OK
    assert "[Info] Goodbye!" in out
    assert len(pad) == 1


def test_exit_with_arguments_is_an_error(run_session):
    status, out, pad = run_session(["exit now", "create a"])
    assert status == EXIT_OK
    assert "[Error] invalid argument" in out
    assert "Goodbye" not in out
    assert len(pad) == 1


def test_help(run_session):
    _, out, _ = run_session(["help"])
    assert "Commands:" in out
    assert "save <file>" in out


def test_prompt_is_shown(capsys):
    CLI(Notepad(), stdin=io.StringIO("")).run()
    assert "> " in capsys.readouterr().out


def test_keyboard_interrupt(capsys):
    class Interrupting(io.StringIO):
        def readline(self, *args):
            raise KeyboardInterrupt

    status = CLI(Notepad(), stdin=Interrupting(), show_prompt=False).run()
    assert status == EXIT_INTERRUPTED
    assert "Goodbye" in capsys.readouterr().out


def test_list_empty_prints_single_line(run_session):
    _, out, _ = run_session(["list"])
    assert out.count("(empty)") == 1
