from __future__ import annotations

import io
import json

import pytest
from rich.console import Console

from quizdoc.commands import check

from fixtures import JSON_QUIZ, TXT_QUIZ


def _console() -> tuple[Console, io.StringIO]:
    buffer = io.StringIO()
    return Console(file=buffer, width=200, color_system=None), buffer


def test_check_reports_every_sample(quiz_files):
    paths = quiz_files.samples()
    console, buffer = _console()

    code = check.main([str(path) for path in paths.values()], console=console)

    output = buffer.getvalue()
    assert code == 0
    assert "Quiz check" in output
    for name in ("sample.json", "sample.xml", "sample.txt"):
        assert name in output
    assert output.count("ok") >= 3


def test_check_fails_when_any_document_is_invalid(quiz_files):
    good = quiz_files.write("good.json", JSON_QUIZ)
    bad = quiz_files.write(
        "bad.json",
        json.dumps([{"question": "Q?", "options": ["A) x"], "correct_answer": "A"}]),
    )
    console, buffer = _console()

    code = check.main([str(good), str(bad)], console=console)

    output = buffer.getvalue()
    assert code == 1
    assert "Question 1: Must have at least 2 options" in output


def test_check_reports_unsupported_extension(quiz_files):
    path = quiz_files.write("notes.md", "# not a quiz")
    console, buffer = _console()

    assert check.main([str(path)], console=console) == 1
    assert "Unsupported file format: md" in buffer.getvalue()


def test_check_show_lists_questions(quiz_files):
    path = quiz_files.write("capitals.json", JSON_QUIZ)
    console, buffer = _console()

    assert check.main([str(path), "--show"], console=console) == 0

    output = buffer.getvalue()
    assert "Capitals Quiz" in output
    assert "Arithmetic" in output
    assert "A) Paris" in output


def test_check_reads_stdin_with_forced_format(monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO(JSON_QUIZ))
    console, buffer = _console()

    assert check.main(["-", "--format", "json"], console=console) == 0
    assert "json" in buffer.getvalue()


def test_check_stdin_uses_configured_default_format(monkeypatch, quizdoc_home):
    monkeypatch.setenv("QUIZDOC_DEFAULT_FORMAT", "txt")
    monkeypatch.setattr("sys.stdin", io.StringIO(TXT_QUIZ))
    console, buffer = _console()

    assert check.main(["-"], console=console) == 0
    assert "txt" in buffer.getvalue()


def test_check_writes_json_log(quiz_files, quizdoc_home):
    path = quiz_files.write("good.json", JSON_QUIZ)
    console, _ = _console()

    check.main([str(path)], console=console)

    log_path = quizdoc_home / "logs" / "check.log"
    records = [
        json.loads(line)
        for line in log_path.read_text(encoding="utf-8").splitlines()
    ]
    messages = [record["message"] for record in records]
    assert "Parsed quiz document" in messages
    assert "Completed quiz check" in messages
    summary = records[messages.index("Completed quiz check")]
    assert summary["extra"] == {"checked": 1, "failures": 0}


def test_check_rejects_bad_config(tmp_path, capsys):
    with pytest.raises(SystemExit) as excinfo:
        check.main(["x.json", "--config", str(tmp_path / "absent.toml")])

    assert excinfo.value.code == 2
    assert "Config file not found" in capsys.readouterr().err


def test_check_rejects_unknown_forced_format(quiz_files, capsys):
    path = quiz_files.write("quiz.yml", JSON_QUIZ)

    with pytest.raises(SystemExit) as excinfo:
        check.main([str(path), "--format", "yml"])

    assert excinfo.value.code == 2
    assert "Unsupported file format: yml" in capsys.readouterr().err


def test_check_forced_format_accepts_extension_spelling(quiz_files):
    path = quiz_files.write("quiz.data", JSON_QUIZ)
    console, buffer = _console()

    assert check.main([str(path), "--format", ".JSON"], console=console) == 0
    assert "json" in buffer.getvalue()
