from __future__ import annotations

import io

from quizdoc.commands import render


def test_render_text_argument(capsys):
    assert render.main(["**bold** <script>x</script>"]) == 0
    assert capsys.readouterr().out == "<strong>bold</strong> \n"


def test_render_file(tmp_path, capsys):
    source = tmp_path / "notes.md"
    source.write_text("- a\n- b\n", encoding="utf-8")

    assert render.main(["--file", str(source)]) == 0
    assert capsys.readouterr().out == "<ul><li>a</li><li>b</li></ul>\n"


def test_render_missing_file(tmp_path, capsys):
    assert render.main(["--file", str(tmp_path / "absent.md")]) == 1
    assert "Failed to read file" in capsys.readouterr().err


def test_render_reads_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("line one\nline two\n"))

    assert render.main([]) == 0
    assert capsys.readouterr().out == "line one<br>line two\n"
