"""
Tests for the plume command-line entry point.
"""
from pathlib import Path

import plume


def write_script(tmp_path: Path, source: str) -> str:
    script = tmp_path / "script.plm"
    script.write_text(source, encoding="utf-8")
    return str(script)


def test_runs_script(tmp_path, capsys):
    path = write_script(tmp_path, 'let x = 5; if x == 5 then print "five"; else print "other"; end')
    assert plume.main(["plume", path]) == 0
    assert capsys.readouterr().out.splitlines() == ["five"]


def test_missing_argument_prints_usage(capsys):
    assert plume.main(["plume"]) == 1
    assert "Usage:" in capsys.readouterr().out


def test_too_many_arguments(capsys):
    assert plume.main(["plume", "a.plm", "b.plm"]) == 1
    assert "Usage:" in capsys.readouterr().out


def test_help(capsys):
    assert plume.main(["plume", "--help"]) == 0
    assert "Usage:" in capsys.readouterr().out


def test_unreadable_file(tmp_path, capsys):
    assert plume.main(["plume", str(tmp_path / "missing.plm")]) == 1
    assert capsys.readouterr().out.startswith("FileNotFoundError:")


def test_lexical_fault_aborts_before_output(tmp_path, capsys):
    path = write_script(tmp_path, 'print 1;\nprint "abc')
    assert plume.main(["plume", path]) == 1
    out = capsys.readouterr().out.splitlines()
    assert out == [f"LexerException: Unclosed string literal on line 2 in {path}"]


def test_runtime_fault_keeps_earlier_output(tmp_path, capsys):
    path = write_script(tmp_path, "print 1;\nprint nope;\nprint 3;")
    assert plume.main(["plume", path]) == 1
    out = capsys.readouterr().out.splitlines()
    assert out[0] == "1"
    assert out[1].startswith("UndefinedVariableException: Variable 'nope' used before assignment")
    assert len(out) == 2


def test_debug_dump(tmp_path, capsys, monkeypatch):
    monkeypatch.setenv("PLUMEDEBUG", "1")
    path = write_script(tmp_path, "let a = 2; print a;")
    assert plume.main(["plume", path]) == 0
    out = capsys.readouterr().out
    assert "Tokens:" in out
    assert "Token(LET, 'let', line=1)" in out
    assert "AST:" in out
    assert "  let" in out
    assert "Symbols:" in out
    assert out.rstrip().endswith("2")
