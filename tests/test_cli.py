import io

from loxscan.cli import main, run_file, run_prompt, run_prompt_line
from loxscan.errors import ErrorReporter
from loxscan.scanner import scan_tokens


def token_lines(source):
    return [str(t) for t in scan_tokens(source, ErrorReporter(io.StringIO()))]


def test_run_file_dumps_and_prints_tokens(tmp_path):
    source = "var x = 1;\nprint x;"
    path = tmp_path / "a.lox"
    path.write_text(source)
    out, err = io.StringIO(), io.StringIO()
    assert run_file(str(path), out, err) == 0
    text = out.getvalue()
    assert text.startswith("------buffer content:\n" + source)
    assert text.splitlines()[-len(token_lines(source)):] == token_lines(source)
    assert err.getvalue() == ""


def test_run_file_missing_reports_and_scans_nothing(tmp_path):
    out, err = io.StringIO(), io.StringIO()
    path = tmp_path / "none.lox"
    run_file(str(path), out, err)
    assert "ReadFileFailed!" in err.getvalue()
    assert f"Fail to open file[{path}]" in err.getvalue()
    assert out.getvalue().splitlines() == token_lines("")


def test_run_file_empty_reports_dump_failure(tmp_path):
    path = tmp_path / "empty.lox"
    path.write_text("")
    out, err = io.StringIO(), io.StringIO()
    run_file(str(path), out, err)
    assert "DumpBuffer Fail" in err.getvalue()
    assert out.getvalue().splitlines() == token_lines("")


def test_run_prompt_line_echoes():
    out = io.StringIO()
    run_prompt_line("abc", out)
    run_prompt_line("", out)
    assert out.getvalue() == "abc\n"


def test_run_prompt_with_trailing_newline():
    out = io.StringIO()
    run_prompt(io.StringIO("a\nb\n"), out)
    assert out.getvalue() == "runPrompt\n> a\n> b\n> \n"


def test_run_prompt_without_trailing_newline():
    out = io.StringIO()
    run_prompt(io.StringIO("a"), out)
    assert out.getvalue() == "runPrompt\n> a\n\n"


def test_main_usage_for_too_many_args(capsys):
    assert main(["a", "b", "c"]) == 0
    assert "Usage: clox [script]" in capsys.readouterr().out


def test_main_runs_file(tmp_path, capsys):
    path = tmp_path / "s.lox"
    path.write_text("print 1;")
    assert main([str(path)]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[-len(token_lines("print 1;")):] == token_lines("print 1;")


def test_main_without_args_starts_prompt(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO(""))
    assert main([]) == 0
    assert capsys.readouterr().out == "runPrompt\n> \n"