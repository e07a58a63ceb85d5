import io

import pytest

from loxscan.utils import (
    TerminalColor,
    dump_buffer,
    log,
    log_debug,
    log_error,
    log_info,
    log_warn,
    read_file,
)


def test_dump_buffer_wraps_content():
    out = io.StringIO()
    dump_buffer("print 1;", out)
    text = out.getvalue()
    assert text.startswith("------buffer content:\n")
    assert text.endswith("\n ----content End\n")
    assert "print 1;" in text


def test_dump_buffer_rejects_empty():
    with pytest.raises(ValueError, match="buffersize is 0"):
        dump_buffer("", io.StringIO())


def test_read_file_round_trip(tmp_path):
    path = tmp_path / "script.lox"
    path.write_bytes(b"var a = 1;\r\nprint a;\n")
    assert read_file(str(path)) == "var a = 1;\r\nprint a;\n"


def test_read_file_missing_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_file(str(tmp_path / "absent.lox"))


def test_log_layout():
    out = io.StringIO()
    log(TerminalColor.GREEN, "INFO", "hello", "a.py", 12, out)
    text = out.getvalue()
    assert text.startswith(TerminalColor.GREEN + "[INFO]" + TerminalColor.RESET)
    assert TerminalColor.CYAN + "hello" + TerminalColor.RESET in text
    assert text.endswith("  (a.py:12)\n")


def test_log_info_reports_caller_file(capsys):
    log_info("started")
    text = capsys.readouterr().out
    assert "[INFO]" in text
    assert "started" in text
    assert "test_utils.py:" in text


@pytest.mark.parametrize(
    "func, color, name",
    [
        (log_warn, TerminalColor.YELLOW, "WARNING"),
        (log_error, TerminalColor.RED, "ERROR"),
        (log_debug, TerminalColor.CYAN, "DEBUG"),
    ],
)
def test_log_levels_use_their_color(capsys, func, color, name):
    func("msg")
    text = capsys.readouterr().out
    assert text.startswith(color + "[" + name + "]")