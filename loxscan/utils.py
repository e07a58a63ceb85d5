"""File reading, buffer dumping and coloured logging helpers."""

from __future__ import annotations

import inspect
import sys
from typing import TextIO


class TerminalColor:
    """ANSI escape sequences for terminal colours."""

    RESET = "\033[0m"
    RED = "\033[31m"
    GREEN = "\033[32m"
    YELLOW = "\033[33m"
    BLUE = "\033[34m"
    MAGENTA = "\033[35m"
    CYAN = "\033[36m"
    WHITE = "\033[37m"
    BOLD = "\033[1m"


def dump_buffer(buffer: str, out: TextIO | None = None) -> None:
    """Write the buffer between header and footer lines; raise ValueError if empty."""
    if not buffer:
        raise ValueError("DumpBuffer Fail: buffersize is 0!")
    stream = out if out is not None else sys.stdout
    stream.write(f"------buffer content:\n{buffer}\n ----content End\n")


def read_file(path: str) -> str:
    """Return the whole content of a file as text."""
    with open(path, "rb") as handle:
        return handle.read().decode("utf-8", errors="replace")


def log(
    level_color: str,
    level_name: str,
    msg: str,
    file: str,
    line: int,
    out: TextIO | None = None,
) -> None:
    """Write one coloured log line with its origin."""
    stream = out if out is not None else sys.stdout
    stream.write(
        f"{level_color}[{level_name}]{TerminalColor.RESET} "
        f"{TerminalColor.CYAN}{msg}{TerminalColor.RESET}"
        f"  ({file}:{line})\n"
    )


def _log_from_caller(level_color: str, level_name: str, msg: str) -> None:
    frame = inspect.currentframe()
    caller = frame.f_back.f_back if frame is not None and frame.f_back else None
    if caller is None:
        file, line = "<unknown>", 0
    else:
        file, line = caller.f_code.co_filename, caller.f_lineno
    del frame, caller
    log(level_color, level_name, msg, file, line)


def log_info(msg: str) -> None:
    """Log an informational message with the caller's location."""
    _log_from_caller(TerminalColor.GREEN, "INFO", msg)


def log_warn(msg: str) -> None:
    """Log a warning with the caller's location."""
    _log_from_caller(TerminalColor.YELLOW, "WARNING", msg)


def log_error(msg: str) -> None:
    """Log an error with the caller's location."""
    _log_from_caller(TerminalColor.RED, "ERROR", msg)


def log_debug(msg: str) -> None:
    """Log a debug message with the caller's location."""
    _log_from_caller(TerminalColor.CYAN, "DEBUG", msg)