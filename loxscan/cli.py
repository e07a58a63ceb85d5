"""Command-line entry: scan a file or read lines interactively."""

from __future__ import annotations

import sys
from typing import TextIO

from .errors import ErrorReporter
from .scanner import Scanner
from .utils import dump_buffer, read_file


def run_file(path: str, out: TextIO | None = None, err: TextIO | None = None) -> int:
    """Dump a file's content and print its tokens; return the exit status."""
    out = out if out is not None else sys.stdout
    err = err if err is not None else sys.stderr
    try:
        content = read_file(path)
    except OSError:
        err.write(f"Fail to open file[{path}] \n")
        err.write("ReadFileFailed!\n")
        content = ""
    else:
        try:
            dump_buffer(content, out)
        except ValueError as exc:
            err.write(f"{exc}\n")
    reporter = ErrorReporter(out)
    for token in Scanner(content, reporter).scan_tokens():
        out.write(f"{token}\n")
    return 0


def run_prompt_line(line: str, out: TextIO | None = None) -> None:
    """Echo one non-empty prompt line."""
    out = out if out is not None else sys.stdout
    if line:
        out.write(f"{line}\n")


def run_prompt(stdin: TextIO | None = None, out: TextIO | None = None) -> None:
    """Read lines after a '> ' prompt until input ends."""
    stdin = stdin if stdin is not None else sys.stdin
    out = out if out is not None else sys.stdout
    out.write("runPrompt\n")
    at_eof = False
    while not at_eof:
        out.write("> ")
        raw = stdin.readline()
        if raw.endswith("\n"):
            line = raw[:-1]
        else:
            line = raw
            at_eof = True
        run_prompt_line(line, out)
    out.write("\n")


def main(argv: list[str] | None = None) -> int:
    """Run a script given as the only argument, or start the prompt."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) > 2:
        print("Usage: clox [script]")
    elif len(args) == 1:
        return run_file(args[0])
    else:
        run_prompt()
    return 0


if __name__ == "__main__":
    sys.exit(main())