"""Reporting of scan errors."""

from __future__ import annotations

import sys
from typing import TextIO


class ErrorReporter:
    """Writes error messages and remembers whether any occurred."""

    def __init__(self, out: TextIO | None = None) -> None:
        self._out = out
        self.had_error = False

    def report(self, line: int, where: str, message: str) -> None:
        """Write an error located at a line and mark that an error occurred."""
        stream = self._out if self._out is not None else sys.stdout
        stream.write(f"[line {line}] Error {where}: {message}")
        self.had_error = True

    def error(self, line: int, message: str) -> None:
        """Report an error with no location detail."""
        self.report(line, "", message)

    def reset(self) -> None:
        """Forget earlier errors."""
        self.had_error = False