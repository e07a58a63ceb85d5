"""Lexical scanner for the Lox language, with a file runner and a prompt."""

__version__ = "0.1.0"
__all__ = ["cli", "errors", "scanner", "tokens", "utils"]