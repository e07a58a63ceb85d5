"""Lexical scanner turning Lox source text into tokens."""

from __future__ import annotations

from .errors import ErrorReporter
from .tokens import Literal, Token, TokenType

KEYWORDS = {
    "and": TokenType.AND,
    "class": TokenType.CLASS,
    "else": TokenType.ELSE,
    "false": TokenType.FALSE,
    "for": TokenType.FOR,
    "if": TokenType.IF,
    "fun": TokenType.FUN,
    "nil": TokenType.NIL,
    "or": TokenType.OR,
    "print": TokenType.PRINT,
    "return": TokenType.RETURN,
    "super": TokenType.SUPER,
    "this": TokenType.THIS,
    "true": TokenType.TRUE,
    "var": TokenType.VAR,
    "while": TokenType.WHILE,
}

_SINGLE = {
    "(": TokenType.LEFT_PAREN,
    ")": TokenType.RIGHT_PAREN,
    "{": TokenType.LEFT_BRACE,
    "}": TokenType.RIGHT_BRACE,
    ",": TokenType.COMMA,
    ".": TokenType.DOT,
    "-": TokenType.MINUS,
    "+": TokenType.PLUS,
    ";": TokenType.SEMICOLON,
    "*": TokenType.STAR,
}

_WITH_EQUAL = {
    "!": (TokenType.BANG_EQUAL, TokenType.BANG),
    "=": (TokenType.EQUAL_EQUAL, TokenType.EQUAL),
    "<": (TokenType.LESS_EQUAL, TokenType.LESS),
    ">": (TokenType.GREATER_EQUAL, TokenType.GREATER),
}


def _is_digit(c: str) -> bool:
    return "0" <= c <= "9" and c != ""


def _is_alpha(c: str) -> bool:
    return c != "" and ("a" <= c <= "z" or "A" <= c <= "Z" or c == "_")


def _is_alphanumeric(c: str) -> bool:
    return _is_alpha(c) or _is_digit(c)


class Scanner:
    """Scans a source string into a list of tokens."""

    def __init__(self, source: str, reporter: ErrorReporter | None = None) -> None:
        self.source = source
        self.reporter = reporter if reporter is not None else ErrorReporter()
        self._tokens: list[Token] = []
        self._start = 0
        self._current = 0
        self._line = 1

    def scan_tokens(self) -> list[Token]:
        """Scan the whole source, ending with an EOF token."""
        self._tokens = []
        self._start = 0
        self._current = 0
        self._line = 1
        while not self._at_end():
            self._start = self._current
            self._scan_token()
        self._tokens.append(Token(TokenType.EOF_TOKEN, "", None, self._line))
        return list(self._tokens)

    def _at_end(self) -> bool:
        return self._current >= len(self.source)

    def _advance(self) -> str:
        c = self.source[self._current]
        self._current += 1
        return c

    def _peek(self) -> str:
        return "" if self._at_end() else self.source[self._current]

    def _peek_next(self) -> str:
        nxt = self._current + 1
        return "" if nxt >= len(self.source) else self.source[nxt]

    def _match(self, expected: str) -> bool:
        if self._at_end() or self.source[self._current] != expected:
            return False
        self._current += 1
        return True

    def _add(self, token_type: TokenType, literal: Literal = None) -> None:
        text = self.source[self._start : self._current]
        self._tokens.append(Token(token_type, text, literal, self._line))

    def _scan_token(self) -> None:
        c = self._advance()
        if c in _SINGLE:
            self._add(_SINGLE[c])
        elif c in _WITH_EQUAL:
            with_eq, plain = _WITH_EQUAL[c]
            self._add(with_eq if self._match("=") else plain)
        elif c == "/":
            if self._match("/"):
                while self._peek() != "\n" and not self._at_end():
                    self._advance()
            else:
                self._add(TokenType.SLASH)
        elif c in " \r\t":
            pass
        elif c == "\n":
            self._line += 1
        elif c == '"':
            self._string()
        elif _is_digit(c):
            self._number()
        elif _is_alpha(c):
            self._identifier()
        else:
            self.reporter.error(self._line, "Unexpected Character!")

    def _string(self) -> None:
        while self._peek() != '"' and not self._at_end():
            if self._peek() == "\n":
                self._line += 1
            self._advance()
        if self._at_end():
            self.reporter.error(self._line, "Undetermined  String")
            return
        self._advance()
        self._add(TokenType.STRING, self.source[self._start + 1 : self._current - 1])

    def _number(self) -> None:
        while _is_digit(self._peek()):
            self._advance()
        if self._peek() == "." and _is_digit(self._peek_next()):
            self._advance()
            while _is_digit(self._peek()):
                self._advance()
        self._add(TokenType.NUMBER, float(self.source[self._start : self._current]))

    def _identifier(self) -> None:
        while _is_alphanumeric(self._peek()):
            self._advance()
        text = self.source[self._start : self._current]
        self._add(KEYWORDS.get(text, TokenType.IDENTIFIER))


def scan_tokens(source: str, reporter: ErrorReporter | None = None) -> list[Token]:
    """Scan source text into tokens."""
    return Scanner(source, reporter).scan_tokens()