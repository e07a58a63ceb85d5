"""Token types and tokens produced by the scanner."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union

Literal = Union[None, float, bool, str]


class TokenType(Enum):
    """Kinds of lexical tokens; the value is the printed name."""

    # Single-character tokens.
    LEFT_PAREN = "LEFT_PAREN"
    RIGHT_PAREN = "RIGHT_PAREN"
    LEFT_BRACE = "LEFT_BRACE"
    RIGHT_BRACE = "RIGHT_BRACE"
    COMMA = "COMMA"
    DOT = "DOT"
    MINUS = "MINUS"
    PLUS = "PLUS"
    SEMICOLON = "SEMICOLON"
    SLASH = "SLASH"
    STAR = "STAR"

    # One or two character tokens.
    BANG = "BANG"
    BANG_EQUAL = "BANG_EQUAL"
    EQUAL = "EQUAL"
    EQUAL_EQUAL = "EQUAL_EQUAL"
    GREATER = "GREATER"
    GREATER_EQUAL = "GREATER_EQUAL"
    LESS = "LESS"
    LESS_EQUAL = "LESS_EQUAL"

    # Literals.
    IDENTIFIER = "IDENTIFIER"
    STRING = "STRING"
    NUMBER = "NUMBER"

    # Keywords.
    AND = "AND"
    CLASS = "CLASS"
    ELSE = "ELSE"
    FALSE = "FALSE"
    FUN = "FUN"
    FOR = "FOR"
    IF = "IF"
    NIL = "NIL"
    OR = "OR"
    PRINT = "PRINT"
    RETURN = "RETURN"
    SUPER = "SUPER"
    THIS = "THIS"
    TRUE = "TRUE"
    VAR = "VAR"
    WHILE = "WHILE"

    EOF_TOKEN = "EOF"


def literal_to_string(literal: Literal) -> str:
    """Render a literal value the way tokens print it."""
    if isinstance(literal, bool):
        return "1" if literal else "0"
    if isinstance(literal, float):
        return f"{literal:f}"
    if isinstance(literal, str):
        return literal
    return "null"


@dataclass(frozen=True)
class Token:
    """A lexeme together with its type, literal value and source line."""

    type: TokenType
    lexeme: str
    literal: Literal
    line: int

    def __str__(self) -> str:
        return f"{self.type.value} {self.lexeme} {literal_to_string(self.literal)}"