from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class TokenType(Enum):
    """Token types produced by the config lexer."""

    IDENTIFIER = "identifier"
    MODIFIER = "modifier"
    LITERAL = "literal"
    KEY = "key"
    KEY_HEX = "key-hex"

    COMMA = ","
    INSERT = "<"
    PLUS = "+"
    DASH = "-"
    ARROW = "->"
    DECL = "::"
    COMMAND = ":"
    ACTIVATE = ";"

    UNKNOWN = "unknown"
    EOF = "end-of-stream"


@dataclass(frozen=True)
class Token:
    """A token with its text and 1-based source position."""

    type: TokenType
    text: str
    line: int
    column: int
