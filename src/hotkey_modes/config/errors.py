"""Exceptions for the library.

HotkeyConfigError is the ancestor of every exception raised here.  Parsing
stops at the first ParseError; there is no recovery and no list of errors.
The three ParseError subclasses are the only kinds of parse failure.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from .tokens import Token

__all__ = [
    "HotkeyConfigError",
    "ConfigReadError",
    "ParseError",
    "UnexpectedTokenError",
    "UndeclaredIdentifierError",
    "DuplicateIdentifierError",
]


class HotkeyConfigError(Exception):
    """Ancestor for all of the exceptions in the library."""

    def __init__(
        self,
        message: str,
        line: Optional[int] = None,
        column: Optional[int] = None,
    ):
        super().__init__(message)
        self.message = message
        self.line = line
        self.column = column

    def __str__(self) -> str:
        if self.line is not None:
            if self.column is None:
                return f"{self.line}: {self.message}"
            else:
                return f"{self.line}:{self.column}: {self.message}"
        elif self.column is not None:
            return f"{self.message} at column {self.column}"
        else:
            return self.message


class ConfigReadError(HotkeyConfigError):
    """A config or options file could not be read."""

    def __init__(self, message: str, path: str):
        super().__init__(message=message)
        self.path = path


class ParseError(HotkeyConfigError):
    """Base class for errors that stop a parse."""

    pass


class UnexpectedTokenError(ParseError):
    """The current token does not fit the grammar at this point."""

    def __init__(self, expected: str, token: Token):
        super().__init__(
            message=f"{expected}, but got '{token.text}'",
            line=token.line,
            column=token.column,
        )
        self.expected = expected
        self.token = token


class UndeclaredIdentifierError(ParseError):
    """A mode name was referenced before being declared."""

    def __init__(self, name: str, token: Token):
        super().__init__(
            message=f"undeclared identifier '{name}'",
            line=token.line,
            column=token.column,
        )
        self.name = name
        self.token = token


class DuplicateIdentifierError(ParseError):
    """A mode was declared twice; the first declaration is kept."""

    def __init__(
        self,
        name: str,
        line: int,
        column: int,
        previous_line: int,
        previous_column: int,
    ):
        if previous_line < 0:
            previous = "implicitly created earlier"
        else:
            previous = f"previously declared at {previous_line}:{previous_column}"
        super().__init__(
            message=f"duplicate declaration '{name}' ({previous})",
            line=line,
            column=column,
        )
        self.name = name
        self.previous_line = previous_line
        self.previous_column = previous_column
