"""Lexer for the hotkey config language.

Tokens are produced lazily, one at a time, through `next_token()`; a single
token of lookahead is available through `peek_token()`.

Command text (after `:`) and the mode name of an activation (after `;`) are
scanned as a single token each: the parser never sees the words inside a
command.  A backslash immediately before a newline continues a command onto
the next line and is kept verbatim in the token text; a trailing one that
leads only into a blank line or the end of input is dropped.
"""
from __future__ import annotations

from typing import Iterator, Optional

from ..macos.literals import is_layout_char, is_literal_name, is_modifier_name
from .tokens import Token, TokenType

__all__ = ["Lexer"]


_PUNCTUATION = {
    ",": TokenType.COMMA,
    "<": TokenType.INSERT,
    "+": TokenType.PLUS,
}


def _is_word_char(char: str) -> bool:
    return char.isalnum() or char == "_"


class Lexer:
    """Token source over the text of a config file."""

    def __init__(self, source: str):
        self.source = source
        self.position = 0
        self.line = 1
        self.column = 1
        self._lookahead: Optional[Token] = None

    def __iter__(self) -> Iterator[Token]:
        while True:
            token = self.next_token()
            yield token
            if token.type is TokenType.EOF:
                return

    def peek_token(self) -> Token:
        if self._lookahead is None:
            self._lookahead = self._scan()
        return self._lookahead

    def next_token(self) -> Token:
        token = self.peek_token()
        self._lookahead = None
        return token

    def _peek_char(self, offset: int = 0) -> str:
        index = self.position + offset
        if index < len(self.source):
            return self.source[index]
        return ""

    def _advance(self) -> str:
        char = self.source[self.position]
        self.position += 1
        if char == "\n":
            self.line += 1
            self.column = 1
        else:
            self.column += 1
        return char

    def _skip_whitespace_and_comments(self) -> None:
        while self.position < len(self.source):
            char = self._peek_char()
            if char.isspace():
                self._advance()
            elif char == "#":
                while self.position < len(self.source) and self._peek_char() != "\n":
                    self._advance()
            else:
                break

    def _skip_blanks(self) -> None:
        while self._peek_char() in (" ", "\t"):
            self._advance()

    def _scan(self) -> Token:
        self._skip_whitespace_and_comments()

        line, column = self.line, self.column
        if self.position >= len(self.source):
            return Token(TokenType.EOF, "", line, column)

        char = self._peek_char()

        if char in _PUNCTUATION:
            self._advance()
            return Token(_PUNCTUATION[char], char, line, column)
        if char == "-":
            self._advance()
            if self._peek_char() == ">":
                self._advance()
                return Token(TokenType.ARROW, "->", line, column)
            return Token(TokenType.DASH, "-", line, column)
        if char == ":":
            self._advance()
            if self._peek_char() == ":":
                self._advance()
                return Token(TokenType.DECL, "::", line, column)
            return Token(TokenType.COMMAND, self._scan_command(), line, column)
        if char == ";":
            self._advance()
            self._skip_blanks()
            return Token(TokenType.ACTIVATE, self._scan_word(), line, column)
        if char == "0" and self._peek_char(1) in ("x", "X"):
            return self._scan_hex(line, column)
        if _is_word_char(char):
            return self._classify_word(self._scan_word(), line, column)
        if is_layout_char(char):
            self._advance()
            return Token(TokenType.KEY, char, line, column)

        self._advance()
        return Token(TokenType.UNKNOWN, char, line, column)

    def _scan_word(self) -> str:
        start = self.position
        while _is_word_char(self._peek_char()):
            self._advance()
        return self.source[start : self.position]

    def _scan_hex(self, line: int, column: int) -> Token:
        start = self.position
        self._advance()
        self._advance()
        while self._peek_char() and self._peek_char() in "0123456789abcdefABCDEF":
            self._advance()
        text = self.source[start : self.position]
        if len(text) == 2 or _is_word_char(self._peek_char()):
            # "0x" alone or "0x12zz": not a hex literal
            text += self._scan_word()
            return Token(TokenType.IDENTIFIER, text, line, column)
        return Token(TokenType.KEY_HEX, text, line, column)

    def _scan_command(self) -> str:
        self._skip_blanks()
        start = self.position
        while self.position < len(self.source):
            char = self._peek_char()
            if char == "\n":
                break
            if char == "\\" and self._peek_char(1) == "\n":
                self._advance()
            self._advance()
        text = self.source[start : self.position].rstrip()
        if text.endswith("\\"):
            # continuation into a blank line or end of input
            text = text[:-1].rstrip()
        return text

    @staticmethod
    def _classify_word(word: str, line: int, column: int) -> Token:
        if len(word) == 1 and is_layout_char(word):
            return Token(TokenType.KEY, word, line, column)
        if is_modifier_name(word):
            return Token(TokenType.MODIFIER, word, line, column)
        if is_literal_name(word):
            return Token(TokenType.LITERAL, word, line, column)
        return Token(TokenType.IDENTIFIER, word, line, column)
