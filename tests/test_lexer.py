from __future__ import annotations

from hotkey_modes.config.lexer import Lexer
from hotkey_modes.config.tokens import TokenType


def _types(source: str) -> list[TokenType]:
    return [token.type for token in Lexer(source)]


def test_lexer_hotkey_statement() -> None:
    tokens = list(Lexer("work < cmd + shift - 1 ; default"))

    assert [t.type for t in tokens] == [
        TokenType.IDENTIFIER,
        TokenType.INSERT,
        TokenType.MODIFIER,
        TokenType.PLUS,
        TokenType.MODIFIER,
        TokenType.DASH,
        TokenType.KEY,
        TokenType.ACTIVATE,
        TokenType.EOF,
    ]
    assert tokens[6].text == "1"
    assert tokens[7].text == "default"
    assert (tokens[7].line, tokens[7].column) == (1, 24)


def test_lexer_declaration_with_command() -> None:
    tokens = list(Lexer(":: work : echo work mode"))

    assert [t.type for t in tokens] == [
        TokenType.DECL,
        TokenType.IDENTIFIER,
        TokenType.COMMAND,
        TokenType.EOF,
    ]
    assert tokens[2].text == "echo work mode"


def test_lexer_command_runs_to_end_of_line() -> None:
    tokens = list(Lexer("a : echo 'x' # not a comment   \nb : y"))

    assert tokens[1].text == "echo 'x' # not a comment"
    assert tokens[2].type is TokenType.KEY
    assert tokens[2].line == 2


def test_lexer_command_line_continuation() -> None:
    tokens = list(Lexer("a : echo one \\\n    two\nb : x"))

    assert tokens[1].type is TokenType.COMMAND
    assert tokens[1].text == "echo one \\\n    two"
    assert tokens[2].text == "b"
    assert tokens[2].line == 3


def test_lexer_drops_dangling_line_continuation() -> None:
    tokens = list(Lexer("a : echo one \\\n\nb : x \\"))

    assert tokens[1].text == "echo one"
    assert tokens[2].text == "b"
    assert tokens[2].line == 3
    assert tokens[3].text == "x"


def test_lexer_comments_and_blank_lines_are_skipped() -> None:
    assert _types("# leading comment\n\n   # another\n") == [TokenType.EOF]


def test_lexer_classifies_words() -> None:
    tokens = list(Lexer("hyper fn f12 return 0x3C A _ mymode 0xzz"))

    assert [t.type for t in tokens] == [
        TokenType.MODIFIER,
        TokenType.MODIFIER,
        TokenType.LITERAL,
        TokenType.LITERAL,
        TokenType.KEY_HEX,
        TokenType.KEY,
        TokenType.IDENTIFIER,
        TokenType.IDENTIFIER,
        TokenType.IDENTIFIER,
        TokenType.EOF,
    ]
    assert tokens[4].text == "0x3C"
    assert tokens[8].text == "0xzz"


def test_lexer_arrow_versus_dash() -> None:
    assert _types("a -> : x") == [
        TokenType.KEY,
        TokenType.ARROW,
        TokenType.COMMAND,
        TokenType.EOF,
    ]
    assert _types("cmd - a") == [
        TokenType.MODIFIER,
        TokenType.DASH,
        TokenType.KEY,
        TokenType.EOF,
    ]


def test_lexer_punctuation_keys_and_unknown() -> None:
    tokens = list(Lexer("[ ` . ! ,"))

    assert [t.type for t in tokens] == [
        TokenType.KEY,
        TokenType.KEY,
        TokenType.KEY,
        TokenType.UNKNOWN,
        TokenType.COMMA,
        TokenType.EOF,
    ]


def test_lexer_peek_does_not_consume() -> None:
    lexer = Lexer("cmd - a")

    assert lexer.peek_token().text == "cmd"
    assert lexer.peek_token().text == "cmd"
    assert lexer.next_token().text == "cmd"
    assert lexer.next_token().type is TokenType.DASH
    assert lexer.next_token().text == "a"
    assert lexer.next_token().type is TokenType.EOF
    assert lexer.next_token().type is TokenType.EOF
