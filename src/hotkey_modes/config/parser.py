"""Recursive-descent parser for the hotkey config language.

Grammar:

    config      := (declaration | hotkey)* EOF
    declaration := '::' identifier [':' command]
    hotkey      := [mode_list '<'] [modifiers '-'] key ['->'] action
    mode_list   := identifier [',' mode_list]
    modifiers   := modifier ['+' modifiers]
    key         := key-char | key-hex | key-literal
    action      := ':' command | ';' identifier

Parsing is fail-fast: the first error raises a `ParseError` and the registry
being built is dropped with it.
"""
from __future__ import annotations

import logging
from typing import List, Optional, Protocol

from ..macos.literals import (
    flag_for_modifier_name,
    keycode_for_char,
    keycode_for_literal_name,
    keycode_from_hex,
    modifier_names,
)
from ..macos.modifiers import Modifier
from .errors import (
    DuplicateIdentifierError,
    ParseError,
    UndeclaredIdentifierError,
    UnexpectedTokenError,
)
from .ir import Hotkey, HotkeyFlag, Mode
from .lexer import Lexer
from .options import ParserOptions
from .registry import ModeRegistry
from .tokens import Token, TokenType

__all__ = ["Parser", "TokenSource", "parse_config"]

logger = logging.getLogger(__name__)

_HOTKEY_START = (
    TokenType.IDENTIFIER,
    TokenType.MODIFIER,
    TokenType.LITERAL,
    TokenType.KEY_HEX,
    TokenType.KEY,
)


class TokenSource(Protocol):
    def next_token(self) -> Token: ...

    def peek_token(self) -> Token: ...


class Parser:
    """Builds a `ModeRegistry` from a stream of tokens."""

    def __init__(
        self,
        tokens: TokenSource,
        options: Optional[ParserOptions] = None,
    ) -> None:
        self.tokens = tokens
        self.registry = ModeRegistry()
        self.options = options if options is not None else ParserOptions()

    def parse(self) -> ModeRegistry:
        try:
            while not self._check(TokenType.EOF):
                if self._check(TokenType.DECL):
                    self._parse_declaration()
                elif self._check(*_HOTKEY_START):
                    hotkey = self._parse_hotkey()
                    self.registry.register(hotkey)
                else:
                    raise UnexpectedTokenError(
                        "expected decl, modifier or key-literal", self._peek()
                    )
        except ParseError:
            # a failed parse never leaves a partial registry behind
            self.registry = ModeRegistry()
            raise
        return self.registry

    # Token helpers

    def _peek(self) -> Token:
        return self.tokens.peek_token()

    def _check(self, *types: TokenType) -> bool:
        return self._peek().type in types

    def _match(self, token_type: TokenType) -> Optional[Token]:
        if self._check(token_type):
            return self.tokens.next_token()
        return None

    def _check_chain_length(self, length: int, what: str) -> None:
        limit = self.options.max_chain_length
        if length > limit:
            raise UnexpectedTokenError(
                f"expected at most {limit} {what} in a chain", self._peek()
            )

    # Mode declarations

    def _parse_declaration(self) -> None:
        self.tokens.next_token()  # '::'
        identifier = self._match(TokenType.IDENTIFIER)
        if identifier is None:
            raise UnexpectedTokenError("expected identifier", self._peek())

        command = self._match(TokenType.COMMAND)
        mode = Mode(
            name=identifier.text,
            command=command.text if command is not None else None,
            line=identifier.line,
            column=identifier.column,
        )

        existing = self.registry.find(mode.name)
        if existing is not None:
            raise DuplicateIdentifierError(
                mode.name, mode.line, mode.column, existing.line, existing.column
            )
        self.registry.add(mode)
        logger.debug(
            "mode '%s' (line %d) command=%r", mode.name, mode.line, mode.command
        )

    # Hotkeys

    def _parse_hotkey(self) -> Hotkey:
        start = self._peek()
        modes: List[str] = []
        flags = HotkeyFlag(0)

        identifier = self._match(TokenType.IDENTIFIER)
        if identifier is not None:
            self._parse_mode_list(identifier, modes)
            if self._match(TokenType.INSERT) is None:
                raise UnexpectedTokenError("expected '<'", self._peek())
        else:
            modes.append(self.registry.default_mode().name)

        modifiers = Modifier(0)
        modifier = self._match(TokenType.MODIFIER)
        if modifier is not None:
            modifiers = self._parse_modifiers(modifier)
            if self._match(TokenType.DASH) is None:
                raise UnexpectedTokenError("expected '-'", self._peek())

        keycode, implicit_fn = self._parse_key()
        if implicit_fn:
            modifiers |= Modifier.FN

        if self._match(TokenType.ARROW) is not None:
            flags |= HotkeyFlag.PASSTHROUGH

        command: Optional[str] = None
        activate: Optional[str] = None
        action = self._match(TokenType.COMMAND)
        if action is not None:
            command = action.text
        else:
            action = self._match(TokenType.ACTIVATE)
            if action is None:
                raise UnexpectedTokenError(
                    "expected ':' followed by command or ';' followed by mode",
                    self._peek(),
                )
            if not action.text:
                raise UnexpectedTokenError("expected identifier", action)
            target = self.registry.resolve(action.text)
            if target is None:
                raise UndeclaredIdentifierError(action.text, action)
            activate = target.name
            flags |= HotkeyFlag.ACTIVATE

        hotkey = Hotkey(
            modes=modes,
            modifiers=int(modifiers),
            keycode=keycode,
            flags=int(flags),
            command=command,
            activate=activate,
            line=start.line,
            column=start.column,
        )
        logger.debug(
            "hotkey (line %d) modes=%s mods=%s key=0x%02x command=%r activate=%r",
            hotkey.line,
            hotkey.modes,
            "+".join(modifier_names(hotkey.modifiers)) or "-",
            hotkey.keycode,
            hotkey.command,
            hotkey.activate,
        )
        return hotkey

    def _parse_mode_list(self, identifier: Token, modes: List[str]) -> None:
        length = 1
        while True:
            self._check_chain_length(length, "modes")
            mode = self.registry.resolve(identifier.text)
            if mode is None:
                raise UndeclaredIdentifierError(identifier.text, identifier)
            modes.append(mode.name)

            if self._match(TokenType.COMMA) is None:
                return
            following = self._match(TokenType.IDENTIFIER)
            if following is None:
                raise UnexpectedTokenError("expected identifier", self._peek())
            identifier = following
            length += 1

    def _parse_modifiers(self, modifier: Token) -> Modifier:
        flags = Modifier(0)
        length = 1
        while True:
            self._check_chain_length(length, "modifiers")
            flag = flag_for_modifier_name(modifier.text)
            if flag is None:
                raise UnexpectedTokenError("expected modifier", modifier)
            flags |= flag

            if self._match(TokenType.PLUS) is None:
                return flags
            following = self._match(TokenType.MODIFIER)
            if following is None:
                raise UnexpectedTokenError("expected modifier", self._peek())
            modifier = following
            length += 1

    def _parse_key(self) -> tuple[int, bool]:
        token = self._match(TokenType.KEY)
        if token is not None:
            try:
                return keycode_for_char(token.text), False
            except ValueError:
                raise UnexpectedTokenError("expected key-literal", token) from None

        token = self._match(TokenType.KEY_HEX)
        if token is not None:
            try:
                return keycode_from_hex(token.text), False
            except ValueError:
                raise UnexpectedTokenError("expected key-literal", token) from None

        token = self._match(TokenType.LITERAL)
        if token is not None:
            literal = keycode_for_literal_name(token.text)
            if literal is None:
                raise UnexpectedTokenError("expected key-literal", token)
            return literal.keycode, literal.implicit_fn

        raise UnexpectedTokenError("expected key-literal", self._peek())


def parse_config(
    text: str,
    *,
    options: Optional[ParserOptions] = None,
    source_name: str = "<config>",
) -> ModeRegistry:
    """Parse config text into a new `ModeRegistry`.

    The first error is logged and re-raised; no registry is returned for a
    config that fails to parse.
    """

    parser = Parser(Lexer(text), options=options)
    try:
        registry = parser.parse()
    except ParseError as e:
        logger.error("%s:%s", source_name, e)
        raise
    logger.debug(
        "%s: parsed %d modes, %d hotkeys",
        source_name,
        len(registry),
        len(registry.hotkeys()),
    )
    return registry
