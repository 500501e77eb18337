from __future__ import annotations

from .errors import (
    ConfigReadError,
    DuplicateIdentifierError,
    HotkeyConfigError,
    ParseError,
    UndeclaredIdentifierError,
    UnexpectedTokenError,
)
from .frontend import ConfigFrontend, find_config
from .ir import Hotkey, HotkeyFlag, HotkeyKey, Mode
from .lexer import Lexer
from .options import ParserOptions, load_options
from .parser import Parser, parse_config
from .registry import DEFAULT_MODE, ModeRegistry
from .serializer import dump_config
from .tokens import Token, TokenType

__all__ = [
    "ConfigFrontend",
    "ConfigReadError",
    "DEFAULT_MODE",
    "DuplicateIdentifierError",
    "Hotkey",
    "HotkeyConfigError",
    "HotkeyFlag",
    "HotkeyKey",
    "Lexer",
    "Mode",
    "ModeRegistry",
    "ParseError",
    "Parser",
    "ParserOptions",
    "Token",
    "TokenType",
    "UndeclaredIdentifierError",
    "UnexpectedTokenError",
    "dump_config",
    "find_config",
    "load_options",
    "parse_config",
]
