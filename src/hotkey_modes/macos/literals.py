"""Lookup tables mapping the config language's key and modifier names to macOS values.

Named literals are matched case-sensitively.  Every literal after `escape` in
`LITERAL_KEYS` sits on the function layer of Apple keyboards, so resolving one
of them also turns on `Modifier.FN`.
"""
from __future__ import annotations

from typing import Dict, NamedTuple, Optional

from . import keycodes as kc
from .modifiers import MODIFIER_NAMES, Modifier

__all__ = [
    "IMPLICIT_FN_THRESHOLD",
    "LITERAL_KEYS",
    "LiteralKey",
    "char_for_keycode",
    "flag_for_modifier_name",
    "is_layout_char",
    "is_literal_name",
    "is_modifier_name",
    "keycode_for_char",
    "keycode_for_literal_name",
    "keycode_from_hex",
    "literal_for_keycode",
    "modifier_names",
]


class LiteralKey(NamedTuple):
    name: str
    keycode: int
    implicit_fn: bool


# Literals at an index greater than this one force the fn modifier.
IMPLICIT_FN_THRESHOLD = 4

_LITERAL_TABLE: tuple[tuple[str, int], ...] = (
    ("return", kc.kVK_Return),
    ("tab", kc.kVK_Tab),
    ("space", kc.kVK_Space),
    ("backspace", kc.kVK_Delete),
    ("escape", kc.kVK_Escape),
    ("delete", kc.kVK_ForwardDelete),
    ("home", kc.kVK_Home),
    ("end", kc.kVK_End),
    ("pageup", kc.kVK_PageUp),
    ("pagedown", kc.kVK_PageDown),
    ("insert", kc.kVK_Help),
    ("left", kc.kVK_LeftArrow),
    ("right", kc.kVK_RightArrow),
    ("up", kc.kVK_UpArrow),
    ("down", kc.kVK_DownArrow),
    ("f1", kc.kVK_F1),
    ("f2", kc.kVK_F2),
    ("f3", kc.kVK_F3),
    ("f4", kc.kVK_F4),
    ("f5", kc.kVK_F5),
    ("f6", kc.kVK_F6),
    ("f7", kc.kVK_F7),
    ("f8", kc.kVK_F8),
    ("f9", kc.kVK_F9),
    ("f10", kc.kVK_F10),
    ("f11", kc.kVK_F11),
    ("f12", kc.kVK_F12),
    ("f13", kc.kVK_F13),
    ("f14", kc.kVK_F14),
    ("f15", kc.kVK_F15),
    ("f16", kc.kVK_F16),
    ("f17", kc.kVK_F17),
    ("f18", kc.kVK_F18),
    ("f19", kc.kVK_F19),
    ("f20", kc.kVK_F20),
)

LITERAL_KEYS: tuple[LiteralKey, ...] = tuple(
    LiteralKey(name, keycode, index > IMPLICIT_FN_THRESHOLD)
    for index, (name, keycode) in enumerate(_LITERAL_TABLE)
)

_LITERALS_BY_NAME: Dict[str, LiteralKey] = {lit.name: lit for lit in LITERAL_KEYS}
_LITERALS_BY_KEYCODE: Dict[int, LiteralKey] = {lit.keycode: lit for lit in LITERAL_KEYS}

_MODIFIERS_BY_NAME: Dict[str, Modifier] = dict(MODIFIER_NAMES)

# US ANSI layout.
_LAYOUT: Dict[str, int] = {
    "a": kc.kVK_ANSI_A,
    "b": kc.kVK_ANSI_B,
    "c": kc.kVK_ANSI_C,
    "d": kc.kVK_ANSI_D,
    "e": kc.kVK_ANSI_E,
    "f": kc.kVK_ANSI_F,
    "g": kc.kVK_ANSI_G,
    "h": kc.kVK_ANSI_H,
    "i": kc.kVK_ANSI_I,
    "j": kc.kVK_ANSI_J,
    "k": kc.kVK_ANSI_K,
    "l": kc.kVK_ANSI_L,
    "m": kc.kVK_ANSI_M,
    "n": kc.kVK_ANSI_N,
    "o": kc.kVK_ANSI_O,
    "p": kc.kVK_ANSI_P,
    "q": kc.kVK_ANSI_Q,
    "r": kc.kVK_ANSI_R,
    "s": kc.kVK_ANSI_S,
    "t": kc.kVK_ANSI_T,
    "u": kc.kVK_ANSI_U,
    "v": kc.kVK_ANSI_V,
    "w": kc.kVK_ANSI_W,
    "x": kc.kVK_ANSI_X,
    "y": kc.kVK_ANSI_Y,
    "z": kc.kVK_ANSI_Z,
    "0": kc.kVK_ANSI_0,
    "1": kc.kVK_ANSI_1,
    "2": kc.kVK_ANSI_2,
    "3": kc.kVK_ANSI_3,
    "4": kc.kVK_ANSI_4,
    "5": kc.kVK_ANSI_5,
    "6": kc.kVK_ANSI_6,
    "7": kc.kVK_ANSI_7,
    "8": kc.kVK_ANSI_8,
    "9": kc.kVK_ANSI_9,
    "=": kc.kVK_ANSI_Equal,
    "[": kc.kVK_ANSI_LeftBracket,
    "]": kc.kVK_ANSI_RightBracket,
    "'": kc.kVK_ANSI_Quote,
    "\\": kc.kVK_ANSI_Backslash,
    "/": kc.kVK_ANSI_Slash,
    ".": kc.kVK_ANSI_Period,
    "`": kc.kVK_ANSI_Grave,
}
_CHARS_BY_KEYCODE: Dict[int, str] = {code: char for char, code in _LAYOUT.items()}


def is_modifier_name(name: str) -> bool:
    return name in _MODIFIERS_BY_NAME


def is_literal_name(name: str) -> bool:
    return name in _LITERALS_BY_NAME


def is_layout_char(char: str) -> bool:
    return len(char) == 1 and char.lower() in _LAYOUT


def flag_for_modifier_name(name: str) -> Optional[Modifier]:
    return _MODIFIERS_BY_NAME.get(name)


def keycode_for_literal_name(name: str) -> Optional[LiteralKey]:
    """Return the literal entry for `name`, including whether it implies fn."""
    return _LITERALS_BY_NAME.get(name)


def keycode_for_char(char: str) -> int:
    """Map a printable character to its keycode on the US ANSI layout.

    Letters are case-insensitive.  Raises ValueError for characters that have
    no key of their own on the layout.
    """
    try:
        return _LAYOUT[char.lower()]
    except KeyError:
        raise ValueError(f"no keycode for character {char!r}") from None


def keycode_from_hex(text: str) -> int:
    return int(text, 16)


def literal_for_keycode(keycode: int) -> Optional[LiteralKey]:
    return _LITERALS_BY_KEYCODE.get(keycode)


def char_for_keycode(keycode: int) -> Optional[str]:
    return _CHARS_BY_KEYCODE.get(keycode)


def modifier_names(flags: int) -> list[str]:
    """Decompose `flags` into single-bit modifier names in source order."""
    names = []
    for name, flag in MODIFIER_NAMES:
        if flag is Modifier.HYPER:
            continue
        if flags & flag:
            names.append(name)
    return names
