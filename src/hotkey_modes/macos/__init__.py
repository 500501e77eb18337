from __future__ import annotations

from .literals import (
    LITERAL_KEYS,
    LiteralKey,
    flag_for_modifier_name,
    keycode_for_char,
    keycode_for_literal_name,
    keycode_from_hex,
)
from .modifiers import Modifier

__all__ = [
    "LITERAL_KEYS",
    "LiteralKey",
    "Modifier",
    "flag_for_modifier_name",
    "keycode_for_char",
    "keycode_for_literal_name",
    "keycode_from_hex",
]
