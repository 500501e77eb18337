"""Write a `ModeRegistry` back out in the config language.

Parsing the output of `dump_config` gives a registry equal to the input in
everything but source positions.  Every mode is written as an explicit
declaration, including an implicit `default`, so that activation targets
always exist before the hotkeys that use them.
"""
from __future__ import annotations

from typing import List

from ..macos.literals import char_for_keycode, literal_for_keycode, modifier_names
from ..macos.modifiers import Modifier
from .ir import Hotkey, Mode
from .registry import ModeRegistry

__all__ = ["dump_config", "format_hotkey", "format_mode"]


def format_mode(mode: Mode) -> str:
    if mode.command is None:
        return f":: {mode.name}"
    return f":: {mode.name} : {mode.command}"


def _format_key(hotkey: Hotkey) -> tuple[str, int]:
    """Return the key text and the modifiers left to print next to it."""
    modifiers = hotkey.modifiers
    literal = literal_for_keycode(hotkey.keycode)
    if literal is not None:
        if not literal.implicit_fn:
            return literal.name, modifiers
        if modifiers & Modifier.FN:
            return literal.name, modifiers & ~int(Modifier.FN)
    char = char_for_keycode(hotkey.keycode)
    if char is not None:
        return char, modifiers
    return f"0x{hotkey.keycode:02x}", modifiers


def format_hotkey(hotkey: Hotkey) -> str:
    parts: List[str] = [", ".join(hotkey.modes), "<"]

    key, modifiers = _format_key(hotkey)
    names = modifier_names(modifiers)
    if names:
        parts.extend([" + ".join(names), "-"])
    parts.append(key)

    if hotkey.passthrough:
        parts.append("->")
    if hotkey.activate is not None:
        parts.extend([";", hotkey.activate])
    else:
        parts.extend([":", hotkey.command or ""])
    return " ".join(parts).rstrip()


def dump_config(registry: ModeRegistry) -> str:
    """Serialize `registry` as config text.

    Whether a mode is implicit is positional metadata like `line` and
    `column`: an implicit `default` is written as `:: default` and reads back
    as a declared mode.
    """

    lines = [format_mode(mode) for mode in registry]
    hotkeys = registry.hotkeys()
    if lines and hotkeys:
        lines.append("")
    lines.extend(format_hotkey(hotkey) for hotkey in hotkeys)
    return "\n".join(lines) + "\n" if lines else ""
