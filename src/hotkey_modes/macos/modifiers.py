from __future__ import annotations

from enum import IntFlag


class Modifier(IntFlag):
    """macOS modifier flags; generic and left/right variants are distinct bits."""

    ALT = 1 << 0
    LALT = 1 << 1
    RALT = 1 << 2
    SHIFT = 1 << 3
    LSHIFT = 1 << 4
    RSHIFT = 1 << 5
    CMD = 1 << 6
    LCMD = 1 << 7
    RCMD = 1 << 8
    CTRL = 1 << 9
    LCTRL = 1 << 10
    RCTRL = 1 << 11
    FN = 1 << 12

    HYPER = CMD | ALT | SHIFT | CTRL


# Source order of the modifier names; also the order used when printing.
MODIFIER_NAMES: tuple[tuple[str, Modifier], ...] = (
    ("alt", Modifier.ALT),
    ("lalt", Modifier.LALT),
    ("ralt", Modifier.RALT),
    ("shift", Modifier.SHIFT),
    ("lshift", Modifier.LSHIFT),
    ("rshift", Modifier.RSHIFT),
    ("cmd", Modifier.CMD),
    ("lcmd", Modifier.LCMD),
    ("rcmd", Modifier.RCMD),
    ("ctrl", Modifier.CTRL),
    ("lctrl", Modifier.LCTRL),
    ("rctrl", Modifier.RCTRL),
    ("fn", Modifier.FN),
    ("hyper", Modifier.HYPER),
)
