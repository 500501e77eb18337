from __future__ import annotations

from enum import IntFlag
from typing import Dict, List, NamedTuple, Optional

from pydantic import BaseModel, ConfigDict, Field

from ..macos.modifiers import Modifier


class HotkeyFlag(IntFlag):
    """Behaviour flags of a hotkey that are not part of its identity."""

    PASSTHROUGH = 1 << 0
    ACTIVATE = 1 << 1


class HotkeyKey(NamedTuple):
    """Canonical identity of a hotkey inside one mode."""

    modifiers: int
    keycode: int


class Hotkey(BaseModel):
    """A modifier + key binding to either a command or a mode activation."""

    model_config = ConfigDict(frozen=True)

    modes: List[str] = Field(min_length=1)
    modifiers: int = 0
    keycode: int
    flags: int = 0
    command: Optional[str] = None
    activate: Optional[str] = None
    line: int = -1
    column: int = -1

    @property
    def key(self) -> HotkeyKey:
        return HotkeyKey(self.modifiers, self.keycode)

    @property
    def modifier_flags(self) -> Modifier:
        return Modifier(self.modifiers)

    @property
    def hotkey_flags(self) -> HotkeyFlag:
        return HotkeyFlag(self.flags)

    @property
    def passthrough(self) -> bool:
        return bool(self.flags & HotkeyFlag.PASSTHROUGH)

    @property
    def activates_mode(self) -> bool:
        return bool(self.flags & HotkeyFlag.ACTIVATE)


class Mode(BaseModel):
    """A named input context and the hotkeys bound while it is active."""

    name: str
    command: Optional[str] = None
    hotkeys: Dict[HotkeyKey, Hotkey] = Field(default_factory=dict)
    line: int = -1
    column: int = -1

    @property
    def implicit(self) -> bool:
        """Whether the mode was created by reference rather than declared."""
        return self.line < 0

    def bind(self, hotkey: Hotkey) -> Optional[Hotkey]:
        """Bind `hotkey`, returning the hotkey it replaced if any."""
        previous = self.hotkeys.get(hotkey.key)
        self.hotkeys[hotkey.key] = hotkey
        return previous

    def find(self, modifiers: int, keycode: int) -> Optional[Hotkey]:
        return self.hotkeys.get(HotkeyKey(modifiers, keycode))
