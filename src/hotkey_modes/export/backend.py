from __future__ import annotations

from typing import List

from hotkey_modes.config.ir import Hotkey, Mode
from hotkey_modes.config.registry import ModeRegistry
from hotkey_modes.macos.literals import modifier_names

from .models.binding import Binding
from .models.mode import ModeEntry
from .models.table import BindingTable


class BindingTableBackend:
    """Compile a parsed `ModeRegistry` into export models."""

    def compile(self, registry: ModeRegistry, *, description: str) -> BindingTable:
        modes: List[ModeEntry] = [self._lower_mode(mode) for mode in registry]
        return BindingTable(description=description, modes=modes)

    @staticmethod
    def _lower_mode(mode: Mode) -> ModeEntry:
        return ModeEntry(
            name=mode.name,
            command=mode.command,
            bindings=[_lower_hotkey(hotkey) for hotkey in mode.hotkeys.values()],
        )


def _lower_hotkey(hotkey: Hotkey) -> Binding:
    return Binding(
        keycode=hotkey.keycode,
        modifiers=modifier_names(hotkey.modifiers),
        modifier_flags=hotkey.modifiers,
        passthrough=hotkey.passthrough,
        command=hotkey.command,
        activate=hotkey.activate,
    )
