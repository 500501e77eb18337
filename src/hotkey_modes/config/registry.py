from __future__ import annotations

import logging
from typing import Dict, Iterator, List, Optional

from .ir import Hotkey, Mode

logger = logging.getLogger(__name__)

DEFAULT_MODE = "default"


class ModeRegistry:
    """Mode name -> Mode table built by one parse.

    The registry is owned by the parse that fills it and is only handed out
    once that parse succeeds.
    """

    def __init__(self) -> None:
        self._modes: Dict[str, Mode] = {}
        self._hotkeys: List[Hotkey] = []

    def __contains__(self, name: object) -> bool:
        return name in self._modes

    def __getitem__(self, name: str) -> Mode:
        return self._modes[name]

    def __iter__(self) -> Iterator[Mode]:
        return iter(self._modes.values())

    def __len__(self) -> int:
        return len(self._modes)

    @property
    def modes(self) -> Dict[str, Mode]:
        return dict(self._modes)

    def find(self, name: str) -> Optional[Mode]:
        return self._modes.get(name)

    def add(self, mode: Mode) -> None:
        if mode.name in self._modes:
            raise ValueError(f"mode {mode.name!r} is already registered")
        self._modes[mode.name] = mode

    def resolve(self, name: str) -> Optional[Mode]:
        """Find a mode by name, creating the default mode on first reference."""
        mode = self._modes.get(name)
        if mode is None and name == DEFAULT_MODE:
            mode = self.default_mode()
        return mode

    def default_mode(self) -> Mode:
        mode = self._modes.get(DEFAULT_MODE)
        if mode is None:
            mode = Mode(name=DEFAULT_MODE)
            self._modes[DEFAULT_MODE] = mode
            logger.debug("created implicit mode '%s'", DEFAULT_MODE)
        return mode

    def register(self, hotkey: Hotkey) -> None:
        """Bind `hotkey` in every mode it names; a later binding of the same key wins."""
        for name in hotkey.modes:
            replaced = self._modes[name].bind(hotkey)
            if replaced is not None and replaced is not hotkey:
                logger.debug(
                    "line %d replaces the binding from line %d in mode '%s'",
                    hotkey.line,
                    replaced.line,
                    name,
                )
        self._hotkeys.append(hotkey)

    def hotkeys(self) -> List[Hotkey]:
        """Hotkeys still bound in at least one mode, in declaration order."""
        live = {id(hk) for mode in self._modes.values() for hk in mode.hotkeys.values()}
        return [hk for hk in self._hotkeys if id(hk) in live]

    def lookup(self, mode: str, modifiers: int, keycode: int) -> Optional[Hotkey]:
        """Return the hotkey bound to `modifiers` + `keycode` in `mode`."""
        found = self._modes.get(mode)
        if found is None:
            return None
        return found.find(modifiers, keycode)
