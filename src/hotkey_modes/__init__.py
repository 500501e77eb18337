"""Parser and binding-table compiler for modal hotkey daemon configs.

Start with `hotkey_modes.config.parse_config` or `ConfigFrontend.load`.
"""
from __future__ import annotations

from .config import (
    ConfigFrontend,
    Hotkey,
    HotkeyConfigError,
    Mode,
    ModeRegistry,
    ParseError,
    dump_config,
    parse_config,
)

__all__ = [
    "ConfigFrontend",
    "Hotkey",
    "HotkeyConfigError",
    "Mode",
    "ModeRegistry",
    "ParseError",
    "dump_config",
    "parse_config",
]

__version__ = "0.1.0"
