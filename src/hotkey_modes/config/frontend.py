from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Optional

from .errors import ConfigReadError
from .options import ParserOptions
from .parser import parse_config
from .registry import ModeRegistry

logger = logging.getLogger(__name__)


def find_config() -> Optional[Path]:
    """Find an existing config in the standard locations.

    Looks for $XDG_CONFIG_HOME/skhd/skhdrc (default: $HOME/.config), then
    $HOME/.skhdrc.  Returns `None` when neither exists.
    """
    home = os.getenv("HOME")
    xdg_config_home = os.getenv("XDG_CONFIG_HOME")
    if not xdg_config_home and home:
        xdg_config_home = os.path.join(home, ".config")

    candidates = []
    if xdg_config_home:
        candidates.append(Path(xdg_config_home, "skhd", "skhdrc"))
    if home:
        candidates.append(Path(home, ".skhdrc"))
    for candidate in candidates:
        if candidate.is_file():
            return candidate
    return None


class ConfigFrontend:
    """Read config files and parse them into a `ModeRegistry`."""

    def __init__(self, options: Optional[ParserOptions] = None) -> None:
        self.options = options if options is not None else ParserOptions()

    def read(self, path: str | Path) -> str:
        """Read a config file into a string."""

        path = Path(path)
        try:
            return path.read_text(encoding=self.options.encoding)
        except OSError as e:
            raise ConfigReadError(f"cannot read config: {e.strerror}", str(path)) from e
        except UnicodeDecodeError as e:
            raise ConfigReadError(f"cannot decode config: {e.reason}", str(path)) from e

    def parse(self, text: str, *, source_name: str = "<config>") -> ModeRegistry:
        return parse_config(text, options=self.options, source_name=source_name)

    def load(self, path: str | Path) -> ModeRegistry:
        text = self.read(path)
        logger.debug("read %d bytes from %s", len(text), path)
        return self.parse(text, source_name=str(path))
