from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field


class Binding(BaseModel):
    """One hotkey as seen by the daemon: key + modifiers -> action."""

    keycode: int
    modifiers: List[str] = Field(default_factory=list)
    modifier_flags: int = 0
    passthrough: bool = False
    command: Optional[str] = None
    activate: Optional[str] = None
