from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field

from .binding import Binding


class ModeEntry(BaseModel):
    """A mode and the bindings active while it is current."""

    name: str
    command: Optional[str] = None
    bindings: List[Binding] = Field(default_factory=list)
