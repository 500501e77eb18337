from __future__ import annotations

from typing import List

from pydantic import BaseModel

from .mode import ModeEntry


class BindingTable(BaseModel):
    """Top-level export model."""

    description: str
    modes: List[ModeEntry]
