from __future__ import annotations

from .binding import Binding
from .mode import ModeEntry
from .table import BindingTable

__all__ = ["Binding", "BindingTable", "ModeEntry"]
