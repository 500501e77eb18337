from __future__ import annotations

from .backend import BindingTableBackend
from .models.binding import Binding
from .models.mode import ModeEntry
from .models.table import BindingTable

__all__ = [
    "Binding",
    "BindingTable",
    "BindingTableBackend",
    "ModeEntry",
]
