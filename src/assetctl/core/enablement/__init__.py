"""Override store and its JSON persistence."""
from __future__ import annotations

from .persistence import (
    EnablementLoad,
    EnablementWarning,
    WarningKind,
    load_enablement,
    parse_enablement,
    save_enablement,
)
from .store import CURRENT_VERSION, EnablementStore

__all__ = [
    "CURRENT_VERSION",
    "EnablementLoad",
    "EnablementStore",
    "EnablementWarning",
    "WarningKind",
    "load_enablement",
    "parse_enablement",
    "save_enablement",
]
