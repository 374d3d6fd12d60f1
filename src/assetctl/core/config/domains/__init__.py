"""Domain-specific configuration accessors."""
from __future__ import annotations

from .catalog import CatalogConfig
from .enablement import EnablementConfig
from .logging import LoggingConfig
from .paths import PathsConfig
from .time import TimeConfig

__all__ = [
    "CatalogConfig",
    "EnablementConfig",
    "LoggingConfig",
    "PathsConfig",
    "TimeConfig",
]
