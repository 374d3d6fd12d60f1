"""assetctl configuration system.

Usage:
    from assetctl.core.config import ConfigManager
    from assetctl.core.config.domains import CatalogConfig

    config = ConfigManager(repo_root=Path("/path/to/project")).load_config()
    catalog = CatalogConfig(repo_root=Path("/path/to/project"))
    source = catalog.content_dir
"""
from __future__ import annotations

from .base import BaseDomainConfig
from .cache import clear_all_caches, get_cached_config, is_cached
from .domains import CatalogConfig, EnablementConfig, LoggingConfig, PathsConfig, TimeConfig
from .manager import ConfigManager

__all__ = [
    "ConfigManager",
    "BaseDomainConfig",
    "get_cached_config",
    "clear_all_caches",
    "is_cached",
    "CatalogConfig",
    "EnablementConfig",
    "LoggingConfig",
    "PathsConfig",
    "TimeConfig",
]
