"""Centralized configuration caching.

Domain configs read through ``get_cached_config`` so a single CLI invocation
loads and merges YAML once per repository root.
"""
from __future__ import annotations

import hashlib
import os
from pathlib import Path
from typing import Any, Dict, Optional

from assetctl.core.utils.paths import resolve_project_root

_config_cache: Dict[str, Dict[str, Any]] = {}


def _cache_key(repo_root: Path) -> str:
    # Env overrides and the project file mtime are part of the key so tests
    # and long-running processes never see stale config.
    env_items = sorted((k, v) for k, v in os.environ.items() if k.startswith("ASSETCTL_"))
    env_fp = hashlib.sha256(repr(env_items).encode("utf-8")).hexdigest()[:12]

    file_fp = []
    for name in ("config.yaml", "config.yml"):
        p = repo_root / ".assetctl" / name
        if p.exists():
            st = p.stat()
            file_fp.append((name, st.st_mtime_ns, st.st_size))
    files_hash = hashlib.sha256(repr(file_fp).encode("utf-8")).hexdigest()[:12]
    return f"{repo_root}:{env_fp}:{files_hash}"


def get_cached_config(repo_root: Optional[Path] = None) -> Dict[str, Any]:
    """Return the merged config for ``repo_root``, loading it on first use."""
    from .manager import ConfigManager

    root = Path(repo_root).expanduser().resolve() if repo_root else resolve_project_root()
    key = _cache_key(root)
    if key not in _config_cache:
        _config_cache[key] = ConfigManager(repo_root=root).load_config()
    return _config_cache[key]


def is_cached(repo_root: Path) -> bool:
    return _cache_key(Path(repo_root).expanduser().resolve()) in _config_cache


def clear_all_caches() -> None:
    """Drop every cached configuration (used by tests and after config edits)."""
    _config_cache.clear()


__all__ = ["get_cached_config", "clear_all_caches", "is_cached"]
