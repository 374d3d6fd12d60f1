"""Catalog source configuration.

The catalog is read from ``content_dir`` when set, otherwise from the newest
snapshot under ``<project_dir>/<cache_dir>``.
"""
from __future__ import annotations

from functools import cached_property
from pathlib import Path
from typing import Optional

from ..base import BaseDomainConfig


class CatalogConfig(BaseDomainConfig):
    def _config_section(self) -> str:
        return "catalog"

    @cached_property
    def content_dir(self) -> Optional[Path]:
        raw = self.section.get("content_dir")
        if not raw:
            return None
        p = Path(str(raw)).expanduser()
        return p if p.is_absolute() else (self.repo_root / p)

    @cached_property
    def cache_dir(self) -> str:
        return str(self.section.get("cache_dir") or "cache")

    @cached_property
    def max_cached_snapshots(self) -> int:
        return max(1, int(self.section.get("max_cached_snapshots", 5) or 5))

    @cached_property
    def freshness_hours(self) -> float:
        return float(self.section.get("freshness_hours", 12) or 0)
