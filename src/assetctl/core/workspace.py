"""Repository-level orchestration of catalog, overrides and local files.

A ``Workspace`` owns one ``DomainState`` for a repository root. It resolves
where catalog content comes from, loads the override file, runs toggles and
mirrors the resulting effective state into ``.github/``. Mutations mark the
workspace dirty; nothing is written to the override file until ``save()``.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from assetctl.core.catalog import AssetKind, SnapshotCache, is_fresh, load_catalog
from assetctl.core.config import (
    CatalogConfig,
    EnablementConfig,
    TimeConfig,
    get_cached_config,
)
from assetctl.core.enablement import load_enablement, save_enablement
from assetctl.core.exceptions import AssetNotFoundError, CatalogError
from assetctl.core.state import (
    AssetView,
    CollectionImpact,
    DomainState,
    ToggleResult,
    analyze_collection_toggle,
    toggle_asset,
)
from assetctl.core.sync import (
    LocalStatus,
    RepoPaths,
    apply_from_upstream,
    compute_local_status,
    remove_local,
)
from assetctl.core.utils.paths import resolve_project_root

logger = logging.getLogger(__name__)


class Workspace:
    """Load, mutate and persist the enablement state of one repository."""

    def __init__(self, repo_root: Optional[Path] = None, *, config: Optional[Dict[str, Any]] = None) -> None:
        self.repo_root = Path(repo_root).resolve() if repo_root else resolve_project_root()
        self._config = config if config is not None else get_cached_config(repo_root=self.repo_root)
        self.paths = RepoPaths.from_config(self.repo_root, config=self._config)
        self.catalog_config = CatalogConfig(self.repo_root, config=self._config)
        self.enablement_config = EnablementConfig(self.repo_root, config=self._config)
        self.time_config = TimeConfig(self.repo_root, config=self._config)

        self.content_dir: Optional[Path] = None
        self.warnings: List[str] = []
        self.dirty = False
        self._state: Optional[DomainState] = None

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------
    def resolve_content_dir(self) -> Path:
        """Configured ``catalog.content_dir``, else the newest cached snapshot.

        Raises:
            CatalogError: If neither is available
        """
        configured = self.catalog_config.content_dir
        if configured is not None:
            if not configured.is_dir():
                raise CatalogError(
                    f"Configured content directory does not exist: {configured}",
                    context={"content_dir": str(configured)},
                )
            return configured

        cache = SnapshotCache(self.paths.cache_dir)
        snapshot = cache.latest()
        if snapshot is None:
            raise CatalogError(
                "No catalog content available: set catalog.content_dir or populate the snapshot cache",
                context={"cache_dir": str(self.paths.cache_dir)},
            )
        hours = self.catalog_config.freshness_hours
        if hours > 0 and not is_fresh(snapshot, hours):
            self.warnings.append(
                f"Catalog snapshot {snapshot.commit} is older than {hours:g}h"
            )
        removed = cache.prune(self.catalog_config.max_cached_snapshots)
        if removed:
            logger.info("Pruned %d cached snapshots", len(removed))
        return snapshot.content_dir

    def load(self) -> List[str]:
        """(Re)load catalog and overrides from disk; return the load warnings."""
        self._state, self.content_dir = self._read_state()
        return list(self.warnings)

    def _read_state(self) -> Tuple[DomainState, Path]:
        self.warnings = []
        content_dir = self.resolve_content_dir()
        catalog_load = load_catalog(content_dir)
        enablement_load = load_enablement(self.paths.enablement_file)

        self.warnings.extend(catalog_load.warnings)
        self.warnings.extend(str(w) for w in enablement_load.warnings)
        self.dirty = False
        logger.debug(
            "Loaded workspace %s: %d catalog entries, %d overrides",
            self.repo_root,
            catalog_load.catalog.size(),
            enablement_load.store.count(),
        )
        return DomainState(catalog_load.catalog, enablement_load.store), content_dir

    @property
    def state(self) -> DomainState:
        state = self._state
        if state is None:
            state, self.content_dir = self._read_state()
            self._state = state
        return state

    def _content_dir(self) -> Path:
        content_dir = self.content_dir
        if content_dir is None:
            self._state, content_dir = self._read_state()
            self.content_dir = content_dir
        return content_dir

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def find(self, kind: AssetKind, path: str) -> AssetView:
        view = self.state.find(kind, path)
        if view is None:
            raise AssetNotFoundError(f"Asset not found: {path}", kind=kind.value, path=path)
        return view

    def local_status(self, view: AssetView) -> LocalStatus:
        return compute_local_status(self.paths, self._content_dir(), view.kind, view.path)

    def impact(self, collection_path: str) -> CollectionImpact:
        return analyze_collection_toggle(self.state, collection_path)

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------
    def toggle(self, kind: AssetKind, path: str, *, sync: bool = True) -> ToggleResult:
        result = toggle_asset(
            self.state,
            kind,
            path,
            unresolved_baseline=self.enablement_config.unresolved_baseline,
        )
        self.dirty = True
        if sync:
            self.apply_after_toggle(result)
        return result

    def apply_after_toggle(self, result: ToggleResult) -> None:
        """Mirror the post-toggle effective state onto local files.

        For a collection, every member item that resolves to an asset is
        applied or removed according to its own new effective state.
        """
        asset = result.asset
        if asset.kind is not AssetKind.COLLECTION:
            self._sync_one(asset)
            return

        collection = self.state.index.collection_by_path(asset.path)
        if collection is None:
            return
        for item in collection.items:
            member = self.state.find(item.kind, item.path)
            if member is not None:
                self._sync_one(member)

    def _sync_one(self, view: AssetView) -> None:
        if view.effective:
            apply_from_upstream(self.paths, self._content_dir(), view.kind, view.path)
        else:
            remove_local(self.paths, view.kind, view.path)

    def apply(self, kind: AssetKind, path: str) -> Optional[Path]:
        """Copy one asset's catalog file over its local copy (no state change)."""
        view = self.find(kind, path)
        return apply_from_upstream(self.paths, self._content_dir(), view.kind, view.path)

    def cleanup_orphans(self) -> int:
        removed = self.state.cleanup_orphans()
        if removed:
            self.dirty = True
        return removed

    def reset(self) -> int:
        """Delete local copies of every file-backed asset, then clear all overrides.

        Returns the number of local files removed.
        """
        removed = 0
        for view in self.state.all_assets():
            if view.kind is AssetKind.COLLECTION:
                continue
            if remove_local(self.paths, view.kind, view.path):
                removed += 1
        self.state.reset_all()
        self.dirty = True
        return removed

    def save(self) -> Path:
        target = self.paths.enablement_file
        save_enablement(
            target,
            self.state.store,
            strip_microseconds=self.time_config.strip_microseconds,
            use_z_suffix=self.time_config.use_z_suffix,
        )
        self.dirty = False
        return target


__all__ = ["Workspace"]
