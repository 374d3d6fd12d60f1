"""The single owned aggregate of catalog, overrides and resolved views.

Every mutation goes through this object and is followed by a full
recompute; views are never patched incrementally.
"""
from __future__ import annotations

import logging
from typing import Dict, List, Optional

from assetctl.core.catalog.index import CatalogIndex
from assetctl.core.catalog.model import ASSET_KINDS, AssetKind, Catalog
from assetctl.core.enablement.store import EnablementStore

from .resolver import collect_orphans, resolve
from .views import AssetView, OrphanEntry

logger = logging.getLogger(__name__)


class DomainState:
    def __init__(self, catalog: Catalog, store: Optional[EnablementStore] = None) -> None:
        self.catalog = catalog
        self.index = CatalogIndex(catalog)
        self.store = store if store is not None else EnablementStore()
        self._assets: Dict[AssetKind, List[AssetView]] = {}
        self._orphans: List[OrphanEntry] = []
        self.recompute()

    def recompute(self) -> None:
        resolution = resolve(self.index, self.store)
        self._assets = resolution.assets
        self._orphans = resolution.orphans

    def assets(self, kind: AssetKind) -> List[AssetView]:
        return list(self._assets.get(kind, []))

    def all_assets(self) -> List[AssetView]:
        return [view for kind in ASSET_KINDS for view in self._assets.get(kind, [])]

    def find(self, kind: AssetKind, path: str) -> Optional[AssetView]:
        for view in self._assets.get(kind, []):
            if view.path == path:
                return view
        return None

    def orphans(self) -> List[OrphanEntry]:
        return list(self._orphans)

    def cleanup_orphans(self) -> int:
        """Remove every orphaned override; return how many were removed."""
        orphans = collect_orphans(self.index, self.store)
        if not orphans:
            return 0
        for orphan in orphans:
            self.store.remove(orphan.kind, orphan.path)
        self.recompute()
        logger.info("Removed %d orphan enablement entries", len(orphans))
        return len(orphans)

    def reset_all(self) -> None:
        """Clear every override and the last-saved timestamp."""
        self.store.clear()
        self.recompute()
        logger.info("Reset all enablement overrides")

    def enabled_count(self, kind: Optional[AssetKind] = None) -> int:
        views = self.assets(kind) if kind is not None else self.all_assets()
        return sum(1 for v in views if v.effective)


__all__ = ["DomainState"]
