"""Lookup structures derived from a flat catalog.

The index is built once per catalog load and is read-only afterwards.
"""
from __future__ import annotations

from typing import Dict, FrozenSet, Optional, Tuple

from .model import ASSET_KINDS, AssetKind, Catalog, Collection


class CatalogIndex:
    """Per-kind containment sets plus the asset → collection reverse index.

    ``memberships(path)`` returns the ids of every collection listing ``path``
    as an item, deduplicated and sorted ascending. Membership is keyed by path
    only; an item's declared kind does not participate.
    """

    def __init__(self, catalog: Catalog) -> None:
        self.catalog = catalog
        self._paths: Dict[AssetKind, FrozenSet[str]] = {
            kind: frozenset(entry.path for entry in catalog.entries(kind)) for kind in ASSET_KINDS
        }

        by_id: Dict[str, Collection] = {}
        by_path: Dict[str, Collection] = {}
        for collection in catalog.collections:
            # First definition wins on duplicate ids.
            by_id.setdefault(collection.id, collection)
            by_path.setdefault(collection.path, collection)
        self._by_id = by_id
        self._by_path = by_path

        membership: Dict[str, set[str]] = {}
        for collection in catalog.collections:
            for item in collection.items:
                membership.setdefault(item.path, set()).add(collection.id)
        self._membership: Dict[str, Tuple[str, ...]] = {
            path: tuple(sorted(ids)) for path, ids in membership.items()
        }

    def contains(self, kind: AssetKind, path: str) -> bool:
        return path in self._paths.get(kind, frozenset())

    def collection_by_id(self, collection_id: str) -> Optional[Collection]:
        return self._by_id.get(collection_id)

    def collection_by_path(self, path: str) -> Optional[Collection]:
        return self._by_path.get(path)

    def memberships(self, path: str) -> Tuple[str, ...]:
        return self._membership.get(path, ())


__all__ = ["CatalogIndex"]
