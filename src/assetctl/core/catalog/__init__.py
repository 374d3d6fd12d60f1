"""Catalog model, lookup index, file loader and snapshot cache."""
from __future__ import annotations

from .index import CatalogIndex
from .loader import CatalogLoad, build_catalog, load_catalog
from .model import (
    ASSET_KINDS,
    AssetKind,
    Catalog,
    ChatMode,
    Collection,
    CollectionItem,
    Instruction,
    Prompt,
)
from .snapshots import Snapshot, SnapshotCache, is_fresh

__all__ = [
    "ASSET_KINDS",
    "AssetKind",
    "Catalog",
    "CatalogIndex",
    "CatalogLoad",
    "ChatMode",
    "Collection",
    "CollectionItem",
    "Instruction",
    "Prompt",
    "Snapshot",
    "SnapshotCache",
    "build_catalog",
    "is_fresh",
    "load_catalog",
]
