"""State resolution: catalog index + override store -> asset views.

For a non-collection asset::

    explicit  = store[kind].get(path)
    inherited = first (by ascending collection id) collection listing the
                asset whose own path has an explicit override
    effective = explicit, else inherited.value, else False

Collections never inherit, even when nested as items of another collection.
"""
from __future__ import annotations

import logging
from typing import List, Optional, Tuple

from assetctl.core.catalog.index import CatalogIndex
from assetctl.core.catalog.model import (
    ASSET_KINDS,
    AssetKind,
    ChatMode,
    Collection,
    Instruction,
    Prompt,
)
from assetctl.core.enablement.store import EnablementStore

from .views import AssetView, CollectionRef, InheritedState, OrphanEntry, Resolution

logger = logging.getLogger(__name__)


def _ref(collection: Collection) -> CollectionRef:
    return CollectionRef(id=collection.id, name=collection.name, path=collection.path)


def inherited_state(index: CatalogIndex, store: EnablementStore, path: str) -> Optional[InheritedState]:
    # memberships() is already sorted by id, so the first hit is the tie-break winner.
    overrides = store.map_for(AssetKind.COLLECTION)
    for collection_id in index.memberships(path):
        collection = index.collection_by_id(collection_id)
        if collection is None:
            continue
        value = overrides.get(collection.path)
        if value is not None:
            return InheritedState(collection=_ref(collection), value=value)
    return None


def collections_for(index: CatalogIndex, path: str) -> Tuple[CollectionRef, ...]:
    refs = []
    for collection_id in index.memberships(path):
        collection = index.collection_by_id(collection_id)
        if collection is not None:
            refs.append(_ref(collection))
    return tuple(refs)


def build_view(index: CatalogIndex, store: EnablementStore, entry: object) -> AssetView:
    """Resolve one catalog entry into its view."""
    if isinstance(entry, Collection):
        explicit = store.get(AssetKind.COLLECTION, entry.path)
        return AssetView(
            kind=AssetKind.COLLECTION,
            path=entry.path,
            name=entry.name,
            slug=entry.id,
            description=entry.description,
            tags=entry.tags,
            member_count=len(entry.items),
            explicit=explicit,
            inherited=None,
            effective=explicit if explicit is not None else False,
        )

    kind: AssetKind = entry.kind  # type: ignore[attr-defined]
    path: str = entry.path  # type: ignore[attr-defined]
    explicit = store.get(kind, path)
    inherited = inherited_state(index, store, path)
    if explicit is not None:
        effective = explicit
    elif inherited is not None:
        effective = inherited.value
    else:
        effective = False

    mode = None
    apply_to: Tuple[str, ...] = ()
    tools: Tuple[str, ...] = ()
    if isinstance(entry, Prompt):
        mode = entry.mode or None
    elif isinstance(entry, Instruction):
        apply_to = entry.apply_to
    elif isinstance(entry, ChatMode):
        tools = entry.tools

    return AssetView(
        kind=kind,
        path=path,
        name=entry.name,  # type: ignore[attr-defined]
        slug=entry.slug,  # type: ignore[attr-defined]
        description=entry.description,  # type: ignore[attr-defined]
        tags=entry.tags,  # type: ignore[attr-defined]
        apply_to=apply_to,
        mode=mode,
        tools=tools,
        collections=collections_for(index, path),
        explicit=explicit,
        inherited=inherited,
        effective=effective,
    )


def collect_orphans(index: CatalogIndex, store: EnablementStore) -> List[OrphanEntry]:
    orphans = [
        OrphanEntry(kind=kind, path=path, value=value)
        for kind, path, value in store.entries()
        if not index.contains(kind, path)
    ]
    # Stable sort keeps kind declaration order among equal paths.
    orphans.sort(key=lambda o: o.path)
    return orphans


def resolve(index: CatalogIndex, store: EnablementStore) -> Resolution:
    """Resolve every catalog asset and collect orphaned overrides."""
    result = Resolution()
    for kind in ASSET_KINDS:
        views = [build_view(index, store, entry) for entry in index.catalog.entries(kind)]
        views.sort(key=lambda v: v.name.lower())
        result.assets[kind] = views
    result.orphans = collect_orphans(index, store)
    logger.debug(
        "Resolved %d assets (%d enabled), %d orphan overrides",
        sum(len(v) for v in result.assets.values()),
        sum(1 for views in result.assets.values() for v in views if v.effective),
        len(result.orphans),
    )
    return result


__all__ = ["resolve", "build_view", "inherited_state", "collections_for", "collect_orphans"]
