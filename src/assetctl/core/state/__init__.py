"""Resolved enablement state: views, resolver, toggle and impact analysis."""
from __future__ import annotations

from .filters import asset_matches, filter_assets
from .impact import (
    CollectionImpact,
    ImpactChange,
    MemberImpact,
    analyze_collection_toggle,
)
from .resolver import build_view, collect_orphans, inherited_state, resolve
from .session import DomainState
from .toggle import ToggleResult, plan_toggle, toggle_asset
from .views import AssetView, CollectionRef, InheritedState, OrphanEntry, Resolution

__all__ = [
    "AssetView",
    "CollectionImpact",
    "CollectionRef",
    "DomainState",
    "ImpactChange",
    "InheritedState",
    "MemberImpact",
    "OrphanEntry",
    "Resolution",
    "ToggleResult",
    "analyze_collection_toggle",
    "asset_matches",
    "build_view",
    "collect_orphans",
    "filter_assets",
    "inherited_state",
    "plan_toggle",
    "resolve",
    "toggle_asset",
]
