"""Free-text search over resolved views (presentation helper)."""
from __future__ import annotations

from typing import Iterable, List

from .views import AssetView


def asset_matches(asset: AssetView, query: str) -> bool:
    """Case-insensitive substring match across the view's searchable text."""
    needle = query.strip().lower()
    if not needle:
        return True

    haystacks = [asset.name, asset.path, asset.slug or "", asset.description]
    haystacks.extend(asset.tags)
    haystacks.extend(asset.apply_to)
    for ref in asset.collections:
        haystacks.extend((ref.id, ref.name))
    return any(needle in text.lower() for text in haystacks)


def filter_assets(assets: Iterable[AssetView], query: str) -> List[AssetView]:
    return [a for a in assets if asset_matches(a, query)]


__all__ = ["asset_matches", "filter_assets"]
