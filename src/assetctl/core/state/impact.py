"""Read-only preview of a collection toggle.

The projected collection state is ``not collection.effective``. A member with
an explicit override keeps its current effective state; any other member is
projected to the new collection state. Members are classified by comparing
current and projected effective state.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional

from assetctl.core.catalog.model import CollectionItem
from assetctl.core.exceptions import CollectionNotFoundError

from .session import DomainState
from .views import AssetView


class ImpactChange(str, Enum):
    WILL_ENABLE = "will_enable"
    WILL_DISABLE = "will_disable"
    UNCHANGED = "unchanged"


@dataclass(frozen=True)
class MemberImpact:
    item: CollectionItem
    view: AssetView
    current: bool
    projected: bool
    change: ImpactChange

    def to_dict(self) -> Dict[str, Any]:
        return {
            "kind": self.item.kind.value,
            "path": self.item.path,
            "name": self.view.name,
            "current": self.current,
            "projected": self.projected,
            "change": self.change.value,
        }


@dataclass
class CollectionImpact:
    collection: AssetView
    will_enable: bool
    total_members: int
    members: List[MemberImpact] = field(default_factory=list)
    # Items whose target is not in the catalog; counted in total_members only.
    missing: List[CollectionItem] = field(default_factory=list)

    def _count(self, change: ImpactChange) -> int:
        return sum(1 for m in self.members if m.change is change)

    @property
    def enable_count(self) -> int:
        return self._count(ImpactChange.WILL_ENABLE)

    @property
    def disable_count(self) -> int:
        return self._count(ImpactChange.WILL_DISABLE)

    @property
    def unchanged_count(self) -> int:
        return self._count(ImpactChange.UNCHANGED)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "collection": {
                "id": self.collection.slug,
                "path": self.collection.path,
                "name": self.collection.name,
                "effective": self.collection.effective,
            },
            "willEnable": self.will_enable,
            "totalMembers": self.total_members,
            "enableCount": self.enable_count,
            "disableCount": self.disable_count,
            "unchangedCount": self.unchanged_count,
            "members": [m.to_dict() for m in self.members],
            "missing": [{"kind": i.kind.value, "path": i.path} for i in self.missing],
        }


def classify(current: bool, projected: bool) -> ImpactChange:
    if current == projected:
        return ImpactChange.UNCHANGED
    return ImpactChange.WILL_ENABLE if projected else ImpactChange.WILL_DISABLE


def analyze_collection_toggle(state: DomainState, collection_path: str) -> CollectionImpact:
    """Preview the effect of toggling the collection at ``collection_path``.

    Raises:
        CollectionNotFoundError: If no collection with that path is in the catalog
    """
    collection = state.index.collection_by_path(collection_path)
    view: Optional[AssetView] = state.find(collection.kind, collection_path) if collection else None
    if collection is None or view is None:
        raise CollectionNotFoundError(f"Collection not found: {collection_path}", path=collection_path)

    will_enable = not view.effective
    impact = CollectionImpact(collection=view, will_enable=will_enable, total_members=len(collection.items))
    for item in collection.items:
        member = state.find(item.kind, item.path)
        if member is None:
            impact.missing.append(item)
            continue
        projected = member.effective if member.explicit is not None else will_enable
        impact.members.append(
            MemberImpact(
                item=item,
                view=member,
                current=member.effective,
                projected=projected,
                change=classify(member.effective, projected),
            )
        )
    return impact


__all__ = [
    "ImpactChange",
    "MemberImpact",
    "CollectionImpact",
    "analyze_collection_toggle",
    "classify",
]
