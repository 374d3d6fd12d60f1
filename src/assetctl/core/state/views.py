"""Resolved per-asset projections.

Views are rebuilt from scratch on every recompute and carry no identity
across recomputes.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple

from assetctl.core.catalog.model import AssetKind


@dataclass(frozen=True)
class CollectionRef:
    id: str
    name: str
    path: str


@dataclass(frozen=True)
class InheritedState:
    collection: CollectionRef
    value: bool


@dataclass(frozen=True)
class AssetView:
    kind: AssetKind
    path: str
    name: str
    slug: Optional[str] = None
    description: str = ""
    tags: Tuple[str, ...] = ()
    apply_to: Tuple[str, ...] = ()
    mode: Optional[str] = None
    tools: Tuple[str, ...] = ()
    collections: Tuple[CollectionRef, ...] = ()
    member_count: int = 0
    explicit: Optional[bool] = None
    inherited: Optional[InheritedState] = None
    effective: bool = False

    @property
    def source(self) -> str:
        """Where ``effective`` comes from: explicit, inherited or default."""
        if self.explicit is not None:
            return "explicit"
        if self.inherited is not None:
            return "inherited"
        return "default"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "kind": self.kind.value,
            "path": self.path,
            "name": self.name,
            "slug": self.slug,
            "description": self.description,
            "tags": list(self.tags),
            "applyTo": list(self.apply_to),
            "mode": self.mode,
            "tools": list(self.tools),
            "collections": [c.id for c in self.collections],
            "memberCount": self.member_count,
            "explicit": self.explicit,
            "inherited": (
                {"collection": self.inherited.collection.id, "value": self.inherited.value}
                if self.inherited
                else None
            ),
            "effective": self.effective,
            "source": self.source,
        }


@dataclass(frozen=True)
class OrphanEntry:
    """An override whose path no longer exists in the catalog under its kind."""

    kind: AssetKind
    path: str
    value: bool

    def to_dict(self) -> Dict[str, Any]:
        return {"kind": self.kind.value, "path": self.path, "value": self.value}


@dataclass
class Resolution:
    """Output of one resolver run."""

    assets: Dict[AssetKind, list[AssetView]] = field(default_factory=dict)
    orphans: list[OrphanEntry] = field(default_factory=list)


__all__ = ["CollectionRef", "InheritedState", "AssetView", "OrphanEntry", "Resolution"]
