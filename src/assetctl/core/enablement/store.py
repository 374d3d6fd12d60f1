"""In-memory override store.

One ``path -> bool`` map per asset kind, keyed by the catalog path of the
asset (collections use their own path, never their id). The store is mutated
in place by toggles, orphan cleanup and resets; persistence is a separate,
explicit step (see ``persistence``).
"""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, Iterator, Mapping, Optional, Tuple

from assetctl.core.catalog.model import ASSET_KINDS, AssetKind
from assetctl.core.utils.time import format_utc, parse_iso8601

CURRENT_VERSION = 1


@dataclass
class EnablementStore:
    version: int = CURRENT_VERSION
    updated_at: Optional[datetime] = None
    prompts: Dict[str, bool] = field(default_factory=dict)
    instructions: Dict[str, bool] = field(default_factory=dict)
    chat_modes: Dict[str, bool] = field(default_factory=dict)
    collections: Dict[str, bool] = field(default_factory=dict)
    # Free-form section carried through untouched for forward compatibility.
    overrides: Dict[str, Any] = field(default_factory=dict)

    def map_for(self, kind: AssetKind) -> Dict[str, bool]:
        return getattr(self, kind.store_key)

    def get(self, kind: AssetKind, path: str) -> Optional[bool]:
        return self.map_for(kind).get(path)

    def set(self, kind: AssetKind, path: str, value: bool) -> None:
        self.map_for(kind)[path] = bool(value)

    def remove(self, kind: AssetKind, path: str) -> bool:
        """Drop the override for ``path``; return whether one existed."""
        return self.map_for(kind).pop(path, None) is not None

    def entries(self) -> Iterator[Tuple[AssetKind, str, bool]]:
        for kind in ASSET_KINDS:
            for path, value in sorted(self.map_for(kind).items()):
                yield kind, path, value

    def count(self) -> int:
        return sum(len(self.map_for(kind)) for kind in ASSET_KINDS)

    def clear(self) -> None:
        """Drop every override and the last-saved timestamp."""
        for kind in ASSET_KINDS:
            self.map_for(kind).clear()
        self.overrides.clear()
        self.updated_at = None

    # ------------------------------------------------------------------
    # Serialization
    # ------------------------------------------------------------------

    def to_dict(self, *, use_z_suffix: bool = True) -> Dict[str, Any]:
        payload: Dict[str, Any] = {
            "version": self.version,
            "updated_at": format_utc(self.updated_at, use_z_suffix=use_z_suffix) if self.updated_at else None,
            "overrides": dict(self.overrides),
        }
        for kind in ASSET_KINDS:
            payload[kind.store_key] = dict(sorted(self.map_for(kind).items()))
        return payload

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "EnablementStore":
        """Build a store from an already-validated payload.

        Missing sections default to empty; version 0 is normalised to 1.
        """
        raw_updated = data.get("updated_at")
        store = cls(
            version=int(data.get("version") or CURRENT_VERSION),
            updated_at=parse_iso8601(raw_updated) if raw_updated else None,
            overrides=dict(data.get("overrides") or {}),
        )
        for kind in ASSET_KINDS:
            section = data.get(kind.store_key) or {}
            store.map_for(kind).update({str(k): bool(v) for k, v in section.items()})
        return store


__all__ = ["EnablementStore", "CURRENT_VERSION"]
