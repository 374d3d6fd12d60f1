"""Local cache of content snapshots.

Each snapshot is a directory under the cache root::

    <cache_dir>/<commit>/metadata.json   {"commit": "...", "fetched_at": "<iso8601>"}
    <cache_dir>/<commit>/content/        prompts/, instructions/, chatmodes/, collections/

Snapshots are produced by an external fetcher; this module only selects,
ages, and prunes them.
"""
from __future__ import annotations

import logging
import shutil
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from pathlib import Path
from typing import List, Optional

from assetctl.core.utils.io import read_json
from assetctl.core.utils.time import parse_iso8601

logger = logging.getLogger(__name__)

METADATA_FILE = "metadata.json"
CONTENT_DIR = "content"


@dataclass(frozen=True)
class Snapshot:
    commit: str
    fetched_at: datetime
    root: Path

    @property
    def content_dir(self) -> Path:
        return self.root / CONTENT_DIR


class SnapshotCache:
    def __init__(self, cache_dir: Path) -> None:
        self.cache_dir = Path(cache_dir)

    def _read(self, entry: Path) -> Optional[Snapshot]:
        meta_path = entry / METADATA_FILE
        if not meta_path.is_file() or not (entry / CONTENT_DIR).is_dir():
            return None
        try:
            meta = read_json(meta_path)
            return Snapshot(
                commit=str(meta["commit"]),
                fetched_at=parse_iso8601(str(meta["fetched_at"])),
                root=entry,
            )
        except (OSError, KeyError, TypeError, ValueError) as exc:
            logger.warning("Ignoring unreadable snapshot %s: %s", entry, exc)
            return None

    def snapshots(self) -> List[Snapshot]:
        """Return valid snapshots, newest first."""
        if not self.cache_dir.is_dir():
            return []
        found = [s for s in (self._read(p) for p in self.cache_dir.iterdir() if p.is_dir()) if s]
        found.sort(key=lambda s: (s.fetched_at, s.commit), reverse=True)
        return found

    def latest(self) -> Optional[Snapshot]:
        snaps = self.snapshots()
        return snaps[0] if snaps else None

    def prune(self, max_entries: int) -> List[str]:
        """Delete the oldest snapshots beyond ``max_entries``; return removed commits."""
        removed: List[str] = []
        for snap in self.snapshots()[max(0, max_entries):]:
            shutil.rmtree(snap.root, ignore_errors=True)
            removed.append(snap.commit)
            logger.info("Pruned cached snapshot %s", snap.commit)
        return removed


def is_fresh(snapshot: Snapshot, hours: float, *, now: Optional[datetime] = None) -> bool:
    current = now or datetime.now(timezone.utc)
    return current - snapshot.fetched_at < timedelta(hours=hours)


__all__ = ["Snapshot", "SnapshotCache", "is_fresh", "METADATA_FILE", "CONTENT_DIR"]
