from __future__ import annotations

from datetime import datetime, timedelta, timezone
from pathlib import Path

from assetctl.core.catalog import SnapshotCache, is_fresh

from helpers.catalog import register_snapshot


def _at(hour: int) -> datetime:
    return datetime(2024, 5, 1, hour, 0, 0, tzinfo=timezone.utc)


def test_latest_returns_newest_registered_snapshot(tmp_path: Path) -> None:
    cache = SnapshotCache(tmp_path / "cache")
    register_snapshot(cache.cache_dir, "aaa111", fetched_at=_at(1))
    register_snapshot(cache.cache_dir, "bbb222", fetched_at=_at(3))
    register_snapshot(cache.cache_dir, "ccc333", fetched_at=_at(2))

    latest = cache.latest()

    assert latest is not None
    assert latest.commit == "bbb222"
    assert latest.content_dir == tmp_path / "cache" / "bbb222" / "content"
    assert [s.commit for s in cache.snapshots()] == ["bbb222", "ccc333", "aaa111"]


def test_directories_without_metadata_are_ignored(tmp_path: Path) -> None:
    cache = SnapshotCache(tmp_path)
    (tmp_path / "stray" / "content").mkdir(parents=True)
    (tmp_path / "broken" / "content").mkdir(parents=True)
    (tmp_path / "broken" / "metadata.json").write_text("{not json", encoding="utf-8")

    assert cache.snapshots() == []
    assert cache.latest() is None


def test_prune_removes_oldest_beyond_limit(tmp_path: Path) -> None:
    cache = SnapshotCache(tmp_path)
    for hour, commit in enumerate(["one", "two", "three"], start=1):
        register_snapshot(tmp_path, commit, fetched_at=_at(hour))

    removed = cache.prune(2)

    assert removed == ["one"]
    assert not (tmp_path / "one").exists()
    assert [s.commit for s in cache.snapshots()] == ["three", "two"]


def test_is_fresh_compares_age_with_hours(tmp_path: Path) -> None:
    snap = register_snapshot(tmp_path, "abc", fetched_at=_at(0))

    assert is_fresh(snap, 12, now=_at(0) + timedelta(hours=11))
    assert not is_fresh(snap, 12, now=_at(0) + timedelta(hours=13))
