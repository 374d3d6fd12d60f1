"""Mirror catalog files into the repository's local asset directories.

An enabled asset is copied from the content snapshot to its local path; a
disabled one is removed. Collections have no file of their own, so every
operation on them is a no-op.
"""
from __future__ import annotations

import hashlib
import logging
import shutil
from enum import Enum
from pathlib import Path
from typing import Optional

from assetctl.core.catalog.model import AssetKind
from assetctl.core.exceptions import SyncError
from assetctl.core.utils.io import ensure_parent_dir

from .paths import RepoPaths

logger = logging.getLogger(__name__)

_CHUNK = 64 * 1024


class LocalStatus(str, Enum):
    MISSING = "missing"
    SAME = "same"
    DIFF = "diff"
    NOT_APPLICABLE = "n/a"


def hash_file(path: Path) -> str:
    """SHA-256 hex digest of a file's bytes."""
    digest = hashlib.sha256()
    try:
        with Path(path).open("rb") as fh:
            for chunk in iter(lambda: fh.read(_CHUNK), b""):
                digest.update(chunk)
    except OSError as exc:
        raise SyncError(f"Failed to hash {path}: {exc}", context={"path": str(path)}) from exc
    return digest.hexdigest()


def compute_local_status(
    paths: RepoPaths,
    content_dir: Path,
    kind: AssetKind,
    catalog_path: str,
) -> LocalStatus:
    if kind is AssetKind.COLLECTION:
        return LocalStatus.NOT_APPLICABLE
    local = paths.local_path(kind, catalog_path)
    if not local.exists():
        return LocalStatus.MISSING
    upstream = Path(content_dir) / catalog_path
    if hash_file(upstream) == hash_file(local):
        return LocalStatus.SAME
    return LocalStatus.DIFF


def apply_from_upstream(
    paths: RepoPaths,
    content_dir: Path,
    kind: AssetKind,
    catalog_path: str,
) -> Optional[Path]:
    """Copy the catalog file to its local path; return that path.

    Returns ``None`` for collections.

    Raises:
        SyncError: If the copy fails
    """
    if kind is AssetKind.COLLECTION:
        return None
    upstream = Path(content_dir) / catalog_path
    local = paths.local_path(kind, catalog_path)
    try:
        ensure_parent_dir(local)
        shutil.copyfile(upstream, local)
    except OSError as exc:
        raise SyncError(
            f"Failed to copy {upstream} -> {local}: {exc}",
            context={"kind": kind.value, "path": catalog_path},
        ) from exc
    logger.debug("Applied %s %s -> %s", kind.value, catalog_path, local)
    return local


def remove_local(paths: RepoPaths, kind: AssetKind, catalog_path: str) -> bool:
    """Delete the local copy; return whether a file was removed.

    The immediate parent directory is removed too when it is left empty.
    """
    if kind is AssetKind.COLLECTION:
        return False
    local = paths.local_path(kind, catalog_path)
    if not local.exists():
        return False
    try:
        local.unlink()
    except OSError as exc:
        raise SyncError(
            f"Failed to remove {local}: {exc}",
            context={"kind": kind.value, "path": catalog_path},
        ) from exc

    parent = local.parent
    if parent != paths.asset_root(kind):
        try:
            parent.rmdir()
        except OSError:
            # Not empty, or already gone.
            pass
    logger.debug("Removed local %s %s", kind.value, local)
    return True


__all__ = [
    "LocalStatus",
    "apply_from_upstream",
    "compute_local_status",
    "hash_file",
    "remove_local",
]
