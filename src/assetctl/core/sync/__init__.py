"""Repository layout and the local file sync collaborator."""
from __future__ import annotations

from .local import LocalStatus, apply_from_upstream, compute_local_status, hash_file, remove_local
from .paths import RepoPaths

__all__ = [
    "LocalStatus",
    "RepoPaths",
    "apply_from_upstream",
    "compute_local_status",
    "hash_file",
    "remove_local",
]
