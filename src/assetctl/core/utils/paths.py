"""Project root resolution.

Resolution order:
1. ``ASSETCTL_PROJECT_ROOT`` environment variable
2. Nearest ancestor of the current directory holding ``.assetctl/`` or ``.git``
3. The current directory
"""
from __future__ import annotations

import os
from pathlib import Path
from typing import Optional

PROJECT_ROOT_ENV = "ASSETCTL_PROJECT_ROOT"
_ROOT_MARKERS = (".assetctl", ".git")


def resolve_project_root(start: Optional[Path] = None) -> Path:
    """Return the repository root assetctl should operate on."""
    env_root = os.environ.get(PROJECT_ROOT_ENV, "").strip()
    if env_root:
        return Path(env_root).expanduser().resolve()

    here = Path(start or Path.cwd()).resolve()
    for candidate in (here, *here.parents):
        if any((candidate / marker).exists() for marker in _ROOT_MARKERS):
            return candidate
    return here


def to_posix_relative(path: Path, root: Path) -> str:
    """Return ``path`` relative to ``root`` using forward slashes."""
    return Path(path).relative_to(root).as_posix()


__all__ = ["PROJECT_ROOT_ENV", "resolve_project_root", "to_posix_relative"]
