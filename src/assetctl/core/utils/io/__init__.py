"""I/O utilities for assetctl.

This package provides safe, atomic file operations:
- Core: atomic writes, directory management
- JSON: read/write with advisory locks
- YAML: read helper
"""
from __future__ import annotations

from .core import (
    PathLike,
    atomic_write,
    ensure_directory,
    ensure_parent_dir,
    read_text,
)
from .json import (
    read_json,
    write_json_atomic,
)
from .yaml import read_yaml

__all__ = [
    # core
    "PathLike",
    "ensure_parent_dir",
    "ensure_directory",
    "atomic_write",
    "read_text",
    # json
    "read_json",
    "write_json_atomic",
    # yaml
    "read_yaml",
]
