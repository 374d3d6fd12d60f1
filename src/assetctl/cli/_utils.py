"""Shared CLI utilities."""
from __future__ import annotations

import argparse
from pathlib import Path

from assetctl.core.utils.paths import resolve_project_root
from assetctl.core.workspace import Workspace

from ._output import OutputFormatter


def get_repo_root(args: argparse.Namespace) -> Path:
    """``--repo-root`` when given, else the auto-detected project root."""
    if getattr(args, "repo_root", None):
        return Path(args.repo_root).resolve()
    return resolve_project_root()


def formatter(args: argparse.Namespace) -> OutputFormatter:
    return OutputFormatter(json_mode=bool(getattr(args, "json", False)))


def load_workspace(args: argparse.Namespace, out: OutputFormatter) -> Workspace:
    """Load the workspace for ``args`` and surface load warnings.

    Raises:
        CatalogError: If no catalog content is available
    """
    workspace = Workspace(get_repo_root(args))
    out.warnings(workspace.load())
    return workspace


def state_label(effective: bool) -> str:
    return "enabled" if effective else "disabled"


__all__ = ["get_repo_root", "formatter", "load_workspace", "state_label"]
