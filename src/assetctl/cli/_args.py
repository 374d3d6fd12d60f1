"""Common CLI argument registration helpers."""
from __future__ import annotations

import argparse

from assetctl.core.catalog import AssetKind


def add_json_flag(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--json",
        action="store_true",
        help="Output as JSON",
    )


def add_repo_root_flag(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--repo-root",
        type=str,
        help="Override repository root path",
    )


def parse_kind(raw: str) -> AssetKind:
    """argparse ``type=`` adapter for asset kinds."""
    try:
        return AssetKind.parse(raw)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc


def add_kind_arg(parser: argparse.ArgumentParser) -> None:
    """Positional KIND accepting ``prompt``, ``instruction``, ``chatmode``, ``collection`` and plurals."""
    parser.add_argument(
        "kind",
        type=parse_kind,
        help="Asset kind (prompt, instruction, chatmode, collection)",
    )


def add_asset_path_arg(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("path", help="Catalog path, e.g. prompts/review.prompt.md")


def add_no_save_flag(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--no-save",
        action="store_true",
        help="Do not write the enablement file",
    )


__all__ = [
    "add_json_flag",
    "add_repo_root_flag",
    "add_kind_arg",
    "add_asset_path_arg",
    "add_no_save_flag",
    "parse_kind",
]
