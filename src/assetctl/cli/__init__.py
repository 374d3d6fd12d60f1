"""
assetctl CLI package.

Commands are auto-discovered from the domain subfolders (asset/,
collection/, enablement/). Each command module exposes ``SUMMARY``,
``register_args(parser)`` and ``main(args) -> int``.

Framework utilities for building commands:
- _output: Output formatting (JSON/text modes)
- _args: Common argument registration helpers
- _utils: Repo root and workspace loading
"""
from ._output import OutputFormatter, format_table
from ._args import (
    add_asset_path_arg,
    add_json_flag,
    add_kind_arg,
    add_no_save_flag,
    add_repo_root_flag,
    parse_kind,
)
from ._utils import formatter, get_repo_root, load_workspace, state_label

__all__ = [
    # Output formatting
    "OutputFormatter",
    "format_table",
    # Argument helpers
    "add_asset_path_arg",
    "add_json_flag",
    "add_kind_arg",
    "add_no_save_flag",
    "add_repo_root_flag",
    "parse_kind",
    # Utilities
    "formatter",
    "get_repo_root",
    "load_workspace",
    "state_label",
]
