from __future__ import annotations

import argparse
import sys

from assetctl.cli import add_json_flag, add_no_save_flag, add_repo_root_flag, formatter, load_workspace
from assetctl.core.exceptions import AssetctlError

SUMMARY = "Delete local asset files and clear every override"


def register_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--yes",
        "-y",
        action="store_true",
        help="Confirm the reset (required)",
    )
    add_no_save_flag(parser)
    add_repo_root_flag(parser)
    add_json_flag(parser)


def main(args: argparse.Namespace) -> int:
    out = formatter(args)
    if not args.yes:
        out.error(ValueError("Refusing to reset without --yes"), error_code="enablement_reset_error")
        return 2
    try:
        workspace = load_workspace(args, out)
        removed = workspace.reset()
        if not args.no_save:
            workspace.save()
        out.success(
            {"removedFiles": removed},
            f"Cleared local assets ({removed} files) and enablement state",
        )
        return 0
    except AssetctlError as exc:
        out.error(exc, error_code="enablement_reset_error")
        return 1


if __name__ == "__main__":
    parser = argparse.ArgumentParser()
    register_args(parser)
    sys.exit(main(parser.parse_args()))
