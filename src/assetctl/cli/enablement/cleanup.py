from __future__ import annotations

import argparse
import sys

from assetctl.cli import add_json_flag, add_no_save_flag, add_repo_root_flag, formatter, load_workspace
from assetctl.core.exceptions import AssetctlError

SUMMARY = "Remove orphaned overrides"


def register_args(parser: argparse.ArgumentParser) -> None:
    add_no_save_flag(parser)
    add_repo_root_flag(parser)
    add_json_flag(parser)


def main(args: argparse.Namespace) -> int:
    out = formatter(args)
    try:
        workspace = load_workspace(args, out)
        removed = workspace.cleanup_orphans()
        if removed and not args.no_save:
            workspace.save()
        message = (
            f"Removed {removed} orphan enablement entries" if removed else "No orphan entries to clean"
        )
        out.success({"removed": removed}, message)
        return 0
    except AssetctlError as exc:
        out.error(exc, error_code="enablement_cleanup_error")
        return 1


if __name__ == "__main__":
    parser = argparse.ArgumentParser()
    register_args(parser)
    sys.exit(main(parser.parse_args()))
