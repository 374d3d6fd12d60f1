from __future__ import annotations

import argparse
import sys

from assetctl.cli import (
    add_asset_path_arg,
    add_json_flag,
    add_kind_arg,
    add_no_save_flag,
    add_repo_root_flag,
    formatter,
    load_workspace,
    state_label,
)
from assetctl.core.exceptions import AssetctlError

from ._shared import view_payload

SUMMARY = "Flip an asset's effective state with a minimal override change"


def register_args(parser: argparse.ArgumentParser) -> None:
    add_kind_arg(parser)
    add_asset_path_arg(parser)
    add_no_save_flag(parser)
    parser.add_argument(
        "--no-sync",
        action="store_true",
        help="Do not copy or remove local files",
    )
    add_repo_root_flag(parser)
    add_json_flag(parser)


def main(args: argparse.Namespace) -> int:
    out = formatter(args)
    try:
        workspace = load_workspace(args, out)
        result = workspace.toggle(args.kind, args.path, sync=not args.no_sync)
        saved = None
        if not args.no_save:
            saved = workspace.save()

        asset = result.asset
        out.success(
            {
                "asset": view_payload(asset),
                "changed": result.changed,
                "explicitBefore": result.explicit_before,
                "explicitAfter": result.explicit_after,
                "saved": str(saved) if saved else None,
            },
            f"{asset.path} -> {state_label(asset.effective)} ({asset.source} state)",
        )
        return 0
    except AssetctlError as exc:
        out.error(exc, error_code="asset_toggle_error")
        return 1


if __name__ == "__main__":
    parser = argparse.ArgumentParser()
    register_args(parser)
    sys.exit(main(parser.parse_args()))
