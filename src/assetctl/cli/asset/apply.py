from __future__ import annotations

import argparse
import sys

from assetctl.cli import (
    add_asset_path_arg,
    add_json_flag,
    add_kind_arg,
    add_repo_root_flag,
    formatter,
    load_workspace,
)
from assetctl.core.exceptions import AssetctlError

SUMMARY = "Copy an asset's catalog file over its local copy"


def register_args(parser: argparse.ArgumentParser) -> None:
    add_kind_arg(parser)
    add_asset_path_arg(parser)
    add_repo_root_flag(parser)
    add_json_flag(parser)


def main(args: argparse.Namespace) -> int:
    out = formatter(args)
    try:
        workspace = load_workspace(args, out)
        target = workspace.apply(args.kind, args.path)
        if target is None:
            out.success(
                {"kind": args.kind.value, "path": args.path, "applied": None},
                "Collections have no files to apply",
                status="noop",
            )
            return 0
        out.success(
            {"kind": args.kind.value, "path": args.path, "applied": str(target)},
            f"Applied {args.path} -> {target.relative_to(workspace.repo_root).as_posix()}",
        )
        return 0
    except AssetctlError as exc:
        out.error(exc, error_code="asset_apply_error")
        return 1


if __name__ == "__main__":
    parser = argparse.ArgumentParser()
    register_args(parser)
    sys.exit(main(parser.parse_args()))
