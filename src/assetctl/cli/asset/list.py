from __future__ import annotations

import argparse
import sys

from assetctl.cli import (
    add_json_flag,
    add_repo_root_flag,
    format_table,
    formatter,
    load_workspace,
    parse_kind,
)
from assetctl.core.catalog import ASSET_KINDS
from assetctl.core.exceptions import AssetctlError
from assetctl.core.state import filter_assets

from ._shared import describe_source, marker, view_payload

SUMMARY = "List assets with their resolved enablement state"


def register_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--kind", type=parse_kind, help="Only list this kind")
    parser.add_argument("--query", "-q", help="Case-insensitive search text")
    state = parser.add_mutually_exclusive_group()
    state.add_argument("--enabled", action="store_true", help="Only effectively enabled assets")
    state.add_argument("--disabled", action="store_true", help="Only effectively disabled assets")
    add_repo_root_flag(parser)
    add_json_flag(parser)


def main(args: argparse.Namespace) -> int:
    out = formatter(args)
    try:
        workspace = load_workspace(args, out)
        kinds = [args.kind] if args.kind else list(ASSET_KINDS)

        grouped = {}
        for kind in kinds:
            views = workspace.state.assets(kind)
            if args.query:
                views = filter_assets(views, args.query)
            if args.enabled:
                views = [v for v in views if v.effective]
            elif args.disabled:
                views = [v for v in views if not v.effective]
            grouped[kind] = views

        if out.json_mode:
            out.json_output(
                {kind.store_key: [view_payload(v) for v in views] for kind, views in grouped.items()}
            )
            return 0

        for kind, views in grouped.items():
            enabled = sum(1 for v in views if v.effective)
            out.text(f"{kind.label}s ({enabled}/{len(views)} enabled)")
            if views:
                rows = [[marker(v), v.name, v.path, describe_source(v)] for v in views]
                out.text(format_table(rows, ["", "NAME", "PATH", "SOURCE"]))
            out.text("")
        return 0
    except AssetctlError as exc:
        out.error(exc, error_code="asset_list_error")
        return 1


if __name__ == "__main__":
    parser = argparse.ArgumentParser()
    register_args(parser)
    sys.exit(main(parser.parse_args()))
