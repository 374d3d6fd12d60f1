from __future__ import annotations

import argparse
import sys

from assetctl.cli import add_json_flag, add_repo_root_flag, formatter, load_workspace
from assetctl.core.catalog import ASSET_KINDS
from assetctl.core.exceptions import AssetctlError
from assetctl.core.utils.time import format_utc

SUMMARY = "Summarise enabled counts, overrides and orphans"


def register_args(parser: argparse.ArgumentParser) -> None:
    add_repo_root_flag(parser)
    add_json_flag(parser)


def main(args: argparse.Namespace) -> int:
    out = formatter(args)
    try:
        workspace = load_workspace(args, out)
        state = workspace.state
        store = state.store
        kinds = {
            kind.store_key: {
                "enabled": state.enabled_count(kind),
                "total": len(state.assets(kind)),
                "overrides": len(store.map_for(kind)),
            }
            for kind in ASSET_KINDS
        }
        updated_at = format_utc(store.updated_at) if store.updated_at else None
        orphans = state.orphans()

        if out.json_mode:
            out.json_output(
                {
                    "enablementFile": str(workspace.paths.enablement_file),
                    "contentDir": str(workspace.content_dir),
                    "updatedAt": updated_at,
                    "kinds": kinds,
                    "orphans": len(orphans),
                    "warnings": list(workspace.warnings),
                }
            )
            return 0

        out.text(f"Enablement file: {workspace.paths.enablement_file}")
        out.text(f"Catalog content: {workspace.content_dir}")
        out.text(f"Last saved: {updated_at or 'never'}")
        for kind in ASSET_KINDS:
            counts = kinds[kind.store_key]
            out.text_kv(
                kind.store_key,
                f"{counts['enabled']}/{counts['total']} enabled, {counts['overrides']} overrides",
            )
        if orphans:
            out.text(f"{len(orphans)} orphan overrides (run `assetctl enablement cleanup`)")
        return 0
    except AssetctlError as exc:
        out.error(exc, error_code="enablement_status_error")
        return 1


if __name__ == "__main__":
    parser = argparse.ArgumentParser()
    register_args(parser)
    sys.exit(main(parser.parse_args()))
