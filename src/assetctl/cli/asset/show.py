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
    state_label,
)
from assetctl.core.exceptions import AssetctlError

from ._shared import describe_source, view_payload

SUMMARY = "Show one asset's metadata, enablement and local file status"


def register_args(parser: argparse.ArgumentParser) -> None:
    add_kind_arg(parser)
    add_asset_path_arg(parser)
    add_repo_root_flag(parser)
    add_json_flag(parser)


def main(args: argparse.Namespace) -> int:
    out = formatter(args)
    try:
        workspace = load_workspace(args, out)
        view = workspace.find(args.kind, args.path)
        local = workspace.local_status(view)

        if out.json_mode:
            out.json_output(view_payload(view, local))
            return 0

        out.text(f"{view.name} ({view.kind.label})")
        out.text_kv("path", view.path)
        if view.slug:
            out.text_kv("slug", view.slug)
        if view.description:
            out.text_kv("description", view.description)
        if view.tags:
            out.text_kv("tags", ", ".join(view.tags))
        if view.apply_to:
            out.text_kv("applyTo", ", ".join(view.apply_to))
        if view.mode:
            out.text_kv("mode", view.mode)
        if view.tools:
            out.text_kv("tools", ", ".join(view.tools))
        if view.collections:
            out.text_kv("collections", ", ".join(c.id for c in view.collections))
        if view.member_count:
            out.text_kv("members", view.member_count)
        out.text_kv("state", f"{state_label(view.effective)} ({describe_source(view)})")
        out.text_kv("local", local.value)
        return 0
    except AssetctlError as exc:
        out.error(exc, error_code="asset_show_error")
        return 1


if __name__ == "__main__":
    parser = argparse.ArgumentParser()
    register_args(parser)
    sys.exit(main(parser.parse_args()))
