from __future__ import annotations

import argparse
import sys

from assetctl.cli import add_json_flag, add_repo_root_flag, formatter, load_workspace
from assetctl.core.exceptions import AssetctlError

SUMMARY = "List overrides whose asset is no longer in the catalog"


def register_args(parser: argparse.ArgumentParser) -> None:
    add_repo_root_flag(parser)
    add_json_flag(parser)


def main(args: argparse.Namespace) -> int:
    out = formatter(args)
    try:
        workspace = load_workspace(args, out)
        orphans = workspace.state.orphans()
        if out.json_mode:
            out.json_output({"orphans": [o.to_dict() for o in orphans]})
            return 0
        if not orphans:
            out.text("No orphan entries")
            return 0
        for orphan in orphans:
            out.text(f"  {orphan.kind.value:<12} {orphan.path} = {str(orphan.value).lower()}")
        return 0
    except AssetctlError as exc:
        out.error(exc, error_code="enablement_orphans_error")
        return 1


if __name__ == "__main__":
    parser = argparse.ArgumentParser()
    register_args(parser)
    sys.exit(main(parser.parse_args()))
