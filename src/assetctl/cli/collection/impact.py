from __future__ import annotations

import argparse
import sys

from assetctl.cli import add_json_flag, add_repo_root_flag, formatter, load_workspace, state_label
from assetctl.core.exceptions import AssetctlError
from assetctl.core.state import ImpactChange

SUMMARY = "Preview what toggling a collection would change"

_CHANGE_LABELS = {
    ImpactChange.WILL_ENABLE: "+ enable",
    ImpactChange.WILL_DISABLE: "- disable",
    ImpactChange.UNCHANGED: "  unchanged",
}


def register_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("path", help="Collection path, e.g. collections/testing.collection.yml")
    add_repo_root_flag(parser)
    add_json_flag(parser)


def main(args: argparse.Namespace) -> int:
    out = formatter(args)
    try:
        workspace = load_workspace(args, out)
        impact = workspace.impact(args.path)

        if out.json_mode:
            out.json_output(impact.to_dict())
            return 0

        collection = impact.collection
        out.text(
            f"{collection.name}: {state_label(collection.effective)} -> {state_label(impact.will_enable)}"
        )
        out.text(
            f"{impact.enable_count} will enable, {impact.disable_count} will disable, "
            f"{impact.unchanged_count} unchanged ({impact.total_members} members)"
        )
        for member in impact.members:
            suffix = " (explicit override)" if member.view.explicit is not None else ""
            out.text(f"  {_CHANGE_LABELS[member.change]:<11} {member.item.path}{suffix}")
        for item in impact.missing:
            out.text(f"  ? missing   {item.path}")
        return 0
    except AssetctlError as exc:
        out.error(exc, error_code="collection_impact_error")
        return 1


if __name__ == "__main__":
    parser = argparse.ArgumentParser()
    register_args(parser)
    sys.exit(main(parser.parse_args()))
