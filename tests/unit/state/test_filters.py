from __future__ import annotations

from assetctl.core.catalog import AssetKind
from assetctl.core.enablement import EnablementStore
from assetctl.core.state import DomainState, asset_matches, filter_assets

from helpers.catalog import collection, instruction, item, make_catalog, prompt


def _state() -> DomainState:
    catalog = make_catalog(
        prompt("prompts/review.prompt.md", name="Code Review", tags=("git",), description="Review PRs"),
        prompt("prompts/readme.prompt.md", name="Write README"),
        instruction("instructions/py.instructions.md", name="Python", apply_to=("**/*.py",)),
        collection(
            "collections/dev.collection.yml",
            "dev-kit",
            [item("instructions/py.instructions.md", AssetKind.INSTRUCTION)],
            name="Developer Kit",
        ),
    )
    return DomainState(catalog, EnablementStore())


def test_empty_query_matches_everything() -> None:
    views = _state().all_assets()
    assert filter_assets(views, "   ") == views


def test_query_is_case_insensitive_over_name_and_tags() -> None:
    views = _state().assets(AssetKind.PROMPT)
    assert [v.path for v in filter_assets(views, "REVIEW")] == ["prompts/review.prompt.md"]
    assert [v.path for v in filter_assets(views, "Git")] == ["prompts/review.prompt.md"]


def test_query_matches_apply_to_patterns_and_membership() -> None:
    view = _state().find(AssetKind.INSTRUCTION, "instructions/py.instructions.md")
    assert view is not None
    assert asset_matches(view, "*.py")
    assert asset_matches(view, "dev-kit")
    assert asset_matches(view, "developer")
    assert not asset_matches(view, "rust")
