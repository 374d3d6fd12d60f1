from __future__ import annotations

from pathlib import Path

from assetctl.core.catalog import AssetKind
from assetctl.core.sync import (
    LocalStatus,
    RepoPaths,
    apply_from_upstream,
    compute_local_status,
    remove_local,
)

from helpers.catalog import write_sample_content

REVIEW = "prompts/review.prompt.md"
README = "prompts/docs/readme.prompt.md"


def _setup(tmp_path: Path):
    content = write_sample_content(tmp_path / "content")
    paths = RepoPaths(root=tmp_path / "repo")
    return paths, content


def test_local_path_drops_first_catalog_segment(tmp_path: Path) -> None:
    paths = RepoPaths(root=tmp_path)

    assert paths.local_path(AssetKind.PROMPT, README) == tmp_path / ".github" / "prompts" / "docs" / "readme.prompt.md"
    assert paths.local_path(AssetKind.CHAT_MODE, "chatmodes/p.chatmode.md") == (
        tmp_path / ".github" / "chatmodes" / "p.chatmode.md"
    )
    assert paths.enablement_file == tmp_path / ".assetctl" / "enablement.json"


def test_status_moves_from_missing_to_same_to_diff(tmp_path: Path) -> None:
    paths, content = _setup(tmp_path)

    assert compute_local_status(paths, content, AssetKind.PROMPT, REVIEW) is LocalStatus.MISSING

    local = apply_from_upstream(paths, content, AssetKind.PROMPT, REVIEW)
    assert local == paths.github_dir / "prompts" / "review.prompt.md"
    assert compute_local_status(paths, content, AssetKind.PROMPT, REVIEW) is LocalStatus.SAME

    local.write_text("edited locally\n", encoding="utf-8")
    assert compute_local_status(paths, content, AssetKind.PROMPT, REVIEW) is LocalStatus.DIFF


def test_remove_local_deletes_file_and_empty_parent(tmp_path: Path) -> None:
    paths, content = _setup(tmp_path)
    local = apply_from_upstream(paths, content, AssetKind.PROMPT, README)
    assert local is not None and local.exists()

    assert remove_local(paths, AssetKind.PROMPT, README) is True

    assert not local.exists()
    assert not local.parent.exists()
    assert paths.asset_root(AssetKind.PROMPT).exists()
    assert remove_local(paths, AssetKind.PROMPT, README) is False


def test_collections_are_not_applicable_and_never_touch_disk(tmp_path: Path) -> None:
    paths, content = _setup(tmp_path)
    coll = "collections/python-dev.collection.yml"

    assert compute_local_status(paths, content, AssetKind.COLLECTION, coll) is LocalStatus.NOT_APPLICABLE
    assert apply_from_upstream(paths, content, AssetKind.COLLECTION, coll) is None
    assert remove_local(paths, AssetKind.COLLECTION, coll) is False
    assert not paths.github_dir.exists()
