from __future__ import annotations

from pathlib import Path

from assetctl.core.catalog import AssetKind, load_catalog

from helpers.catalog import markdown_asset, write_files, write_sample_content


def _entry(catalog, kind, path):
    return next((e for e in catalog.entries(kind) if e.path == path), None)


def test_sample_content_loads_every_kind_sorted_by_path(tmp_path: Path) -> None:
    load = load_catalog(write_sample_content(tmp_path / "content"))
    catalog = load.catalog

    assert load.warnings == []
    assert [p.path for p in catalog.prompts] == [
        "prompts/docs/readme.prompt.md",
        "prompts/review.prompt.md",
    ]
    assert [i.path for i in catalog.instructions] == [
        "instructions/python.instructions.md",
        "instructions/testing.instructions.md",
    ]
    assert [c.id for c in catalog.collections] == ["planning", "python-dev"]


def test_markdown_metadata_comes_from_frontmatter_and_heading(tmp_path: Path) -> None:
    catalog = load_catalog(write_sample_content(tmp_path / "content")).catalog

    review = _entry(catalog, AssetKind.PROMPT, "prompts/review.prompt.md")
    assert review is not None
    assert review.name == "Code Review"
    assert review.slug == "review"
    assert review.mode == "agent"
    assert review.tags == ("review", "git")
    assert len(review.sha256) == 64

    python = _entry(catalog, AssetKind.INSTRUCTION, "instructions/python.instructions.md")
    assert python is not None and python.apply_to == ("**/*.py",)
    testing = _entry(catalog, AssetKind.INSTRUCTION, "instructions/testing.instructions.md")
    assert testing is not None and testing.apply_to == ("**",)

    planner = catalog.chat_modes[0]
    assert planner.tools == ("search", "edit")


def test_name_falls_back_to_title_cased_slug(tmp_path: Path) -> None:
    write_files(tmp_path, {"prompts/fix-bugs.prompt.md": "No heading here.\n"})

    prompt = load_catalog(tmp_path).catalog.prompts[0]

    assert prompt.name == "Fix Bugs"


def test_malformed_frontmatter_degrades_to_empty_metadata(tmp_path: Path) -> None:
    write_files(tmp_path, {"prompts/odd.prompt.md": "---\n: [unclosed\n---\n# Odd\n"})

    load = load_catalog(tmp_path)

    assert load.warnings == []
    assert load.catalog.prompts[0].name == "Odd"
    assert load.catalog.prompts[0].description == ""


def test_collection_items_keep_order_and_drop_unknown_kinds(tmp_path: Path) -> None:
    write_files(
        tmp_path,
        {
            "collections/mix.collection.yml": (
                "items:\n"
                "  - {path: prompts/b.prompt.md, kind: prompt}\n"
                "  - {path: chatmodes/x.chatmode.md, kind: chatmode}\n"
                "  - {path: somewhere/else.md, kind: widget}\n"
                "  - {path: collections/inner.collection.yml, kind: collection}\n"
            )
        },
    )

    coll = load_catalog(tmp_path).catalog.collections[0]

    assert coll.id == "mix"
    assert coll.name == "Mix"
    assert [(i.path, i.kind) for i in coll.items] == [
        ("prompts/b.prompt.md", AssetKind.PROMPT),
        ("chatmodes/x.chatmode.md", AssetKind.CHAT_MODE),
        ("collections/inner.collection.yml", AssetKind.COLLECTION),
    ]


def test_unparsable_collection_is_skipped_with_warning(tmp_path: Path) -> None:
    write_files(
        tmp_path,
        {
            "collections/broken.collection.yml": "items: [unclosed\n",
            "collections/list.collection.yml": "- just\n- a list\n",
            "prompts/ok.prompt.md": markdown_asset("Ok"),
        },
    )

    load = load_catalog(tmp_path)

    assert load.catalog.collections == []
    assert len(load.catalog.prompts) == 1
    assert len(load.warnings) == 2
    assert any("broken.collection.yml" in w for w in load.warnings)


def test_missing_kind_directories_yield_empty_lists(tmp_path: Path) -> None:
    load = load_catalog(tmp_path)

    assert load.catalog.size() == 0
    assert load.warnings == []
