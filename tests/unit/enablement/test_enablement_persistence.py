from __future__ import annotations

import json
from pathlib import Path

import pytest

from assetctl.core.catalog import AssetKind
from assetctl.core.enablement import (
    EnablementStore,
    WarningKind,
    load_enablement,
    parse_enablement,
    save_enablement,
)
from assetctl.core.exceptions import EnablementStoreError


def test_missing_file_yields_default_store_with_warning(tmp_path: Path) -> None:
    load = load_enablement(tmp_path / "enablement.json")

    assert load.store == EnablementStore()
    assert [w.kind for w in load.warnings] == [WarningKind.MISSING_FILE]


def test_unparsable_json_yields_parse_error_warning() -> None:
    load = parse_enablement("{ not json")

    assert load.store.count() == 0
    assert load.warnings[0].kind is WarningKind.PARSE_ERROR
    assert "Failed to parse" in str(load.warnings[0])


def test_invalid_utf8_file_yields_parse_error_warning(tmp_path: Path) -> None:
    target = tmp_path / "enablement.json"
    target.write_bytes(b'{"prompts": {"\xff\xfe": true}}')

    load = load_enablement(target)

    assert load.store == EnablementStore()
    assert [w.kind for w in load.warnings] == [WarningKind.PARSE_ERROR]
    assert "utf-8" in str(load.warnings[0])


def test_unreadable_path_raises_store_error(tmp_path: Path) -> None:
    target = tmp_path / "enablement.json"
    target.mkdir()

    with pytest.raises(EnablementStoreError) as excinfo:
        load_enablement(target)

    assert excinfo.value.context["path"] == str(target)
    assert isinstance(excinfo.value.__cause__, OSError)


def test_schema_violation_yields_default_store_with_details() -> None:
    load = parse_enablement(json.dumps({"version": 1, "prompts": {"prompts/a.prompt.md": "yes"}}))

    assert load.store.count() == 0
    warning = load.warnings[0]
    assert warning.kind is WarningKind.SCHEMA_VALIDATION
    assert any("/prompts/prompts/a.prompt.md" in d for d in warning.details)


def test_unknown_top_level_key_fails_schema_validation() -> None:
    load = parse_enablement(json.dumps({"version": 1, "extra": True}))

    assert load.warnings and load.warnings[0].kind is WarningKind.SCHEMA_VALIDATION


def test_save_then_load_preserves_overrides_and_stamps_timestamp(tmp_path: Path) -> None:
    target = tmp_path / ".assetctl" / "enablement.json"
    store = EnablementStore()
    store.set(AssetKind.COLLECTION, "collections/c.collection.yml", True)
    store.set(AssetKind.PROMPT, "prompts/p.prompt.md", False)

    save_enablement(target, store)

    raw = target.read_text(encoding="utf-8")
    assert raw.endswith("\n")
    data = json.loads(raw)
    assert data["collections"] == {"collections/c.collection.yml": True}
    assert data["updated_at"].endswith("Z")
    assert store.updated_at is not None

    load = load_enablement(target)
    assert load.warnings == []
    assert load.store.collections == {"collections/c.collection.yml": True}
    assert load.store.prompts == {"prompts/p.prompt.md": False}
    assert load.store.updated_at == store.updated_at


def test_save_rejects_invalid_payload_and_restores_timestamp(tmp_path: Path) -> None:
    target = tmp_path / "enablement.json"
    store = EnablementStore()
    store.prompts[""] = True  # empty keys violate the schema

    with pytest.raises(EnablementStoreError):
        save_enablement(target, store)

    assert store.updated_at is None
    assert not target.exists()
