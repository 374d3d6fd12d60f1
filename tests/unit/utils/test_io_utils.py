from __future__ import annotations

import json
from pathlib import Path

import pytest
import yaml

from assetctl.core.utils.io import read_json, read_yaml, write_json_atomic
from assetctl.core.utils.merge import deep_merge


def test_write_json_atomic_sorts_keys_and_leaves_no_temp_files(tmp_path: Path) -> None:
    target = tmp_path / "nested" / "out.json"

    write_json_atomic(target, {"b": 1, "a": {"d": 2, "c": 3}})

    text = target.read_text(encoding="utf-8")
    assert text.index('"a"') < text.index('"b"')
    assert json.loads(text) == {"a": {"c": 3, "d": 2}, "b": 1}
    assert [p.name for p in target.parent.iterdir()] == ["out.json"]


def test_read_json_default_and_missing(tmp_path: Path) -> None:
    assert read_json(tmp_path / "nope.json", default={}) == {}
    with pytest.raises(FileNotFoundError):
        read_json(tmp_path / "nope.json")


def test_read_yaml_returns_default_on_invalid_unless_raising(tmp_path: Path) -> None:
    path = tmp_path / "bad.yaml"
    path.write_text("key: [unclosed\n", encoding="utf-8")

    assert read_yaml(path, default={"fallback": True}) == {"fallback": True}
    with pytest.raises(yaml.YAMLError):
        read_yaml(path, raise_on_error=True)


def test_deep_merge_recurses_into_mappings_and_replaces_scalars() -> None:
    base = {"a": {"x": 1, "y": 2}, "b": [1, 2]}
    merged = deep_merge(base, {"a": {"y": 3}, "b": [9]})

    assert merged == {"a": {"x": 1, "y": 3}, "b": [9]}
    assert base == {"a": {"x": 1, "y": 2}, "b": [1, 2]}
