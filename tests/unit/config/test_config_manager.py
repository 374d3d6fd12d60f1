from __future__ import annotations

from pathlib import Path

import pytest
import yaml

from assetctl.core.config import (
    CatalogConfig,
    ConfigManager,
    EnablementConfig,
    LoggingConfig,
    PathsConfig,
    clear_all_caches,
    get_cached_config,
    is_cached,
)
from assetctl.core.exceptions import AssetctlError, ConfigError


def _write_project_config(root: Path, data: dict) -> None:
    (root / ".assetctl" / "config.yaml").write_text(yaml.safe_dump(data), encoding="utf-8")


def test_bundled_defaults_load_without_project_config(isolated_project_env: Path) -> None:
    cfg = ConfigManager(repo_root=isolated_project_env).load_config()

    assert cfg["paths"]["project_dir"] == ".assetctl"
    assert cfg["enablement"]["unresolved_baseline"] is True
    assert cfg["catalog"]["content_dir"] is None


def test_project_config_deep_merges_over_defaults(isolated_project_env: Path) -> None:
    _write_project_config(isolated_project_env, {"catalog": {"max_cached_snapshots": 2}})

    cfg = ConfigManager(repo_root=isolated_project_env).load_config()

    assert cfg["catalog"]["max_cached_snapshots"] == 2
    assert cfg["catalog"]["cache_dir"] == "cache"


def test_env_overrides_win_and_are_type_coerced(isolated_project_env: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    _write_project_config(isolated_project_env, {"enablement": {"unresolved_baseline": True}})
    monkeypatch.setenv("ASSETCTL_ENABLEMENT__UNRESOLVED_BASELINE", "false")
    monkeypatch.setenv("ASSETCTL_catalog__freshness_hours", "1.5")

    cfg = ConfigManager(repo_root=isolated_project_env).load_config()

    assert cfg["enablement"]["unresolved_baseline"] is False
    assert cfg["catalog"]["freshness_hours"] == 1.5


def test_invalid_project_yaml_fails_loudly(isolated_project_env: Path) -> None:
    (isolated_project_env / ".assetctl" / "config.yaml").write_text("catalog: [oops\n", encoding="utf-8")

    with pytest.raises(ConfigError) as excinfo:
        ConfigManager(repo_root=isolated_project_env).load_config()

    assert isinstance(excinfo.value, AssetctlError)
    assert isinstance(excinfo.value.__cause__, yaml.YAMLError)
    assert excinfo.value.context["path"].endswith("config.yaml")


def test_project_config_must_be_a_mapping(isolated_project_env: Path) -> None:
    (isolated_project_env / ".assetctl" / "config.yaml").write_text("- just\n- a list\n", encoding="utf-8")

    with pytest.raises(ConfigError, match="must be a YAML mapping"):
        ConfigManager(repo_root=isolated_project_env).load_config()


def test_cache_reloads_after_project_config_changes(isolated_project_env: Path) -> None:
    first = get_cached_config(isolated_project_env)
    assert is_cached(isolated_project_env)
    assert first["logging"]["level"] == "INFO"

    _write_project_config(isolated_project_env, {"logging": {"level": "debug"}})

    assert get_cached_config(isolated_project_env)["logging"]["level"] == "debug"
    clear_all_caches()
    assert not is_cached(isolated_project_env)


def test_domain_accessors_expose_typed_values(isolated_project_env: Path) -> None:
    content = isolated_project_env / "content"
    _write_project_config(
        isolated_project_env,
        {"catalog": {"content_dir": "content"}, "logging": {"level": "warning"}},
    )

    assert CatalogConfig(isolated_project_env).content_dir == isolated_project_env / "content"
    assert CatalogConfig(isolated_project_env).content_dir == content
    assert LoggingConfig(isolated_project_env).level == "WARNING"
    assert PathsConfig(isolated_project_env).enablement_file == "enablement.json"
    assert EnablementConfig(isolated_project_env, config={"enablement": {}}).unresolved_baseline is True
