"""
assetctl configuration management (layered YAML + environment overrides).
"""
from __future__ import annotations

import json
import logging
import os
import re
from pathlib import Path
from typing import Any, Dict, Iterator, List, Optional, Tuple

import yaml

from assetctl.core.exceptions import ConfigError
from assetctl.core.utils.io import read_yaml
from assetctl.core.utils.merge import deep_merge
from assetctl.core.utils.paths import resolve_project_root
from assetctl.data import get_data_path

logger = logging.getLogger(__name__)

ENV_PREFIX = "ASSETCTL_"
# Variables that share the prefix but are not config paths.
_RESERVED_ENV_KEYS = frozenset({"ASSETCTL_PROJECT_ROOT"})


class ConfigManager:
    """Load and merge assetctl configuration.

    Configuration sources (highest to lowest priority):
    1. Environment variables: ASSETCTL_<section>__<key>
    2. Project config: <repo>/.assetctl/config.yaml (or config.yml)
    3. Bundled defaults: assetctl.data/config/defaults.yaml
    """

    PROJECT_DIR_NAME = ".assetctl"

    def __init__(self, repo_root: Optional[Path] = None) -> None:
        self.repo_root = Path(repo_root).expanduser().resolve() if repo_root else resolve_project_root()
        self.core_config_path = get_data_path("config", "defaults.yaml")
        self.project_config_dir = self.repo_root / self.PROJECT_DIR_NAME

    def project_config_path(self) -> Optional[Path]:
        for name in ("config.yaml", "config.yml"):
            candidate = self.project_config_dir / name
            if candidate.exists():
                return candidate
        return None

    def load_yaml(self, path: Path) -> Dict[str, Any]:
        """Read one config layer.

        Raises:
            ConfigError: If the file is unreadable, not valid YAML, or not a mapping
        """
        try:
            data = read_yaml(path, default={}, raise_on_error=True)
        except (OSError, yaml.YAMLError) as exc:
            raise ConfigError(f"Invalid config file {path}: {exc}", path=str(path)) from exc
        if not isinstance(data, dict):
            raise ConfigError(f"Config file must be a YAML mapping: {path}", path=str(path))
        return data

    # ---------------------------------------------------------------------
    # Environment overrides
    # ---------------------------------------------------------------------

    def _coerce_type(self, value: str) -> Any:
        s = value.strip()
        low = s.lower()
        if low in {"true", "false"}:
            return low == "true"
        if low in {"null", "none"}:
            return None
        if re.fullmatch(r"[-+]?\d+", s):
            return int(s)
        if re.fullmatch(r"[-+]?\d*\.\d+", s) or re.fullmatch(r"[-+]?\d+\.\d*", s):
            return float(s)
        if (s.startswith("{") and s.endswith("}")) or (s.startswith("[") and s.endswith("]")):
            try:
                return json.loads(s)
            except ValueError:
                return s
        return s

    def _iter_env_overrides(self) -> Iterator[Tuple[List[str], Any]]:
        for key in sorted(os.environ.keys()):
            if not key.startswith(ENV_PREFIX) or key in _RESERVED_ENV_KEYS:
                continue
            raw = key[len(ENV_PREFIX):]
            segs = [s.lower() for s in raw.split("__")]
            if not raw or any(not s for s in segs):
                logger.warning("Ignoring malformed config override %s", key)
                continue
            yield segs, self._coerce_type(os.environ[key])

    def apply_env_overrides(self, cfg: Dict[str, Any]) -> None:
        for path, value in self._iter_env_overrides():
            cur = cfg
            for part in path[:-1]:
                nxt = cur.get(part)
                if not isinstance(nxt, dict):
                    nxt = {}
                    cur[part] = nxt
                cur = nxt
            cur[path[-1]] = value

    # ---------------------------------------------------------------------
    # Loading
    # ---------------------------------------------------------------------

    def load_config(self) -> Dict[str, Any]:
        """Return the merged configuration dictionary."""
        cfg = self.load_yaml(self.core_config_path)

        project_path = self.project_config_path()
        if project_path is not None:
            logger.debug("Merging project config %s", project_path)
            cfg = deep_merge(cfg, self.load_yaml(project_path))

        self.apply_env_overrides(cfg)
        return cfg


__all__ = ["ConfigManager", "ENV_PREFIX"]
