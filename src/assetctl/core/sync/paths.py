"""Filesystem layout of a managed repository."""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from assetctl.core.catalog.model import AssetKind
from assetctl.core.config import CatalogConfig, LoggingConfig, PathsConfig

# Local roots under the GitHub directory, per kind. Collections are a logical
# grouping only and never materialise on disk.
_LOCAL_DIRS = {
    AssetKind.PROMPT: "prompts",
    AssetKind.INSTRUCTION: "instructions",
    AssetKind.CHAT_MODE: "chatmodes",
    AssetKind.COLLECTION: "collections",
}


@dataclass(frozen=True)
class RepoPaths:
    root: Path
    project_dir_name: str = ".assetctl"
    github_dir_name: str = ".github"
    cache_dir_name: str = "cache"
    enablement_file_name: str = "enablement.json"
    log_file_name: Optional[str] = "logs/assetctl.log"

    @classmethod
    def from_config(cls, root: Path, *, config: Optional[dict] = None) -> "RepoPaths":
        """Build paths from the merged configuration for ``root``."""
        paths_cfg = PathsConfig(root, config=config)
        catalog_cfg = CatalogConfig(root, config=config)
        logging_cfg = LoggingConfig(root, config=config)
        return cls(
            root=Path(root),
            project_dir_name=paths_cfg.project_dir,
            github_dir_name=paths_cfg.github_dir,
            cache_dir_name=catalog_cfg.cache_dir,
            enablement_file_name=paths_cfg.enablement_file,
            log_file_name=logging_cfg.file,
        )

    @property
    def github_dir(self) -> Path:
        return self.root / self.github_dir_name

    @property
    def workspace_dir(self) -> Path:
        return self.root / self.project_dir_name

    @property
    def cache_dir(self) -> Path:
        return self.workspace_dir / self.cache_dir_name

    @property
    def enablement_file(self) -> Path:
        return self.workspace_dir / self.enablement_file_name

    @property
    def log_file(self) -> Optional[Path]:
        if not self.log_file_name:
            return None
        return self.workspace_dir / self.log_file_name

    def asset_root(self, kind: AssetKind) -> Path:
        return self.github_dir / _LOCAL_DIRS[kind]

    def local_path(self, kind: AssetKind, catalog_path: str) -> Path:
        """Local file for a catalog path.

        Catalog paths start with the kind's content directory
        (``prompts/...``); that first segment is replaced by the local root.
        """
        _, _, rest = catalog_path.partition("/")
        return self.asset_root(kind) / rest


__all__ = ["RepoPaths"]
