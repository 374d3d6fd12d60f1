from __future__ import annotations

from functools import cached_property

from ..base import BaseDomainConfig


class PathsConfig(BaseDomainConfig):
    """Workspace layout relative to the repository root."""

    def _config_section(self) -> str:
        return "paths"

    @cached_property
    def project_dir(self) -> str:
        return str(self.section.get("project_dir") or ".assetctl")

    @cached_property
    def github_dir(self) -> str:
        return str(self.section.get("github_dir") or ".github")

    @cached_property
    def enablement_file(self) -> str:
        return str(self.section.get("enablement_file") or "enablement.json")
