from __future__ import annotations

from functools import cached_property

from ..base import BaseDomainConfig


class EnablementConfig(BaseDomainConfig):
    def _config_section(self) -> str:
        return "enablement"

    @cached_property
    def unresolved_baseline(self) -> bool:
        """Toggle baseline for assets without inherited collection state."""
        return bool(self.section.get("unresolved_baseline", True))
