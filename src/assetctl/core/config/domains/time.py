from __future__ import annotations

from functools import cached_property

from ..base import BaseDomainConfig


class TimeConfig(BaseDomainConfig):
    def _config_section(self) -> str:
        return "time"

    @cached_property
    def strip_microseconds(self) -> bool:
        return bool(self.section.get("strip_microseconds", True))

    @cached_property
    def use_z_suffix(self) -> bool:
        return bool(self.section.get("use_z_suffix", True))
