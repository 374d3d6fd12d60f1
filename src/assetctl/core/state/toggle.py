"""Minimal-diff toggling of a single asset.

The new explicit override is written only when the desired state differs
from the asset's baseline; otherwise the override is removed so the asset
falls back to that baseline. The baseline is the inherited collection value
when one exists, else ``unresolved_baseline``.

With the historical ``unresolved_baseline=True``, an asset that is disabled
by default (no explicit, no inherited state) does not change on toggle: the
desired state ``True`` equals the baseline, so the absent override is
"removed". Collections are affected the same way, since they never inherit.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from assetctl.core.catalog.model import AssetKind
from assetctl.core.exceptions import AssetNotFoundError

from .session import DomainState
from .views import AssetView

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ToggleResult:
    asset: AssetView
    previous_effective: bool
    explicit_before: Optional[bool]
    explicit_after: Optional[bool]

    @property
    def changed(self) -> bool:
        return self.asset.effective != self.previous_effective


def plan_toggle(view: AssetView, *, unresolved_baseline: bool = True) -> Optional[bool]:
    """Return the explicit override the toggle should leave (``None`` = no override)."""
    desired = not view.effective
    baseline = view.inherited.value if view.inherited is not None else unresolved_baseline
    return None if desired == baseline else desired


def toggle_asset(
    state: DomainState,
    kind: AssetKind,
    path: str,
    *,
    unresolved_baseline: bool = True,
) -> ToggleResult:
    """Flip the effective state of ``path`` and re-resolve everything.

    Mutates ``state.store`` in memory only; saving is the caller's job.

    Raises:
        AssetNotFoundError: If ``path`` is not among the resolved views of ``kind``
    """
    current = state.find(kind, path)
    if current is None:
        raise AssetNotFoundError(
            f"Asset not found for toggle: {path}", kind=kind.value, path=path
        )

    new_explicit = plan_toggle(current, unresolved_baseline=unresolved_baseline)
    if new_explicit is None:
        state.store.remove(kind, path)
    else:
        state.store.set(kind, path, new_explicit)
    logger.debug(
        "Toggle %s %s: effective=%s explicit %s -> %s",
        kind.value,
        path,
        current.effective,
        current.explicit,
        new_explicit,
    )

    state.recompute()

    updated = state.find(kind, path)
    if updated is None:
        raise AssetNotFoundError(
            f"Asset missing after toggle recompute: {path}", kind=kind.value, path=path
        )
    return ToggleResult(
        asset=updated,
        previous_effective=current.effective,
        explicit_before=current.explicit,
        explicit_after=new_explicit,
    )


__all__ = ["ToggleResult", "plan_toggle", "toggle_asset"]
