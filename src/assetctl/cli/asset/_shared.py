from __future__ import annotations

from typing import Any, Dict, Optional

from assetctl.core.state import AssetView
from assetctl.core.sync import LocalStatus


def view_payload(view: AssetView, local: Optional[LocalStatus] = None) -> Dict[str, Any]:
    payload = view.to_dict()
    if local is not None:
        payload["local"] = local.value
    return payload


def describe_source(view: AssetView) -> str:
    if view.explicit is not None:
        return "explicit"
    if view.inherited is not None:
        return f"inherited from {view.inherited.collection.id}"
    return "default"


def marker(view: AssetView) -> str:
    return "[x]" if view.effective else "[ ]"
