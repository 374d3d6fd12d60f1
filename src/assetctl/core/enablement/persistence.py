"""Load and save the enablement file.

Loading never fails on bad content: a missing, unparsable or schema-invalid
file yields a default store plus a warning, so callers always start from a
validated (or empty) override set. Saving is strict: the payload is schema
validated before an atomic write.
"""
from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import List

from assetctl.core.exceptions import EnablementStoreError, SchemaValidationError
from assetctl.core.schemas import validate_payload, validate_payload_safe
from assetctl.core.utils.io import write_json_atomic
from assetctl.core.utils.time import utc_now

from .store import EnablementStore

logger = logging.getLogger(__name__)

SCHEMA_NAME = "enablement.schema.yaml"


class WarningKind(str, Enum):
    MISSING_FILE = "missing_file"
    PARSE_ERROR = "parse_error"
    SCHEMA_VALIDATION = "schema_validation"


@dataclass(frozen=True)
class EnablementWarning:
    kind: WarningKind
    details: tuple[str, ...] = ()

    def __str__(self) -> str:
        if self.kind is WarningKind.MISSING_FILE:
            return "No enablement file found; starting from a disabled baseline."
        if self.kind is WarningKind.PARSE_ERROR:
            return f"Failed to parse enablement file: {'; '.join(self.details)}"
        return f"Enablement file failed schema validation: {', '.join(self.details)}"


@dataclass
class EnablementLoad:
    store: EnablementStore
    warnings: List[EnablementWarning] = field(default_factory=list)


def parse_enablement(content: str) -> EnablementLoad:
    try:
        value = json.loads(content)
    except ValueError as exc:
        return EnablementLoad(
            store=EnablementStore(),
            warnings=[EnablementWarning(WarningKind.PARSE_ERROR, (str(exc),))],
        )

    errors = validate_payload_safe(value, SCHEMA_NAME)
    if errors:
        return EnablementLoad(
            store=EnablementStore(),
            warnings=[EnablementWarning(WarningKind.SCHEMA_VALIDATION, tuple(errors))],
        )

    try:
        store = EnablementStore.from_dict(value)
    except ValueError as exc:
        # Schema-valid but unusable (e.g. an unparsable updated_at string).
        return EnablementLoad(
            store=EnablementStore(),
            warnings=[EnablementWarning(WarningKind.PARSE_ERROR, (str(exc),))],
        )
    return EnablementLoad(store=store)


def load_enablement(path: Path) -> EnablementLoad:
    """Read the enablement file at ``path``.

    Raises:
        EnablementStoreError: For I/O failures other than a missing file
    """
    path = Path(path)
    if not path.exists():
        return EnablementLoad(
            store=EnablementStore(),
            warnings=[EnablementWarning(WarningKind.MISSING_FILE)],
        )
    try:
        content = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        load = EnablementLoad(
            store=EnablementStore(),
            warnings=[EnablementWarning(WarningKind.PARSE_ERROR, (str(exc),))],
        )
    except OSError as exc:
        raise EnablementStoreError(
            f"Cannot read enablement file {path}: {exc}", context={"path": str(path)}
        ) from exc
    else:
        load = parse_enablement(content)
    for warning in load.warnings:
        logger.warning("%s (%s)", warning, path)
    return load


def save_enablement(
    path: Path,
    store: EnablementStore,
    *,
    strip_microseconds: bool = True,
    use_z_suffix: bool = True,
) -> None:
    """Stamp ``updated_at``, validate, and atomically write ``store`` to ``path``.

    Raises:
        EnablementStoreError: If the payload fails validation or cannot be written
    """
    previous = store.updated_at
    store.updated_at = utc_now(strip_microseconds=strip_microseconds)
    payload = store.to_dict(use_z_suffix=use_z_suffix)
    try:
        validate_payload(payload, SCHEMA_NAME)
        write_json_atomic(path, payload)
    except SchemaValidationError as exc:
        store.updated_at = previous
        raise EnablementStoreError(str(exc), context={"path": str(path), "errors": exc.errors}) from exc
    except OSError as exc:
        store.updated_at = previous
        raise EnablementStoreError(
            f"Failed to write enablement file {path}: {exc}", context={"path": str(path)}
        ) from exc
    logger.info("Saved %d enablement overrides to %s", store.count(), path)


__all__ = [
    "EnablementLoad",
    "EnablementWarning",
    "WarningKind",
    "load_enablement",
    "parse_enablement",
    "save_enablement",
]
