"""Schema validation for persisted payloads.

Schemas are JSON Schema documents serialised as YAML and bundled under
``assetctl.data/schemas``.
"""
from __future__ import annotations

from functools import lru_cache
from typing import Any, Dict, List

from jsonschema import Draft202012Validator

from assetctl.core.exceptions import SchemaValidationError
from assetctl.data import get_data_path
from assetctl.core.utils.io import read_yaml


@lru_cache(maxsize=8)
def load_schema(schema_name: str) -> Dict[str, Any]:
    """Load a bundled schema by name (``.yaml`` is appended when missing).

    Raises:
        FileNotFoundError: If schema file doesn't exist.
        ValueError: If schema is not a YAML mapping.
    """
    if not schema_name.lower().endswith((".yaml", ".yml")):
        schema_name = f"{schema_name}.yaml"
    path = get_data_path("schemas", schema_name)
    schema = read_yaml(path, default=None, raise_on_error=True)
    if not isinstance(schema, dict):
        raise ValueError(f"Schema must be a YAML mapping, got {type(schema).__name__}")
    Draft202012Validator.check_schema(schema)
    return schema


def _format_path(parts: Any) -> str:
    rendered = "/".join(str(p) for p in parts)
    return f"/{rendered}" if rendered else "<root>"


def validate_payload_safe(payload: Any, schema_name: str) -> List[str]:
    """Validate ``payload`` and return error messages (empty when valid)."""
    validator = Draft202012Validator(load_schema(schema_name))
    errors: List[str] = []
    for error in sorted(validator.iter_errors(payload), key=lambda e: [str(p) for p in e.path]):
        errors.append(f"{_format_path(error.path)}: {error.message}")
    return errors


def validate_payload(payload: Any, schema_name: str) -> None:
    """Validate ``payload`` against a bundled schema.

    Raises:
        SchemaValidationError: If validation fails.
    """
    errors = validate_payload_safe(payload, schema_name)
    if errors:
        raise SchemaValidationError(
            f"Validation failed against schema '{schema_name}': {'; '.join(errors)}",
            errors=errors,
        )


__all__ = ["load_schema", "validate_payload", "validate_payload_safe"]
