from __future__ import annotations

from typing import Any, Dict, Mapping


class AssetctlError(Exception):
    """Base exception for assetctl."""

    context: Dict[str, Any]

    def __init__(self, message: str = "", *, context: Mapping[str, Any] | None = None) -> None:
        super().__init__(message)
        if context is not None:
            # Store a shallow copy to avoid accidental mutation.
            self.context = dict(context)
        else:
            self.context = {}

    def to_json_error(self) -> Dict[str, Any]:
        """Return a JSON-serializable error payload."""
        return {
            "message": str(self),
            "code": self.__class__.__name__,
            "context": self.context,
        }


class AssetNotFoundError(AssetctlError, LookupError):
    """Raised when a toggle or lookup target is absent from the resolved views."""

    def __init__(
        self,
        message: str = "",
        *,
        kind: str | None = None,
        path: str | None = None,
        context: Mapping[str, Any] | None = None,
    ) -> None:
        ctx = dict(context or {})
        if kind:
            ctx["kind"] = kind
        if path:
            ctx["path"] = path
        AssetctlError.__init__(self, message, context=ctx)
        LookupError.__init__(self, message)
        self.kind = kind
        self.path = path


class CollectionNotFoundError(AssetNotFoundError):
    """Raised when impact analysis targets an unknown collection path."""

    def __init__(self, message: str = "", *, path: str | None = None) -> None:
        super().__init__(message, kind="collection", path=path)


class CatalogError(AssetctlError):
    """Raised when no usable catalog content is available."""


class ConfigError(AssetctlError, ValueError):
    """Raised when a configuration file cannot be read or is not a YAML mapping."""

    def __init__(self, message: str = "", *, path: str | None = None) -> None:
        AssetctlError.__init__(self, message, context={"path": path} if path else None)
        ValueError.__init__(self, message)
        self.path = path


class SchemaValidationError(AssetctlError, ValueError):
    """Raised when a payload fails JSON Schema validation."""

    def __init__(
        self,
        message: str = "",
        *,
        errors: list[str] | None = None,
        context: Mapping[str, Any] | None = None,
    ) -> None:
        ctx = dict(context or {})
        if errors:
            ctx["errors"] = list(errors)
        AssetctlError.__init__(self, message, context=ctx)
        ValueError.__init__(self, message)
        self.errors = list(errors or [])


class EnablementStoreError(AssetctlError):
    """Raised when the enablement file cannot be written."""


class SyncError(AssetctlError):
    """Raised when a local asset file cannot be copied, hashed or removed."""


__all__ = [
    "AssetctlError",
    "AssetNotFoundError",
    "CollectionNotFoundError",
    "ConfigError",
    "CatalogError",
    "SchemaValidationError",
    "EnablementStoreError",
    "SyncError",
]
