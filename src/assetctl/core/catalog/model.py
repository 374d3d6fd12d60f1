"""Catalog entities.

Entities are immutable once loaded. Every entity is keyed by its ``path``,
relative to the content root, within its own kind.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Tuple


class AssetKind(str, Enum):
    PROMPT = "prompt"
    INSTRUCTION = "instruction"
    CHAT_MODE = "chat_mode"
    COLLECTION = "collection"

    @classmethod
    def parse(cls, raw: str) -> "AssetKind":
        """Parse a user- or file-supplied kind name.

        Accepts the canonical values plus the ``chatmode`` spelling used by
        collection manifests and plural forms used on the command line.

        Raises:
            ValueError: If ``raw`` names no known kind
        """
        token = str(raw or "").strip().lower().replace("-", "_")
        kind = _KIND_ALIASES.get(token)
        if kind is None:
            raise ValueError(f"Unknown asset kind: {raw!r}")
        return kind

    @property
    def label(self) -> str:
        return _KIND_LABELS[self]

    @property
    def store_key(self) -> str:
        """Key of this kind's map in the enablement file."""
        return _STORE_KEYS[self]


_KIND_ALIASES = {
    "prompt": AssetKind.PROMPT,
    "prompts": AssetKind.PROMPT,
    "instruction": AssetKind.INSTRUCTION,
    "instructions": AssetKind.INSTRUCTION,
    "chat_mode": AssetKind.CHAT_MODE,
    "chat_modes": AssetKind.CHAT_MODE,
    "chatmode": AssetKind.CHAT_MODE,
    "chatmodes": AssetKind.CHAT_MODE,
    "collection": AssetKind.COLLECTION,
    "collections": AssetKind.COLLECTION,
}

_KIND_LABELS = {
    AssetKind.PROMPT: "Prompt",
    AssetKind.INSTRUCTION: "Instruction",
    AssetKind.CHAT_MODE: "Chat Mode",
    AssetKind.COLLECTION: "Collection",
}

_STORE_KEYS = {
    AssetKind.PROMPT: "prompts",
    AssetKind.INSTRUCTION: "instructions",
    AssetKind.CHAT_MODE: "chat_modes",
    AssetKind.COLLECTION: "collections",
}

# Declaration order used for per-kind iteration everywhere.
ASSET_KINDS: Tuple[AssetKind, ...] = (
    AssetKind.PROMPT,
    AssetKind.INSTRUCTION,
    AssetKind.CHAT_MODE,
    AssetKind.COLLECTION,
)


@dataclass(frozen=True)
class Prompt:
    path: str
    slug: str
    name: str
    description: str = ""
    mode: str = ""
    tags: Tuple[str, ...] = ()
    sha256: str = ""

    kind = AssetKind.PROMPT


@dataclass(frozen=True)
class Instruction:
    path: str
    slug: str
    name: str
    description: str = ""
    apply_to: Tuple[str, ...] = ("**",)
    tags: Tuple[str, ...] = ()
    sha256: str = ""

    kind = AssetKind.INSTRUCTION


@dataclass(frozen=True)
class ChatMode:
    path: str
    slug: str
    name: str
    description: str = ""
    tools: Tuple[str, ...] = ()
    tags: Tuple[str, ...] = ()
    sha256: str = ""

    kind = AssetKind.CHAT_MODE


@dataclass(frozen=True)
class CollectionItem:
    """Reference from a collection to another catalog asset."""

    path: str
    kind: AssetKind


@dataclass(frozen=True)
class Collection:
    path: str
    id: str
    slug: str
    name: str
    description: str = ""
    tags: Tuple[str, ...] = ()
    items: Tuple[CollectionItem, ...] = ()
    sha256: str = ""

    kind = AssetKind.COLLECTION


@dataclass
class Catalog:
    """Flat catalog as produced by the loader (per-kind sequences)."""

    prompts: list[Prompt] = field(default_factory=list)
    instructions: list[Instruction] = field(default_factory=list)
    chat_modes: list[ChatMode] = field(default_factory=list)
    collections: list[Collection] = field(default_factory=list)

    def entries(self, kind: AssetKind) -> list:
        if kind is AssetKind.PROMPT:
            return self.prompts
        if kind is AssetKind.INSTRUCTION:
            return self.instructions
        if kind is AssetKind.CHAT_MODE:
            return self.chat_modes
        return self.collections

    def size(self) -> int:
        return sum(len(self.entries(kind)) for kind in ASSET_KINDS)


__all__ = [
    "AssetKind",
    "ASSET_KINDS",
    "Prompt",
    "Instruction",
    "ChatMode",
    "CollectionItem",
    "Collection",
    "Catalog",
]
