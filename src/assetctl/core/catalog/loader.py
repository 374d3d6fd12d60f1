"""Build a Catalog from a content directory.

Layout (relative to the content root)::

    prompts/**/<slug>.prompt.md
    instructions/**/<slug>.instructions.md
    chatmodes/**/<slug>.chatmode.md
    collections/**/<slug>.collection.yml

Files that fail to read or parse are skipped and reported as warnings; a
single broken file never aborts a catalog load.
"""
from __future__ import annotations

import hashlib
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, Iterator, List, Optional, Tuple, TypeVar

import yaml

from assetctl.core.utils.io import read_text
from assetctl.core.utils.paths import to_posix_relative
from assetctl.core.utils.text import extract_title, parse_frontmatter, slug_to_title

from .model import AssetKind, Catalog, ChatMode, Collection, CollectionItem, Instruction, Prompt

logger = logging.getLogger(__name__)

T = TypeVar("T")

_COLLECTION_ITEM_KINDS = {
    "prompt": AssetKind.PROMPT,
    "instruction": AssetKind.INSTRUCTION,
    "chatmode": AssetKind.CHAT_MODE,
    "chat_mode": AssetKind.CHAT_MODE,
    "collection": AssetKind.COLLECTION,
}


@dataclass
class CatalogLoad:
    catalog: Catalog
    content_dir: Path
    warnings: List[str] = field(default_factory=list)


def compute_sha256(content: str) -> str:
    return hashlib.sha256(content.encode("utf-8")).hexdigest()


def _as_str_list(value: Any) -> Tuple[str, ...]:
    if value is None:
        return ()
    if isinstance(value, str):
        return tuple(v.strip() for v in value.split(",") if v.strip())
    if isinstance(value, (list, tuple)):
        return tuple(str(v) for v in value if v is not None and str(v).strip())
    return ()


def _as_str(value: Any) -> str:
    return "" if value is None else str(value)


def _slug(path: Path, suffix: str) -> str:
    name = path.name
    return name[: -len(suffix)] if name.endswith(suffix) else path.stem


def _iter_files(root: Path, suffix: str) -> Iterator[Path]:
    if not root.is_dir():
        return
    for p in sorted(root.rglob(f"*{suffix}")):
        if p.is_file():
            yield p


def _read_markdown(path: Path, suffix: str) -> Tuple[str, dict, str, str]:
    content = read_text(path)
    doc = parse_frontmatter(content)
    slug = _slug(path, suffix)
    name = extract_title(doc.content) or slug_to_title(slug)
    return content, doc.frontmatter, slug, name


def parse_prompt(path: Path, content_dir: Path) -> Prompt:
    content, fm, slug, name = _read_markdown(path, ".prompt.md")
    return Prompt(
        path=to_posix_relative(path, content_dir),
        slug=slug,
        name=name,
        description=_as_str(fm.get("description")),
        mode=_as_str(fm.get("mode")),
        tags=_as_str_list(fm.get("tags")),
        sha256=compute_sha256(content),
    )


def parse_instruction(path: Path, content_dir: Path) -> Instruction:
    content, fm, slug, name = _read_markdown(path, ".instructions.md")
    apply_to = _as_str(fm.get("applyTo", fm.get("apply_to"))).strip()
    return Instruction(
        path=to_posix_relative(path, content_dir),
        slug=slug,
        name=name,
        description=_as_str(fm.get("description")),
        apply_to=(apply_to,) if apply_to else ("**",),
        tags=_as_str_list(fm.get("tags")),
        sha256=compute_sha256(content),
    )


def parse_chat_mode(path: Path, content_dir: Path) -> ChatMode:
    content, fm, slug, name = _read_markdown(path, ".chatmode.md")
    return ChatMode(
        path=to_posix_relative(path, content_dir),
        slug=slug,
        name=name,
        description=_as_str(fm.get("description")),
        tools=_as_str_list(fm.get("tools")),
        tags=_as_str_list(fm.get("tags")),
        sha256=compute_sha256(content),
    )


def parse_collection(path: Path, content_dir: Path) -> Collection:
    content = read_text(path)
    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as exc:
        raise ValueError(f"invalid YAML: {exc}") from exc
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ValueError(f"collection manifest must be a mapping, got {type(data).__name__}")

    slug = _slug(path, ".collection.yml")
    items: List[CollectionItem] = []
    for raw in data.get("items") or []:
        if not isinstance(raw, dict):
            continue
        kind = _COLLECTION_ITEM_KINDS.get(_as_str(raw.get("kind")).strip().lower())
        item_path = _as_str(raw.get("path")).strip()
        if kind is None or not item_path:
            logger.debug("Dropping collection item %r in %s", raw, path)
            continue
        items.append(CollectionItem(path=item_path, kind=kind))

    return Collection(
        path=to_posix_relative(path, content_dir),
        id=_as_str(data.get("id")).strip() or slug,
        slug=slug,
        name=_as_str(data.get("name")).strip() or slug_to_title(slug),
        description=_as_str(data.get("description")),
        tags=_as_str_list(data.get("tags")),
        items=tuple(items),
        sha256=compute_sha256(content),
    )


def _collect(
    root: Path,
    suffix: str,
    parser: Callable[[Path, Path], T],
    content_dir: Path,
    label: str,
    warnings: List[str],
) -> List[T]:
    out: List[T] = []
    for p in _iter_files(root, suffix):
        try:
            out.append(parser(p, content_dir))
        except (OSError, UnicodeDecodeError, ValueError) as exc:
            msg = f"Failed to parse {label} {p}: {exc}"
            logger.warning(msg)
            warnings.append(msg)
    out.sort(key=lambda entry: entry.path)  # type: ignore[attr-defined]
    return out


def build_catalog(content_dir: Path, warnings: Optional[List[str]] = None) -> Catalog:
    """Parse every catalog file under ``content_dir``."""
    content_dir = Path(content_dir)
    sink = warnings if warnings is not None else []
    return Catalog(
        prompts=_collect(content_dir / "prompts", ".prompt.md", parse_prompt, content_dir, "prompt", sink),
        instructions=_collect(
            content_dir / "instructions", ".instructions.md", parse_instruction, content_dir, "instruction", sink
        ),
        chat_modes=_collect(
            content_dir / "chatmodes", ".chatmode.md", parse_chat_mode, content_dir, "chat mode", sink
        ),
        collections=_collect(
            content_dir / "collections", ".collection.yml", parse_collection, content_dir, "collection", sink
        ),
    )


def load_catalog(content_dir: Path) -> CatalogLoad:
    warnings: List[str] = []
    catalog = build_catalog(content_dir, warnings)
    logger.debug(
        "Loaded catalog from %s: %d prompts, %d instructions, %d chat modes, %d collections",
        content_dir,
        len(catalog.prompts),
        len(catalog.instructions),
        len(catalog.chat_modes),
        len(catalog.collections),
    )
    return CatalogLoad(catalog=catalog, content_dir=Path(content_dir), warnings=warnings)


__all__ = [
    "CatalogLoad",
    "build_catalog",
    "load_catalog",
    "parse_prompt",
    "parse_instruction",
    "parse_chat_mode",
    "parse_collection",
    "compute_sha256",
]
