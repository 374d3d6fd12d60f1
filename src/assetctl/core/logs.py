"""Process-wide stdlib logging setup for the CLI.

Log records go to a single file under the workspace directory. Nothing is
written to stdout/stderr so text and ``--json`` output stay clean.
"""
from __future__ import annotations

import logging
import sys
from pathlib import Path

from assetctl.core.utils.io import ensure_directory

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

_configured_path: str | None = None
_file_handler: logging.Handler | None = None
_null_handler_installed: bool = False


def level_from_name(name: str) -> int:
    level = logging.getLevelName(str(name or "").upper())
    return level if isinstance(level, int) else logging.INFO


def _close_quietly(handler: logging.Handler) -> None:
    try:
        handler.close()
    except OSError:
        pass


def configure_stdlib_logging(*, log_path: Path, level: str = "INFO") -> None:
    """Send root logging to ``log_path``.

    Idempotent for the same path; switching paths replaces the previous file
    handler. stdout/stderr stream handlers are removed (a FileHandler is also
    a StreamHandler, so only those two streams are matched).
    """
    global _configured_path, _file_handler

    resolved = str(Path(log_path).resolve())
    if _configured_path == resolved and _file_handler is not None:
        return

    ensure_directory(Path(resolved).parent)

    root = logging.getLogger()
    root.setLevel(level_from_name(level))

    for handler in list(root.handlers):
        if isinstance(handler, logging.StreamHandler) and getattr(handler, "stream", None) in (
            sys.stdout,
            sys.stderr,
        ):
            root.removeHandler(handler)
            _close_quietly(handler)

    if _file_handler is not None:
        root.removeHandler(_file_handler)
        _close_quietly(_file_handler)
        _file_handler = None

    fh = logging.FileHandler(resolved, encoding="utf-8")
    fh.setLevel(level_from_name(level))
    fh.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(fh)

    _file_handler = fh
    _configured_path = resolved


def reset_stdlib_logging_for_tests() -> None:
    """Test-only: drop every root handler and forget the configured path."""
    global _configured_path, _file_handler, _null_handler_installed
    root = logging.getLogger()
    for handler in list(root.handlers):
        root.removeHandler(handler)
        _close_quietly(handler)
    _configured_path = None
    _file_handler = None
    _null_handler_installed = False


def suppress_lastresort_in_json_mode() -> None:
    """Keep logging's implicit ``lastResort`` stderr handler out of JSON output.

    Installs a NullHandler on the root logger when it has no handlers at all.
    """
    global _null_handler_installed

    root = logging.getLogger()
    if root.handlers or _null_handler_installed:
        return
    root.addHandler(logging.NullHandler())
    _null_handler_installed = True


__all__ = [
    "LOG_FORMAT",
    "configure_stdlib_logging",
    "level_from_name",
    "reset_stdlib_logging_for_tests",
    "suppress_lastresort_in_json_mode",
]
