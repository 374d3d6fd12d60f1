import os
import sys
from pathlib import Path

import pytest

# Keep the repository free of Python bytecode and __pycache__ artifacts during tests.
sys.dont_write_bytecode = True

TESTS_ROOT = Path(__file__).resolve().parent
REPO_ROOT = TESTS_ROOT.parent
SRC_ROOT = REPO_ROOT / "src"

# Make src/ importable as 'assetctl' and tests/ importable as 'helpers'
for p in (SRC_ROOT, TESTS_ROOT):
    if str(p) not in sys.path:
        sys.path.insert(0, str(p))


from assetctl.core.config import clear_all_caches
from assetctl.core.logs import reset_stdlib_logging_for_tests


@pytest.fixture(autouse=True)
def _reset_assetctl_caches():
    """Ensure config caches and logging handlers are fresh for each test."""
    clear_all_caches()
    yield
    clear_all_caches()
    reset_stdlib_logging_for_tests()


@pytest.fixture
def isolated_project_env(tmp_path, monkeypatch):
    """
    Isolated repository root for tests.

    The project root is pinned to ``tmp_path`` and every other ``ASSETCTL_``
    variable from the developer shell is cleared so config resolves from the
    bundled defaults plus whatever the test writes.
    """
    for key in list(os.environ):
        if key.startswith("ASSETCTL_"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.setenv("ASSETCTL_PROJECT_ROOT", str(tmp_path))
    monkeypatch.chdir(tmp_path)
    (tmp_path / ".assetctl").mkdir()
    clear_all_caches()
    return tmp_path
