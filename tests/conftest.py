import os
import sys
from pathlib import Path

import pytest

# Keep the repository free of Python bytecode and __pycache__ artifacts during tests.
sys.dont_write_bytecode = True

TESTS_ROOT = Path(__file__).resolve().parent
REPO_ROOT = TESTS_ROOT.parent
SRC_ROOT = REPO_ROOT / "src"

# Make src/ importable as 'pagesmith' and tests/ importable for 'helpers'
for p in (SRC_ROOT, TESTS_ROOT):
    if str(p) not in sys.path:
        sys.path.insert(0, str(p))


from pagesmith.core.stdlib_logging import reset_stdlib_logging_for_tests
from pagesmith.data import clear_caches
from helpers.site import write_component, write_site


@pytest.fixture(autouse=True)
def _isolate_pagesmith_state(monkeypatch):
    """Drop PAGESMITH_* overrides from the developer shell and reset logging/caches."""
    for key in list(os.environ):
        if key.startswith("PAGESMITH_"):
            monkeypatch.delenv(key, raising=False)
    clear_caches()
    yield
    reset_stdlib_logging_for_tests()
    clear_caches()


@pytest.fixture
def component_root(tmp_path: Path) -> Path:
    """Empty component root directory."""
    root = tmp_path / "components"
    root.mkdir()
    return root


@pytest.fixture
def components(component_root: Path):
    """Factory writing component files under ``component_root``.

    Usage:
        components({"x": "Hello {{ name }}!"})
    """

    def _write(files: dict) -> Path:
        for name, text in files.items():
            write_component(component_root, name, text)
        return component_root

    return _write


@pytest.fixture
def site_project(tmp_path: Path) -> Path:
    """A small project laid out with the default paths (src/pages, src/components, ...)."""
    root = tmp_path / "site"
    write_site(root)
    return root
