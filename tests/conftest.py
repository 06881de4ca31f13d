from __future__ import annotations

import sys
from pathlib import Path

import pytest


def pytest_configure() -> None:
    """
    Ensure `src/` is on sys.path so tests can import `rishah`
    without requiring an editable install.
    """
    repo_root = Path(__file__).resolve().parents[1]
    src_root = repo_root / "src"
    sys.path.insert(0, str(src_root))


@pytest.fixture
def config_root(tmp_path: Path) -> Path:
    """An empty per-user config directory."""
    root = tmp_path / "config"
    root.mkdir()
    return root
