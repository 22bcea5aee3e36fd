"""
Root conftest.py — isolates config lookups and registers custom markers.

Markers:
  @pytest.mark.tty   — needs a real terminal on stdout; skipped unless --tty
"""
from __future__ import annotations

import os

import pytest


# ---------------------------------------------------------------------------
# Config isolation
# ---------------------------------------------------------------------------

@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Point user config at an empty temp dir and run from a clean cwd."""
    config_dir = tmp_path / "user-config"
    config_dir.mkdir()
    work_dir = tmp_path / "work"
    work_dir.mkdir()
    monkeypatch.setenv("PI_GRID_DIR", str(config_dir))
    monkeypatch.delenv("PI_GRID_WRITE_LOG", raising=False)
    monkeypatch.chdir(work_dir)
    return config_dir


# ---------------------------------------------------------------------------
# Custom markers
# ---------------------------------------------------------------------------

def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line(
        "markers",
        "tty: mark test as requiring a real terminal (run with --tty or TTY_TESTS=1)",
    )


def pytest_addoption(parser: pytest.Parser) -> None:
    parser.addoption(
        "--tty",
        action="store_true",
        default=False,
        help="Run tests marked with @pytest.mark.tty (requires a real terminal)",
    )


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    """Skip @pytest.mark.tty tests unless --tty flag or TTY_TESTS=1 is set."""
    run_tty = config.getoption("--tty") or os.environ.get("TTY_TESTS", "").lower() in ("1", "true", "yes")
    skip_tty = pytest.mark.skip(reason="Terminal test — run with --tty or TTY_TESTS=1")
    for item in items:
        if "tty" in item.keywords and not run_tty:
            item.add_marker(skip_tty)
