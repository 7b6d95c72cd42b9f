"""Pytest configuration and fixtures for todoview tests."""

from pathlib import Path

import pytest

from todoview.models import ViewerConfig

SAMPLE_TODO = """\
(C) renew passport :errands t:2024-06-20
call mom :home
(A) finish report :work t:2024-06-15

(b) fix sink :home :work t:2024-06-10
read a book
"""


@pytest.fixture
def todo_path(tmp_path) -> Path:
    """Write the sample todo file and return its path."""
    path = tmp_path / "todo.txt"
    path.write_text(SAMPLE_TODO, encoding="utf-8")
    return path


@pytest.fixture
def make_config(tmp_path):
    """Build a ViewerConfig rooted in the temp directory."""

    def _make(**overrides) -> ViewerConfig:
        values = {
            "todo_file": "todo",
            "base_dir": str(tmp_path),
            "timezone": "UTC",
            "editor": "vi",
        }
        values.update(overrides)
        return ViewerConfig(**values)

    return _make


@pytest.fixture
def clean_env(monkeypatch):
    """Remove todoview-related environment variables."""
    import os

    for name in list(os.environ):
        if name.startswith("TODOVIEW_") or name in ("VISUAL", "EDITOR"):
            monkeypatch.delenv(name, raising=False)
    return monkeypatch
