"""Shared fixtures for the dupe-d tests."""
from __future__ import annotations

from pathlib import Path

import pytest


@pytest.fixture
def photo_tree(tmp_path: Path) -> Path:
    """A small folder with two identical files, mixed-case extensions and a subfolder."""
    root = tmp_path / "photos"
    (root / "album").mkdir(parents=True)
    (root / "a.jpg").write_bytes(b"same bytes")
    (root / "b.JPG").write_bytes(b"upper case extension")
    (root / "c.png").write_bytes(b"portable network graphic")
    (root / "album" / "copy.jpg").write_bytes(b"same bytes")
    (root / "album" / "notes").write_bytes(b"no extension here")
    return root


@pytest.fixture
def workdir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run the test from an empty folder so reports land somewhere predictable."""
    out = tmp_path / "work"
    out.mkdir()
    monkeypatch.chdir(out)
    return out
