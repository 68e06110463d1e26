"""Shared fixtures for docshelf tests."""

from __future__ import annotations

from pathlib import Path

import pytest


def write_doc(root: Path, relative: str, text: str) -> Path:
    path = root / relative
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path


@pytest.fixture
def scenario_root(tmp_path: Path) -> Path:
    """Small corpus: an intro page plus a two-page guide."""
    root = tmp_path / "docs"
    write_doc(root, "README.md", "---\ntitle: Intro\n---\nWelcome to the docs.\n")
    write_doc(
        root,
        "guide/quick-start.md",
        "---\ntitle: Quick Start\norder: 1\n---\nInstall the package and run it.\n",
    )
    write_doc(
        root,
        "guide/advanced.md",
        "---\ntitle: Advanced\norder: 2\n---\nTuning the server for production.\n",
    )
    return root


@pytest.fixture(name="write_doc")
def write_doc_fixture():
    """Expose write_doc to tests as a fixture."""
    return write_doc
