"""Tests for core data models."""

from __future__ import annotations

from dataclasses import FrozenInstanceError
from pathlib import Path

import pytest

from docshelf.models import NOT_FOUND, Category, Document, Leaf, PagerLinks, _NotFound


class TestDocument:
    """Test Document dataclass."""

    def test_create_document(self) -> None:
        """Should expose metadata-derived properties."""
        doc = Document(
            slug="guide/setup",
            source_path=Path("/docs/guide/setup.md"),
            metadata={"title": "Setup", "description": "How to install", "order": 3},
            body="Body",
        )

        assert doc.title == "Setup"
        assert doc.description == "How to install"
        assert doc.order == 3.0
        assert doc.segments == ["guide", "setup"]

    def test_title_fallback(self) -> None:
        """Without a title the last slug segment is humanized."""
        doc = Document(slug="guide/quick_start", source_path=Path("x.md"), metadata={}, body="")
        assert doc.title == "quick start"

    def test_root_document(self) -> None:
        """The root document has no segments and falls back to its file stem."""
        doc = Document(slug="", source_path=Path("/docs/README.md"), metadata={}, body="")
        assert doc.segments == []
        assert doc.title == "README"

    def test_metadata_is_read_only(self) -> None:
        """Metadata cannot be mutated after load."""
        source = {"title": "A"}
        doc = Document(slug="a", source_path=Path("a.md"), metadata=source, body="")
        source["title"] = "changed"

        assert doc.metadata["title"] == "A"
        with pytest.raises(TypeError):
            doc.metadata["title"] = "B"  # type: ignore[index]

    def test_frozen(self) -> None:
        doc = Document(slug="a", source_path=Path("a.md"), metadata={}, body="")
        with pytest.raises(FrozenInstanceError):
            doc.slug = "b"  # type: ignore[misc]

    def test_equality(self) -> None:
        """Should compare documents by value."""
        first = Document(slug="a", source_path=Path("a.md"), metadata={"k": 1}, body="x")
        second = Document(slug="a", source_path=Path("a.md"), metadata={"k": 1}, body="x")
        assert first == second


class TestNavigationModels:
    """Test Leaf, Category and PagerLinks."""

    def test_leaf_name(self) -> None:
        assert Leaf(slug="guide/setup", title="Setup").name == "setup"

    def test_category_to_dict(self) -> None:
        category = Category(
            name="guide",
            path_prefix="guide",
            title="Guide",
            children=(Leaf(slug="guide/setup", title="Setup", order=1.0),),
        )

        assert category.to_dict() == {
            "type": "category",
            "name": "guide",
            "path_prefix": "guide",
            "title": "Guide",
            "order": None,
            "children": [
                {"type": "leaf", "slug": "guide/setup", "title": "Setup", "order": 1.0}
            ],
        }

    def test_pager_links_to_dict(self) -> None:
        links = PagerLinks(previous=Leaf(slug="", title="Intro"))
        assert links.to_dict() == {"previous": {"slug": "", "title": "Intro"}, "next": None}


class TestNotFound:
    """Test the NOT_FOUND sentinel."""

    def test_singleton_and_falsy(self) -> None:
        assert _NotFound() is NOT_FOUND
        assert not NOT_FOUND
        assert repr(NOT_FOUND) == "NOT_FOUND"
