"""Tests for static path enumeration and sitemap entries."""

from __future__ import annotations

from pathlib import Path

from docshelf.index.paths import SitemapEntry, all_slugs, sitemap_entries
from docshelf.index.store import load_documents


class TestAllSlugs:
    """Test all_slugs."""

    def test_scenario(self, scenario_root: Path) -> None:
        slugs = all_slugs(load_documents(scenario_root))

        assert sorted(slugs) == sorted([[], ["guide", "quick-start"], ["guide", "advanced"]])

    def test_matches_index_keys(self, scenario_root: Path) -> None:
        """Enumerated slugs are exactly the index keys."""
        index = load_documents(scenario_root)
        assert {"/".join(segments) for segments in all_slugs(index)} == set(index)

    def test_follows_index_order(self, scenario_root: Path) -> None:
        index = load_documents(scenario_root)
        assert ["/".join(segments) for segments in all_slugs(index)] == list(index)

    def test_empty(self, tmp_path: Path) -> None:
        assert all_slugs(load_documents(tmp_path / "missing")) == []


class TestSitemapEntries:
    """Test sitemap_entries."""

    def test_entries(self, scenario_root: Path) -> None:
        entries = sitemap_entries(load_documents(scenario_root), "https://example.com/")

        assert entries[0] == SitemapEntry(url="https://example.com", priority=1.0, change_frequency="daily")
        assert [entry.url for entry in entries[1:]] == [
            "https://example.com/docs",
            "https://example.com/docs/guide/advanced",
            "https://example.com/docs/guide/quick-start",
        ]
        assert all(entry.priority == 0.8 for entry in entries[1:])

    def test_custom_prefix(self, scenario_root: Path) -> None:
        entries = sitemap_entries(load_documents(scenario_root), "https://example.com", docs_prefix="handbook")
        assert entries[1].url == "https://example.com/handbook"
