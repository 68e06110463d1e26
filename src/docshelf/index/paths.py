"""Static path enumeration and sitemap entries."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List

from docshelf.index.store import DocumentIndex


@dataclass(slots=True)
class SitemapEntry:
    url: str
    priority: float
    change_frequency: str


def all_slugs(index: DocumentIndex) -> List[List[str]]:
    """Every indexed slug split into path segments; the root slug is ``[]``."""
    return [document.segments for document in index.values()]


def sitemap_entries(
    index: DocumentIndex, base_url: str, *, docs_prefix: str = "/docs"
) -> List[SitemapEntry]:
    base = base_url.rstrip("/")
    prefix = "/" + docs_prefix.strip("/") if docs_prefix.strip("/") else ""
    entries = [SitemapEntry(url=base, priority=1.0, change_frequency="daily")]
    for slug in index:
        url = f"{base}{prefix}/{slug}" if slug else f"{base}{prefix}"
        entries.append(SitemapEntry(url=url, priority=0.8, change_frequency="hourly"))
    return entries
