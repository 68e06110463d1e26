"""Keyword search over indexed documents."""

from __future__ import annotations

from dataclasses import dataclass
from difflib import SequenceMatcher
from typing import List

from docshelf.index.store import DocumentIndex
from docshelf.models import Document
from docshelf.utils.text import clean_markdown, make_snippet, normalize_whitespace

TITLE_WEIGHT = 0.7
CONTENT_WEIGHT = 0.3


@dataclass(slots=True)
class SearchResult:
    slug: str
    title: str
    description: str
    snippet: str
    score: float


def _title_score(title: str, query: str) -> float:
    title, query = title.lower(), query.lower()
    if query in title:
        return 1.0
    return SequenceMatcher(None, query, title).ratio()


def _content_score(content: str, query: str) -> float:
    hits = content.lower().count(query.lower())
    if not hits:
        return 0.0
    return min(1.0, 0.5 + 0.1 * hits)


class Searcher:
    """Ranks documents by title and body matches."""

    def __init__(self, index: DocumentIndex) -> None:
        self.index = index

    def _score(self, document: Document, content: str, query: str) -> float:
        title_score = _title_score(document.title, query)
        content_score = _content_score(content, query)
        # Weak fuzzy title matches only count alongside a content hit.
        if content_score == 0.0 and title_score < 1.0:
            title_score = title_score if title_score >= 0.8 else 0.0
        return TITLE_WEIGHT * title_score + CONTENT_WEIGHT * content_score

    def search(self, query: str, *, top_k: int = 10) -> List[SearchResult]:
        query = query.strip()
        if not query:
            return []

        results: List[SearchResult] = []
        for document in self.index.values():
            content = normalize_whitespace(clean_markdown(document.body).splitlines())
            score = self._score(document, content, query)
            if score <= 0.0:
                continue
            results.append(
                SearchResult(
                    slug=document.slug,
                    title=document.title,
                    description=document.description,
                    snippet=make_snippet(content, query),
                    score=round(score, 4),
                )
            )
        results.sort(key=lambda result: (-result.score, result.slug))
        return results[:top_k]
