"""Document store: discovers content files and indexes them by slug."""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Dict, Mapping, Optional, Tuple

from docshelf.config import AppConfig
from docshelf.ingestion.frontmatter import parse
from docshelf.models import Document
from docshelf.utils.files import iter_document_paths, slug_for_path

LOGGER = logging.getLogger(__name__)

DocumentIndex = Mapping[str, Document]


@dataclass(slots=True)
class LoadStats:
    loaded: int = 0
    skipped: int = 0
    duplicates: int = 0
    skipped_files: list[Path] = field(default_factory=list)

    def skip(self, path: Path, *, duplicate: bool = False) -> None:
        if duplicate:
            self.duplicates += 1
        else:
            self.skipped += 1
        self.skipped_files.append(path)


def load_documents_with_stats(
    root_dir: Path, *, config: Optional[AppConfig] = None
) -> Tuple[DocumentIndex, LoadStats]:
    """Build a read-only slug index for every document under ``root_dir``."""
    config = config or AppConfig(content_root=Path(root_dir))
    root = Path(root_dir)
    stats = LoadStats()
    documents: Dict[str, Document] = {}

    if not root.is_dir():
        LOGGER.warning("Content root %s does not exist or is not a directory", root)
        return MappingProxyType(documents), stats

    for path in iter_document_paths(root, config.extensions):
        try:
            raw = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            LOGGER.warning("Skipping unreadable file %s: %s", path, exc)
            stats.skip(path)
            continue

        slug = slug_for_path(
            path,
            root,
            root_index_name=config.root_index_name,
            lowercase=config.lowercase_slugs,
        )
        if slug in documents:
            LOGGER.warning(
                "Skipping %s: slug %r already taken by %s",
                path,
                slug,
                documents[slug].source_path,
            )
            stats.skip(path, duplicate=True)
            continue

        try:
            parsed = parse(raw)
            document = Document(
                slug=slug, source_path=path, metadata=parsed.metadata, body=parsed.body
            )
        except Exception as exc:
            LOGGER.warning("Failed to process %s: %s", path, exc)
            stats.skip(path)
            continue

        documents[slug] = document
        stats.loaded += 1

    LOGGER.info("Loaded %d documents from %s", stats.loaded, root)
    return MappingProxyType(documents), stats


def load_documents(root_dir: Path, *, config: Optional[AppConfig] = None) -> DocumentIndex:
    """Build a read-only slug index for every document under ``root_dir``."""
    index, _ = load_documents_with_stats(root_dir, config=config)
    return index


class ContentCache:
    """Process-wide holder for the loaded index.

    The index is loaded on first use and kept until ``invalidate`` or
    ``rebuild`` is called. A rebuild swaps in a complete new index, so readers
    never observe a partially built one.
    """

    def __init__(self, root_dir: Path, *, config: Optional[AppConfig] = None) -> None:
        self.root_dir = Path(root_dir)
        self.config = config or AppConfig(content_root=self.root_dir)
        self._index: Optional[DocumentIndex] = None
        self._lock = threading.Lock()

    @property
    def is_loaded(self) -> bool:
        return self._index is not None

    def get_or_load(self) -> DocumentIndex:
        index = self._index
        if index is not None:
            return index
        with self._lock:
            if self._index is None:
                self._index = load_documents(self.root_dir, config=self.config)
            return self._index

    def invalidate(self) -> None:
        with self._lock:
            self._index = None

    def rebuild(self) -> DocumentIndex:
        index = load_documents(self.root_dir, config=self.config)
        with self._lock:
            self._index = index
        return index
