"""Slug resolution against a loaded document index."""

from __future__ import annotations

from typing import Optional, Sequence, Union

from docshelf.config import AppConfig
from docshelf.index.store import DocumentIndex
from docshelf.models import NOT_FOUND, ROOT_SLUG, Document, _NotFound


def slug_path(
    slug_segments: Optional[Sequence[str]] = None, *, config: Optional[AppConfig] = None
) -> str:
    """Normalize requested segments into the slug they address.

    Empty segments are dropped and a trailing root-index segment collapses into
    its directory, mirroring how slugs are computed at load time. Case is kept.
    """
    config = config or AppConfig()
    parts = [
        part
        for segment in slug_segments or ()
        for part in str(segment).split("/")
        if part
    ]
    if parts and parts[-1].lower() == config.root_index_name.lower():
        parts = parts[:-1]
    return "/".join(parts) if parts else ROOT_SLUG


def resolve(
    index: DocumentIndex,
    slug_segments: Optional[Sequence[str]] = None,
    *,
    config: Optional[AppConfig] = None,
) -> Union[Document, _NotFound]:
    """Find the document addressed by ``slug_segments``.

    Returns ``NOT_FOUND`` instead of raising when nothing matches.
    """
    config = config or AppConfig()
    slug = slug_path(slug_segments, config=config)
    document = index.get(slug)
    if document is not None:
        return document
    if slug == ROOT_SLUG:
        document = index.get(config.root_index_slug)
        if document is not None:
            return document
    return NOT_FOUND
