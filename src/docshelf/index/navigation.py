"""Navigation tree construction.

Directories become categories and documents become leaves. Within a category
the directory's own index document comes first; the remaining children are
ordered by their explicit ``order`` value (ascending) and then by name,
case-insensitively. Children without an ``order`` follow those that have one.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from docshelf.config import AppConfig
from docshelf.index.store import DocumentIndex
from docshelf.models import ROOT_SLUG, Category, Document, Leaf, NavigationNode
from docshelf.utils.text import humanize_segment

SortKey = Tuple[int, float, str, str]


@dataclass(slots=True)
class _Directory:
    name: str
    prefix: str
    index_document: Optional[Document] = None
    documents: List[Document] = field(default_factory=list)
    subdirs: Dict[str, "_Directory"] = field(default_factory=dict)


def _sort_key(name: str, order: Optional[float]) -> SortKey:
    if order is None:
        return (1, 0.0, name.casefold(), name)
    return (0, order, name.casefold(), name)


def _leaf(document: Document) -> Leaf:
    return Leaf(slug=document.slug, title=document.title, order=document.order)


def _directory_for(root: _Directory, segments: List[str]) -> _Directory:
    node = root
    for segment in segments:
        prefix = f"{node.prefix}/{segment}" if node.prefix else segment
        node = node.subdirs.setdefault(segment, _Directory(name=segment, prefix=prefix))
    return node


def _group(index: DocumentIndex, root_index_name: str) -> _Directory:
    root = _Directory(name="", prefix=ROOT_SLUG)
    for document in index.values():
        segments = document.segments
        if document.source_path.stem.lower() == root_index_name.lower():
            directory = _directory_for(root, segments)
            if directory.index_document is None:
                directory.index_document = document
                continue
        _directory_for(root, segments[:-1]).documents.append(document)
    return root


def _category(directory: _Directory) -> Category:
    ranked: List[Tuple[SortKey, NavigationNode]] = []
    for document in directory.documents:
        leaf = _leaf(document)
        ranked.append((_sort_key(leaf.name, leaf.order), leaf))
    for subdir in directory.subdirs.values():
        category = _category(subdir)
        ranked.append((_sort_key(category.name, category.order), category))
    ranked.sort(key=lambda item: item[0])

    children: List[NavigationNode] = [node for _, node in ranked]
    title = humanize_segment(directory.name) if directory.name else ""
    order = None
    if directory.index_document is not None:
        children.insert(0, _leaf(directory.index_document))
        title = directory.index_document.title
        order = directory.index_document.order
    return Category(
        name=directory.name,
        path_prefix=directory.prefix,
        title=title,
        order=order,
        children=tuple(children),
    )


def build_navigation(index: DocumentIndex, *, config: Optional[AppConfig] = None) -> Category:
    """Derive the ordered navigation tree from a document index."""
    config = config or AppConfig()
    return _category(_group(index, config.root_index_name))
