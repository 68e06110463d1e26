"""Core docshelf data models."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Tuple, Union

from docshelf.utils.text import humanize_segment, parse_order

ROOT_SLUG = ""
ROOT_INDEX_NAME = "README"


@dataclass(frozen=True, slots=True)
class Document:
    """A single indexed document."""

    slug: str
    source_path: Path
    metadata: Mapping[str, Any]
    body: str

    def __post_init__(self) -> None:
        if not isinstance(self.metadata, MappingProxyType):
            object.__setattr__(self, "metadata", MappingProxyType(dict(self.metadata)))

    @property
    def segments(self) -> list[str]:
        return self.slug.split("/") if self.slug else []

    @property
    def title(self) -> str:
        title = self.metadata.get("title")
        if isinstance(title, str) and title.strip():
            return title.strip()
        if self.slug:
            return humanize_segment(self.segments[-1])
        return humanize_segment(self.source_path.stem)

    @property
    def description(self) -> str:
        description = self.metadata.get("description")
        return description if isinstance(description, str) else ""

    @property
    def order(self) -> Optional[float]:
        return parse_order(self.metadata.get("order"))


@dataclass(frozen=True, slots=True)
class Leaf:
    """Navigation entry pointing at one document."""

    slug: str
    title: str
    order: Optional[float] = None

    @property
    def name(self) -> str:
        return self.slug.rsplit("/", 1)[-1]

    def to_dict(self) -> Dict[str, Any]:
        return {"type": "leaf", "slug": self.slug, "title": self.title, "order": self.order}

    def to_link(self) -> Dict[str, str]:
        return {"slug": self.slug, "title": self.title}


@dataclass(frozen=True, slots=True)
class Category:
    """Navigation group mirroring one content directory."""

    name: str
    path_prefix: str
    title: str = ""
    order: Optional[float] = None
    children: Tuple["NavigationNode", ...] = field(default_factory=tuple)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": "category",
            "name": self.name,
            "path_prefix": self.path_prefix,
            "title": self.title,
            "order": self.order,
            "children": [child.to_dict() for child in self.children],
        }


NavigationNode = Union[Category, Leaf]


@dataclass(frozen=True, slots=True)
class PagerLinks:
    """Previous/next neighbours of a document in navigation order."""

    previous: Optional[Leaf] = None
    next: Optional[Leaf] = None

    def to_dict(self) -> Dict[str, Optional[Dict[str, str]]]:
        return {
            "previous": self.previous.to_link() if self.previous else None,
            "next": self.next.to_link() if self.next else None,
        }


class _NotFound:
    """Terminal outcome of a lookup that matched nothing."""

    _instance: Optional["_NotFound"] = None

    def __new__(cls) -> "_NotFound":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "NOT_FOUND"


NOT_FOUND = _NotFound()
