"""Application configuration defaults."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Tuple

from docshelf.models import ROOT_INDEX_NAME

ENV_CONTENT_ROOT = "DOCSHELF_CONTENT_ROOT"


def _get_default_content_root() -> Path:
    """Get the default content root from the environment or the working directory."""
    env_root = os.environ.get(ENV_CONTENT_ROOT)
    if env_root:
        return Path(env_root).expanduser()
    return Path("docs")


@dataclass(slots=True)
class AppConfig:
    content_root: Path | None = None
    extensions: Tuple[str, ...] = (".md", ".mdx")
    root_index_name: str = ROOT_INDEX_NAME
    lowercase_slugs: bool = True
    base_url: str = "http://localhost:8000"
    docs_prefix: str = "/docs"

    def __post_init__(self) -> None:
        if self.content_root is None:
            self.content_root = _get_default_content_root()
        self.extensions = tuple(self.extensions)
        if not self.extensions:
            raise ValueError("At least one document extension is required")
        for ext in self.extensions:
            if not ext.startswith(".") or len(ext) < 2:
                raise ValueError(f"Invalid extension {ext!r}: expected something like '.md'")

    @property
    def root_index_slug(self) -> str:
        """Literal slug of the root index document, used as a lookup fallback."""
        return self.root_index_name.lower() if self.lowercase_slugs else self.root_index_name

    def resolve_content_root(self, base_dir: Path | None = None) -> Path:
        if self.content_root is None:
            self.content_root = _get_default_content_root()
        if Path(self.content_root).is_absolute() or base_dir is None:
            return Path(self.content_root)
        return base_dir / self.content_root
