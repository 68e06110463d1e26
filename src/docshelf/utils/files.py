"""Utility helpers for walking content directories and deriving slugs."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Iterator

LOGGER = logging.getLogger(__name__)


def _has_extension(path: Path, extensions: Iterable[str]) -> bool:
    suffix = path.suffix.lower()
    return any(suffix == ext.lower() for ext in extensions)


def iter_document_paths(root: Path, extensions: Iterable[str] = (".md",)) -> Iterator[Path]:
    """Yield document files under ``root`` in a reproducible order.

    Uses an explicit stack instead of recursion. Within a directory, files are
    yielded in name order before its subdirectories are visited, also in name
    order. Symlinked directories are not followed.
    """
    extensions = tuple(extensions)
    stack = [Path(root)]
    while stack:
        directory = stack.pop()
        try:
            entries = sorted(directory.iterdir(), key=lambda entry: entry.name)
        except OSError as exc:
            LOGGER.warning("Cannot list %s: %s", directory, exc)
            continue
        subdirs = []
        for entry in entries:
            if entry.is_dir():
                if not entry.is_symlink():
                    subdirs.append(entry)
            elif entry.is_file() and _has_extension(entry, extensions):
                yield entry
        stack.extend(reversed(subdirs))


def slug_for_path(
    path: Path,
    root: Path,
    *,
    root_index_name: str = "README",
    lowercase: bool = True,
) -> str:
    """Compute the slug of ``path`` relative to ``root``.

    ``guide/setup.md`` -> ``guide/setup``; ``guide/README.md`` -> ``guide``;
    the top-level ``README.md`` -> ``""``.
    """
    relative = Path(path).relative_to(root)
    parts = [*relative.parent.parts, relative.stem]
    if parts[-1].lower() == root_index_name.lower():
        parts = parts[:-1]
    slug = "/".join(part.replace("\\", "/") for part in parts if part not in ("", "."))
    return slug.lower() if lowercase else slug
