"""Text helpers for titles, ordering values, links and snippets."""

from __future__ import annotations

import math
import re
from typing import Any, Iterable, Optional

_LINK_PATTERN = re.compile(r"\[(.*?)\]\((.*?)\)")
_TAG_PATTERN = re.compile(r"<[\s\S]*?>")
_MARKER_PATTERN = re.compile(r"[#*`]")


def humanize_segment(segment: str) -> str:
    """Turn a slug segment such as ``quick_start`` into ``quick start``."""
    return re.sub(r"[_\-]+", " ", segment).strip() or segment


def parse_order(value: Any) -> Optional[float]:
    """Interpret a metadata ``order`` value.

    Returns None when it is not a finite number, so NaN and infinities never
    reach the sort.
    """
    if isinstance(value, bool) or value is None:
        return None
    if not isinstance(value, (int, float, str)):
        return None
    try:
        number = float(value.strip() if isinstance(value, str) else value)
    except (ValueError, OverflowError):
        return None
    return number if math.isfinite(number) else None


def rewrite_internal_links(body: str, *, prefix: str = "/docs") -> str:
    """Point relative markdown links at site routes.

    ``[Setup](../guide/setup.md)`` becomes ``[Setup](/docs/guide/setup)``.
    External, protocol-relative and anchor links are left alone.
    """
    prefix = "/" + prefix.strip("/") if prefix.strip("/") else ""

    def _replace(match: re.Match[str]) -> str:
        text, href = match.group(1), match.group(2)
        if href.startswith(("http", "//", "#")):
            return match.group(0)
        target = re.sub(r"\.mdx?$", "", href)
        target = re.sub(r"^(\.\.?/)+", "", target)
        target = target.lstrip("/")
        target = re.sub(r"^docs/", "", target)
        return f"[{text}]({prefix}/{target})"

    return _LINK_PATTERN.sub(_replace, body)


def clean_markdown(text: str) -> str:
    """Strip HTML tags and basic markdown markers for plain-text matching."""
    return _MARKER_PATTERN.sub("", _TAG_PATTERN.sub("", text))


def make_snippet(content: str, query: str, *, before: int = 60, after: int = 100) -> str:
    """Cut a snippet around the first case-insensitive match of ``query``.

    Falls back to the start of the content when the query does not occur.
    """
    position = content.lower().find(query.lower()) if query else -1
    if position == -1:
        return content[:140].strip() + "..."
    start = max(0, position - before)
    end = min(len(content), position + len(query) + after)
    return "..." + content[start:end].strip() + "..."


def normalize_whitespace(lines: Iterable[str]) -> str:
    """Collapse whitespace and join lines."""
    return "\n".join(line.strip() for line in lines if line.strip())
