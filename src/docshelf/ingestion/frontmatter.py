"""Front matter parsing.

Documents may open with a YAML block fenced by ``---`` lines::

    ---
    title: Quick Start
    order: 2
    ---
    # Body starts here

Parsing is best-effort: anything that does not look like a well-formed block
is returned untouched as body with empty metadata.
"""

from __future__ import annotations

import datetime as dt
import logging
import re
from dataclasses import dataclass, field
from typing import Any, Dict

import yaml

LOGGER = logging.getLogger(__name__)

DELIMITER = "---"
_DELIMITER_LINE = re.compile(r"^---[ \t]*\r?$")


@dataclass(slots=True)
class ParsedDocument:
    metadata: Dict[str, Any] = field(default_factory=dict)
    body: str = ""


def _flatten(data: Dict[Any, Any]) -> Dict[str, Any]:
    flat: Dict[str, Any] = {}
    for key, value in data.items():
        if isinstance(value, (dt.date, dt.datetime)):
            value = value.isoformat()
        if value is None or isinstance(value, (str, int, float, bool)):
            flat[str(key)] = value
        else:
            LOGGER.debug("Dropping non-scalar metadata field %r", key)
    return flat


def parse(raw: str) -> ParsedDocument:
    """Split ``raw`` into metadata and body. Never raises."""
    text = raw[1:] if raw.startswith("\ufeff") else raw
    lines = text.splitlines(keepends=True)
    if not lines or not _DELIMITER_LINE.match(lines[0].rstrip("\n")):
        return ParsedDocument(metadata={}, body=raw)

    for index, line in enumerate(lines[1:], start=1):
        if _DELIMITER_LINE.match(line.rstrip("\n")):
            block = "".join(lines[1:index])
            body = "".join(lines[index + 1 :])
            break
    else:
        LOGGER.debug("Unterminated front matter block")
        return ParsedDocument(metadata={}, body=raw)

    try:
        data = yaml.safe_load(block)
    except Exception as exc:
        LOGGER.debug("Malformed front matter: %s", exc)
        return ParsedDocument(metadata={}, body=raw)

    if data is None:
        data = {}
    if not isinstance(data, dict):
        LOGGER.debug("Front matter is not a mapping: %r", type(data).__name__)
        return ParsedDocument(metadata={}, body=raw)

    return ParsedDocument(metadata=_flatten(data), body=body)
