"""
Dotted path resolution over parsed JSON documents.

Paths look like ``data.users[0].name``: segments split on ``.``, and a
segment may carry a single array index after its key.
"""

from __future__ import annotations

import logging
import re
from typing import Any, Iterable

from .document import MISSING, InvalidJSONError, UNDEFINED_TEXT, parse_document, render

logger = logging.getLogger(__name__)

# key[index] - the key is everything before the last bracket pair
INDEXED_SEGMENT = re.compile(r"(.+)\[([0-9]+)\]")


def _field(node: Any, key: str) -> Any:
    if isinstance(node, dict) and key in node:
        return node[key]
    return MISSING


def _index(node: Any, index: int) -> Any:
    if isinstance(node, list) and index < len(node):
        return node[index]
    return MISSING


def resolve(document: Any, path: str) -> Any:
    """
    Resolve a dotted path against a parsed document.

    Args:
        document: Parsed JSON value (the root)
        path: Dotted path, empty for the root itself

    Returns:
        The node at the path, or MISSING if any segment fails.
    """
    if not path:
        return document

    current = document
    for segment in path.split("."):
        match = INDEXED_SEGMENT.fullmatch(segment)
        if match:
            current = _field(current, match.group(1))
            if current is MISSING:
                return MISSING
            current = _index(current, int(match.group(2)))
        else:
            current = _field(current, segment)
        if current is MISSING:
            return MISSING
    return current


def extract(text: str, path: str) -> str:
    """Resolve a path in JSON text; canonical JSON of the value or ``undefined``."""
    try:
        document = parse_document(text)
    except InvalidJSONError as e:
        logger.debug(f"extract: document is not valid JSON ({e})")
        return UNDEFINED_TEXT
    return render(resolve(document, path))


def extract_batch(document: Any, paths: Iterable[str]) -> dict[str, Any]:
    """
    Resolve several paths against one parsed document.

    Paths that do not resolve are left out of the mapping.
    """
    found: dict[str, Any] = {}
    for path in paths:
        value = resolve(document, path)
        if value is not MISSING:
            found[path] = value
    return found
