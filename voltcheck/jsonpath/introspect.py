"""
Format, minify, validate and describe raw JSON text.

Used for response previews and diagnostics. Every function degrades to a
documented fallback instead of raising on malformed input.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from .document import (
    InvalidJSONError,
    canonical_json,
    json_depth,
    parse_document,
    pretty_json,
    value_type,
)

logger = logging.getLogger(__name__)


@dataclass
class JSONInfo:
    """Shape summary of a JSON document."""
    valid: bool
    size: int
    type: str | None = None
    depth: int | None = None
    keys: int | None = None
    length: int | None = None

    def to_dict(self) -> dict[str, Any]:
        if not self.valid:
            return {"valid": False, "size": self.size}
        return {
            "valid": True,
            "size": self.size,
            "type": self.type,
            "depth": self.depth,
            "keys": self.keys,
            "length": self.length,
        }


def format_json(text: str) -> str:
    """Pretty-print JSON text, or return it unchanged if it does not parse."""
    try:
        return pretty_json(parse_document(text))
    except InvalidJSONError:
        return text


def minify_json(text: str) -> str:
    """Compact JSON text, or return it unchanged if it does not parse."""
    try:
        return canonical_json(parse_document(text))
    except InvalidJSONError:
        return text


def validate_json(text: str) -> bool:
    try:
        parse_document(text)
    except InvalidJSONError:
        return False
    return True


def json_info(text: str) -> JSONInfo:
    size = len(text.encode("utf-8"))
    try:
        value = parse_document(text)
    except InvalidJSONError as e:
        logger.debug(f"json_info: invalid document ({e})")
        return JSONInfo(valid=False, size=size)

    return JSONInfo(
        valid=True,
        size=size,
        type=value_type(value),
        depth=json_depth(value),
        keys=len(value) if isinstance(value, dict) else 0,
        length=len(value) if isinstance(value, list) else 0,
    )
