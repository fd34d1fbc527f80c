"""
JSON document helpers shared by the resolver, introspector and evaluator.

This module owns the one strict parser, the canonical text rendering and
the structural equality used everywhere a JSON value is compared.
"""

from __future__ import annotations

import json
import math
from typing import Any


UNDEFINED_TEXT = "undefined"

# Same recursion limit as serde_json
MAX_NESTING_DEPTH = 128


class InvalidJSONError(ValueError):
    """Raised when text is not a valid JSON document."""


class _Missing:
    """Marker for a path that did not resolve (distinct from JSON null)."""

    _instance: _Missing | None = None

    def __new__(cls) -> _Missing:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING = _Missing()


def _reject_constant(name: str) -> Any:
    raise InvalidJSONError(f"Non-standard JSON constant: {name}")


def _parse_float(text: str) -> float:
    value = float(text)
    if math.isinf(value):
        raise InvalidJSONError(f"Number out of range: {text}")
    return value


def json_depth(value: Any) -> int:
    """Scalars are 0 deep; a container is one deeper than its deepest child."""
    deepest = 0
    stack = [(value, 0)]
    while stack:
        node, level = stack.pop()
        if isinstance(node, dict):
            children = node.values()
        elif isinstance(node, list):
            children = node
        else:
            continue
        deepest = max(deepest, level + 1)
        stack.extend((child, level + 1) for child in children)
    return deepest


def parse_document(text: str) -> Any:
    """
    Strictly parse JSON text.

    NaN/Infinity literals and out-of-range numbers are rejected, and so is
    a document with MAX_NESTING_DEPTH or more levels of arrays/objects.

    Raises:
        InvalidJSONError: if the text is not a valid JSON document
    """
    if not isinstance(text, str):
        raise InvalidJSONError(f"Expected JSON text, got {type(text).__name__}")
    try:
        value = json.loads(text, parse_constant=_reject_constant, parse_float=_parse_float)
    except InvalidJSONError:
        raise
    except ValueError as e:
        raise InvalidJSONError(str(e)) from e
    except RecursionError as e:
        raise InvalidJSONError("Document is nested too deeply") from e

    if json_depth(value) >= MAX_NESTING_DEPTH:
        raise InvalidJSONError(f"Document is nested {MAX_NESTING_DEPTH} or more levels deep")
    return value


def canonical_json(value: Any) -> str:
    """Render a JSON value as compact text, keeping parsed key order."""
    return json.dumps(value, ensure_ascii=False, separators=(",", ":"))


def pretty_json(value: Any) -> str:
    return json.dumps(value, ensure_ascii=False, indent=2)


def render(value: Any) -> str:
    """Canonical text of a resolved value, or ``undefined`` for MISSING."""
    if value is MISSING:
        return UNDEFINED_TEXT
    return canonical_json(value)


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def json_equal(left: Any, right: Any) -> bool:
    """
    Structural equality between two JSON values.

    Numbers compare by value, so ``30`` equals ``30.0``. Booleans only ever
    equal booleans, even though Python treats ``True == 1``.
    """
    if isinstance(left, bool) or isinstance(right, bool):
        return isinstance(left, bool) and isinstance(right, bool) and left == right
    if _is_number(left) or _is_number(right):
        return _is_number(left) and _is_number(right) and left == right
    if isinstance(left, list):
        return (
            isinstance(right, list)
            and len(left) == len(right)
            and all(json_equal(a, b) for a, b in zip(left, right))
        )
    if isinstance(left, dict):
        if not isinstance(right, dict) or left.keys() != right.keys():
            return False
        return all(json_equal(left[key], right[key]) for key in left)
    return left == right


def value_type(value: Any) -> str:
    """Name of the JSON type of a parsed value."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if _is_number(value):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "array"
    return "object"
