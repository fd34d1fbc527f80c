"""
JSON path resolution and introspection

This package parses JSON documents, resolves dotted paths with optional
array indices inside them, and describes raw JSON text.

Usage:
    from voltcheck.jsonpath import parse_document, resolve, extract

    document = parse_document('{"data": {"users": [{"name": "John"}]}}')
    resolve(document, "data.users[0].name")        # 'John'
    extract('{"a": null}', "a")                     # 'null'
    extract('{"a": null}', "b")                     # 'undefined'
"""

# Document primitives
from .document import (
    MISSING,
    UNDEFINED_TEXT,
    MAX_NESTING_DEPTH,
    InvalidJSONError,
    canonical_json,
    json_depth,
    json_equal,
    parse_document,
    render,
    value_type,
)

# Resolver
from .resolver import extract, extract_batch, resolve

# Introspection
from .introspect import JSONInfo, format_json, json_info, minify_json, validate_json

__all__ = [
    # Document primitives
    "MISSING",
    "UNDEFINED_TEXT",
    "MAX_NESTING_DEPTH",
    "InvalidJSONError",
    "canonical_json",
    "json_depth",
    "json_equal",
    "parse_document",
    "render",
    "value_type",
    # Resolver
    "resolve",
    "extract",
    "extract_batch",
    # Introspection
    "JSONInfo",
    "format_json",
    "minify_json",
    "validate_json",
    "json_info",
]
